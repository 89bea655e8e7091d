import pytest

from models.product import Product
from services import catalog
from utils.errors import ConflictError, NotFoundError, ValidationError


def test_create_product_strips_name(db):
    product = catalog.create_product(db, "  Widget ")
    assert product.name == "Widget"


@pytest.mark.parametrize("name", [None, "", "  ", 42])
def test_create_product_requires_name(db, name):
    with pytest.raises(ValidationError, match="Product name is required"):
        catalog.create_product(db, name)


def test_duplicate_product_leaves_original(db):
    original = catalog.create_product(db, "Widget")
    with pytest.raises(ConflictError):
        catalog.create_product(db, "Widget")
    rows = db.query(Product).all()
    assert [(p.id, p.name) for p in rows] == [(original.id, "Widget")]


def test_session_usable_after_conflict(db):
    catalog.create_store(db, "A")
    with pytest.raises(ConflictError):
        catalog.create_store(db, "A", "Elsewhere")
    assert catalog.create_store(db, "B").id is not None
    assert [s.name for s in catalog.list_stores(db)] == ["A", "B"]


def test_get_store_not_found(db):
    with pytest.raises(NotFoundError, match="Store with ID 5 not found"):
        catalog.get_store(db, 5)
