import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.product import Product
from models.store import Store
from database import MAX_DB_ID
from utils.errors import ConflictError, InternalError, NotFoundError, ValidationError, is_unique_violation

logger = logging.getLogger(__name__)


def _clean_name(name) -> Optional[str]:
    if not isinstance(name, str):
        return None
    name = name.strip()
    return name or None


def _as_db_id(value) -> Optional[int]:
    """Integer id usable in a lookup, or None when no row could have it."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if not isinstance(value, int) or not -MAX_DB_ID - 1 <= value <= MAX_DB_ID:
        return None
    return value


def _insert(db: Session, obj, duplicate_message: str):
    """Commit a new named row, mapping unique-name violations to a conflict."""
    db.add(obj)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            raise ConflictError(duplicate_message) from exc
        raise ValidationError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise InternalError(str(exc)) from exc
    db.refresh(obj)
    return obj


# ---- PRODUCTS ----

def create_product(db: Session, name) -> Product:
    clean = _clean_name(name)
    if clean is None:
        raise ValidationError("Product name is required.")
    product = _insert(db, Product(name=clean), "Product name already exists.")
    logger.info("Created product %s (%s)", product.id, product.name)
    return product


def list_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.name.asc()).all()


def get_product(db: Session, product_id) -> Product:
    key = _as_db_id(product_id)
    product = db.get(Product, key) if key is not None else None
    if product is None:
        raise NotFoundError(f"Product with ID {product_id} not found.")
    return product


# ---- STORES ----

def create_store(db: Session, name, location: Optional[str] = None) -> Store:
    clean = _clean_name(name)
    if clean is None:
        raise ValidationError("Store name is required.")
    store = _insert(db, Store(name=clean, location=location), "Store name already exists.")
    logger.info("Created store %s (%s)", store.id, store.name)
    return store


def list_stores(db: Session) -> List[Store]:
    return db.query(Store).order_by(Store.name.asc()).all()


def get_store(db: Session, store_id) -> Store:
    key = _as_db_id(store_id)
    store = db.get(Store, key) if key is not None else None
    if store is None:
        raise NotFoundError(f"Store with ID {store_id} not found.")
    return store
