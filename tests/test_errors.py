from sqlalchemy.exc import IntegrityError

from utils.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
    field_errors,
    is_unique_violation,
)


def test_status_codes():
    assert ValidationError("x").status_code == 400
    assert NotFoundError("x").status_code == 404
    assert ConflictError("x").status_code == 409
    assert InternalError("x").status_code == 500


def test_internal_error_hides_detail():
    body = InternalError("connection refused at 10.0.0.3").to_body()
    assert body == {"error": "An unexpected internal server error occurred."}


def test_validation_error_body():
    assert ValidationError("Bad").to_body() == {"error": "Bad"}
    errors = [{"field": "limit", "message": "too big"}]
    assert ValidationError(errors=errors).to_body() == {"errors": errors}


def test_field_errors_strip_location_prefix():
    raw = [
        {"loc": ("body", "productId"), "msg": "Field required", "input": {}},
        {"loc": ("query", "limit"), "msg": "Input should be less than or equal to 100", "input": "500"},
    ]
    assert field_errors(raw) == [
        {"field": "productId", "message": "Field required"},
        {"field": "limit", "message": "Input should be less than or equal to 100", "value": "500"},
    ]


def test_unique_violation_detection():
    sqlite_err = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: products.name"))
    pg_err = IntegrityError("INSERT", {}, Exception('duplicate key value violates unique constraint "ix_stores_name"'))
    fk_err = IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))
    assert is_unique_violation(sqlite_err)
    assert is_unique_violation(pg_err)
    assert not is_unique_violation(fk_err)
