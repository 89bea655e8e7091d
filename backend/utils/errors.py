from typing import Any, Dict, List, Optional

# Shown to clients instead of the real cause of a 500
INTERNAL_ERROR_MESSAGE = "An unexpected internal server error occurred."


class InventoryError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(InventoryError):
    """Malformed, missing or out-of-range input (400).

    ``errors`` holds field-level entries ``{field, message, value}`` when the
    failure concerns specific request fields.
    """

    status_code = 400

    def __init__(self, message: str = "Validation failed", errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> Dict[str, Any]:
        if self.errors:
            return {"errors": self.errors}
        return {"error": self.message}

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        return cls("Validation failed", errors=field_errors(exc.errors()))


class NotFoundError(InventoryError):
    status_code = 404


class ConflictError(InventoryError):
    status_code = 409


class InternalError(InventoryError):
    status_code = 500

    def to_body(self) -> Dict[str, Any]:
        return {"error": INTERNAL_ERROR_MESSAGE}


def field_errors(raw_errors) -> List[Dict[str, Any]]:
    """Flatten pydantic error dicts into ``{field, message, value}`` entries."""
    result = []
    for err in raw_errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        entry = {
            "field": loc[-1] if loc else None,
            "message": err.get("msg", "Invalid value"),
        }
        if "input" in err and _is_plain(err["input"]):
            entry["value"] = err["input"]
        result.append(entry)
    return result


def _is_plain(value) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def is_unique_violation(exc) -> bool:
    """True when a DB IntegrityError was raised by a unique constraint."""
    text = str(getattr(exc, "orig", exc)).lower()
    return "unique" in text or "duplicate key" in text
