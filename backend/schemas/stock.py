# backend/schemas/stock.py
from datetime import datetime, time, timezone
from typing import Any, List, Optional

from pydantic import Field, field_validator

from models.stock import MovementType
from database import MAX_DB_ID
from schemas.product import ORMBase


# Schema for recording a stock movement. Every field is validated by the
# ledger so that its error ordering applies to API calls too.
class StockMovementCreate(ORMBase):
    product_id: Any = None
    type: Any = None
    quantity: Any = None


# Schema for returning a recorded movement
class StockMovementOut(ORMBase):
    id: int
    store_id: int
    product_id: int
    type: MovementType
    quantity: int
    created_at: datetime


class StockMovementCreated(ORMBase):
    message: str
    movement: StockMovementOut


# Minimal {id, name} view of a related product or store
class RefOut(ORMBase):
    id: int
    name: str


class StockMovementDetail(StockMovementOut):
    product: Optional[RefOut] = None
    store: Optional[RefOut] = None


# Paginated response for the movement ledger
class StockMovementPage(ORMBase):
    total_items: int
    total_pages: int
    current_page: int
    movements: List[StockMovementDetail]


class MovementFilter(ORMBase):
    """Filters for listing the movement ledger.

    Dates accept ISO-8601 date or date-time strings. A date-only ``endDate``
    covers the whole day. Naive values are taken as UTC.
    """

    limit: int = Field(20, ge=1, le=100)
    offset: int = Field(0, ge=0)
    store_id: Optional[int] = Field(None, ge=-MAX_DB_ID - 1, le=MAX_DB_ID)
    product_id: Optional[int] = Field(None, ge=-MAX_DB_ID - 1, le=MAX_DB_ID)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _parse_iso(cls, value, info):
        if value is None or isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("must be a valid ISO8601 date")
        raw = value.strip()
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            raise ValueError("must be a valid ISO8601 date")
        # Date only (YYYY-MM-DD): the upper bound includes the whole day
        if len(raw) == 10 and info.field_name == "end_date":
            parsed = datetime.combine(parsed.date(), time.max)
        return parsed

    @field_validator("start_date", "end_date")
    @classmethod
    def _to_utc(cls, value):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
