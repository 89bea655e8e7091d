# backend/routes/stock.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from database import get_db
from services import inventory
from utils.audit import AuditSink, get_audit_sink
from utils.errors import ValidationError
from utils.events import EventPublisher, get_event_publisher
import schemas.stock as stock_schemas
from schemas.inventory import StoreInventory

router = APIRouter(tags=["Stock"])


@router.post(
    "/stores/{store_id}/stock-movements",
    response_model=stock_schemas.StockMovementCreated,
    status_code=status.HTTP_201_CREATED,
)
def record_stock_movement(
    store_id: int,
    payload: stock_schemas.StockMovementCreate,
    db: Session = Depends(get_db),
    audit: AuditSink = Depends(get_audit_sink),
    events: EventPublisher = Depends(get_event_publisher),
):
    movement = inventory.record_movement(
        db,
        store_id=store_id,
        product_id=payload.product_id,
        type=payload.type,
        quantity=payload.quantity,
        audit=audit,
        events=events,
    )
    return {"message": "Stock movement recorded successfully", "movement": movement}


@router.get("/stores/{store_id}/inventory", response_model=StoreInventory)
def get_store_inventory(store_id: int, db: Session = Depends(get_db)):
    return {"store_id": store_id, "inventory": inventory.get_inventory(db, store_id)}


# Query values arrive as raw strings and are validated together so every
# bad field is reported in one response
@router.get("/stock-movements", response_model=stock_schemas.StockMovementPage)
def list_stock_movements(
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    store_id: Optional[str] = Query(None, alias="storeId"),
    product_id: Optional[str] = Query(None, alias="productId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    raw = {
        "limit": limit,
        "offset": offset,
        "storeId": store_id,
        "productId": product_id,
        "startDate": start_date,
        "endDate": end_date,
    }
    try:
        filters = stock_schemas.MovementFilter.model_validate(
            {k: v for k, v in raw.items() if v is not None}
        )
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc)

    return inventory.list_movements(db, filters)
