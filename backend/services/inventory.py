"""Stock ledger: recording movements and deriving inventory from them.

Quantities on hand are never stored. Every read sums the append-only
``stock_movements`` table for the requested store.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from sqlalchemy import case, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from models.product import Product
from models.stock import MovementType, OUTBOUND_TYPES, StockMovement
from schemas.stock import MovementFilter
from services.catalog import get_product, get_store
from utils.audit import AuditSink, default_audit_sink
from utils.errors import InternalError, ValidationError
from utils.events import EventPublisher, default_event_publisher

logger = logging.getLogger(__name__)

VALID_TYPES = [t.value for t in MovementType]


def _parse_type(value) -> MovementType:
    try:
        return MovementType(value)
    except ValueError:
        raise ValidationError(f"Invalid type. Must be one of: {', '.join(VALID_TYPES)}")


def _check_quantity(value) -> int:
    # bool is an int subclass; True must not count as a quantity of 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError("Quantity must be a positive integer.")
    return value


def record_movement(
    db: Session,
    store_id: int,
    product_id,
    type,
    quantity,
    *,
    audit: Optional[AuditSink] = None,
    events: Optional[EventPublisher] = None,
    user_id: Optional[str] = "system",
) -> StockMovement:
    """Append one movement to the ledger.

    The movement and its audit entry are committed together; if either
    write fails nothing is persisted. The stock update event is published
    only after the commit and a publishing failure is logged, not raised.
    """
    audit = audit or default_audit_sink
    events = events or default_event_publisher

    movement_type = _parse_type(type)
    quantity = _check_quantity(quantity)
    store = get_store(db, store_id)
    # A missing or malformed product id is reported as an unknown product
    product = get_product(db, product_id)

    movement = StockMovement(
        store_id=store.id,
        product_id=product.id,
        type=movement_type,
        quantity=quantity,
    )
    try:
        db.add(movement)
        db.flush()
        audit.record(
            db,
            user_id=user_id,
            action_type=f"STOCK_{movement_type.value.upper()}",
            entity_type="StockMovement",
            entity_id=movement.id,
            details={
                "storeId": movement.store_id,
                "productId": movement.product_id,
                "quantity": movement.quantity,
            },
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ValidationError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise InternalError(str(exc)) from exc
    except Exception:
        db.rollback()
        raise
    db.refresh(movement)

    event = {
        "movementId": movement.id,
        "storeId": movement.store_id,
        "productId": movement.product_id,
        "type": movement.type.value,
    }
    try:
        events.publish(event)
    except Exception:
        logger.exception("[QUEUE] Failed to queue event %s", event)

    return movement


def get_inventory(db: Session, store_id: int) -> List[Dict[str, Any]]:
    """Current quantity per product in a store; products netting to zero are left out."""
    get_store(db, store_id)

    total_in = func.sum(
        case((StockMovement.type == MovementType.IN, StockMovement.quantity), else_=0)
    ).label("total_in")
    total_out = func.sum(
        case((StockMovement.type.in_(OUTBOUND_TYPES), StockMovement.quantity), else_=0)
    ).label("total_out")

    rows = (
        db.query(StockMovement.product_id, Product.name, total_in, total_out)
        .outerjoin(Product, Product.id == StockMovement.product_id)
        .filter(StockMovement.store_id == store_id)
        .group_by(StockMovement.product_id, Product.name)
        .order_by(StockMovement.product_id.asc())
        .all()
    )

    inventory = []
    for product_id, product_name, t_in, t_out in rows:
        current = int(t_in or 0) - int(t_out or 0)
        if current == 0:
            continue
        inventory.append({
            "product_id": product_id,
            "product_name": product_name if product_name is not None else "N/A",
            "current_quantity": current,
        })
    return inventory


def list_movements(db: Session, filters: MovementFilter) -> Dict[str, Any]:
    query = db.query(StockMovement)

    if filters.store_id is not None:
        query = query.filter(StockMovement.store_id == filters.store_id)
    if filters.product_id is not None:
        query = query.filter(StockMovement.product_id == filters.product_id)
    if filters.start_date is not None:
        query = query.filter(StockMovement.created_at >= filters.start_date)
    if filters.end_date is not None:
        query = query.filter(StockMovement.created_at <= filters.end_date)

    # Counted before the display joins so each movement counts once
    total = query.count()

    movements = (
        query.options(joinedload(StockMovement.product), joinedload(StockMovement.store))
        .order_by(StockMovement.created_at.desc(), StockMovement.id.desc())
        .offset(filters.offset)
        .limit(filters.limit)
        .all()
    )

    return {
        "total_items": total,
        "total_pages": math.ceil(total / filters.limit),
        "current_page": filters.offset // filters.limit + 1,
        "movements": movements,
    }
