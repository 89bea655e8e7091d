import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum, CheckConstraint
from sqlalchemy.orm import relationship
from database import Base


# Direction of a ledger entry. "manual" corrections reduce stock like "out".
class MovementType(str, enum.Enum):
    IN = "in"
    OUT = "out"
    MANUAL = "manual"


OUTBOUND_TYPES = (MovementType.OUT, MovementType.MANUAL)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# Append-only ledger entry; rows are never updated or deleted
class StockMovement(Base):
    __tablename__ = "stock_movements"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_stock_movements_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    store_id = Column(Integer, ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True)

    # Stored by value ("in", "out", "manual"), not by member name
    type = Column(
        Enum(MovementType, name="movement_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    quantity = Column(Integer, nullable=False)

    # Set in Python so entries created within the same second still sort correctly
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    product = relationship("Product", back_populates="movements")
    store = relationship("Store", back_populates="movements")
