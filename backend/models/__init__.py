from models.product import Product
from models.store import Store
from models.stock import StockMovement, MovementType
from models.log import AuditLog

__all__ = ["Product", "Store", "StockMovement", "MovementType", "AuditLog"]
