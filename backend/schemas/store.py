from datetime import datetime
from typing import Optional

from schemas.product import ORMBase


# Schema for creating a store
class StoreCreate(ORMBase):
    name: Optional[str] = None
    location: Optional[str] = None


# Schema for displaying store details
class StoreOut(ORMBase):
    id: int
    name: str
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StoreCreated(ORMBase):
    message: str
    store: StoreOut
