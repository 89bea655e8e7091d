# backend/schemas/product.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Base configuration: ORM compatibility and camelCase field names on the wire
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)


# Schema for creating a new product; presence of the name is checked by the service
class ProductCreate(ORMBase):
    name: Optional[str] = None


class ProductOut(ORMBase):
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductCreated(ORMBase):
    message: str
    product: ProductOut
