# backend/routes/products.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from services import catalog
import schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=product_schemas.ProductCreated, status_code=status.HTTP_201_CREATED)
def create_product(payload: product_schemas.ProductCreate, db: Session = Depends(get_db)):
    product = catalog.create_product(db, payload.name)
    return {"message": "Product added successfully", "product": product}


# Products sorted by name
@router.get("", response_model=List[product_schemas.ProductOut])
def list_products(db: Session = Depends(get_db)):
    return catalog.list_products(db)


@router.get("/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return catalog.get_product(db, product_id)
