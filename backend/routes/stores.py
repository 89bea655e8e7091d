# backend/routes/stores.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from services import catalog
from schemas.store import StoreCreate, StoreCreated, StoreOut

router = APIRouter(prefix="/stores", tags=["Stores"])


@router.post("", response_model=StoreCreated, status_code=status.HTTP_201_CREATED)
def create_store(payload: StoreCreate, db: Session = Depends(get_db)):
    store = catalog.create_store(db, payload.name, payload.location)
    return {"message": "Store added successfully", "store": store}


@router.get("", response_model=List[StoreOut])
def list_stores(db: Session = Depends(get_db)):
    return catalog.list_stores(db)


@router.get("/{store_id}", response_model=StoreOut)
def get_store(store_id: int, db: Session = Depends(get_db)):
    return catalog.get_store(db, store_id)
