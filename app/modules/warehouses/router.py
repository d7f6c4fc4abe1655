# app/modules/warehouses/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from .service import WarehousesService
from .schemas import WarehouseResponse

router = APIRouter()

@router.get("", response_model=List[WarehouseResponse])
def list_warehouses(db: Session = Depends(get_db)):
    """Listado de bodegas ordenado por nombre"""
    service = WarehousesService(db)
    return service.list_warehouses()

@router.get("/{code}", response_model=WarehouseResponse)
def get_warehouse(code: str, db: Session = Depends(get_db)):
    service = WarehousesService(db)
    return service.get_warehouse(code)
