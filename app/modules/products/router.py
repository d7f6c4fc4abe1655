# app/modules/products/router.py
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import get_db
from .service import ProductsService, DemandUpdateService
from .schemas import ProductResponse, ProductSearchParams, DemandUpdate

router = APIRouter()

@router.get("", response_model=List[ProductResponse])
def search_products(
    search: Optional[str] = None,
    warehouse: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Buscar productos con filtros

    - **search**: coincidencia parcial (sin distinguir mayúsculas) en nombre o SKU
    - **warehouse**: código de bodega
    - **status**: Healthy | Low | Critical
    """
    service = ProductsService(db)
    search_params = ProductSearchParams(
        search=search,
        warehouse=warehouse,
        status=status
    )
    return service.search_products(search_params)

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str = Path(..., description="ID del producto"),
    db: Session = Depends(get_db)
):
    service = ProductsService(db)
    return service.get_product(product_id)

@router.patch("/{product_id}/demand", response_model=ProductResponse)
def update_demand(
    demand_data: DemandUpdate,
    product_id: str = Path(..., description="ID del producto"),
    db: Session = Depends(get_db)
):
    """Actualizar la demanda de un producto (0 - 999,999)"""
    service = DemandUpdateService(db)
    return service.update_demand(product_id, demand_data.demand)
