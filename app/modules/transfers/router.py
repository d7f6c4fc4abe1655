# app/modules/transfers/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from app.config.database import get_db
from app.modules.products.schemas import ProductResponse
from .service import StockTransferService
from .schemas import TransferRequestCreate, TransferHistoryResponse

router = APIRouter()

@router.post("", response_model=ProductResponse)
def transfer_stock(
    transfer_data: TransferRequestCreate,
    db: Session = Depends(get_db)
):
    """
    Transferir stock de un producto entre bodegas

    **Validaciones (en orden):**
    - El producto existe y está en la bodega origen (409 `not_in_source_warehouse`)
    - Stock suficiente (409 `insufficient_stock`, con disponible vs solicitado)
    - La bodega destino existe (404 `not_found`)

    Devuelve el producto actualizado. Ante cualquier fallo no hay cambios.
    """
    service = StockTransferService(db)
    return service.transfer(
        transfer_data.product_id,
        transfer_data.from_warehouse,
        transfer_data.to_warehouse,
        transfer_data.quantity
    )

@router.get("", response_model=TransferHistoryResponse)
def get_transfer_history(
    product_id: Optional[str] = None,
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db)
):
    """Historial de transferencias, más recientes primero"""
    service = StockTransferService(db)
    return service.get_transfer_history(product_id, limit)
