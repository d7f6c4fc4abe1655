# app/modules/transfers/__init__.py
"""
Módulo de Transferencias - Movimiento de stock entre bodegas

- Validación de bodega origen y stock disponible
- Actualización atómica del producto (bodega + stock)
- Historial append-only en inventory_changes

Arquitectura:
- router.py: Endpoints de transferencias
- service.py: Lógica transaccional de la transferencia
- repository.py: Acceso a datos (lock de fila, historial)
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import StockTransferService
from .repository import TransfersRepository

__all__ = [
    "router",
    "StockTransferService",
    "TransfersRepository"
]
