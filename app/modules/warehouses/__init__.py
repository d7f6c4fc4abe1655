# app/modules/warehouses/__init__.py
"""
Módulo de Bodegas - consulta de ubicaciones
"""

from .router import router
from .service import WarehousesService
from .repository import WarehousesRepository

__all__ = [
    "router",
    "WarehousesService",
    "WarehousesRepository"
]
