# app/modules/products/__init__.py
"""
Módulo de Productos

- Búsqueda con filtros (texto, bodega, estado)
- Estado derivado: Healthy / Low / Critical
- Actualización de demanda
"""

from .router import router
from .service import ProductsService, DemandUpdateService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "DemandUpdateService",
    "ProductsRepository"
]
