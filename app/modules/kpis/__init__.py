# app/modules/kpis/__init__.py
"""
Módulo de KPIs - tendencia diaria de stock vs demanda

- router.py: Endpoints de KPIs y resumen
- service.py: Ventanas de 7/14/30 días
- metrics.py: Totales, fill rate, promedios
"""

from .router import router
from .service import KpisService
from .repository import KpisRepository

__all__ = [
    "router",
    "KpisService",
    "KpisRepository"
]
