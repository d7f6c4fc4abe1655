# app/modules/kpis/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from .service import KpisService
from .schemas import KpiRange, KpiResponse, KpiSummaryResponse

router = APIRouter()

@router.get("", response_model=List[KpiResponse])
def list_kpis(
    kpi_range: KpiRange = Query(KpiRange.LAST_30_DAYS, alias="range", description="7d | 14d | 30d"),
    db: Session = Depends(get_db)
):
    """KPIs diarios de stock y demanda en orden cronológico"""
    service = KpisService(db)
    return service.list_kpis(kpi_range)

@router.get("/summary", response_model=KpiSummaryResponse)
def get_kpi_summary(
    kpi_range: KpiRange = Query(KpiRange.LAST_30_DAYS, alias="range", description="7d | 14d | 30d"),
    db: Session = Depends(get_db)
):
    """
    Tarjetas del dashboard

    - Stock y demanda totales
    - Fill rate y su calificación
    - Promedios diarios y ratio stock/demanda
    """
    service = KpisService(db)
    return service.get_summary(kpi_range)
