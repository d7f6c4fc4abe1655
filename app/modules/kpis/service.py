# app/modules/kpis/service.py
from typing import List
from sqlalchemy.orm import Session
import logging

from . import metrics
from .repository import KpisRepository
from .schemas import KpiRange, KpiSummaryResponse
from app.shared.database.models import Kpi

logger = logging.getLogger(__name__)


class KpisService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = KpisRepository(db)

    def list_kpis(self, kpi_range: KpiRange = KpiRange.LAST_30_DAYS) -> List[Kpi]:
        return self.repository.get_latest(kpi_range.days)

    def get_summary(self, kpi_range: KpiRange = KpiRange.LAST_30_DAYS) -> KpiSummaryResponse:
        samples = self.list_kpis(kpi_range)
        summary = metrics.summarize(samples)
        logger.debug(f"Resumen KPIs {kpi_range.value}: {summary}")
        return KpiSummaryResponse(
            success=True,
            message=f"KPIs de los últimos {kpi_range.days} días",
            range=kpi_range,
            **summary
        )
