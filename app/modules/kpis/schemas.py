# app/modules/kpis/schemas.py
from pydantic import BaseModel
from datetime import date
from enum import Enum

from app.shared.schemas.common import BaseResponse


class KpiRange(str, Enum):
    """Ventana de días del dashboard"""
    LAST_7_DAYS = "7d"
    LAST_14_DAYS = "14d"
    LAST_30_DAYS = "30d"

    @property
    def days(self) -> int:
        return int(self.value[:-1])


class KpiResponse(BaseModel):
    date: date
    stock: int
    demand: int

    class Config:
        from_attributes = True


class KpiSummaryResponse(BaseResponse):
    range: KpiRange
    days: int
    total_stock: int
    total_demand: int
    fill_rate: float
    fill_rate_rating: str
    average_stock: int
    average_demand: int
    stock_demand_ratio: int
