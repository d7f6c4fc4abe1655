# app/modules/products/schemas.py
from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime

from app.shared.services.stock_status import StockStatus

MAX_DEMAND = 999_999


class ProductResponse(BaseModel):
    id: str
    name: str
    sku: str
    warehouse: str
    stock: int
    demand: int
    status: StockStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProductSearchParams(BaseModel):
    search: Optional[str] = None
    warehouse: Optional[str] = None
    status: Optional[StockStatus] = None

    @validator('search', 'warehouse', pre=True)
    def blank_to_none(cls, v):
        """Filtros vacíos no se aplican"""
        if v is None or not str(v).strip():
            return None
        return str(v).strip()

    @validator('status', pre=True)
    def unknown_status_to_none(cls, v):
        """Estados vacíos o desconocidos no filtran"""
        if v is None or v not in [s.value for s in StockStatus]:
            return None
        return v


class DemandUpdate(BaseModel):
    demand: int = Field(..., ge=0, le=MAX_DEMAND, description="Nueva demanda (0 - 999,999)")

    class Config:
        json_schema_extra = {
            "example": {
                "demand": 120
            }
        }
