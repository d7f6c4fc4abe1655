# app/modules/transfers/schemas.py
from pydantic import BaseModel, Field, validator
from typing import List, Optional
from datetime import datetime
from app.shared.schemas.common import BaseResponse


class TransferRequestCreate(BaseModel):
    product_id: str = Field(..., min_length=1, description="ID del producto a transferir")
    from_warehouse: str = Field(..., min_length=1, description="Código de bodega origen")
    to_warehouse: str = Field(..., min_length=1, description="Código de bodega destino")
    quantity: int = Field(..., gt=0, description="Cantidad a transferir")

    @validator('to_warehouse')
    def validate_distinct_warehouses(cls, v, values):
        """Origen y destino deben ser distintos"""
        if v == values.get('from_warehouse'):
            raise ValueError("Source and destination warehouses must differ")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "product_id": "P-1001",
                "from_warehouse": "BLR-A",
                "to_warehouse": "PNQ-C",
                "quantity": 30
            }
        }


class InventoryChangeResponse(BaseModel):
    id: int
    product_id: str
    change_type: str
    source_warehouse: str
    destination_warehouse: str
    quantity: int
    quantity_before: int
    quantity_after: int
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class TransferHistoryResponse(BaseResponse):
    transfers: List[InventoryChangeResponse]
    count: int
