# app/modules/warehouses/schemas.py
from pydantic import BaseModel


class WarehouseResponse(BaseModel):
    code: str
    name: str
    city: str
    country: str

    class Config:
        from_attributes = True
