# app/modules/warehouses/service.py
from typing import List
from sqlalchemy.orm import Session

from .repository import WarehousesRepository
from app.core.exceptions import NotFoundError
from app.shared.database.models import Warehouse


class WarehousesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = WarehousesRepository(db)

    def list_warehouses(self) -> List[Warehouse]:
        """Todas las bodegas, ordenadas por nombre"""
        return self.repository.get_all()

    def get_warehouse(self, code: str) -> Warehouse:
        warehouse = self.repository.get_by_code(code)
        if not warehouse:
            raise NotFoundError("Warehouse", code)
        return warehouse
