# app/modules/warehouses/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session

from app.shared.database.models import Warehouse


class WarehousesRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Warehouse]:
        return self.db.query(Warehouse).order_by(Warehouse.name).all()

    def get_by_code(self, code: str) -> Optional[Warehouse]:
        return self.db.query(Warehouse).filter(Warehouse.code == code).first()
