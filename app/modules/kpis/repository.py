# app/modules/kpis/repository.py
from typing import List
from sqlalchemy.orm import Session

from app.shared.database.models import Kpi


class KpisRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_latest(self, days: int) -> List[Kpi]:
        """Últimos `days` registros en orden cronológico"""
        rows = self.db.query(Kpi).order_by(Kpi.date.desc()).limit(days).all()
        rows.reverse()
        return rows
