# app/modules/products/repository.py
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, or_
import logging

from app.shared.database.models import Product
from app.shared.services.stock_status import StockStatus, status_condition

logger = logging.getLogger(__name__)


class ProductsRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def search_products(
        self,
        search: Optional[str] = None,
        warehouse: Optional[str] = None,
        status: Optional[StockStatus] = None
    ) -> List[Product]:
        """Productos filtrados, ordenados por nombre"""
        query = self.db.query(Product)

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Product.name.ilike(pattern),
                    Product.sku.ilike(pattern)
                )
            )

        if warehouse:
            query = query.filter(Product.warehouse == warehouse)

        if status:
            query = query.filter(status_condition(Product, status))

        return query.order_by(Product.name).all()

    def update_demand(self, product_id: str, demand: int) -> Optional[Product]:
        """Sobrescribe la demanda; None si el producto no existe"""
        product = self.get_by_id(product_id)
        if not product:
            return None

        product.demand = demand
        product.updated_at = func.now()
        self.db.flush()
        return product
