# app/modules/transfers/repository.py
from typing import List, Optional
from sqlalchemy.orm import Query, Session
from sqlalchemy import and_, func
import logging

from app.shared.database.models import Product, Warehouse, InventoryChange

logger = logging.getLogger(__name__)

TRANSFER_CHANGE_TYPE = "stock_transfer"


class TransfersRepository:
    def __init__(self, db: Session):
        self.db = db

    def locked_product_query(self, product_id: str, warehouse_code: str) -> Query:
        """SELECT ... FOR UPDATE del producto en la bodega indicada"""
        return self.db.query(Product).filter(
            and_(
                Product.id == product_id,
                Product.warehouse == warehouse_code
            )
        ).with_for_update().populate_existing()

    def get_product_in_warehouse_for_update(self, product_id: str, warehouse_code: str) -> Optional[Product]:
        """Producto en la bodega indicada, con lock de fila hasta el fin de la transacción"""
        return self.locked_product_query(product_id, warehouse_code).first()

    def warehouse_exists(self, warehouse_code: str) -> bool:
        return self.db.query(Warehouse.code).filter(
            Warehouse.code == warehouse_code
        ).first() is not None

    def apply_transfer(self, product: Product, destination_warehouse: str, quantity: int) -> InventoryChange:
        """
        Relocate the product row and append the ledger entry.

        Caller owns the transaction: nothing is committed here.
        """
        source_warehouse = product.warehouse
        stock_before = product.stock

        product.warehouse = destination_warehouse
        product.stock = stock_before - quantity
        product.updated_at = func.now()

        change = InventoryChange(
            product_id=product.id,
            change_type=TRANSFER_CHANGE_TYPE,
            source_warehouse=source_warehouse,
            destination_warehouse=destination_warehouse,
            quantity=quantity,
            quantity_before=stock_before,
            quantity_after=product.stock,
            notes=f"Transferencia {source_warehouse} → {destination_warehouse}: {quantity} unidades"
        )
        self.db.add(change)
        self.db.flush()

        logger.info(
            f"   Stock {product.id}: {stock_before} → {product.stock} "
            f"({source_warehouse} → {destination_warehouse})"
        )
        return change

    def get_transfers(self, product_id: Optional[str] = None, limit: int = 100) -> List[InventoryChange]:
        """Historial de transferencias, más recientes primero"""
        query = self.db.query(InventoryChange).filter(
            InventoryChange.change_type == TRANSFER_CHANGE_TYPE
        )
        if product_id:
            query = query.filter(InventoryChange.product_id == product_id)
        return query.order_by(InventoryChange.id.desc()).limit(limit).all()
