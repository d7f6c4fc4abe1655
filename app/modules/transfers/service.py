# app/modules/transfers/service.py
from typing import Optional
from sqlalchemy.orm import Session
import logging

from .repository import TransfersRepository
from .schemas import TransferHistoryResponse, InventoryChangeResponse
from app.core.exceptions import (
    SupplySightError, NotFoundError, NotInSourceWarehouseError,
    InsufficientStockError, ValidationError
)
from app.shared.database.models import Product

logger = logging.getLogger(__name__)


class StockTransferService:
    """
    Movimiento de stock entre bodegas.

    A transfer relocates the product's single inventory record to the
    destination warehouse and decrements its stock. Checks, update and ledger
    append share one transaction: either all of it commits or none of it does.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = TransfersRepository(db)

    def transfer(
        self,
        product_id: str,
        source_warehouse: str,
        destination_warehouse: str,
        quantity: int
    ) -> Product:
        """
        Transfer `quantity` units of `product_id` from `source_warehouse` to
        `destination_warehouse`.

        Raises:
            ValidationError: quantity not a positive integer, or source == destination
            NotInSourceWarehouseError: product missing or not in the source warehouse
            InsufficientStockError: quantity exceeds the product's stock
            NotFoundError: destination warehouse does not exist
        """
        self._validate_request(source_warehouse, destination_warehouse, quantity)

        logger.info(
            f"📦 Transferencia - Producto: {product_id}, "
            f"{source_warehouse} → {destination_warehouse}, Cantidad: {quantity}"
        )

        try:
            # ========== 1. PRODUCTO EN ORIGEN (CON LOCK) ==========
            product = self.repository.get_product_in_warehouse_for_update(product_id, source_warehouse)
            if not product:
                raise NotInSourceWarehouseError(product_id, source_warehouse)

            # ========== 2. STOCK SUFICIENTE ==========
            if product.stock < quantity:
                raise InsufficientStockError(available=product.stock, requested=quantity)

            # ========== 3. BODEGA DESTINO ==========
            if not self.repository.warehouse_exists(destination_warehouse):
                raise NotFoundError("Warehouse", destination_warehouse)

            # ========== 4. ACTUALIZAR + HISTORIAL ==========
            change = self.repository.apply_transfer(product, destination_warehouse, quantity)

            self.db.commit()

        except SupplySightError as e:
            self.db.rollback()
            logger.warning(f"❌ Transferencia rechazada ({e.error_code}): {e.message}")
            raise

        except Exception:
            self.db.rollback()
            logger.exception(f"❌ Error inesperado transfiriendo producto {product_id}")
            raise

        self.db.refresh(product)
        logger.info(f"✅ Transferencia completada - Registro #{change.id}, stock restante: {product.stock}")
        return product

    def get_transfer_history(self, product_id: Optional[str] = None, limit: int = 100) -> TransferHistoryResponse:
        changes = self.repository.get_transfers(product_id, limit)
        return TransferHistoryResponse(
            success=True,
            message=f"Historial de transferencias{f' de {product_id}' if product_id else ''}",
            transfers=[InventoryChangeResponse.model_validate(c) for c in changes],
            count=len(changes)
        )

    def _validate_request(self, source_warehouse: str, destination_warehouse: str, quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError(
                "Transfer quantity must be a positive integer",
                {"quantity": quantity}
            )
        if source_warehouse == destination_warehouse:
            raise ValidationError(
                "Source and destination warehouses must differ",
                {"warehouse": source_warehouse}
            )
