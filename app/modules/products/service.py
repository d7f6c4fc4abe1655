# app/modules/products/service.py
from typing import List
from sqlalchemy.orm import Session
import logging

from .repository import ProductsRepository
from .schemas import ProductSearchParams
from app.core.exceptions import NotFoundError
from app.shared.database.models import Product

logger = logging.getLogger(__name__)


class ProductsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductsRepository(db)

    def search_products(self, params: ProductSearchParams) -> List[Product]:
        products = self.repository.search_products(
            search=params.search,
            warehouse=params.warehouse,
            status=params.status
        )
        logger.debug(f"Productos encontrados: {len(products)}")
        return products

    def get_product(self, product_id: str) -> Product:
        product = self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product", product_id)
        return product


class DemandUpdateService:
    """Overwrites a product's demand in a single commit"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductsRepository(db)

    def update_demand(self, product_id: str, demand: int) -> Product:
        try:
            product = self.repository.update_demand(product_id, demand)
            if not product:
                raise NotFoundError("Product", product_id)
            self.db.commit()
        except NotFoundError:
            self.db.rollback()
            logger.warning(f"❌ Producto {product_id} no encontrado para actualizar demanda")
            raise
        except Exception:
            self.db.rollback()
            logger.exception(f"❌ Error actualizando demanda de {product_id}")
            raise

        self.db.refresh(product)
        logger.info(f"✅ Demanda actualizada - Producto: {product_id}, demanda: {product.demand}")
        return product
