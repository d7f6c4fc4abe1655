# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Date, ForeignKey,
    CheckConstraint, func
)
from sqlalchemy.orm import relationship, declarative_base

from app.shared.services.stock_status import classify_status

Base = declarative_base()

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# UBICACIONES
# =====================================================

class Warehouse(Base):
    """Warehouse location, identified by its code"""
    __tablename__ = "warehouses"

    code = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)

    # Relationships
    products = relationship("Product", back_populates="location")


# =====================================================
# PRODUCTOS
# =====================================================

class Product(Base, TimestampMixin):
    """Single inventory record per product; `warehouse` is its current location"""
    __tablename__ = "products"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    sku = Column(String(100), nullable=False, unique=True, index=True)
    warehouse = Column(String(50), ForeignKey("warehouses.code"), nullable=False, index=True)
    stock = Column(Integer, nullable=False, default=0)
    demand = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint('stock >= 0', name='products_stock_non_negative'),
        CheckConstraint('demand >= 0', name='products_demand_non_negative'),
    )

    # Relationships
    location = relationship("Warehouse", back_populates="products")
    inventory_changes = relationship("InventoryChange", back_populates="product")

    @property
    def status(self) -> str:
        return classify_status(self.stock, self.demand)


class InventoryChange(Base):
    """Append-only ledger of stock movements"""
    __tablename__ = "inventory_changes"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(String(50), ForeignKey("products.id"), nullable=False, index=True)
    change_type = Column(String(50), nullable=False)
    source_warehouse = Column(String(50), nullable=False)
    destination_warehouse = Column(String(50), nullable=False)
    quantity = Column(Integer, nullable=False)
    quantity_before = Column(Integer, nullable=False)
    quantity_after = Column(Integer, nullable=False)
    notes = Column(String(255))
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    # Relationships
    product = relationship("Product", back_populates="inventory_changes")


# =====================================================
# KPIs
# =====================================================

class Kpi(Base):
    """Daily aggregate stock/demand snapshot; read-only for the API"""
    __tablename__ = "kpis"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False, unique=True, index=True)
    stock = Column(Integer, nullable=False)
    demand = Column(Integer, nullable=False)
