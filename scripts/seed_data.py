#!/usr/bin/env python3
"""
Script para crear tablas y cargar datos de ejemplo
Ejecutar desde la raíz del proyecto: python scripts/seed_data.py
"""
import sys
import os
from datetime import date, timedelta

# Agregar el directorio raíz al path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config.database import engine, SessionLocal
from app.shared.database.models import Base, Warehouse, Product, Kpi

WAREHOUSES = [
    {"code": "BLR-A", "name": "Bangalore Warehouse A", "city": "Bangalore", "country": "India"},
    {"code": "PNQ-C", "name": "Pune Warehouse C", "city": "Pune", "country": "India"},
    {"code": "DEL-B", "name": "Delhi Warehouse B", "city": "Delhi", "country": "India"},
]

PRODUCTS = [
    {"id": "P-1001", "name": "12mm Hex Bolt", "sku": "HEX-12-100", "warehouse": "BLR-A", "stock": 180, "demand": 120},
    {"id": "P-1002", "name": "Steel Washer", "sku": "WSR-08-500", "warehouse": "BLR-A", "stock": 50, "demand": 80},
    {"id": "P-1003", "name": "M8 Nut", "sku": "NUT-08-200", "warehouse": "PNQ-C", "stock": 80, "demand": 80},
    {"id": "P-1004", "name": "Bearing 608ZZ", "sku": "BRG-608-50", "warehouse": "DEL-B", "stock": 24, "demand": 120},
]

KPI_DAYS = 30


def seed_kpis(today: date):
    """Serie diaria determinística de stock/demanda"""
    rows = []
    for offset in range(KPI_DAYS, 0, -1):
        day = today - timedelta(days=offset)
        rows.append(Kpi(
            date=day,
            stock=300 + (offset * 7) % 60,
            demand=280 + (offset * 11) % 70
        ))
    return rows


def main():
    print("🚀 SupplySight - Cargando datos de ejemplo...")

    Base.metadata.create_all(bind=engine)
    print("✅ Tablas verificadas")

    db = SessionLocal()
    try:
        if db.query(Warehouse).count() > 0:
            print("ℹ️  La base ya tiene datos, no se carga nada")
            return True

        db.add_all(Warehouse(**w) for w in WAREHOUSES)
        db.flush()
        db.add_all(Product(**p) for p in PRODUCTS)
        db.add_all(seed_kpis(date.today()))
        db.commit()

        print(f"✅ {len(WAREHOUSES)} bodegas, {len(PRODUCTS)} productos, {KPI_DAYS} días de KPIs")
        return True
    except Exception as e:
        db.rollback()
        print(f"❌ Error cargando datos: {e}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
