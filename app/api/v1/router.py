# app/api/v1/router.py
from fastapi import APIRouter
from app.modules.products.router import router as products_router
from app.modules.warehouses.router import router as warehouses_router
from app.modules.kpis.router import router as kpis_router
from app.modules.transfers.router import router as transfers_router


# Crear router principal de la API v1
api_router = APIRouter()

# ==================== RUTAS DE MÓDULOS ====================

api_router.include_router(
    products_router,
    prefix="/products",
    tags=["Products"]
)

api_router.include_router(
    warehouses_router,
    prefix="/warehouses",
    tags=["Warehouses"]
)

api_router.include_router(
    kpis_router,
    prefix="/kpis",
    tags=["KPIs"]
)

api_router.include_router(
    transfers_router,
    prefix="/transfers",
    tags=["Transfers"]
)

# ==================== ENDPOINT RAÍZ ====================

@api_router.get("/")
async def api_root():
    """Root endpoint de la API"""
    return {
        "message": "SupplySight API v1",
        "status": "active",
        "docs": "/docs",
        "available_endpoints": {
            "products": "/api/v1/products",
            "warehouses": "/api/v1/warehouses",
            "kpis": "/api/v1/kpis",
            "transfers": "/api/v1/transfers"
        }
    }
