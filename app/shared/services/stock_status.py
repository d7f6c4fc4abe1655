# app/shared/services/stock_status.py
"""
Clasificación de estado de stock

The status is derived on read and never stored, so it cannot drift from the
stock/demand values it describes.
"""

from enum import Enum


class StockStatus(str, Enum):
    """Estado derivado de un producto"""
    HEALTHY = "Healthy"
    LOW = "Low"
    CRITICAL = "Critical"


def classify_status(stock: int, demand: int) -> str:
    """Healthy if stock > demand, Low if equal, Critical if below"""
    if stock > demand:
        return StockStatus.HEALTHY.value
    if stock == demand:
        return StockStatus.LOW.value
    return StockStatus.CRITICAL.value


def status_condition(model, status: StockStatus):
    """SQL predicate equivalent to classify_status for `model`'s stock/demand columns"""
    if status == StockStatus.HEALTHY:
        return model.stock > model.demand
    if status == StockStatus.LOW:
        return model.stock == model.demand
    return model.stock < model.demand
