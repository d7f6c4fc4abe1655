# app/modules/kpis/metrics.py
"""
Métricas derivadas de una ventana de KPIs diarios.

Every function takes a sequence of samples exposing integer ``stock`` and
``demand`` attributes (ORM rows or schemas alike) and is a pure fold.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Sequence

EXCELLENT_FILL_RATE = 80
GOOD_FILL_RATE = 60


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def total_stock(samples: Sequence[Any]) -> int:
    return sum(s.stock for s in samples)


def total_demand(samples: Sequence[Any]) -> int:
    return sum(s.demand for s in samples)


def fill_rate(samples: Sequence[Any]) -> float:
    """Share of demand covered by stock, per day, as a percentage (0 when there is no demand)"""
    demand = total_demand(samples)
    if demand <= 0:
        return 0.0
    covered = sum(min(s.stock, s.demand) for s in samples)
    return covered / demand * 100


def fill_rate_rating(rate: float) -> str:
    if rate >= EXCELLENT_FILL_RATE:
        return "Excellent"
    if rate >= GOOD_FILL_RATE:
        return "Good"
    return "Needs attention"


def average_stock(samples: Sequence[Any]) -> int:
    if not samples:
        return 0
    return _round_half_up(total_stock(samples) / len(samples))


def average_demand(samples: Sequence[Any]) -> int:
    if not samples:
        return 0
    return _round_half_up(total_demand(samples) / len(samples))


def stock_demand_ratio(samples: Sequence[Any]) -> int:
    """Total stock over total demand, as a rounded percentage"""
    demand = total_demand(samples)
    if demand <= 0:
        return 0
    return _round_half_up(total_stock(samples) / demand * 100)


def summarize(samples: Sequence[Any]) -> Dict[str, Any]:
    rate = fill_rate(samples)
    return {
        "days": len(samples),
        "total_stock": total_stock(samples),
        "total_demand": total_demand(samples),
        "fill_rate": round(rate, 1),
        "fill_rate_rating": fill_rate_rating(rate),
        "average_stock": average_stock(samples),
        "average_demand": average_demand(samples),
        "stock_demand_ratio": stock_demand_ratio(samples),
    }
