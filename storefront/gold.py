"""Gold price ticker backed by static sample data (EUR per gram, 24 carat)."""
from __future__ import annotations

import math
from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel

CURRENT_PRICE = 59.3
PREVIOUS_PRICE = 58.8
CURRENCY = "EUR"


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


PERIOD_LABELS: Dict[Period, str] = {
    Period.DAY: "Jour",
    Period.WEEK: "Semaine",
    Period.MONTH: "Mois",
}

SERIES: Dict[Period, Tuple[Tuple[str, float], ...]] = {
    Period.DAY: (
        ("00:00", 58.2),
        ("04:00", 58.5),
        ("08:00", 58.8),
        ("12:00", 59.1),
        ("16:00", 58.9),
        ("20:00", 59.3),
    ),
    Period.WEEK: (
        ("Lun", 57.5),
        ("Mar", 58.0),
        ("Mer", 58.3),
        ("Jeu", 58.8),
        ("Ven", 59.1),
        ("Sam", 59.0),
        ("Dim", 59.3),
    ),
    Period.MONTH: (
        ("S1", 56.8),
        ("S2", 57.2),
        ("S3", 57.8),
        ("S4", 59.3),
    ),
}


class PricePoint(BaseModel):
    time: str
    price: float


class GoldTicker(BaseModel):
    currency: str
    period: Period
    period_label: str
    current_price: float
    previous_price: float
    change: float
    change_percent: float
    is_positive: bool
    chart_min: int
    chart_max: int
    points: List[PricePoint]


def chart_bounds(prices: List[float]) -> Tuple[int, int]:
    """Axis bounds padded by one unit on each side."""
    return math.floor(min(prices) - 1), math.ceil(max(prices) + 1)


def gold_ticker(period: Period | str = Period.DAY) -> GoldTicker:
    period = Period(period)
    points = [PricePoint(time=label, price=price) for label, price in SERIES[period]]
    change = CURRENT_PRICE - PREVIOUS_PRICE
    chart_min, chart_max = chart_bounds([point.price for point in points])
    return GoldTicker(
        currency=CURRENCY,
        period=period,
        period_label=PERIOD_LABELS[period],
        current_price=CURRENT_PRICE,
        previous_price=PREVIOUS_PRICE,
        change=round(change, 2),
        change_percent=round(change / PREVIOUS_PRICE * 100, 2),
        is_positive=change >= 0,
        chart_min=chart_min,
        chart_max=chart_max,
        points=points,
    )
