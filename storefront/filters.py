"""Predicate filters narrowing the catalog listing.

Filters are plain ``(product) -> bool`` callables. :func:`active_filters`
builds the ones a query switches on, always in the order search, category,
min price, max price, so trace output reads the same for every request.
"""
from __future__ import annotations

import math
from typing import Any, Callable, List, Optional, Tuple

from .categories import ALL_CATEGORIES
from .models import DisplayProduct, QueryParameters

Predicate = Callable[[DisplayProduct], bool]


def parse_price_bound(value: Any) -> Optional[float]:
    """Parse a user supplied price bound.

    Blank, non-numeric, non-finite, zero and negative values all mean
    "no bound" and return ``None``. Zero is never a useful bound for jewelry
    prices, so it is treated the same as an empty field.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def search_filter(text: str) -> Predicate:
    needle = text.strip().lower()

    def predicate(product: DisplayProduct) -> bool:
        name = product.name or ""
        category = product.category.value if product.category else ""
        return (bool(name) and needle in name.lower()) or (
            bool(category) and needle in category.lower()
        )

    return predicate


def category_filter(category: str) -> Predicate:
    def predicate(product: DisplayProduct) -> bool:
        return product.category.value == category

    return predicate


def min_price_filter(minimum: float) -> Predicate:
    def predicate(product: DisplayProduct) -> bool:
        return (product.price or 0.0) >= minimum

    return predicate


def max_price_filter(maximum: float) -> Predicate:
    def predicate(product: DisplayProduct) -> bool:
        return (product.price or 0.0) <= maximum

    return predicate


def active_filters(params: QueryParameters) -> List[Tuple[str, Predicate]]:
    filters: List[Tuple[str, Predicate]] = []
    if params.search_text.strip():
        filters.append(("search", search_filter(params.search_text)))
    if params.active_category != ALL_CATEGORIES:
        filters.append(("category", category_filter(params.active_category)))
    minimum = parse_price_bound(params.min_price)
    if minimum is not None:
        filters.append(("min_price", min_price_filter(minimum)))
    maximum = parse_price_bound(params.max_price)
    if maximum is not None:
        filters.append(("max_price", max_price_filter(maximum)))
    return filters
