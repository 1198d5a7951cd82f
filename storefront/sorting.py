"""Sort modes for the catalog listing.

Every mode relies on Python's stable sort, so products with equal keys keep
the order they had coming out of the filters. ``reverse=True`` keeps that
guarantee as well.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple

from unidecode import unidecode


class SortKey(str, Enum):
    RECOMMENDED = "reco"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS: Dict[SortKey, str] = {
    SortKey.RECOMMENDED: "Recommended",
    SortKey.PRICE_ASC: "Price ↑",
    SortKey.PRICE_DESC: "Price ↓",
    SortKey.NAME_ASC: "Name A→Z",
    SortKey.NAME_DESC: "Name Z→A",
}


def price_key(product: Any) -> float:
    return getattr(product, "price", None) or 0.0


def name_key(product: Any) -> Tuple[str, str]:
    """Collation key: accent-folded and case-insensitive first, raw text second."""
    name = getattr(product, "name", None) or ""
    return unidecode(name).casefold(), name


_KEYS: Dict[SortKey, Tuple[Callable[[Any], Any], bool]] = {
    SortKey.PRICE_ASC: (price_key, False),
    SortKey.PRICE_DESC: (price_key, True),
    SortKey.NAME_ASC: (name_key, False),
    SortKey.NAME_DESC: (name_key, True),
}


def sort_products(products: Sequence[Any], key: SortKey | str) -> List[Any]:
    sort_key = SortKey(key)
    if sort_key is SortKey.RECOMMENDED:
        return list(products)
    key_fn, reverse = _KEYS[sort_key]
    return sorted(products, key=key_fn, reverse=reverse)


def compare(a: Any, b: Any, key: SortKey | str) -> int:
    """Pairwise ordering matching :func:`sort_products` (0 means keep input order)."""
    sort_key = SortKey(key)
    if sort_key is SortKey.RECOMMENDED:
        return 0
    key_fn, reverse = _KEYS[sort_key]
    left, right = key_fn(a), key_fn(b)
    result = (left > right) - (left < right)
    return -result if reverse else result
