"""Product type tags and their display categories."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

ALL_CATEGORIES = "All"


class ProductType(str, Enum):
    """Raw type tags emitted by the catalog backend."""

    RING = "bague"
    BRACELET = "bracelet"
    NECKLACE = "collier"
    EARRINGS = "boucles"
    WATCH = "montre"


class Category(str, Enum):
    RINGS = "Rings"
    BRACELETS = "Bracelets"
    NECKLACES = "Necklaces"
    EARRINGS = "Earrings"
    WATCHES = "Watches"
    OTHER = "Other"


TYPE_TO_CATEGORY: Dict[ProductType, Category] = {
    ProductType.RING: Category.RINGS,
    ProductType.BRACELET: Category.BRACELETS,
    ProductType.NECKLACE: Category.NECKLACES,
    ProductType.EARRINGS: Category.EARRINGS,
    ProductType.WATCH: Category.WATCHES,
}

# English tags used by some importers and fixtures.
TYPE_ALIASES: Dict[str, ProductType] = {
    "ring": ProductType.RING,
    "necklace": ProductType.NECKLACE,
    "earrings": ProductType.EARRINGS,
    "watch": ProductType.WATCH,
}

# Order of the category tabs shown to clients.
SELECTABLE_CATEGORIES: List[str] = [
    ALL_CATEGORIES,
    Category.RINGS.value,
    Category.NECKLACES.value,
    Category.BRACELETS.value,
    Category.EARRINGS.value,
    Category.WATCHES.value,
    Category.OTHER.value,
]


def parse_product_type(raw_type: Optional[str]) -> Optional[ProductType]:
    if not isinstance(raw_type, str) or not raw_type:
        return None
    if raw_type in TYPE_ALIASES:
        return TYPE_ALIASES[raw_type]
    try:
        return ProductType(raw_type)
    except ValueError:
        return None


def map_category(raw_type: Optional[str]) -> Category:
    """Return the display category for a raw type tag, ``Other`` when unknown."""
    product_type = parse_product_type(raw_type)
    if product_type is None:
        return Category.OTHER
    return TYPE_TO_CATEGORY[product_type]
