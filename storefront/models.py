"""Pydantic models for catalog records and response payloads."""
from __future__ import annotations

import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .categories import ALL_CATEGORIES, Category
from .sorting import SortKey


FALSE_FLAGS = {"0", "false", "no", "off"}


def coerce_number(value: Any) -> float:
    """Numbers pass through, numeric strings are parsed, anything else is 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


class ProductRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[Union[int, str]] = None
    name: str = ""
    price: float = 0.0
    raw_type: Optional[str] = Field(None, alias="type")
    image_url: Optional[str] = Field(None, alias="image")
    description: str = ""
    rating: float = 0.0
    available: bool = True
    vendor_id: Optional[Union[int, str]] = None

    @field_validator("price", "rating", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("raw_type", "image_url", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("id", "vendor_id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> Optional[Union[int, str]]:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return None
        return value

    @field_validator("available", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            text = value.strip().lower()
            if text in FALSE_FLAGS:
                return False
        return True

    @classmethod
    def from_raw(cls, raw: Union["ProductRecord", dict, None]) -> "ProductRecord":
        """Build a record from upstream data; unusable fields fall back to defaults."""
        if isinstance(raw, ProductRecord):
            return raw
        return cls.model_validate(raw if isinstance(raw, dict) else {})


class DisplayProduct(ProductRecord):
    category: Category = Category.OTHER


class QueryParameters(BaseModel):
    search_text: str = ""
    active_category: str = ALL_CATEGORIES
    min_price: Optional[Union[float, str]] = None
    max_price: Optional[Union[float, str]] = None
    sort_key: SortKey = SortKey.RECOMMENDED


class SortOption(BaseModel):
    key: SortKey
    label: str


class CatalogResponse(BaseModel):
    query: QueryParameters
    count: int
    sort_label: str
    source: str
    results: list[DisplayProduct]
    took_ms: float
