"""Ring and bracelet size charts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

RING_DIAMETER_RANGE: Tuple[float, float] = (14.0, 20.0)
BRACELET_CIRCUMFERENCE_RANGE: Tuple[float, float] = (13.0, 20.0)


@dataclass(frozen=True)
class RingSize:
    diameter: float  # inner diameter, mm
    us: float
    eu: int
    uk: str


@dataclass(frozen=True)
class BraceletSize:
    circumference: float  # wrist, cm
    size: str
    label: str


RING_SIZES: Tuple[RingSize, ...] = (
    RingSize(14.0, 3, 44, "F"),
    RingSize(14.4, 3.5, 45, "G"),
    RingSize(14.8, 4, 46, "H"),
    RingSize(15.3, 4.5, 47, "I"),
    RingSize(15.7, 5, 49, "J"),
    RingSize(16.1, 5.5, 50, "K"),
    RingSize(16.5, 6, 51, "L"),
    RingSize(16.9, 6.5, 52, "M"),
    RingSize(17.3, 7, 54, "N"),
    RingSize(17.7, 7.5, 55, "O"),
    RingSize(18.2, 8, 57, "P"),
    RingSize(18.6, 8.5, 58, "Q"),
    RingSize(19.0, 9, 59, "R"),
    RingSize(19.4, 9.5, 60, "S"),
    RingSize(19.8, 10, 62, "T"),
)

BRACELET_SIZES: Tuple[BraceletSize, ...] = (
    BraceletSize(14, "XS", "Très petit"),
    BraceletSize(15, "S", "Petit"),
    BraceletSize(16, "M", "Moyen"),
    BraceletSize(17, "L", "Grand"),
    BraceletSize(18, "XL", "Très grand"),
)

T = TypeVar("T")


def _check_range(value: float, bounds: Tuple[float, float], what: str) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{what} must be between {low} and {high}, got {value}")


def _closest(rows: Sequence[T], measure: float, attr: str) -> T:
    # min() keeps the first row on ties, i.e. the smaller size.
    return min(rows, key=lambda row: abs(getattr(row, attr) - measure))


def closest_ring(diameter: float) -> RingSize:
    _check_range(diameter, RING_DIAMETER_RANGE, "Ring diameter")
    return _closest(RING_SIZES, diameter, "diameter")


def closest_bracelet(circumference: float) -> BraceletSize:
    _check_range(circumference, BRACELET_CIRCUMFERENCE_RANGE, "Bracelet circumference")
    return _closest(BRACELET_SIZES, circumference, "circumference")
