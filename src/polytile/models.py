from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidColorError

# Decimal places kept when comparing or hashing coordinates.
PRECISION = 6

_SCALE = 10 ** PRECISION


def quantize(value: float) -> int:
    """Round *value* to ``PRECISION`` decimal places, as an integer key.

    Halves round away from zero.
    """
    scaled = abs(value) * _SCALE
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


@dataclass(frozen=True, eq=False)
class Point:
    """A 2D point whose equality ignores differences below 1e-6.

    Coordinates reached along different sequences of floating-point
    operations compare (and hash) equal once quantized, which is what
    lets independent fill paths land on the same lattice point.
    """

    x: float
    y: float

    @classmethod
    def origin(cls) -> "Point":
        return cls(0.0, 0.0)

    def key(self) -> Tuple[int, int]:
        return (quantize(self.x), quantize(self.y))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer components in 0..255."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        components = (self.red, self.green, self.blue)
        if not all(_is_component(c) for c in components):
            raise InvalidColorError(components)

    def rgb_unit(self) -> Tuple[float, float, float]:
        """Components scaled to the unit interval, as matplotlib expects."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``"#rrggbb"`` (leading ``#`` optional)."""
        text = value.lstrip("#")
        if len(text) != 6:
            raise InvalidColorError((value,))
        try:
            return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError as exc:
            raise InvalidColorError((value,)) from exc


def _is_component(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return 0 <= value <= 255
