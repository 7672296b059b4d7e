"""Recipes for a few uniform tilings.

Each builder returns the constructed :class:`Model` together with the
handle range whose shapes mark the pattern's translation vectors, ready
to pass to :meth:`Model.repeat`. Names follow the vertex configuration
of the tiling (the polygons met going round one vertex).

Usage
-----
>>> model, handles = build_3464(1024, 1024, 128.0)
>>> model.repeat(handles)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Tuple

from .model import Model
from .models import Color
from .shape import RegularPolygon


@dataclass(frozen=True)
class Palette:
    """Colours used by the catalog builders."""

    stroke: Color = field(default_factory=lambda: Color(242, 205, 21))
    fill_0: Color = field(default_factory=lambda: Color(242, 174, 45))
    fill_1: Color = field(default_factory=lambda: Color(216, 140, 73))
    fill_2: Color = field(default_factory=lambda: Color(191, 86, 47))
    background: Color = field(default_factory=lambda: Color(56, 103, 165))


PatternBuilder = Callable[[int, int, float, Palette], Tuple[Model, range]]


def build_3464(width: int, height: int, scale: float, palette: Palette | None = None) -> Tuple[Model, range]:
    """Rhombitrihexagonal tiling: a hexagon ringed by squares and triangles."""
    palette = palette or Palette()
    model = Model(width, height, scale)
    model.add(RegularPolygon(6, palette.fill_0, palette.stroke))
    squares = model.add_multi(range(0, 1), range(0, 6), RegularPolygon(4, palette.fill_1, palette.stroke))
    model.add_multi(squares, range(1, 2), RegularPolygon(3, palette.fill_2, palette.stroke))
    hexagons = model.add_multi(squares, range(2, 3), RegularPolygon(6, palette.fill_0, palette.stroke))
    return model, hexagons


def build_3636(width: int, height: int, scale: float, palette: Palette | None = None) -> Tuple[Model, range]:
    """Trihexagonal tiling."""
    palette = palette or Palette()
    model = Model(width, height, scale)
    model.add(RegularPolygon(6, palette.fill_1, palette.stroke))
    a = model.add_multi(range(0, 1), range(0, 6), RegularPolygon(3, palette.fill_0, palette.stroke))
    b = model.add_multi(a, range(1, 2), RegularPolygon(6, palette.fill_1, palette.stroke))
    return model, b


def build_33434(width: int, height: int, scale: float, palette: Palette | None = None) -> Tuple[Model, range]:
    """Snub square tiling."""
    palette = palette or Palette()
    model = Model(width, height, scale)
    model.add(RegularPolygon(4, palette.fill_1, palette.stroke))
    a = model.add_multi(range(0, 1), range(0, 4), RegularPolygon(3, palette.fill_2, palette.stroke))
    b = model.add_multi(a, range(1, 2), RegularPolygon(4, palette.fill_1, palette.stroke))
    c = model.add_multi(b, range(2, 4), RegularPolygon(3, palette.fill_2, palette.stroke))
    d = model.add_multi(c, range(2, 3), RegularPolygon(4, palette.fill_1, palette.stroke))
    return model, d


def build_33336(width: int, height: int, scale: float, palette: Palette | None = None) -> Tuple[Model, range]:
    """Snub hexagonal tiling."""
    palette = palette or Palette()
    model = Model(width, height, scale)
    model.add(RegularPolygon(6, palette.fill_2, palette.stroke))
    a = model.add_multi(range(0, 1), range(0, 6), RegularPolygon(3, palette.fill_0, palette.stroke))
    model.add_multi(a, range(1, 2), RegularPolygon(3, palette.fill_0, palette.stroke))
    c = model.add_multi(a, range(2, 3), RegularPolygon(3, palette.fill_0, palette.stroke))
    d = model.add_multi(c, range(1, 2), RegularPolygon(6, palette.fill_2, palette.stroke))
    return model, d


def build_333333(width: int, height: int, scale: float, palette: Palette | None = None) -> Tuple[Model, range]:
    """Triangular tiling."""
    palette = palette or Palette()
    model = Model(width, height, scale)
    model.add(RegularPolygon(3, palette.fill_2, palette.stroke))
    a = model.add_multi(range(0, 1), range(0, 3), RegularPolygon(3, palette.fill_1, palette.stroke))
    b = model.add_multi(a, range(1, 3), RegularPolygon(3, palette.fill_2, palette.stroke))
    return model, b


PATTERNS: Dict[str, PatternBuilder] = {
    "3.4.6.4": build_3464,
    "3.6.3.6": build_3636,
    "3.3.4.3.4": build_33434,
    "3.3.3.3.6": build_33336,
    "3.3.3.3.3.3": build_333333,
}


def build_pattern(
    name: str,
    width: int,
    height: int,
    scale: float,
    palette: Palette | None = None,
) -> Tuple[Model, range]:
    """Look up *name* in :data:`PATTERNS` and build it."""
    try:
        builder = PATTERNS[name]
    except KeyError:
        raise KeyError(
            f"Unknown pattern '{name}'. Available: {sorted(PATTERNS)}"
        ) from None
    return builder(width, height, scale, palette)
