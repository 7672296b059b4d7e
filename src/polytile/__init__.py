"""polytile: tilings of regular polygons and their duals.

Public API is organised into layers:

- **Core**: points, colours, regular polygons, the pattern model
- **Filling**: periodic area fill of the viewport
- **Dual**: dual tiling extraction
- **Rendering**: PNG output (requires matplotlib)
- **Catalog**: ready-made uniform tilings
"""

# ── Core ────────────────────────────────────────────────────────────
from .errors import (
    TilingError,
    OutOfBoundsError,
    InvalidShapeError,
    InvalidColorError,
    DegeneratePatternError,
    FillError,
)
from .models import Point, Color, PRECISION
from .shape import Polygon, RegularPolygon, Shape
from .model import Model

# ── Filling ─────────────────────────────────────────────────────────
from .fill import FillResult, repeat, DEFAULT_MAX_DEPTH

# ── Dual ────────────────────────────────────────────────────────────
from .dual import DualPolygon, extract_dual, vertex_incidence, inset_polygon

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import Canvas, RenderConfig

# ── Catalog ─────────────────────────────────────────────────────────
from .patterns import PATTERNS, Palette, build_pattern

__all__ = [
    # Core
    "TilingError",
    "OutOfBoundsError",
    "InvalidShapeError",
    "InvalidColorError",
    "DegeneratePatternError",
    "FillError",
    "Point",
    "Color",
    "PRECISION",
    "Polygon",
    "RegularPolygon",
    "Shape",
    "Model",
    # Filling
    "FillResult",
    "repeat",
    "DEFAULT_MAX_DEPTH",
    # Dual
    "DualPolygon",
    "extract_dual",
    "vertex_incidence",
    "inset_polygon",
    # Rendering
    "Canvas",
    "RenderConfig",
    # Catalog
    "PATTERNS",
    "Palette",
    "build_pattern",
]
