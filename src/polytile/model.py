from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .errors import OutOfBoundsError
from .models import Color, Point
from .shape import RegularPolygon

if TYPE_CHECKING:
    from .dual import DualPolygon
    from .fill import FillResult
    from .render import Canvas, RenderConfig


class Model:
    """A tiling under construction.

    *shapes* is the unit pattern: polygons appended in order, each index
    a stable handle for later :meth:`add_multi` calls. *lookup* maps each
    materialized center to the polygon sitting there; it starts as a
    mirror of *shapes* and is expanded by :meth:`repeat`.

    *width*/*height* are the viewport size in pixels and *scale* the
    number of pixels per unit edge length.
    """

    def __init__(self, width: int, height: int, scale: float) -> None:
        self.width = width
        self.height = height
        self.scale = scale
        self.shapes: List[RegularPolygon] = []
        self.lookup: Dict[Point, RegularPolygon] = {}

    def __len__(self) -> int:
        return len(self.shapes)

    def viewport(self) -> Tuple[float, float]:
        """Half-width and half-height of the viewport in pattern units."""
        return (self.width / 2 / self.scale, self.height / 2 / self.scale)

    # ── Construction ────────────────────────────────────────────────

    def add(self, shape: RegularPolygon) -> int:
        """Append *shape* to the pattern and return its handle."""
        self.shapes.append(shape)
        self.lookup[shape.center] = shape
        return len(self.shapes) - 1

    def shape(self, index: int) -> RegularPolygon:
        if not 0 <= index < len(self.shapes):
            raise OutOfBoundsError(index, len(self.shapes), "model shapes")
        return self.shapes[index]

    def attach(self, index: int, edge: int, template: RegularPolygon) -> int:
        """Attach a copy of *template* to edge *edge* of shape *index*.

        Only the template's side count and colours are used; its position
        is computed from the parent edge.
        """
        parent = self.shape(index)
        child = parent.adjacent(template.sides, edge, template.fill, template.stroke)
        return self.add(child)

    def add_multi(self, indexes: range, edges: range, template: RegularPolygon) -> range:
        """Attach *template* to every edge in *edges* of every shape in *indexes*.

        Returns the handles of the shapes just added.
        """
        start = len(self.shapes)
        for index in indexes:
            for edge in edges:
                self.attach(index, edge, template)
        return range(start, len(self.shapes))

    # ── Filling ─────────────────────────────────────────────────────

    def repeat(self, indexes: range, **kwargs) -> "FillResult":
        """Fill the viewport by translating the pattern.

        The centers of the shapes in *indexes* are the translation vectors.
        Keyword arguments are passed to :func:`polytile.fill.repeat`.
        """
        from .fill import repeat
        return repeat(self, indexes, **kwargs)

    def dual(self, fill: Color, stroke: Color) -> List["DualPolygon"]:
        from .dual import extract_dual
        return extract_dual(self.lookup.values(), fill, stroke)

    # ── Rendering ───────────────────────────────────────────────────

    def render(self, config: Optional["RenderConfig"] = None) -> "Canvas":
        """Paint every materialized shape onto a fresh canvas."""
        from .render import Canvas, RenderConfig

        config = config or RenderConfig()
        canvas = Canvas(self.width, self.height, self.scale, config)
        shapes = list(self.lookup.values())

        if config.show_labels:
            for shape in shapes:
                for i, mid in enumerate(shape.edge_midpoints(config.margin - 0.25)):
                    canvas.label(str(i), mid)
        for shape in shapes:
            canvas.paint(shape.vertices(config.margin), shape.fill, shape.stroke)
        if config.show_labels:
            for i, shape in enumerate(shapes):
                canvas.label(str(i), shape.center)
        return canvas

    def render_dual(
        self,
        fill: Color,
        stroke: Color,
        config: Optional["RenderConfig"] = None,
    ) -> "Canvas":
        """Paint the dual tiling onto a fresh canvas."""
        from .render import Canvas, RenderConfig

        config = config or RenderConfig()
        canvas = Canvas(self.width, self.height, self.scale, config)
        for dual in self.dual(fill, stroke):
            canvas.paint(dual.vertices(config.margin), dual.fill, dual.stroke)
        return canvas
