"""Regular-polygon geometry.

All polygons have unit edge length. A polygon is described by its number
of sides, the position of its center and a rotation; its vertex ring is
derived from those on demand.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Protocol, Tuple

from .errors import InvalidShapeError, OutOfBoundsError
from .models import Color, Point

Edge = Tuple[Point, Point]


class Polygon(Protocol):
    """Anything the renderer can paint: a point ring plus two colours."""

    def vertices(self, margin: float = 0.0) -> List[Point]:
        ...

    def colors(self) -> Tuple[Color, Color]:
        ...


@dataclass(frozen=True)
class RegularPolygon:
    sides: int
    fill: Color
    stroke: Color
    center: Point = Point(0.0, 0.0)
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if self.sides < 3:
            raise InvalidShapeError(self.sides)

    def colors(self) -> Tuple[Color, Color]:
        return (self.fill, self.stroke)

    def vertices(self, margin: float = 0.0) -> List[Point]:
        """Return the closed vertex ring (``sides + 1`` points, first == last).

        *margin* moves every edge inward along its perpendicular by that
        distance, which shrinks the outline without moving the center.
        """
        angle = 2 * math.pi / self.sides
        rotation = self.rotation - math.pi / 2
        half = angle / 2
        d = 0.5 / math.sin(half) - margin / math.cos(half)
        points: List[Point] = []
        for i in range(self.sides + 1):
            a = (i % self.sides) * angle + rotation
            points.append(Point(self.center.x + math.cos(a) * d, self.center.y + math.sin(a) * d))
        return points

    def edges(self, margin: float = 0.0) -> List[Edge]:
        ring = self.vertices(margin)
        return [(ring[i], ring[i + 1]) for i in range(self.sides)]

    def edge(self, index: int, margin: float = 0.0) -> Edge:
        edges = self.edges(margin)
        if not 0 <= index < len(edges):
            raise OutOfBoundsError(index, len(edges), "shape edges")
        return edges[index]

    def edge_midpoints(self, margin: float = 0.0) -> List[Point]:
        return [
            Point((p0.x + p1.x) / 2, (p0.y + p1.y) / 2)
            for p0, p1 in self.edges(margin)
        ]

    def adjacent(self, sides: int, edge: int, fill: Color, stroke: Color) -> "RegularPolygon":
        """Return the *sides*-gon that shares edge *edge* of this polygon.

        The new center sits on the perpendicular bisector of the edge, on
        the far side from this polygon's center, at the new polygon's
        apothem. Its rotation lines one of its edges up with the shared
        one so their endpoints coincide.
        """
        if sides < 3:
            raise InvalidShapeError(sides)
        p0, p1 = self.edge(edge)
        angle = 2 * math.pi / sides
        a = math.atan2(p1.y - p0.y, p1.x - p0.x)
        b = a - math.pi / 2
        d = 0.5 / math.tan(angle / 2)
        center = Point(
            p0.x + (p1.x - p0.x) / 2 + math.cos(b) * d,
            p0.y + (p1.y - p0.y) / 2 + math.sin(b) * d,
        )
        rotation = a + angle * (sides - 1) / 2
        return RegularPolygon(sides, fill, stroke, center, rotation)

    def translate(self, offset: Point) -> "RegularPolygon":
        return replace(self, center=self.center + offset)

    def clone_at(self, point: Point) -> "RegularPolygon":
        return replace(self, center=point)


Shape = RegularPolygon
