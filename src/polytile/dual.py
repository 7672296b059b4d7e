"""Dual tiling extraction.

Every vertex of the tiling where three or more polygons meet becomes a
dual polygon whose corners are the centers of those polygons, taken in
angular order around the vertex.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .errors import OutOfBoundsError
from .models import Color, Point
from .shape import RegularPolygon

# A vertex needs at least this many surrounding polygons to get a dual
# polygon; vertices on the fill boundary have fewer.
MIN_VALENCE = 3


@dataclass(frozen=True)
class DualPolygon:
    """A closed ring of points (first == last) with its colours."""

    points: Tuple[Point, ...]
    fill: Color
    stroke: Color

    def colors(self) -> Tuple[Color, Color]:
        return (self.fill, self.stroke)

    def vertices(self, margin: float = 0.0) -> List[Point]:
        if margin == 0.0:
            return list(self.points)
        return inset_polygon(list(self.points), margin)


def vertex_incidence(shapes: Iterable[RegularPolygon]) -> Dict[Point, List[RegularPolygon]]:
    """Map every polygon vertex to the polygons that touch it."""
    incidence: Dict[Point, List[RegularPolygon]] = {}
    for shape in shapes:
        ring = shape.vertices(0.0)
        for point in ring[:-1]:
            incidence.setdefault(point, []).append(shape)
    return incidence


def extract_dual(
    shapes: Iterable[RegularPolygon],
    fill: Color,
    stroke: Color,
) -> List[DualPolygon]:
    """Return the dual polygons of the tiling formed by *shapes*."""
    duals: List[DualPolygon] = []
    for vertex, incident in vertex_incidence(shapes).items():
        if len(incident) < MIN_VALENCE:
            continue

        def angle(shape: RegularPolygon, vertex: Point = vertex) -> float:
            return math.atan2(shape.center.y - vertex.y, shape.center.x - vertex.x)

        ordered = sorted(incident, key=angle, reverse=True)
        if not ordered:
            raise OutOfBoundsError(0, len(ordered), "dual shapes")
        points = [shape.center for shape in ordered]
        points.append(points[0])
        duals.append(DualPolygon(tuple(points), fill, stroke))
    return duals


def inset_polygon(points: List[Point], margin: float) -> List[Point]:
    """Shrink a closed ring by moving every edge *margin* along its normal.

    Each new corner is the intersection of the two shifted edges that
    meet at the old corner. The result is closed again (first == last).
    """
    if len(points) < 2:
        raise OutOfBoundsError(len(points) - 2, len(points), "shape points")
    window = [points[-2]] + list(points)
    corners = [
        inset_corner(p0, p1, p2, margin)
        for p0, p1, p2 in zip(window, window[1:], window[2:])
    ]
    corners.append(corners[0])
    return corners


def inset_corner(p0: Point, p1: Point, p2: Point, margin: float) -> Point:
    """Corner at *p1* after shifting edges p0→p1 and p1→p2 by *margin*.

    Edges are shifted towards ``direction - pi/2``, i.e. to the right of
    travel, which is the interior for the clockwise rings produced by
    :func:`extract_dual`.
    """
    a0 = math.atan2(p1.y - p0.y, p1.x - p0.x) - math.pi / 2
    a1 = math.atan2(p2.y - p1.y, p2.x - p1.x) - math.pi / 2
    ax0, ay0 = p0.x + math.cos(a0) * margin, p0.y + math.sin(a0) * margin
    ax1, ay1 = p1.x + math.cos(a0) * margin, p1.y + math.sin(a0) * margin
    bx0, by0 = p1.x + math.cos(a1) * margin, p1.y + math.sin(a1) * margin
    bx1, by1 = p2.x + math.cos(a1) * margin, p2.y + math.sin(a1) * margin
    ady, adx = ay1 - ay0, ax0 - ax1
    bdy, bdx = by1 - by0, bx0 - bx1
    c0 = ady * ax0 + adx * ay0
    c1 = bdy * bx0 + bdx * by0
    d = ady * bdx - bdy * adx
    return Point((bdx * c0 - adx * c1) / d, (ady * c1 - bdy * c0) / d)
