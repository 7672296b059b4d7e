"""Area fill: replicate a unit pattern until it covers the viewport.

The translation vectors of the tiling are the centers of a chosen set of
pattern shapes (the ones placed where the next copy of the pattern's
origin shape belongs). Starting at the origin, the engine walks the
lattice those vectors generate and drops a translated copy of the whole
pattern at every lattice point it reaches.

The walk is an iterative-deepening depth-first search. A single memo
maps each lattice point to the largest remaining depth budget it has
been explored with; a point is only expanded again when reached with a
strictly larger budget. After each pass the four viewport corners are
checked; the search deepens until every corner has a lattice point
beyond it on both axes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

from .errors import DegeneratePatternError, FillError, OutOfBoundsError
from .models import Point

if TYPE_CHECKING:
    from .model import Model

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1000

# Offsets shorter than this, and angular gaps this close to pi, count as degenerate.
_DEGENERATE_TOL = 1e-9


@dataclass(frozen=True)
class FillResult:
    """Summary of a :func:`repeat` call.

    *depth* is the budget of the final pass, *visited* the number of
    lattice points in the memo and *added* the number of lookup entries
    created by this call.
    """

    depth: int
    visited: int
    added: int


def repeat(
    model: "Model",
    indexes: range,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> FillResult:
    """Fill *model*'s viewport with copies of its pattern.

    The centers of ``model.shapes[i]`` for ``i`` in *indexes* are the
    lattice offsets. Raises :class:`DegeneratePatternError` if some
    half-plane holds all of them (the walk could never reach the far
    corners), and :class:`FillError` if the viewport is still
    uncovered after *max_depth* passes. ``max_depth=None`` removes the
    limit.
    """
    offsets = _pattern_offsets(model, indexes)
    _check_offsets(offsets)

    memo: Dict[Point, int] = {}
    before = len(model.lookup)
    depth = 0
    while True:
        _walk(model, offsets, depth, memo)
        logger.debug("fill depth %d: %d lattice points, %d shapes", depth, len(memo), len(model.lookup))
        if _covers_viewport(memo, *model.viewport()):
            break
        depth += 1
        if max_depth is not None and depth > max_depth:
            raise FillError(
                f"viewport not covered after {max_depth} passes "
                f"({len(memo)} lattice points visited)"
            )

    added = len(model.lookup) - before
    logger.info("filled viewport at depth %d: %d lattice points, %d shapes added", depth, len(memo), added)
    return FillResult(depth=depth, visited=len(memo), added=added)


def _pattern_offsets(model: "Model", indexes: range) -> List[Point]:
    offsets: List[Point] = []
    for i in indexes:
        if not 0 <= i < len(model.shapes):
            raise OutOfBoundsError(i, len(model.shapes), "model shapes")
        offsets.append(model.shapes[i].center)
    return offsets


def _check_offsets(offsets: List[Point]) -> None:
    """Reject offsets whose non-negative combinations miss part of the plane.

    The walk only ever adds offsets, so it reaches every direction iff
    no half-plane holds all of them: sorted by angle, no gap between
    neighbouring offsets may reach pi.
    """
    import numpy as np

    vectors = np.array([(p.x, p.y) for p in offsets], dtype=float).reshape(-1, 2)
    vectors = vectors[np.hypot(vectors[:, 0], vectors[:, 1]) > _DEGENERATE_TOL]
    if len(vectors) >= 3:
        angles = np.sort(np.arctan2(vectors[:, 1], vectors[:, 0]))
        gaps = np.diff(np.append(angles, angles[0] + 2 * np.pi))
        if gaps.max() < np.pi - _DEGENERATE_TOL:
            return
    raise DegeneratePatternError(
        f"{len(offsets)} pattern offsets do not reach every direction from the origin"
    )


def _walk(model: "Model", offsets: List[Point], depth: int, memo: Dict[Point, int]) -> None:
    """One bounded depth-first pass from the origin.

    Children are pushed in reverse so they are expanded in offset order,
    the same order a recursive walk would take.
    """
    stack = [(Point.origin(), depth)]
    while stack:
        point, budget = stack.pop()
        if budget < 0:
            continue
        previous = memo.get(point, -1)
        if previous >= budget:
            continue
        memo[point] = budget
        if previous == -1:
            _place_copies(model, point)
        for offset in reversed(offsets):
            stack.append((point + offset, budget - 1))


def _place_copies(model: "Model", point: Point) -> None:
    """Materialize the pattern translated by *point*; existing entries win."""
    for shape in model.shapes:
        target = point + shape.center
        if target in model.lookup:
            continue
        model.lookup[target] = shape.clone_at(target)


def _covers_viewport(memo: Dict[Point, int], w: float, h: float) -> bool:
    """True if every viewport corner has a visited point beyond it."""
    import numpy as np

    if not memo:
        return False
    coords = np.array([(p.x, p.y) for p in memo], dtype=float)
    xs, ys = coords[:, 0], coords[:, 1]
    left, right = xs < -w, xs > w
    top, bottom = ys < -h, ys > h
    return bool(
        np.any(left & top)
        and np.any(right & top)
        and np.any(left & bottom)
        and np.any(right & bottom)
    )
