"""Exceptions raised by the tiling core.

Each class also derives from the builtin exception callers would
naturally catch (``IndexError`` for bad handles, ``ValueError`` for bad
parameters), so plain ``except ValueError`` keeps working.
"""

from __future__ import annotations


class TilingError(Exception):
    """Base class for all polytile errors."""


class OutOfBoundsError(TilingError, IndexError):
    """An index exceeded the length of the named collection."""

    def __init__(self, index: int, length: int, name: str) -> None:
        self.index = index
        self.length = length
        self.name = name
        super().__init__(
            f"out of bounds index {index} exceeds length {length} in {name}"
        )


class InvalidShapeError(TilingError, ValueError):
    """A polygon was requested with fewer than three sides."""

    def __init__(self, sides: int) -> None:
        self.sides = sides
        super().__init__(f"invalid shape parameters: {sides} sides (need >= 3)")


class InvalidColorError(TilingError, ValueError):
    """A color component fell outside 0..255."""

    def __init__(self, components: tuple) -> None:
        self.components = components
        super().__init__(f"invalid color parameters: {components!r}")


class DegeneratePatternError(TilingError, ValueError):
    """Pattern offsets do not span two independent directions."""


class FillError(TilingError, RuntimeError):
    """The area fill did not cover the viewport within its depth limit."""
