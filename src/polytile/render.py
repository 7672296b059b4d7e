"""Raster output for tilings (requires matplotlib).

A :class:`Canvas` is a fixed-size pixel surface with its origin at the
center and one pattern unit mapped to ``scale`` pixels. The y axis points
down, so a tiling renders with the same orientation as its coordinates
read on screen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from .errors import OutOfBoundsError
from .models import Color, Point


@dataclass
class RenderConfig:
    """Drawing settings shared by every shape on a canvas.

    Attributes
    ----------
    background : Color
        Canvas fill colour.
    margin : float
        Inset applied to every polygon, in pattern units; leaves a gap
        between neighbours.
    line_width : float
        Stroke width in pattern units.
    show_labels : bool
        Draw shape indices at centers and edge indices near edges.
    font_size : float
        Label size in pixels.
    dpi : int
        Resolution used to convert pixel sizes to points.
    """

    background: Color = field(default_factory=lambda: Color(242, 242, 242))
    margin: float = 0.1
    line_width: float = 0.1
    show_labels: bool = False
    font_size: float = 18.0
    dpi: int = 100


def _ensure_mpl():
    """Lazy-import matplotlib; raise helpful error if missing."""
    try:
        from matplotlib.backends.backend_agg import FigureCanvasAgg
        from matplotlib.figure import Figure
        from matplotlib.patches import Polygon
        return Figure, FigureCanvasAgg, Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc


class Canvas:
    """A *width* x *height* pixel image backed by a matplotlib figure.

    The figure is bound to an Agg canvas directly rather than created
    through pyplot, so no global figure registry holds on to it and no
    GUI backend is involved. Use as a context manager (or call
    :meth:`close`) to drop the drawn artists early.
    """

    def __init__(self, width: int, height: int, scale: float, config: RenderConfig | None = None) -> None:
        figure_cls, agg_cls, self._polygon_cls = _ensure_mpl()
        self.width = width
        self.height = height
        self.scale = scale
        self.config = config or RenderConfig()

        dpi = self.config.dpi
        self._fig = figure_cls(figsize=(width / dpi, height / dpi), dpi=dpi)
        agg_cls(self._fig)
        self._fig.patch.set_facecolor(self.config.background.rgb_unit())
        ax = self._fig.add_axes((0.0, 0.0, 1.0, 1.0))
        w = width / 2 / scale
        h = height / 2 / scale
        ax.set_xlim(-w, w)
        ax.set_ylim(h, -h)
        ax.set_aspect("equal", "box")
        ax.axis("off")
        self._ax = ax

    def _points(self, pixels: float) -> float:
        return pixels * 72.0 / self.config.dpi

    def paint(self, ring: Sequence[Point], fill: Color, stroke: Color) -> None:
        """Fill then stroke the closed point ring."""
        if len(ring) < 3:
            raise OutOfBoundsError(2, len(ring), "shape points")
        patch = self._polygon_cls(
            [(p.x, p.y) for p in ring],
            closed=True,
            facecolor=fill.rgb_unit(),
            edgecolor=stroke.rgb_unit(),
            linewidth=self._points(self.config.line_width * self.scale),
            joinstyle="round",
            capstyle="round",
        )
        self._ax.add_patch(patch)

    def label(self, text: str, point: Point) -> None:
        self._ax.text(
            point.x, point.y, text,
            ha="center", va="center", color="black",
            fontsize=self._points(self.config.font_size),
        )

    def write_to_png(self, path: str | Path) -> Path:
        """Save the canvas as PNG."""
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self._fig.savefig(
            output_path,
            dpi=self.config.dpi,
            facecolor=self._fig.get_facecolor(),
            format="png",
        )
        return output_path

    def close(self) -> None:
        """Discard everything drawn so far."""
        self._fig.clear()

    def __enter__(self) -> "Canvas":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
