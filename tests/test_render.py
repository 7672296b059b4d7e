"""Tests for PNG rendering of tilings and their duals."""

import tempfile
from pathlib import Path

import pytest
import matplotlib.pyplot as plt
from PIL import Image

from polytile.errors import OutOfBoundsError
from polytile.model import Model
from polytile.models import Color, Point
from polytile.patterns import build_3636
from polytile.render import Canvas, RenderConfig
from polytile.shape import RegularPolygon

FILL = Color(242, 194, 106)
STROKE = Color(242, 60, 60)
BACKGROUND = Color(10, 20, 30)


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def filled():
    model, handles = build_3636(200, 300, 50.0)
    model.repeat(handles)
    return model


class TestCanvas:
    def test_pixel_size(self, tmp_dir):
        canvas = Canvas(200, 300, 50.0, RenderConfig(background=BACKGROUND))
        out = canvas.write_to_png(tmp_dir / "blank.png")
        with Image.open(out) as image:
            assert image.size == (200, 300)

    def test_background_colour(self, tmp_dir):
        canvas = Canvas(200, 200, 50.0, RenderConfig(background=BACKGROUND))
        out = canvas.write_to_png(tmp_dir / "bg.png")
        with Image.open(out) as image:
            pixel = image.convert("RGB").getpixel((5, 5))
            assert all(abs(a - b) <= 1 for a, b in zip(pixel, (10, 20, 30)))

    def test_paint_fills_center(self, tmp_dir):
        canvas = Canvas(200, 200, 50.0, RenderConfig(background=BACKGROUND))
        shape = RegularPolygon(4, Color(255, 0, 0), Color(255, 0, 0))
        canvas.paint(shape.vertices(), shape.fill, shape.stroke)
        out = canvas.write_to_png(tmp_dir / "square.png")
        with Image.open(out) as image:
            assert image.convert("RGB").getpixel((100, 100)) == (255, 0, 0)

    def test_creates_parent_dirs(self, tmp_dir):
        canvas = Canvas(200, 200, 50.0)
        out = canvas.write_to_png(tmp_dir / "nested" / "deeper" / "x.png")
        assert out.exists()

    def test_label(self, tmp_dir):
        canvas = Canvas(200, 200, 50.0)
        canvas.label("7", Point.origin())
        out = canvas.write_to_png(tmp_dir / "label.png")
        assert out.stat().st_size > 0

    def test_short_ring_rejected(self):
        canvas = Canvas(200, 200, 50.0)
        with pytest.raises(OutOfBoundsError, match="shape points"):
            canvas.paint([Point.origin(), Point(1.0, 0.0)], FILL, STROKE)

    def test_context_manager_writes(self, tmp_dir):
        with Canvas(200, 200, 50.0) as canvas:
            out = canvas.write_to_png(tmp_dir / "ctx.png")
        assert out.exists()


class TestModelRender:
    def test_render_tiling(self, filled, tmp_dir):
        out = filled.render(RenderConfig(background=BACKGROUND)).write_to_png(tmp_dir / "tiling.png")
        with Image.open(out) as image:
            assert image.size == (200, 300)
            assert image.convert("RGB").getpixel((100, 150)) != (10, 20, 30)

    def test_render_with_labels(self, filled, tmp_dir):
        config = RenderConfig(show_labels=True)
        out = filled.render(config).write_to_png(tmp_dir / "labels.png")
        assert out.stat().st_size > 0

    def test_render_dual(self, filled, tmp_dir):
        config = RenderConfig(background=BACKGROUND, margin=0.05)
        out = filled.render_dual(FILL, STROKE, config).write_to_png(tmp_dir / "dual.png")
        with Image.open(out) as image:
            assert image.size == (200, 300)

    def test_render_unfilled_model(self, tmp_dir):
        model = Model(200, 200, 50.0)
        model.add(RegularPolygon(6, FILL, STROKE))
        out = model.render().write_to_png(tmp_dir / "single.png")
        assert out.exists()


class TestFigureLifetime:
    def test_render_without_write_leaves_no_figures(self, filled):
        before = len(plt.get_fignums())
        for _ in range(25):
            filled.render()
            filled.render_dual(FILL, STROKE)
        assert len(plt.get_fignums()) == before

    def test_write_leaves_no_figures(self, filled, tmp_dir):
        before = len(plt.get_fignums())
        for i in range(3):
            filled.render().write_to_png(tmp_dir / f"{i}.png")
        assert len(plt.get_fignums()) == before
