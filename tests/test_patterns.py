"""Tests for the built-in tiling catalog."""

import pytest

from polytile.patterns import PATTERNS, Palette, build_pattern

# Polygons meeting at each vertex of the tiling.
VALENCE = {
    "3.4.6.4": 4,
    "3.6.3.6": 4,
    "3.3.4.3.4": 5,
    "3.3.3.3.6": 5,
    "3.3.3.3.3.3": 6,
}


@pytest.mark.parametrize("name", sorted(PATTERNS))
def test_pattern_fills(name):
    model, handles = build_pattern(name, 256, 256, 64.0)
    assert len(handles) > 0
    result = model.repeat(handles)
    assert result.added > 0


@pytest.mark.parametrize("name", sorted(PATTERNS))
def test_dual_rings_bounded_by_valence(name):
    model, handles = build_pattern(name, 512, 512, 64.0)
    model.repeat(handles)
    palette = Palette()
    sizes = [len(d.points) for d in model.dual(palette.fill_0, palette.stroke)]
    assert sizes
    assert max(sizes) == VALENCE[name] + 1
    assert min(sizes) >= 4


@pytest.mark.parametrize("name", sorted(PATTERNS))
def test_no_overlapping_shapes(name):
    model, handles = build_pattern(name, 256, 256, 64.0)
    model.repeat(handles)
    # Every vertex is shared by at most VALENCE polygons.
    from polytile.dual import vertex_incidence

    incidence = vertex_incidence(model.lookup.values())
    assert max(len(shapes) for shapes in incidence.values()) == VALENCE[name]


def test_unknown_pattern():
    with pytest.raises(KeyError, match="Unknown pattern"):
        build_pattern("4.8.8", 256, 256, 64.0)


def test_palette_applied():
    palette = Palette()
    model, _ = build_pattern("3.4.6.4", 256, 256, 64.0, palette)
    assert model.shapes[0].fill == palette.fill_0
    assert all(s.stroke == palette.stroke for s in model.shapes)
