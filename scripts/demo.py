"""Build the 3.4.6.4 tiling step by step and render it with its dual."""

import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polytile import Color, Model, RegularPolygon, RenderConfig


def main() -> None:
    width, height, scale = 1024, 1024, 128.0
    stroke = Color(242, 60, 60)
    fill_hexagon = Color(242, 194, 106)
    fill_square = Color(23, 216, 146)
    fill_triangle = Color(242, 209, 48)
    config = RenderConfig(background=Color(242, 242, 242), margin=0.1, line_width=0.1)

    model = Model(width, height, scale)
    model.add(RegularPolygon(6, fill_hexagon, stroke))

    # a square on every side of the hexagon
    squares = model.add_multi(range(0, 1), range(0, 6), RegularPolygon(4, fill_square, stroke))

    # triangles in the gaps between squares
    model.add_multi(squares, range(1, 2), RegularPolygon(3, fill_triangle, stroke))

    # hexagons on the outer edge of each square mark where the pattern repeats
    hexagons = model.add_multi(squares, range(2, 3), RegularPolygon(6, fill_hexagon, stroke))

    result = model.repeat(hexagons)
    print("Shapes:", len(model.lookup), "depth:", result.depth)

    out_dir = ROOT / "exports"
    print("Saved", model.render(config).write_to_png(out_dir / "intro.png"))
    dual = model.render_dual(fill_hexagon, stroke, config)
    print("Saved", dual.write_to_png(out_dir / "intro-dual.png"))


if __name__ == "__main__":
    main()
