"""polytile command-line interface."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .errors import TilingError
from .models import Color
from .patterns import PATTERNS, Palette, build_pattern
from .render import RenderConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tilings of regular polygons")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log fill progress")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List the built-in tilings")

    render = sub.add_parser("render", help="Fill a built-in tiling and render it to PNG")
    render.add_argument("--pattern", required=True, choices=sorted(PATTERNS))
    render.add_argument("--out", dest="output_path", required=True)
    render.add_argument("--dual-out", dest="dual_path")
    render.add_argument("--width", type=int, default=1024)
    render.add_argument("--height", type=int, default=1024)
    render.add_argument("--scale", type=float, default=128.0)
    render.add_argument("--margin", type=float, default=0.1)
    render.add_argument("--line-width", type=float, default=0.1)
    render.add_argument("--background", help="Background colour as #rrggbb")
    render.add_argument("--labels", action="store_true", help="Label shapes and edges")
    render.add_argument("--max-depth", type=int, default=None,
                        help="Give up filling after this many passes")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "list":
        for name in PATTERNS:
            print(name)

    elif args.command == "render":
        try:
            _cmd_render(args)
        except TilingError as exc:
            print(exc)
            raise SystemExit(1)


def _cmd_render(args) -> None:
    palette = Palette()
    background = Color.from_hex(args.background) if args.background else palette.background
    config = RenderConfig(
        background=background,
        margin=args.margin,
        line_width=args.line_width,
        show_labels=args.labels,
    )

    model, handles = build_pattern(args.pattern, args.width, args.height, args.scale, palette)
    fill_kwargs = {"max_depth": args.max_depth} if args.max_depth is not None else {}
    result = model.repeat(handles, **fill_kwargs)
    print(f"Filled {args.pattern}: {len(model.lookup)} shapes (depth {result.depth})")

    with model.render(config) as canvas:
        canvas.write_to_png(args.output_path)
    print(f"Saved {args.output_path}")

    if args.dual_path:
        with model.render_dual(palette.fill_0, palette.stroke, config) as canvas:
            canvas.write_to_png(args.dual_path)
        print(f"Saved {args.dual_path}")


if __name__ == "__main__":
    main()
