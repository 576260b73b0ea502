from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from chartcanvas.raster import RasterSurface
from chartcanvas.registry import SurfaceRegistry
from chartcanvas.render import plot_bar_graph, plot_line_graph


SURFACE_ID = "cli"


def _split_labels(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",")]


def _split_numbers(raw: str) -> list[float]:
    try:
        return [float(item) for item in raw.split(",") if item.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma separated numbers, got {raw!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chartcanvas", description="Render bar and line charts to PNG.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log render details.")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common(cmd: argparse.ArgumentParser, *, padding: float) -> None:
        cmd.add_argument("--out", type=Path, required=True, help="Destination PNG path.")
        cmd.add_argument("--width", type=int, default=640)
        cmd.add_argument("--height", type=int, default=400)
        cmd.add_argument("--padding", type=float, default=padding)
        cmd.add_argument("--title", default="")
        cmd.add_argument("--x-label", default="")
        cmd.add_argument("--y-label", default="")
        cmd.add_argument("--background", default=None, help="Background color, e.g. '#ffffff'.")

    bar = sub.add_parser("bar", help="Grouped bar chart with 1-3 series.")
    add_common(bar, padding=60.0)
    bar.add_argument("--categories", type=_split_labels, required=True, help="Comma separated category labels.")
    bar.add_argument(
        "--series",
        type=_split_numbers,
        action="append",
        required=True,
        help="Comma separated values; repeat for each series.",
    )
    bar.add_argument("--legend", type=_split_labels, default=None, help="Comma separated series labels.")
    bar.add_argument("--bar-width", type=float, default=0.7)
    bar.add_argument("--grid-lines", action="store_true")
    bar.add_argument("--hide-values", action="store_true")

    line = sub.add_parser("line", help="Single-series line chart.")
    add_common(line, padding=20.0)
    line.add_argument("--y", type=_split_numbers, required=True, help="Comma separated y values.")
    line.add_argument("--x", type=_split_numbers, default=None, help="Comma separated x values (default 1..N).")
    line.add_argument("--color", default=None)
    line.add_argument("--line-width", type=float, default=2.0)
    line.add_argument("--point-radius", type=float, default=4.0)
    line.add_argument("--hide-points", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    registry = SurfaceRegistry()
    surface = RasterSurface(args.width, args.height)
    registry.register(SURFACE_ID, surface)
    options: dict[str, Any] = {
        "padding": args.padding,
        "title": args.title,
        "x_label": args.x_label,
        "y_label": args.y_label,
    }
    if args.background is not None:
        options["background_color"] = args.background

    if args.command == "bar":
        options.update(
            bar_width=args.bar_width,
            grid_lines=args.grid_lines,
            show_values=not args.hide_values,
        )
        if args.legend is not None:
            options["legend"] = args.legend
        result = plot_bar_graph(SURFACE_ID, args.categories, args.series, options, registry=registry)
    else:
        options.update(
            line_width=args.line_width,
            point_radius=args.point_radius,
            show_points=not args.hide_points,
        )
        if args.x is not None:
            options["x_values"] = args.x
        if args.color is not None:
            options["color"] = args.color
        result = plot_line_graph(SURFACE_ID, args.y, options, registry=registry)

    if result is None:
        return 1
    surface.to_image().save(args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
