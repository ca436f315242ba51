from __future__ import annotations

import argparse
import csv
import logging
import math
from pathlib import Path
import sys
from typing import Sequence, TextIO

from dotchart.api import chart
from dotchart.chart import Chart
from dotchart.colors import Color
from dotchart.errors import ChartConfigError, ColorParseError, PlotDataError
from dotchart.shapes import Shape


DEMO_POINTS = [(-5.0, 3.0), (3.3, 2.0), (10.0, 6.0)]


def _read_points(stream: TextIO) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = []
    for lineno, row in enumerate(csv.reader(stream), start=1):
        if not row or row[0].lstrip().startswith("#"):
            continue
        if len(row) < 2:
            raise PlotDataError(f"line {lineno}: expected `x,y`, got {row!r}")
        rows.append((row[0].strip(), row[1].strip()))
    return rows


def _run_demo(out: TextIO) -> None:
    for shape in Shape:
        print(f"\n{shape.value}", file=out)
        Chart.default().set_data(DEMO_POINTS).add_layer(shape).nice(file=out)

    # layers share one dataset, so an overlay restyles the same series
    print("\ny = cos(x) as red steps under blue points", file=out)
    overlay = Chart.with_range(180, 60, x_range=(-5.0, 5.0))
    overlay.set_function(math.cos, count=40)
    overlay.add_layer(Shape.STEPS, Color.from_hex("#ff0000"))
    overlay.add_layer(Shape.POINTS, Color.from_rgb(0, 0, 255))
    overlay.display(file=out)


def _run_plot(args: argparse.Namespace, out: TextIO) -> None:
    if args.input is None or str(args.input) == "-":
        rows = _read_points(sys.stdin)
    else:
        with Path(args.input).open("r", encoding="utf-8", newline="") as f:
            rows = _read_points(f)

    c = chart(args.width, args.height, config=args.config)
    if args.no_axis:
        c.hide_axis()
    c.set_data(rows)
    for shape in args.shape or [Shape.LINES.value]:
        c.add_layer(shape, args.color)
    if args.border:
        c.nice(file=out)
    else:
        c.display(file=out)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dotchart")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging on stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("demo", help="Draw every shape on a sample dataset plus a colored overlay.")

    plot = sub.add_parser("plot", help="Plot `x,y` rows read from a CSV file or stdin.")
    plot.add_argument("input", nargs="?", type=Path, default=None, help="CSV file; `-` or omitted reads stdin.")
    plot.add_argument(
        "--shape",
        action="append",
        choices=[s.value for s in Shape],
        default=None,
        help="Layer shape; repeat to overlay several layers. Default: lines.",
    )
    plot.add_argument("--color", default=None, help="Hex color (`#rrggbb`) for every layer.")
    plot.add_argument("--width", type=int, default=None)
    plot.add_argument("--height", type=int, default=None)
    plot.add_argument("--config", type=Path, default=None, help="TOML chart config.")
    plot.add_argument("--no-axis", action="store_true")
    plot.add_argument("--border", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    out = out or sys.stdout
    try:
        if args.command == "demo":
            _run_demo(out)
        else:
            _run_plot(args, out)
    except (ChartConfigError, ColorParseError, PlotDataError, FileNotFoundError) as exc:
        print(f"dotchart: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
