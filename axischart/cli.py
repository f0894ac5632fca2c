from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence

from axischart.adapters import normalize_series
from axischart.api import chart
from axischart.bounds import DEFAULT_GRID_STEP, compute_bounds
from axischart.config import CHART_TYPES
from axischart.grid import horizontal_gridline_count, vertical_gridline_count


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="axischart")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    bounds = sub.add_parser("bounds", help="Print nice axis bounds and gridline counts as JSON.")
    bounds.add_argument("data", help="JSON file of [x, y] pairs or {x, y} objects; '-' reads stdin.")
    bounds.add_argument("--grid-step", type=int, default=DEFAULT_GRID_STEP)
    bounds.add_argument("--tight", action="store_true", help="Hug the rounded data extent.")
    bounds.add_argument(
        "--no-anchor-zero",
        dest="anchor_zero",
        action="store_false",
        help="Keep the data minimum as the floor for non-negative data.",
    )

    render = sub.add_parser("render", help="Render a chart to PNG.")
    render.add_argument("data", help="JSON file of [x, y] pairs or {x, y} objects; '-' reads stdin.")
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--type", dest="chart_type", choices=list(CHART_TYPES), default="bar")
    render.add_argument("--width", type=int, default=640)
    render.add_argument("--height", type=int, default=400)
    render.add_argument("--grid-step", type=int, default=DEFAULT_GRID_STEP)
    render.add_argument("--tight", action="store_true")
    render.add_argument("--title", default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        data = _load_points(args.data)
        if args.command == "bounds":
            _print_bounds(data, grid_step=args.grid_step, tight=args.tight, anchor_zero=args.anchor_zero)
            return 0
        out = chart(
            data,
            chart_type=args.chart_type,
            width=args.width,
            height=args.height,
            vertical_grid_step=args.grid_step,
            tight_bounds=args.tight,
            chart_title=args.title,
        ).save_png(args.out)
        LOGGER.info("wrote %s", out)
        return 0
    except (OSError, ValueError) as exc:
        print(f"axischart: error: {exc}", file=sys.stderr)
        return 2


def _load_points(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _print_bounds(data: Any, *, grid_step: int, tight: bool, anchor_zero: bool) -> None:
    series = normalize_series(data)
    bounds = compute_bounds(series, grid_step, tight, anchor_zero=anchor_zero)
    payload = {
        "min": None if bounds.is_empty else bounds.min,
        "max": None if bounds.is_empty else bounds.max,
        "empty": bounds.is_empty,
        "horizontal_gridlines": horizontal_gridline_count(bounds, grid_step, series),
        "vertical_gridlines": vertical_gridline_count(series),
    }
    print(json.dumps(payload, sort_keys=True))
