from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .encoder import DEFAULT_PROPERTY
from .errors import HeatCloudError
from .generator import (
    DEFAULT_CENTER,
    DEFAULT_JITTER,
    DEFAULT_MIN_SPACING,
    DEFAULT_POINT_COUNT,
    generate_heat_geojson,
)
from .models import DEFAULT_ATTEMPT_BUDGET_MULTIPLIER, DEFAULT_SEED
from .sources import DEFAULT_SOURCE_ID, HeatmapSource

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int = 0) -> None:
    """Console logging for the command line tool (stderr, payload stays on stdout)."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyheatcloud",
        description="Generate a deterministic weighted point FeatureCollection for heatmaps.",
    )
    parser.add_argument("--lat", type=float, default=DEFAULT_CENTER[0], help="Center latitude")
    parser.add_argument("--lon", type=float, default=DEFAULT_CENTER[1], help="Center longitude")
    parser.add_argument("--count", type=int, default=DEFAULT_POINT_COUNT, help="Target point count")
    parser.add_argument("--lat-jitter", type=float, default=DEFAULT_JITTER, help="Half-height in degrees")
    parser.add_argument("--lon-jitter", type=float, default=DEFAULT_JITTER, help="Half-width in degrees")
    parser.add_argument(
        "--min-spacing", type=float, default=DEFAULT_MIN_SPACING,
        help="Minimum distance between points in degrees (0 disables)",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument(
        "--attempt-multiplier", type=int, default=DEFAULT_ATTEMPT_BUDGET_MULTIPLIER,
        help="Candidates drawn per requested point at most",
    )
    parser.add_argument("--property", default=DEFAULT_PROPERTY, help="Weight property name")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: stdout)")
    parser.add_argument(
        "--wrap", action="store_true",
        help="Emit a data source message {id, type, data} instead of the bare payload",
    )
    parser.add_argument("--source-id", default=DEFAULT_SOURCE_ID, help="Source id used with --wrap")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        payload = generate_heat_geojson(
            (args.lat, args.lon),
            args.count,
            args.lat_jitter,
            args.lon_jitter,
            args.min_spacing,
            seed=args.seed,
            attempt_budget_multiplier=args.attempt_multiplier,
            property_name=args.property,
        )
        if args.wrap:
            payload = json.dumps(HeatmapSource(args.source_id, payload).to_js())
    except HeatCloudError as e:
        print(f"pyheatcloud: error: {e}", file=sys.stderr)
        return 2

    if args.output is None:
        sys.stdout.write(payload)
        sys.stdout.write("\n")
    else:
        args.output.write_text(payload, encoding="utf-8")
        logger.info("wrote %d bytes to %s", len(payload), args.output)
    return 0
