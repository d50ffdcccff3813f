#!/usr/bin/env python3
"""Generate the Sulaimaniyah Heatmap Source

This example builds the demo heatmap data source:
- 6000 requested points around Sulaimaniyah (Kurdistan Region, Iraq)
- ~150 m minimum spacing so the heatmap is wide and not clustered
- Center-biased weights stored in the "w" property
- The {id, type, data} message a map renderer consumes as a GeoJSON source

The same seed always produces the same payload, byte for byte.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pyheatcloud import Region, SamplerOptions, PointSampler, encode_feature_collection, HeatmapSource


def main(argv=None):
    """Run the heatmap source example."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--out", type=Path, default=Path("test-heat-src.json"))
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s | %(message)s")

    region = Region(center=(35.5610, 45.4330), lat_jitter=0.05, lon_jitter=0.05)
    options = SamplerOptions(target_count=6000, min_spacing=0.0015, seed=args.seed)

    result = PointSampler(region, options).sample()
    print(
        f"accepted {result.accepted}/{result.requested} points "
        f"in {result.attempts} attempts (saturated={result.saturated})"
    )

    source = HeatmapSource("test-heat-src", encode_feature_collection(result.points))
    args.out.write_text(json.dumps(source.to_js()), encoding="utf-8")
    print(f"wrote {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
