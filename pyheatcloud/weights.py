from __future__ import annotations

import math
from typing import Optional

from .models import Region, WeightOptions
from .random_source import DeterministicRandomSource
from .utils import clamp

DEFAULT_WEIGHT_OPTIONS = WeightOptions()


def center_bias(
    lat: float,
    lon: float,
    region: Region,
    options: Optional[WeightOptions] = None,
) -> float:
    """Linear falloff from 1 at the center to 0 at ``options.falloff`` (normalized)."""
    opt = options or DEFAULT_WEIGHT_OPTIONS
    dx = (lon - region.center_lon) / region.lon_jitter
    dy = (lat - region.center_lat) / region.lat_jitter
    dist = math.sqrt(dx * dx + dy * dy)
    return clamp(1.0 - dist / opt.falloff, 0.0, 1.0)


def assign_weight(
    lat: float,
    lon: float,
    region: Region,
    rng: DeterministicRandomSource,
    options: Optional[WeightOptions] = None,
) -> float:
    """
    Heat weight in [0, 1] for an accepted point.

    Blends the center falloff with one uniform draw from ``rng``:
    ``clamp(bias * center_bias + u * jitter)``. Consumes exactly one variate.
    """
    opt = options or DEFAULT_WEIGHT_OPTIONS
    w0 = center_bias(lat, lon, region, opt)
    return clamp(w0 * opt.center_bias + rng.random() * opt.jitter, 0.0, 1.0)
