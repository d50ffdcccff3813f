from __future__ import annotations

import logging
from typing import Optional

from .encoder import DEFAULT_PROPERTY, encode_feature_collection
from .models import (
    DEFAULT_ATTEMPT_BUDGET_MULTIPLIER,
    DEFAULT_SEED,
    LatLon,
    Region,
    SampleResult,
    SamplerOptions,
    WeightOptions,
)
from .sampler import PointSampler
from .sources import DEFAULT_SOURCE_ID, HeatmapSource

logger = logging.getLogger(__name__)

# Sulaimaniyah, Kurdistan Region, Iraq
DEFAULT_CENTER: LatLon = (35.5610, 45.4330)
DEFAULT_POINT_COUNT = 6000
DEFAULT_JITTER = 0.05  # ~5.5 km N/S
DEFAULT_MIN_SPACING = 0.0015  # ~150 m


def generate_heat_points(
    center: LatLon,
    target_count: int,
    lat_jitter: float,
    lon_jitter: float,
    min_spacing: float,
    *,
    seed: int = DEFAULT_SEED,
    attempt_budget_multiplier: int = DEFAULT_ATTEMPT_BUDGET_MULTIPLIER,
    weight_options: Optional[WeightOptions] = None,
) -> SampleResult:
    """Sample weighted points; all parameters are validated before sampling."""
    region = Region(center=center, lat_jitter=lat_jitter, lon_jitter=lon_jitter)
    options = SamplerOptions(
        target_count=target_count,
        min_spacing=min_spacing,
        seed=seed,
        attempt_budget_multiplier=attempt_budget_multiplier,
    )
    return PointSampler(region, options, weight_options=weight_options).sample()


def generate_heat_geojson(
    center: LatLon = DEFAULT_CENTER,
    target_count: int = DEFAULT_POINT_COUNT,
    lat_jitter: float = DEFAULT_JITTER,
    lon_jitter: float = DEFAULT_JITTER,
    min_spacing: float = DEFAULT_MIN_SPACING,
    *,
    seed: int = DEFAULT_SEED,
    attempt_budget_multiplier: int = DEFAULT_ATTEMPT_BUDGET_MULTIPLIER,
    property_name: str = DEFAULT_PROPERTY,
    weight_options: Optional[WeightOptions] = None,
) -> str:
    """
    Generate a wide, non-clustered FeatureCollection with varying weights.

    Same arguments (seed included) give byte-identical output. The result may
    hold fewer than ``target_count`` features when the region saturates under
    ``min_spacing`` before the attempt budget runs out.
    """
    result = generate_heat_points(
        center,
        target_count,
        lat_jitter,
        lon_jitter,
        min_spacing,
        seed=seed,
        attempt_budget_multiplier=attempt_budget_multiplier,
        weight_options=weight_options,
    )
    payload = encode_feature_collection(result.points, property_name=property_name)
    logger.debug("encoded %d features (%d bytes)", result.accepted, len(payload))
    return payload


def generate_heatmap_source(
    source_id: str = DEFAULT_SOURCE_ID, **kwargs
) -> HeatmapSource:
    """generate_heat_geojson(**kwargs) wrapped as a renderer data source."""
    return HeatmapSource(source_id, generate_heat_geojson(**kwargs))
