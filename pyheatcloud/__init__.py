from .models import (
    HeatPoint,
    Region,
    SamplerOptions,
    WeightOptions,
    SampleResult,
    LatLon,
)
from .errors import (
    HeatCloudError,
    ConfigurationError,
    InputValidationError,
)

from .random_source import DeterministicRandomSource
from .grid import SpatialGrid
from .sampler import PointSampler, sample_points
from .weights import assign_weight, center_bias
from .encoder import (
    encode_feature_collection,
    feature_collection,
    decode_feature_collection,
)
from .sources import HeatmapSource
from .generator import (
    generate_heat_points,
    generate_heat_geojson,
    generate_heatmap_source,
)

__all__ = [
    "HeatPoint",
    "Region",
    "SamplerOptions",
    "WeightOptions",
    "SampleResult",
    "LatLon",
    # Errors
    "HeatCloudError",
    "ConfigurationError",
    "InputValidationError",
    # Sampling building blocks
    "DeterministicRandomSource",
    "SpatialGrid",
    "PointSampler",
    "sample_points",
    "assign_weight",
    "center_bias",
    # Encoding
    "encode_feature_collection",
    "feature_collection",
    "decode_feature_collection",
    # Pipeline
    "HeatmapSource",
    "generate_heat_points",
    "generate_heat_geojson",
    "generate_heatmap_source",
]
