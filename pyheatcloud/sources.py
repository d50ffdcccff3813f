from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .errors import ConfigurationError

DEFAULT_SOURCE_ID = "test-heat-src"


@dataclass(frozen=True)
class HeatmapSource:
    """
    GeoJSON data source handed to an external map renderer.

    source_id: identifier the renderer's heatmap layer refers to
    data: FeatureCollection text produced by encode_feature_collection
    """
    source_id: str
    data: str

    def __post_init__(self) -> None:
        if not str(self.source_id).strip():
            raise ConfigurationError("source_id must be a non-empty string")

    def to_js(self) -> Dict[str, Any]:
        return {"id": str(self.source_id), "type": "geojson", "data": self.data}
