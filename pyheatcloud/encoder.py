"""GeoJSON FeatureCollection text encoding for heat points.

The payload is compact JSON with fixed-point numbers: 3 decimals for the
weight property and 6 for coordinates, which are written longitude first.
Numbers are formatted with Python format specs, which never consult the
process locale, so the same points always give the same bytes.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from .errors import InputValidationError
from .models import HeatPoint
from .utils import is_finite

WEIGHT_DECIMALS = 3
COORD_DECIMALS = 6
DEFAULT_PROPERTY = "w"


def _validate(points: Sequence[HeatPoint]) -> None:
    for i, p in enumerate(points):
        if not is_finite(p.lat, p.lon, p.weight):
            raise InputValidationError(
                f"point {i} has non-finite values: "
                f"lat={p.lat!r} lon={p.lon!r} weight={p.weight!r}"
            )


def encode_feature_collection(
    points: Sequence[HeatPoint], property_name: str = DEFAULT_PROPERTY
) -> str:
    """Serialize points to a compact FeatureCollection string.

    Raises InputValidationError if any coordinate or weight is NaN/Infinity;
    nothing is emitted in that case.
    """
    _validate(points)
    prop = json.dumps(str(property_name))

    parts: List[str] = ['{"type":"FeatureCollection","features":[']
    for i, p in enumerate(points):
        if i > 0:
            parts.append(",")
        parts.append('{"type":"Feature","properties":{')
        parts.append(prop)
        parts.append(":")
        parts.append(format(p.weight, f".{WEIGHT_DECIMALS}f"))
        parts.append('},"geometry":{"type":"Point","coordinates":[')
        parts.append(format(p.lon, f".{COORD_DECIMALS}f"))
        parts.append(",")
        parts.append(format(p.lat, f".{COORD_DECIMALS}f"))
        parts.append("]}}")
    parts.append("]}")
    return "".join(parts)


def feature_collection(
    points: Sequence[HeatPoint], property_name: str = DEFAULT_PROPERTY
) -> Dict[str, Any]:
    """Same content as encode_feature_collection, as a dict (rounded floats)."""
    _validate(points)
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {property_name: round(float(p.weight), WEIGHT_DECIMALS)},
                "geometry": {
                    "type": "Point",
                    "coordinates": [
                        round(float(p.lon), COORD_DECIMALS),
                        round(float(p.lat), COORD_DECIMALS),
                    ],
                },
            }
            for p in points
        ],
    }


def decode_feature_collection(
    payload: str, property_name: str = DEFAULT_PROPERTY
) -> List[HeatPoint]:
    """Parse a point FeatureCollection back into HeatPoints."""
    try:
        doc = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"payload is not valid JSON: {e}") from e

    if not isinstance(doc, dict) or doc.get("type") != "FeatureCollection":
        raise InputValidationError("payload is not a FeatureCollection")
    features = doc.get("features")
    if not isinstance(features, list):
        raise InputValidationError("FeatureCollection has no 'features' list")

    out: List[HeatPoint] = []
    for i, feat in enumerate(features):
        try:
            geom = feat["geometry"]
            gtype = geom["type"]
            lon, lat = geom["coordinates"][:2]
            weight = feat["properties"][property_name]
            pt = HeatPoint(float(lat), float(lon), float(weight))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InputValidationError(f"feature {i} is malformed: {e!r}") from e
        if gtype != "Point":
            raise InputValidationError(
                f"feature {i}: expected Point geometry, got {gtype!r}"
            )
        # json.loads accepts NaN / Infinity literals
        if not is_finite(pt.lat, pt.lon, pt.weight):
            raise InputValidationError(f"feature {i} has non-finite values: {pt!r}")
        out.append(pt)
    return out
