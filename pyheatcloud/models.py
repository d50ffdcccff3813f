from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import ConfigurationError
from .utils import require_finite, require_int

LatLon = Tuple[float, float]  # (lat, lon) - Public API uses latitude first

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
# Upper bound for target_count * attempt_budget_multiplier.
MAX_ATTEMPTS = 2**31 - 1

DEFAULT_SEED = 42
DEFAULT_ATTEMPT_BUDGET_MULTIPLIER = 20


@dataclass(frozen=True)
class HeatPoint:
    """A single accepted sample.

    Attributes:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        weight: Heat weight in [0, 1].
    """

    lat: float
    lon: float
    weight: float = 0.0


@dataclass(frozen=True)
class Region:
    """
    Axis-aligned sampling box around a center.

    center: (lat, lon)
    lat_jitter / lon_jitter: half-extents in degrees, both > 0
    """
    center: LatLon
    lat_jitter: float
    lon_jitter: float

    def __post_init__(self) -> None:
        try:
            lat, lon = self.center
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"center must be a (lat, lon) pair, got {self.center!r}"
            ) from e
        lat = require_finite("center latitude", lat)
        lon = require_finite("center longitude", lon)
        lat_j = require_finite("lat_jitter", self.lat_jitter)
        lon_j = require_finite("lon_jitter", self.lon_jitter)
        if lat_j <= 0.0:
            raise ConfigurationError(f"lat_jitter must be > 0, got {lat_j}")
        if lon_j <= 0.0:
            raise ConfigurationError(f"lon_jitter must be > 0, got {lon_j}")
        # normalize to floats; frozen dataclass needs object.__setattr__
        object.__setattr__(self, "center", (lat, lon))
        object.__setattr__(self, "lat_jitter", lat_j)
        object.__setattr__(self, "lon_jitter", lon_j)

    @property
    def center_lat(self) -> float:
        return self.center[0]

    @property
    def center_lon(self) -> float:
        return self.center[1]

    @property
    def lat_min(self) -> float:
        return self.center_lat - self.lat_jitter

    @property
    def lat_max(self) -> float:
        return self.center_lat + self.lat_jitter

    @property
    def lon_min(self) -> float:
        return self.center_lon - self.lon_jitter

    @property
    def lon_max(self) -> float:
        return self.center_lon + self.lon_jitter

    @property
    def extent_lonlat(self) -> Tuple[float, float, float, float]:
        """(minlon, minlat, maxlon, maxlat)"""
        return (self.lon_min, self.lat_min, self.lon_max, self.lat_max)

    def contains(self, lat: float, lon: float) -> bool:
        """Inclusive bounds test."""
        return (
            self.lat_min <= lat <= self.lat_max
            and self.lon_min <= lon <= self.lon_max
        )


@dataclass(frozen=True)
class SamplerOptions:
    """
    Rejection sampler settings.

    target_count: number of points requested (best effort)
    min_spacing: minimum pairwise distance in degrees; 0 disables spacing
    seed: random seed for reproducible output
    attempt_budget_multiplier: candidates drawn per requested point at most
    """
    target_count: int
    min_spacing: float = 0.0
    seed: int = DEFAULT_SEED
    attempt_budget_multiplier: int = DEFAULT_ATTEMPT_BUDGET_MULTIPLIER

    def __post_init__(self) -> None:
        count = require_int("target_count", self.target_count, 0, UINT32_MAX)
        mult = require_int(
            "attempt_budget_multiplier", self.attempt_budget_multiplier, 0, UINT32_MAX
        )
        seed = require_int("seed", self.seed, 0, UINT64_MAX)
        spacing = require_finite("min_spacing", self.min_spacing)
        if spacing < 0.0:
            raise ConfigurationError(f"min_spacing must be >= 0, got {spacing}")
        if count * mult > MAX_ATTEMPTS:
            raise ConfigurationError(
                f"attempt budget {count} * {mult} exceeds {MAX_ATTEMPTS}"
            )
        object.__setattr__(self, "target_count", count)
        object.__setattr__(self, "attempt_budget_multiplier", mult)
        object.__setattr__(self, "seed", seed)
        object.__setattr__(self, "min_spacing", spacing)

    @property
    def max_attempts(self) -> int:
        return self.target_count * self.attempt_budget_multiplier


@dataclass(frozen=True)
class WeightOptions:
    """
    Weight blend constants.

    falloff: normalized radial distance (in jitter units) at which the
        center bias drops to 0
    center_bias / jitter: blend of deterministic falloff and random jitter
    """
    falloff: float = 1.8
    center_bias: float = 0.6
    jitter: float = 0.4

    def __post_init__(self) -> None:
        falloff = require_finite("falloff", self.falloff)
        if falloff <= 0.0:
            raise ConfigurationError(f"falloff must be > 0, got {falloff}")
        object.__setattr__(self, "falloff", falloff)
        for name in ("center_bias", "jitter"):
            v = require_finite(name, getattr(self, name))
            if v < 0.0:
                raise ConfigurationError(f"{name} must be >= 0, got {v}")
            object.__setattr__(self, name, v)


@dataclass
class SampleResult:
    """
    Outcome of one sampling run.

    Fewer points than requested is a valid, saturated result.
    """
    points: List[HeatPoint] = field(default_factory=list)
    requested: int = 0
    attempts: int = 0
    rejected_out_of_bounds: int = 0
    rejected_spacing: int = 0

    @property
    def accepted(self) -> int:
        return len(self.points)

    @property
    def saturated(self) -> bool:
        return self.accepted < self.requested
