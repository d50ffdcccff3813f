from __future__ import annotations

import logging
from typing import Callable, Optional

from .grid import SpatialGrid
from .models import HeatPoint, Region, SampleResult, SamplerOptions, WeightOptions
from .random_source import DeterministicRandomSource
from .weights import assign_weight

logger = logging.getLogger(__name__)

# (lat, lon) -> weight
Weigher = Callable[[float, float], float]


class PointSampler:
    """Best-effort rejection sampler with a minimum pairwise spacing.

    Each attempt draws a latitude and then a longitude uniformly inside the
    region. A candidate is dropped when it falls outside the box (rounding at
    the edges) or lies closer than ``min_spacing`` to an accepted point.
    Accepted candidates are weighted, appended and indexed in the grid.

    Sampling stops once ``target_count`` points are accepted or
    ``target_count * attempt_budget_multiplier`` candidates were drawn.
    Running out of attempts is saturation, not an error.
    """

    def __init__(
        self,
        region: Region,
        options: SamplerOptions,
        rng: Optional[DeterministicRandomSource] = None,
        *,
        weight_options: Optional[WeightOptions] = None,
        weigher: Optional[Weigher] = None,
    ) -> None:
        self.region = region
        self.options = options
        self.rng = rng or DeterministicRandomSource(options.seed)
        self.weight_options = weight_options or WeightOptions()
        self._weigher = weigher

    def _weight(self, lat: float, lon: float) -> float:
        if self._weigher is not None:
            return float(self._weigher(lat, lon))
        return assign_weight(lat, lon, self.region, self.rng, self.weight_options)

    def sample(self) -> SampleResult:
        region = self.region
        opt = self.options
        rng = self.rng
        spacing = opt.min_spacing
        target = opt.target_count
        max_attempts = opt.max_attempts

        result = SampleResult(requested=target)
        points = result.points

        # spacing 0 can never reject, and a spacing too small for finite cell
        # keys only rejects exact duplicates; both sample without the index
        extent = 2.0 * max(region.lat_jitter, region.lon_jitter)
        grid = (
            SpatialGrid.for_spacing(region.lat_min, region.lon_min, spacing)
            if SpatialGrid.can_index(spacing, extent) else None
        )
        logger.debug(
            "sampling target=%d spacing=%.8f max_attempts=%d", target, spacing, max_attempts
        )

        c_lat, c_lon = region.center
        lat_j, lon_j = region.lat_jitter, region.lon_jitter
        attempts = 0
        while len(points) < target and attempts < max_attempts:
            attempts += 1
            lat = c_lat + (rng.random() * 2.0 - 1.0) * lat_j
            lon = c_lon + (rng.random() * 2.0 - 1.0) * lon_j

            if not region.contains(lat, lon):
                result.rejected_out_of_bounds += 1
                continue

            if grid is not None and grid.has_neighbor_within(lat, lon, spacing):
                result.rejected_spacing += 1
                continue

            pt = HeatPoint(lat, lon, self._weight(lat, lon))
            points.append(pt)
            if grid is not None:
                grid.insert(pt)

        result.attempts = attempts

        if result.saturated:
            logger.info(
                "attempt budget exhausted: accepted %d of %d requested after %d attempts "
                "(%d spacing rejections)",
                result.accepted, target, attempts, result.rejected_spacing,
            )
        else:
            logger.info("accepted %d points in %d attempts", result.accepted, attempts)
        return result


def sample_points(
    region: Region,
    options: SamplerOptions,
    weight_options: Optional[WeightOptions] = None,
) -> SampleResult:
    return PointSampler(region, options, weight_options=weight_options).sample()
