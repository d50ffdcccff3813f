"""Shared pytest fixtures: the reference heatmap scenario and invariant checks."""

from typing import Callable, Sequence

import numpy as np
import pytest

from pyheatcloud import HeatPoint, Region, SamplerOptions


@pytest.fixture
def reference_region() -> Region:
    """Sulaimaniyah box used by the demo heatmap."""
    return Region(center=(35.5610, 45.4330), lat_jitter=0.05, lon_jitter=0.05)


@pytest.fixture
def reference_options() -> SamplerOptions:
    return SamplerOptions(target_count=6000, min_spacing=0.0015, seed=42)


def _min_pairwise_distance(points: Sequence[HeatPoint], chunk: int = 256) -> float:
    if len(points) < 2:
        return float("inf")
    xy = np.array([(p.lat, p.lon) for p in points], dtype=np.float64)
    best = float("inf")
    for start in range(0, xy.shape[0], chunk):
        block = xy[start : start + chunk]
        # compare block against every later point (and itself, upper triangle)
        rest = xy[start:]
        d = np.sqrt(((block[:, None, :] - rest[None, :, :]) ** 2).sum(axis=2))
        idx = np.arange(block.shape[0])
        d[idx, idx] = np.inf
        d[np.tril_indices(block.shape[0], k=-1, m=rest.shape[0])] = np.inf
        best = min(best, float(d.min()))
    return best


@pytest.fixture
def min_pairwise_distance() -> Callable[[Sequence[HeatPoint]], float]:
    """Brute-force minimum distance between any two distinct points."""
    return _min_pairwise_distance
