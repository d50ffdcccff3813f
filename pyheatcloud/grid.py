from __future__ import annotations

import logging
import math
from typing import Dict, Iterator, List, Tuple

import numpy as np

from .errors import ConfigurationError
from .models import HeatPoint

logger = logging.getLogger(__name__)

CellKey = Tuple[int, int]  # (gx, gy) - column from lon, row from lat

# Cells scanned on each side of the candidate's cell.
NEIGHBOR_REACH = 2


class SpatialGrid:
    """Append-only uniform bucket index over (lat, lon) points.

    Cells are squares of side ``cell_size`` anchored at ``(lat_min, lon_min)``.
    With ``cell_size = spacing / sqrt(2)`` every point within ``spacing`` of a
    candidate lies within two cells of it on each axis, so a 5x5 block scan is
    enough for the neighbor test.
    """

    def __init__(self, lat_min: float, lon_min: float, cell_size: float) -> None:
        cell = float(cell_size)
        if not np.isfinite(cell) or cell <= 0.0:
            raise ConfigurationError(f"cell_size must be finite and > 0, got {cell_size}")
        self.lat_min = float(lat_min)
        self.lon_min = float(lon_min)
        self.cell_size = cell
        self._cells: Dict[CellKey, List[HeatPoint]] = {}
        self._count = 0

    @staticmethod
    def can_index(spacing: float, extent: float) -> bool:
        """True when cells of side spacing/sqrt(2) give finite keys across extent."""
        cell = float(spacing) / math.sqrt(2.0)
        # doubled so points rounded just past the edge still get finite keys
        return cell > 0.0 and bool(np.isfinite(2.0 * float(extent) / cell))

    @classmethod
    def for_spacing(cls, lat_min: float, lon_min: float, spacing: float) -> "SpatialGrid":
        grid = cls(lat_min, lon_min, float(spacing) / math.sqrt(2.0))
        logger.debug(
            "grid origin=(%.6f, %.6f) cell_size=%.8f for spacing %.8f",
            grid.lat_min, grid.lon_min, grid.cell_size, spacing,
        )
        return grid

    def __len__(self) -> int:
        return self._count

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    def cell_key(self, lat: float, lon: float) -> CellKey:
        gx = math.floor((lon - self.lon_min) / self.cell_size)
        gy = math.floor((lat - self.lat_min) / self.cell_size)
        return (gx, gy)

    def insert(self, point: HeatPoint) -> None:
        key = self.cell_key(point.lat, point.lon)
        self._cells.setdefault(key, []).append(point)
        self._count += 1

    def query_neighbors(self, lat: float, lon: float) -> Iterator[HeatPoint]:
        """Yield points stored in the 5x5 block of cells around (lat, lon)."""
        gx, gy = self.cell_key(lat, lon)
        cells = self._cells
        for dx in range(-NEIGHBOR_REACH, NEIGHBOR_REACH + 1):
            for dy in range(-NEIGHBOR_REACH, NEIGHBOR_REACH + 1):
                bucket = cells.get((gx + dx, gy + dy))
                if bucket:
                    yield from bucket

    def has_neighbor_within(self, lat: float, lon: float, radius: float) -> bool:
        """True as soon as one stored point is strictly closer than radius."""
        for p in self.query_neighbors(lat, lon):
            dlat = lat - p.lat
            dlon = lon - p.lon
            if math.sqrt(dlat * dlat + dlon * dlon) < radius:
                return True
        return False
