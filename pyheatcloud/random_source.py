from __future__ import annotations

import numpy as np

from .errors import ConfigurationError
from .models import UINT64_MAX
from .utils import require_int


class DeterministicRandomSource:
    """Seeded uniform variates in [0, 1).

    Backed by numpy's PCG64 bit generator, whose stream does not depend on
    platform. Doubles are drawn in blocks and handed out one at a time; the
    block size does not affect the sequence.
    """

    def __init__(self, seed: int, block_size: int = 4096) -> None:
        self._seed = require_int("seed", seed, 0, UINT64_MAX)
        if int(block_size) <= 0:
            raise ConfigurationError(f"block_size must be > 0, got {block_size}")
        self._block_size = int(block_size)
        self._gen = np.random.Generator(np.random.PCG64(self._seed))
        self._buf = np.empty(0, dtype=np.float64)
        self._pos = 0

    @property
    def seed(self) -> int:
        return self._seed

    def random(self) -> float:
        if self._pos >= self._buf.shape[0]:
            self._buf = self._gen.random(self._block_size)
            self._pos = 0
        v = float(self._buf[self._pos])
        self._pos += 1
        return v

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        return low + (high - low) * self.random()
