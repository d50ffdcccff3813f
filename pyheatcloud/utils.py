from __future__ import annotations

from typing import Any

import numpy as np

from .errors import ConfigurationError


def clamp(value: float, vmin: float = 0.0, vmax: float = 1.0) -> float:
    """Clamp numeric values to [vmin, vmax]."""
    lo = float(vmin)
    hi = float(vmax)
    if lo > hi:
        lo, hi = hi, lo

    try:
        v = float(value)
    except (TypeError, ValueError):
        return lo

    if not np.isfinite(v):
        return lo

    return float(np.clip(v, lo, hi))


def is_finite(*values: float) -> bool:
    """True when every value converts to a finite float."""
    try:
        return bool(np.all(np.isfinite(np.asarray(values, dtype=np.float64))))
    except (TypeError, ValueError):
        return False


def require_finite(name: str, value: Any) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from e
    if not np.isfinite(v):
        raise ConfigurationError(f"{name} must be finite, got {v}")
    return v


def require_int(name: str, value: Any, lo: int, hi: int) -> int:
    """Validate an integer parameter in [lo, hi]; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    v = int(value)
    if v < lo or v > hi:
        raise ConfigurationError(f"{name} must be in [{lo}, {hi}], got {v}")
    return v
