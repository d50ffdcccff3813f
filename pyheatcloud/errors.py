from __future__ import annotations


class HeatCloudError(Exception):
    """Base class for errors raised by pyheatcloud."""


class ConfigurationError(HeatCloudError, ValueError):
    """Invalid generation parameters (jitter, spacing, counts, seed).

    Raised before any sampling starts.
    """


class InputValidationError(HeatCloudError, ValueError):
    """Values that cannot be encoded (NaN/Infinity) or a malformed payload."""
