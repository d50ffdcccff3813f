"""Tests for the configuration dataclasses in pyheatcloud.models."""

import math

import pytest

from pyheatcloud import (
    ConfigurationError,
    HeatPoint,
    Region,
    SampleResult,
    SamplerOptions,
    WeightOptions,
)
from pyheatcloud.models import MAX_ATTEMPTS


class TestRegion:
    """Region bounds and validation."""

    def test_bounds(self):
        r = Region(center=(10.0, 20.0), lat_jitter=1.0, lon_jitter=2.0)
        assert r.center_lat == 10.0
        assert r.center_lon == 20.0
        assert (r.lat_min, r.lat_max) == (9.0, 11.0)
        assert (r.lon_min, r.lon_max) == (18.0, 22.0)
        assert r.extent_lonlat == (18.0, 9.0, 22.0, 11.0)

    def test_contains_is_inclusive(self):
        """Points exactly on the box edge count as inside."""
        r = Region(center=(0.0, 0.0), lat_jitter=1.0, lon_jitter=1.0)
        assert r.contains(1.0, -1.0)
        assert r.contains(0.0, 0.0)
        assert not r.contains(1.0000001, 0.0)
        assert not r.contains(0.0, -1.0000001)

    def test_center_is_normalized_to_floats(self):
        r = Region(center=[1, 2], lat_jitter=1, lon_jitter=1)
        assert r.center == (1.0, 2.0)
        assert isinstance(r.lat_jitter, float)

    @pytest.mark.parametrize(
        "lat_jitter, lon_jitter",
        [(0.0, 1.0), (1.0, 0.0), (-0.1, 1.0), (math.nan, 1.0), (1.0, math.inf)],
    )
    def test_non_positive_or_non_finite_jitter(self, lat_jitter, lon_jitter):
        with pytest.raises(ConfigurationError):
            Region(center=(0.0, 0.0), lat_jitter=lat_jitter, lon_jitter=lon_jitter)

    @pytest.mark.parametrize("center", [(0.0,), (math.nan, 0.0), None, ("a", 1.0)])
    def test_bad_center(self, center):
        with pytest.raises(ConfigurationError):
            Region(center=center, lat_jitter=1.0, lon_jitter=1.0)

    def test_configuration_error_is_value_error(self):
        """Callers catching ValueError keep working."""
        with pytest.raises(ValueError):
            Region(center=(0.0, 0.0), lat_jitter=0.0, lon_jitter=1.0)


class TestSamplerOptions:
    """Sampler option validation and the attempt budget."""

    def test_defaults(self):
        opt = SamplerOptions(target_count=10)
        assert opt.min_spacing == 0.0
        assert opt.seed == 42
        assert opt.attempt_budget_multiplier == 20
        assert opt.max_attempts == 200

    def test_zero_target(self):
        assert SamplerOptions(target_count=0).max_attempts == 0

    def test_negative_spacing(self):
        with pytest.raises(ConfigurationError):
            SamplerOptions(target_count=1, min_spacing=-0.001)

    def test_nan_spacing(self):
        with pytest.raises(ConfigurationError):
            SamplerOptions(target_count=1, min_spacing=math.nan)

    @pytest.mark.parametrize("count", [-1, 2**32, 1.0, "10", None, False])
    def test_bad_target_count(self, count):
        with pytest.raises(ConfigurationError):
            SamplerOptions(target_count=count)

    def test_budget_overflow(self):
        """target_count * multiplier beyond MAX_ATTEMPTS is a configuration error."""
        count = MAX_ATTEMPTS // 20 + 1
        with pytest.raises(ConfigurationError):
            SamplerOptions(target_count=count)

    def test_budget_at_limit(self):
        opt = SamplerOptions(target_count=MAX_ATTEMPTS, attempt_budget_multiplier=1)
        assert opt.max_attempts == MAX_ATTEMPTS

    def test_bad_seed(self):
        with pytest.raises(ConfigurationError):
            SamplerOptions(target_count=1, seed=-5)


class TestWeightOptions:
    def test_defaults(self):
        opt = WeightOptions()
        assert (opt.falloff, opt.center_bias, opt.jitter) == (1.8, 0.6, 0.4)

    @pytest.mark.parametrize(
        "kwargs", [{"falloff": 0.0}, {"center_bias": -0.1}, {"jitter": math.inf}]
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            WeightOptions(**kwargs)


class TestValueTypes:
    def test_heat_point_is_frozen(self):
        p = HeatPoint(1.0, 2.0, 0.5)
        with pytest.raises(AttributeError):
            p.lat = 3.0

    def test_sample_result_saturation(self):
        res = SampleResult(points=[HeatPoint(0.0, 0.0)], requested=2)
        assert res.accepted == 1
        assert res.saturated
        assert not SampleResult(requested=0).saturated

    def test_weight_options_normalized_to_floats(self):
        """Numeric strings are stored back as floats, like Region does."""
        opt = WeightOptions(falloff="2", center_bias="0.6", jitter=0)
        assert (opt.falloff, opt.center_bias, opt.jitter) == (2.0, 0.6, 0.0)
        assert all(isinstance(v, float) for v in (opt.falloff, opt.center_bias, opt.jitter))
