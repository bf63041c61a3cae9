"""
Tests for the width-specialized primitives (arcjump.float32 / float64)
and the identities that cannot fail.

The primitives have no error channel: degenerate inputs give +inf for
height, time and impulse and -inf for gravity.
"""

import math

import numpy as np
import pytest

from arcjump import float32, float64, nofailure
from arcjump.dispatch import IDENTITIES

WIDTHS = [(float32, np.float32), (float64, np.float64)]


class TestIdentityShape:
    """Both width modules provide every identity."""

    @pytest.mark.parametrize("module,dtype", WIDTHS)
    def test_all_identities_present(self, module, dtype):
        for identity in IDENTITIES.values():
            assert callable(getattr(module, identity.name))

    @pytest.mark.parametrize("module,dtype", WIDTHS)
    def test_results_keep_width(self, module, dtype):
        """Plain Python inputs are converted on entry; nothing widens."""
        for identity in IDENTITIES.values():
            result = getattr(module, identity.name)(2, -3)
            assert isinstance(result, dtype), identity.name


class TestFloat32Scenarios:
    """Reference values computed in 32-bit arithmetic."""

    def test_height_time(self):
        assert float32.impulse_from_height_and_time(20, 10) == np.float32(4.0)
        assert float32.gravity_from_height_and_time(20, 10) == np.float32(-0.4)

    def test_height_impulse(self):
        assert float32.gravity_from_height_and_impulse(10, 4) == np.float32(-0.8)
        assert float32.gravity_from_height_and_impulse(20, 8) == np.float32(-1.6)

    def test_height_gravity(self):
        assert abs(float32.time_from_height_and_gravity(50, -1) - 10.0) < 1e-5
        assert abs(float32.impulse_from_height_and_gravity(50, -1) - 10.0) < 1e-5

    def test_impulse_gravity(self):
        assert float32.height_from_impulse_and_gravity(10, -1) == np.float32(50.0)
        assert float32.time_from_impulse_and_gravity(10, -1) == np.float32(10.0)


class TestFloat64Scenarios:

    def test_height_time(self):
        assert float64.impulse_from_height_and_time(20, 10) == 4.0
        assert float64.gravity_from_height_and_time(20, 10) == -0.4

    def test_time_gravity(self):
        assert float64.height_from_time_and_gravity(10, -0.4) == pytest.approx(20.0)
        assert float64.impulse_from_time_and_gravity(10, -0.4) == pytest.approx(4.0)

    def test_time_impulse(self):
        assert float64.height_from_time_and_impulse(10, 4) == 20.0
        assert float64.gravity_from_time_and_impulse(10, 4) == -0.4


class TestDegenerateInputs:
    """Null divisors give infinities, never an exception."""

    @pytest.mark.parametrize("module,dtype", WIDTHS)
    def test_positive_infinity(self, module, dtype):
        assert module.impulse_from_height_and_time(20, 0) == math.inf
        assert module.time_from_height_and_impulse(20, 0) == math.inf
        assert module.time_from_height_and_gravity(20, 0) == math.inf
        assert module.time_from_impulse_and_gravity(4, 0) == math.inf
        assert module.height_from_impulse_and_gravity(4, 0) == math.inf

    @pytest.mark.parametrize("module,dtype", WIDTHS)
    def test_negative_infinity(self, module, dtype):
        assert module.gravity_from_height_and_time(20, 0) == -math.inf
        assert module.gravity_from_height_and_impulse(0, 4) == -math.inf
        assert module.gravity_from_time_and_impulse(0, 4) == -math.inf

    @pytest.mark.parametrize("module,dtype", WIDTHS)
    def test_horizontal_helpers(self, module, dtype):
        assert module.time_from_speed_and_range(0, 100) == math.inf
        up, down = module.time_from_speed_range_and_ratio(0, 100, 0.5)
        assert up == math.inf and down == math.inf


class TestSignHandling:
    """Square-root identities return a magnitude, never NaN."""

    @pytest.mark.parametrize("module,dtype", WIDTHS)
    @pytest.mark.parametrize("height,gravity", [
        (20, -9.8), (20, 9.8), (-20, -9.8), (-20, 9.8),
    ])
    def test_square_roots(self, module, dtype, height, gravity):
        time = module.time_from_height_and_gravity(height, gravity)
        impulse = module.impulse_from_height_and_gravity(height, gravity)
        assert not np.isnan(time) and time >= 0
        assert not np.isnan(impulse) and impulse >= 0
        assert abs(time - math.sqrt(2 * 20 / 9.8)) < 1e-5
        assert abs(impulse - math.sqrt(2 * 20 * 9.8)) < 1e-4


class TestNoFailure:
    """The four identities without a division by an input."""

    def test_zero_inputs(self):
        assert nofailure.height_from_time_and_impulse(0, 0) == 0
        assert nofailure.height_from_time_and_gravity(0, 0) == 0
        assert nofailure.impulse_from_time_and_gravity(0, 0) == 0
        assert nofailure.impulse_from_height_and_gravity(0, 0) == 0

    def test_width_follows_arguments(self):
        result = nofailure.height_from_time_and_impulse(np.float32(10), np.float32(4))
        assert isinstance(result, np.float32)
        assert result == np.float32(20)
        result = nofailure.impulse_from_time_and_gravity(10, -0.4)
        assert isinstance(result, np.float64)
