import math

import pytest

from pcgrandom.floats import SMALLEST_SUBNORMAL, clamp_below, float_below


class TestFloatBelow:
    def test_one(self):
        assert float_below(1.0) == 1.0 - 2**-53

    def test_power_of_two(self):
        assert float_below(2.0) == 2.0 - 2**-52

    def test_negative(self):
        assert float_below(-1.0) == -1.0 - 2**-52

    @pytest.mark.parametrize("zero", [0.0, -0.0])
    def test_zero(self, zero):
        assert float_below(zero) == -SMALLEST_SUBNORMAL

    def test_smallest_subnormal(self):
        assert float_below(SMALLEST_SUBNORMAL) == 0.0

    @pytest.mark.parametrize(
        "bound", [1e300, 3.0, 0.1, 1e-310, -1e-310, -0.1, -7.5, -1e300]
    )
    def test_matches_nextafter(self, bound):
        assert float_below(bound) == math.nextafter(bound, -math.inf)

    def test_large_magnitude(self):
        bound = 2.0**60
        below = float_below(bound)
        assert below < bound
        assert bound - below == 2.0**7


class TestClampBelow:
    def test_value_below_bound_unchanged(self):
        assert clamp_below(0.5, 1.0) == 0.5

    def test_value_at_bound(self):
        assert clamp_below(1.0, 1.0) == float_below(1.0)

    def test_value_above_bound(self):
        assert clamp_below(1.5, 1.0) == float_below(1.0)

    def test_negative_bound(self):
        assert clamp_below(-2.0, -2.0) < -2.0
