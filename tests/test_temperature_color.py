import math

import numpy as np
import pytest

from temperature_color import blackbody_rgb, brightness_multiplier, color_for, colors_for
from units import kelvin


class TestBrightness:
    @pytest.mark.parametrize("temperature", [0.0, 0.5, 1.0, -5.0, float('nan'), float('inf'), float('-inf')])
    def test_fallback_to_one(self, temperature):
        assert brightness_multiplier(temperature) == 1.0

    def test_log_base_four(self):
        assert brightness_multiplier(4.0) == pytest.approx(1.0)
        assert brightness_multiplier(16.0) == pytest.approx(2.0)
        assert brightness_multiplier(1e5) == pytest.approx(math.log(1e5, 4))

    def test_non_decreasing_above_one_kelvin(self):
        temps = np.linspace(1.001, 150000.0, 2000)
        multipliers = [brightness_multiplier(t) for t in temps]
        assert all(b >= a for a, b in zip(multipliers, multipliers[1:]))


class TestBlackbody:
    def test_warm_red_at_1000k(self):
        red, green, blue = blackbody_rgb(1000.0)
        assert red == 255.0
        assert 0.0 < green < 255.0
        assert blue == 0.0

    def test_near_white_at_6600k(self):
        red, green, blue = blackbody_rgb(6600.0)
        assert red == 255.0
        assert green == 255.0
        assert blue > 250.0

    def test_blue_dominant_when_very_hot(self):
        red, green, blue = blackbody_rgb(40000.0)
        assert blue == 255.0
        assert red < green < blue

    @pytest.mark.parametrize("temperature", [0.0, 50.0, -100.0, 1e7, float('nan')])
    def test_extrapolates_within_channel_range(self, temperature):
        for channel in blackbody_rgb(temperature):
            assert 0.0 <= channel <= 255.0


class TestColorFor:
    def test_scaled_by_brightness(self):
        red, green, blue = color_for(1000.0)
        multiplier = math.log(1000.0, 4)
        assert red == pytest.approx(multiplier)
        assert blue == 0.0
        assert green == pytest.approx(multiplier * blackbody_rgb(1000.0)[1] / 255.0)

    def test_hot_particles_are_over_bright(self):
        assert max(color_for(50000.0)) > 1.0

    def test_absolute_zero(self):
        assert color_for(0.0) == pytest.approx((1.0, 0.0, 0.0))

    def test_accepts_temperature_type(self):
        assert color_for(kelvin(2500.0)) == color_for(2500.0)

    def test_never_raises_on_degenerate_input(self):
        for temperature in (float('nan'), float('inf'), -1e9):
            assert all(math.isfinite(c) for c in color_for(temperature))

    def test_vectorized_matches_scalar(self):
        temps = np.array([0.0, 1.0, 800.0, 1900.0, 6600.0, 12000.0, 99999.0])
        colors = colors_for(temps)
        assert colors.shape == (len(temps), 3)
        for row, temperature in zip(colors, temps):
            assert tuple(row) == pytest.approx(color_for(temperature))

    def test_vectorized_empty(self):
        assert colors_for(np.array([])).shape == (0, 3)


class TestBlackbodyReference:
    """Reference triples of the Tanner Helland fit, one per branch."""

    def test_low_branch_at_1000k(self):
        # green = 99.4708025861 * ln(10) - 161.1195681661
        assert blackbody_rgb(1000.0) == pytest.approx((255.0, 67.9204, 0.0), abs=0.05)

    def test_low_branch_with_blue_at_3000k(self):
        assert blackbody_rgb(3000.0) == pytest.approx((255.0, 177.2006, 109.9172), abs=0.05)

    def test_high_branch_at_10000k(self):
        # red = 329.698727446 * 40^-0.1332047592, green = 288.1221695283 * 40^-0.0755148492
        assert blackbody_rgb(10000.0) == pytest.approx((201.7044, 218.0707, 255.0), abs=0.05)

    @pytest.mark.parametrize("edge", [1000.0, 1500.0, 3000.0, 25000.0])
    def test_round_off_below_a_bucket_edge_keeps_the_bucket(self, edge):
        just_below = edge * (1.0 - 4e-16)
        assert blackbody_rgb(just_below) == blackbody_rgb(edge)
