"""Unit tests for water_properties.py module."""

import pytest

from seawater_calcs.water_properties import (
    SpecificVolumeAnomaly,
    freezing_point,
    sound_speed,
    specific_heat,
    specific_volume_anomaly,
)


class TestSpecificVolumeAnomaly:
    """Test the coupled specific volume / density anomaly evaluation."""

    @pytest.mark.parametrize(
        "sal, temp, pres, anomaly, sigma",
        [
            (0, 0, 0, 2749.539368, -0.1574),
            (0, 0, 1000, 2692.644915, 4.872729),
            (40, 0, 0, -380.789102, 32.147101),
            (40, 40, 10000, 981.301907, 59.820375),
        ],
    )
    def test_reference_values(self, sal, temp, pres, anomaly, sigma):
        result = specific_volume_anomaly(sal, temp, pres)
        assert result.anomaly == pytest.approx(anomaly, abs=1e-5)
        assert result.sigma == pytest.approx(sigma, abs=1e-5)

    def test_returns_named_pair(self):
        result = specific_volume_anomaly(35, 10, 500)
        assert isinstance(result, SpecificVolumeAnomaly)
        anomaly, sigma = result
        assert anomaly == result.anomaly
        assert sigma == result.sigma

    def test_standard_ocean_has_zero_anomaly(self):
        """S=35, T=0, P=0 is the reference state."""
        result = specific_volume_anomaly(35, 0, 0)
        assert result.anomaly == pytest.approx(0.0, abs=1e-3)
        assert result.sigma == pytest.approx(28.106331, abs=1e-5)

    def test_pressure_increases_sigma(self):
        surface = specific_volume_anomaly(35, 10, 0)
        deep = specific_volume_anomaly(35, 10, 4000)
        assert deep.sigma > surface.sigma

    def test_deterministic(self):
        assert specific_volume_anomaly(40, 40, 10000) == specific_volume_anomaly(40, 40, 10000)


class TestFreezingPoint:
    """Test freezing point of seawater."""

    @pytest.mark.parametrize(
        "sal, pres, expected",
        [
            (5, 0, -0.273763),
            (20, 300, -1.309106),
            (40, 500, -2.588567),
        ],
    )
    def test_reference_values(self, sal, pres, expected):
        assert freezing_point(sal, pres) == pytest.approx(expected, abs=1e-5)

    def test_fresh_water_at_surface(self):
        assert freezing_point(0, 0) == 0.0

    def test_pressure_lowers_freezing_point(self):
        assert freezing_point(35, 1000) < freezing_point(35, 0)


class TestSpecificHeat:
    """Test specific heat at constant pressure."""

    @pytest.mark.parametrize(
        "sal, temp, pres, expected",
        [
            (25, 0, 0, 4048.440412),
            (35, 20, 5000, 3894.992770),
            (40, 40, 10000, 3849.499481),
        ],
    )
    def test_reference_values(self, sal, temp, pres, expected):
        assert specific_heat(sal, temp, pres) == pytest.approx(expected, abs=1e-5)

    def test_pure_water_at_zero(self):
        assert specific_heat(0, 0, 0) == pytest.approx(4217.4)


class TestSoundSpeed:
    """Test Chen and Millero sound speed."""

    @pytest.mark.parametrize(
        "sal, temp, pres, expected",
        [
            (25, 0, 0, 1435.789875),
            (35, 20, 5000, 1604.476282),
            (40, 40, 10000, 1731.995394),
        ],
    )
    def test_reference_values(self, sal, temp, pres, expected):
        assert sound_speed(sal, temp, pres) == pytest.approx(expected, abs=1e-5)

    def test_pure_water_at_zero(self):
        assert sound_speed(0, 0, 0) == pytest.approx(1402.388)

    def test_increases_with_pressure(self):
        assert sound_speed(35, 5, 5000) > sound_speed(35, 5, 0)
