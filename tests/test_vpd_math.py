"""Tests for vapor pressure and VPD calculation."""
import math

import pytest

from growvpd.control.vpd_math import (actual_vapor_pressure, compute_vpd,
                                      humidity_for_target_vpd,
                                      saturation_vapor_pressure)


class TestSaturationVaporPressure:
    """Test the Magnus-Tetens saturation vapor pressure."""

    def test_reference_value_at_25c(self):
        """Test es at 25°C matches the reference value."""
        assert saturation_vapor_pressure(25) == pytest.approx(3.168, abs=1e-3)

    def test_freezing_point(self):
        """Test es at 0°C equals the formula constant."""
        assert saturation_vapor_pressure(0) == pytest.approx(0.6108)

    def test_increases_with_temperature(self):
        """Test warmer air holds more water vapor."""
        values = [saturation_vapor_pressure(t) for t in (10, 20, 30, 40)]
        assert values == sorted(values)

    def test_singular_temperature_is_not_guarded(self):
        """Test the pole of the formula raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            saturation_vapor_pressure(-237.3)

    @pytest.mark.parametrize("temp", [-240.0, -238.0, -243.0])
    def test_just_below_pole_overflows(self, temp):
        """Test temperatures just below the pole raise OverflowError."""
        with pytest.raises(OverflowError):
            saturation_vapor_pressure(temp)

    def test_just_above_pole_underflows_to_zero(self):
        """Test temperatures just above the pole give zero pressure."""
        assert saturation_vapor_pressure(-235.0) == 0.0


class TestActualVaporPressure:
    """Test actual vapor pressure from relative humidity."""

    def test_half_saturation(self):
        """Test 50% RH gives half the saturation pressure."""
        assert actual_vapor_pressure(25, 50) == pytest.approx(saturation_vapor_pressure(25) / 2)

    def test_dry_air(self):
        """Test 0% RH gives no vapor pressure."""
        assert actual_vapor_pressure(25, 0) == 0

    def test_humidity_not_clamped(self):
        """Test humidity above 100% is passed through."""
        assert actual_vapor_pressure(25, 120) > saturation_vapor_pressure(25)


class TestComputeVPD:
    """Test VPD calculation accuracy."""

    def test_reference_value(self):
        """Test VPD at 25°C, 50% RH."""
        assert compute_vpd(25, 50) == pytest.approx(1.5845, abs=1e-3)

    @pytest.mark.parametrize("temp,humidity", [
        (-10, 30),
        (0, 0),
        (18.5, 72),
        (25, 50),
        (31.2, 100),
        (40, 15),
    ])
    def test_matches_closed_form(self, temp, humidity):
        """Test VPD equals es * (1 - RH/100)."""
        expected = saturation_vapor_pressure(temp) * (1 - humidity / 100)
        assert compute_vpd(temp, humidity) == pytest.approx(expected)

    def test_saturated_air_has_no_deficit(self):
        """Test VPD is zero at 100% RH."""
        assert compute_vpd(22, 100) == pytest.approx(0)

    def test_non_negative_for_valid_humidity(self):
        """Test VPD never goes negative for RH in 0-100."""
        for humidity in range(0, 101, 5):
            assert compute_vpd(24, humidity) >= -1e-12

    def test_supersaturated_humidity_goes_negative(self):
        """Test RH above 100% gives a negative VPD."""
        assert compute_vpd(25, 110) < 0

    def test_not_rounded(self):
        """Test VPD keeps full precision."""
        vpd = compute_vpd(25, 55)
        assert vpd != round(vpd, 2)

    def test_repeated_calls_are_identical(self):
        """Test identical inputs give identical outputs."""
        assert compute_vpd(23.4, 61.2) == compute_vpd(23.4, 61.2)

    def test_underflowed_pressure_gives_zero_vpd(self):
        """Test VPD is zero when es underflows."""
        assert compute_vpd(-235.0, 50) == 0.0


class TestHumidityForTargetVPD:
    """Test the inverse calculation used for humidity targets."""

    @pytest.mark.parametrize("temp,humidity", [(20, 70), (25, 50), (28, 40)])
    def test_inverts_compute_vpd(self, temp, humidity):
        """Test the humidity for a computed VPD is the original humidity."""
        vpd = compute_vpd(temp, humidity)
        assert humidity_for_target_vpd(temp, vpd) == pytest.approx(humidity, abs=0.01)

    def test_clamped_to_zero(self):
        """Test unreachable high targets clamp to 0%."""
        assert humidity_for_target_vpd(20, 10.0) == 0

    def test_clamped_to_hundred(self):
        """Test negative targets clamp to 100%."""
        assert humidity_for_target_vpd(20, -1.0) == 100

    def test_rounded_to_two_decimals(self):
        """Test humidity is rounded to 2 decimal places."""
        humidity = humidity_for_target_vpd(24.3, 1.1)
        assert humidity == round(humidity, 2)
        assert not math.isnan(humidity)

    @pytest.mark.parametrize("target,expected", [(1.0, 0.0), (0.0, 100.0), (-0.5, 100.0)])
    def test_zero_saturation_pressure(self, target, expected):
        """Test a zero es does not divide by zero."""
        assert humidity_for_target_vpd(-235.0, target) == expected
