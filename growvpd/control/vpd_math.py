from __future__ import annotations

import math


def saturation_vapor_pressure(temperature_c: float) -> float:
    """
    Saturation vapor pressure (kPa) using the Magnus-Tetens approximation.

    Not usable near the pole of the formula: -237.3 °C itself raises
    ZeroDivisionError and temperatures just below it (down to about -243 °C)
    raise OverflowError from math.exp.
    """
    return 0.6108 * math.exp((17.27 * temperature_c) / (temperature_c + 237.3))


def actual_vapor_pressure(temperature_c: float, humidity_percent: float) -> float:
    """
    Actual vapor pressure (kPa) for the given relative humidity.

    Humidity is not clamped to 0-100.
    """
    svp = saturation_vapor_pressure(temperature_c)
    return svp * humidity_percent / 100.0


def compute_vpd(temperature_c: float, humidity_percent: float) -> float:
    """
    Calculate Vapor Pressure Deficit (VPD) in kPa.

    Goes negative when humidity is above 100%.
    """
    svp = saturation_vapor_pressure(temperature_c)
    avp = actual_vapor_pressure(temperature_c, humidity_percent)
    return svp - avp


def humidity_for_target_vpd(temperature_c: float, target_vpd_kpa: float) -> float:
    """
    Relative humidity (%) at which air at `temperature_c` has the target VPD.

    Clamped to 0-100 and rounded to 2 decimals. If the saturation pressure
    underflows to zero only the sign of the target matters.
    """
    svp = saturation_vapor_pressure(temperature_c)
    if svp == 0:
        humidity = 0.0 if target_vpd_kpa > 0 else 100.0
    else:
        humidity = 100.0 * (1 - target_vpd_kpa / svp)
    return round(min(max(humidity, 0.0), 100.0), 2)
