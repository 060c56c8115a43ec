"""
Stage and age based VPD targets.

Age-based bands (days since germination):

    Seedling      0-14    0.4 - 0.8 kPa
    Early veg     15-28   0.8 - 1.0 kPa
    Late veg      29+     1.0 - 1.2 kPa
    Early flower  0-21    1.0 - 1.3 kPa   (days since flip)
    Mid flower    22-49   1.2 - 1.5 kPa
    Late flower   50+     1.3 - 1.6 kPa

Without an age the stage-only ranges apply: veg 0.8 - 1.2, flower 1.2 - 1.6.
"""

from __future__ import annotations

from typing import Optional, Tuple

from growvpd.control.stages import GrowStage, VpdRange, VpdStatus
from growvpd.control.vpd_math import humidity_for_target_vpd

VEG_VPD_RANGE = VpdRange(0.8, 1.2)
FLOWER_VPD_RANGE = VpdRange(1.2, 1.6)

SEEDLING_VPD_RANGE = VpdRange(0.4, 0.8)
EARLY_VEG_VPD_RANGE = VpdRange(0.8, 1.0)
LATE_VEG_VPD_RANGE = VpdRange(1.0, 1.2)
EARLY_FLOWER_VPD_RANGE = VpdRange(1.0, 1.3)
MID_FLOWER_VPD_RANGE = VpdRange(1.2, 1.5)
LATE_FLOWER_VPD_RANGE = VpdRange(1.3, 1.6)

# Plant age counts from germination, flowering bands count from the flip.
# Assumes the flip happens after a fixed veg period.
ASSUMED_VEG_DAYS = 30


def _age_is_known(plant_age_days: Optional[float]) -> bool:
    # Negative ages are the legacy "not tracked" sentinel.
    return plant_age_days is not None and plant_age_days >= 0


def _phase(stage: GrowStage, plant_age_days: Optional[float]) -> Tuple[str, VpdRange]:
    if not _age_is_known(plant_age_days):
        if stage is GrowStage.FLOWERING:
            return "flower", FLOWER_VPD_RANGE
        return "veg", VEG_VPD_RANGE

    if stage is GrowStage.FLOWERING:
        flower_days = plant_age_days - ASSUMED_VEG_DAYS
        if flower_days <= 21:
            return "early_flower", EARLY_FLOWER_VPD_RANGE
        if flower_days <= 49:
            return "mid_flower", MID_FLOWER_VPD_RANGE
        return "late_flower", LATE_FLOWER_VPD_RANGE

    if plant_age_days <= 14:
        return "seedling", SEEDLING_VPD_RANGE
    if plant_age_days <= 28:
        return "early_veg", EARLY_VEG_VPD_RANGE
    return "late_veg", LATE_VEG_VPD_RANGE


def get_vpd_range_for_stage(stage: GrowStage, plant_age_days: Optional[float] = None) -> VpdRange:
    """
    Optimal VPD range for a grow stage and, when known, the plant age.

    `plant_age_days` of None or below zero means the age is not tracked.
    Any stage other than flowering gets the vegetative ranges.
    """
    return _phase(stage, plant_age_days)[1]


def describe_vpd_phase(stage: GrowStage, plant_age_days: Optional[float] = None) -> str:
    return _phase(stage, plant_age_days)[0]


def classify_vpd(vpd_kpa: float, stage: GrowStage, plant_age_days: Optional[float] = None) -> VpdStatus:
    vpd_range = get_vpd_range_for_stage(stage, plant_age_days)

    if vpd_range.contains(vpd_kpa):
        return VpdStatus.OPTIMAL
    if vpd_kpa < vpd_range.min_kpa:
        return VpdStatus.TOO_LOW
    return VpdStatus.TOO_HIGH


def humidity_range_for_stage(
    stage: GrowStage, temperature_c: float, plant_age_days: Optional[float] = None
) -> Tuple[float, float]:
    """
    Relative humidity window (low, high) that keeps VPD inside the target range.

    The low humidity bound matches the upper VPD bound and vice versa.
    """
    vpd_range = get_vpd_range_for_stage(stage, plant_age_days)
    return (
        humidity_for_target_vpd(temperature_c, vpd_range.max_kpa),
        humidity_for_target_vpd(temperature_c, vpd_range.min_kpa),
    )


def calculate_target_humidity(
    stage: GrowStage, temperature_c: float, plant_age_days: Optional[float] = None
) -> float:
    """Humidity (whole percent) that lands VPD in the middle of the target range."""
    vpd_range = get_vpd_range_for_stage(stage, plant_age_days)
    return round(humidity_for_target_vpd(temperature_c, vpd_range.midpoint), 0)
