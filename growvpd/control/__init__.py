"""
Pure VPD computation: vapor-pressure math, stage targets and classification.

Nothing here performs I/O or keeps state; callers pass the grow stage and
plant age on every call.
"""

from __future__ import annotations

from growvpd.control.presentation import (UNKNOWN_STATUS_CODE,
                                          grow_stage_to_string,
                                          vpd_status_to_numeric,
                                          vpd_status_to_string)
from growvpd.control.reading import VpdReading, evaluate_reading
from growvpd.control.stages import (GrowStage, VpdRange, VpdStatus,
                                    parse_grow_stage)
from growvpd.control.vpd_math import (actual_vapor_pressure, compute_vpd,
                                      humidity_for_target_vpd,
                                      saturation_vapor_pressure)
from growvpd.control.vpd_ranges import (calculate_target_humidity,
                                        classify_vpd, describe_vpd_phase,
                                        get_vpd_range_for_stage,
                                        humidity_range_for_stage)

__all__ = [
    "GrowStage",
    "UNKNOWN_STATUS_CODE",
    "VpdRange",
    "VpdReading",
    "VpdStatus",
    "actual_vapor_pressure",
    "calculate_target_humidity",
    "classify_vpd",
    "compute_vpd",
    "describe_vpd_phase",
    "evaluate_reading",
    "get_vpd_range_for_stage",
    "grow_stage_to_string",
    "humidity_for_target_vpd",
    "humidity_range_for_stage",
    "parse_grow_stage",
    "saturation_vapor_pressure",
    "vpd_status_to_numeric",
    "vpd_status_to_string",
]
