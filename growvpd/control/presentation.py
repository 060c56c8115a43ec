"""
String and numeric renderings of the VPD enums for logs and dashboards.

The numeric status code is meant for gauges: -1 too low, 0 optimal, 1 too high.
"""

from __future__ import annotations

from typing import Any

from growvpd.control.stages import GrowStage, VpdStatus

UNKNOWN = "unknown"
UNKNOWN_STATUS_CODE = -999

_STATUS_STRINGS = {
    VpdStatus.TOO_LOW: "too_low",
    VpdStatus.OPTIMAL: "optimal",
    VpdStatus.TOO_HIGH: "too_high",
}

_STAGE_STRINGS = {
    GrowStage.VEGETATIVE: "veg",
    GrowStage.FLOWERING: "flower",
}

_STATUS_CODES = {
    VpdStatus.TOO_LOW: -1,
    VpdStatus.OPTIMAL: 0,
    VpdStatus.TOO_HIGH: 1,
}


def vpd_status_to_string(status: Any) -> str:
    return _STATUS_STRINGS.get(status, UNKNOWN)


def grow_stage_to_string(stage: Any) -> str:
    return _STAGE_STRINGS.get(stage, UNKNOWN)


def vpd_status_to_numeric(status: Any) -> int:
    return _STATUS_CODES.get(status, UNKNOWN_STATUS_CODE)
