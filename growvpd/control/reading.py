from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from growvpd.control.presentation import (grow_stage_to_string,
                                          vpd_status_to_numeric,
                                          vpd_status_to_string)
from growvpd.control.stages import GrowStage, VpdRange, VpdStatus
from growvpd.control.vpd_math import compute_vpd
from growvpd.control.vpd_ranges import (calculate_target_humidity,
                                        classify_vpd, describe_vpd_phase,
                                        get_vpd_range_for_stage)


@dataclass(frozen=True)
class VpdReading:
    temperature_c: float
    humidity_percent: float
    stage: GrowStage
    plant_age_days: Optional[float]
    vpd_kpa: float
    vpd_range: VpdRange
    status: VpdStatus
    phase: str
    target_humidity_percent: float

    def as_dict(self) -> Dict[str, Any]:
        """
        Flat payload with the field names the monitoring dashboard reads.
        """
        return {
            "temperature_c": round(self.temperature_c, 2),
            "humidity_percent": round(self.humidity_percent, 2),
            "vpd_kpa": round(self.vpd_kpa, 3),
            "vpd_status": vpd_status_to_string(self.status),
            "vpd_status_code": vpd_status_to_numeric(self.status),
            "vpd_min": self.vpd_range.min_kpa,
            "vpd_max": self.vpd_range.max_kpa,
            "vpd_phase": self.phase,
            "grow_stage": grow_stage_to_string(self.stage),
            "plant_age_days": self.plant_age_days,
            "target_humidity_percent": self.target_humidity_percent,
        }


def evaluate_reading(
    temperature_c: float,
    humidity_percent: float,
    stage: GrowStage,
    plant_age_days: Optional[float] = None,
) -> VpdReading:
    vpd = compute_vpd(temperature_c, humidity_percent)
    return VpdReading(
        temperature_c=temperature_c,
        humidity_percent=humidity_percent,
        stage=stage,
        plant_age_days=plant_age_days,
        vpd_kpa=vpd,
        vpd_range=get_vpd_range_for_stage(stage, plant_age_days),
        status=classify_vpd(vpd, stage, plant_age_days),
        phase=describe_vpd_phase(stage, plant_age_days),
        target_humidity_percent=calculate_target_humidity(stage, temperature_c, plant_age_days),
    )
