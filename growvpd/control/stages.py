from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GrowStage(Enum):
    VEGETATIVE = "veg"
    FLOWERING = "flower"


class VpdStatus(Enum):
    TOO_LOW = "too_low"
    OPTIMAL = "optimal"
    TOO_HIGH = "too_high"


_STAGE_ALIASES = {
    "veg": GrowStage.VEGETATIVE,
    "vegetative": GrowStage.VEGETATIVE,
    "flower": GrowStage.FLOWERING,
    "flowering": GrowStage.FLOWERING,
}


def parse_grow_stage(value: str) -> GrowStage:
    """
    Parse a stage name as typed by a user or stored in configuration.
    """
    stage = _STAGE_ALIASES.get(value.strip().lower())
    if stage is None:
        raise ValueError(f"Unknown stage '{value}'")
    return stage


@dataclass(frozen=True)
class VpdRange:
    min_kpa: float
    max_kpa: float

    def contains(self, vpd_kpa: float) -> bool:
        return self.min_kpa <= vpd_kpa <= self.max_kpa

    @property
    def midpoint(self) -> float:
        return (self.min_kpa + self.max_kpa) / 2
