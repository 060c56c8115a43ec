from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from growvpd.control.stages import GrowStage, parse_grow_stage
from growvpd.time import get_timezone, plant_age_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowConfig:
    stage: GrowStage = GrowStage.VEGETATIVE
    plant_age_days: Optional[float] = None
    germination_date: Optional[date] = None
    timezone: str = "UTC"
    log_level: str = "INFO"

    def resolve_plant_age_days(self, now: Optional[datetime] = None) -> Optional[float]:
        """
        Plant age to use for range lookup.

        An explicit age wins over the germination date. None when neither is set.
        """
        if self.plant_age_days is not None:
            return self.plant_age_days
        if self.germination_date is not None:
            return plant_age_days(self.germination_date, now=now, tz=get_timezone(self.timezone))
        return None


def _get_str(name: str) -> Optional[str]:
    val = os.getenv(name)
    if val is None or val.strip() == "":
        return None
    return val.strip()


def _get_float(name: str) -> Optional[float]:
    val = _get_str(name)
    if val is None:
        return None
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{val}'") from None


def _get_date(name: str) -> Optional[date]:
    val = _get_str(name)
    if val is None:
        return None
    try:
        return datetime.strptime(val, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"{name} must be a YYYY-MM-DD date, got '{val}'") from None


def grow_config_from_env() -> GrowConfig:
    """
    Build the grow configuration from GROWVPD_* environment variables.
    Unset or blank variables fall back to the defaults.
    """
    stage_name = _get_str("GROWVPD_STAGE") or "veg"
    try:
        stage = parse_grow_stage(stage_name)
    except ValueError as e:
        raise ValueError(f"GROWVPD_STAGE: {e}") from None

    timezone = _get_str("GROWVPD_TIMEZONE") or "UTC"
    get_timezone(timezone)

    log_level = (_get_str("GROWVPD_LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"GROWVPD_LOG_LEVEL must be a logging level name, got '{log_level}'")

    age = _get_float("GROWVPD_PLANT_AGE_DAYS")
    germination = _get_date("GROWVPD_GERMINATION_DATE")
    if age is not None and germination is not None:
        logger.warning("Both GROWVPD_PLANT_AGE_DAYS and GROWVPD_GERMINATION_DATE are set, using the explicit age")

    return GrowConfig(
        stage=stage,
        plant_age_days=age,
        germination_date=germination,
        timezone=timezone,
        log_level=log_level,
    )
