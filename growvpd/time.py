from __future__ import annotations

from datetime import date, datetime
from datetime import time as dt_time
from typing import Optional

import pytz

SECONDS_PER_DAY = 24 * 3600

# Keep timezone handling consistent across the project.
DEFAULT_TZ = pytz.utc


def get_timezone(name: str):
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone '{name}'") from None


def plant_age_days(germination_date: date, now: Optional[datetime] = None, tz=DEFAULT_TZ) -> float:
    """
    Fractional days since local midnight of the germination date.

    Naive `now` values are taken as local time in `tz`. A germination date in
    the future gives a negative age.
    """
    start = tz.localize(datetime.combine(germination_date, dt_time.min))
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is None:
        now = tz.localize(now)
    return (now - start).total_seconds() / SECONDS_PER_DAY
