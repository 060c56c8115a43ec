#!/usr/bin/env python

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from growvpd.config import grow_config_from_env
from growvpd.control.presentation import grow_stage_to_string
from growvpd.control.reading import VpdReading, evaluate_reading
from growvpd.control.stages import VpdStatus, parse_grow_stage
from growvpd.control.vpd_ranges import humidity_range_for_stage

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    VpdStatus.TOO_LOW: "⬇️  VPD too low (raise temperature or lower humidity)",
    VpdStatus.OPTIMAL: "✅ VPD optimal",
    VpdStatus.TOO_HIGH: "⬆️  VPD too high (lower temperature or raise humidity)",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculate and classify VPD for a temperature/humidity reading")
    parser.add_argument("temperature", type=float, help="Air temperature in °C")
    parser.add_argument("humidity", type=float, help="Relative humidity in %%")
    parser.add_argument(
        "--stage",
        help="Grow stage: veg or flower (default: GROWVPD_STAGE or veg)",
    )
    parser.add_argument(
        "--age",
        type=float,
        help="Plant age in days since germination (default: from configuration, otherwise unknown)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the reading as JSON",
    )
    return parser


def print_report(reading: VpdReading) -> None:
    low_rh, high_rh = humidity_range_for_stage(reading.stage, reading.temperature_c, reading.plant_age_days)

    print(f"🌡️  {reading.temperature_c:.1f}°C  💧 {reading.humidity_percent:.1f}%")
    print(f"VPD: {reading.vpd_kpa:.2f} kPa")
    if reading.plant_age_days is None:
        print(f"Stage: {grow_stage_to_string(reading.stage)} (age not tracked)")
    else:
        print(f"Stage: {grow_stage_to_string(reading.stage)}, day {reading.plant_age_days:.0f} ({reading.phase})")
    print(f"Target: {reading.vpd_range.min_kpa:.1f} - {reading.vpd_range.max_kpa:.1f} kPa")
    print(f"Humidity window: {low_rh:.0f}% - {high_rh:.0f}% (target {reading.target_humidity_percent:.0f}%)")
    print(STATUS_LABELS[reading.status])


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = grow_config_from_env()
        stage = parse_grow_stage(args.stage) if args.stage else config.stage
        age = args.age if args.age is not None else config.resolve_plant_age_days()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("Evaluating %.2f°C / %.2f%% for stage %s, age %s", args.temperature, args.humidity, stage.value, age)

    try:
        reading = evaluate_reading(args.temperature, args.humidity, stage, age)
    except (ZeroDivisionError, OverflowError):
        parser.error(f"VPD is undefined at {args.temperature}°C")

    if args.json:
        print(json.dumps(reading.as_dict()))
    else:
        print_report(reading)
    return 0


if __name__ == "__main__":
    sys.exit(main())
