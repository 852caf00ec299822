#!/usr/bin/env python3
"""
Validate the partner schedule and show which pages are live on a given day. Run from backend/:
  python scripts/check_schedule.py
  python scripts/check_schedule.py --date 2023-08-10
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from onchain_summer.config import settings
from onchain_summer.core.errors import ScheduleError
from onchain_summer.data.schedule import SCHEDULE
from onchain_summer.services.schedule import Available, build_schedule, calendar_date, get_now, resolve


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check schedule invariants and list partner page status")
    parser.add_argument("--date", default=None, help="Pretend today is this ISO date (same as ?spoofDate=)")
    args = parser.parse_args(argv)

    try:
        schedule = build_schedule(SCHEDULE)
    except ScheduleError as e:
        print("FAIL Schedule:", e)
        return 1
    print(f"OK  Schedule: {len(schedule)} partners")

    try:
        now = get_now(args.date)
    except ValueError as e:
        print(f"FAIL --date {args.date!r}:", e)
        return 1
    print(f"Today: {calendar_date(now, settings.schedule_timezone)} ({settings.schedule_timezone})\n")
    for key, partner in sorted(schedule.items()):
        result = resolve(schedule, partner.slug, now, settings.schedule_timezone)
        status = "live" if isinstance(result, Available) else "coming soon"
        print(f"  {key}  {partner.slug:<20} {status:<12} {len(partner.drops)} drops")
    return 0


if __name__ == "__main__":
    sys.exit(main())
