"""
Partner schedule: static date-keyed table of partners, built once at startup,
and the slug resolver that gates partner pages by date.
"""
from onchain_summer.services.schedule.clock import calendar_date, get_now
from onchain_summer.services.schedule.loader import build_schedule
from onchain_summer.services.schedule.resolver import (
    Available,
    NotFound,
    NotYetAvailable,
    Resolution,
    live_partners,
    resolve,
)
from onchain_summer.services.schedule.types import Drop, Partner, Schedule

__all__ = [
    "Available",
    "Drop",
    "NotFound",
    "NotYetAvailable",
    "Partner",
    "Resolution",
    "Schedule",
    "build_schedule",
    "calendar_date",
    "get_now",
    "live_partners",
    "resolve",
]
