"""
Resolve a partner slug to its schedule entry for a given moment.

Outcomes are values, not exceptions: routes turn NotFound into a 404 and
NotYetAvailable into a redirect.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

from onchain_summer.core.constants import COMING_SOON_REDIRECT
from onchain_summer.services.schedule.clock import calendar_date
from onchain_summer.services.schedule.types import Partner, Schedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Available:
    date_key: str
    partner: Partner


@dataclass(frozen=True)
class NotYetAvailable:
    redirect_to: str = COMING_SOON_REDIRECT


@dataclass(frozen=True)
class NotFound:
    slug: str


Resolution = Union[Available, NotYetAvailable, NotFound]


def find_date_key(schedule: Schedule, slug: str) -> str | None:
    """Date key whose partner has this slug; first in schedule order."""
    for key, partner in schedule.items():
        if partner.slug == slug:
            return key
    return None


def resolve(schedule: Schedule, slug: str, now: datetime, tz_name: str = "UTC") -> Resolution:
    """Look up slug; gate on the scheduled date compared to today's date (date-only)."""
    key = find_date_key(schedule, slug)
    if key is None:
        logger.debug("No partner for slug %r", slug)
        return NotFound(slug)
    today = calendar_date(now, tz_name)
    if date.fromisoformat(key) > today:
        logger.debug("Partner %r scheduled %s, today %s: not yet available", slug, key, today)
        return NotYetAvailable()
    partner = schedule.get(key)
    if partner is None:
        return NotFound(slug)
    return Available(date_key=key, partner=partner)


def live_partners(schedule: Schedule, now: datetime, tz_name: str = "UTC") -> list[tuple[str, Partner]]:
    """(date_key, partner) for every entry scheduled today or earlier, ascending by date."""
    today = calendar_date(now, tz_name)
    return sorted(
        ((key, partner) for key, partner in schedule.items() if date.fromisoformat(key) <= today),
        key=lambda item: item[0],
    )
