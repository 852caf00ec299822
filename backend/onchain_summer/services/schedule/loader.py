"""Build the read-only schedule from static partner data and check its invariants."""
import logging
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from onchain_summer.core.constants import SCHEDULE_DATE_FORMAT
from onchain_summer.core.errors import ScheduleError
from onchain_summer.services.schedule.types import Partner, Schedule

logger = logging.getLogger(__name__)


def _check_date_key(key: str) -> None:
    try:
        parsed = datetime.strptime(key, SCHEDULE_DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise ScheduleError(f"Schedule key {key!r} is not a yyyy-MM-dd date") from e
    # strptime also takes "2023-8-1"; keys must be zero-padded to sort and compare as dates
    if parsed.strftime(SCHEDULE_DATE_FORMAT) != key:
        raise ScheduleError(f"Schedule key {key!r} is not a yyyy-MM-dd date")


def _check_drop_addresses(partner: Partner) -> None:
    seen: set[str] = set()
    for drop in partner.drops:
        if drop.address in seen:
            raise ScheduleError(f"Partner {partner.slug!r} lists drop address {drop.address} more than once")
        seen.add(drop.address)


def build_schedule(entries: Mapping[str, Partner]) -> Schedule:
    """
    Validate entries and return an immutable date-keyed schedule.

    Rejects malformed date keys, a slug used on more than one date and a drop
    address repeated within one partner. Key order of entries is kept.
    """
    slugs: dict[str, str] = {}
    for key, partner in entries.items():
        _check_date_key(key)
        if partner.slug in slugs:
            raise ScheduleError(
                f"Slug {partner.slug!r} is scheduled on both {slugs[partner.slug]} and {key}"
            )
        slugs[partner.slug] = key
        _check_drop_addresses(partner)
    schedule = MappingProxyType(dict(entries))
    logger.info("Loaded schedule: %d partners", len(schedule))
    return schedule
