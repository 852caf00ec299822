"""Current time for page requests, with the spoofDate preview override."""
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo


def get_now(spoof_date: str | None = None) -> datetime:
    """
    Wall-clock UTC time, or the parsed override when spoof_date is given.
    Accepts ISO dates ("2023-08-10") and datetimes ("2023-08-10T18:00:00Z").
    Raises ValueError for anything unparseable.
    """
    if not spoof_date:
        return datetime.now(timezone.utc)
    return datetime.fromisoformat(spoof_date.strip())


def calendar_date(now: datetime, tz_name: str = "UTC") -> date:
    """Calendar date of now in the schedule's timezone. Naive datetimes are taken as already local."""
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(ZoneInfo(tz_name)).date()
