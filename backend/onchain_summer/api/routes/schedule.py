"""
Schedule: partners already live (home page drops list).
"""
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends

from onchain_summer.api.deps import get_request_now, get_schedule, get_settings
from onchain_summer.config import Settings
from onchain_summer.services.schedule import Schedule, calendar_date, live_partners

router = APIRouter()


@router.get("", response_model=dict)
def list_live_partners(
    schedule: Schedule = Depends(get_schedule),
    config: Settings = Depends(get_settings),
    now: datetime = Depends(get_request_now),
) -> dict[str, Any]:
    """Partners scheduled today or earlier, oldest first. Honors ?spoofDate= like partner pages."""
    return {
        "today": calendar_date(now, config.schedule_timezone).isoformat(),
        "partners": [
            {"date": key, **partner.to_dict()}
            for key, partner in live_partners(schedule, now, config.schedule_timezone)
        ],
    }
