"""
Onchain Summer schedule: date (yyyy-mm-dd) each partner page goes live.
One partner per date; a slug may appear only once (checked by build_schedule).
"""
from onchain_summer.data.partners import FWB
from onchain_summer.services.schedule.types import Partner

SCHEDULE: dict[str, Partner] = {
    "2023-08-10": FWB,
}
