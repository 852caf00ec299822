from datetime import datetime, timezone

from onchain_summer.data.partners.placeholder_contracts import UNLIMITED
from onchain_summer.services.schedule.types import Drop, Partner


def _ms(day: str) -> int:
    """Epoch milliseconds at UTC midnight of day (yyyy-mm-dd)."""
    return int(datetime.fromisoformat(day).replace(tzinfo=timezone.utc).timestamp() * 1000)


FWB = Partner(
    slug="fwb",
    name="Friends With Benefits",
    url="https://www.fwb.help/",
    description=(
        "Friends With Benefits is a community of builders, creatives, and investors who believe in "
        "the power of social tokens and the communities they create. We are a decentralized "
        "autonomous organization (DAO) that supports the growth of the social token ecosystem "
        "through community grants, educational initiatives, and community events."
    ),
    brand_color="#000000",
    icon="/partners/fwb/icon.jpg",
    twitter="@FWBtweets",
    content_digest="GjssNdA6XK7VYynkvwDem3KYwPACSU9nDWpR5rei3hw",
    drops=(
        Drop(
            **UNLIMITED,
            name="Friends With Benefits",
            image="/partners/fwb/drops/fwb.jpg",
            creator="0xd365Ae104DA3E86EA36f268050D6e5212a42e360",
            type="erc-721",
            price="0.0001",
            start_date=_ms("2023-08-10"),
            end_date=_ms("2023-08-11"),
        ),
    ),
)
