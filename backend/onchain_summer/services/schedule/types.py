"""
Typed records for the partner schedule.

Records are frozen: the schedule is built once at startup and shared read-only
by every request.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Drop:
    """One collectible release of a partner. start_date/end_date are epoch ms, informational only."""
    address: str
    name: str
    image: str
    creator: str
    type: str  # e.g. "erc-721", "erc-1155"
    price: str  # ETH, as displayed
    start_date: int
    end_date: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Partner:
    """A scheduled partner page (one per date key)."""
    slug: str
    name: str
    url: str
    description: str
    brand_color: str
    icon: str
    twitter: str
    content_digest: str  # Mirror digest of the partner's article
    drops: tuple[Drop, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# Date key ("yyyy-MM-dd") -> Partner; read-only after build_schedule
Schedule = Mapping[str, Partner]
