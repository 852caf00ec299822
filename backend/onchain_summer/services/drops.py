"""Featured drop selection for a partner page."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from onchain_summer.services.schedule.types import Drop


@dataclass(frozen=True)
class DropSelection:
    featured: Drop | None
    remaining: tuple[Drop, ...]


def select_drops(drops: Sequence[Drop], featured_address: str | None = None) -> DropSelection:
    """
    Promote the drop at featured_address (first match) to featured; otherwise the first drop.
    Remaining keeps the original order minus the featured one. drops is not modified.
    """
    index = 0
    if featured_address:
        for i, drop in enumerate(drops):
            if drop.address == featured_address:
                index = i
                break
    if not drops:
        return DropSelection(featured=None, remaining=())
    remaining = tuple(drop for i, drop in enumerate(drops) if i != index)
    return DropSelection(featured=drops[index], remaining=remaining)
