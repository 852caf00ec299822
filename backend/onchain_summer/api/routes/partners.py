"""
Partner pages: resolve slug against the schedule, pick the featured drop, attach the article.
"""
import logging
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from onchain_summer.api.deps import first_query_param, get_article_client, get_request_now, get_schedule, get_settings
from onchain_summer.config import Settings
from onchain_summer.core.constants import DROP_ADDRESS_PARAM, PARTNER_PAGE_PATH
from onchain_summer.core.errors import partner_not_found
from onchain_summer.services.articles import ArticleClient
from onchain_summer.services.drops import select_drops
from onchain_summer.services.schedule import Available, NotYetAvailable, Schedule, resolve

router = APIRouter()
logger = logging.getLogger(__name__)


def share_url(config: Settings, slug: str, drop_address: str | None) -> str:
    """Public page URL for a partner, pinned to a drop when one was requested."""
    url = f"{config.site_url}{PARTNER_PAGE_PATH}/{slug}"
    if drop_address:
        url += "?" + urlencode({DROP_ADDRESS_PARAM: drop_address})
    return url


@router.get("/{slug}", response_model=None)
def partner_page(
    slug: str,
    request: Request,
    schedule: Schedule = Depends(get_schedule),
    articles: ArticleClient = Depends(get_article_client),
    config: Settings = Depends(get_settings),
    now: datetime = Depends(get_request_now),
) -> dict[str, Any] | RedirectResponse:
    """Partner page payload; 404 for unknown slugs, redirect to the drops list before the partner's date."""
    result = resolve(schedule, slug, now, config.schedule_timezone)
    if isinstance(result, NotYetAvailable):
        return RedirectResponse(url=result.redirect_to, status_code=307)
    if not isinstance(result, Available):
        raise partner_not_found()

    partner = result.partner
    drop_address = first_query_param(request, DROP_ADDRESS_PARAM)
    # One selection per request; every consumer of the featured drop reads it from here
    selection = select_drops(partner.drops, drop_address)
    article = articles.fetch_article(partner.content_digest)
    if article is None:
        logger.debug("Partner %s rendered without article", slug)

    return {
        "date": result.date_key,
        "partner": partner.to_dict(),
        "featured_drop": selection.featured.to_dict() if selection.featured else None,
        "remaining_drops": [d.to_dict() for d in selection.remaining],
        "static_headline": bool(drop_address),
        "share_url": share_url(config, partner.slug, drop_address),
        "article": article.to_dict() if article else None,
    }
