"""
Request dependencies: the schedule and article client live on app.state (set in lifespan).
Tests swap them with app.dependency_overrides.
"""
from datetime import datetime

from fastapi import Depends, Request

from onchain_summer.config import Settings, settings
from onchain_summer.core.constants import SPOOF_DATE_PARAM
from onchain_summer.core.errors import request_error_to_http
from onchain_summer.services.articles import ArticleClient
from onchain_summer.services.schedule import Schedule, get_now


def get_schedule(request: Request) -> Schedule:
    return request.app.state.schedule


def get_article_client(request: Request) -> ArticleClient:
    return request.app.state.article_client


def get_settings() -> Settings:
    return settings


def first_query_param(request: Request, name: str) -> str | None:
    """First value of a query parameter that may be repeated (?drop=a&drop=b -> "a")."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


def get_request_now(request: Request, config: Settings = Depends(get_settings)) -> datetime:
    """Current time for this request; ?spoofDate= overrides it when allowed. Bad dates -> 400."""
    spoof_date = first_query_param(request, SPOOF_DATE_PARAM) if config.allow_spoof_date else None
    try:
        return get_now(spoof_date)
    except ValueError as e:
        raise request_error_to_http(e) from e
