"""
Centralized error handling for partner page failures.
Constants and a reusable helper so routes stay thin and new error types are easy to add.
"""
from __future__ import annotations

from typing import Callable

from fastapi import HTTPException

# ---------------------------------------------------------------------------
# Constants: status codes and user-facing messages
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_INTERNAL_ERROR = 500

MSG_PARTNER_NOT_FOUND = "Partner not found"
MSG_INVALID_SPOOF_DATE = "Invalid spoofDate; expected an ISO date such as 2023-08-10"


class ScheduleError(ValueError):
    """Schedule data broke an invariant (duplicate slug, duplicate drop address, bad date key)."""


def partner_not_found() -> HTTPException:
    return HTTPException(status_code=STATUS_NOT_FOUND, detail=MSG_PARTNER_NOT_FOUND)


# ---------------------------------------------------------------------------
# Error rules: (exception type, status_code, detail_message)
# Add new rules here instead of scattering checks in routes.
# ---------------------------------------------------------------------------

def _is_bad_date(exc: Exception) -> bool:
    return isinstance(exc, ValueError) and not isinstance(exc, ScheduleError)


# List of (predicate, status_code, detail). First match wins.
REQUEST_ERROR_RULES: list[tuple[Callable[[Exception], bool], int, str]] = [
    (_is_bad_date, STATUS_BAD_REQUEST, MSG_INVALID_SPOOF_DATE),
]


def request_error_to_http(exc: Exception) -> HTTPException:
    """
    Map an exception raised while resolving a page request into an HTTPException.
    Uses REQUEST_ERROR_RULES for known error types; otherwise returns 500 with the exception message.
    """
    for predicate, status_code, detail in REQUEST_ERROR_RULES:
        if predicate(exc):
            return HTTPException(status_code=status_code, detail=detail)
    return HTTPException(status_code=STATUS_INTERNAL_ERROR, detail=str(exc))
