"""
Utilities Package

Small helpers shared by the routers.
"""

from typing import Optional

from fastapi import status
from fastapi.responses import RedirectResponse


def see_other(url: str) -> RedirectResponse:
    """
    Redirect after a form submission.

    303 makes the browser follow up with a GET, so reloading the resulting
    page doesn't resubmit the form.
    """
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def parse_id(value: object) -> Optional[int]:
    """Turn a submitted record id into an int (None if it isn't one)."""
    text = str(value).strip() if value is not None else ""
    return int(text) if text.isdigit() else None
