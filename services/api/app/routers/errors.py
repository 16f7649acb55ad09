from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException
from jinja2 import TemplateError

from services.api.app.services.geocoder_base import GeocodeError
from services.api.app.services.store import StoreError


def raise_http_error(e: Exception) -> NoReturn:
    """Map a domain failure onto the HTTP error the caller sees."""

    if isinstance(e, (StoreError, GeocodeError, TemplateError)):
        raise HTTPException(status_code=500, detail=str(e)) from e

    raise HTTPException(status_code=500, detail="Internal Server Error") from e
