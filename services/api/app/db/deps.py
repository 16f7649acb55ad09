from __future__ import annotations

from fastapi import Request

from services.api.app.services.store import OrderStore


def get_store(request: Request) -> OrderStore:
    """The store is built once at startup and shared by every request."""

    return request.app.state.store
