from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from services.api.app.db.deps import get_store
from services.api.app.routers.errors import raise_http_error
from services.api.app.services.store import OrderStore, StoreError

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def order_form(request: Request) -> HTMLResponse:
    try:
        return templates.TemplateResponse(request, "form.html", {})
    except TemplateError as e:
        raise_http_error(e)


@router.get("/map", response_class=HTMLResponse)
def order_map(request: Request, store: OrderStore = Depends(get_store)) -> HTMLResponse:
    try:
        orders = store.list_all()
        return templates.TemplateResponse(request, "map.html", {"orders": orders})
    except (StoreError, TemplateError) as e:
        raise_http_error(e)
