from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from services.api.app.db.deps import get_store
from services.api.app.models.order import Order, OrdersWithLocations
from services.api.app.routers.errors import raise_http_error
from services.api.app.services.geocoder_base import GeocodeError
from services.api.app.services.geocoder_factory import get_geocoder
from services.api.app.services.orders import ingest_order, locate_orders
from services.api.app.services.store import OrderStore, StoreError

router = APIRouter()


def _field(form: FormData, key: str) -> str:
    # Uploaded files are not order fields.
    value = form.get(key, "")
    return value if isinstance(value, str) else ""


@router.post("/submit")
async def submit_order(request: Request, store: OrderStore = Depends(get_store)) -> RedirectResponse:
    try:
        form = await request.form()
    except StarletteHTTPException as e:
        raise HTTPException(status_code=500, detail=str(e.detail)) from e
    except MultiPartException as e:
        raise HTTPException(status_code=500, detail=e.message) from e

    order = Order(
        name=_field(form, "name"),
        phone=_field(form, "phone"),
        address=_field(form, "address"),
        # Older copies of the form post the field under its original name.
        preferred_delivery_time=_field(form, "preferred_delivery_time")
        or _field(form, "preferable_delivery_time"),
    )

    try:
        await run_in_threadpool(ingest_order, store, order)
    except StoreError as e:
        raise_http_error(e)

    return RedirectResponse(url="/map", status_code=303)


@router.get("/api/orders", response_model=OrdersWithLocations)
def list_orders_with_locations(store: OrderStore = Depends(get_store)) -> OrdersWithLocations:
    try:
        geocoder = get_geocoder()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    try:
        return locate_orders(store, geocoder)
    except (StoreError, GeocodeError) as e:
        raise_http_error(e)
