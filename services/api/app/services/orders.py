from __future__ import annotations

from services.api.app.models.order import Location, Order, OrdersWithLocations
from services.api.app.services.geocoder_base import Geocoder, GeocodeError
from services.api.app.services.store import OrderStore
from services.api.app.utils.logger import get_logger

logger = get_logger()


def ingest_order(store: OrderStore, order: Order) -> None:
    store.insert(order)
    logger.info("order accepted for address %r", order.address)


def locate_orders(store: OrderStore, geocoder: Geocoder) -> OrdersWithLocations:
    """List every order and geocode its address, one call per order, in order.

    A store failure propagates before any geocoding starts. The first geocoding failure
    aborts the whole listing; there is no per-row fallback.
    """

    orders = store.list_all()

    locations: list[Location] = []
    for order in orders:
        try:
            locations.append(geocoder.geocode(order.address))
        except GeocodeError as e:
            logger.error("geocoding %r via %s failed: %s", order.address, geocoder.provider, e)
            raise

    return OrdersWithLocations(orders=orders, locations=locations)
