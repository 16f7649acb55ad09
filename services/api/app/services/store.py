from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from services.api.app.db.models import OrderRow
from services.api.app.models.order import Order
from services.api.app.utils.logger import get_logger

logger = get_logger()


class StoreError(Exception):
    """Raised when the order database cannot be written or read."""


class OrderStore:
    """Append-only order collection backed by SQLAlchemy.

    Every call opens its own session, so a single instance can be shared across
    concurrent requests.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def insert(self, order: Order) -> None:
        row = OrderRow(
            name=order.name,
            phone=order.phone,
            address=order.address,
            preferred_delivery_time=order.preferred_delivery_time,
        )
        try:
            with self._session_factory() as db:
                db.add(row)
                db.commit()
        except SQLAlchemyError as e:
            logger.error("order insert failed: %s", e)
            raise StoreError(f"order insert failed: {e}") from e

    def list_all(self) -> list[Order]:
        try:
            with self._session_factory() as db:
                rows = db.execute(select(OrderRow).order_by(OrderRow.id)).scalars().all()
                return [Order.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("order listing failed: %s", e)
            raise StoreError(f"order listing failed: {e}") from e
