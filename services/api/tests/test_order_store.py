from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError
from services.api.app.models.order import Order
from services.api.app.services.store import OrderStore, StoreError


@pytest.fixture()
def store(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> OrderStore:
    db_path = tmp_path / "ordermap_store.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_path}")
    monkeypatch.setenv("ORDERMAP_DB_AUTO_CREATE", "true")

    from services.api.app.db.database import get_sessionmaker
    from services.api.app.db.init_db import init_db

    init_db()
    return OrderStore(get_sessionmaker())


def test_list_all_is_empty_before_any_insert(store: OrderStore) -> None:
    assert store.list_all() == []


def test_insert_then_list_returns_the_record(store: OrderStore) -> None:
    order = Order(
        name="A",
        phone="555",
        address="1 Infinite Loop, Cupertino, CA",
        preferred_delivery_time="morning",
    )
    store.insert(order)

    assert store.list_all() == [order]


def test_list_all_keeps_insertion_order_and_duplicates(store: OrderStore) -> None:
    orders = [Order(name=f"n{i}", address=f"{i} Main St") for i in range(5)]
    for order in orders:
        store.insert(order)
    store.insert(orders[0])

    listed = store.list_all()
    assert listed == orders + [orders[0]]


def test_values_are_stored_verbatim(store: OrderStore) -> None:
    order = Order(name="  padded  ", phone="", address="\tTabbed\n", preferred_delivery_time="")
    store.insert(order)

    assert store.list_all() == [order]


class _BrokenSession:
    def __enter__(self) -> _BrokenSession:
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    def __exit__(self, *exc: object) -> None:
        return None


def test_backend_failures_surface_as_store_error() -> None:
    store = OrderStore(lambda: _BrokenSession())

    with pytest.raises(StoreError, match="order insert failed"):
        store.insert(Order(name="x"))

    with pytest.raises(StoreError, match="order listing failed"):
        store.list_all()
