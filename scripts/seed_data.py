from __future__ import annotations

import argparse

from services.api.app.db.database import get_sessionmaker
from services.api.app.db.init_db import init_db
from services.api.app.models.order import Order
from services.api.app.services.store import OrderStore

SAMPLE_ORDERS = (
    ("Ada", "555-0100", "1 Infinite Loop, Cupertino, CA", "morning"),
    ("Grace", "555-0101", "1600 Amphitheatre Parkway, Mountain View, CA", "afternoon"),
    ("Linus", "555-0102", "1600 Pennsylvania Avenue NW, Washington, DC", "evening"),
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed sample delivery orders")
    parser.add_argument(
        "--count",
        type=int,
        default=len(SAMPLE_ORDERS),
        help=f"How many sample orders to insert (default: {len(SAMPLE_ORDERS)})",
    )
    args = parser.parse_args()

    init_db()
    store = OrderStore(get_sessionmaker())

    for i in range(args.count):
        name, phone, address, when = SAMPLE_ORDERS[i % len(SAMPLE_ORDERS)]
        store.insert(Order(name=name, phone=phone, address=address, preferred_delivery_time=when))

    print(f"Seeded {args.count} orders")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
