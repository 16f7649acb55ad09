from __future__ import annotations

import os

from sqlalchemy import text

from services.api.app.db.database import get_engine
from services.api.app.db.models import Base


def init_db() -> None:
    engine = get_engine()

    if os.getenv("ORDERMAP_DB_AUTO_CREATE", "true").strip().lower() in {"1", "true", "yes", "y"}:
        Base.metadata.create_all(bind=engine)

    # Fail fast when the database is unreachable.
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
