"""Process-wide logger for the ordermap service."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger("ordermap")
if not logger.handlers:
    h = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    h.setFormatter(fmt)
    logger.addHandler(h)
    logger.setLevel(os.getenv("ORDERMAP_LOG_LEVEL", "INFO").strip().upper() or "INFO")


def get_logger() -> logging.Logger:
    return logger
