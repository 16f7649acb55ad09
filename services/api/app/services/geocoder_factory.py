from __future__ import annotations

import os

from services.api.app.services.geocoder_base import Geocoder
from services.api.app.services.geocoder_fake import FakeGeocoder


def get_geocoder() -> Geocoder:
    """Select a geocoder based on env vars.

    Defaults to the fake geocoder so tests and local dev are deterministic unless explicitly
    configured otherwise. Set ORDERMAP_GEOCODER=google and GOOGLE_MAPS_API_KEY for real lookups.
    """

    mode = os.getenv("ORDERMAP_GEOCODER", "fake").strip().lower()

    if mode == "fake":
        return FakeGeocoder()

    if mode == "google":
        from services.api.app.services.geocoder_google import GoogleGeocoder

        return GoogleGeocoder.from_env()

    raise ValueError(f"Unknown ORDERMAP_GEOCODER={mode!r}. Expected fake or google.")
