from __future__ import annotations

import http.client
import json
import math
import os
import urllib.error
import urllib.parse
import urllib.request

from services.api.app.models.order import Location
from services.api.app.services.geocoder_base import (
    GeocodeNoResultsError,
    GeocodeRequestError,
    GeocodeStatusError,
)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleGeocoder:
    """Geocoding via the Google Maps Geocoding API.

    One blocking request per call. Only the first result is used.
    """

    provider = "GOOGLE"

    def __init__(self, *, api_key: str, timeout_s: float = 10.0) -> None:
        self._api_key = api_key
        self._timeout_s = timeout_s

    @classmethod
    def from_env(cls) -> GoogleGeocoder:
        api_key = os.getenv("GOOGLE_MAPS_API_KEY", "").strip()
        if not api_key:
            raise ValueError("GOOGLE_MAPS_API_KEY is required when ORDERMAP_GEOCODER=google")

        raw_timeout = os.getenv("ORDERMAP_GEOCODE_TIMEOUT_S", "10").strip()
        try:
            timeout_s = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"Invalid ORDERMAP_GEOCODE_TIMEOUT_S={raw_timeout!r}") from e
        if not math.isfinite(timeout_s) or timeout_s <= 0:
            raise ValueError(
                f"ORDERMAP_GEOCODE_TIMEOUT_S must be a positive number of seconds, got {raw_timeout!r}"
            )

        return cls(api_key=api_key, timeout_s=timeout_s)

    def geocode(self, address: str) -> Location:
        query = urllib.parse.urlencode({"address": address, "key": self._api_key})
        req = urllib.request.Request(f"{GEOCODE_URL}?{query}", method="GET")

        try:
            with urllib.request.urlopen(req, timeout=self._timeout_s) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            raise GeocodeRequestError(f"Geocoding HTTP {e.code}: {e.reason}") from e
        except (urllib.error.URLError, TimeoutError) as e:
            raise GeocodeRequestError(f"Geocoding request failed: {e}") from e
        except (OSError, http.client.HTTPException) as e:
            # Failures while reading the body are not wrapped in URLError.
            raise GeocodeRequestError(f"Geocoding response could not be read: {e!r}") from e

        try:
            payload = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise GeocodeRequestError(f"Geocoding response is not valid JSON: {e}") from e

        status = payload.get("status", "") if isinstance(payload, dict) else ""
        if status != "OK":
            raise GeocodeStatusError(status or "MISSING")

        results = payload.get("results") or []
        if not results:
            raise GeocodeNoResultsError(address)

        try:
            point = results[0]["geometry"]["location"]
            return Location(lat=float(point["lat"]), lng=float(point["lng"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodeRequestError(f"Unexpected geocoding response shape: {results[0]!r}") from e
