from __future__ import annotations

from typing import Protocol

from services.api.app.models.order import Location


class GeocodeError(Exception):
    """Base class for geocoding errors."""


class GeocodeRequestError(GeocodeError):
    """The provider could not be reached or answered with something unreadable."""


class GeocodeStatusError(GeocodeError):
    def __init__(self, status: str) -> None:
        super().__init__(f"Geocode request failed with status: {status}")
        self.status = status


class GeocodeNoResultsError(GeocodeError):
    def __init__(self, address: str) -> None:
        super().__init__(f"No geocoding results for address: {address!r}")
        self.address = address


class Geocoder(Protocol):
    provider: str

    def geocode(self, address: str) -> Location: ...
