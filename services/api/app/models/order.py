from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = ""
    phone: str = ""
    address: str = ""
    preferred_delivery_time: str = ""


class Location(BaseModel):
    lat: float
    lng: float


class OrdersWithLocations(BaseModel):
    """Orders paired positionally with their geocoded locations."""

    model_config = ConfigDict(populate_by_name=True)

    orders: list[Order] = Field(default_factory=list, alias="Orders")
    locations: list[Location] = Field(default_factory=list, alias="Locations")
