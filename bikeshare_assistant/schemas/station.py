from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional


# ============ Common Schemas ============

class Coordinate(BaseModel):
    """Coordinate schema for latitude/longitude pairs"""
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")


class ResourceKind(str, Enum):
    """What the user is looking for at a station"""
    BIKES = "bikes"
    STANDS = "stands"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ResourceKind":
        """Anything other than "stands" means bikes."""
        if value == cls.STANDS.value:
            return cls.STANDS
        return cls.BIKES


# ============ Provider Station Schemas ============

class Position(BaseModel):
    """Station position as reported by the provider"""
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")

    class Config:
        frozen = True


class Station(BaseModel):
    """A docking station as reported by the bike-share provider"""
    address: str = Field(..., description="Street address of the station")
    position: Position = Field(..., description="Station coordinates")
    status: str = Field(..., description="OPEN or CLOSED")
    available_bikes: int = Field(..., ge=0, description="Bikes ready to be taken")
    available_bike_stands: int = Field(..., ge=0, description="Free docking stands")
    number: Optional[int] = Field(None, description="Station number within the contract")
    name: Optional[str] = Field(None, description="Station display name")
    contract_name: Optional[str] = Field(None, description="Provider contract the station belongs to")
    bike_stands: Optional[int] = Field(None, description="Total number of stands")
    last_update: Optional[int] = Field(None, description="Last update, epoch milliseconds")

    class Config:
        frozen = True

    def available(self, kind: ResourceKind) -> int:
        """Count of the requested resource at this station"""
        if kind == ResourceKind.STANDS:
            return self.available_bike_stands
        return self.available_bikes
