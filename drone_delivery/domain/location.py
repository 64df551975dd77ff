"""Location value object for drone positions and drop-off points."""
from typing import Dict

from pydantic import Field, ValidationInfo, field_validator

from drone_delivery.domain.exceptions import OutOfRangeError
from drone_delivery.domain.value_object import ValueObject

MIN_LATITUDE = -90
MAX_LATITUDE = 90
MIN_LONGITUDE = -180
MAX_LONGITUDE = 180

_BOUNDS = {
    "latitude": (MIN_LATITUDE, MAX_LATITUDE),
    "longitude": (MIN_LONGITUDE, MAX_LONGITUDE),
}


class Location(ValueObject):
    """A point in three-dimensional space on or above the Earth.

    Locations have no identity. To move something, build a new Location
    and discard the old one.

    Attributes:
        latitude: Degrees, inclusive range [-90, 90]
        longitude: Degrees, inclusive range [-180, 180]
        altitude: Height in meters, unconstrained

    Raises:
        OutOfRangeError: If latitude or longitude is outside its range

    Example:
        >>> here = Location(latitude=47.64, longitude=-122.13, altitude=120)
        >>> here.latitude
        47.64
    """

    latitude: float = Field(description="Latitude in degrees")
    longitude: float = Field(description="Longitude in degrees")
    altitude: float = Field(description="Altitude in meters")

    @field_validator("latitude", "longitude", "altitude", mode="before")
    @classmethod
    def _reject_bool(cls, value, info: ValidationInfo):
        if isinstance(value, bool):
            raise ValueError(f"{info.field_name} must be a number, not a boolean")
        return value

    @field_validator("latitude", "longitude")
    @classmethod
    def _check_range(cls, value: float, info: ValidationInfo) -> float:
        minimum, maximum = _BOUNDS[info.field_name]
        if not minimum <= value <= maximum:
            raise OutOfRangeError(info.field_name, value, minimum, maximum)
        return value

    def as_dict(self) -> Dict[str, float]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
        }

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude} @ {self.altitude}"
