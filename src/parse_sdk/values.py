"""Special value shapes that can be stored in Parse object fields."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .objects import ParseObject

EARTH_MEAN_RADIUS_KM = 6371.0
EARTH_MEAN_RADIUS_MILES = 3958.8


class RemoteValue:
    """Base class of ParseObject and ParseRelation.

    Every subclass is accepted as a field value by the type validator.
    """


@dataclass
class ParseRelation(RemoteValue):
    """Many-to-many reference from ``parent.key`` to objects of ``target_class``."""

    parent: ParseObject
    key: str
    target_class: Optional[str] = None


class _NullType:
    """Explicit JSON ``null`` understood by the backend.

    Python ``None`` means "no value" inside the SDK; ``NULL`` is what gets
    written when a field should be stored as null.
    """

    _instance: Optional["_NullType"] = None

    def __new__(cls) -> "_NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL"


NULL = _NullType()


class ParseGeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(default=0.0, ge=-90.0, le=90.0)
    longitude: float = Field(default=0.0, ge=-180.0, le=180.0)

    def distance_in_radians_to(self, other: "ParseGeoPoint") -> float:
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        d_lat = lat2 - lat1
        d_lon = math.radians(other.longitude - self.longitude)
        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        return 2 * math.asin(min(1.0, math.sqrt(a)))

    def distance_in_kilometers_to(self, other: "ParseGeoPoint") -> float:
        return self.distance_in_radians_to(other) * EARTH_MEAN_RADIUS_KM

    def distance_in_miles_to(self, other: "ParseGeoPoint") -> float:
        return self.distance_in_radians_to(other) * EARTH_MEAN_RADIUS_MILES


class ParseFile(BaseModel):
    """A file stored by the backend, or pending upload when ``url`` is unset."""

    name: str = Field(..., min_length=1)
    url: Optional[str] = None
    content_type: Optional[str] = None
    data: Optional[bytes] = None

    def is_uploaded(self) -> bool:
        return self.url is not None


__all__ = ["NULL", "ParseFile", "ParseGeoPoint", "ParseRelation", "RemoteValue"]
