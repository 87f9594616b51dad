from enum import Enum
from typing import Optional

from console.schemas.common import EntityId, Patch, Record


class LocationKind(str, Enum):
    OFFICE = "office"
    WAREHOUSE = "warehouse"
    DISTRIBUTION_CENTER = "distribution-center"


class LocationDraft(Record):
    name: str
    latitude: float
    longitude: float
    country: str
    city: str
    kind: LocationKind = LocationKind.OFFICE
    active: bool = True


class Location(LocationDraft):
    id: EntityId


class LocationPatch(Patch):
    name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    country: Optional[str] = None
    city: Optional[str] = None
    kind: Optional[LocationKind] = None
    active: Optional[bool] = None
