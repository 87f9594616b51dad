from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class CountryCoordinate:
    display_name: str
    latitude: float
    longitude: float
    default_zoom: int


# Keyed by canonical place name. Read-only reference data.
COUNTRY_COORDINATES: Mapping[str, CountryCoordinate] = MappingProxyType({
    "Canada": CountryCoordinate("Canadá", 56.1304, -106.3468, 4),
    "Toronto": CountryCoordinate("Toronto, Canadá", 43.6629, -79.3957, 13),
    "Vancouver": CountryCoordinate("Vancouver, Canadá", 49.2827, -123.1207, 13),
    "Mexico": CountryCoordinate("México", 23.6345, -102.5528, 4),
    "Colombia": CountryCoordinate("Colombia", 4.5709, -74.2973, 4),
    "USA": CountryCoordinate("Estados Unidos", 37.0902, -95.7129, 4),
    "España": CountryCoordinate("España", 40.4637, -3.7492, 5),
    "Portugal": CountryCoordinate("Portugal", 39.3999, -8.2245, 6),
    "Italia": CountryCoordinate("Italia", 41.8719, 12.5674, 5),
})


def lookup(place: str) -> Optional[CountryCoordinate]:
    """Coordinates for a canonical place name, or None when unknown."""
    return COUNTRY_COORDINATES.get(place)


def places() -> list[str]:
    return list(COUNTRY_COORDINATES)
