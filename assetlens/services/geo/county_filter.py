"""County allow-list for property assessments.

Parcel data is licensed for a fixed set of counties. Coordinates from the
address autocomplete are checked against each county's bounding box before any
provider call is made.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from assetlens.core.exceptions import LocationNotPermittedError
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class BoundingBox:
    north: float
    south: float
    east: float
    west: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.south <= lat <= self.north and self.west <= lng <= self.east


@dataclass(frozen=True)
class PermittedCounty:
    name: str
    fips_code: str
    state: str
    bounds: BoundingBox


PERMITTED_COUNTIES: Tuple[PermittedCounty, ...] = (
    PermittedCounty("Marion County, Indiana", "18097", "IN", BoundingBox(39.9366, 39.6378, -85.9368, -86.3425)),
    PermittedCounty("Dallas County, Texas", "48113", "TX", BoundingBox(33.0175, 32.6183, -96.4637, -97.0226)),
    PermittedCounty("Wilson County, Tennessee", "47189", "TN", BoundingBox(36.3444, 35.9844, -86.0531, -86.6181)),
    PermittedCounty("Durham County, North Carolina", "37063", "NC", BoundingBox(36.1831, 35.8194, -78.5731, -79.1056)),
    PermittedCounty("Fillmore County, Nebraska", "31059", "NE", BoundingBox(40.8781, 40.5031, -97.4256, -98.0481)),
    PermittedCounty("Clark County, Wisconsin", "55019", "WI", BoundingBox(45.0819, 44.2719, -90.1531, -90.9681)),
    PermittedCounty("Gurabo Municipio, Puerto Rico", "72063", "PR", BoundingBox(18.2944, 18.2031, -65.9156, -66.0056)),
)


def find_permitted_county(lat: float, lng: float) -> Optional[PermittedCounty]:
    """First permitted county whose bounding box contains the point, if any."""
    for county in PERMITTED_COUNTIES:
        if county.bounds.contains(lat, lng):
            return county
    return None


def is_location_permitted(lat: float, lng: float) -> bool:
    return find_permitted_county(lat, lng) is not None


def ensure_location_permitted(lat: Optional[float], lng: Optional[float]) -> Optional[PermittedCounty]:
    """Reject coordinates outside every permitted county.

    Requests without coordinates are let through; the parcel lookup decides.

    Raises:
        LocationNotPermittedError: If coordinates are given and fall outside all counties
    """
    if lat is None or lng is None:
        return None

    county = find_permitted_county(lat, lng)
    if county is None:
        LOGGER.info(f"Rejected assessment outside permitted counties at ({lat}, {lng})")
        raise LocationNotPermittedError(f"Location ({lat}, {lng}) is outside the permitted counties")
    return county
