"""Provider field alias tables and unit constants.

Each entry maps one logical field to the ordered list of keys it has been
observed under in provider responses. Keys are tried in order; a tuple is a
path into nested records.
"""

from dataclasses import dataclass
from typing import Any, Tuple, Union

KeyPath = Union[str, Tuple[Union[str, int], ...]]

# Parcel responses from newer API versions nest values under this key
NESTED_FIELDS_KEY = "fields"

SQFT_PER_ACRE = 43560

DEFAULT_PROPERTY_TYPE = "Unknown"


@dataclass(frozen=True)
class FieldSpec:
    """One logical field: its alias chain and the value used when none match."""

    name: str
    aliases: Tuple[KeyPath, ...]
    default: Any = None


PROPERTY_FIELDS = {
    spec.name: spec
    for spec in (
        FieldSpec("assessed_value", ("parval", "assessval", "totval"), 0),
        FieldSpec("land_value", ("landval", "lndval", "land_value"), 0),
        FieldSpec("improvement_value", ("improvval", "impval", "bldgval"), 0),
        FieldSpec("lot_acres", ("ll_gisacre", "gisacre", "deeded_acres", "acres"), None),
        FieldSpec("lot_sqft", ("ll_gissqft", "gissqft", "sqft", "lot_sqft"), None),
        FieldSpec("property_type", ("usedesc", "usecode", "zoning_code", "zoning"), DEFAULT_PROPERTY_TYPE),
        FieldSpec("year_built", ("yearbuilt", "year_built", "yrbuilt"), None),
        FieldSpec("owner_name", ("owner", "ownername", ("owners", 0, "owner")), None),
        FieldSpec("apn", ("parcelnumb", "apn", "parcel_number"), None),
    )
}

LISTING_FIELDS = {
    spec.name: spec
    for spec in (
        FieldSpec("price", ("price", "list_price", "asking_price"), 0),
    )
}
