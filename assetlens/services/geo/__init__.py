from assetlens.services.geo.county_filter import (
    PERMITTED_COUNTIES,
    ensure_location_permitted,
    find_permitted_county,
    is_location_permitted,
)

__all__ = [
    "PERMITTED_COUNTIES",
    "ensure_location_permitted",
    "find_permitted_county",
    "is_location_permitted",
]
