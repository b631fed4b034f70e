"""Regrid parcel address search client."""

import re
from typing import Any, Dict, List, Optional

from assetlens.core.config import settings
from assetlens.services.providers.base_client import BaseProviderClient
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

ADDRESS_ENDPOINT = "/parcels/address"

# "Apt 4B", "Suite 200", "Unit 7", "#12" and similar trailing unit designators
_UNIT_DESIGNATOR = re.compile(
    r"(?:,?\s+(?:apt|apartment|suite|ste|unit|bldg|building|fl|floor|rm|room)\b\.?\s*[\w-]+|\s*#\s*[\w-]+)",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s+")


def build_primary_query(street_address: str, city: str, state: str, zip_code: Optional[str] = None) -> str:
    """Full one-line address, e.g. ``101 Main St Apt 2, Durham, NC 27701``."""
    query = f"{street_address.strip()}, {city.strip()}, {state.strip()}"
    if zip_code:
        query = f"{query} {zip_code.strip()}"
    return query


def strip_unit_designators(street_address: str) -> str:
    street = _UNIT_DESIGNATOR.sub("", street_address)
    return _WHITESPACE.sub(" ", street).strip(" ,")


def build_alternate_query(street_address: str, city: str, state: str) -> str:
    """Shortened address used once when the primary query matches nothing.

    Unit designators are removed and the zip code is dropped, since parcels
    are recorded against the building and zip codes are often stale.
    """
    return f"{strip_unit_designators(street_address)}, {city.strip()}, {state.strip()}"


def extract_parcels(payload: Any) -> List[Dict[str, Any]]:
    """Parcel ``properties`` records from a v2 (``parcels.features``) or v1 (``results``) response."""
    if not isinstance(payload, dict):
        return []

    parcels = payload.get("parcels")
    if isinstance(parcels, dict):
        features = parcels.get("features")
    else:
        features = payload.get("features", payload.get("results"))

    if not isinstance(features, list):
        return []

    records = []
    for feature in features:
        if isinstance(feature, dict) and isinstance(feature.get("properties"), dict):
            records.append(feature["properties"])
    return records


class RegridClient(BaseProviderClient):
    """Looks up parcel records by free-text address."""

    provider_name = "Regrid"

    def __init__(self, api_token: Optional[str] = None, base_url: Optional[str] = None, **kwargs):
        providers = settings.providers
        kwargs.setdefault("timeout", providers.timeout_seconds)
        kwargs.setdefault("max_retries", providers.max_retries)
        kwargs.setdefault("retry_delay", providers.retry_delay)
        super().__init__(
            credential=providers.regrid_api_token if api_token is None else api_token,
            base_url=base_url or providers.regrid_base_url,
            **kwargs,
        )

    async def search_address(self, query: str, limit: int = 1) -> List[Dict[str, Any]]:
        """Return parcel records matching ``query``; empty when nothing matches.

        Raises:
            ConfigurationError: If the token is missing or rejected
            ProviderUnavailableError: If the provider cannot be reached
        """
        self.ensure_configured()
        payload = await self.get_json(
            ADDRESS_ENDPOINT,
            params={"query": query, "token": self.credential, "limit": limit},
        )
        parcels = extract_parcels(payload)
        LOGGER.info(f"Regrid returned {len(parcels)} parcel(s) for query {query!r}")
        return parcels
