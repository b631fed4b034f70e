"""MarketCheck active-listing search client."""

from typing import Any, Dict, List, Optional

from assetlens.core.config import settings
from assetlens.schemas.valuation import ValuationRequestCreate
from assetlens.services.providers.base_client import BaseProviderClient
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

SEARCH_ENDPOINT = "/search/car/active"


class MarketCheckClient(BaseProviderClient):
    """Fetches comparable active listings for a vehicle."""

    provider_name = "MarketCheck"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        radius_miles: Optional[int] = None,
        mileage_window: Optional[int] = None,
        max_listings: Optional[int] = None,
        **kwargs,
    ):
        providers = settings.providers
        kwargs.setdefault("timeout", providers.timeout_seconds)
        kwargs.setdefault("max_retries", providers.max_retries)
        kwargs.setdefault("retry_delay", providers.retry_delay)
        super().__init__(
            credential=providers.marketcheck_api_key if api_key is None else api_key,
            base_url=base_url or providers.marketcheck_base_url,
            **kwargs,
        )
        self.radius_miles = radius_miles or providers.vehicle_search_radius_miles
        self.mileage_window = providers.vehicle_mileage_window if mileage_window is None else mileage_window
        self.max_listings = max_listings or providers.vehicle_max_listings

    def build_params(self, vehicle: ValuationRequestCreate) -> Dict[str, Any]:
        """Query parameters for a comparable search around the vehicle's mileage."""
        low = max(0, vehicle.mileage - self.mileage_window)
        high = vehicle.mileage + self.mileage_window
        return {
            "api_key": self.credential,
            "make": vehicle.make,
            "model": vehicle.model,
            "year": vehicle.year,
            "zip": vehicle.zip_code,
            "radius": self.radius_miles,
            "miles_range": f"{low}-{high}",
            "rows": self.max_listings,
        }

    async def search_listings(self, vehicle: ValuationRequestCreate) -> List[Dict[str, Any]]:
        """Return the raw listing records for comparable vehicles.

        Raises:
            ConfigurationError: If the API key is missing or rejected
            ProviderUnavailableError: If the provider cannot be reached
        """
        self.ensure_configured()
        payload = await self.get_json(SEARCH_ENDPOINT, params=self.build_params(vehicle))

        listings = payload.get("listings") if isinstance(payload, dict) else None
        if not isinstance(listings, list):
            LOGGER.warning(
                f"MarketCheck response has no listings array; keys: {sorted(payload) if isinstance(payload, dict) else type(payload).__name__}"
            )
            return []

        LOGGER.info(
            f"MarketCheck returned {len(listings)} listings for {vehicle.year} {vehicle.make} {vehicle.model}"
        )
        return [listing for listing in listings if isinstance(listing, dict)]
