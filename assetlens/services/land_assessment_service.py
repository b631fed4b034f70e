"""Land assessment workflow."""

from typing import Any, Dict, Optional

from assetlens.core.config import settings
from assetlens.core.exceptions import NoComparableDataError
from assetlens.database.models import User
from assetlens.repositories.store import BaseStore
from assetlens.schemas.assets import AssetType, UserAssetCreate
from assetlens.schemas.land import LandAssessmentRequestCreate, LandAssessmentResponse
from assetlens.services.base_service import BaseService
from assetlens.services.geo.county_filter import ensure_location_permitted
from assetlens.services.normalization import PropertyNormalizer
from assetlens.services.providers.regrid_client import (
    RegridClient,
    build_alternate_query,
    build_primary_query,
)
from assetlens.services.records_service import RecordService
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


class LandAssessmentService(BaseService):
    """Looks up a parcel by address and records its normalized values."""

    def __init__(
        self,
        store: BaseStore,
        client: Optional[RegridClient] = None,
        normalizer: Optional[PropertyNormalizer] = None,
        restrict_to_permitted_counties: Optional[bool] = None,
    ):
        super().__init__()
        self.store = store
        self.records = RecordService(store)
        self.client = client or RegridClient()
        self.normalizer = normalizer or PropertyNormalizer()
        if restrict_to_permitted_counties is None:
            restrict_to_permitted_counties = settings.restrict_to_permitted_counties
        self.restrict_to_permitted_counties = restrict_to_permitted_counties

    def validate(self, data: LandAssessmentRequestCreate, owner: Optional[User] = None):
        if self.restrict_to_permitted_counties:
            ensure_location_permitted(data.lat, data.lng)

    async def run(self, data: LandAssessmentRequestCreate, owner: Optional[User] = None) -> LandAssessmentResponse:
        """Assess a property end to end.

        Raises:
            ConfigurationError: If the parcel provider is not configured
            ProviderUnavailableError: If the parcel provider cannot be reached
            NoComparableDataError: If no parcel matches or it carries no usable value
        """
        data = data.model_copy(update={"user_id": owner.id if owner is not None else None})

        request = await self.records.create_land_request(data)

        parcel = await self.find_parcel(data)
        fields = self.normalizer.normalize(parcel)

        result = await self.records.create_land_result(fields.to_result(request.id))

        if owner is not None:
            await self.store.create_user_asset(
                UserAssetCreate(user_id=owner.id, asset_type=AssetType.PROPERTY, asset_id=request.id)
            )

        return RecordService.build_land_report(request, result)

    async def find_parcel(self, data: LandAssessmentRequestCreate) -> Dict[str, Any]:
        """First parcel for the full address, retrying once with a shortened address."""
        primary = build_primary_query(data.street_address, data.city, data.state, data.zip_code)
        parcels = await self.client.search_address(primary)
        if parcels:
            return parcels[0]

        alternate = build_alternate_query(data.street_address, data.city, data.state)
        LOGGER.info(f"No parcel for {primary!r}; retrying as {alternate!r}")
        parcels = await self.client.search_address(alternate)
        if parcels:
            return parcels[0]

        raise NoComparableDataError(
            f"No parcel found for {primary!r} or {alternate!r}",
            user_message="Property not found. Please check the address and try again.",
        )
