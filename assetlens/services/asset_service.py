"""Portfolio aggregation over a user's stored reports."""

from typing import List, Tuple

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from assetlens.core.exceptions import DanglingAssetReferenceError, RecordNotFoundError
from assetlens.database.models import User, UserAsset
from assetlens.repositories.store import BaseStore
from assetlens.schemas.assets import (
    AssetRef,
    AssetSummary,
    AssetType,
    PropertyAssetRef,
    UserAssetBind,
    UserAssetCreate,
    UserDashboard,
    VehicleAssetRef,
)
from assetlens.schemas.auth import UserProfile
from assetlens.services.records_service import RecordService
from assetlens.utils.formatting import format_currency, parse_currency
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

_ASSET_REF = TypeAdapter(AssetRef)


def asset_ref_from_record(asset: UserAsset) -> AssetRef:
    """Typed reference for a stored user asset.

    Raises:
        DanglingAssetReferenceError: If the stored asset type is not recognised
    """
    try:
        return _ASSET_REF.validate_python({"asset_type": asset.asset_type, "request_id": asset.asset_id})
    except PydanticValidationError as e:
        raise DanglingAssetReferenceError(
            f"User asset {asset.id} has unknown type {asset.asset_type!r}", original_error=e
        ) from e


class AssetService:
    """Resolves user assets into display rows and dashboard totals."""

    def __init__(self, store: BaseStore):
        self.store = store
        self.records = RecordService(store)

    async def resolve_asset(self, ref: AssetRef) -> Tuple[str, str]:
        """Summary line and display value for one reference.

        Vehicles are shown at their private-party value and properties at
        their market value.

        Raises:
            DanglingAssetReferenceError: If the request or its result is missing
        """
        if isinstance(ref, VehicleAssetRef):
            report = await self.records.get_valuation_report(ref.request_id)
            if report is not None:
                return report.vehicle_info.summary, format_currency(report.result.private_party_value)
        elif isinstance(ref, PropertyAssetRef):
            report = await self.records.get_land_report(ref.request_id)
            if report is not None:
                return report.property_info.summary, format_currency(report.result.market_value)

        raise DanglingAssetReferenceError(f"No completed {ref.asset_type} report for {ref.request_id}")

    async def summarize(self, asset: UserAsset) -> AssetSummary:
        ref = asset_ref_from_record(asset)
        summary, value = await self.resolve_asset(ref)
        return AssetSummary(
            id=asset.id,
            type=ref.asset_type,
            request_id=ref.request_id,
            name=asset.custom_name or summary,
            summary=summary,
            value=value,
            created_at=asset.created_at,
        )

    async def list_assets(self, user_id: str) -> List[AssetSummary]:
        """Resolved assets in storage order; unresolvable ones are skipped."""
        summaries = []
        for asset in await self.store.list_user_assets(user_id):
            try:
                summaries.append(await self.summarize(asset))
            except DanglingAssetReferenceError as e:
                LOGGER.warning(f"Skipping user asset {asset.id}: {e}")
        return summaries

    async def dashboard(self, user: User) -> UserDashboard:
        assets = await self.list_assets(user.id)
        total = sum(parse_currency(asset.value) for asset in assets)
        return UserDashboard(
            user=UserProfile.model_validate(user),
            assets=assets,
            total_value=format_currency(total),
            vehicle_count=sum(1 for asset in assets if asset.type == AssetType.VEHICLE),
            property_count=sum(1 for asset in assets if asset.type == AssetType.PROPERTY),
        )

    async def add_asset(self, user: User, bind: UserAssetBind) -> AssetSummary:
        """Add an existing completed report to the user's portfolio.

        Raises:
            RecordNotFoundError: If the referenced report does not exist or has no result
        """
        try:
            await self.resolve_asset(bind.asset)
        except DanglingAssetReferenceError as e:
            raise RecordNotFoundError(str(e), original_error=e) from e

        asset = await self.store.create_user_asset(
            UserAssetCreate(
                user_id=user.id,
                asset_type=bind.asset.asset_type,
                asset_id=bind.asset.request_id,
                custom_name=bind.custom_name,
            )
        )
        LOGGER.info(f"User {user.id} added {asset.asset_type} asset {asset.asset_id}")
        return await self.summarize(asset)
