"""Portfolio and dashboard endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status

from assetlens.core.dependencies import get_asset_service, get_caller
from assetlens.database.models import User
from assetlens.schemas.assets import UserAssetBind
from assetlens.schemas.common import ApiResponse
from assetlens.services.asset_service import AssetService
from assetlens.utils.logging import get_logger
from assetlens.utils.responses import create_api_response

LOGGER = get_logger(__name__)

router = APIRouter()


@router.get(
    "/assets",
    response_model=ApiResponse,
    summary="List portfolio assets",
    operation_id="list_user_assets",
)
async def list_assets(
    request: Request,
    user: Annotated[User, Depends(get_caller)],
    asset_service: Annotated[AssetService, Depends(get_asset_service)],
) -> ApiResponse:
    """List the caller's vehicles and properties in the order they were added."""
    assets = await asset_service.list_assets(user.id)
    return create_api_response(
        data=assets,
        message="Assets retrieved successfully",
        request=request,
    )


@router.post(
    "/assets",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an asset to the portfolio",
    operation_id="add_user_asset",
)
async def add_asset(
    request: Request,
    payload: UserAssetBind,
    user: Annotated[User, Depends(get_caller)],
    asset_service: Annotated[AssetService, Depends(get_asset_service)],
) -> ApiResponse:
    """Add an existing valuation or assessment to the caller's portfolio under an optional name."""
    asset = await asset_service.add_asset(user, payload)
    return create_api_response(
        data=asset,
        message="Asset added successfully",
        request=request,
    )


@router.get(
    "/dashboard",
    response_model=ApiResponse,
    summary="Get portfolio dashboard",
    operation_id="get_user_dashboard",
)
async def get_dashboard(
    request: Request,
    user: Annotated[User, Depends(get_caller)],
    asset_service: Annotated[AssetService, Depends(get_asset_service)],
) -> ApiResponse:
    """Portfolio totals and per-type counts for the caller."""
    dashboard = await asset_service.dashboard(user)
    LOGGER.info(f"Dashboard for user {user.id}: {len(dashboard.assets)} assets, {dashboard.total_value}")
    return create_api_response(
        data=dashboard,
        message="Dashboard retrieved successfully",
        request=request,
    )
