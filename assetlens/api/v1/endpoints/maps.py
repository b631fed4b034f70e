from fastapi import APIRouter
from pydantic import BaseModel, Field

from assetlens.core.config import settings

router = APIRouter()


class MapsConfigResponse(BaseModel):
    api_key: str = Field(..., description="Browser key for the maps and places loader")
    configured: bool = Field(..., description="Whether a key is set")


@router.get(
    "",
    response_model=MapsConfigResponse,
    summary="Get maps client configuration",
    operation_id="get_maps_config",
)
async def get_maps_config() -> MapsConfigResponse:
    """Browser maps key for address autocomplete and the mini map."""
    api_key = settings.providers.google_maps_api_key
    return MapsConfigResponse(api_key=api_key, configured=bool(api_key))
