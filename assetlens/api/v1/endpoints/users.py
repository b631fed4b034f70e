from typing import Annotated

from fastapi import APIRouter, Depends

from assetlens.core.auth import get_current_user
from assetlens.core.dependencies import get_user_service
from assetlens.schemas.auth import CurrentUser, UserProfile
from assetlens.services.user_service import UserService
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

router = APIRouter()


@router.get(
    "/me",
    response_model=UserProfile,
    summary="Get current user profile",
    description="Get the current authenticated user's profile information",
    operation_id="get_current_user_profile",
)
async def get_current_user_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserProfile:
    """Get current user profile, creating the user record on first access."""
    LOGGER.info(f"User profile retrieved for identity: {current_user.id}")
    return await user_service.sync_current_user(current_user)


@router.post(
    "/sync",
    response_model=UserProfile,
    summary="Sync user with database",
    description="Create or refresh the stored user for the current identity",
    operation_id="sync_user",
)
async def sync_user(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserProfile:
    """Sync user with database.

    Called by the client after sign-in so that name, avatar and external
    identity id follow the latest token.
    """
    LOGGER.info(f"Syncing user: {current_user.id}")
    return await user_service.sync_current_user(current_user)
