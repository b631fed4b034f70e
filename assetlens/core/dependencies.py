"""Centralized dependency injection for the FastAPI application.

Factory functions for the storage backend and the services built on it.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status

from assetlens.core.auth import get_anonymous_id, get_current_user_optional
from assetlens.core.config import settings
from assetlens.core.database import async_session_maker
from assetlens.database.models import User
from assetlens.repositories.memory_store import InMemoryStore
from assetlens.repositories.sql_store import SQLStore
from assetlens.repositories.store import BaseStore
from assetlens.schemas.auth import CurrentUser
from assetlens.services.asset_service import AssetService
from assetlens.services.land_assessment_service import LandAssessmentService
from assetlens.services.records_service import RecordService
from assetlens.services.user_service import UserService
from assetlens.services.vehicle_valuation_service import VehicleValuationService


@lru_cache
def get_memory_store() -> InMemoryStore:
    """Process-wide in-memory store."""
    return InMemoryStore()


async def get_store() -> AsyncGenerator[BaseStore, None]:
    """Get the configured storage backend.

    Yields:
        BaseStore: In-memory store, or a SQL store bound to a fresh session
    """
    if settings.storage_backend == "memory":
        yield get_memory_store()
        return

    async with async_session_maker() as session:
        yield SQLStore(session)


async def get_record_service(store: Annotated[BaseStore, Depends(get_store)]) -> RecordService:
    return RecordService(store)


async def get_user_service(store: Annotated[BaseStore, Depends(get_store)]) -> UserService:
    return UserService(store)


async def get_asset_service(store: Annotated[BaseStore, Depends(get_store)]) -> AssetService:
    return AssetService(store)


async def get_vehicle_valuation_service(
    store: Annotated[BaseStore, Depends(get_store)],
) -> VehicleValuationService:
    """Get vehicle valuation service instance.

    Args:
        store: Storage backend from dependency injection

    Returns:
        VehicleValuationService: Service wired to the MarketCheck client
    """
    return VehicleValuationService(store)


async def get_land_assessment_service(
    store: Annotated[BaseStore, Depends(get_store)],
) -> LandAssessmentService:
    """Get land assessment service instance.

    Args:
        store: Storage backend from dependency injection

    Returns:
        LandAssessmentService: Service wired to the Regrid client
    """
    return LandAssessmentService(store)


async def get_caller(
    current_user: Annotated[Optional[CurrentUser], Depends(get_current_user_optional)],
    anonymous_id: Annotated[Optional[str], Depends(get_anonymous_id)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Signed-in or guest user for portfolio routes.

    Raises:
        HTTPException: If the caller has neither a token nor an anonymous session id
    """
    user = await user_service.resolve_owner(current_user, anonymous_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
