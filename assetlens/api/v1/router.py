from fastapi import APIRouter

from assetlens.api.v1.endpoints import assets, land_assessments, maps, users, valuations

# Create API router
api_router = APIRouter()

# Include routers
api_router.include_router(users.router, prefix="/users", tags=["User"])
api_router.include_router(valuations.router, prefix="/valuations", tags=["Valuations"])
api_router.include_router(land_assessments.router, prefix="/land-assessments", tags=["Land Assessments"])
api_router.include_router(assets.router, tags=["Portfolio"])
api_router.include_router(maps.router, prefix="/maps-config", tags=["Maps"])

__all__ = ["api_router"]
