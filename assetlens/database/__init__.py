"""Database module for SQLAlchemy models."""

from assetlens.database.models import (
    LandAssessmentRequest,
    LandAssessmentResult,
    User,
    UserAsset,
    ValuationRequest,
    ValuationResult,
)

__all__ = [
    "User",
    "UserAsset",
    "ValuationRequest",
    "ValuationResult",
    "LandAssessmentRequest",
    "LandAssessmentResult",
]
