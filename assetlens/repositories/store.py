"""Storage interface shared by the SQL and in-memory backends.

Both backends return the SQLAlchemy model classes from
``assetlens.database.models``; the in-memory backend simply never attaches them
to a session. Ids and creation timestamps are assigned here so that both
backends stamp records the same way.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from assetlens.database.models import (
    LandAssessmentRequest,
    LandAssessmentResult,
    User,
    UserAsset,
    ValuationRequest,
    ValuationResult,
    generate_id,
    utc_now,
)
from assetlens.schemas.assets import UserAssetCreate
from assetlens.schemas.auth import UserCreate, UserUpdate
from assetlens.schemas.land import LandAssessmentRequestCreate, LandAssessmentResultCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResultCreate


def record_values(model: type, data: BaseModel) -> Dict[str, Any]:
    """Column values for a new row: the model's columns from ``data`` plus id and timestamp."""
    columns = model.__table__.columns.keys()
    values = {key: value for key, value in data.model_dump().items() if key in columns}
    if "asset_type" in values and hasattr(values["asset_type"], "value"):
        values["asset_type"] = values["asset_type"].value
    values["id"] = generate_id()
    values["created_at"] = utc_now()
    if "updated_at" in columns:
        values["updated_at"] = values["created_at"]
    return values


class BaseStore(ABC):
    """Persistence of users, requests, results and user assets."""

    # Users

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_google_id(self, google_id: str) -> Optional[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    @abstractmethod
    async def update_user(self, user_id: str, data: UserUpdate) -> Optional[User]: ...

    # Vehicle valuations

    @abstractmethod
    async def create_valuation_request(self, data: ValuationRequestCreate) -> ValuationRequest: ...

    @abstractmethod
    async def create_valuation_result(self, data: ValuationResultCreate) -> ValuationResult: ...

    @abstractmethod
    async def get_valuation_request(self, request_id: str) -> Optional[ValuationRequest]: ...

    @abstractmethod
    async def get_valuation_result_for_request(self, request_id: str) -> Optional[ValuationResult]: ...

    # Land assessments

    @abstractmethod
    async def create_land_request(self, data: LandAssessmentRequestCreate) -> LandAssessmentRequest: ...

    @abstractmethod
    async def create_land_result(self, data: LandAssessmentResultCreate) -> LandAssessmentResult: ...

    @abstractmethod
    async def get_land_request(self, request_id: str) -> Optional[LandAssessmentRequest]: ...

    @abstractmethod
    async def get_land_result_for_request(self, request_id: str) -> Optional[LandAssessmentResult]: ...

    # User assets

    @abstractmethod
    async def create_user_asset(self, data: UserAssetCreate) -> UserAsset: ...

    @abstractmethod
    async def list_user_assets(self, user_id: str) -> List[UserAsset]: ...
