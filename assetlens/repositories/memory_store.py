"""In-memory storage backend for tests and local demos."""

from typing import Dict, List, Optional

from assetlens.database.models import (
    LandAssessmentRequest,
    LandAssessmentResult,
    User,
    UserAsset,
    ValuationRequest,
    ValuationResult,
    utc_now,
)
from assetlens.repositories.store import BaseStore, record_values
from assetlens.schemas.assets import UserAssetCreate
from assetlens.schemas.auth import UserCreate, UserUpdate
from assetlens.schemas.land import LandAssessmentRequestCreate, LandAssessmentResultCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResultCreate
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


class InMemoryStore(BaseStore):
    """Dictionary-backed store. Dicts keep insertion order, which is the listing order."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.user_assets: Dict[str, UserAsset] = {}
        self.valuation_requests: Dict[str, ValuationRequest] = {}
        self.valuation_results: Dict[str, ValuationResult] = {}
        self.land_requests: Dict[str, LandAssessmentRequest] = {}
        self.land_results: Dict[str, LandAssessmentResult] = {}

    async def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.email == email), None)

    async def get_user_by_google_id(self, google_id: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.google_id == google_id), None)

    async def create_user(self, data: UserCreate) -> User:
        user = User(**record_values(User, data))
        self.users[user.id] = user
        LOGGER.info(f"Created user: {user.id}")
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> Optional[User]:
        user = self.users.get(user_id)
        if not user:
            return None
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        user.updated_at = utc_now()
        return user

    async def create_valuation_request(self, data: ValuationRequestCreate) -> ValuationRequest:
        request = ValuationRequest(**record_values(ValuationRequest, data))
        self.valuation_requests[request.id] = request
        return request

    async def create_valuation_result(self, data: ValuationResultCreate) -> ValuationResult:
        result = ValuationResult(**record_values(ValuationResult, data))
        self.valuation_results[result.id] = result
        return result

    async def get_valuation_request(self, request_id: str) -> Optional[ValuationRequest]:
        return self.valuation_requests.get(request_id)

    async def get_valuation_result_for_request(self, request_id: str) -> Optional[ValuationResult]:
        return next(
            (result for result in self.valuation_results.values() if result.request_id == request_id),
            None,
        )

    async def create_land_request(self, data: LandAssessmentRequestCreate) -> LandAssessmentRequest:
        request = LandAssessmentRequest(**record_values(LandAssessmentRequest, data))
        self.land_requests[request.id] = request
        return request

    async def create_land_result(self, data: LandAssessmentResultCreate) -> LandAssessmentResult:
        result = LandAssessmentResult(**record_values(LandAssessmentResult, data))
        self.land_results[result.id] = result
        return result

    async def get_land_request(self, request_id: str) -> Optional[LandAssessmentRequest]:
        return self.land_requests.get(request_id)

    async def get_land_result_for_request(self, request_id: str) -> Optional[LandAssessmentResult]:
        return next(
            (result for result in self.land_results.values() if result.request_id == request_id),
            None,
        )

    async def create_user_asset(self, data: UserAssetCreate) -> UserAsset:
        asset = UserAsset(**record_values(UserAsset, data))
        self.user_assets[asset.id] = asset
        return asset

    async def list_user_assets(self, user_id: str) -> List[UserAsset]:
        return [asset for asset in self.user_assets.values() if asset.user_id == user_id]
