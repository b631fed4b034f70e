"""SQLAlchemy storage backend."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from assetlens.database.models import (
    LandAssessmentRequest,
    LandAssessmentResult,
    User,
    UserAsset,
    ValuationRequest,
    ValuationResult,
)
from assetlens.repositories.land_assessment_repository import (
    LandAssessmentRequestRepository,
    LandAssessmentResultRepository,
)
from assetlens.repositories.store import BaseStore, record_values
from assetlens.repositories.user_asset_repository import UserAssetRepository
from assetlens.repositories.user_repository import UserRepository
from assetlens.repositories.valuation_repository import ValuationRequestRepository, ValuationResultRepository
from assetlens.schemas.assets import UserAssetCreate
from assetlens.schemas.auth import UserCreate, UserUpdate
from assetlens.schemas.land import LandAssessmentRequestCreate, LandAssessmentResultCreate
from assetlens.schemas.valuation import ValuationRequestCreate, ValuationResultCreate
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)


class SQLStore(BaseStore):
    """Store backed by per-entity repositories sharing one session."""

    def __init__(self, session: AsyncSession):
        """Initialize the store.

        Args:
            session: SQLAlchemy async session
        """
        self.users = UserRepository(session)
        self.user_assets = UserAssetRepository(session)
        self.valuation_requests = ValuationRequestRepository(session)
        self.valuation_results = ValuationResultRepository(session)
        self.land_requests = LandAssessmentRequestRepository(session)
        self.land_results = LandAssessmentResultRepository(session)

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self.users.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self.users.get_by_email(email)

    async def get_user_by_google_id(self, google_id: str) -> Optional[User]:
        return await self.users.get_by_google_id(google_id)

    async def create_user(self, data: UserCreate) -> User:
        user = await self.users.create(**record_values(User, data))
        LOGGER.info(f"Created user: {user.id}")
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> Optional[User]:
        return await self.users.update(user_id, **data.model_dump(exclude_unset=True))

    async def create_valuation_request(self, data: ValuationRequestCreate) -> ValuationRequest:
        return await self.valuation_requests.create(**record_values(ValuationRequest, data))

    async def create_valuation_result(self, data: ValuationResultCreate) -> ValuationResult:
        return await self.valuation_results.create(**record_values(ValuationResult, data))

    async def get_valuation_request(self, request_id: str) -> Optional[ValuationRequest]:
        return await self.valuation_requests.get_by_id(request_id)

    async def get_valuation_result_for_request(self, request_id: str) -> Optional[ValuationResult]:
        return await self.valuation_results.get_by_request_id(request_id)

    async def create_land_request(self, data: LandAssessmentRequestCreate) -> LandAssessmentRequest:
        return await self.land_requests.create(**record_values(LandAssessmentRequest, data))

    async def create_land_result(self, data: LandAssessmentResultCreate) -> LandAssessmentResult:
        return await self.land_results.create(**record_values(LandAssessmentResult, data))

    async def get_land_request(self, request_id: str) -> Optional[LandAssessmentRequest]:
        return await self.land_requests.get_by_id(request_id)

    async def get_land_result_for_request(self, request_id: str) -> Optional[LandAssessmentResult]:
        return await self.land_results.get_by_request_id(request_id)

    async def create_user_asset(self, data: UserAssetCreate) -> UserAsset:
        return await self.user_assets.create(**record_values(UserAsset, data))

    async def list_user_assets(self, user_id: str) -> List[UserAsset]:
        return await self.user_assets.list_by_user(user_id)
