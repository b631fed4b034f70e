"""Repositories for land assessment requests and results."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetlens.database.models import LandAssessmentRequest, LandAssessmentResult
from assetlens.repositories.base_repository import BaseRepository


class LandAssessmentRequestRepository(BaseRepository[LandAssessmentRequest]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, LandAssessmentRequest)


class LandAssessmentResultRepository(BaseRepository[LandAssessmentResult]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, LandAssessmentResult)

    async def get_by_request_id(self, request_id: str) -> Optional[LandAssessmentResult]:
        """Get the earliest result recorded for a request, if any."""
        query = (
            select(LandAssessmentResult)
            .where(LandAssessmentResult.request_id == request_id)
            .order_by(LandAssessmentResult.created_at)
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalars().first()
