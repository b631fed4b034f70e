"""Repositories for vehicle valuation requests and results."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assetlens.database.models import ValuationRequest, ValuationResult
from assetlens.repositories.base_repository import BaseRepository


class ValuationRequestRepository(BaseRepository[ValuationRequest]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ValuationRequest)


class ValuationResultRepository(BaseRepository[ValuationResult]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ValuationResult)

    async def get_by_request_id(self, request_id: str) -> Optional[ValuationResult]:
        """Get the earliest result recorded for a request, if any."""
        query = (
            select(ValuationResult)
            .where(ValuationResult.request_id == request_id)
            .order_by(ValuationResult.created_at)
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalars().first()
