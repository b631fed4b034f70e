"""Repository for portfolio asset bindings."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from assetlens.database.models import UserAsset
from assetlens.repositories.base_repository import BaseRepository


class UserAssetRepository(BaseRepository[UserAsset]):
    def __init__(self, session: AsyncSession):
        super().__init__(session, UserAsset)

    async def list_by_user(self, user_id: str) -> List[UserAsset]:
        """All assets of a user in the order they were recorded."""
        return await self.get_all(limit=None, filters={"user_id": user_id})
