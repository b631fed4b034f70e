from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from assetlens.core.exceptions import DatabaseError
from assetlens.utils.logging import get_logger

# Define a generic type for SQLAlchemy models
ModelType = TypeVar("ModelType")

LOGGER = get_logger(__name__)


class BaseRepository(Generic[ModelType]):
    """Base repository implementing common create/read operations.

    Rows in this schema are append-only apart from users, so there is no
    generic delete. ``update`` is used for user profile refreshes only.
    """

    def __init__(self, session: AsyncSession, model: Type[ModelType]):
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session
            model: The SQLAlchemy model class this repository manages
        """
        self.session = session
        self.model = model
        self.logger = LOGGER

    async def get_by_id(self, id: str) -> Optional[ModelType]:
        """Get a record by its ID.

        Args:
            id: The record ID

        Returns:
            The record if found, None otherwise
        """
        try:
            query = select(self.model).where(self.model.id == id)
            result = await self.session.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error retrieving {self.model.__name__} by ID {id}: {str(e)}", exc_info=True)
            raise DatabaseError(f"Failed to load {self.model.__name__}", original_error=e) from e

    async def get_all(
        self,
        skip: int = 0,
        limit: Optional[int] = 200,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[ModelType]:
        """Get records in creation order with optional pagination and filtering.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return, or None for all
            filters: Dictionary of field_name: value to filter by

        Returns:
            List of records
        """
        try:
            query = select(self.model)

            if filters:
                for field, value in filters.items():
                    if hasattr(self.model, field):
                        query = query.where(getattr(self.model, field) == value)

            query = query.order_by(self.model.created_at, self.model.id).offset(skip)
            if limit is not None:
                query = query.limit(limit)
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error(f"Error retrieving all {self.model.__name__}: {str(e)}", exc_info=True)
            raise DatabaseError(f"Failed to list {self.model.__name__}", original_error=e) from e

    async def create(self, **kwargs) -> ModelType:
        """Create a new record.

        Args:
            **kwargs: Fields and values for the new record

        Returns:
            The created record
        """
        try:
            instance = self.model(**kwargs)
            self.session.add(instance)
            await self.session.flush()
            await self.session.commit()
            return instance
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}", exc_info=True)
            raise DatabaseError(f"Failed to create {self.model.__name__}", original_error=e) from e

    async def update(self, id: str, **kwargs) -> Optional[ModelType]:
        """Update an existing record.

        Args:
            id: The ID of the record to update
            **kwargs: Fields and values to update

        Returns:
            The updated record if found, None otherwise
        """
        try:
            instance = await self.get_by_id(id)
            if not instance:
                return None

            for key, value in kwargs.items():
                if hasattr(instance, key):
                    setattr(instance, key, value)

            await self.session.flush()
            await self.session.commit()
            return instance
        except SQLAlchemyError as e:
            await self.session.rollback()
            self.logger.error(f"Error updating {self.model.__name__} {id}: {str(e)}", exc_info=True)
            raise DatabaseError(f"Failed to update {self.model.__name__}", original_error=e) from e
