"""
Base Repository.

Base class for all repositories with common data access operations.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.logging import get_logger
from modules.backend.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common operations over an integer-keyed model.

    Subclasses should set the model class:

        class TodoRepository(BaseRepository[Todo]):
            model = Todo

    Repositories only flush; committing is the caller's decision.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record and return it with its generated key."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        return instance

    async def delete_by_id(self, id: int) -> int:
        """
        Delete a record by ID with a single DELETE statement.

        Returns:
            Number of rows removed (0 or 1)
        """
        result = await self.session.execute(
            delete(self.model)
            .where(self.model.id == id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
