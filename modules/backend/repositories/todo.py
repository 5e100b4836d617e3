"""
Todo Repository.

Data access layer for todos: list, insert and delete against the
todos table. Every statement is parameterized by SQLAlchemy.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.todo import Todo
from modules.backend.repositories.base import BaseRepository
from modules.backend.schemas.todo import TodoResponse


class TodoRepository(BaseRepository[Todo]):
    """
    Repository for the Todo model.

    Inherits standard operations from BaseRepository and adds the
    listing query used by every endpoint.
    """

    model = Todo

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def list_todos(self) -> list[TodoResponse]:
        """
        Get every todo, oldest id first.

        Only id and text are selected; created_at stays in the table.
        """
        result = await self.session.execute(
            select(Todo.id, Todo.todo).order_by(Todo.id.asc())
        )
        return [TodoResponse(id=row.id, todo=row.todo) for row in result]

    async def insert(self, text: str) -> int:
        """
        Insert a todo.

        Args:
            text: Already trimmed and escaped text

        Returns:
            The id assigned by the database
        """
        todo = await self.create(todo=text)
        return todo.id

    async def delete(self, id: int) -> int:
        """
        Delete a todo.

        Returns:
            Number of rows removed (0 or 1)
        """
        return await self.delete_by_id(id)
