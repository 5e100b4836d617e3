"""
Todo Service.

Business logic layer for todos. Validates and sanitizes input,
orchestrates the repository, and returns the fresh list after writes.
"""

import re

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.exceptions import NotFoundError, ValidationError
from modules.backend.core.sanitize import sanitize_html
from modules.backend.repositories.todo import TodoRepository
from modules.backend.schemas.todo import TodoCreate, TodoResponse
from modules.backend.services.base import BaseService

INVALID_TODO = "Invalid todo"
INVALID_ID = "Invalid ID"
TODO_NOT_FOUND = "Todo not found"

# Leading base-10 integer, as in "42", " 42", "42abc" or "-3".
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Largest value a SQLite INTEGER column can hold.
MAX_TODO_ID = 2**63 - 1


def parse_todo_id(raw: str) -> int:
    """
    Parse the id segment of /todos/{id}.

    Only the first path segment counts, and only its leading integer.

    Raises:
        ValidationError: If there is no leading integer or it is below 1
        NotFoundError: If the id is larger than any stored id can be
    """
    segment = raw.split("/", 1)[0]
    match = _LEADING_INT.match(segment)
    if match is None:
        raise ValidationError(INVALID_ID)
    number = match.group(1)
    if len(number.lstrip("+-").lstrip("0")) > len(str(MAX_TODO_ID)):
        # Too long to be stored, and too long for int() past its digit limit.
        if number.startswith("-"):
            raise ValidationError(INVALID_ID)
        raise NotFoundError(TODO_NOT_FOUND)
    todo_id = int(number)
    if todo_id < 1:
        raise ValidationError(INVALID_ID)
    if todo_id > MAX_TODO_ID:
        raise NotFoundError(TODO_NOT_FOUND)
    return todo_id


def parse_todo_create(payload: bytes) -> TodoCreate:
    """
    Parse a POST /todos body.

    Raises:
        ValidationError: On malformed JSON, a non-object body, or a
            missing, non-string, empty or over-long `todo`
    """
    try:
        return TodoCreate.model_validate_json(payload)
    except PydanticValidationError as e:
        raise ValidationError(INVALID_TODO) from e


class TodoService(BaseService):
    """
    Service for todo business logic.

    Each write runs and commits on its own, then the whole list is
    read back for the response.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TodoRepository(session)

    async def list_todos(self) -> list[TodoResponse]:
        """
        List all todos in ascending id order.

        Raises:
            DatabaseError: If the store cannot be read
        """
        return await self._execute_db_operation("list_todos", self.repo.list_todos())

    async def create_todo(self, payload: bytes) -> tuple[int, list[TodoResponse]]:
        """
        Create a todo from a raw request body.

        Any failure while storing is reported as ValidationError too, so the
        client sees the same 400 for bad input and a failed insert, whether
        the error came from SQLAlchemy or from the driver below it.

        Args:
            payload: Complete request body

        Returns:
            Tuple of (new id, updated list)

        Raises:
            ValidationError: If the body is invalid or the insert fails
        """
        data = parse_todo_create(payload)
        text = sanitize_html(data.todo)

        self._log_operation("Creating todo", length=len(text))

        try:
            todo_id = await self._execute_db_operation(
                "insert_todo",
                self._commit_after(self.repo.insert(text)),
            )
            todos = await self.list_todos()
        except Exception as e:
            self._logger.warning(
                "Todo insert failed",
                extra={
                    "service": self.__class__.__name__,
                    "error_type": type(e).__name__,
                    "error": str(e),
                },
            )
            raise ValidationError(INVALID_TODO) from e

        self._log_debug("Todo created", todo_id=todo_id)
        return todo_id, todos

    async def delete_todo(self, todo_id: int) -> list[TodoResponse]:
        """
        Delete a todo by id.

        Returns:
            Updated list

        Raises:
            NotFoundError: If no todo has this id
            DatabaseError: If the store fails
        """
        self._log_operation("Deleting todo", todo_id=todo_id)

        removed = await self._execute_db_operation(
            "delete_todo",
            self._commit_after(self.repo.delete(todo_id)),
        )
        if removed == 0:
            raise NotFoundError(TODO_NOT_FOUND)

        return await self.list_todos()
