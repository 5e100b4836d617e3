"""
Todos API Endpoints.

GET /todos, POST /todos and DELETE /todos/{id}. Errors raised here are
rendered by core.exception_handlers; headers are added by
core.middleware.
"""

from fastapi import APIRouter, Request

from modules.backend.core.dependencies import DbSession, MaxBodySize
from modules.backend.core.request_body import BoundedBodyReader
from modules.backend.schemas.todo import (
    TodoCreatedResponse,
    TodoDeletedResponse,
    TodoResponse,
)
from modules.backend.services.todo import TodoService, parse_todo_id

router = APIRouter()


@router.get(
    "",
    response_model=list[TodoResponse],
    summary="List todos",
    description="Get every todo in ascending id order.",
)
async def list_todos(db: DbSession) -> list[TodoResponse]:
    """List all todos."""
    service = TodoService(db)
    return await service.list_todos()


@router.post(
    "",
    response_model=TodoCreatedResponse,
    status_code=201,
    summary="Create a todo",
    description="Create a todo from a JSON body of the form {\"todo\": \"...\"}.",
)
async def create_todo(
    request: Request,
    db: DbSession,
    max_body_size: MaxBodySize,
) -> TodoCreatedResponse:
    """Create a todo and return it with the updated list."""
    # Read the stream ourselves so the size limit applies per chunk.
    payload = await BoundedBodyReader(request.stream(), max_body_size).read()

    service = TodoService(db)
    todo_id, todos = await service.create_todo(payload)
    return TodoCreatedResponse(id=todo_id, todos=todos)


@router.delete(
    "/{todo_id:path}",
    response_model=TodoDeletedResponse,
    summary="Delete a todo",
    description="Permanently delete a todo and return the updated list.",
)
async def delete_todo(todo_id: str, db: DbSession) -> TodoDeletedResponse:
    """Delete a todo."""
    service = TodoService(db)
    todos = await service.delete_todo(parse_todo_id(todo_id))
    return TodoDeletedResponse(todos=todos)
