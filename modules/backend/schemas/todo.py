"""
Todo Schemas.

Pydantic schemas for todo API request/response validation.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from modules.backend.schemas.base import SuccessResponse

MAX_TODO_LENGTH = 1000


class TodoCreate(BaseModel):
    """
    Schema for creating a new todo.

    The length limit applies to the text as sent. Surrounding whitespace
    is stripped afterwards, and text that strips down to nothing is
    rejected.
    """

    todo: StrictStr = Field(
        ...,
        min_length=1,
        max_length=MAX_TODO_LENGTH,
        description="Todo text",
        examples=["Buy milk"],
    )

    @field_validator("todo")
    @classmethod
    def strip_and_require_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("todo must contain non-whitespace text")
        return stripped


class TodoResponse(BaseModel):
    """Schema for a todo in API responses."""

    id: int = Field(description="Todo identifier")
    todo: str = Field(description="Escaped todo text")

    model_config = ConfigDict(from_attributes=True)


class TodoCreatedResponse(SuccessResponse):
    """Returned by POST /todos."""

    id: int
    todos: list[TodoResponse]


class TodoDeletedResponse(SuccessResponse):
    """Returned by DELETE /todos/{id}."""

    todos: list[TodoResponse]
