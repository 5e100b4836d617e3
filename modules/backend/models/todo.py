"""
Todo Model.

Database model for todos, the only entity in the service.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from modules.backend.models.base import Base


class Todo(Base):
    """
    Todo database model.

    AUTOINCREMENT keeps SQLite from handing out the id of a deleted row
    again. `todo` holds the trimmed, HTML-escaped text.
    """

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    todo: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        server_default=func.current_timestamp(),
    )

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, todo={self.todo!r})>"
