"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.config import get_app_config
from modules.backend.core.database import get_db_session

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_max_body_size() -> int:
    """Request body limit in bytes, from application.yaml."""
    return get_app_config().application.request_limits.max_body_size_bytes


MaxBodySize = Annotated[int, Depends(get_max_body_size)]
