# Pydantic schemas package
from modules.backend.schemas.base import ErrorResponse, SuccessResponse

__all__ = [
    "ErrorResponse",
    "SuccessResponse",
]
