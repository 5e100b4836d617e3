"""
Bounded Request Body Reading.

Reads a request body chunk by chunk and stops the moment the running
total passes the configured limit, so a slow or hostile sender can never
make the server buffer more than the limit.

Usage:
    reader = BoundedBodyReader(request.stream(), limit=10_000)
    body = await reader.read()   # raises PayloadTooLargeError
"""

from collections.abc import AsyncIterator

from modules.backend.core.exceptions import PayloadTooLargeError
from modules.backend.core.logging import get_logger

logger = get_logger(__name__)


class BoundedBodyReader:
    """Accumulates an async byte stream up to a fixed size."""

    def __init__(self, chunks: AsyncIterator[bytes], limit: int) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._chunks = chunks
        self.limit = limit
        self.bytes_read = 0

    async def read(self) -> bytes:
        """
        Read the whole stream.

        Returns:
            The complete body

        Raises:
            PayloadTooLargeError: As soon as more than `limit` bytes arrive.
                Nothing after the offending chunk is consumed.
        """
        buffer = bytearray()
        async for chunk in self._chunks:
            if not chunk:
                continue
            self.bytes_read += len(chunk)
            if self.bytes_read > self.limit:
                logger.warning(
                    "Request body exceeded limit",
                    extra={"limit": self.limit, "bytes_read": self.bytes_read},
                )
                raise PayloadTooLargeError(limit=self.limit)
            buffer.extend(chunk)
        return bytes(buffer)
