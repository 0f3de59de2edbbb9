"""
Request ID middleware.

Accepts a caller-supplied X-Request-ID only when it is a short token of
safe characters; anything else is replaced by a fresh UUID before it can
reach the logs.
"""

import re
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from gardien.infrastructure.monitoring.logger import set_request_id

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128

_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]+")


def accepted_request_id(value: Optional[str]) -> Optional[str]:
    """
    Validate a caller-supplied request ID.

    Returns:
        The value if usable, None if a new ID must be generated
    """
    if not value or len(value) > MAX_REQUEST_ID_LENGTH:
        return None
    if not _REQUEST_ID_PATTERN.fullmatch(value):
        return None
    return value


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind a request ID to the logging context and echo it back."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_id(
            accepted_request_id(request.headers.get(REQUEST_ID_HEADER))
        )

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        return response
