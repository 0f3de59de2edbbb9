"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gardien.domain.exceptions import GardienException
from gardien.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "BAD_REQUEST": status.HTTP_400_BAD_REQUEST,
    "NOT_CONFIGURED": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "ADMIN_UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "PURCHASE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DERIVATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "LEDGER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def gardien_exception_handler(
    request: Request, exc: GardienException
) -> JSONResponse:
    """
    Handle Gardien domain exceptions.

    Converts domain exceptions to appropriate HTTP responses. Server-side
    failures get a generic message; the detail goes to the log only.
    """
    status_code = STATUS_CODE_MAP.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        message = "Failed to verify purchase"
    else:
        message = exc.message

    headers = None
    if exc.code == "ADMIN_UNAUTHORIZED":
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={"error": message, "code": exc.code},
        headers=headers,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with an error message."""
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Malformed request body: {details}", "code": "BAD_REQUEST"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report unexpected failures as a generic 500 with an error body."""
    logger.exception(f"{request.method} {request.url.path} raised {type(exc).__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to verify purchase", "code": "INTERNAL_ERROR"},
    )
