"""
Exceptions raised when the Server-Timing integration is misconfigured.

The Timer itself never raises; these cover the HTTP layer only.
"""

from enum import Enum
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    TIMER_UNAVAILABLE = "SRV_001"


class ServerTimingException(HTTPException):
    """
    Base exception for the Server-Timing integration.

    Usage:
        raise ServerTimingException(
            status_code=500,
            code=ErrorCode.TIMER_UNAVAILABLE,
            detail="No timer bound to this request",
        )
    """

    def __init__(self, status_code: int, code: ErrorCode, detail: str):
        self.code = code
        super().__init__(status_code=status_code, detail=detail)


class TimerNotAvailableError(ServerTimingException):
    """No Timer on the request; ServerTimingMiddleware is not installed (500)."""

    def __init__(self, detail: str = "ServerTimingMiddleware is not installed"):
        super().__init__(
            status_code=500,
            code=ErrorCode.TIMER_UNAVAILABLE,
            detail=detail,
        )


async def server_timing_exception_handler(
    request: Request,
    exc: ServerTimingException,
) -> JSONResponse:
    """Render a ServerTimingException as a JSON error body."""
    logger.warning(
        f"ServerTimingException: {exc.code.value} - {exc.detail}",
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "code": exc.code.value,
            "detail": exc.detail,
            "status": exc.status_code,
        },
    )
