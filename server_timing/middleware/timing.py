"""
Server-Timing header middleware for performance debugging.

Binds a Timer to every request so handlers can record checkpoints, then
adds the Server-Timing and X-Response-Time headers to the response,
enabling performance analysis in browser DevTools.
"""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from typing import Callable, Optional

from server_timing.config import settings
from server_timing.timer import Timer

logger = logging.getLogger(__name__)

# Attribute name on request.state holding the per-request Timer
STATE_KEY = "server_timing"


class ServerTimingMiddleware(BaseHTTPMiddleware):
    """
    Add Server-Timing header for performance debugging.

    Handlers fetch the request's Timer (see server_timing.deps.get_timer)
    and call checkpoint() after each phase. After the handler returns, a
    tail checkpoint covers the remaining time before the response is sent.
    """

    def __init__(
        self,
        app: ASGIApp,
        enabled: Optional[bool] = None,
        tail_label: Optional[str] = None,
        response_time_header: Optional[bool] = None,
    ):
        super().__init__(app)
        self.enabled = settings.SERVER_TIMING_ENABLED if enabled is None else enabled
        self.tail_label = settings.SERVER_TIMING_TAIL_LABEL if tail_label is None else tail_label.strip()
        self.response_time_header = (
            settings.RESPONSE_TIME_HEADER_ENABLED if response_time_header is None else response_time_header
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        timer = Timer()
        setattr(request.state, STATE_KEY, timer)

        response = await call_next(request)

        if self.tail_label:
            timer.checkpoint(self.tail_label)

        if not self.enabled:
            return response

        header_value = timer.render()
        if header_value:
            response.headers[Timer.header_name()] = header_value
            logger.debug(f"{request.method} {request.url.path} {Timer.header_name()}: {header_value}")

        if self.response_time_header:
            process_time_ms = (time.perf_counter() - start_time) * 1000
            # X-Response-Time header - simpler format for logging/monitoring
            response.headers["X-Response-Time"] = f"{process_time_ms:.1f}ms"

        return response
