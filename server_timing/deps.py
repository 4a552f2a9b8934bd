"""
FastAPI Dependencies

Provides dependency injection for the per-request Timer bound by
ServerTimingMiddleware.
"""

from typing import Annotated
from fastapi import Depends, Request
import logging

from server_timing.exceptions import TimerNotAvailableError
from server_timing.middleware.timing import STATE_KEY
from server_timing.timer import Timer

logger = logging.getLogger(__name__)


def get_timer(request: Request) -> Timer:
    """Get the Timer bound to the current request."""
    timer = getattr(request.state, STATE_KEY, None)
    if timer is None:
        logger.debug(f"No timer bound to {request.method} {request.url.path}")
        raise TimerNotAvailableError()
    return timer


TimerDep = Annotated[Timer, Depends(get_timer)]
