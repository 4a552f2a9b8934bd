"""
Middleware modules for Server-Timing.

Provides request processing middleware for:
- Server-Timing headers for performance debugging
"""

from .timing import ServerTimingMiddleware, STATE_KEY

__all__ = [
    "ServerTimingMiddleware",
    "STATE_KEY",
]
