"""
Server-Timing demo application.

Shows the middleware and the Timer dependency wired into a FastAPI app.
Run locally with:

    uvicorn server_timing.main:app --reload
"""

from fastapi import FastAPI
import logging

from server_timing.config import settings
from server_timing.deps import TimerDep
from server_timing.exceptions import ServerTimingException, server_timing_exception_handler
from server_timing.middleware import ServerTimingMiddleware

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Server-Timing Demo",
    description="Back-end phase timings exposed through the Server-Timing header",
    version="1.0.0",
)

app.add_middleware(ServerTimingMiddleware)
app.add_exception_handler(ServerTimingException, server_timing_exception_handler)


@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": "Server-Timing Demo",
        "version": "1.0.0",
        "health": "/health",
        "demo": "/demo",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT,
    }


@app.get("/demo")
async def demo(timer: TimerDep):
    """Record two phases; their durations appear in the Server-Timing header."""
    # ... do some stuff
    timer.checkpoint("parse headers")
    # ... do some more stuff
    timer.checkpoint("get_db_data")
    return {"checkpoints": [entry.label for entry in timer]}


# For running with uvicorn directly (development only)
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server_timing.main:app",
        host="0.0.0.0",
        port=5001,
        reload=settings.DEBUG,
    )
