import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

import server_timing.timer as timer_module
from server_timing.main import app


class FakeClock:
    """Monotonic clock stand-in that returns scripted nanosecond readings."""

    def __init__(self, *readings: int):
        self.readings = list(readings)
        self.calls = 0

    def __call__(self) -> int:
        value = self.readings[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def fake_clock(monkeypatch):
    """Install a scripted clock; call it with the readings to return."""

    def install(*readings: int) -> FakeClock:
        clock = FakeClock(*readings)
        monkeypatch.setattr(timer_module, "_now", clock)
        return clock

    return install


@pytest_asyncio.fixture
async def client():
    """Create test client for the demo app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
