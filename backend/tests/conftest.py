"""
Shared pytest fixtures for the paycycle tests.

The engine is pure, so there is no database: API tests run the FastAPI app in
process over httpx's ASGITransport, with the pay period resolver pinned to a
fixed reference Sunday.
"""
from datetime import date
from zoneinfo import ZoneInfo

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from paycycle.main import app
from paycycle.services.pay_period_service import PayPeriodResolver, get_resolver

REFERENCE_START = date(2024, 1, 7)
EASTERN = ZoneInfo("America/New_York")


@pytest.fixture
def resolver() -> PayPeriodResolver:
    """Resolver anchored at Sunday 2024-01-07 (period 1: Jan 7–20, paid Thu Jan 25)."""
    return PayPeriodResolver(reference_start=REFERENCE_START)


@pytest.fixture
def eastern() -> ZoneInfo:
    return EASTERN


# ── HTTP client fixture ───────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client() -> AsyncClient:
    app.dependency_overrides[get_resolver] = lambda: PayPeriodResolver(reference_start=REFERENCE_START)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
