"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from report_service.api.dependencies import get_login_rate_limiter
from report_service.config.settings import settings
from report_service.core.rate_limiter import LoginRateLimiter
from report_service.infrastructure.database.client import db_client
from report_service.main import app

ADMIN_PASSWORD = "correct horse battery staple"

VALID_IMEI = "490154203237518"
OTHER_VALID_IMEI = "356938035643809"


class FakeClock:
    """Monotonic clock the tests move by hand"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def admin_credentials(monkeypatch):
    """Plain-password admin for every test unless a test overrides it"""
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "admin_password_hash", None)


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite file per test behind the global database client."""
    await db_client.initialize(f"sqlite+aiosqlite:///{tmp_path / 'reports.db'}")
    yield db_client
    await db_client.close()


@pytest.fixture
async def db_session(database):
    async with database.get_session() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_limiter(clock):
    return LoginRateLimiter(max_attempts=3, window_seconds=60, clock=clock)


@pytest.fixture
async def client(database, rate_limiter):
    """Async HTTP test client with an isolated login limiter."""
    app.dependency_overrides[get_login_rate_limiter] = lambda: rate_limiter
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_client(client):
    """Client holding an administrator session cookie."""
    response = await client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


def make_submission(**overrides) -> dict:
    payload = {
        "imei": VALID_IMEI,
        "status": "stolen",
        "brand": "Samsung",
        "model": "Galaxy S21",
        "color": "black",
        "description": "Blue case, cracked corner",
        "lost_date": "2025-11-16T18:30",
        "location": "Central station",
        "contact_name": "Sam",
        "contact_email": "sam@example.com",
        "contact_phone": "+15550100",
        "police_report": "PR-2025-1182",
        "is_public": True,
    }
    payload.update(overrides)
    return payload
