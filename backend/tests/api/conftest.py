"""API test fixtures — FastAPI app wired to a fresh recording store per test.

Invariants:
    - Every test gets fresh services on app.state (lifespan does not run under ASGITransport)
    - Payment delay is zero
    - as_admin / as_user log the single session in before the test body runs

Design Decisions:
    - attach_services() reused from main.py: tests exercise the same wiring as startup
"""

import pytest
from httpx import ASGITransport, AsyncClient

from patoapp.main import app, attach_services

from tests.fake_store import RecordingStore


@pytest.fixture
def api_store():
    return RecordingStore()


@pytest.fixture
async def client(api_store):
    await attach_services(app, api_store, payment_delay_seconds=0)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def as_admin(client):
    res = await client.post(
        "/api/v1/auth/login",
        json={"email": "juan@example.com", "password": "123456"},
    )
    assert res.status_code == 200
    return client


@pytest.fixture
async def as_user(client):
    res = await client.post(
        "/api/v1/auth/login",
        json={"email": "maria@example.com", "password": "123456"},
    )
    assert res.status_code == 200
    return client
