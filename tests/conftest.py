"""Test fixtures — in-process HTTP and WebSocket clients.

Learn: There's no database, so fixtures only need to wire up clients:

1. `client` — httpx.AsyncClient over ASGITransport, no network involved.
2. `service` — a MarketplaceService with a frozen clock and a seeded
   random source, installed via dependency_overrides so generated ids
   and match counts are predictable.
3. `ws_client` — Starlette TestClient used as a context manager, so all
   WebSocket sessions opened from it share one event loop (required
   for the hub to deliver between them). Each test gets a fresh RoomHub.
"""

import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from wideangu.main import app
from wideangu.realtime.hub import RoomHub
from wideangu.realtime.websocket import get_hub
from wideangu.services.marketplace_service import (
    MarketplaceService,
    get_marketplace_service,
)

FROZEN_MS = 1_700_000_000_000


@pytest.fixture()
def frozen_ms():
    return FROZEN_MS


@pytest.fixture()
def service():
    return MarketplaceService(clock=lambda: FROZEN_MS, rng=random.Random(42))


@pytest_asyncio.fixture()
async def client(service):
    app.dependency_overrides[get_marketplace_service] = lambda: service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture()
def hub():
    return RoomHub()


@pytest.fixture()
def ws_client(hub):
    app.dependency_overrides[get_hub] = lambda: hub
    with TestClient(app) as tc:
        yield tc
    app.dependency_overrides.clear()
