"""
Shared fixtures for the gateway tests.

The per-request exchange client is replaced with an AsyncMock of the
port, so no test ever reaches the network.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from spot_gateway.domain.orders.ports import ExchangeTradingPort
from spot_gateway.interfaces.orders.dependencies import get_exchange_client
from spot_gateway.main import app


@pytest.fixture
def exchange() -> AsyncMock:
    """An exchange port whose every call is recorded."""
    return AsyncMock(spec=ExchangeTradingPort)


@pytest.fixture
def client(exchange: AsyncMock):
    """TestClient with the scoped exchange client swapped for the mock."""
    app.dependency_overrides[get_exchange_client] = lambda: exchange
    yield TestClient(app)
    app.dependency_overrides.clear()
