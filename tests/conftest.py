"""Pytest fixtures for Broadcastt tests."""

from __future__ import annotations

from typing import Callable

import pytest

from broadcastt.client import BroadcasttClient
from broadcastt.config import BroadcasttConfig
from broadcastt.transport import Request, Response


class MockTransport:
    """Transport that records requests and replays queued responses."""

    def __init__(
        self,
        responses: list[Response | Exception] | None = None,
        raise_for_status: bool = True,
    ) -> None:
        self.responses = list(responses or [])
        self.raise_for_status = raise_for_status
        self.history: list[Request] = []
        self.timeouts: list[float | None] = []
        self.closed = False

    def send(self, request: Request, timeout: float | None = None) -> Response:
        self.history.append(request)
        self.timeouts.append(timeout)

        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if self.raise_for_status:
            response.raise_for_status()
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BROADCASTT_* variables from the environment out of unit tests."""
    if request.node.get_closest_marker("integration"):
        return
    for name in ("APP_ID", "APP_KEY", "APP_SECRET", "CLUSTER", "HOST", "SCHEME", "PORT"):
        monkeypatch.delenv(f"BROADCASTT_{name}", raising=False)


@pytest.fixture
def config() -> BroadcasttConfig:
    """Create a test configuration."""
    return BroadcasttConfig(
        app_id="1",
        app_key="testkey",
        app_secret="testsecret",
    )


@pytest.fixture
def socket_id() -> str:
    """Sample socket ID for testing."""
    return "123456.7890123"


@pytest.fixture
def make_transport() -> Callable[..., MockTransport]:
    """Factory for mock transports."""
    return MockTransport


@pytest.fixture
def transport() -> MockTransport:
    """Mock transport answering one request with 200."""
    return MockTransport([Response(200, "{}")])


@pytest.fixture
def client(config: BroadcasttConfig, transport: MockTransport) -> BroadcasttClient:
    """Client wired to the mock transport."""
    return BroadcasttClient(config=config, transport=transport)
