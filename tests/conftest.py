from __future__ import annotations

import os
from typing import Callable, List

import httpx
import pytest

from common import secrets as secrets_module
from helpers import BASE_URL, Recorder
from liquidity import LiquidityClient, StaticTokenProvider


def pytest_configure(config):
    """If pytest-socket is installed, disable sockets unless the live smoke run is requested."""
    if os.getenv("LIQUIDITY_SMOKE") == "1":
        return
    try:
        import pytest_socket

        pytest_socket.disable_socket()
        if hasattr(pytest_socket, "allow_hosts"):
            pytest_socket.allow_hosts("127.0.0.1", "localhost")
    except ImportError:
        pass


# ---------------------------------------------------------------------------
# Secrets: every test starts from an empty override
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _secrets() -> None:
    secrets_module.secrets.set_override({})
    yield
    secrets_module.secrets.set_override({})


# ---------------------------------------------------------------------------
# Client wired to a MockTransport
# ---------------------------------------------------------------------------


@pytest.fixture
def make_client() -> Callable[[Recorder], LiquidityClient]:
    clients: List[LiquidityClient] = []

    def _make(recorder: Recorder) -> LiquidityClient:
        client = LiquidityClient(
            base_url=BASE_URL,
            credentials=StaticTokenProvider("test-token"),
            transport=httpx.MockTransport(recorder),
        )
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


# ---------------------------------------------------------------------------
# Skip the live sandbox smoke test unless opted in
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    if os.getenv("LIQUIDITY_SMOKE") == "1":
        return

    skip_marker = pytest.mark.skip(
        reason="live sandbox smoke disabled (set LIQUIDITY_SMOKE=1 to run)"
    )
    for item in items:
        if "live_liquidity_smoke" in str(item.fspath):
            item.add_marker(skip_marker)
