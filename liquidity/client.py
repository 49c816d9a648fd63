"""Entry point bundling every Liquidity API resource behind one explicit value.

    from liquidity import LiquidityClient, StaticTokenProvider

    with LiquidityClient(base_url="https://...", credentials=StaticTokenProvider("...")) as client:
        card = client.cards.get_card("c954e4c9-...").data

There is no module-level client; construct one per process (or per test)
and pass it around.
"""
from __future__ import annotations

from typing import Optional

import httpx

from .auth import CredentialProvider
from .cards import CardsClient
from .config import DEFAULT_TIMEOUT_SECONDS, ClientConfig
from .deposits import DepositsClient
from .floats import FloatsClient
from .http import LiquidityHTTP
from .integrator import IntegratorClient
from .transactions import TransactionsClient
from .users import UsersClient

__all__ = ["LiquidityClient"]


class LiquidityClient:
    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.http = LiquidityHTTP(
            base_url=base_url,
            credentials=credentials,
            transport=transport,
            timeout=timeout,
        )
        self.integrator = IntegratorClient(self.http)
        self.cards = CardsClient(self.http)
        self.transactions = TransactionsClient(self.http)
        self.deposits = DepositsClient(self.http)
        self.floats = FloatsClient(self.http)
        self.users = UsersClient(self.http)

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, transport: Optional[httpx.BaseTransport] = None
    ) -> "LiquidityClient":
        return cls(
            base_url=config.base_url,
            credentials=config.credentials,
            transport=transport,
            timeout=config.timeout,
        )

    @classmethod
    def from_env(cls, *, transport: Optional[httpx.BaseTransport] = None) -> "LiquidityClient":
        """Build a client from ``LIQUIDITY_*`` settings (see :class:`ClientConfig`)."""
        return cls.from_config(ClientConfig.from_env(), transport=transport)

    @property
    def base_url(self) -> str:
        return self.http.base_url

    def set_transport(self, transport: Optional[httpx.BaseTransport]) -> None:
        """Replace the transport, e.g. with ``httpx.MockTransport`` in tests."""
        self.http.set_transport(transport)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "LiquidityClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
