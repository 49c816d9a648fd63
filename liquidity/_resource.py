from __future__ import annotations

from typing import Optional

import httpx

from .auth import CredentialProvider
from .config import DEFAULT_TIMEOUT_SECONDS
from .http import LiquidityHTTP


class ResourceClient:
    """Common constructor/lifecycle for the per-resource clients.

    A shared :class:`LiquidityHTTP` may be passed in (that is what
    :class:`~liquidity.client.LiquidityClient` does); otherwise the client
    builds and owns its own from the remaining keyword arguments.
    """

    def __init__(
        self,
        http: Optional[LiquidityHTTP] = None,
        *,
        base_url: Optional[str] = None,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        # allow external http (for mocking / sharing)
        self._own_http = http is None
        self.http = http or LiquidityHTTP(
            base_url=base_url,
            credentials=credentials,
            transport=transport,
            timeout=timeout,
        )

    def close(self) -> None:
        if self._own_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
