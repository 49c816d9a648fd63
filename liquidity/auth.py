"""Credential providers for the Liquidity API.

The API authenticates every call through request headers. Which headers is a
deployment concern, so the client only depends on the tiny
:class:`CredentialProvider` protocol. Two strategies ship with the package:

* ``bearer``  – ``Authorization: Bearer <token>`` (:class:`StaticTokenProvider`)
* ``api_key`` – key/secret pair in custom headers (:class:`ApiKeyProvider`)
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, runtime_checkable

from common.secrets import get_secret

_LOG = logging.getLogger(__name__)

__all__ = [
    "CredentialProvider",
    "StaticTokenProvider",
    "ApiKeyProvider",
    "get_credential_provider",
]


@runtime_checkable
class CredentialProvider(Protocol):
    """Return the auth headers to merge into every request."""

    def headers(self) -> Dict[str, str]:  # noqa: D401 – imperative form
        ...


class StaticTokenProvider:
    """Fixed bearer token, passed in or loaded from ``LIQUIDITY_API_KEY``."""

    def __init__(self, token: Optional[str] = None) -> None:
        token = token or get_secret("LIQUIDITY_API_KEY")
        if not token:
            raise RuntimeError("LIQUIDITY_API_KEY not set for StaticTokenProvider")
        self._token = token

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}


class ApiKeyProvider:
    """API key (and optional secret) sent in dedicated headers."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        *,
        key_header: Optional[str] = None,
        secret_header: Optional[str] = None,
    ) -> None:
        self._api_key = api_key or get_secret("LIQUIDITY_API_KEY")
        if not self._api_key:
            raise RuntimeError("LIQUIDITY_API_KEY not set for ApiKeyProvider")
        self._api_secret = api_secret or get_secret("LIQUIDITY_API_SECRET")
        self._key_header = key_header or get_secret("LIQUIDITY_API_KEY_HEADER", "x-api-key")
        self._secret_header = secret_header or get_secret(
            "LIQUIDITY_API_SECRET_HEADER", "x-api-secret"
        )

    def headers(self) -> Dict[str, str]:
        h = {self._key_header: self._api_key}
        if self._api_secret:
            h[self._secret_header] = self._api_secret
        return h


_STRATEGIES = {
    "bearer": StaticTokenProvider,
    "static": StaticTokenProvider,
    "api_key": ApiKeyProvider,
    "apikey": ApiKeyProvider,
}


def get_credential_provider(strategy: Optional[str] = None) -> CredentialProvider:
    """Build the provider named by *strategy* or ``LIQUIDITY_AUTH_STRATEGY``."""
    strategy = (strategy or get_secret("LIQUIDITY_AUTH_STRATEGY", "bearer")).lower()
    provider_cls = _STRATEGIES.get(strategy)
    if provider_cls is None:
        raise ValueError(f"Unsupported LIQUIDITY_AUTH_STRATEGY: {strategy}")
    _LOG.debug("Credential strategy resolved: %s", strategy)
    return provider_cls()
