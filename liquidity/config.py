"""Client configuration resolved from secrets, dotenv files and the environment."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional

from common.secrets import get_secret, load_env_files

from .auth import CredentialProvider, get_credential_provider

__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_SECONDS"]

DEFAULT_BASE_URL: Final[str] = "https://sandbox.api.liquidity.example"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """Everything needed to build a :class:`~liquidity.client.LiquidityClient`."""

    base_url: str
    credentials: CredentialProvider
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, *, load_dotenv: bool = True, strategy: Optional[str] = None) -> "ClientConfig":
        """Read ``LIQUIDITY_*`` settings.

        ``.env.local`` / ``.env`` in the working directory are loaded first
        (without overriding variables that are already set).
        """
        if load_dotenv:
            load_env_files()
        base_url = get_secret("LIQUIDITY_BASE_URL", DEFAULT_BASE_URL)
        timeout = float(get_secret("LIQUIDITY_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
        return cls(
            base_url=base_url.rstrip("/"),
            credentials=get_credential_provider(strategy),
            timeout=timeout,
        )
