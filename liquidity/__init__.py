"""Client library for the Liquidity card-issuing API.

Integrator registration, virtual cards, deposits, float balances,
transactions and KYC users, all funnelled through one synchronous
request pipeline (`liquidity.http`).
"""
from .auth import ApiKeyProvider, CredentialProvider, StaticTokenProvider, get_credential_provider
from .client import LiquidityClient
from .config import ClientConfig
from .errors import (
    ApiError,
    DecodeError,
    LiquidityError,
    ResponseError,
    TransportError,
    ValidationIssue,
)
from .http import LiquidityHTTP
from .params import Params, build_query

__all__ = [
    "LiquidityClient",
    "LiquidityHTTP",
    "ClientConfig",
    "CredentialProvider",
    "StaticTokenProvider",
    "ApiKeyProvider",
    "get_credential_provider",
    "Params",
    "build_query",
    "LiquidityError",
    "ApiError",
    "DecodeError",
    "ResponseError",
    "TransportError",
    "ValidationIssue",
]
