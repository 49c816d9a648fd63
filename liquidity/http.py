"""Shared request pipeline for every Liquidity API operation.

Uses a synchronous `httpx.Client` with:
* Base URL from config (see `liquidity.config`)
* Auth headers from a `CredentialProvider`
* JSON request bodies (`Content-Type: application/json` on every call)
* Prometheus counter + histogram (labels: endpoint, method, status)

Exactly one attempt per call: transport failures, undecodable bodies and
API-reported errors are raised to the caller unchanged. Tests swap the
transport for `httpx.MockTransport`.
"""
from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from common.secrets import get_secret

from .auth import CredentialProvider, get_credential_provider
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from .errors import ApiError, DecodeError, ErrorPayload, ResponseError, TransportError
from .metrics import latency_seconds, requests_total
from .models import LiquidityModel

__all__ = ["LiquidityHTTP"]

_LOG = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
Body = Union[LiquidityModel, Mapping[str, Any]]

_JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _encode(body: Body) -> bytes:
    payload = body.to_json_dict() if isinstance(body, LiquidityModel) else dict(body)
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


class LiquidityHTTP:
    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        base_url = base_url or get_secret("LIQUIDITY_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self._credentials = credentials if credentials is not None else get_credential_provider()
        self._timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def set_transport(self, transport: Optional[httpx.BaseTransport]) -> None:
        """Swap the underlying transport (testing only; not safe mid-flight)."""
        old = self._client
        self._client = httpx.Client(timeout=self._timeout, transport=transport)
        old.close()

    def url_for(self, path: str) -> str:
        path = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{path}"

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def execute(
        self,
        method: str,
        path: str,
        body: Optional[Body] = None,
        *,
        target: Type[M],
    ) -> M:
        """Send one request and decode the response into *target*.

        Raises:
            TransportError: the request did not produce a response.
            DecodeError: 2xx whose body does not match *target*.
            ApiError: non-2xx carrying the API error envelope.
            ResponseError: any other non-2xx.
        """
        method = method.upper()
        url = self.url_for(path)
        headers = {**_JSON_HEADERS, **self._credentials.headers()}
        content = _encode(body) if body is not None else None
        endpoint = path.split("?", 1)[0]

        start = time.perf_counter()
        try:
            resp = self._client.request(method, url, headers=headers, content=content)
        except httpx.RequestError as exc:
            requests_total.labels(endpoint, method.lower(), "error").inc()
            raise TransportError(method, url, exc) from exc
        elapsed = time.perf_counter() - start

        latency_seconds.labels(endpoint).observe(elapsed)
        requests_total.labels(endpoint, method.lower(), str(resp.status_code)).inc()
        _LOG.debug(
            "%s %s -> %s (%.1f ms)",
            method,
            endpoint,
            resp.status_code,
            elapsed * 1000,
            extra={
                "method": method,
                "endpoint": endpoint,
                "status_code": resp.status_code,
                "elapsed_ms": round(elapsed * 1000, 1),
            },
        )
        return self._decode(resp, target)

    @staticmethod
    def _decode(resp: httpx.Response, target: Type[M]) -> M:
        raw = resp.content
        if resp.is_success:
            if not raw.strip():
                raise DecodeError(resp.status_code, resp.text, "empty body")
            try:
                return target.model_validate_json(raw)
            except ValidationError as exc:
                raise DecodeError(resp.status_code, resp.text, str(exc)) from exc

        try:
            payload = ErrorPayload.model_validate_json(raw)
        except ValidationError:
            raise ResponseError(resp.status_code, resp.text) from None
        raise ApiError.from_payload(resp.status_code, payload)

    # verb helpers ------------------------------------------------------

    def get(self, path: str, *, target: Type[M]) -> M:
        return self.execute("GET", path, target=target)

    def post(self, path: str, body: Body, *, target: Type[M]) -> M:
        return self.execute("POST", path, body, target=target)

    def patch(self, path: str, body: Body, *, target: Type[M]) -> M:
        return self.execute("PATCH", path, body, target=target)

    def close(self) -> None:
        self._client.close()

    # context-manager sugar
    def __enter__(self) -> "LiquidityHTTP":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
