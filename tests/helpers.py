"""Transport double and assertions shared by the client tests."""
from __future__ import annotations

import json
from typing import Any, List, Optional

import httpx

BASE_URL = "https://api.liquidity.test"


class Recorder:
    """MockTransport handler returning one canned response and keeping every request."""

    def __init__(self, status: int = 200, payload: Any = None, body: Optional[str] = None) -> None:
        self.status = status
        self.payload = payload
        self.body = body
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status, content=self.body.encode())
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def assert_json_request(request: httpx.Request, method: str, path: str) -> None:
    assert request.method == method
    assert request.url.path == path
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Authorization"] == "Bearer test-token"
