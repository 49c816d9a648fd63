"""Error taxonomy for the Liquidity API client.

Three ways a call can fail:

* :class:`TransportError` – the request never produced a response (DNS,
  refused connection, timeout).
* :class:`DecodeError` – a 2xx response whose body does not match the
  expected shape.
* :class:`ApiError` – a non-2xx response carrying the API's
  ``{message, validationError}`` envelope. When the error body is not such an
  envelope a :class:`ResponseError` with the raw status and text is raised
  instead.

None of them is retried or logged by the client; they propagate as-is.
"""
from __future__ import annotations

import json
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "LiquidityError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "ResponseError",
    "ValidationIssue",
    "ErrorPayload",
]


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


class ValidationIssue(BaseModel):
    """One field-level complaint from the API's request validator."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str = ""
    expected: Optional[Any] = None
    received: Optional[Any] = None
    path: List[Union[str, int]] = Field(default_factory=list)
    message: str = ""

    @field_validator("path", mode="before")
    @classmethod
    def _null_path(cls, value: Any) -> Any:
        return _none_as_empty(value)


class ErrorPayload(BaseModel):
    """Wire shape of every non-2xx body the API documents.

    ``validationError`` is frequently ``null`` on auth failures; it decodes
    as an empty list.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    validation_error: List[ValidationIssue] = Field(default_factory=list)

    @field_validator("validation_error", mode="before")
    @classmethod
    def _null_issues(cls, value: Any) -> Any:
        return _none_as_empty(value)


class LiquidityError(Exception):
    """Base class for everything raised by this package."""


class TransportError(LiquidityError):
    """The request could not be completed at the connection level."""

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        super().__init__(f"{method} {url} failed: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class DecodeError(LiquidityError):
    """A successful response whose body does not decode into the target shape."""

    def __init__(self, status_code: int, body: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"cannot decode {status_code} response body{detail}")
        self.status_code = status_code
        self.body = body
        self.reason = reason


class ApiError(LiquidityError):
    """Structured error reported by the API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        validation_errors: Optional[List[ValidationIssue]] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.validation_errors: List[ValidationIssue] = list(validation_errors or [])
        super().__init__(self._render())

    @classmethod
    def from_payload(cls, status_code: int, payload: ErrorPayload) -> "ApiError":
        return cls(status_code, payload.message, payload.validation_error)

    def _render(self) -> str:
        issues = [
            v.model_dump(by_alias=True, exclude_none=True, mode="json")
            for v in self.validation_errors
        ]
        return f"{self.message}: {json.dumps(issues, separators=(',', ':'))}"

    def __str__(self) -> str:
        return self._render()


class ResponseError(LiquidityError):
    """Non-2xx response whose body is not the documented error envelope."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"unexpected HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body
