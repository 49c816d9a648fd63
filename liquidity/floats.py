"""Integrator float balances."""
from __future__ import annotations

from typing import Sequence, Union

from ._resource import ResourceClient
from .models import FloatRef, FloatResponse, FloatsResponse, MessageResponse
from .params import ids, with_query

__all__ = ["FloatsClient"]


class FloatsClient(ResourceClient):
    def get_float(self, currency: str) -> FloatResponse:
        """Float balance for a single currency."""
        return self.http.get(
            with_query("/integrator/v1/float", [("currency", currency)]), target=FloatResponse
        )

    def list_floats(self, currencies: Union[str, Sequence[str]]) -> FloatsResponse:
        """Float balances for the given currencies, sent as repeated ``currencies=`` keys."""
        path = with_query("/integrator/v1/floats", [("currencies", ids(currencies))])
        return self.http.get(path, target=FloatsResponse)

    def update_default_float(self, float_id: str) -> MessageResponse:
        return self.http.patch(
            "/integrator/v1/float/default", FloatRef(float_id=float_id), target=MessageResponse
        )
