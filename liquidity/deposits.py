"""Integrator and card-service deposits."""
from __future__ import annotations

from ._resource import ResourceClient
from .models import DepositRequest, DepositResponse, PostDepositResponse
from .params import with_query

__all__ = ["DepositsClient"]


class DepositsClient(ResourceClient):
    # integrator float deposits ------------------------------------------

    def get_integrator_deposit(self, deposit_id: str) -> DepositResponse:
        path = with_query("/integrator/v1/deposit", [("deposit", deposit_id)])
        return self.http.get(path, target=DepositResponse)

    def post_integrator_deposit(self, amount: int, currency: str) -> PostDepositResponse:
        """Start a deposit into the integrator's float; returns funding instructions."""
        return self.http.post(
            "/integrator/v1/deposit",
            DepositRequest(amount=amount, currency=currency),
            target=PostDepositResponse,
        )

    # card-service deposits ----------------------------------------------

    def get_card_deposit(self, deposit_id: str) -> DepositResponse:
        path = with_query("/card/v1/service/deposit", [("depositId", deposit_id)])
        return self.http.get(path, target=DepositResponse)

    def post_card_deposit(self, amount: int, currency: str) -> PostDepositResponse:
        return self.http.post(
            "/card/v1/service/deposit",
            DepositRequest(amount=amount, currency=currency),
            target=PostDepositResponse,
        )
