"""Virtual card lifecycle: issue, look up, fund, freeze and stop cards."""
from __future__ import annotations

from typing import Iterator, List, Optional

from ._resource import ResourceClient
from .models import (
    BalanceChange,
    Card,
    CardRef,
    CardResponse,
    CardsResponse,
    CreateCardData,
    MessageResponse,
    StopCardData,
)
from .params import Params, with_query

__all__ = ["CardsClient"]


class CardsClient(ResourceClient):
    # ------------------------------------------------------------------
    # Issue / read
    # ------------------------------------------------------------------

    def create_card(self, data: CreateCardData) -> CardResponse:
        """Create a virtual card for one of the integrator's users."""
        return self.http.post("/card/v1", data, target=CardResponse)

    def get_card(self, card: str, tracking_number: Optional[str] = None) -> CardResponse:
        """Full details of one card, looked up by card id and/or tracking number."""
        path = with_query("/card/v1", [("card", card), ("trackingNumber", tracking_number)])
        return self.http.get(path, target=CardResponse)

    def list_cards(self, params: Params) -> CardsResponse:
        """One page of cards; ``params.id`` is the owning user."""
        return self.http.get(with_query("/cards/v1", params.pairs("user")), target=CardsResponse)

    def iter_cards(self, params: Params) -> Iterator[List[Card]]:
        """Yield pages of cards, following the ``lek`` cursor until exhausted."""
        while True:
            page = self.list_cards(params)
            yield page.data or []
            if not page.lek:
                break
            params = params.next_page(page.lek)

    # ------------------------------------------------------------------
    # Balance
    # ------------------------------------------------------------------

    def top_up(self, card_id: str, amount: float) -> CardResponse:
        return self.http.patch(
            "/card/v1/credit/balance", BalanceChange(card_id=card_id, amount=amount), target=CardResponse
        )

    def debit(self, card_id: str, amount: float) -> CardResponse:
        return self.http.patch(
            "/card/v1/debit/balance", BalanceChange(card_id=card_id, amount=amount), target=CardResponse
        )

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def freeze(self, card_id: str) -> MessageResponse:
        return self.http.patch("/card/v1/freeze", CardRef(card_id=card_id), target=MessageResponse)

    def unfreeze(self, card_id: str) -> MessageResponse:
        return self.http.patch("/card/v1/unfreeze", CardRef(card_id=card_id), target=MessageResponse)

    def stop_card(self, card_id: str, reason_id: int) -> MessageResponse:
        """Permanently stop a card; ``reason_id`` is the platform's stop-reason code."""
        return self.http.patch(
            "/card/v1/stop", StopCardData(card_id=card_id, reason_id=reason_id), target=MessageResponse
        )
