"""Card transaction queries, including failed authorisations."""
from __future__ import annotations

from typing import Iterator, List

from ._resource import ResourceClient
from .models import Transaction, TransactionResponse, TransactionsResponse
from .params import Params, with_query

__all__ = ["TransactionsClient"]


class TransactionsClient(ResourceClient):
    def get_failed_transaction(self, txn_id: str) -> TransactionResponse:
        path = with_query("/card/v1/transaction/failed", [("transaction", txn_id)])
        return self.http.get(path, target=TransactionResponse)

    def list_failed_transactions(self, params: Params) -> TransactionsResponse:
        """Failed transactions; ``params.id`` narrows them to one card."""
        path = with_query("/card/v1/transactions/failed", params.pairs("card", include_type=False))
        return self.http.get(path, target=TransactionsResponse)

    def list_card_transactions(self, card_id: str, params: Params) -> TransactionsResponse:
        # the explicit card id wins over params.id
        params = Params(
            id=card_id,
            start_date=params.start_date,
            end_date=params.end_date,
            limit=params.limit,
            lek=params.lek,
        )
        path = with_query("/card/v1/transactions", params.pairs("card", include_type=False))
        return self.http.get(path, target=TransactionsResponse)

    def iter_card_transactions(self, card_id: str, params: Params) -> Iterator[List[Transaction]]:
        """Yield every page of a card's transactions, following ``lek``."""
        while True:
            page = self.list_card_transactions(card_id, params)
            yield page.data or []
            if not page.lek:
                break
            params = params.next_page(page.lek)
