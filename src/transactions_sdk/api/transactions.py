# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

"""Transaction API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..errors import ValidationError, ValidationIssue
from ..models.transactions import (
    FeeEstimate,
    FeeEstimateRequest,
    SendTransactionRequest,
    TrackTransactionRequest,
    Transaction,
    TransactionCreateRequest,
    TransactionList,
    TransactionListParams,
    TransactionStatusQuery,
    TransactionStatusResponse,
)
from ._base import Endpoint, Resource

create_transaction = Endpoint(
    "POST", "/transactions", Transaction, request=TransactionCreateRequest
)
list_transactions = Endpoint("GET", "/transactions", TransactionList, query=TransactionListParams)
get_transaction = Endpoint("GET", "/transactions/{transaction_id}", Transaction)
get_transaction_by_hash = Endpoint("GET", "/transactions/hash/{tx_hash}", Transaction)
list_wallet_transactions = Endpoint(
    "GET", "/transactions/wallet/{wallet_id}", TransactionList, query=TransactionListParams
)
get_transaction_status = Endpoint(
    "GET", "/transactions/status", TransactionStatusResponse, query=TransactionStatusQuery
)
send_transaction = Endpoint(
    "POST", "/transactions/send", Transaction, request=SendTransactionRequest
)
commit_send_transaction = Endpoint(
    "POST", "/transactions/commit-send/{transaction_id}", Transaction
)
estimate_transaction_fee = Endpoint(
    "POST", "/transactions/estimate-fee", FeeEstimate, request=FeeEstimateRequest
)
track_transaction = Endpoint(
    "POST", "/transactions/track", Transaction, request=TrackTransactionRequest
)
# The confirmation payload is not fixed by the API; it is returned as parsed JSON.
confirm_transaction = Endpoint("POST", "/transactions/{transaction_id}/confirm", Any)

Params = TransactionListParams | Mapping[str, Any] | None


class TransactionsAPI(Resource):
    async def create(
        self,
        request: TransactionCreateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Transaction:
        return await create_transaction.asyncio(client=self._client, body=request, signal=signal)

    async def list(
        self, params: Params = None, *, signal: CancelToken | None = None
    ) -> TransactionList:
        """List transactions. ``from_date``/``to_date`` are sent as ISO-8601."""
        return await list_transactions.asyncio(client=self._client, query=params, signal=signal)

    async def get(
        self, transaction_id: UUID | str, *, signal: CancelToken | None = None
    ) -> Transaction:
        return await get_transaction.asyncio(
            client=self._client, transaction_id=transaction_id, signal=signal
        )

    async def get_by_hash(self, tx_hash: str, *, signal: CancelToken | None = None) -> Transaction:
        return await get_transaction_by_hash.asyncio(
            client=self._client, tx_hash=tx_hash, signal=signal
        )

    async def list_by_wallet(
        self, wallet_id: UUID | str, params: Params = None, *, signal: CancelToken | None = None
    ) -> TransactionList:
        """List one wallet's transactions; the wallet comes from the path, not ``params``."""
        params = TransactionListParams.from_input(params if params is not None else {})
        if params.wallet_id:
            raise ValidationError(
                "Invalid TransactionListParams",
                [ValidationIssue(("wallet_id",), "wallet_id is taken from the path", "custom")],
            )
        return await list_wallet_transactions.asyncio(
            client=self._client, query=params, wallet_id=wallet_id, signal=signal
        )

    async def get_status(
        self,
        *,
        id: UUID | str | None = None,
        tx_hash: str | None = None,
        signal: CancelToken | None = None,
    ) -> TransactionStatusResponse:
        """Look up a transaction's status by ``id`` or ``tx_hash``."""
        return await get_transaction_status.asyncio(
            client=self._client, query={"id": id, "tx_hash": tx_hash}, signal=signal
        )

    async def send(
        self,
        request: SendTransactionRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Transaction:
        return await send_transaction.asyncio(client=self._client, body=request, signal=signal)

    async def commit_send(
        self, transaction_id: UUID | str, *, signal: CancelToken | None = None
    ) -> Transaction:
        """Broadcast a transaction that was created earlier (e.g. after approval)."""
        return await commit_send_transaction.asyncio(
            client=self._client, transaction_id=transaction_id, signal=signal
        )

    async def estimate_fee(
        self, request: FeeEstimateRequest | Mapping[str, Any], *, signal: CancelToken | None = None
    ) -> FeeEstimate:
        return await estimate_transaction_fee.asyncio(
            client=self._client, body=request, signal=signal
        )

    async def track(
        self,
        request: TrackTransactionRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Transaction:
        return await track_transaction.asyncio(client=self._client, body=request, signal=signal)

    async def confirm(
        self, transaction_id: UUID | str, *, signal: CancelToken | None = None
    ) -> Any:
        return await confirm_transaction.asyncio(
            client=self._client, transaction_id=transaction_id, signal=signal
        )


__all__ = [
    "TransactionsAPI",
    "commit_send_transaction",
    "confirm_transaction",
    "create_transaction",
    "estimate_transaction_fee",
    "get_transaction",
    "get_transaction_by_hash",
    "get_transaction_status",
    "list_transactions",
    "list_wallet_transactions",
    "send_transaction",
    "track_transaction",
]
