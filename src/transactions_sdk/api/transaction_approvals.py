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

"""Transaction approval API endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..models.approvals import (
    ApproveTransactionRequest,
    PaginatedApprovals,
    RejectTransactionRequest,
    RequestApprovalRequest,
    TransactionApproval,
)
from ..models.common import PageParams
from ._base import Endpoint, Resource

list_pending_approvals = Endpoint(
    "GET", "/transaction-approvals", PaginatedApprovals, query=PageParams
)
get_approval = Endpoint("GET", "/transaction-approvals/{approval_id}", TransactionApproval)
list_transaction_approvals = Endpoint(
    "GET",
    "/transaction-approvals/transaction/{transaction_id}",
    list[TransactionApproval],
)
approve_transaction = Endpoint(
    "POST", "/transaction-approvals/approve", TransactionApproval, request=ApproveTransactionRequest
)
reject_transaction = Endpoint(
    "POST", "/transaction-approvals/reject", TransactionApproval, request=RejectTransactionRequest
)
request_approval = Endpoint(
    "POST", "/transaction-approvals/request", TransactionApproval, request=RequestApprovalRequest
)


class TransactionApprovalsAPI(Resource):
    async def list_pending(
        self,
        params: PageParams | Mapping[str, Any] | None = None,
        *,
        signal: CancelToken | None = None,
    ) -> PaginatedApprovals:
        return await list_pending_approvals.asyncio(
            client=self._client, query=params, signal=signal
        )

    async def get(
        self, approval_id: UUID | str, *, signal: CancelToken | None = None
    ) -> TransactionApproval:
        return await get_approval.asyncio(
            client=self._client, approval_id=approval_id, signal=signal
        )

    async def list_by_transaction(
        self, transaction_id: UUID | str, *, signal: CancelToken | None = None
    ) -> list[TransactionApproval]:
        return await list_transaction_approvals.asyncio(
            client=self._client, transaction_id=transaction_id, signal=signal
        )

    async def approve(
        self,
        request: ApproveTransactionRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> TransactionApproval:
        return await approve_transaction.asyncio(client=self._client, body=request, signal=signal)

    async def reject(
        self,
        request: RejectTransactionRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> TransactionApproval:
        return await reject_transaction.asyncio(client=self._client, body=request, signal=signal)

    async def request(
        self,
        request: RequestApprovalRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> TransactionApproval:
        """Ask for approval of a transaction that is awaiting it."""
        return await request_approval.asyncio(client=self._client, body=request, signal=signal)


__all__ = [
    "TransactionApprovalsAPI",
    "approve_transaction",
    "get_approval",
    "list_pending_approvals",
    "list_transaction_approvals",
    "reject_transaction",
    "request_approval",
]
