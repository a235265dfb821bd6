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

"""Tests for the transactions and transaction approvals resources."""

import datetime
from uuid import UUID

import pytest
from conftest import TX_ID, USER_ID, WALLET_ID, envelope, reply, transaction_payload

from transactions_sdk import ValidationError
from transactions_sdk.models import (
    ApprovalStatus,
    TransactionApproval,
    TransactionStatus,
    TransactionType,
)

APPROVAL_ID = "3f2504e0-4f89-41d3-9a0c-0305e82c3301"


def approval_payload(**overrides):
    payload = {
        "id": APPROVAL_ID,
        "transactionId": TX_ID,
        "status": "pending",
        "requestedBy": USER_ID,
        "requestedAt": "2025-01-02T03:04:05Z",
        "expiresAt": "2025-01-03T03:04:05Z",
        "createdAt": "2025-01-02T03:04:05Z",
        "updatedAt": "2025-01-02T03:04:05Z",
        "reason": "high_value",
    }
    payload.update(overrides)
    return payload


class TestTransactionsAPI:
    @pytest.mark.asyncio
    async def test_create(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(envelope(transaction_payload()), status_code=201))
        tx = await sdk.transactions.create(
            {
                "wallet_id": WALLET_ID,
                "recipient": "0xdef",
                "amount": "1",
                "type_": TransactionType.TRANSFER,
            }
        )
        assert tx.id == UUID(TX_ID)
        assert recorder.last_json() == {
            "walletId": WALLET_ID,
            "recipient": "0xdef",
            "amount": "1",
            "type": "transfer",
        }

    @pytest.mark.asyncio
    async def test_list_serializes_date_filters(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"transactions": [], "totalCount": 0}))
        since = datetime.datetime(2025, 1, 1, tzinfo=datetime.timezone.utc)
        await sdk.transactions.list(
            {"status": TransactionStatus.CONFIRMED, "from_date": since, "limit": 10}
        )
        params = recorder.last.url.params
        assert params["status"] == "confirmed"
        assert params["fromDate"] == "2025-01-01T00:00:00Z"
        assert params["limit"] == "10"
        assert "toDate" not in params

    @pytest.mark.asyncio
    async def test_list_rejects_unknown_filter(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"transactions": [], "totalCount": 0}))
        with pytest.raises(ValidationError) as exc_info:
            await sdk.transactions.list({"colour": "red"})
        assert exc_info.value.codes() == ["unrecognized_keys"]
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_list_response_with_one_bad_element_fails(self, make_sdk):
        payload = {
            "transactions": [transaction_payload(), transaction_payload(status="lost")],
            "totalCount": 2,
        }
        sdk, _, _ = make_sdk(reply(payload))
        with pytest.raises(ValidationError) as exc_info:
            await sdk.transactions.list()
        assert exc_info.value.locations() == ["$.transactions[1].status"]

    @pytest.mark.asyncio
    async def test_get_by_hash(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(transaction_payload(txHash="0xfeed")))
        tx = await sdk.transactions.get_by_hash("0xfeed")
        assert tx.tx_hash == "0xfeed"
        assert recorder.last.url.path == "/v1/transactions/hash/0xfeed"

    @pytest.mark.asyncio
    async def test_list_by_wallet(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"transactions": [], "totalCount": 0}))
        await sdk.transactions.list_by_wallet(WALLET_ID, {"limit": 3})
        assert recorder.last.url.path == f"/v1/transactions/wallet/{WALLET_ID}"
        assert dict(recorder.last.url.params) == {"limit": "3"}

    @pytest.mark.asyncio
    async def test_list_by_wallet_rejects_wallet_filter(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"transactions": [], "totalCount": 0}))
        with pytest.raises(ValidationError):
            await sdk.transactions.list_by_wallet(WALLET_ID, {"wallet_id": WALLET_ID})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_get_status(self, make_sdk):
        payload = {"id": TX_ID, "status": "confirmed", "confirmations": 12}
        sdk, recorder, _ = make_sdk(reply(payload))
        status = await sdk.transactions.get_status(tx_hash="0xfeed")
        assert status.status is TransactionStatus.CONFIRMED
        assert status.confirmations == 12
        assert dict(recorder.last.url.params) == {"txHash": "0xfeed"}

    @pytest.mark.asyncio
    async def test_get_status_needs_id_or_hash(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError, match="Either 'id' or 'tx_hash'"):
            await sdk.transactions.get_status()
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_send_and_commit(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(transaction_payload(status="awaiting_approval")))
        tx = await sdk.transactions.send(
            {"wallet_id": WALLET_ID, "recipient": "0xdef", "amount": "5", "priority": "fast"}
        )
        assert tx.status is TransactionStatus.AWAITING_APPROVAL
        assert recorder.last.url.path == "/v1/transactions/send"
        assert recorder.last_json()["priority"] == "fast"

        await sdk.transactions.commit_send(TX_ID)
        assert recorder.last.url.path == f"/v1/transactions/commit-send/{TX_ID}"
        assert recorder.last.method == "POST"

    @pytest.mark.asyncio
    async def test_send_rejects_bad_priority(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError) as exc_info:
            await sdk.transactions.send(
                {"wallet_id": WALLET_ID, "recipient": "0xdef", "amount": "5", "priority": "asap"}
            )
        assert exc_info.value.locations() == ["$.priority"]
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_estimate_fee(self, make_sdk):
        sdk, _, _ = make_sdk(reply({"fee": "21000", "currency": "ETH", "gasLimit": "21000"}))
        estimate = await sdk.transactions.estimate_fee(
            {"wallet_id": WALLET_ID, "recipient": "0xdef", "amount": "1"}
        )
        assert estimate.fee == "21000"
        assert estimate.priority is None

    @pytest.mark.asyncio
    async def test_track(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(transaction_payload()))
        await sdk.transactions.track({"tx_hash": "0xfeed", "blockchain": "ethereum"})
        assert recorder.last_json() == {"txHash": "0xfeed", "blockchain": "ethereum"}

    @pytest.mark.asyncio
    async def test_confirm_returns_parsed_json(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(envelope({"confirmed": True})))
        assert await sdk.transactions.confirm(TX_ID) == {"confirmed": True}
        assert recorder.last.url.path == f"/v1/transactions/{TX_ID}/confirm"


class TestTransactionApprovalsAPI:
    @pytest.mark.asyncio
    async def test_list_pending(self, make_sdk):
        page = {"data": [approval_payload()], "totalCount": 1, "limit": 10, "offset": 0}
        sdk, recorder, _ = make_sdk(reply(envelope(page)))
        result = await sdk.transaction_approvals.list_pending({"limit": 10})
        assert result.total_count == 1
        assert result.data[0].status is ApprovalStatus.PENDING
        assert recorder.last.url.path == "/v1/transaction-approvals"

    @pytest.mark.asyncio
    async def test_list_by_transaction(self, make_sdk):
        payload = [approval_payload(), approval_payload(status="approved")]
        sdk, recorder, _ = make_sdk(reply(payload))
        approvals = await sdk.transaction_approvals.list_by_transaction(TX_ID)
        assert [a.status for a in approvals] == [ApprovalStatus.PENDING, ApprovalStatus.APPROVED]
        assert all(isinstance(a, TransactionApproval) for a in approvals)
        assert recorder.last.url.path == f"/v1/transaction-approvals/transaction/{TX_ID}"

    @pytest.mark.asyncio
    async def test_approve(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(approval_payload(status="approved", notes="ok")))
        approval = await sdk.transaction_approvals.approve(
            {"approval_id": APPROVAL_ID, "notes": "ok"}
        )
        assert approval.notes == "ok"
        assert recorder.last.url.path == "/v1/transaction-approvals/approve"
        assert recorder.last_json() == {"approvalId": APPROVAL_ID, "notes": "ok"}

    @pytest.mark.asyncio
    async def test_reject_requires_approval_id(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError):
            await sdk.transaction_approvals.reject({"reason": "suspicious"})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_request(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(approval_payload()))
        await sdk.transaction_approvals.request({"transaction_id": TX_ID})
        assert recorder.last_json() == {"transactionId": TX_ID}
