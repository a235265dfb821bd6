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

"""Tests for the wallets resource."""

import base64

import pytest
from conftest import ORG_ID, WALLET_ID, envelope, reply, transaction_payload, wallet_payload

from transactions_sdk import ValidationError
from transactions_sdk.models import WalletStatus, WalletUpdateRequest


class TestWalletsAPI:
    @pytest.mark.asyncio
    async def test_create(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(envelope(wallet_payload()), status_code=201))
        wallet = await sdk.wallets.create(
            {"blockchain": "ethereum", "name": "Treasury", "organization_id": ORG_ID}
        )
        assert wallet.name == "Treasury"
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v1/wallets"
        assert recorder.last_json() == {
            "blockchain": "ethereum",
            "name": "Treasury",
            "organization_id": ORG_ID,
        }

    @pytest.mark.asyncio
    async def test_list_with_paging(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"wallets": [wallet_payload()], "totalCount": 1}))
        result = await sdk.wallets.list({"limit": 5, "offset": 10})
        assert result.total_count == 1
        assert result.wallets[0].id.hex == WALLET_ID.replace("-", "")
        assert dict(recorder.last.url.params) == {"limit": "5", "offset": "10"}

    @pytest.mark.asyncio
    async def test_list_rejects_oversized_page(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"wallets": [], "totalCount": 0}))
        with pytest.raises(ValidationError) as exc_info:
            await sdk.wallets.list({"limit": 500})
        assert exc_info.value.codes() == ["too_big"]
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_update_is_a_patch(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(wallet_payload(status="frozen")))
        request = WalletUpdateRequest(status=WalletStatus.FROZEN)
        wallet = await sdk.wallets.update(WALLET_ID, request)
        assert wallet.status is WalletStatus.FROZEN
        assert recorder.last.method == "PATCH"
        assert recorder.last_json() == {"status": "frozen"}

    @pytest.mark.asyncio
    async def test_update_needs_a_field(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(wallet_payload()))
        with pytest.raises(ValidationError):
            await sdk.wallets.update(WALLET_ID, {})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_balance(self, make_sdk):
        payload = {
            "wallet_id": WALLET_ID,
            "address": "0xabc",
            "blockchain": "ethereum",
            "balance": "42",
            "unit": "ETH",
            "updated_at": "2025-01-02T03:04:05Z",
        }
        sdk, recorder, _ = make_sdk(reply(envelope(payload)))
        balance = await sdk.wallets.get_balance(WALLET_ID)
        assert balance.balance == "42"
        assert recorder.last.url.path == f"/v1/wallets/{WALLET_ID}/balance"

    @pytest.mark.asyncio
    async def test_list_transactions(self, make_sdk):
        payload = {"transactions": [transaction_payload()], "totalCount": 1}
        sdk, recorder, _ = make_sdk(reply(payload))
        result = await sdk.wallets.list_transactions(WALLET_ID, {"limit": 2})
        assert len(result.transactions) == 1
        assert recorder.last.url.path == f"/v1/wallets/{WALLET_ID}/transactions"

    @pytest.mark.asyncio
    async def test_sign_message(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"signature": "0xsig", "walletId": WALLET_ID}))
        result = await sdk.wallets.sign_message(WALLET_ID, "hello")
        assert result.signature == "0xsig"
        assert recorder.last_json() == {"message": "hello"}

    @pytest.mark.asyncio
    async def test_sign_raw_data_is_base64(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"signature": "0xsig", "walletId": WALLET_ID}))
        await sdk.wallets.sign_raw_data(WALLET_ID, b"\x00\xffdata")
        sent = recorder.last_json()["data"]
        assert base64.b64decode(sent) == b"\x00\xffdata"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, value", [("sign_message", ""), ("sign_raw_data", b"")])
    async def test_sign_requires_input(self, make_sdk, method, value):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError):
            await getattr(sdk.wallets, method)(WALLET_ID, value)
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_sign_data_needs_exactly_one_input(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError, match="Exactly one"):
            await sdk.wallets.sign_data(WALLET_ID, {"data": "aGk=", "message": "hi"})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_register_webhook(self, make_sdk):
        webhook = {
            "id": ORG_ID,
            "resourceType": "wallet",
            "resourceId": WALLET_ID,
            "eventTypes": ["transaction.confirmed"],
            "url": "https://hooks.example.test/tx",
            "active": True,
            "createdAt": "2025-01-02T03:04:05Z",
            "updatedAt": "2025-01-02T03:04:05Z",
        }
        sdk, recorder, _ = make_sdk(reply(webhook, status_code=201))
        result = await sdk.wallets.register_webhook(
            WALLET_ID,
            {"event_types": ["transaction.confirmed"], "url": "https://hooks.example.test/tx"},
        )
        assert result.active
        assert recorder.last_json() == {
            "eventTypes": ["transaction.confirmed"],
            "url": "https://hooks.example.test/tx",
            "active": True,
        }

    @pytest.mark.asyncio
    async def test_register_webhook_rejects_bad_url(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError):
            await sdk.wallets.register_webhook(
                WALLET_ID, {"event_types": ["x"], "url": "not-a-url"}
            )
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_stats(self, make_sdk):
        stats = {
            "walletId": WALLET_ID,
            "address": "0xabc",
            "blockchain": "ethereum",
            "currentBalance": "1",
            "transactionCount": 3,
            "lastActivity": "2025-01-02T03:04:05Z",
        }
        sdk, _, _ = make_sdk(reply(stats))
        result = await sdk.wallets.get_stats(WALLET_ID)
        assert result.transaction_count == 3
