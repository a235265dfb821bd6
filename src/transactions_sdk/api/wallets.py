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

"""Wallet API endpoints."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..errors import ValidationError
from ..models.common import PageParams
from ..models.wallets import (
    SignDataRequest,
    SignDataResponse,
    Wallet,
    WalletBalance,
    WalletCreateRequest,
    WalletList,
    WalletStats,
    WalletTransactionList,
    WalletUpdateRequest,
    Webhook,
    WebhookCreateRequest,
)
from ._base import Endpoint, Resource

create_wallet = Endpoint("POST", "/wallets", Wallet, request=WalletCreateRequest)
list_wallets = Endpoint("GET", "/wallets", WalletList, query=PageParams)
get_wallet = Endpoint("GET", "/wallets/{wallet_id}", Wallet)
update_wallet = Endpoint("PATCH", "/wallets/{wallet_id}", Wallet, request=WalletUpdateRequest)
delete_wallet = Endpoint("DELETE", "/wallets/{wallet_id}")
get_wallet_balance = Endpoint("GET", "/wallets/{wallet_id}/balance", WalletBalance)
list_wallet_transactions = Endpoint(
    "GET", "/wallets/{wallet_id}/transactions", WalletTransactionList, query=PageParams
)
sign_wallet_data = Endpoint(
    "POST", "/wallets/{wallet_id}/sign", SignDataResponse, request=SignDataRequest
)
register_wallet_webhook = Endpoint(
    "POST", "/wallets/{wallet_id}/webhook", Webhook, request=WebhookCreateRequest
)
get_wallet_stats = Endpoint("GET", "/wallets/{wallet_id}/stats", WalletStats)

WalletId = UUID | str
Params = PageParams | Mapping[str, Any] | None


class WalletsAPI(Resource):
    async def create(
        self, request: WalletCreateRequest | Mapping[str, Any], *, signal: CancelToken | None = None
    ) -> Wallet:
        return await create_wallet.asyncio(client=self._client, body=request, signal=signal)

    async def list(self, params: Params = None, *, signal: CancelToken | None = None) -> WalletList:
        return await list_wallets.asyncio(client=self._client, query=params, signal=signal)

    async def get(self, wallet_id: WalletId, *, signal: CancelToken | None = None) -> Wallet:
        return await get_wallet.asyncio(client=self._client, wallet_id=wallet_id, signal=signal)

    async def update(
        self,
        wallet_id: WalletId,
        request: WalletUpdateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Wallet:
        """Partially update a wallet. At least one field must be given."""
        return await update_wallet.asyncio(
            client=self._client, body=request, wallet_id=wallet_id, signal=signal
        )

    async def delete(self, wallet_id: WalletId, *, signal: CancelToken | None = None) -> None:
        await delete_wallet.asyncio(client=self._client, wallet_id=wallet_id, signal=signal)

    async def get_balance(
        self, wallet_id: WalletId, *, signal: CancelToken | None = None
    ) -> WalletBalance:
        return await get_wallet_balance.asyncio(
            client=self._client, wallet_id=wallet_id, signal=signal
        )

    async def list_transactions(
        self, wallet_id: WalletId, params: Params = None, *, signal: CancelToken | None = None
    ) -> WalletTransactionList:
        return await list_wallet_transactions.asyncio(
            client=self._client, query=params, wallet_id=wallet_id, signal=signal
        )

    async def sign_data(
        self,
        wallet_id: WalletId,
        request: SignDataRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> SignDataResponse:
        """Sign either base64 ``data`` or a text ``message`` with the wallet key."""
        return await sign_wallet_data.asyncio(
            client=self._client, body=request, wallet_id=wallet_id, signal=signal
        )

    async def sign_message(
        self, wallet_id: WalletId, message: str, *, signal: CancelToken | None = None
    ) -> SignDataResponse:
        if not message:
            raise ValidationError.single(
                "Message is required for signing", "message", code="required"
            )
        return await self.sign_data(wallet_id, SignDataRequest(message=message), signal=signal)

    async def sign_raw_data(
        self, wallet_id: WalletId, data: bytes, *, signal: CancelToken | None = None
    ) -> SignDataResponse:
        """Sign raw bytes; they are sent base64-encoded."""
        if not data:
            raise ValidationError.single("Data is required for signing", "data", code="required")
        encoded = base64.b64encode(bytes(data)).decode("ascii")
        return await self.sign_data(wallet_id, SignDataRequest(data=encoded), signal=signal)

    async def register_webhook(
        self,
        wallet_id: WalletId,
        request: WebhookCreateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Webhook:
        return await register_wallet_webhook.asyncio(
            client=self._client, body=request, wallet_id=wallet_id, signal=signal
        )

    async def get_stats(
        self, wallet_id: WalletId, *, signal: CancelToken | None = None
    ) -> WalletStats:
        return await get_wallet_stats.asyncio(
            client=self._client, wallet_id=wallet_id, signal=signal
        )


__all__ = [
    "WalletsAPI",
    "create_wallet",
    "delete_wallet",
    "get_wallet",
    "get_wallet_balance",
    "get_wallet_stats",
    "list_wallet_transactions",
    "list_wallets",
    "register_wallet_webhook",
    "sign_wallet_data",
    "update_wallet",
]
