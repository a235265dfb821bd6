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

from __future__ import annotations

import datetime
from enum import Enum
from typing import Annotated
from uuid import UUID

from pydantic import Field, HttpUrl, model_validator

from ._codec import RequestModel, WireModel, require_any, require_one
from .transactions import Transaction


class WalletStatus(str, Enum):
    ACTIVE = "active"
    FROZEN = "frozen"
    INACTIVE = "inactive"

    def __str__(self) -> str:
        return str(self.value)


class Wallet(WireModel):
    """A custodial wallet.

    Attributes:
        id (UUID):
        user_id (UUID): Owner of the wallet.
        address (str): On-chain address.
        blockchain (str):
        name (str):
        status (WalletStatus):
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        metadata (dict[str, str] | None):
        organization_id (UUID | None):
    """

    id: UUID
    user_id: UUID
    address: str
    blockchain: str
    name: str
    status: WalletStatus
    created_at: datetime.datetime
    updated_at: datetime.datetime
    metadata: dict[str, str] | None = None
    organization_id: UUID | None = None


class WalletCreateRequest(RequestModel):
    """
    Attributes:
        blockchain (str):
        name (str):
        organization_id (UUID):
        user_id (UUID | None): Defaults to the caller on the server side.
        metadata (dict[str, str] | None):
    """

    blockchain: Annotated[str, Field(min_length=1)]
    name: Annotated[str, Field(min_length=1)]
    organization_id: UUID
    user_id: UUID | None = None
    metadata: dict[str, str] | None = None


class WalletList(WireModel):
    wallets: list[Wallet]
    total_count: Annotated[int, Field(alias="totalCount")]


class WalletUpdateRequest(RequestModel):
    """Partial update; at least one field must be set."""

    name: Annotated[str | None, Field(min_length=1)] = None
    status: WalletStatus | None = None
    metadata: dict[str, str] | None = None

    @model_validator(mode="after")
    def has_a_change(self) -> WalletUpdateRequest:
        require_any(self, "name", "status", "metadata")
        return self


class WalletBalance(WireModel):
    """
    Attributes:
        wallet_id (UUID):
        address (str):
        blockchain (str):
        balance (str): Decimal string in the chain's base unit.
        unit (str): e.g. ``ETH``.
        updated_at (datetime.datetime):
    """

    wallet_id: UUID
    address: str
    blockchain: str
    balance: str
    unit: str
    updated_at: datetime.datetime


class SignDataRequest(RequestModel):
    """Exactly one of ``data`` (base64) or ``message`` must be given."""

    data: Annotated[str | None, Field(min_length=1)] = None
    message: Annotated[str | None, Field(min_length=1)] = None

    @model_validator(mode="after")
    def has_one_payload(self) -> SignDataRequest:
        require_one(
            self, "data", "message", "Exactly one of 'data' (base64) or 'message' must be provided"
        )
        return self


class SignDataResponse(WireModel):
    signature: str
    wallet_id: Annotated[UUID, Field(alias="walletId")]


class WebhookCreateRequest(RequestModel):
    event_types: Annotated[list[str], Field(alias="eventTypes")]
    url: HttpUrl
    secret: str | None = None
    active: bool = True


class Webhook(WireModel):
    id: UUID
    resource_type: Annotated[str, Field(alias="resourceType")]
    resource_id: Annotated[UUID, Field(alias="resourceId")]
    event_types: Annotated[list[str], Field(alias="eventTypes")]
    url: str
    active: bool
    created_at: Annotated[datetime.datetime, Field(alias="createdAt")]
    updated_at: Annotated[datetime.datetime, Field(alias="updatedAt")]


class WalletStats(WireModel):
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    address: str
    blockchain: str
    current_balance: Annotated[str, Field(alias="currentBalance")]
    transaction_count: Annotated[int, Field(alias="transactionCount")]
    last_activity: Annotated[datetime.datetime, Field(alias="lastActivity")]


class WalletTransactionList(WireModel):
    transactions: list[Transaction]
    total_count: Annotated[int, Field(alias="totalCount")]


__all__ = [
    "SignDataRequest",
    "SignDataResponse",
    "Wallet",
    "WalletBalance",
    "WalletCreateRequest",
    "WalletList",
    "WalletStats",
    "WalletStatus",
    "WalletTransactionList",
    "WalletUpdateRequest",
    "Webhook",
    "WebhookCreateRequest",
]
