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

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from ._codec import RequestModel, WireModel


class TransactionStatus(str, Enum):
    AWAITING_APPROVAL = "awaiting_approval"
    CONFIRMED = "confirmed"
    FAILED = "failed"
    PENDING = "pending"

    def __str__(self) -> str:
        return str(self.value)


class TransactionType(str, Enum):
    CONTRACT_CALL = "contract_call"
    CONTRACT_DEPLOY = "contract_deploy"
    SWAP = "swap"
    TOKEN_APPROVAL = "token_approval"
    TOKEN_TRANSFER = "token_transfer"
    TRANSFER = "transfer"

    def __str__(self) -> str:
        return str(self.value)


class FeePriority(str, Enum):
    FAST = "fast"
    MEDIUM = "medium"
    SLOW = "slow"

    def __str__(self) -> str:
        return str(self.value)


class Transaction(WireModel):
    """A blockchain transaction tracked by the service.

    Amounts and fees are decimal strings in the chain's base unit (e.g. wei).

    Attributes:
        id (UUID):
        wallet_id (UUID):
        blockchain (str):
        status (TransactionStatus):
        amount (str):
        recipient (str):
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        tx_hash (str | None):
        type_ (TransactionType | None):
        fee (str | None):
        data (str | None):
        metadata (dict[str, str] | None):
    """

    id: UUID
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    blockchain: str
    status: TransactionStatus
    amount: str
    recipient: str
    created_at: Annotated[datetime.datetime, Field(alias="createdAt")]
    updated_at: Annotated[datetime.datetime, Field(alias="updatedAt")]
    tx_hash: Annotated[str | None, Field(alias="txHash")] = None
    type_: Annotated[TransactionType | None, Field(alias="type")] = None
    fee: str | None = None
    data: str | None = None
    metadata: dict[str, str] | None = None


class TransactionList(WireModel):
    transactions: list[Transaction]
    total_count: Annotated[int, Field(alias="totalCount")]


class TransactionCreateRequest(RequestModel):
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    recipient: str
    amount: str
    type_: Annotated[TransactionType | None, Field(alias="type")] = None
    data: str | None = None
    metadata: dict[str, str] | None = None
    chain_id: Annotated[str | None, Field(alias="chainId")] = None
    send_max: Annotated[bool | None, Field(alias="sendMax")] = None


class TransactionListParams(RequestModel):
    """Filters for transaction listings. Dates are sent as ISO-8601 strings."""

    wallet_id: Annotated[UUID | None, Field(alias="walletId")] = None
    blockchain: str | None = None
    status: TransactionStatus | None = None
    type_: Annotated[TransactionType | None, Field(alias="type")] = None
    from_date: Annotated[datetime.datetime | None, Field(alias="fromDate")] = None
    to_date: Annotated[datetime.datetime | None, Field(alias="toDate")] = None
    limit: Annotated[int | None, Field(ge=1, le=100)] = None
    offset: Annotated[int | None, Field(ge=0)] = None


class TransactionStatusQuery(RequestModel):
    """Lookup by transaction id or chain hash; at least one is required."""

    id: UUID | None = None
    tx_hash: Annotated[str | None, Field(alias="txHash", min_length=1)] = None

    @model_validator(mode="after")
    def has_a_key(self) -> TransactionStatusQuery:
        if self.id is None and self.tx_hash is None:
            raise PydanticCustomError("custom", "Either 'id' or 'tx_hash' must be provided")
        return self


class TransactionStatusResponse(WireModel):
    id: UUID
    status: TransactionStatus
    tx_hash: Annotated[str | None, Field(alias="txHash")] = None
    type_: Annotated[TransactionType | None, Field(alias="type")] = None
    confirmations: Annotated[int | None, Field(ge=0)] = None
    block_number: Annotated[int | None, Field(alias="blockNumber", ge=0)] = None
    error: str | None = None


class SendTransactionRequest(RequestModel):
    """Build, sign and broadcast a transaction in one call."""

    wallet_id: Annotated[UUID, Field(alias="walletId")]
    recipient: str
    amount: str
    data: str | None = None
    gas_price: Annotated[str | None, Field(alias="gasPrice")] = None
    gas_limit: Annotated[int | None, Field(alias="gasLimit", ge=1)] = None
    nonce: Annotated[int | None, Field(ge=0)] = None
    priority: FeePriority | None = None
    type_: Annotated[TransactionType | None, Field(alias="type")] = None
    metadata: dict[str, str] | None = None
    send_max: Annotated[bool | None, Field(alias="sendMax")] = None


class FeeEstimateRequest(RequestModel):
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    recipient: str
    amount: str
    type_: Annotated[TransactionType | None, Field(alias="type")] = None
    data: str | None = None
    blockchain: str | None = None
    priority: FeePriority | None = None


class FeeEstimate(WireModel):
    """
    Attributes:
        fee (str):
        currency (str):
        gas_price (str | None):
        gas_limit (str | None): Sent as a string to keep 64-bit precision.
        estimated_time (str | None):
        priority (FeePriority | None):
    """

    fee: str
    currency: str
    gas_price: Annotated[str | None, Field(alias="gasPrice")] = None
    gas_limit: Annotated[str | None, Field(alias="gasLimit")] = None
    estimated_time: Annotated[str | None, Field(alias="estimatedTime")] = None
    priority: FeePriority | None = None


class TrackTransactionRequest(RequestModel):
    """Start tracking a transaction broadcast outside the service."""

    tx_hash: Annotated[str, Field(alias="txHash", min_length=1)]
    blockchain: Annotated[str, Field(min_length=1)]
    wallet_id: Annotated[UUID | None, Field(alias="walletId")] = None
    metadata: dict[str, str] | None = None


__all__ = [
    "FeeEstimate",
    "FeeEstimateRequest",
    "FeePriority",
    "SendTransactionRequest",
    "TrackTransactionRequest",
    "Transaction",
    "TransactionCreateRequest",
    "TransactionList",
    "TransactionListParams",
    "TransactionStatus",
    "TransactionStatusQuery",
    "TransactionStatusResponse",
    "TransactionType",
]
