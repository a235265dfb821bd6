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
from typing import Annotated, Any
from uuid import UUID

from pydantic import EmailStr, Field

from ._codec import RequestModel, WireModel
from .common import NumberedPageParams

class OrgRole(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"
    OWNER = "owner"

    def __str__(self) -> str:
        return str(self.value)


class BalanceWalletAction(str, Enum):
    ALLOW_NATIVE_CURRENCY = "allownativecurrency"
    ALLOW_TOKEN_CONTRACT = "allowtokencontract"
    DEPLOY = "deploy"
    # Server-side spelling.
    DISABLE_NATIVE_CURRENCY = "disableativecurrency"
    DISABLE_TOKEN_CONTRACT = "disabletokencontract"
    PAUSE_CONTRACT = "pausecontract"
    UNPAUSE_CONTRACT = "unpausecontract"

    def __str__(self) -> str:
        return str(self.value)


class Organization(WireModel):
    """
    Attributes:
        id (UUID):
        name (str):
        owner_id (UUID):
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        description (str | None):
    """

    id: UUID
    name: str
    owner_id: UUID
    created_at: datetime.datetime
    updated_at: datetime.datetime
    description: str | None = None


class OrganizationCreateRequest(RequestModel):
    name: Annotated[str, Field(min_length=1, max_length=255)]
    description: str | None = None


class OrganizationUpdateRequest(RequestModel):
    name: Annotated[str | None, Field(min_length=1, max_length=255)] = None
    description: str | None = None


class OrganizationListParams(NumberedPageParams):
    search: str | None = None


class OrganizationList(WireModel):
    total_count: Annotated[int, Field(alias="totalCount", ge=0)]
    organizations: list[Organization]


class OrganizationMember(WireModel):
    id: UUID
    organization_id: Annotated[UUID, Field(alias="organizationId")]
    user_id: Annotated[UUID, Field(alias="userId")]
    username: str
    email: EmailStr
    role: OrgRole
    created_at: Annotated[datetime.datetime, Field(alias="createdAt")]


class OrganizationMemberCreateRequest(RequestModel):
    user_id: Annotated[UUID, Field(alias="userId")]
    role: OrgRole


class OrganizationMemberUpdateRequest(RequestModel):
    role: OrgRole


class OrganizationMemberList(WireModel):
    total_count: Annotated[int, Field(alias="totalCount", ge=0)]
    members: list[OrganizationMember]


class OrganizationMemberListParams(NumberedPageParams):
    pass


class BalanceWallet(WireModel):
    """An organization balance wallet: an upgradeable contract holding org funds.

    Attributes:
        id (UUID):
        organization_id (UUID):
        wallet_id (UUID): Wallet that deployed the contract.
        contract_address (str):
        network (str):
        status (str): e.g. ``active``, ``paused``.
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        error_message (str | None):
        metadata (dict[str, Any] | None):
    """

    id: UUID
    organization_id: Annotated[UUID, Field(alias="organizationId")]
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    contract_address: Annotated[str, Field(alias="contractAddress")]
    network: str
    status: str
    created_at: Annotated[datetime.datetime, Field(alias="createdAt")]
    updated_at: Annotated[datetime.datetime, Field(alias="updatedAt")]
    error_message: Annotated[str | None, Field(alias="errorMessage")] = None
    metadata: dict[str, Any] | None = None


class DeployBalanceWalletRequest(RequestModel):
    network: Annotated[str, Field(min_length=1)]
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    organization_id: Annotated[UUID, Field(alias="organizationId")]
    metadata: dict[str, Any] | None = None


class DeployBalanceWalletResponse(WireModel):
    balance_wallet_id: Annotated[UUID, Field(alias="organizationbalancewalletId")]
    contract_address: Annotated[str, Field(alias="organizationbalancewalletPublickey")]
    status: str


class BalanceWalletListParams(NumberedPageParams):
    organization_id: Annotated[UUID | None, Field(alias="organizationId")] = None


class BalanceWalletList(WireModel):
    total_count: Annotated[int, Field(alias="totalCount", ge=0)]
    wallets: list[BalanceWallet]


class UpdateBalanceWalletRequest(RequestModel):
    """Administrative action on a balance wallet contract.

    ``wallet_id`` is the balance wallet (contract) id, not the deployer wallet.
    """

    organization_id: Annotated[UUID, Field(alias="organizationId")]
    wallet_id: Annotated[UUID, Field(alias="walletId")]
    network: Annotated[str, Field(min_length=1)]
    action: BalanceWalletAction
    token_address: Annotated[str | None, Field(alias="tokenAddress")] = None
    token_name: Annotated[str | None, Field(alias="tokenName")] = None
    token_symbol: Annotated[str | None, Field(alias="tokenSymbol")] = None


class UpdateBalanceWalletResponse(WireModel):
    transaction_id: Annotated[UUID, Field(alias="transactionId")]
    status: str


__all__ = [
    "BalanceWallet",
    "BalanceWalletAction",
    "BalanceWalletList",
    "BalanceWalletListParams",
    "DeployBalanceWalletRequest",
    "DeployBalanceWalletResponse",
    "OrgRole",
    "Organization",
    "OrganizationCreateRequest",
    "OrganizationList",
    "OrganizationListParams",
    "OrganizationMember",
    "OrganizationMemberCreateRequest",
    "OrganizationMemberList",
    "OrganizationMemberListParams",
    "OrganizationMemberUpdateRequest",
    "OrganizationUpdateRequest",
    "UpdateBalanceWalletRequest",
    "UpdateBalanceWalletResponse",
]
