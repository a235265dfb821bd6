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

"""Organization, membership and balance-wallet endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..models.organizations import (
    BalanceWalletList,
    BalanceWalletListParams,
    DeployBalanceWalletRequest,
    DeployBalanceWalletResponse,
    Organization,
    OrganizationCreateRequest,
    OrganizationList,
    OrganizationListParams,
    OrganizationMember,
    OrganizationMemberCreateRequest,
    OrganizationMemberList,
    OrganizationMemberListParams,
    OrganizationMemberUpdateRequest,
    OrganizationUpdateRequest,
    UpdateBalanceWalletRequest,
    UpdateBalanceWalletResponse,
)
from ._base import Endpoint, Resource

_BALANCE_WALLETS = "/organizations/OrganizationBalancesWalletUpgradeable"

create_organization = Endpoint(
    "POST", "/organizations", Organization, request=OrganizationCreateRequest
)
list_organizations = Endpoint(
    "GET", "/organizations", OrganizationList, query=OrganizationListParams
)
get_organization = Endpoint("GET", "/organizations/{organization_id}", Organization)
update_organization = Endpoint(
    "PUT", "/organizations/{organization_id}", Organization, request=OrganizationUpdateRequest
)
delete_organization = Endpoint("DELETE", "/organizations/{organization_id}")

add_organization_member = Endpoint(
    "POST",
    "/organizations/{organization_id}/members",
    OrganizationMember,
    request=OrganizationMemberCreateRequest,
)
list_organization_members = Endpoint(
    "GET",
    "/organizations/{organization_id}/members",
    OrganizationMemberList,
    query=OrganizationMemberListParams,
)
update_organization_member = Endpoint(
    "PUT",
    "/organizations/{organization_id}/members/{user_id}",
    OrganizationMember,
    request=OrganizationMemberUpdateRequest,
)
remove_organization_member = Endpoint(
    "DELETE", "/organizations/{organization_id}/members/{user_id}"
)

deploy_balance_wallet = Endpoint(
    "POST", _BALANCE_WALLETS, DeployBalanceWalletResponse, request=DeployBalanceWalletRequest
)
list_balance_wallets = Endpoint(
    "GET", _BALANCE_WALLETS, BalanceWalletList, query=BalanceWalletListParams
)
update_balance_wallet = Endpoint(
    "PATCH", _BALANCE_WALLETS, UpdateBalanceWalletResponse, request=UpdateBalanceWalletRequest
)

Id = UUID | str


class OrganizationsAPI(Resource):
    """Organizations and their members.

    List calls take a 1-based ``page`` and a ``limit``; the page is sent as an
    ``offset``.
    """

    async def create(
        self,
        request: OrganizationCreateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Organization:
        return await create_organization.asyncio(client=self._client, body=request, signal=signal)

    async def list(
        self,
        params: OrganizationListParams | Mapping[str, Any] | None = None,
        *,
        signal: CancelToken | None = None,
    ) -> OrganizationList:
        return await list_organizations.asyncio(client=self._client, query=params, signal=signal)

    async def get(self, organization_id: Id, *, signal: CancelToken | None = None) -> Organization:
        return await get_organization.asyncio(
            client=self._client, organization_id=organization_id, signal=signal
        )

    async def update(
        self,
        organization_id: Id,
        request: OrganizationUpdateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Organization:
        return await update_organization.asyncio(
            client=self._client, body=request, organization_id=organization_id, signal=signal
        )

    async def delete(self, organization_id: Id, *, signal: CancelToken | None = None) -> None:
        await delete_organization.asyncio(
            client=self._client, organization_id=organization_id, signal=signal
        )

    async def add_member(
        self,
        organization_id: Id,
        request: OrganizationMemberCreateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> OrganizationMember:
        return await add_organization_member.asyncio(
            client=self._client, body=request, organization_id=organization_id, signal=signal
        )

    async def list_members(
        self,
        organization_id: Id,
        params: OrganizationMemberListParams | Mapping[str, Any] | None = None,
        *,
        signal: CancelToken | None = None,
    ) -> OrganizationMemberList:
        return await list_organization_members.asyncio(
            client=self._client, query=params, organization_id=organization_id, signal=signal
        )

    async def update_member(
        self,
        organization_id: Id,
        user_id: Id,
        request: OrganizationMemberUpdateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> OrganizationMember:
        return await update_organization_member.asyncio(
            client=self._client,
            body=request,
            organization_id=organization_id,
            user_id=user_id,
            signal=signal,
        )

    async def remove_member(
        self, organization_id: Id, user_id: Id, *, signal: CancelToken | None = None
    ) -> None:
        await remove_organization_member.asyncio(
            client=self._client, organization_id=organization_id, user_id=user_id, signal=signal
        )

    async def deploy_balance_wallet(
        self,
        request: DeployBalanceWalletRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> DeployBalanceWalletResponse:
        return await deploy_balance_wallet.asyncio(client=self._client, body=request, signal=signal)

    async def list_balance_wallets(
        self,
        params: BalanceWalletListParams | Mapping[str, Any] | None = None,
        *,
        signal: CancelToken | None = None,
    ) -> BalanceWalletList:
        return await list_balance_wallets.asyncio(client=self._client, query=params, signal=signal)

    async def update_balance_wallet(
        self,
        request: UpdateBalanceWalletRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> UpdateBalanceWalletResponse:
        """Run a management ``action`` (pause, add a currency, ...) on a balance wallet."""
        return await update_balance_wallet.asyncio(client=self._client, body=request, signal=signal)


__all__ = [
    "OrganizationsAPI",
    "add_organization_member",
    "create_organization",
    "delete_organization",
    "deploy_balance_wallet",
    "get_organization",
    "list_balance_wallets",
    "list_organization_members",
    "list_organizations",
    "remove_organization_member",
    "update_balance_wallet",
    "update_organization",
    "update_organization_member",
]
