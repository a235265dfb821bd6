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

"""Roles, permissions, assignments and transaction limits."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..models.permissions import (
    AssignOrgRoleRequest,
    AssignPermissionRequest,
    AssignResourcePermissionRequest,
    AssignRoleRequest,
    Permission,
    ResourceType,
    Role,
    RoleRequest,
    TransactionLimit,
    TransactionLimitRequest,
)
from ._base import Endpoint, Resource

Roles = list[Role]
Permissions = list[Permission]

list_roles = Endpoint("GET", "/roles", Roles)
create_role = Endpoint("POST", "/roles", Role, request=RoleRequest)
get_role = Endpoint("GET", "/roles/{role_id}", Role)
update_role = Endpoint("PUT", "/roles/{role_id}", Role, request=RoleRequest)
delete_role = Endpoint("DELETE", "/roles/{role_id}")

list_permissions = Endpoint("GET", "/permissions", Permissions)
list_permissions_by_resource_type = Endpoint(
    "GET", "/permissions/resource/{resource_type}", Permissions
)

get_user_roles = Endpoint("GET", "/user-roles/{user_id}", Roles)
assign_user_role = Endpoint("POST", "/user-roles", request=AssignRoleRequest)
revoke_user_role = Endpoint("DELETE", "/user-roles/{user_id}/{role_id}")

get_user_permissions = Endpoint("GET", "/user-permissions/{user_id}", Permissions)
assign_user_permission = Endpoint("POST", "/user-permissions", request=AssignPermissionRequest)
revoke_user_permission = Endpoint("DELETE", "/user-permissions/{user_id}/{permission_id}")

assign_resource_permission = Endpoint(
    "POST", "/resource-permissions", request=AssignResourcePermissionRequest
)
revoke_resource_permission = Endpoint(
    "DELETE", "/resource-permissions/{user_id}/{resource_type}/{resource_id}/{permission_id}"
)

get_organization_user_roles = Endpoint(
    "GET", "/organization-roles/{organization_id}/{user_id}", Roles
)
assign_organization_role = Endpoint("POST", "/organization-roles", request=AssignOrgRoleRequest)
revoke_organization_role = Endpoint(
    "DELETE", "/organization-roles/{organization_id}/{user_id}/{role_id}"
)

set_transaction_limit = Endpoint(
    "POST", "/transaction-limits", TransactionLimit, request=TransactionLimitRequest
)
list_role_transaction_limits = Endpoint(
    "GET", "/transaction-limits/role/{role_id}", list[TransactionLimit]
)

Id = UUID | str


class PermissionsAPI(Resource):
    """Role-based access control.

    Assignment and revocation calls return nothing on success.
    """

    # Roles

    async def list_roles(self, *, signal: CancelToken | None = None) -> list[Role]:
        return await list_roles.asyncio(client=self._client, signal=signal)

    async def create_role(
        self, request: RoleRequest | Mapping[str, Any], *, signal: CancelToken | None = None
    ) -> Role:
        return await create_role.asyncio(client=self._client, body=request, signal=signal)

    async def get_role(self, role_id: Id, *, signal: CancelToken | None = None) -> Role:
        return await get_role.asyncio(client=self._client, role_id=role_id, signal=signal)

    async def update_role(
        self,
        role_id: Id,
        request: RoleRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> Role:
        return await update_role.asyncio(
            client=self._client, body=request, role_id=role_id, signal=signal
        )

    async def delete_role(self, role_id: Id, *, signal: CancelToken | None = None) -> None:
        await delete_role.asyncio(client=self._client, role_id=role_id, signal=signal)

    # Permissions

    async def list_permissions(
        self,
        resource_type: ResourceType | str | None = None,
        *,
        signal: CancelToken | None = None,
    ) -> list[Permission]:
        """All permissions, or only those for ``resource_type``."""
        if resource_type is None:
            return await list_permissions.asyncio(client=self._client, signal=signal)
        return await list_permissions_by_resource_type.asyncio(
            client=self._client, resource_type=resource_type, signal=signal
        )

    # User roles

    async def get_user_roles(self, user_id: Id, *, signal: CancelToken | None = None) -> list[Role]:
        return await get_user_roles.asyncio(client=self._client, user_id=user_id, signal=signal)

    async def assign_role_to_user(
        self,
        request: AssignRoleRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> None:
        await assign_user_role.asyncio(client=self._client, body=request, signal=signal)

    async def revoke_role_from_user(
        self, user_id: Id, role_id: Id, *, signal: CancelToken | None = None
    ) -> None:
        await revoke_user_role.asyncio(
            client=self._client, user_id=user_id, role_id=role_id, signal=signal
        )

    # User permissions

    async def get_user_permissions(
        self, user_id: Id, *, signal: CancelToken | None = None
    ) -> list[Permission]:
        return await get_user_permissions.asyncio(
            client=self._client, user_id=user_id, signal=signal
        )

    async def assign_permission_to_user(
        self,
        request: AssignPermissionRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> None:
        await assign_user_permission.asyncio(client=self._client, body=request, signal=signal)

    async def revoke_permission_from_user(
        self, user_id: Id, permission_id: Id, *, signal: CancelToken | None = None
    ) -> None:
        await revoke_user_permission.asyncio(
            client=self._client, user_id=user_id, permission_id=permission_id, signal=signal
        )

    # Resource permissions

    async def assign_permission_to_resource(
        self,
        request: AssignResourcePermissionRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> None:
        await assign_resource_permission.asyncio(client=self._client, body=request, signal=signal)

    async def revoke_permission_from_resource(
        self,
        user_id: Id,
        resource_type: ResourceType | str,
        resource_id: str,
        permission_id: Id,
        *,
        signal: CancelToken | None = None,
    ) -> None:
        await revoke_resource_permission.asyncio(
            client=self._client,
            user_id=user_id,
            resource_type=resource_type,
            resource_id=resource_id,
            permission_id=permission_id,
            signal=signal,
        )

    # Organization roles

    async def get_organization_user_roles(
        self, organization_id: Id, user_id: Id, *, signal: CancelToken | None = None
    ) -> list[Role]:
        return await get_organization_user_roles.asyncio(
            client=self._client, organization_id=organization_id, user_id=user_id, signal=signal
        )

    async def assign_role_to_organization_user(
        self,
        request: AssignOrgRoleRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> None:
        await assign_organization_role.asyncio(client=self._client, body=request, signal=signal)

    async def revoke_role_from_organization_user(
        self, organization_id: Id, user_id: Id, role_id: Id, *, signal: CancelToken | None = None
    ) -> None:
        await revoke_organization_role.asyncio(
            client=self._client,
            organization_id=organization_id,
            user_id=user_id,
            role_id=role_id,
            signal=signal,
        )

    # Transaction limits

    async def set_transaction_limit(
        self,
        request: TransactionLimitRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> TransactionLimit:
        return await set_transaction_limit.asyncio(client=self._client, body=request, signal=signal)

    async def get_transaction_limits_by_role(
        self, role_id: Id, *, signal: CancelToken | None = None
    ) -> list[TransactionLimit]:
        return await list_role_transaction_limits.asyncio(
            client=self._client, role_id=role_id, signal=signal
        )


__all__ = [
    "PermissionsAPI",
    "assign_organization_role",
    "assign_resource_permission",
    "assign_user_permission",
    "assign_user_role",
    "create_role",
    "delete_role",
    "get_organization_user_roles",
    "get_role",
    "get_user_permissions",
    "get_user_roles",
    "list_permissions",
    "list_permissions_by_resource_type",
    "list_role_transaction_limits",
    "list_roles",
    "revoke_organization_role",
    "revoke_resource_permission",
    "revoke_user_permission",
    "revoke_user_role",
    "set_transaction_limit",
    "update_role",
]
