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

from pydantic import Field

from ._codec import RequestModel, WireModel


class ResourceType(str, Enum):
    BATCH = "batch"
    CONTRACT_DEPLOYMENT = "contract_deployment"
    ORGANIZATION_BALANCE_WALLET = "organization_balance_wallet"
    PERMISSION = "permission"
    ROLE = "role"
    TRANSACTION = "transaction"
    TRANSACTION_APPROVAL = "transaction_approval"
    USER = "user"
    WALLET = "wallet"

    def __str__(self) -> str:
        return str(self.value)


class PermissionAction(str, Enum):
    ADMINISTER = "administer"
    APPROVE = "approve"
    ASSIGN = "assign"
    CANCEL = "cancel"
    CREATE = "create"
    DELETE = "delete"
    DEPLOY = "deploy"
    EXECUTE = "execute"
    LIST = "list"
    PROCESS = "process"
    READ = "read"
    REVOKE = "revoke"
    UPDATE = "update"
    USE_FOR_DEPLOYMENT = "use_for_deployment"

    def __str__(self) -> str:
        return str(self.value)


class Permission(WireModel):
    """
    Attributes:
        id (UUID):
        name (str):
        resource_type (ResourceType):
        action (PermissionAction):
        is_system (bool): Built-in permissions cannot be modified.
        description (str | None):
    """

    id: UUID
    name: str
    resource_type: Annotated[ResourceType, Field(alias="resourceType")]
    action: PermissionAction
    is_system: Annotated[bool, Field(alias="isSystem")]
    description: str | None = None


class Role(WireModel):
    """
    Attributes:
        id (UUID):
        name (str):
        is_system (bool):
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        description (str | None):
        permissions (list[Permission] | None):
    """

    id: UUID
    name: str
    is_system: Annotated[bool, Field(alias="isSystem")]
    created_at: Annotated[datetime.datetime, Field(alias="createdAt")]
    updated_at: Annotated[datetime.datetime, Field(alias="updatedAt")]
    description: str | None = None
    permissions: list[Permission] | None = None


class RoleRequest(RequestModel):
    """Body for creating or replacing a role. ``permissions`` holds permission ids."""

    name: Annotated[str, Field(min_length=3, max_length=100)]
    description: str | None = None
    permissions: list[UUID] | None = None


class AssignRoleRequest(RequestModel):
    user_id: Annotated[UUID, Field(alias="userId")]
    role_id: Annotated[UUID, Field(alias="roleId")]


class AssignPermissionRequest(RequestModel):
    user_id: Annotated[UUID, Field(alias="userId")]
    permission_id: Annotated[UUID, Field(alias="permissionId")]
    granted: bool = True


class AssignResourcePermissionRequest(RequestModel):
    """Grant (or deny, with ``granted=False``) a permission on one resource."""

    user_id: Annotated[UUID, Field(alias="userId")]
    resource_type: Annotated[ResourceType, Field(alias="resourceType")]
    resource_id: Annotated[str, Field(alias="resourceId", min_length=1)]
    permission_id: Annotated[UUID, Field(alias="permissionId")]
    granted: bool = True


class AssignOrgRoleRequest(RequestModel):
    organization_id: Annotated[UUID, Field(alias="organizationId")]
    user_id: Annotated[UUID, Field(alias="userId")]
    role_id: Annotated[UUID, Field(alias="roleId")]


class TransactionLimit(WireModel):
    """Spending limits applied to members of a role on one blockchain.

    Amount fields are decimal strings in the chain's base unit.
    """

    role_id: Annotated[UUID, Field(alias="roleId")]
    blockchain: str
    max_amount: Annotated[str, Field(alias="maxAmount")]
    daily_limit: Annotated[str, Field(alias="dailyLimit")]
    monthly_limit: Annotated[str, Field(alias="monthlyLimit")]
    require_approval: Annotated[bool, Field(alias="requireApproval")]
    approval_threshold: Annotated[int, Field(alias="approvalThreshold")]
    id: UUID | None = None
    created_at: Annotated[datetime.datetime | None, Field(alias="createdAt")] = None
    updated_at: Annotated[datetime.datetime | None, Field(alias="updatedAt")] = None
    created_by: Annotated[UUID | None, Field(alias="createdBy")] = None


class TransactionLimitRequest(RequestModel):
    role_id: Annotated[UUID, Field(alias="roleId")]
    blockchain: Annotated[str, Field(min_length=1)]
    max_amount: Annotated[str, Field(alias="maxAmount")]
    daily_limit: Annotated[str, Field(alias="dailyLimit")]
    monthly_limit: Annotated[str, Field(alias="monthlyLimit")]
    require_approval: Annotated[bool, Field(alias="requireApproval")] = False
    approval_threshold: Annotated[int, Field(alias="approvalThreshold")] = 0


__all__ = [
    "AssignOrgRoleRequest",
    "AssignPermissionRequest",
    "AssignResourcePermissionRequest",
    "AssignRoleRequest",
    "Permission",
    "PermissionAction",
    "ResourceType",
    "Role",
    "RoleRequest",
    "TransactionLimit",
    "TransactionLimitRequest",
]
