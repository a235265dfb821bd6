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

from ._codec import RequestModel, WireModel, require_any

class ApiKeyStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    REVOKED = "revoked"

    def __str__(self) -> str:
        return str(self.value)


class ApiKeyUpdateStatus(str, Enum):
    """Statuses a caller may set; revocation goes through ``delete``."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    def __str__(self) -> str:
        return str(self.value)


class ApiKey(WireModel):
    """An API key. The secret ``key`` is only returned once, on creation.

    Attributes:
        id (UUID):
        name (str):
        permissions (list[str]):
        status (ApiKeyStatus):
        created_at (datetime.datetime):
        key (str | None):
        expires_at (datetime.datetime | None):
        last_used_at (datetime.datetime | None):
        organization_id (UUID | None):
    """

    id: UUID
    name: str
    permissions: list[str]
    status: ApiKeyStatus
    created_at: datetime.datetime
    key: str | None = None
    expires_at: datetime.datetime | None = None
    last_used_at: datetime.datetime | None = None
    organization_id: UUID | None = None


class CreatedApiKey(ApiKey):
    """Creation response, where the secret must be present."""

    key: Annotated[str, Field(min_length=1)]


class ApiKeyCreateRequest(RequestModel):
    name: Annotated[str, Field(min_length=3, max_length=100)]
    permissions: Annotated[list[str], Field(min_length=1)]
    organization_id: UUID
    expires_at: datetime.datetime | None = None


class ApiKeyUpdateRequest(RequestModel):
    """Partial update; at least one field must be set."""

    name: Annotated[str | None, Field(min_length=3, max_length=100)] = None
    permissions: list[str] | None = None
    expires_at: Annotated[datetime.datetime | None, Field(alias="expiresAt")] = None
    status: ApiKeyUpdateStatus | None = None

    @model_validator(mode="after")
    def has_a_change(self) -> ApiKeyUpdateRequest:
        require_any(self, "name", "permissions", "expires_at", "status")
        return self


__all__ = [
    "ApiKey",
    "ApiKeyCreateRequest",
    "ApiKeyStatus",
    "ApiKeyUpdateRequest",
    "ApiKeyUpdateStatus",
    "CreatedApiKey",
]
