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
from typing import Annotated, Literal
from uuid import UUID

from pydantic import EmailStr, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ._codec import RequestModel, WireModel


class User(WireModel):
    """A user account.

    Attributes:
        id (UUID):
        username (str):
        email (str):
        role (str): e.g. ``superadmin``, ``admin``, ``manager``, ``user``.
        status (str): e.g. ``active``, ``inactive``, ``suspended``.
        created_at (datetime.datetime | None):
        updated_at (datetime.datetime | None):
        email_verified (bool | None):
    """

    id: UUID
    username: str
    email: EmailStr
    role: str
    status: str
    created_at: Annotated[datetime.datetime | None, Field(alias="createdAt")] = None
    updated_at: Annotated[datetime.datetime | None, Field(alias="updatedAt")] = None
    email_verified: Annotated[bool | None, Field(alias="emailVerified")] = None


class UserRegistrationRequest(RequestModel):
    username: Annotated[str, Field(min_length=3, max_length=50)]
    email: EmailStr
    password: Annotated[str, Field(min_length=8, max_length=100)]


class UserLoginRequest(RequestModel):
    """Credentials for ``/auth/login``.

    When ``mfa_code`` is given the request goes to ``/auth/mfa/verify`` instead.
    """

    email: EmailStr
    password: str
    mfa_code: Annotated[str | None, Field(alias="mfaCode")] = None


class TokenResponse(WireModel):
    """Tokens issued by login and refresh.

    Attributes:
        access_token (str):
        refresh_token (str):
        expires_in (int): Lifetime of the access token in seconds.
        token_type (str): Always ``Bearer``.
        user_id (UUID | None):
        mfa_required (bool | None):
        expires_at (int | None): Unix timestamp.
        refresh_expires_at (int | None): Unix timestamp.
    """

    access_token: str
    refresh_token: str
    expires_in: int
    token_type: Literal["Bearer"]
    user_id: UUID | None = None
    mfa_required: bool | None = None
    expires_at: int | None = None
    refresh_expires_at: int | None = None


class RefreshTokenRequest(RequestModel):
    refresh_token: Annotated[str, Field(alias="refreshToken", min_length=1)]


class PasswordChangeRequest(RequestModel):
    current_password: Annotated[str, Field(alias="currentPassword")]
    new_password: Annotated[str, Field(alias="newPassword", min_length=8, max_length=100)]

    @field_validator("new_password")
    @classmethod
    def differs_from_current(cls, value: str, info: ValidationInfo) -> str:
        if value == info.data.get("current_password"):
            raise PydanticCustomError(
                "custom", "New password must be different from the current password"
            )
        return value


__all__ = [
    "PasswordChangeRequest",
    "RefreshTokenRequest",
    "TokenResponse",
    "User",
    "UserLoginRequest",
    "UserRegistrationRequest",
]
