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

"""Authentication: registration, login and session tokens."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..cancellation import CancelToken
from ..models.auth import (
    PasswordChangeRequest,
    RefreshTokenRequest,
    TokenResponse,
    User,
    UserLoginRequest,
    UserRegistrationRequest,
)
from ..models.common import MessageResponse
from ._base import Endpoint, Resource

register_user = Endpoint("POST", "/auth/register", User, request=UserRegistrationRequest)
login_user = Endpoint("POST", "/auth/login", TokenResponse, request=UserLoginRequest)
verify_mfa_login = Endpoint("POST", "/auth/mfa/verify", TokenResponse, request=UserLoginRequest)
refresh_tokens = Endpoint("POST", "/auth/refresh", TokenResponse, request=RefreshTokenRequest)
change_user_password = Endpoint(
    "POST", "/auth/change-password", MessageResponse, request=PasswordChangeRequest
)
get_current_user = Endpoint("GET", "/auth/me", User)
logout_user = Endpoint("POST", "/auth/logout")


class AuthAPI(Resource):
    async def register(
        self,
        request: UserRegistrationRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> User:
        return await register_user.asyncio(client=self._client, body=request, signal=signal)

    async def login(
        self, request: UserLoginRequest | Mapping[str, Any], *, signal: CancelToken | None = None
    ) -> TokenResponse:
        """Exchange credentials for tokens.

        With an ``mfa_code`` the credentials are verified through the MFA
        endpoint instead of the plain login.
        """
        request = UserLoginRequest.from_input(request)
        endpoint = verify_mfa_login if request.mfa_code is not None else login_user
        return await endpoint.asyncio(client=self._client, body=request, signal=signal)

    async def refresh(
        self, refresh_token: str, *, signal: CancelToken | None = None
    ) -> TokenResponse:
        return await refresh_tokens.asyncio(
            client=self._client,
            body=RefreshTokenRequest(refresh_token=refresh_token),
            signal=signal,
        )

    async def change_password(
        self,
        request: PasswordChangeRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> MessageResponse:
        return await change_user_password.asyncio(client=self._client, body=request, signal=signal)

    async def get_profile(self, *, signal: CancelToken | None = None) -> User:
        return await get_current_user.asyncio(client=self._client, signal=signal)

    async def logout(self, *, signal: CancelToken | None = None) -> None:
        await logout_user.asyncio(client=self._client, signal=signal)


__all__ = [
    "AuthAPI",
    "change_user_password",
    "get_current_user",
    "login_user",
    "logout_user",
    "refresh_tokens",
    "register_user",
    "verify_mfa_login",
]
