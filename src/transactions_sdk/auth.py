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

"""Authentication scheme resolution.

The credentials on a :class:`~transactions_sdk.client.ClientConfig` resolve,
once, to exactly one of :class:`ApiKeyAuth`, :class:`BearerAuth` or
:class:`NoAuth`. The scheme then decorates each outgoing header set and
enforces that the API-key and bearer headers never travel together.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from attrs import field, frozen

if TYPE_CHECKING:
    from .client import ClientConfig

API_KEY_HEADER = "X-API-Key"
AUTHORIZATION_HEADER = "Authorization"
ORGANIZATION_HEADER = "X-Organization-ID"


@frozen
class ApiKeyAuth:
    """API-key scheme. Takes precedence over a configured bearer token."""

    api_key: str = field(repr=False)
    organization_id: str | None = None

    def apply(self, headers: httpx.Headers) -> None:
        headers[API_KEY_HEADER] = self.api_key
        if self.organization_id:
            headers[ORGANIZATION_HEADER] = self.organization_id
        headers.pop(AUTHORIZATION_HEADER, None)

    def enforce(self, headers: httpx.Headers) -> None:
        headers.pop(AUTHORIZATION_HEADER, None)


@frozen
class BearerAuth:
    """Bearer-token scheme (``Authorization: Bearer <token>``)."""

    token: str = field(repr=False)
    organization_id: str | None = None

    def apply(self, headers: httpx.Headers) -> None:
        headers[AUTHORIZATION_HEADER] = f"Bearer {self.token}"
        if self.organization_id and ORGANIZATION_HEADER not in headers:
            headers[ORGANIZATION_HEADER] = self.organization_id

    def enforce(self, headers: httpx.Headers) -> None:
        headers.pop(API_KEY_HEADER, None)


@frozen
class NoAuth:
    """No credentials configured; the server is expected to reject the call."""

    def apply(self, headers: httpx.Headers) -> None:
        return None

    def enforce(self, headers: httpx.Headers) -> None:
        # A call may still bring its own credentials; the API key wins.
        if API_KEY_HEADER in headers:
            headers.pop(AUTHORIZATION_HEADER, None)


AuthScheme = ApiKeyAuth | BearerAuth | NoAuth


def resolve_auth(config: ClientConfig) -> AuthScheme:
    """Pick the single scheme implied by ``config``."""
    if config.api_key:
        return ApiKeyAuth(api_key=config.api_key, organization_id=config.organization_id)
    if config.bearer_token:
        return BearerAuth(token=config.bearer_token, organization_id=config.organization_id)
    return NoAuth()


__all__ = [
    "API_KEY_HEADER",
    "AUTHORIZATION_HEADER",
    "ORGANIZATION_HEADER",
    "ApiKeyAuth",
    "AuthScheme",
    "BearerAuth",
    "NoAuth",
    "resolve_auth",
]
