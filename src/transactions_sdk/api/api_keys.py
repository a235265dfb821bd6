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

"""API key endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..models.api_keys import ApiKey, ApiKeyCreateRequest, ApiKeyUpdateRequest, CreatedApiKey
from ._base import Endpoint, Resource

create_api_key = Endpoint("POST", "/api-keys", CreatedApiKey, request=ApiKeyCreateRequest)
list_api_keys = Endpoint("GET", "/api-keys", list[ApiKey])
get_api_key = Endpoint("GET", "/api-keys/{key_id}", ApiKey)
update_api_key = Endpoint("PATCH", "/api-keys/{key_id}", ApiKey, request=ApiKeyUpdateRequest)
delete_api_key = Endpoint("DELETE", "/api-keys/{key_id}")


class ApiKeysAPI(Resource):
    async def create(
        self,
        request: ApiKeyCreateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> CreatedApiKey:
        """Create a key. The secret is only returned here, never by ``get``/``list``."""
        return await create_api_key.asyncio(client=self._client, body=request, signal=signal)

    async def list(self, *, signal: CancelToken | None = None) -> list[ApiKey]:
        return await list_api_keys.asyncio(client=self._client, signal=signal)

    async def get(self, key_id: UUID | str, *, signal: CancelToken | None = None) -> ApiKey:
        return await get_api_key.asyncio(client=self._client, key_id=key_id, signal=signal)

    async def update(
        self,
        key_id: UUID | str,
        request: ApiKeyUpdateRequest | Mapping[str, Any],
        *,
        signal: CancelToken | None = None,
    ) -> ApiKey:
        return await update_api_key.asyncio(
            client=self._client, body=request, key_id=key_id, signal=signal
        )

    async def delete(self, key_id: UUID | str, *, signal: CancelToken | None = None) -> None:
        await delete_api_key.asyncio(client=self._client, key_id=key_id, signal=signal)


__all__ = [
    "ApiKeysAPI",
    "create_api_key",
    "delete_api_key",
    "get_api_key",
    "list_api_keys",
    "update_api_key",
]
