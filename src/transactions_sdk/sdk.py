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

"""Top-level client composing every resource over one connection pool."""

from __future__ import annotations

from typing import Any

import httpx

from .api import (
    ApiKeysAPI,
    AuthAPI,
    ContractsAPI,
    OrganizationsAPI,
    PermissionsAPI,
    TransactionApprovalsAPI,
    TransactionsAPI,
    WalletsAPI,
)
from .client import Client, ClientConfig
from .observability import RequestLogger


class TransactionsSDK:
    """Async client for the transactions API.

    Each API area is an attribute (sdk.wallets, sdk.contracts, ...);
    all of them share one :class:`Client` and its connection pool.

    Example:
        ```python
        config = ClientConfig(base_url="https://api.example.com/v1", api_key="...",
                              organization_id="...")
        async with TransactionsSDK(config) as sdk:
            wallets = await sdk.wallets.list({"limit": 20})
        ```

    Credentials are fixed per instance. To switch to a token returned by
    ``auth.login``, build a new SDK from ``config.replace(bearer_token=...)``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: RequestLogger | None = None,
    ):
        """Initialize the SDK.

        Args:
            config: Client configuration
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
            logger: Structured request logger (defaults to a no-op)
        """
        self._client = Client(config, transport=transport, logger=logger)

        self.auth = AuthAPI(self._client)
        self.wallets = WalletsAPI(self._client)
        self.transactions = TransactionsAPI(self._client)
        self.transaction_approvals = TransactionApprovalsAPI(self._client)
        self.permissions = PermissionsAPI(self._client)
        self.organizations = OrganizationsAPI(self._client)
        self.api_keys = ApiKeysAPI(self._client)
        self.contracts = ContractsAPI(self._client)

    @classmethod
    def from_env(cls, **kwargs: Any) -> TransactionsSDK:
        """Build an SDK from ``TRANSACTIONS_SDK_*`` environment variables."""
        return cls(ClientConfig.from_env(), **kwargs)

    @property
    def client(self) -> Client:
        """The underlying request engine, for calls not covered by a resource."""
        return self._client

    @property
    def config(self) -> ClientConfig:
        return self._client.config

    async def aclose(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> TransactionsSDK:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()


__all__ = ["TransactionsSDK"]
