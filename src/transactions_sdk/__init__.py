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

"""Async Python client for the transactions management API.

Example:
    ```python
    from transactions_sdk import ClientConfig, TransactionsSDK

    config = ClientConfig(base_url="https://api.example.com/v1", bearer_token="...")
    async with TransactionsSDK(config) as sdk:
        wallet = await sdk.wallets.get("9f0c...")
        print(wallet.name, wallet.status)
    ```

Every operation validates its input before anything is sent and raises one of
the errors below on failure.
"""

from . import models
from .cancellation import CancelToken
from .client import Client, ClientConfig
from .errors import (
    APIError,
    AuthenticationError,
    InternalError,
    NetworkError,
    RequestAbortedError,
    SDKError,
    ValidationError,
    ValidationIssue,
)
from .observability import NullRequestLogger, RequestLogger, StdlibRequestLogger
from .sdk import TransactionsSDK
from .types import UNSET, Response, Unset

__version__ = "0.1.0"

__all__ = [
    # Client
    "Client",
    "ClientConfig",
    "TransactionsSDK",
    "CancelToken",
    # Errors
    "APIError",
    "AuthenticationError",
    "InternalError",
    "NetworkError",
    "RequestAbortedError",
    "SDKError",
    "ValidationError",
    "ValidationIssue",
    # Logging
    "NullRequestLogger",
    "RequestLogger",
    "StdlibRequestLogger",
    # Types
    "Response",
    "UNSET",
    "Unset",
    "models",
]
