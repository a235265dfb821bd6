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

"""Endpoint descriptors and resource classes, one module per API area."""

from . import (
    api_keys,
    auth,
    contracts,
    organizations,
    permissions,
    transaction_approvals,
    transactions,
    wallets,
)
from ._base import Endpoint, Resource
from .api_keys import ApiKeysAPI
from .auth import AuthAPI
from .contracts import ContractsAPI
from .organizations import OrganizationsAPI
from .permissions import PermissionsAPI
from .transaction_approvals import TransactionApprovalsAPI
from .transactions import TransactionsAPI
from .wallets import WalletsAPI

__all__ = [
    "ApiKeysAPI",
    "AuthAPI",
    "ContractsAPI",
    "Endpoint",
    "OrganizationsAPI",
    "PermissionsAPI",
    "Resource",
    "TransactionApprovalsAPI",
    "TransactionsAPI",
    "WalletsAPI",
    "api_keys",
    "auth",
    "contracts",
    "organizations",
    "permissions",
    "transaction_approvals",
    "transactions",
    "wallets",
]
