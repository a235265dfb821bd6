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

"""Smart-contract deployment, ABI management and function calls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..cancellation import CancelToken
from ..models.common import MessageResponse
from ..models.contracts import (
    CallFunctionParams,
    CallFunctionResponse,
    ContractABI,
    ContractDeployment,
    ContractFunction,
    DeployParams,
    ExecuteFunctionRequest,
    ExecuteFunctionResponse,
    ImportABI,
    NetworkQuery,
    WalletVerification,
)
from ._base import Endpoint, Resource

_INTERACTIONS = "/contract-interactions/contracts/{contract_address}"

deploy_contract = Endpoint(
    "POST", "/contracts", ContractDeployment, request=DeployParams, expected_status=202
)
list_contract_deployments = Endpoint("GET", "/contracts/deployments", list[ContractDeployment])
get_contract_deployment = Endpoint("GET", "/contracts/{request_id}", ContractDeployment)
import_contract_abi = Endpoint(
    "POST", "/contracts/abi", MessageResponse, request=ImportABI, expected_status=201
)
get_contract_abi = Endpoint(
    "GET", "/contracts/abi/{contract_address}", ContractABI, query=NetworkQuery
)
list_contract_functions = Endpoint(
    "GET",
    "/contracts/abi/{contract_address}/functions",
    list[ContractFunction],
    query=NetworkQuery,
)
call_contract_function = Endpoint(
    "GET",
    _INTERACTIONS + "/call-by-name/{function_name}",
    CallFunctionResponse,
    query=CallFunctionParams,
)
execute_contract_function = Endpoint(
    "POST",
    _INTERACTIONS + "/execute-by-name/{function_name}",
    ExecuteFunctionResponse,
    request=ExecuteFunctionRequest,
)

Verification = WalletVerification | Mapping[str, Any]


class ContractsAPI(Resource):
    """Contract deployment and interaction.

    Listing functions and calling them identify the caller's wallet through a
    ``verification`` giving exactly one of ``wallet_id`` or ``wallet_address``;
    it is sent as request headers.
    """

    async def deploy(
        self, params: DeployParams | Mapping[str, Any], *, signal: CancelToken | None = None
    ) -> ContractDeployment:
        """Queue a deployment. The server accepts it with 202 and deploys asynchronously."""
        return await deploy_contract.asyncio(client=self._client, body=params, signal=signal)

    async def list_deployments(
        self, *, signal: CancelToken | None = None
    ) -> list[ContractDeployment]:
        return await list_contract_deployments.asyncio(client=self._client, signal=signal)

    async def get_deployment(
        self, request_id: UUID | str, *, signal: CancelToken | None = None
    ) -> ContractDeployment:
        return await get_contract_deployment.asyncio(
            client=self._client, request_id=request_id, signal=signal
        )

    async def import_abi(
        self, request: ImportABI | Mapping[str, Any], *, signal: CancelToken | None = None
    ) -> MessageResponse:
        return await import_contract_abi.asyncio(client=self._client, body=request, signal=signal)

    async def get_abi(
        self, contract_address: str, network: str, *, signal: CancelToken | None = None
    ) -> ContractABI:
        return await get_contract_abi.asyncio(
            client=self._client,
            query={"network": network},
            contract_address=contract_address,
            signal=signal,
        )

    async def list_functions(
        self,
        contract_address: str,
        network: str,
        verification: Verification,
        *,
        signal: CancelToken | None = None,
    ) -> list[ContractFunction]:
        return await list_contract_functions.asyncio(
            client=self._client,
            query={"network": network},
            headers=WalletVerification.from_input(verification).headers(),
            contract_address=contract_address,
            signal=signal,
        )

    async def call_function(
        self,
        contract_address: str,
        function_name: str,
        network: str,
        verification: Verification,
        parameters: Mapping[str, Any] | None = None,
        *,
        signal: CancelToken | None = None,
    ) -> CallFunctionResponse:
        """Run a read-only function; ``parameters`` are sent as a JSON query value."""
        query = {"network": network, "parameters": dict(parameters) if parameters else None}
        return await call_contract_function.asyncio(
            client=self._client,
            query=query,
            headers=WalletVerification.from_input(verification).headers(),
            contract_address=contract_address,
            function_name=function_name,
            signal=signal,
        )

    async def execute_function(
        self,
        contract_address: str,
        function_name: str,
        network: str,
        verification: Verification,
        parameters: Mapping[str, Any] | None = None,
        *,
        wallet_address: str | None = None,
        signal: CancelToken | None = None,
    ) -> ExecuteFunctionResponse:
        """Submit a state-changing call signed by the verified wallet.

        The body's wallet address comes from a ``walletAddress`` entry in
        ``parameters``, else ``wallet_address``, else the address from
        ``verification``.
        """
        verification = WalletVerification.from_input(verification)
        if wallet_address is None:
            wallet_address = verification.wallet_address
        body = {
            "network": network,
            "parameters": dict(parameters or {}),
            "wallet_address": wallet_address,
        }
        return await execute_contract_function.asyncio(
            client=self._client,
            body=body,
            headers=verification.headers(),
            contract_address=contract_address,
            function_name=function_name,
            signal=signal,
        )


__all__ = [
    "ContractsAPI",
    "call_contract_function",
    "deploy_contract",
    "execute_contract_function",
    "get_contract_abi",
    "get_contract_deployment",
    "import_contract_abi",
    "list_contract_deployments",
    "list_contract_functions",
]
