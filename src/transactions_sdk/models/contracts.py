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

"""Contract deployment, ABI and function-call models.

Most contract endpoints speak snake_case on the wire. Function listing and
calls additionally verify the calling wallet through one of the
``X-Wallet-ID`` / ``X-Wallet-Address`` headers, modelled by
:class:`WalletVerification`.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Annotated, Any
from uuid import UUID

from pydantic import Field, model_validator

from ._codec import JsonEncoded, JsonList, JsonText, RequestModel, WireModel, require_one

WALLET_ID_HEADER = "X-Wallet-ID"
WALLET_ADDRESS_HEADER = "X-Wallet-Address"


class DeployParams(RequestModel):
    contract_type: Annotated[str, Field(min_length=1)]
    network: Annotated[str, Field(min_length=1)]
    wallet_id: UUID
    parameters: dict[str, Any] | None = None


class ContractDeployment(WireModel):
    """State of an asynchronous contract deployment.

    Attributes:
        id (UUID):
        request_id (UUID): Identifier used to poll the deployment.
        organization_id (UUID):
        deployer_wallet_id (UUID):
        network (str):
        status (str): e.g. ``pending``, ``completed``, ``failed``.
        contract_type (str):
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        created_by_user_id (UUID | None):
        created_by_api_key_id (UUID | None):
        contract_address (str | None): Set once the deployment completes.
        transaction_hash (str | None):
        error_message (str | None):
    """

    id: UUID
    request_id: UUID
    organization_id: UUID
    deployer_wallet_id: UUID
    network: str
    status: str
    contract_type: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    created_by_user_id: UUID | None = None
    created_by_api_key_id: UUID | None = None
    contract_address: str | None = None
    transaction_hash: str | None = None
    error_message: str | None = None


class ImportABI(RequestModel):
    contract_address: Annotated[str, Field(alias="contractAddress", min_length=1)]
    network: Annotated[str, Field(min_length=1)]
    abi: Annotated[str, JsonText]


class ContractABI(WireModel):
    contract_address: Annotated[str, Field(alias="contractAddress")]
    network: str
    abi: str


class NetworkQuery(RequestModel):
    network: Annotated[str, Field(min_length=1)]


class FunctionParam(WireModel):
    name: str
    type_: Annotated[str, Field(alias="type")]


class ContractFunction(WireModel):
    """A function parsed from an imported ABI.

    ``inputs`` and ``outputs`` arrive as JSON-encoded strings
    (``parameter_json`` / ``return_json``) and are decoded here.
    """

    id: int
    contract_abi_id: int
    name: Annotated[str, Field(alias="function_name")]
    signature: Annotated[str, Field(alias="function_signature")]
    access_type: str
    state_mutability: str
    inputs: Annotated[list[FunctionParam], JsonList, JsonEncoded, Field(alias="parameter_json")]
    created_at: datetime.datetime
    outputs: Annotated[list[FunctionParam], JsonList, JsonEncoded] = Field(
        alias="return_json", default_factory=list
    )


class CallFunctionParams(RequestModel):
    """Query for a read-only call; ``parameters`` travel JSON-encoded."""

    network: Annotated[str, Field(min_length=1)]
    parameters: Annotated[dict[str, Any] | None, JsonEncoded] = None


class CallFunctionResponse(WireModel):
    result: Any = None
    raw_result: str | None = None


class ExecuteFunctionRequest(RequestModel):
    """Body for a state-changing call.

    The signing wallet's address travels as ``wallet_address`` next to, not
    inside, the function ``parameters``. A ``walletAddress`` entry found in
    ``parameters`` is moved out and wins over a ``wallet_address`` given
    alongside it.
    """

    network: Annotated[str, Field(min_length=1)]
    wallet_address: Annotated[str, Field(min_length=1)]
    parameters: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def lift_wallet_address(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        parameters = data.get("parameters")
        if not isinstance(parameters, Mapping) or "walletAddress" not in parameters:
            return data
        parameters = dict(parameters)
        address = parameters.pop("walletAddress")
        data = {**data, "parameters": parameters}
        if address is not None:
            data["wallet_address"] = address
        return data


class ExecuteFunctionResponse(WireModel):
    transaction_hash: str | None = None
    status: str | None = None
    error: str | None = None


class WalletVerification(RequestModel):
    """Identifies the calling wallet, by id or by address but not both.

    Encodes to the verification headers rather than to a body.
    """

    wallet_id: Annotated[str | None, Field(alias=WALLET_ID_HEADER, min_length=1)] = None
    wallet_address: Annotated[str | None, Field(alias=WALLET_ADDRESS_HEADER, min_length=1)] = None

    @model_validator(mode="after")
    def identifies_one_wallet(self) -> WalletVerification:
        require_one(
            self,
            "wallet_id",
            "wallet_address",
            f"Exactly one of {WALLET_ID_HEADER} or {WALLET_ADDRESS_HEADER} is required "
            "for verification",
        )
        return self

    def headers(self) -> dict[str, str]:
        return {key: str(value) for key, value in self.to_dict().items()}


__all__ = [
    "CallFunctionParams",
    "CallFunctionResponse",
    "ContractABI",
    "ContractDeployment",
    "ContractFunction",
    "DeployParams",
    "ExecuteFunctionRequest",
    "ExecuteFunctionResponse",
    "FunctionParam",
    "ImportABI",
    "NetworkQuery",
    "WALLET_ADDRESS_HEADER",
    "WALLET_ID_HEADER",
    "WalletVerification",
]
