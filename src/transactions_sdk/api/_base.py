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

"""Thin declarative API layer for HTTP endpoints."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from ..cancellation import CancelToken
from ..client import Client
from ..errors import ValidationError, ValidationIssue
from ..models._codec import RequestModel, WireModel, build_model, decode, encode
from ..request import RequestSpec
from ..types import UNSET, Response

ResponseT = TypeVar("ResponseT")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass
class Endpoint(Generic[ResponseT]):
    """Declarative endpoint definition.

    Usage:
        get_wallet = Endpoint("GET", "/wallets/{wallet_id}", Wallet)
        create_wallet = Endpoint("POST", "/wallets", Wallet, request=WalletCreateRequest)
        list_wallets = Endpoint("GET", "/wallets", WalletList, query=PageParams)
        deploy = Endpoint("POST", "/contracts", ContractDeployment, request=DeployParams,
                          expected_status=202)

    ``request`` and ``query`` are validated and encoded before anything is
    sent; the payload of a successful response is validated against
    ``response``, a model class or a type such as ``list[Role]``. Without a
    ``response`` the payload is discarded.
    """

    method: str
    path: str
    response: Any = None
    request: type[RequestModel] | None = None
    query: type[RequestModel] | None = None
    expected_status: int | None = None

    @property
    def path_params(self) -> list[str]:
        return _PLACEHOLDER.findall(self.path)

    def _build_url(self, **path_params: Any) -> str:
        """Build URL with path parameters."""
        issues = [
            ValidationIssue((name,), f"{name} is required", "required")
            for name in self.path_params
            if path_params.get(name) is None or str(path_params[name]) == ""
        ]
        unknown = sorted(set(path_params) - set(self.path_params))
        issues.extend(
            ValidationIssue((name,), "unknown path parameter", "unrecognized_keys")
            for name in unknown
        )
        if issues:
            raise ValidationError(f"Invalid path parameters for {self.method} {self.path}", issues)

        url = self.path
        for key, value in path_params.items():
            url = url.replace(f"{{{key}}}", quote(str(value), safe=""))
        return url

    def _prepare_body(self, body: WireModel | Mapping[str, Any] | None) -> Any:
        if self.request is None:
            return UNSET
        message = self._invalid(self.request)
        model = build_model(self.request, body if body is not None else {}, message)
        return encode(model)

    def _prepare_query(self, query: WireModel | Mapping[str, Any] | None) -> dict[str, Any] | None:
        if self.query is None:
            return None
        message = self._invalid(self.query)
        model = build_model(self.query, query if query is not None else {}, message)
        return encode(model)

    @staticmethod
    def _invalid(model: type[RequestModel]) -> str:
        return f"Invalid {model.__name__}"

    def _parse_response(self, payload: Any) -> ResponseT | None:
        if self.response is None or payload is None:
            return None
        return decode(self.response, payload)

    async def asyncio_detailed(
        self,
        *,
        client: Client,
        body: WireModel | Mapping[str, Any] | None = None,
        query: WireModel | Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        signal: CancelToken | None = None,
        **path_params: Any,
    ) -> Response[ResponseT]:
        """Execute async request with full response."""
        spec = RequestSpec(
            method=self.method,
            path=self._build_url(**path_params),
            query=self._prepare_query(query),
            body=self._prepare_body(body),
            headers=headers,
            signal=signal,
            expected_status=self.expected_status,
        )
        response = await client.request(spec)
        return Response(
            status_code=response.status_code,
            content=response.content,
            headers=response.headers,
            parsed=self._parse_response(response.parsed),
        )

    async def asyncio(
        self,
        *,
        client: Client,
        body: WireModel | Mapping[str, Any] | None = None,
        query: WireModel | Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        signal: CancelToken | None = None,
        **path_params: Any,
    ) -> ResponseT | None:
        """Execute async request, return parsed response."""
        return (
            await self.asyncio_detailed(
                client=client, body=body, query=query, headers=headers, signal=signal, **path_params
            )
        ).parsed


class Resource:
    """Base for resource groups: holds the shared :class:`Client`."""

    def __init__(self, client: Client):
        self._client = client

    @property
    def client(self) -> Client:
        return self._client


__all__ = ["Endpoint", "Resource"]
