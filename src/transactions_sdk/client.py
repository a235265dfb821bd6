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

"""HTTP client for the transactions API."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import attrs
import httpx
import yaml
from attrs import field, frozen

from .auth import AuthScheme, resolve_auth
from .cancellation import CancellationComposer, CancelToken
from .errors import RequestAbortedError, ValidationError, ValidationIssue
from .observability import NullRequestLogger, RequestLogger
from .request import RequestBuilder, RequestSpec
from .response import ResponseInterpreter
from .transport import HttpxTransport, Transport
from .types import Response

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_USER_AGENT = "transactions-sdk-python/0.1.0"
ENV_PREFIX = "TRANSACTIONS_SDK_"


def _strip_trailing_slash(value: str) -> str:
    return value.rstrip("/") if isinstance(value, str) else value


def _copy_headers(value: Mapping[str, str] | None) -> Mapping[str, str]:
    return dict(value or {})


@frozen(kw_only=True)
class ClientConfig:
    """Client-wide settings, fixed for the lifetime of a client.

    Attributes:
        base_url: API root, e.g. ``https://api.example.com/v1``. Trailing
            slashes are stripped.
        api_key: API-key credential. Wins over ``bearer_token`` when both are set.
        bearer_token: Bearer credential, e.g. a JWT returned by ``auth.login``.
        organization_id: Organization context sent with authenticated calls.
        default_headers: Headers added to every request (lowest precedence).
        timeout_ms: Per-request deadline in milliseconds; ``None`` disables it.
        user_agent: Value of the ``User-Agent`` header.
    """

    base_url: str = field(converter=_strip_trailing_slash)
    api_key: str | None = field(default=None, repr=False)
    bearer_token: str | None = field(default=None, repr=False)
    organization_id: str | None = None
    default_headers: Mapping[str, str] = field(factory=dict, converter=_copy_headers)
    timeout_ms: float | None = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT

    def __attrs_post_init__(self) -> None:
        issues = []
        if not isinstance(self.base_url, str) or not self.base_url:
            issues.append(ValidationIssue(("base_url",), "base_url is required", "required"))
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            issues.append(
                ValidationIssue(("timeout_ms",), "timeout_ms must be positive", "too_small")
            )
        if issues:
            raise ValidationError("Invalid client configuration", issues)
        if self.api_key and not self.organization_id:
            logger.warning(
                "api_key provided without organization_id; most API-key endpoints "
                "require the X-Organization-ID header"
            )

    @property
    def timeout_seconds(self) -> float | None:
        return None if self.timeout_ms is None else self.timeout_ms / 1000.0

    def replace(self, **changes: Any) -> ClientConfig:
        """Return a copy with ``changes`` applied."""
        return attrs.evolve(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ClientConfig:
        known = {a.name for a in attrs.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                "Invalid client configuration",
                [
                    ValidationIssue((key,), "unknown configuration key", "unrecognized_keys")
                    for key in unknown
                ],
            )
        return cls(**dict(data))

    @classmethod
    def from_env(
        cls, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None
    ) -> ClientConfig:
        """Build a config from ``<prefix>BASE_URL``, ``<prefix>API_KEY``, etc."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {"base_url": env.get(f"{prefix}BASE_URL", "")}
        for name in ("api_key", "bearer_token", "organization_id"):
            value = env.get(f"{prefix}{name.upper()}")
            if value:
                data[name] = value
        timeout = env.get(f"{prefix}TIMEOUT_MS")
        if timeout:
            try:
                data["timeout_ms"] = float(timeout)
            except ValueError as e:
                raise ValidationError.single(
                    f"{prefix}TIMEOUT_MS must be a number", "timeout_ms", code="invalid_type"
                ) from e
        return cls(**data)

    @classmethod
    def from_file(cls, path: str | Path) -> ClientConfig:
        """Load a config from a YAML or JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the document is not a mapping of config fields
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Client config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValidationError.single(
                "Client config file must contain a mapping", code="invalid_type"
            )
        return cls.from_mapping(data)


class Client:
    """Request engine shared by every resource module.

    One call flows through: :class:`RequestBuilder` (headers from the resolved
    auth scheme) -> :class:`CancellationComposer` -> :class:`Transport` ->
    :class:`ResponseInterpreter`. The only state shared between concurrent
    calls is the immutable :class:`ClientConfig` and the httpx connection pool.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_transport: Transport | None = None,
        logger: RequestLogger | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
            http_transport: Replaces the httpx-backed transport entirely
            logger: Structured request logger (defaults to a no-op)
        """
        self._config = config
        self._logger = logger or NullRequestLogger()
        self._auth = resolve_auth(config)
        self._builder = RequestBuilder(config, self._auth)
        self._composer = CancellationComposer(config.timeout_ms)
        self._interpreter = ResponseInterpreter(self._logger)
        self._httpx_transport = transport
        self._async_client: httpx.AsyncClient | None = None
        self._transport = http_transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def auth(self) -> AuthScheme:
        return self._auth

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def get_async_httpx_client(self) -> httpx.AsyncClient:
        """Get the underlying asynchronous httpx client."""
        if self._async_client is None:
            # The deadline is enforced by the cancellation composer.
            self._async_client = httpx.AsyncClient(timeout=None, transport=self._httpx_transport)
        return self._async_client

    def get_transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(self.get_async_httpx_client(), self._logger)
        return self._transport

    async def request(self, spec: RequestSpec) -> Response[Any]:
        """Execute ``spec`` and return the unwrapped payload in ``parsed``.

        Raises:
            InternalError: If the body cannot be serialized or a successful
                response is not valid JSON / not a known success shape
            AuthenticationError: On 401/403
            APIError: On any other unexpected status
            NetworkError: On connection failure or timeout
            RequestAbortedError: If ``spec.signal`` fires first
        """
        request = self._builder.build(spec)

        controller = CancelToken()
        signal = self._composer.compose([spec.signal, controller])
        try:
            response = await self.get_transport().send(request, signal)
        except asyncio.CancelledError:
            controller.cancel(RequestAbortedError("Request task was cancelled"))
            raise
        finally:
            signal.dispose()

        payload = self._interpreter.interpret(response, spec.expected_status)
        return Response(
            status_code=response.status_code,
            content=response.content,
            headers=response.headers,
            parsed=payload,
        )

    async def aclose(self) -> None:
        """Close the async client."""
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()


__all__ = ["Client", "ClientConfig", "DEFAULT_TIMEOUT_MS"]
