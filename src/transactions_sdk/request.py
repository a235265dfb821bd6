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

"""Outbound request description and assembly."""

from __future__ import annotations

import datetime
import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode
from uuid import UUID

import httpx
from attrs import field, frozen

from .errors import InternalError
from .types import UNSET, Unset

if TYPE_CHECKING:
    from .auth import AuthScheme
    from .cancellation import CancelToken
    from .client import ClientConfig

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

QueryValue = str | int | float | bool | datetime.date | Enum | UUID | None | Unset


@frozen
class FormBody:
    """A URL-encoded form payload, sent as-is instead of JSON."""

    fields: Mapping[str, str] = field(converter=lambda value: dict(value))


def _frozen_mapping(value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    return None if value is None else dict(value)


@frozen(kw_only=True)
class RequestSpec:
    """Everything needed to issue one call. Built per call, never mutated.

    Attributes:
        method: HTTP method.
        path: Path relative to the configured base URL.
        query: Query parameters, in the order they should appear.
        body: JSON-serializable value, ``str``/``bytes`` passthrough, or
            :class:`FormBody`. ``UNSET`` (or ``None``) sends no body.
        headers: Call-level headers, highest precedence.
        signal: Caller cancellation token.
        expected_status: A non-2xx status to treat as success for this call.
    """

    method: str = field(default="GET", converter=str.upper)
    path: str
    query: Mapping[str, QueryValue] | None = field(default=None, converter=_frozen_mapping)
    body: Any = UNSET
    headers: Mapping[str, str] | None = field(default=None, converter=_frozen_mapping)
    signal: CancelToken | None = None
    expected_status: int | None = None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.datetime | datetime.date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def format_query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Render query parameters, dropping ``None``/``UNSET`` values.

    Dates become ISO-8601 strings and the supplied order is kept.
    """
    if not params:
        return []
    rendered: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None or isinstance(value, Unset):
            continue
        rendered.append((key, _query_value(value)))
    return rendered


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime.datetime | datetime.date):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(body: Any) -> bytes:
    """Serialize ``body`` as compact JSON, raising :class:`InternalError` on failure."""
    try:
        return json.dumps(
            body, default=_json_default, separators=(",", ":"), allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise InternalError(f"Failed to serialize request body as JSON: {e}") from e


class RequestBuilder:
    """Assembles an :class:`httpx.Request` from a :class:`RequestSpec`.

    Header precedence, lowest to highest: client defaults, authentication
    scheme, call-level headers. The scheme's exclusivity rule is applied last
    so no call can carry both API-key and bearer credentials.
    """

    def __init__(self, config: ClientConfig, auth: AuthScheme):
        self._config = config
        self._auth = auth

    @property
    def auth(self) -> AuthScheme:
        return self._auth

    def build(self, spec: RequestSpec) -> httpx.Request:
        headers = httpx.Headers(self._config.default_headers)
        if self._config.user_agent:
            headers.setdefault("User-Agent", self._config.user_agent)
        self._auth.apply(headers)
        if spec.headers:
            headers.update(spec.headers)
        self._auth.enforce(headers)

        content = self._encode_body(spec.body, headers)

        url = join_url(self._config.base_url, spec.path)
        query = format_query_params(spec.query)
        if query:
            url = f"{url}?{urlencode(query)}"

        return httpx.Request(spec.method, url, headers=headers, content=content)

    def _encode_body(self, body: Any, headers: httpx.Headers) -> bytes | None:
        if body is None or isinstance(body, Unset):
            return None
        if isinstance(body, FormBody):
            self._drop_json_content_type(headers)
            headers["Content-Type"] = FORM_CONTENT_TYPE
            return urlencode(list(body.fields.items())).encode("utf-8")
        if isinstance(body, str):
            self._drop_json_content_type(headers)
            return body.encode("utf-8")
        if isinstance(body, bytes | bytearray | memoryview):
            self._drop_json_content_type(headers)
            return bytes(body)
        content = encode_json(body)
        headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
        return content

    @staticmethod
    def _drop_json_content_type(headers: httpx.Headers) -> None:
        if headers.get("Content-Type", "").startswith(JSON_CONTENT_TYPE):
            del headers["Content-Type"]


__all__ = [
    "FormBody",
    "JSON_CONTENT_TYPE",
    "RequestBuilder",
    "RequestSpec",
    "encode_json",
    "format_query_params",
    "join_url",
]
