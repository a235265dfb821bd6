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

"""Classification of HTTP responses into payloads or errors.

The server answers in one of two success shapes: a bare JSON value, or an
envelope ``{"success": true, "data": ...}``. :func:`classify_body` is the only
place that inspects that structure; :class:`ResponseInterpreter` applies the
status rules around it:

1. A status outside 2xx that is not the call's expected status is an error:
   401/403 raise :class:`AuthenticationError`, anything else :class:`APIError`.
2. 204, or an explicit ``Content-Length: 0``, is "no content" (``None``).
3. The body must be JSON, otherwise :class:`InternalError`.
4. An envelope unwraps to its ``data`` field.
5. A bare value is the payload when the status is 2xx or the expected status.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from attrs import frozen

from .errors import APIError, AuthenticationError, InternalError
from .observability import NullRequestLogger, RequestLogger

ENVELOPE_SUCCESS_FIELD = "success"
ENVELOPE_PAYLOAD_FIELD = "data"


@frozen
class Enveloped:
    """The body was a success envelope; ``payload`` is its ``data`` field."""

    payload: Any


@frozen
class Bare:
    """The body is the payload itself."""

    payload: Any


ResponseShape = Enveloped | Bare


def classify_body(body: Any) -> ResponseShape:
    """Tag a parsed JSON body as :class:`Enveloped` or :class:`Bare`.

    Only an object whose ``success`` field is the boolean ``True`` and which
    carries a ``data`` field counts as an envelope. Everything else, including
    ``{"success": false, ...}`` and ``{"success": "true", ...}``, is bare.
    """
    if (
        isinstance(body, dict)
        and body.get(ENVELOPE_SUCCESS_FIELD) is True
        and ENVELOPE_PAYLOAD_FIELD in body
    ):
        return Enveloped(body[ENVELOPE_PAYLOAD_FIELD])
    return Bare(body)


def is_success_status(status_code: int, expected_status: int | None = None) -> bool:
    return 200 <= status_code < 300 or (
        expected_status is not None and status_code == expected_status
    )


def is_no_content(response: httpx.Response) -> bool:
    return response.status_code == 204 or response.headers.get("Content-Length") == "0"


def read_error_body(response: httpx.Response) -> Any:
    """Parse an error body as JSON when declared so, else return the text."""
    content_type = response.headers.get("Content-Type", "")
    if "json" in content_type:
        try:
            return json.loads(response.content)
        except ValueError:
            pass
    try:
        return response.text
    except (UnicodeDecodeError, LookupError):
        return response.content


def error_message(body: Any, response: httpx.Response) -> str:
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    if isinstance(body, str) and body:
        return body
    return response.reason_phrase or f"HTTP {response.status_code}"


class ResponseInterpreter:
    """Turns an :class:`httpx.Response` into a payload or raises."""

    def __init__(self, logger: RequestLogger | None = None):
        self._logger = logger or NullRequestLogger()

    def interpret(self, response: httpx.Response, expected_status: int | None = None) -> Any:
        status = response.status_code
        if not is_success_status(status, expected_status):
            raise self._error_for(response)

        if is_no_content(response):
            self._logger.log(logging.DEBUG, "response.classified", status=status, shape="empty")
            return None

        try:
            body = json.loads(response.content)
        except ValueError as e:
            raise InternalError(f"Response was not valid JSON (status {status}): {e}") from e

        shape = classify_body(body)
        self._logger.log(
            logging.DEBUG, "response.classified", status=status, shape=type(shape).__name__
        )
        match shape:
            case Enveloped(payload=payload):
                return payload
            case Bare(payload=payload) if is_success_status(status, expected_status):
                return payload
            case _:
                raise InternalError(
                    "Response succeeded but did not match any known success shape. "
                    f"Status: {status}, expected: {expected_status or '2xx'}"
                )

    def _error_for(self, response: httpx.Response) -> Exception:
        status = response.status_code
        body = read_error_body(response)
        message = error_message(body, response)
        self._logger.log(logging.INFO, "request.failed", status=status, kind="http")
        if status in (401, 403):
            return AuthenticationError(
                f"Authentication failed: {message}", status_code=status, body=body
            )
        return APIError(
            f"API request failed with status {status}: {message}",
            status_code=status,
            body=body,
            headers=response.headers,
        )


__all__ = [
    "Bare",
    "Enveloped",
    "ResponseInterpreter",
    "ResponseShape",
    "classify_body",
    "is_success_status",
]
