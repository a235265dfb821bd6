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

"""Exceptions raised by the transactions client.

Every error raised to callers derives from :class:`SDKError`. The concrete
classes map one-to-one onto the error kinds callers branch on:

- :class:`ValidationError` - caller input or server output failed the
  contract check. Carries the individual field-level issues.
- :class:`AuthenticationError` - the server rejected the credentials (401/403).
- :class:`APIError` - any other non-success status.
- :class:`NetworkError` - the request never produced a usable response
  (connection failure, timeout, undecodable body, redirect loop).
- :class:`InternalError` - a local invariant was violated (unserializable body,
  unparsable or unrecognized success response, caller cancellation).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from attrs import frozen
from pydantic import ValidationError as PydanticValidationError

PathItem = str | int

_ISSUE_CODES = {
    "missing": "required",
    "extra_forbidden": "unrecognized_keys",
    "literal_error": "invalid_literal",
    "enum": "invalid_enum_value",
    "int_parsing": "invalid_type",
    "int_from_float": "invalid_type",
    "float_parsing": "invalid_type",
    "bool_parsing": "invalid_type",
    "string_too_short": "too_small",
    "too_short": "too_small",
    "greater_than": "too_small",
    "greater_than_equal": "too_small",
    "string_too_long": "too_big",
    "too_long": "too_big",
    "less_than": "too_big",
    "less_than_equal": "too_big",
    "uuid_parsing": "invalid_string",
    "datetime_parsing": "invalid_string",
    "datetime_from_date_parsing": "invalid_string",
    "date_parsing": "invalid_string",
    "url_parsing": "invalid_string",
    "url_scheme": "invalid_string",
    "url_syntax_violation": "invalid_string",
    "string_pattern_mismatch": "invalid_string",
    "json_invalid": "invalid_string",
    "value_error": "invalid_string",
}


def _issue_code(error_type: str) -> str:
    """Translate a pydantic error type into the issue code callers branch on."""
    if error_type in _ISSUE_CODES:
        return _ISSUE_CODES[error_type]
    if error_type.endswith("_type"):
        return "invalid_type"
    return error_type


@frozen
class ValidationIssue:
    """A single field-level contract violation."""

    path: tuple[PathItem, ...]
    message: str
    code: str = "invalid"

    @property
    def location(self) -> str:
        """Dotted location of the offending field, ``$`` for the root value."""
        if not self.path:
            return "$"
        parts = ["$"]
        for item in self.path:
            parts.append(f"[{item}]" if isinstance(item, int) else f".{item}")
        return "".join(parts)

    def prefixed(self, *prefix: PathItem) -> ValidationIssue:
        return ValidationIssue(path=(*prefix, *self.path), message=self.message, code=self.code)

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class SDKError(Exception):
    """Base class for all errors raised by the client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SDKError):
    """Input or output failed contract validation."""

    def __init__(self, message: str, issues: Iterable[ValidationIssue] = ()):
        self.issues: list[ValidationIssue] = list(issues)
        if self.issues:
            details = "; ".join(str(issue) for issue in self.issues)
            message = f"{message}: {details}"
        super().__init__(message)

    @classmethod
    def single(cls, message: str, *path: PathItem, code: str = "invalid") -> ValidationError:
        return cls(message, [ValidationIssue(path=path, message=message, code=code)])

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError, message: str) -> ValidationError:
        """Collect every error pydantic reported into one ``ValidationError``."""
        issues = [
            ValidationIssue(tuple(item["loc"]), item["msg"], _issue_code(item["type"]))
            for item in error.errors(include_url=False)
        ]
        return cls(message, issues)

    def codes(self) -> list[str]:
        return [issue.code for issue in self.issues]

    def locations(self) -> list[str]:
        return [issue.location for issue in self.issues]


class AuthenticationError(SDKError):
    """The server rejected the request credentials."""

    def __init__(
        self,
        message: str = "Authentication failed. Please check your API key or token.",
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class APIError(SDKError):
    """The server returned a non-success status that the call did not expect."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers) if headers is not None else {}


class NetworkError(SDKError):
    """The request did not complete at the transport level."""

    def __init__(
        self, message: str, cause: BaseException | None = None, *, timed_out: bool = False
    ):
        super().__init__(message)
        self.cause = cause
        self.timed_out = timed_out
        if cause is not None:
            self.__cause__ = cause


class InternalError(SDKError):
    """A client-side invariant was violated."""


class RequestAbortedError(InternalError):
    """The caller cancelled the request before a response arrived."""

    def __init__(self, message: str = "Request aborted", reason: BaseException | None = None):
        super().__init__(message)
        self.reason = reason


__all__ = [
    "APIError",
    "AuthenticationError",
    "InternalError",
    "NetworkError",
    "RequestAbortedError",
    "SDKError",
    "ValidationError",
    "ValidationIssue",
]
