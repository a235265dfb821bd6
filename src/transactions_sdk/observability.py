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

"""Structured logging hooks for the request engine.

The transport and response interpreter never write to a global sink directly.
They receive a :class:`RequestLogger` and emit named events with keyword
fields. The default is :class:`NullRequestLogger`; pass a
:class:`StdlibRequestLogger` to forward events to Python logging:

    ```python
    import logging

    from transactions_sdk import ClientConfig, TransactionsSDK
    from transactions_sdk.observability import StdlibRequestLogger

    logging.basicConfig(level=logging.DEBUG)
    sdk = TransactionsSDK(config, logger=StdlibRequestLogger())
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

# Header names whose values must never reach a log record
REDACTED_HEADERS = frozenset({"authorization", "x-api-key"})


@runtime_checkable
class RequestLogger(Protocol):
    """Sink for structured request events."""

    def log(self, level: int, event: str, **fields: Any) -> None: ...


class NullRequestLogger:
    """Discards every event."""

    def log(self, level: int, event: str, **fields: Any) -> None:
        return None


class StdlibRequestLogger:
    """Forwards events to a standard-library logger.

    The event name is the log message; the fields are attached to the record
    under ``extra={"fields": ...}`` so formatters can render them as JSON.
    """

    def __init__(self, logger_name: str = "transactions_sdk.http"):
        self._logger = logging.getLogger(logger_name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def log(self, level: int, event: str, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, event, extra={"event": event, "fields": fields})


class RecordingRequestLogger:
    """Keeps events in memory; useful in tests and for debugging sessions."""

    def __init__(self) -> None:
        self.events: list[tuple[int, str, dict[str, Any]]] = []

    def log(self, level: int, event: str, **fields: Any) -> None:
        self.events.append((level, event, fields))

    def names(self) -> list[str]:
        return [event for _, event, _ in self.events]


def redact_headers(headers: Any) -> dict[str, str]:
    """Copy ``headers`` with credential values masked."""
    return {
        name: ("<redacted>" if name.lower() in REDACTED_HEADERS else value)
        for name, value in headers.items()
    }


__all__ = [
    "NullRequestLogger",
    "RecordingRequestLogger",
    "RequestLogger",
    "StdlibRequestLogger",
    "redact_headers",
]
