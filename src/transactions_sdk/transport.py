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

"""Execution of built requests over httpx, racing a cancellation signal."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Protocol

import httpx

from .cancellation import CancelToken
from .errors import NetworkError, RequestAbortedError
from .observability import NullRequestLogger, RequestLogger, redact_headers


class Transport(Protocol):
    """Sends one request and returns the fully read response."""

    async def send(
        self, request: httpx.Request, signal: CancelToken | None = None
    ) -> httpx.Response:
        ...


def signal_error(signal: CancelToken) -> Exception:
    """Map a fired signal to the error the caller sees.

    A deadline surfaces as a timed-out :class:`NetworkError`; any other reason
    is a caller cancellation and surfaces as :class:`RequestAbortedError`.
    """
    reason = signal.reason
    if signal.timed_out:
        return NetworkError(str(reason), cause=reason, timed_out=True)
    return RequestAbortedError(f"Request aborted: {reason}", reason=reason)


class HttpxTransport:
    """:class:`Transport` backed by an :class:`httpx.AsyncClient`.

    The client's own connection pooling is used as-is. Deadlines are carried
    by the signal, so the client is expected to have no timeout of its own;
    an httpx timeout that does fire is still reported as a timed-out
    :class:`NetworkError`.
    """

    def __init__(self, client: httpx.AsyncClient, logger: RequestLogger | None = None):
        self._client = client
        self._logger = logger or NullRequestLogger()

    async def send(
        self, request: httpx.Request, signal: CancelToken | None = None
    ) -> httpx.Response:
        self._logger.log(
            logging.DEBUG,
            "request.start",
            method=request.method,
            url=str(request.url),
            headers=redact_headers(request.headers),
        )
        if signal is not None and signal.cancelled:
            raise self._cancelled(signal)

        started = time.monotonic()
        if signal is None:
            response = await self._send(request)
        else:
            response = await self._race(request, signal)

        self._logger.log(
            logging.DEBUG,
            "request.end",
            method=request.method,
            url=str(request.url),
            status=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 3),
        )
        return response

    async def _race(self, request: httpx.Request, signal: CancelToken) -> httpx.Response:
        send_task = asyncio.ensure_future(self._send(request))
        wait_task = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, wait_task}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            send_task.cancel()
            wait_task.cancel()
            raise

        if send_task in done:
            wait_task.cancel()
            return send_task.result()

        # The signal won; abandon the in-flight request.
        send_task.cancel()
        await asyncio.wait({send_task})
        if not send_task.cancelled() and send_task.exception() is not None:
            # Failure raced with the signal; the signal still decides the outcome.
            self._logger.log(logging.DEBUG, "request.discarded", error=repr(send_task.exception()))
        raise self._cancelled(signal)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self._client.send(request)
        except httpx.TimeoutException as e:
            self._logger.log(
                logging.WARNING, "request.failed", kind="timeout", url=str(request.url)
            )
            raise NetworkError(f"Request timed out: {e}", cause=e, timed_out=True) from e
        except httpx.TransportError as e:
            self._logger.log(
                logging.WARNING, "request.failed", kind="network", url=str(request.url)
            )
            raise NetworkError(f"Network request failed: {e}", cause=e) from e
        except httpx.RequestError as e:
            # Raised after a response started, e.g. an undecodable body or a redirect loop.
            self._logger.log(
                logging.WARNING, "request.failed", kind="protocol", url=str(request.url)
            )
            raise NetworkError(f"Request failed: {e}", cause=e) from e

    def _cancelled(self, signal: CancelToken) -> Exception:
        error = signal_error(signal)
        self._logger.log(
            logging.INFO,
            "request.cancelled",
            reason=str(signal.reason),
            timed_out=signal.timed_out,
        )
        return error


__all__ = ["HttpxTransport", "Transport", "signal_error"]
