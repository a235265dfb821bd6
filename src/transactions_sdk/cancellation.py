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

"""Cancellation tokens and their composition.

A :class:`CancelToken` is a one-shot signal: the first :meth:`CancelToken.cancel`
records a reason and wakes waiters, later calls are no-ops. The
:class:`CancellationComposer` merges any number of tokens plus an optional
timeout into a :class:`DerivedSignal` that fires as soon as the first source
fires.

Example:
    ```python
    token = CancelToken()
    wallet = await sdk.wallets.get(wallet_id, signal=token)

    # elsewhere
    token.cancel()
    ```
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from typing import cast

Callback = Callable[["CancelToken"], None]


class RequestTimeout(TimeoutError):
    """Reason recorded on a signal fired by the request deadline."""

    def __init__(self, timeout_ms: float):
        super().__init__(f"Request timed out after {timeout_ms:g}ms")
        self.timeout_ms = timeout_ms


class CancelledByCaller(Exception):
    """Default reason recorded when a token is cancelled without one."""

    def __init__(self, message: str = "Request cancelled by caller"):
        super().__init__(message)


class CancelToken:
    """A one-shot cancellation signal."""

    def __init__(self) -> None:
        self._reason: BaseException | None = None
        self._event = asyncio.Event()
        self._callbacks: list[Callback] = []

    @property
    def cancelled(self) -> bool:
        return self._reason is not None

    @property
    def reason(self) -> BaseException | None:
        return self._reason

    @property
    def timed_out(self) -> bool:
        return isinstance(self._reason, TimeoutError)

    def cancel(self, reason: BaseException | None = None) -> bool:
        """Fire the signal. Returns ``False`` if it had already fired."""
        if self._reason is not None:
            return False
        self._reason = reason if reason is not None else CancelledByCaller()
        self._event.set()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(self)
        return True

    def add_callback(self, callback: Callback) -> Callable[[], None]:
        """Run ``callback`` when the token fires; immediately if it already has.

        Returns a function that detaches the callback.
        """
        if self._reason is not None:
            callback(self)
            return _noop
        self._callbacks.append(callback)

        def remove() -> None:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

        return remove

    async def wait(self) -> BaseException:
        """Block until the token fires and return the recorded reason."""
        await self._event.wait()
        return cast(BaseException, self._reason)

    def __repr__(self) -> str:
        state = f"cancelled reason={self._reason!r}" if self._reason is not None else "pending"
        return f"<{type(self).__name__} {state}>"


def _noop() -> None:
    return None


class DerivedSignal(CancelToken):
    """Signal produced by :class:`CancellationComposer`.

    Holds its source subscriptions and timer until :meth:`dispose` is called.
    ``source`` identifies the token that fired first, or ``None`` for the
    timeout.
    """

    def __init__(self) -> None:
        super().__init__()
        self.source: CancelToken | None = None
        self._detach: list[Callable[[], None]] = []
        self._timer: asyncio.TimerHandle | None = None

    def dispose(self) -> None:
        """Detach from every source and stop the timer. Safe to call twice."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        detach, self._detach = self._detach, []
        for remove in detach:
            remove()


class CancellationComposer:
    """Builds one derived signal per request.

    Args:
        timeout_ms: Deadline applied to every composed signal. ``None``
            disables the deadline.
    """

    def __init__(self, timeout_ms: float | None = None):
        if timeout_ms is not None and timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        self.timeout_ms = timeout_ms

    def compose(self, sources: Iterable[CancelToken | None] = ()) -> DerivedSignal:
        """Merge ``sources`` (``None`` entries are skipped) with the deadline.

        The deadline timer starts now, so this must run inside the event loop
        that performs the request.
        """
        derived = DerivedSignal()

        def forward(source: CancelToken) -> None:
            if derived.cancelled:
                return
            derived.source = source
            derived.cancel(source.reason)
            derived.dispose()

        for source in sources:
            if source is None:
                continue
            if source.cancelled:
                forward(source)
                break
            derived._detach.append(source.add_callback(forward))

        if self.timeout_ms is not None and not derived.cancelled:
            loop = asyncio.get_running_loop()
            derived._timer = loop.call_later(
                self.timeout_ms / 1000.0, self._expire, derived, self.timeout_ms
            )
        return derived

    @staticmethod
    def _expire(derived: DerivedSignal, timeout_ms: float) -> None:
        derived._timer = None
        if derived.cancel(RequestTimeout(timeout_ms)):
            derived.dispose()


__all__ = [
    "CancelToken",
    "CancellationComposer",
    "CancelledByCaller",
    "DerivedSignal",
    "RequestTimeout",
]
