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

"""Tests for cancellation tokens and the first-wins composer."""

import asyncio
import time

import pytest

from transactions_sdk.cancellation import (
    CancellationComposer,
    CancelledByCaller,
    CancelToken,
    RequestTimeout,
)


class TestCancelToken:
    def test_first_cancel_wins(self):
        token = CancelToken()
        first = ValueError("first")
        assert token.cancel(first) is True
        assert token.cancel(ValueError("second")) is False
        assert token.reason is first
        assert token.cancelled

    def test_default_reason(self):
        token = CancelToken()
        token.cancel()
        assert isinstance(token.reason, CancelledByCaller)
        assert not token.timed_out

    def test_callback_runs_once(self):
        token = CancelToken()
        calls = []
        token.add_callback(calls.append)
        token.cancel()
        token.cancel()
        assert calls == [token]

    def test_callback_on_fired_token_runs_immediately(self):
        token = CancelToken()
        token.cancel()
        calls = []
        token.add_callback(calls.append)
        assert calls == [token]

    def test_detached_callback_does_not_run(self):
        token = CancelToken()
        calls = []
        remove = token.add_callback(calls.append)
        remove()
        remove()
        token.cancel()
        assert calls == []

    @pytest.mark.asyncio
    async def test_wait_returns_reason(self):
        token = CancelToken()
        reason = RuntimeError("stop")
        asyncio.get_running_loop().call_later(0.01, token.cancel, reason)
        assert await asyncio.wait_for(token.wait(), 1) is reason


class TestCancellationComposer:
    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            CancellationComposer(0)

    @pytest.mark.asyncio
    async def test_no_sources_and_no_timeout_never_fires(self):
        derived = CancellationComposer(None).compose([None])
        await asyncio.sleep(0.02)
        assert not derived.cancelled
        derived.dispose()

    @pytest.mark.asyncio
    async def test_second_source_fires_before_timeout(self):
        first, second = CancelToken(), CancelToken()
        derived = CancellationComposer(5000).compose([first, second])
        asyncio.get_running_loop().call_later(0.01, second.cancel)

        started = time.monotonic()
        await asyncio.wait_for(derived.wait(), 1)
        elapsed = time.monotonic() - started

        assert elapsed < 1
        assert derived.source is second
        assert not derived.timed_out
        assert not first.cancelled

    @pytest.mark.asyncio
    async def test_timeout_fires(self):
        derived = CancellationComposer(10).compose([CancelToken()])
        reason = await asyncio.wait_for(derived.wait(), 1)
        assert isinstance(reason, RequestTimeout)
        assert derived.timed_out
        assert derived.source is None

    @pytest.mark.asyncio
    async def test_already_cancelled_source_fires_immediately(self):
        token = CancelToken()
        token.cancel(RuntimeError("early"))
        derived = CancellationComposer(5000).compose([token])
        assert derived.cancelled
        assert derived.source is token
        assert str(derived.reason) == "early"

    @pytest.mark.asyncio
    async def test_double_fire_is_safe(self):
        a, b = CancelToken(), CancelToken()
        derived = CancellationComposer(None).compose([a, b])
        a.cancel(RuntimeError("a"))
        b.cancel(RuntimeError("b"))
        assert derived.source is a
        assert str(derived.reason) == "a"

    @pytest.mark.asyncio
    async def test_dispose_detaches_sources_and_timer(self):
        token = CancelToken()
        derived = CancellationComposer(10).compose([token])
        derived.dispose()
        derived.dispose()
        token.cancel()
        await asyncio.sleep(0.03)
        assert not derived.cancelled
