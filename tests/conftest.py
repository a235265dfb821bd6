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

"""Shared fixtures: an SDK wired to an in-memory httpx transport."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from transactions_sdk import ClientConfig, TransactionsSDK
from transactions_sdk.observability import RecordingRequestLogger

BASE_URL = "https://api.example.test/v1"
WALLET_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"
USER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
ORG_ID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
TX_ID = "9b2f6a3e-1c4d-4e8f-a0b1-2c3d4e5f6a7b"

Handler = Callable[[httpx.Request], Any]


class RecordingHandler:
    """Answers every request with handler and keeps the requests seen."""

    def __init__(self, handler: Handler):
        self.handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def reply(payload: Any = None, status_code: int = 200, **kwargs: Any) -> Handler:
    """Handler that always returns payload as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if payload is None:
            return httpx.Response(status_code, **kwargs)
        return httpx.Response(status_code, json=payload, **kwargs)

    return handler


def envelope(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data}


def wallet_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": WALLET_ID,
        "user_id": USER_ID,
        "address": "0xabc0000000000000000000000000000000000001",
        "blockchain": "ethereum",
        "name": "Treasury",
        "status": "active",
        "created_at": "2025-01-02T03:04:05+00:00",
        "updated_at": "2025-01-02T03:04:05+00:00",
        "metadata": None,
        "organization_id": ORG_ID,
    }
    payload.update(overrides)
    return payload


def transaction_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": TX_ID,
        "walletId": WALLET_ID,
        "blockchain": "ethereum",
        "status": "pending",
        "amount": "1000000000000000000",
        "recipient": "0xdef0000000000000000000000000000000000002",
        "createdAt": "2025-01-02T03:04:05Z",
        "updatedAt": "2025-01-02T03:04:05Z",
        "txHash": None,
        "type": "transfer",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, api_key="test-key", organization_id=ORG_ID)


@pytest.fixture
def make_sdk(config: ClientConfig):
    """Factory building a :class:`TransactionsSDK` over a recording mock transport."""

    def factory(
        handler: Handler, **overrides: Any
    ) -> tuple[TransactionsSDK, RecordingHandler, RecordingRequestLogger]:
        recorder = RecordingHandler(handler)
        logger = RecordingRequestLogger()
        sdk = TransactionsSDK(
            config.replace(**overrides) if overrides else config,
            transport=httpx.MockTransport(recorder),
            logger=logger,
        )
        return sdk, recorder, logger

    return factory
