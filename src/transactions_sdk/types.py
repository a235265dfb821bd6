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

"""Common types for the API client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar


# Sentinel for unset values (compatible with pydantic's exclude_unset)
class _Unset:
    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()
UnsetType = _Unset
Unset = _Unset  # Alias for compatibility


T = TypeVar("T")


@dataclass
class Response(Generic[T]):
    """HTTP response wrapper.

    ``parsed`` holds the payload after envelope unwrapping and, for typed
    endpoints, after decoding through the endpoint's response contract.
    """

    status_code: int
    content: bytes
    headers: Mapping[str, str]
    parsed: T | None = None
