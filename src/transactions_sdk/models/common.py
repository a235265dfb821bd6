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

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from ._codec import RequestModel, WireModel

DEFAULT_PAGE_SIZE = 10


class MessageResponse(WireModel):
    """Generic ``{"message": ...}`` acknowledgement."""

    message: str


class PageParams(RequestModel):
    """Limit/offset pagination query."""

    limit: Annotated[int | None, Field(description="Page size", ge=1, le=100)] = None
    offset: Annotated[int | None, Field(description="Zero-based offset", ge=0)] = None


class NumberedPageParams(RequestModel):
    """Query taking a 1-based ``page``, sent to the server as ``offset``.

    The offset is ``(page - 1) * limit``, with a page size of
    ``DEFAULT_PAGE_SIZE`` when ``limit`` is not given.
    """

    page: Annotated[int | None, Field(description="1-based page number", ge=1)] = None
    limit: Annotated[int | None, Field(description="Page size", ge=1, le=100)] = None

    @model_serializer(mode="wrap")
    def page_to_offset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if data.get("page") is None:
            data.pop("page", None)
            return data
        page = data.pop("page")
        data["offset"] = (page - 1) * (data.get("limit") or DEFAULT_PAGE_SIZE)
        return data


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MessageResponse",
    "NumberedPageParams",
    "PageParams",
]
