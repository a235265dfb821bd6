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

import datetime
from enum import Enum
from typing import Annotated
from uuid import UUID

from pydantic import Field

from ._codec import RequestModel, WireModel


class ApprovalStatus(str, Enum):
    APPROVED = "approved"
    EXPIRED = "expired"
    PENDING = "pending"
    REJECTED = "rejected"

    def __str__(self) -> str:
        return str(self.value)


class ApprovalReason(str, Enum):
    DAILY_LIMIT_EXCEEDED = "daily_limit_exceeded"
    HIGH_VALUE = "high_value"
    NEW_RECIPIENT = "new_recipient"
    SUSPICIOUS_ACTIVITY = "suspicious_activity"

    def __str__(self) -> str:
        return str(self.value)


class TransactionApproval(WireModel):
    """An approval request raised for a transaction that exceeded a limit.

    Attributes:
        id (UUID):
        transaction_id (UUID):
        status (ApprovalStatus):
        requested_by (UUID): User that requested the approval.
        requested_at (datetime.datetime):
        expires_at (datetime.datetime):
        created_at (datetime.datetime):
        updated_at (datetime.datetime):
        reason (ApprovalReason | None):
        approved_by (UUID | None):
        responded_at (datetime.datetime | None):
        notes (str | None):
    """

    id: UUID
    transaction_id: Annotated[UUID, Field(alias="transactionId")]
    status: ApprovalStatus
    requested_by: Annotated[UUID, Field(alias="requestedBy")]
    requested_at: Annotated[datetime.datetime, Field(alias="requestedAt")]
    expires_at: Annotated[datetime.datetime, Field(alias="expiresAt")]
    created_at: Annotated[datetime.datetime, Field(alias="createdAt")]
    updated_at: Annotated[datetime.datetime, Field(alias="updatedAt")]
    reason: ApprovalReason | None = None
    approved_by: Annotated[UUID | None, Field(alias="approvedBy")] = None
    responded_at: Annotated[datetime.datetime | None, Field(alias="respondedAt")] = None
    notes: str | None = None


class PaginatedApprovals(WireModel):
    data: list[TransactionApproval]
    total_count: Annotated[int, Field(alias="totalCount")]
    limit: int
    offset: int


class ApproveTransactionRequest(RequestModel):
    approval_id: Annotated[UUID, Field(alias="approvalId")]
    notes: str | None = None


class RejectTransactionRequest(RequestModel):
    approval_id: Annotated[UUID, Field(alias="approvalId")]
    reason: str | None = None


class RequestApprovalRequest(RequestModel):
    transaction_id: Annotated[UUID, Field(alias="transactionId")]
    notes: str | None = None


__all__ = [
    "ApprovalReason",
    "ApprovalStatus",
    "ApproveTransactionRequest",
    "PaginatedApprovals",
    "RejectTransactionRequest",
    "RequestApprovalRequest",
    "TransactionApproval",
]
