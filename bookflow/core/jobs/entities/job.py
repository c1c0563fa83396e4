# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Job aggregate root entity."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple

from ..value_objects import (
    JobId,
    JobNumber,
    JobStatus,
    MessageKind,
    ParticipantId,
    PricingType,
)
from .audit import StatusHistoryEntry


@dataclass(frozen=True)
class JobMessage:
    """One entry in the job's conversation thread."""

    sender_id: ParticipantId
    message: str
    kind: MessageKind
    timestamp: datetime


@dataclass(frozen=True)
class Attachment:
    """Reference to a file stored in the blob store."""

    name: str
    size: int
    content_type: str
    url: str
    uploaded_by: ParticipantId
    uploaded_at: datetime


@dataclass(frozen=True)
class Pricing:
    """Price agreed for the booking."""

    pricing_type: PricingType
    amount: float
    currency: str = "USD"
    estimated_total: Optional[float] = None
    final_total: Optional[float] = None


@dataclass(frozen=True)
class Scheduling:
    """Dates attached to the booking."""

    preferred_date: Optional[datetime] = None
    confirmed_date: Optional[datetime] = None
    estimated_completion: Optional[datetime] = None
    timezone: str = "America/New_York"


@dataclass(frozen=True)
class DeliverableFile:
    """File handed over as part of a completed deliverable."""

    name: str
    url: str
    file_type: str = "document"


@dataclass(frozen=True)
class CompletedDeliverable:
    """Deliverable the vendor reported as done."""

    name: str
    completed_at: datetime
    description: str = ""
    files: Tuple[DeliverableFile, ...] = ()


@dataclass(frozen=True)
class Cancellation:
    """Who cancelled the job, when, and why."""

    cancelled_by: ParticipantId
    reason: str
    cancelled_at: datetime


@dataclass(frozen=True)
class JobPrecondition:
    """State a conditional update expects to find in the store.

    Only the fields that are set are compared.
    """

    status: Optional[JobStatus] = None
    message_count: Optional[int] = None
    attachment_count: Optional[int] = None

    def mismatch(self, job: "Job") -> Optional[Tuple[str, str]]:
        """Return ``(expected, actual)`` for the first failed check, else None."""
        if self.status is not None and job.status != self.status:
            return f"status {self.status.value}", f"status {job.status.value}"
        if self.message_count is not None and len(job.messages) != self.message_count:
            return (
                f"{self.message_count} messages",
                f"{len(job.messages)} messages",
            )
        if (
            self.attachment_count is not None
            and len(job.attachments) != self.attachment_count
        ):
            return (
                f"{self.attachment_count} attachments",
                f"{len(job.attachments)} attachments",
            )
        return None


@dataclass(frozen=True)
class JobUpdate:
    """Change set applied to a stored job in one atomic step.

    Sequences are appended to the stored job's sequences; scalar fields
    replace the stored value when set.
    """

    status: Optional[JobStatus] = None
    history: Tuple[StatusHistoryEntry, ...] = ()
    messages: Tuple[JobMessage, ...] = ()
    attachments: Tuple[Attachment, ...] = ()
    deliverables: Tuple[str, ...] = ()
    completed_deliverables: Tuple[CompletedDeliverable, ...] = ()
    pricing: Optional[Pricing] = None
    scheduling: Optional[Scheduling] = None
    cancellation: Optional[Cancellation] = None


@dataclass(frozen=True)
class Job:
    """Job aggregate root.

    Ties one customer to one vendor for one service. The status history,
    messages and attachments only ever grow; every change goes through
    :meth:`apply`, which returns a new instance.

    Attributes:
        job_id: Unique job identifier.
        job_number: Short human-facing code.
        customer_id: Customer who requested the booking.
        vendor_id: Vendor who provides the service.
        service_id: Booked service.
        title: Booking title.
        description: Customer's description of the work.
        pricing: Agreed price.
        created_at: Job creation timestamp.
        status: Current lifecycle status.
        status_history: Accepted status changes, oldest first.
        messages: Conversation thread, in append order.
        attachments: Uploaded file references, in append order.
        updated_at: Last modification timestamp.
        version: Incremented on every accepted update.
    """

    job_id: JobId
    job_number: JobNumber
    customer_id: ParticipantId
    vendor_id: ParticipantId
    service_id: str
    title: str
    description: str
    pricing: Pricing
    created_at: datetime
    status: JobStatus = JobStatus.PENDING
    status_history: Tuple[StatusHistoryEntry, ...] = ()
    messages: Tuple[JobMessage, ...] = ()
    attachments: Tuple[Attachment, ...] = ()
    scheduling: Scheduling = field(default_factory=Scheduling)
    requirements: Tuple[str, ...] = ()
    deliverables: Tuple[str, ...] = ()
    completed_deliverables: Tuple[CompletedDeliverable, ...] = ()
    cancellation: Optional[Cancellation] = None
    updated_at: Optional[datetime] = None
    version: int = 1

    def __post_init__(self) -> None:
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    def apply(self, update: JobUpdate, now: datetime) -> "Job":
        """Return a copy of this job with ``update`` applied.

        Args:
            update: Change set to apply.
            now: Timestamp recorded as ``updated_at``.

        Returns:
            New Job with incremented version.
        """
        return replace(
            self,
            status=update.status or self.status,
            status_history=self.status_history + update.history,
            messages=self.messages + update.messages,
            attachments=self.attachments + update.attachments,
            deliverables=self.deliverables + update.deliverables,
            completed_deliverables=(
                self.completed_deliverables + update.completed_deliverables
            ),
            pricing=update.pricing or self.pricing,
            scheduling=update.scheduling or self.scheduling,
            cancellation=update.cancellation or self.cancellation,
            updated_at=now,
            version=self.version + 1,
        )
