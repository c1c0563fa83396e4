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

"""Job response DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from bookflow.core.jobs.entities import audit
from bookflow.core.jobs.services import JobStats
from bookflow.core.jobs.transitions import (
    STATUS_PRESENTATION,
    TransitionEdge,
    status_group,
)
from bookflow.core.jobs.value_objects import JobStatus


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class JobResponse:
    """Response DTO for job operations.

    Immutable data transfer object for returning job information
    to the API layer. All timestamps are ISO 8601 formatted strings.

    Attributes:
        job_id: Unique job identifier.
        job_number: Short human-facing code.
        customer_id: Customer who requested the booking.
        vendor_id: Vendor providing the service.
        service_id: Booked service.
        title: Booking title.
        description: Requested work.
        status: Current lifecycle status.
        status_label: Display label of the status.
        status_group: Status in the simplified four-state vocabulary.
        progress_percent: 0-100 progress derived from the status.
        days_since_creation: Whole days since the job was created.
        pricing: Price details.
        scheduling: Date details.
        status_history: Accepted status changes, oldest first.
        messages: Conversation thread, in append order.
        attachments: Uploaded files, in append order.
        created_at: Job creation timestamp (ISO 8601).
        updated_at: Last modification timestamp (ISO 8601).
        version: Incremented on every accepted update.
        is_new: True if job was newly created by this request.
    """

    job_id: str
    job_number: str
    customer_id: str
    vendor_id: str
    service_id: str
    title: str
    description: str
    status: str
    status_label: str
    status_group: str
    progress_percent: int
    days_since_creation: int
    pricing: Dict[str, Any]
    scheduling: Dict[str, Any]
    requirements: List[str]
    deliverables: List[str]
    completed_deliverables: List[Dict[str, Any]]
    cancellation: Optional[Dict[str, Any]]
    status_history: List[Dict[str, Any]]
    messages: List[Dict[str, Any]]
    attachments: List[Dict[str, Any]]
    created_at: str
    updated_at: str
    version: int
    is_new: bool = False

    @staticmethod
    def from_entity(job, is_new: bool = False) -> "JobResponse":
        """Create response DTO from Job entity.

        Args:
            job: Job domain entity.
            is_new: True if job was newly created by this request.

        Returns:
            JobResponse DTO with serialized values.
        """
        return JobResponse(
            job_id=str(job.job_id),
            job_number=str(job.job_number),
            customer_id=str(job.customer_id),
            vendor_id=str(job.vendor_id),
            service_id=job.service_id,
            title=job.title,
            description=job.description,
            status=job.status.value,
            status_label=STATUS_PRESENTATION[job.status].label,
            status_group=status_group(job.status).value,
            progress_percent=audit.progress_percent(job),
            days_since_creation=audit.elapsed_since(job, JobStatus.PENDING) or 0,
            pricing={
                "type": job.pricing.pricing_type.value,
                "amount": job.pricing.amount,
                "currency": job.pricing.currency,
                "estimated_total": job.pricing.estimated_total,
                "final_total": job.pricing.final_total,
            },
            scheduling={
                "preferred_date": _iso(job.scheduling.preferred_date),
                "confirmed_date": _iso(job.scheduling.confirmed_date),
                "estimated_completion": _iso(job.scheduling.estimated_completion),
                "timezone": job.scheduling.timezone,
            },
            requirements=list(job.requirements),
            deliverables=list(job.deliverables),
            completed_deliverables=[
                {
                    "name": d.name,
                    "description": d.description,
                    "files": [
                        {"name": f.name, "url": f.url, "type": f.file_type}
                        for f in d.files
                    ],
                    "completed_at": _iso(d.completed_at),
                }
                for d in job.completed_deliverables
            ],
            cancellation=(
                {
                    "cancelled_by": str(job.cancellation.cancelled_by),
                    "reason": job.cancellation.reason,
                    "cancelled_at": _iso(job.cancellation.cancelled_at),
                }
                if job.cancellation is not None else None
            ),
            status_history=[
                {
                    "status": e.status.value,
                    "timestamp": _iso(e.timestamp),
                    "actor_id": str(e.actor_id),
                    "reason": e.reason,
                }
                for e in job.status_history
            ],
            messages=[
                {
                    "sender_id": str(m.sender_id),
                    "message": m.message,
                    "kind": m.kind.value,
                    "timestamp": _iso(m.timestamp),
                }
                for m in job.messages
            ],
            attachments=[
                {
                    "name": a.name,
                    "size": a.size,
                    "type": a.content_type,
                    "url": a.url,
                    "uploaded_by": str(a.uploaded_by),
                    "uploaded_at": _iso(a.uploaded_at),
                }
                for a in job.attachments
            ],
            created_at=_iso(job.created_at),
            updated_at=_iso(job.updated_at),
            version=job.version,
            is_new=is_new,
        )


@dataclass(frozen=True)
class JobListResponse:
    """One page of a participant's jobs."""

    jobs: List[JobResponse]
    page: int
    pages: int
    total: int
    limit: int


@dataclass(frozen=True)
class TransitionOptionResponse:
    """An action the caller may take on a job."""

    target_status: str
    label: str
    description: str
    requires_reason: bool

    @staticmethod
    def from_edge(edge: TransitionEdge) -> "TransitionOptionResponse":
        """Create response DTO from a transition graph edge."""
        return TransitionOptionResponse(
            target_status=edge.target.value,
            label=edge.label,
            description=edge.description,
            requires_reason=edge.requires_reason,
        )


@dataclass(frozen=True)
class JobStatsResponse:
    """Dashboard counts for one participant."""

    total: int
    by_group: Dict[str, int] = field(default_factory=dict)
    total_estimated_amount: float = 0.0

    @staticmethod
    def from_stats(stats: JobStats) -> "JobStatsResponse":
        """Create response DTO from computed job statistics."""
        return JobStatsResponse(
            total=stats.total,
            by_group={group.value: count for group, count in stats.by_group.items()},
            total_estimated_amount=stats.total_estimated_amount,
        )
