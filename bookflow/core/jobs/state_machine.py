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

"""State machine that validates and applies job status transitions."""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from .entities import (
    Actor,
    Cancellation,
    CompletedDeliverable,
    DeliverableFile,
    Job,
    JobMessage,
    JobPrecondition,
    JobUpdate,
    StatusHistoryEntry,
)
from .exceptions import AuthorizationError, InvalidTransitionError, ValidationError
from .repositories import JobRepository
from .transitions import TransitionEdge, find_edge
from .value_objects import ActorRole, JobStatus, MessageKind, ParticipantId

logger = logging.getLogger(__name__)


def parse_datetime(value: Any, field: str) -> datetime:
    """Accept a datetime or ISO 8601 string; naive values are taken as UTC.

    Raises:
        ValidationError: If ``value`` is neither.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ValidationError(
                f"{field} must be an ISO 8601 date", field=field
            ) from None
    else:
        raise ValidationError(f"{field} must be an ISO 8601 date", field=field)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_amount(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValidationError(f"{field} must be a non-negative number", field=field)
    return float(value)


def _parse_completed_deliverables(
    value: Any,
    now: datetime
) -> Tuple[CompletedDeliverable, ...]:
    if not isinstance(value, list):
        raise ValidationError(
            "completed_deliverables must be a list", field="completed_deliverables"
        )
    deliverables = []
    for item in value:
        if not isinstance(item, dict) or not str(item.get("name", "")).strip():
            raise ValidationError(
                "each completed deliverable needs a name",
                field="completed_deliverables",
            )
        files = tuple(
            DeliverableFile(
                name=str(f.get("name", "")),
                url=str(f.get("url", "")),
                file_type=str(f.get("type", "document")),
            )
            for f in item.get("files", [])
            if isinstance(f, dict)
        )
        deliverables.append(
            CompletedDeliverable(
                name=str(item["name"]).strip(),
                description=str(item.get("description", "")),
                files=files,
                completed_at=now,
            )
        )
    return tuple(deliverables)


def status_change_message(
    previous: JobStatus,
    target: JobStatus,
    reason: Optional[str]
) -> str:
    """Text of the status_update message injected on every transition."""
    text = f"Job status changed from {previous.value} to {target.value}"
    if reason:
        text += f". Reason: {reason}"
    return text


class JobStateMachine:
    """Validates a requested status change against the transition graph
    and applies it to the stored job in one conditional update.

    Attributes:
        job_repo: Job repository port.
    """

    def __init__(self, job_repo: JobRepository) -> None:
        """Initialize state machine with its repository.

        Args:
            job_repo: Job repository implementation.
        """
        self._job_repo = job_repo

    def transition(
        self,
        job: Job,
        target_status: JobStatus,
        actor_id: ParticipantId,
        actor_role: ActorRole,
        reason: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> Job:
        """Move ``job`` to ``target_status`` on behalf of ``actor_id``.

        Args:
            job: Job as read by the caller.
            target_status: Requested status.
            actor_id: Caller's subject identifier.
            actor_role: Role the caller acts in.
            reason: Free-text reason; required on some edges.
            extra: Side payload for the target status; unknown keys ignored.

        Returns:
            The job as stored after the transition.

        Raises:
            InvalidTransitionError: If the edge does not exist for the role.
            ValidationError: If a required reason or extra value is invalid.
            AuthorizationError: If the actor does not hold the claimed role.
            ConflictError: If the stored status changed since ``job`` was read.
        """
        update = self.plan(job, target_status, actor_id, actor_role, reason, extra)
        updated = self._job_repo.apply_update(
            job.job_id,
            JobPrecondition(status=job.status),
            update,
        )
        logger.info(
            "Job %s moved %s -> %s by %s",
            job.job_id, job.status.value, target_status.value, actor_role.value,
        )
        return updated

    def plan(
        self,
        job: Job,
        target_status: JobStatus,
        actor_id: ParticipantId,
        actor_role: ActorRole,
        reason: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> JobUpdate:
        """Validate the request and build the change set without storing it.

        Raises:
            InvalidTransitionError: If the edge does not exist for the role.
            ValidationError: If a required reason or extra value is invalid.
            AuthorizationError: If the actor does not hold the claimed role.
        """
        edge = find_edge(job.status, target_status, actor_role)
        if edge is None:
            logger.warning(
                "Rejected transition %s -> %s for %s on job %s",
                job.status.value, target_status.value, actor_role.value, job.job_id,
            )
            raise InvalidTransitionError(
                job_id=str(job.job_id),
                from_status=job.status.value,
                to_status=target_status.value,
                role=actor_role.value,
            )

        reason = reason.strip() if reason else None
        if edge.requires_reason and not reason:
            raise ValidationError("reason required", field="reason")

        actor = Actor(actor_id=actor_id, role=actor_role)
        if not actor.holds_claimed_role(job):
            logger.warning(
                "Actor is not the %s of job %s", actor_role.value, job.job_id
            )
            raise AuthorizationError(
                actor_id=str(actor_id), resource=f"job {job.job_id}"
            )

        now = self._now_utc()
        update = JobUpdate(
            status=target_status,
            history=(
                StatusHistoryEntry(
                    status=target_status,
                    timestamp=now,
                    actor_id=actor_id,
                    reason=reason,
                ),
            ),
            messages=(
                JobMessage(
                    sender_id=actor_id,
                    message=status_change_message(job.status, target_status, reason),
                    kind=MessageKind.STATUS_UPDATE,
                    timestamp=now,
                ),
            ),
        )
        return self._apply_side_payload(
            job, edge, update, actor_id, reason, extra or {}, now
        )

    def _apply_side_payload(
        self,
        job: Job,
        edge: TransitionEdge,
        update: JobUpdate,
        actor_id: ParticipantId,
        reason: Optional[str],
        extra: Dict[str, Any],
        now: datetime,
    ) -> JobUpdate:
        """Add the target-specific field changes to ``update``."""
        target = edge.target

        if target == JobStatus.QUOTED and "quoted_amount" in extra:
            amount = _parse_amount(extra["quoted_amount"], "quoted_amount")
            update = replace(update, pricing=replace(job.pricing, estimated_total=amount))

        elif target == JobStatus.ACCEPTED:
            update = replace(
                update, scheduling=replace(job.scheduling, confirmed_date=now)
            )

        elif target == JobStatus.CONFIRMED:
            confirmed = now
            if "confirmed_date" in extra:
                confirmed = parse_datetime(extra["confirmed_date"], "confirmed_date")
            update = replace(
                update, scheduling=replace(job.scheduling, confirmed_date=confirmed)
            )

        elif target == JobStatus.IN_PROGRESS and "estimated_completion" in extra:
            estimated = parse_datetime(
                extra["estimated_completion"], "estimated_completion"
            )
            update = replace(
                update,
                scheduling=replace(job.scheduling, estimated_completion=estimated),
            )

        elif target in (JobStatus.DELIVERED, JobStatus.COMPLETED):
            notes = extra.get("delivery_notes")
            if isinstance(notes, str) and notes.strip():
                update = replace(update, deliverables=(notes.strip(),))
            if "completed_deliverables" in extra:
                update = replace(
                    update,
                    completed_deliverables=_parse_completed_deliverables(
                        extra["completed_deliverables"], now
                    ),
                )
            if target == JobStatus.COMPLETED and "final_total" in extra:
                final_total = _parse_amount(extra["final_total"], "final_total")
                update = replace(
                    update, pricing=replace(job.pricing, final_total=final_total)
                )

        elif target == JobStatus.CANCELLED:
            update = replace(
                update,
                cancellation=Cancellation(
                    cancelled_by=actor_id,
                    reason=reason or "",
                    cancelled_at=now,
                ),
            )

        return update

    def _now_utc(self) -> datetime:
        """Return current UTC timestamp."""
        return datetime.now(timezone.utc)
