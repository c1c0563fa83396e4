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

"""Transition graph for the job lifecycle.

This table is the only definition of which status changes exist, who may
request them and whether a reason is required. The state machine uses it
to authorize changes and callers use it to list available actions.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Optional, Tuple

from .value_objects import ActorRole, JobStatus, StatusGroup

if TYPE_CHECKING:
    from .entities import Job


@dataclass(frozen=True)
class TransitionEdge:
    """One legal status change for one actor role.

    Attributes:
        target: Status the job moves into.
        role: Role allowed to request the change.
        requires_reason: Whether a non-blank reason must accompany it.
        label: Short action name for callers to display.
        description: One-line explanation of the action.
    """

    target: JobStatus
    role: ActorRole
    label: str
    description: str
    requires_reason: bool = False


@dataclass(frozen=True)
class StatusPresentation:
    """Display label and color for a status."""

    label: str
    color: str


ENTRY_STATUS = JobStatus.PENDING
REVIEWABLE_STATUS = JobStatus.COMPLETED

_C = ActorRole.CUSTOMER
_V = ActorRole.VENDOR


def _cancel(role: ActorRole, label: str = "Cancel Job") -> TransitionEdge:
    return TransitionEdge(
        JobStatus.CANCELLED, role, label, "Cancel this job", requires_reason=True
    )


TRANSITION_GRAPH: Dict[JobStatus, Tuple[TransitionEdge, ...]] = {
    JobStatus.PENDING: (
        TransitionEdge(JobStatus.REVIEWING, _V, "Review Request",
                       "Start reviewing the job request"),
        TransitionEdge(JobStatus.QUOTED, _V, "Send Quote",
                       "Send a price quote to the customer"),
        TransitionEdge(JobStatus.ACCEPTED, _V, "Accept Job",
                       "Accept the job request directly"),
        _cancel(_V),
        _cancel(_C, "Cancel Request"),
    ),
    JobStatus.REVIEWING: (
        TransitionEdge(JobStatus.QUOTED, _V, "Send Quote",
                       "Send a price quote to the customer"),
        TransitionEdge(JobStatus.ACCEPTED, _V, "Accept Job",
                       "Accept the job request"),
        _cancel(_V),
        _cancel(_C, "Cancel Request"),
    ),
    JobStatus.QUOTED: (
        TransitionEdge(JobStatus.ACCEPTED, _C, "Accept Quote",
                       "Accept the vendor's quote"),
        _cancel(_V),
        _cancel(_C, "Decline Quote"),
    ),
    JobStatus.ACCEPTED: (
        TransitionEdge(JobStatus.CONFIRMED, _V, "Confirm Schedule",
                       "Confirm the date the work will happen"),
        TransitionEdge(JobStatus.IN_PROGRESS, _V, "Start Work",
                       "Mark the work as started"),
        TransitionEdge(JobStatus.COMPLETED, _V, "Mark Complete",
                       "Mark the job as completed"),
        TransitionEdge(JobStatus.COMPLETED, _C, "Confirm Work Done",
                       "Confirm that the work has been completed satisfactorily"),
        _cancel(_V),
        _cancel(_C),
    ),
    JobStatus.CONFIRMED: (
        TransitionEdge(JobStatus.IN_PROGRESS, _V, "Start Work",
                       "Mark the work as started"),
        _cancel(_V),
        _cancel(_C),
    ),
    JobStatus.IN_PROGRESS: (
        TransitionEdge(JobStatus.DELIVERED, _V, "Deliver Work",
                       "Hand the finished work over for approval"),
        TransitionEdge(JobStatus.COMPLETED, _V, "Mark Complete",
                       "Mark the job as completed"),
        TransitionEdge(JobStatus.DISPUTED, _C, "Raise Dispute",
                       "Report a problem with the work in progress",
                       requires_reason=True),
        _cancel(_V),
        _cancel(_C),
    ),
    JobStatus.DELIVERED: (
        TransitionEdge(JobStatus.COMPLETED, _C, "Approve Delivery",
                       "Confirm the delivered work is complete"),
        TransitionEdge(JobStatus.DISPUTED, _C, "Raise Dispute",
                       "Report a problem with the delivered work",
                       requires_reason=True),
    ),
    JobStatus.DISPUTED: (
        TransitionEdge(JobStatus.IN_PROGRESS, _V, "Resume Work",
                       "Rework the job to resolve the dispute",
                       requires_reason=True),
        TransitionEdge(JobStatus.CLOSED, _C, "Close Job",
                       "Close the job as resolved", requires_reason=True),
        _cancel(_V),
        _cancel(_C),
    ),
    JobStatus.COMPLETED: (),
    JobStatus.CLOSED: (),
    JobStatus.CANCELLED: (),
}

STATUS_PRESENTATION: Dict[JobStatus, StatusPresentation] = {
    JobStatus.PENDING: StatusPresentation("Pending Review", "#f59e0b"),
    JobStatus.REVIEWING: StatusPresentation("Under Review", "#3b82f6"),
    JobStatus.QUOTED: StatusPresentation("Quote Sent", "#8b5cf6"),
    JobStatus.ACCEPTED: StatusPresentation("Accepted", "#10b981"),
    JobStatus.CONFIRMED: StatusPresentation("Confirmed", "#059669"),
    JobStatus.IN_PROGRESS: StatusPresentation("In Progress", "#0ea5e9"),
    JobStatus.DELIVERED: StatusPresentation("Delivered", "#16a34a"),
    JobStatus.COMPLETED: StatusPresentation("Completed", "#22c55e"),
    JobStatus.CANCELLED: StatusPresentation("Cancelled", "#ef4444"),
    JobStatus.DISPUTED: StatusPresentation("Disputed", "#dc2626"),
    JobStatus.CLOSED: StatusPresentation("Closed", "#6b7280"),
}

_STATUS_GROUPS: Dict[JobStatus, StatusGroup] = {
    JobStatus.PENDING: StatusGroup.PENDING,
    JobStatus.REVIEWING: StatusGroup.PENDING,
    JobStatus.QUOTED: StatusGroup.PENDING,
    JobStatus.ACCEPTED: StatusGroup.ACCEPTED,
    JobStatus.CONFIRMED: StatusGroup.ACCEPTED,
    JobStatus.IN_PROGRESS: StatusGroup.ACCEPTED,
    JobStatus.DELIVERED: StatusGroup.ACCEPTED,
    JobStatus.DISPUTED: StatusGroup.ACCEPTED,
    JobStatus.COMPLETED: StatusGroup.COMPLETED,
    JobStatus.CLOSED: StatusGroup.COMPLETED,
    JobStatus.CANCELLED: StatusGroup.CANCELLED,
}


def edges_from(status: JobStatus) -> Tuple[TransitionEdge, ...]:
    """Return every outgoing edge of ``status``, for all roles."""
    return TRANSITION_GRAPH[status]


def available_transitions(job: "Job", actor_role: ActorRole) -> List[TransitionEdge]:
    """List the edges ``actor_role`` may take from the job's current status.

    Args:
        job: Job whose current status is inspected.
        actor_role: Role the caller acts in.

    Returns:
        Matching edges in table order; empty for terminal statuses.
    """
    return [edge for edge in edges_from(job.status) if edge.role == actor_role]


def find_edge(
    current: JobStatus,
    target: JobStatus,
    actor_role: ActorRole
) -> Optional[TransitionEdge]:
    """Return the edge ``current -> target`` for ``actor_role``, if it exists."""
    for edge in edges_from(current):
        if edge.target == target and edge.role == actor_role:
            return edge
    return None


def is_terminal(status: JobStatus) -> bool:
    """Check if ``status`` has no outgoing edges."""
    return not TRANSITION_GRAPH[status]


def status_group(status: JobStatus) -> StatusGroup:
    """Map a status onto the simplified four-state vocabulary."""
    return _STATUS_GROUPS[status]


def statuses_in_group(group: StatusGroup) -> FrozenSet[JobStatus]:
    """Return every status that maps onto ``group``."""
    return frozenset(
        status for status, mapped in _STATUS_GROUPS.items() if mapped == group
    )


def resolve_status_filter(values: List[str]) -> FrozenSet[JobStatus]:
    """Expand filter terms from either vocabulary into concrete statuses.

    A term naming a status group selects every status in the group, so
    ``accepted`` also matches ``in_progress`` jobs. Use the full status
    name of a non-group status to match it alone.

    Raises:
        ValueError: If a term names neither a status nor a group.
    """
    statuses = set()
    for value in values:
        try:
            statuses |= statuses_in_group(StatusGroup(value))
        except ValueError:
            statuses.add(JobStatus(value))
    return frozenset(statuses)
