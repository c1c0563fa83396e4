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

"""Status history entry and read-only accessors over a job's audit trail."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Dict, Optional

from ..value_objects import JobStatus, ParticipantId

if TYPE_CHECKING:
    from .job import Job


@dataclass(frozen=True)
class StatusHistoryEntry:
    """Immutable record of one accepted status change.

    Attributes:
        status: Status the job moved into.
        timestamp: When the change was accepted.
        actor_id: Participant who triggered the change.
        reason: Optional free-text justification.
    """

    status: JobStatus
    timestamp: datetime
    actor_id: ParticipantId
    reason: Optional[str] = None


# Monotonic along the happy path. Cancelled maps to 0, success terminals to 100.
PROGRESS_BY_STATUS: Dict[JobStatus, int] = {
    JobStatus.PENDING: 10,
    JobStatus.REVIEWING: 20,
    JobStatus.QUOTED: 30,
    JobStatus.ACCEPTED: 40,
    JobStatus.CONFIRMED: 50,
    JobStatus.IN_PROGRESS: 65,
    JobStatus.DISPUTED: 70,
    JobStatus.DELIVERED: 85,
    JobStatus.COMPLETED: 100,
    JobStatus.CLOSED: 100,
    JobStatus.CANCELLED: 0,
}

_SECONDS_PER_DAY = 60 * 60 * 24


def first_entry(job: "Job", status: JobStatus) -> Optional[StatusHistoryEntry]:
    """Return the oldest history entry bearing ``status``, if any."""
    for entry in job.status_history:
        if entry.status == status:
            return entry
    return None


def last_entry(job: "Job") -> StatusHistoryEntry:
    """Return the newest history entry."""
    return job.status_history[-1]


def elapsed_since(
    job: "Job",
    status: JobStatus,
    now: Optional[datetime] = None
) -> Optional[int]:
    """Whole days elapsed (rounded down) since the job first entered ``status``.

    Args:
        job: Job whose history is inspected.
        status: Status to measure from, e.g. PENDING for time since creation.
        now: Reference time; defaults to the current UTC time.

    Returns:
        Number of days, or None if the job never reached ``status``.
    """
    entry = first_entry(job, status)
    if entry is None:
        return None
    reference = now or datetime.now(timezone.utc)
    seconds = (reference - entry.timestamp).total_seconds()
    return max(0, int(seconds // _SECONDS_PER_DAY))


def progress_percent(job: "Job") -> int:
    """Map the job's current status to a 0-100 progress value."""
    return PROGRESS_BY_STATUS[job.status]
