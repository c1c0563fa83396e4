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

"""Timeline builder.

Derives a job's activity feed from the job alone. The result is never
stored; any caller holding a Job can rebuild it.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence

from .entities import Attachment, Job, JobMessage, StatusHistoryEntry
from .transitions import STATUS_PRESENTATION
from .value_objects import JobStatus, MessageKind


class TimelineEventKind(str, Enum):
    """Source of a timeline event."""

    STATUS_CHANGE = "status_change"
    MESSAGE = "message"
    FILE_UPLOAD = "file_upload"


@dataclass(frozen=True)
class TimelineEvent:
    """One entry of the derived activity feed."""

    event_id: str
    kind: TimelineEventKind
    timestamp: datetime
    actor_id: str
    description: str
    icon: str
    color: str
    status: Optional[JobStatus] = None
    reason: Optional[str] = None
    content: Optional[str] = None
    message_kind: Optional[MessageKind] = None
    attachment: Optional[Attachment] = None


STATUS_ICONS = {
    JobStatus.PENDING: "⏳",
    JobStatus.REVIEWING: "🔍",
    JobStatus.QUOTED: "💰",
    JobStatus.ACCEPTED: "✅",
    JobStatus.CONFIRMED: "🎯",
    JobStatus.IN_PROGRESS: "🔄",
    JobStatus.COMPLETED: "✨",
    JobStatus.DELIVERED: "📦",
    JobStatus.CANCELLED: "❌",
    JobStatus.DISPUTED: "⚠️",
    JobStatus.CLOSED: "🏁",
}

KIND_ICONS = {
    TimelineEventKind.MESSAGE: "💬",
    TimelineEventKind.FILE_UPLOAD: "📎",
}

KIND_COLORS = {
    TimelineEventKind.MESSAGE: "#6366f1",
    TimelineEventKind.FILE_UPLOAD: "#8b5cf6",
}

MESSAGE_DESCRIPTIONS = {
    MessageKind.REGULAR: "Message sent",
    MessageKind.STATUS_UPDATE: "Status update",
    MessageKind.SYSTEM: "System notice",
}


def _status_event(index: int, entry: StatusHistoryEntry) -> TimelineEvent:
    if index == 0:
        description = "Job was created and submitted for review"
    else:
        description = f"Job status changed to {STATUS_PRESENTATION[entry.status].label}"
    return TimelineEvent(
        event_id=f"status_{index}",
        kind=TimelineEventKind.STATUS_CHANGE,
        timestamp=entry.timestamp,
        actor_id=str(entry.actor_id),
        description=description,
        icon=STATUS_ICONS[entry.status],
        color=STATUS_PRESENTATION[entry.status].color,
        status=entry.status,
        reason=entry.reason,
    )


def _message_event(index: int, message: JobMessage) -> TimelineEvent:
    return TimelineEvent(
        event_id=f"message_{index}",
        kind=TimelineEventKind.MESSAGE,
        timestamp=message.timestamp,
        actor_id=str(message.sender_id),
        description=MESSAGE_DESCRIPTIONS[message.kind],
        icon=KIND_ICONS[TimelineEventKind.MESSAGE],
        color=KIND_COLORS[TimelineEventKind.MESSAGE],
        content=message.message,
        message_kind=message.kind,
    )


def _file_event(index: int, attachment: Attachment) -> TimelineEvent:
    return TimelineEvent(
        event_id=f"file_{index}",
        kind=TimelineEventKind.FILE_UPLOAD,
        timestamp=attachment.uploaded_at,
        actor_id=str(attachment.uploaded_by),
        description=f"Uploaded {attachment.name}",
        icon=KIND_ICONS[TimelineEventKind.FILE_UPLOAD],
        color=KIND_COLORS[TimelineEventKind.FILE_UPLOAD],
        attachment=attachment,
    )


def build_timeline(job: Job) -> List[TimelineEvent]:
    """Merge history, messages and attachments into one feed, newest first.

    Events with equal timestamps keep source order: history, then messages,
    then attachments, each in append order.

    Args:
        job: Job to project.

    Returns:
        Freshly built list of events.
    """
    events = [_status_event(i, e) for i, e in enumerate(job.status_history)]
    events += [_message_event(i, m) for i, m in enumerate(job.messages)]
    events += [_file_event(i, a) for i, a in enumerate(job.attachments)]
    # sorted() is stable with reverse=True, so ties keep the order built above.
    return sorted(events, key=lambda event: event.timestamp, reverse=True)


def filter_timeline(
    events: Sequence[TimelineEvent],
    kind: Optional[TimelineEventKind] = None
) -> List[TimelineEvent]:
    """Keep only events of ``kind``; None keeps everything."""
    if kind is None:
        return list(events)
    return [event for event in events if event.kind == kind]
