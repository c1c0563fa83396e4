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

"""Timeline event response DTO."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bookflow.core.jobs.timeline import TimelineEvent


@dataclass(frozen=True)
class TimelineEventResponse:
    """Serialized timeline event; timestamps are ISO 8601 strings."""

    event_id: str
    type: str
    timestamp: str
    actor_id: str
    description: str
    icon: str
    color: str
    status: Optional[str] = None
    reason: Optional[str] = None
    content: Optional[str] = None
    message_kind: Optional[str] = None
    file: Optional[Dict[str, Any]] = None

    @staticmethod
    def from_event(event: TimelineEvent) -> "TimelineEventResponse":
        """Create response DTO from a timeline event."""
        attachment = event.attachment
        return TimelineEventResponse(
            event_id=event.event_id,
            type=event.kind.value,
            timestamp=event.timestamp.isoformat(),
            actor_id=event.actor_id,
            description=event.description,
            icon=event.icon,
            color=event.color,
            status=event.status.value if event.status else None,
            reason=event.reason,
            content=event.content,
            message_kind=event.message_kind.value if event.message_kind else None,
            file=(
                {
                    "name": attachment.name,
                    "size": attachment.size,
                    "type": attachment.content_type,
                    "url": attachment.url,
                }
                if attachment is not None else None
            ),
        )
