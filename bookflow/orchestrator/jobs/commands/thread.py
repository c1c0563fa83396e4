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

"""PostMessage and AttachFile command DTOs."""

from dataclasses import dataclass
from typing import Optional

from bookflow.core.jobs.value_objects import JobId, ParticipantId


@dataclass(frozen=True)
class PostMessageCommand:
    """Command to append a participant message to a job's thread."""

    job_id: JobId
    actor_id: ParticipantId
    text: str
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class AttachFileCommand:
    """Command to upload a file and attach it to a job.

    Attributes:
        job_id: Job the file belongs to.
        actor_id: Uploading participant.
        name: Original file name.
        content_type: MIME type reported by the client.
        content: File bytes, handed to the blob store.
        correlation_id: Request correlation identifier for tracing.
    """

    job_id: JobId
    actor_id: ParticipantId
    name: str
    content_type: str
    content: bytes
    correlation_id: Optional[str] = None
