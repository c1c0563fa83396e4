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

"""Append-only conversation thread and file list attached to a job."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from .entities import Actor, Attachment, Job, JobMessage, JobPrecondition, JobUpdate
from .exceptions import AuthorizationError, ValidationError
from .repositories import JobRepository
from .value_objects import MessageKind, ParticipantId

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000


@dataclass(frozen=True)
class FileMeta:
    """Metadata of a file already placed in the blob store."""

    name: str
    size: int
    content_type: str
    url: str


def system_message(sender_id: ParticipantId, text: str, now: datetime) -> JobMessage:
    """Build a ``system`` entry for a lifecycle event."""
    return JobMessage(
        sender_id=sender_id,
        message=text,
        kind=MessageKind.SYSTEM,
        timestamp=now,
    )


class MessagingThread:
    """Appends participant messages and attachments to a stored job.

    Array order is authoritative; timestamps are for display only.
    """

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    def post_message(self, job: Job, sender_id: ParticipantId, text: str) -> Job:
        """Append a regular message from a participant.

        Raises:
            AuthorizationError: If the sender is not a participant.
            ValidationError: If the text is blank or too long.
            ConflictError: If another message landed since ``job`` was read.
        """
        self._require_participant(job, sender_id)
        text = (text or "").strip()
        if not text:
            raise ValidationError("message text is required", field="message")
        if len(text) > MAX_MESSAGE_LENGTH:
            raise ValidationError(
                f"message cannot exceed {MAX_MESSAGE_LENGTH} characters",
                field="message",
            )

        message = JobMessage(
            sender_id=sender_id,
            message=text,
            kind=MessageKind.REGULAR,
            timestamp=self._now_utc(),
        )
        updated = self._job_repo.apply_update(
            job.job_id,
            JobPrecondition(message_count=len(job.messages)),
            JobUpdate(messages=(message,)),
        )
        logger.info("Message %d appended to job %s", len(updated.messages), job.job_id)
        return updated

    def attach(self, job: Job, uploader_id: ParticipantId, meta: FileMeta) -> Job:
        """Append a file reference uploaded by a participant.

        Raises:
            AuthorizationError: If the uploader is not a participant.
            ValidationError: If the metadata is incomplete.
            ConflictError: If another file landed since ``job`` was read.
        """
        self._require_participant(job, uploader_id)
        if not meta.name.strip() or not meta.url.strip():
            raise ValidationError("file name and url are required", field="file")
        if meta.size < 0:
            raise ValidationError("file size cannot be negative", field="size")

        attachment = Attachment(
            name=meta.name.strip(),
            size=meta.size,
            content_type=meta.content_type,
            url=meta.url,
            uploaded_by=uploader_id,
            uploaded_at=self._now_utc(),
        )
        updated = self._job_repo.apply_update(
            job.job_id,
            JobPrecondition(attachment_count=len(job.attachments)),
            JobUpdate(attachments=(attachment,)),
        )
        logger.info("File attached to job %s", job.job_id)
        return updated

    @staticmethod
    def _require_participant(job: Job, actor_id: ParticipantId) -> None:
        if not Actor(actor_id).is_participant_of(job):
            logger.warning("Non-participant write attempted on job %s", job.job_id)
            raise AuthorizationError(
                actor_id=str(actor_id), resource=f"job {job.job_id}"
            )

    def _now_utc(self) -> datetime:
        """Return current UTC timestamp."""
        return datetime.now(timezone.utc)
