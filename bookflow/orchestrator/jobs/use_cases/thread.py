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

"""Conversation thread, attachment and timeline use cases."""

import logging
from typing import List, Optional

from bookflow.core.jobs.exceptions import ValidationError
from bookflow.core.jobs.messaging import FileMeta, MessagingThread
from bookflow.core.jobs.repositories import BlobStore, JobRepository
from bookflow.core.jobs.timeline import TimelineEventKind, build_timeline, filter_timeline
from bookflow.core.jobs.value_objects import JobId, ParticipantId

from ..commands import AttachFileCommand, PostMessageCommand
from ..dtos import JobResponse, TimelineEventResponse
from .common import load_job, require_participant, translate_infrastructure_errors

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class PostMessageUseCase:
    """Append a participant's message to a job's thread."""

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo
        self._thread = MessagingThread(job_repo)

    def execute(self, command: PostMessageCommand) -> JobResponse:
        """Post the message.

        Raises:
            JobNotFoundError: If the job does not exist.
            AuthorizationError: If the sender is not a participant.
            ValidationError: If the text is blank or too long.
            ConflictError: If another message landed first.
        """
        job = load_job(self._job_repo, command.job_id)
        with translate_infrastructure_errors("post_message"):
            updated = self._thread.post_message(job, command.actor_id, command.text)
        return JobResponse.from_entity(updated)


class AttachFileUseCase:
    """Upload a file to the blob store and record it on the job.

    Attributes:
        job_repo: Job repository port.
        blob_store: File storage port.
        max_upload_bytes: Largest accepted file.
    """

    def __init__(
        self,
        job_repo: JobRepository,
        blob_store: BlobStore,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ) -> None:
        self._job_repo = job_repo
        self._blob_store = blob_store
        self._max_upload_bytes = max_upload_bytes
        self._thread = MessagingThread(job_repo)

    def execute(self, command: AttachFileCommand) -> JobResponse:
        """Store the bytes, then append the attachment metadata.

        Raises:
            JobNotFoundError: If the job does not exist.
            AuthorizationError: If the uploader is not a participant.
            ValidationError: If the file is empty, unnamed or too large.
            InfrastructureError: If the blob store fails.
            ConflictError: If another file landed first.
        """
        job = load_job(self._job_repo, command.job_id)
        require_participant(job, command.actor_id)
        self._validate(command)

        with translate_infrastructure_errors("upload_file"):
            url = self._blob_store.upload(
                command.name, command.content, command.content_type
            )
        logger.info("Uploaded %d bytes for job %s", len(command.content), job.job_id)

        meta = FileMeta(
            name=command.name,
            size=len(command.content),
            content_type=command.content_type,
            url=url,
        )
        with translate_infrastructure_errors("attach_file"):
            updated = self._thread.attach(job, command.actor_id, meta)
        return JobResponse.from_entity(updated)

    def _validate(self, command: AttachFileCommand) -> None:
        if not command.name or not command.name.strip():
            raise ValidationError("file name is required", field="file")
        if not command.content:
            raise ValidationError("No file uploaded", field="file")
        if len(command.content) > self._max_upload_bytes:
            raise ValidationError(
                f"file exceeds {self._max_upload_bytes} bytes", field="file"
            )


class GetTimelineUseCase:
    """Project a job's history, messages and files into one feed."""

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    def execute(
        self,
        job_id: JobId,
        caller_id: ParticipantId,
        kind: Optional[str] = None,
    ) -> List[TimelineEventResponse]:
        """Return the timeline newest first, optionally narrowed to one kind.

        Raises:
            JobNotFoundError: If the job does not exist.
            AuthorizationError: If the caller is not a participant.
            ValidationError: If ``kind`` is unknown.
        """
        event_kind = None
        if kind:
            try:
                event_kind = TimelineEventKind(kind)
            except ValueError:
                raise ValidationError(
                    f"Unknown timeline filter: {kind}", field="type"
                ) from None

        job = load_job(self._job_repo, job_id)
        require_participant(job, caller_id)
        events = filter_timeline(build_timeline(job), event_kind)
        return [TimelineEventResponse.from_event(event) for event in events]
