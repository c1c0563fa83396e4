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

"""Repository port interfaces (Protocols) for Jobs domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import FrozenSet, List, Optional, Protocol
import uuid

from .entities import Job, JobPrecondition, JobUpdate, Review, VendorResponse
from .value_objects import ActorRole, JobId, JobStatus, ParticipantId, ReviewId


class JobIdGenerator(Protocol):
    """Generator port for creating Job identifiers."""

    def generate(self) -> JobId:
        """Generate a new Job identifier.

        Returns:
            A new, unique JobId.
        """
        ...


class UUIDGenerator(Protocol):
    """Interface for generating UUID objects."""

    def generate(self) -> uuid.UUID:
        """Generate a UUID object.

        Returns:
            uuid.UUID: A UUID object (v4 or v7 format).
        """
        ...


class JobRepository(Protocol):
    """Repository port for Job aggregate persistence.

    The store must execute :meth:`apply_update` as one atomic
    read-check-write on a single document.
    """

    def add(self, job: Job) -> None:
        """Persist a newly created job.

        Args:
            job: Job entity to persist.

        Raises:
            JobAlreadyExistsError: If the job id or job number is taken.
        """
        ...

    def find_by_id(self, job_id: JobId) -> Optional[Job]:
        """Retrieve a job by its identifier.

        Args:
            job_id: Unique job identifier.

        Returns:
            Job entity if found, None otherwise.
        """
        ...

    def find_by_participant(
        self,
        participant_id: ParticipantId,
        role: ActorRole,
        statuses: Optional[FrozenSet[JobStatus]] = None,
    ) -> List[Job]:
        """Retrieve the jobs a participant takes part in under ``role``.

        Args:
            participant_id: Customer or vendor identifier.
            role: Which side of the job the participant is on.
            statuses: Optional status filter.

        Returns:
            Matching jobs, newest first (may be empty).
        """
        ...

    def apply_update(
        self,
        job_id: JobId,
        precondition: JobPrecondition,
        update: JobUpdate,
    ) -> Job:
        """Atomically apply ``update`` if ``precondition`` still holds.

        Args:
            job_id: Job to update.
            precondition: State the caller read before building the update.
            update: Change set to append/apply.

        Returns:
            The job as stored after the update.

        Raises:
            JobNotFoundError: If the job does not exist.
            ConflictError: If the precondition no longer holds.
        """
        ...


class ReviewRepository(Protocol):
    """Repository port for Review persistence.

    The store must enforce a unique index on ``job_id``.
    """

    def add(self, review: Review) -> None:
        """Persist a new review.

        Args:
            review: Review entity to persist.

        Raises:
            IneligibleReviewError: With reason ALREADY_REVIEWED if a review
                for the same job exists.
        """
        ...

    def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Retrieve a review by its identifier."""
        ...

    def find_by_job(self, job_id: JobId) -> Optional[Review]:
        """Retrieve the review of a job, if one exists."""
        ...

    def find_by_vendor(self, vendor_id: ParticipantId) -> List[Review]:
        """Retrieve every review of a vendor, newest first."""
        ...

    def find_by_service(self, service_id: str) -> List[Review]:
        """Retrieve every review of a service, newest first."""
        ...

    def save_edit(
        self,
        review_id: ReviewId,
        expected_edits: int,
        edited: Review,
    ) -> Review:
        """Atomically replace a review with its author's edited version.

        Args:
            review_id: Review being edited.
            expected_edits: Length of the edit history the author saw.
            edited: New version, carrying one more edit history entry.

        Raises:
            ReviewNotFoundError: If the review does not exist.
            ConflictError: If another edit was stored in the meantime.
        """
        ...

    def set_vendor_response(
        self,
        review_id: ReviewId,
        response: VendorResponse,
    ) -> Review:
        """Atomically attach a vendor response if none exists yet.

        Raises:
            ReviewNotFoundError: If the review does not exist.
            DuplicateResponseError: If a response is already stored.
        """
        ...

    def add_helpful_vote(self, review_id: ReviewId, voter_id: ParticipantId) -> Review:
        """Atomically record a helpful vote.

        Raises:
            ReviewNotFoundError: If the review does not exist.
            ValidationError: If ``voter_id`` already voted.
        """
        ...


class BlobStore(Protocol):
    """Port for the file storage collaborator."""

    def upload(self, name: str, content: bytes, content_type: str) -> str:
        """Store ``content`` and return a retrievable URL."""
        ...


class IdentityVerifier(Protocol):
    """Port for the identity collaborator."""

    def verify(self, credential: str) -> str:
        """Return the stable subject identifier behind a bearer credential."""
        ...
