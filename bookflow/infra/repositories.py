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

"""In-memory document and review stores.

Each store guards its documents with one lock, so every conditional
update is a single atomic read-check-write, as a document database's
``find_one_and_update`` with a filter would be. Stored entities are
frozen dataclasses, so handing them out never exposes partial writes.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, FrozenSet, List, Optional

from bookflow.core.jobs.entities import (
    Job,
    JobPrecondition,
    JobUpdate,
    Review,
    VendorResponse,
)
from bookflow.core.jobs.exceptions import (
    ConflictError,
    DuplicateResponseError,
    IneligibilityReason,
    IneligibleReviewError,
    JobAlreadyExistsError,
    JobNotFoundError,
    ReviewNotFoundError,
    ValidationError,
)
from bookflow.core.jobs.value_objects import (
    ActorRole,
    JobId,
    JobStatus,
    ParticipantId,
    ReviewId,
)

logger = logging.getLogger(__name__)


class InMemoryJobRepository:
    """Thread-safe JobRepository keeping jobs in a dict."""

    def __init__(self) -> None:
        self._jobs: Dict[str, Job] = {}
        self._job_numbers: Dict[str, str] = {}
        self._lock = threading.Lock()

    def add(self, job: Job) -> None:
        """Persist a new job, enforcing unique id and job number."""
        with self._lock:
            if str(job.job_id) in self._jobs:
                raise JobAlreadyExistsError(str(job.job_id))
            if str(job.job_number) in self._job_numbers:
                raise JobAlreadyExistsError(str(job.job_number))
            self._jobs[str(job.job_id)] = job
            self._job_numbers[str(job.job_number)] = str(job.job_id)

    def find_by_id(self, job_id: JobId) -> Optional[Job]:
        """Find a job by its ID."""
        with self._lock:
            return self._jobs.get(str(job_id))

    def find_by_participant(
        self,
        participant_id: ParticipantId,
        role: ActorRole,
        statuses: Optional[FrozenSet[JobStatus]] = None,
    ) -> List[Job]:
        """Find a participant's jobs on one side, newest first."""
        with self._lock:
            jobs = list(self._jobs.values())
        matches = [
            job for job in jobs
            if (job.customer_id if role == ActorRole.CUSTOMER else job.vendor_id)
            == participant_id
            and (statuses is None or job.status in statuses)
        ]
        return sorted(matches, key=lambda job: job.created_at, reverse=True)

    def apply_update(
        self,
        job_id: JobId,
        precondition: JobPrecondition,
        update: JobUpdate,
    ) -> Job:
        """Apply ``update`` atomically when ``precondition`` holds."""
        with self._lock:
            current = self._jobs.get(str(job_id))
            if current is None:
                raise JobNotFoundError(str(job_id))
            mismatch = precondition.mismatch(current)
            if mismatch is not None:
                expected, actual = mismatch
                logger.warning("Conditional update lost on job %s", job_id)
                raise ConflictError(
                    entity_type="Job",
                    entity_id=str(job_id),
                    expected=expected,
                    actual=actual,
                )
            updated = current.apply(update, datetime.now(timezone.utc))
            self._jobs[str(job_id)] = updated
            return updated


class InMemoryReviewRepository:
    """Thread-safe ReviewRepository with a unique index on job id."""

    def __init__(self) -> None:
        self._reviews: Dict[str, Review] = {}
        self._by_job: Dict[str, str] = {}
        self._lock = threading.Lock()

    def add(self, review: Review) -> None:
        """Persist a review unless its job already has one."""
        with self._lock:
            if str(review.job_id) in self._by_job:
                raise IneligibleReviewError(
                    job_id=str(review.job_id),
                    reason=IneligibilityReason.ALREADY_REVIEWED,
                )
            self._reviews[str(review.review_id)] = review
            self._by_job[str(review.job_id)] = str(review.review_id)

    def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by its ID."""
        with self._lock:
            return self._reviews.get(str(review_id))

    def find_by_job(self, job_id: JobId) -> Optional[Review]:
        """Find the review of a job."""
        with self._lock:
            review_id = self._by_job.get(str(job_id))
            return self._reviews.get(review_id) if review_id else None

    def find_by_vendor(self, vendor_id: ParticipantId) -> List[Review]:
        """Find a vendor's reviews, newest first."""
        with self._lock:
            reviews = [r for r in self._reviews.values() if r.vendor_id == vendor_id]
        return sorted(reviews, key=lambda review: review.created_at, reverse=True)

    def find_by_service(self, service_id: str) -> List[Review]:
        """Find a service's reviews, newest first."""
        with self._lock:
            reviews = [r for r in self._reviews.values() if r.service_id == service_id]
        return sorted(reviews, key=lambda review: review.created_at, reverse=True)

    def save_edit(
        self,
        review_id: ReviewId,
        expected_edits: int,
        edited: Review,
    ) -> Review:
        """Store an edited review unless another edit landed first."""
        with self._lock:
            current = self._get(review_id)
            if len(current.edit_history) != expected_edits:
                logger.warning("Conditional edit lost on review %s", review_id)
                raise ConflictError(
                    entity_type="Review",
                    entity_id=str(review_id),
                    expected=f"{expected_edits} edits",
                    actual=f"{len(current.edit_history)} edits",
                )
            updated = replace(
                edited,
                vendor_response=current.vendor_response,
                helpful_voters=current.helpful_voters,
            )
            self._reviews[str(review_id)] = updated
            return updated

    def set_vendor_response(
        self,
        review_id: ReviewId,
        response: VendorResponse,
    ) -> Review:
        """Attach a vendor response unless one is already stored."""
        with self._lock:
            current = self._get(review_id)
            if current.has_vendor_response():
                raise DuplicateResponseError(str(review_id))
            updated = replace(current, vendor_response=response)
            self._reviews[str(review_id)] = updated
            return updated

    def add_helpful_vote(self, review_id: ReviewId, voter_id: ParticipantId) -> Review:
        """Record a helpful vote unless the voter already voted."""
        with self._lock:
            current = self._get(review_id)
            if voter_id in current.helpful_voters:
                raise ValidationError(
                    "You have already marked this review as helpful"
                )
            updated = replace(
                current, helpful_voters=current.helpful_voters | {voter_id}
            )
            self._reviews[str(review_id)] = updated
            return updated

    def _get(self, review_id: ReviewId) -> Review:
        review = self._reviews.get(str(review_id))
        if review is None:
            raise ReviewNotFoundError(str(review_id))
        return review
