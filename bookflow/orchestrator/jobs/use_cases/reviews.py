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

"""Review use cases: submission, edits, vendor response, helpful votes, listings."""

import logging
import math
from typing import List

from bookflow.core.jobs.entities import Review
from bookflow.core.jobs.exceptions import ValidationError
from bookflow.core.jobs.repositories import (
    JobRepository,
    ReviewRepository,
    UUIDGenerator,
)
from bookflow.core.jobs.reviews import ReviewGate, sort_reviews, summarize_reviews
from bookflow.core.jobs.value_objects import JobId, ParticipantId, ReviewId

from ..commands import (
    MarkReviewHelpfulCommand,
    SubmitReviewCommand,
    SubmitVendorResponseCommand,
    UpdateReviewCommand,
)
from ..dtos import (
    JobReviewResponse,
    ReviewListResponse,
    ReviewResponse,
    ReviewSummaryResponse,
)
from .common import (
    DEFAULT_PAGE_SIZE,
    load_job,
    load_review,
    page_window,
    require_participant,
    translate_infrastructure_errors,
)

logger = logging.getLogger(__name__)


class SubmitReviewUseCase:
    """Use case for a customer reviewing a completed job.

    Attributes:
        job_repo: Job repository port.
        review_repo: Review repository port.
        uuid_generator: Source of review identifiers.
    """

    def __init__(
        self,
        job_repo: JobRepository,
        review_repo: ReviewRepository,
        uuid_generator: UUIDGenerator,
    ) -> None:
        """Initialize use case with repository dependencies.

        Args:
            job_repo: Job repository implementation.
            review_repo: Review repository implementation.
            uuid_generator: UUID generator for review identifiers.
        """
        self._job_repo = job_repo
        self._review_repo = review_repo
        self._uuid_generator = uuid_generator
        self._gate = ReviewGate(review_repo)

    def execute(self, command: SubmitReviewCommand) -> ReviewResponse:
        """Execute review submission.

        Args:
            command: SubmitReview command.

        Returns:
            ReviewResponse DTO of the stored review.

        Raises:
            JobNotFoundError: If the job does not exist.
            IneligibleReviewError: If the job is not completed, the caller is
                not its customer, or it was already reviewed.
            ValidationError: If the ratings, title or comment are invalid.
        """
        job = load_job(self._job_repo, command.job_id)
        with translate_infrastructure_errors("submit_review"):
            existing = self._review_repo.find_by_job(job.job_id)
            review = self._gate.submit_review(
                job,
                existing,
                command.caller_id,
                command.payload,
                self._generate_review_id(),
            )
        return ReviewResponse.from_entity(review)

    def _generate_review_id(self) -> ReviewId:
        """Generate review ID.

        Returns:
            ReviewId wrapping a UUID v4 string.
        """
        return ReviewId(str(self._uuid_generator.generate()))


class SubmitVendorResponseUseCase:
    """Record the reviewed vendor's single reply to a review."""

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo
        self._gate = ReviewGate(review_repo)

    def execute(self, command: SubmitVendorResponseCommand) -> ReviewResponse:
        """Attach the response.

        Raises:
            ReviewNotFoundError: If the review does not exist.
            AuthorizationError: If the caller is not the reviewed vendor.
            ValidationError: If the text is blank or too long.
            DuplicateResponseError: If the vendor already responded.
        """
        review = load_review(self._review_repo, command.review_id)
        with translate_infrastructure_errors("submit_vendor_response"):
            updated = self._gate.submit_vendor_response(
                review, command.caller_id, command.text, is_public=command.is_public
            )
        return ReviewResponse.from_entity(updated)


class GetJobReviewUseCase:
    """Return a job's review together with the caller's review eligibility."""

    def __init__(self, job_repo: JobRepository, review_repo: ReviewRepository) -> None:
        self._job_repo = job_repo
        self._review_repo = review_repo

    def execute(self, job_id: JobId, caller_id: ParticipantId) -> JobReviewResponse:
        """Look up the review and evaluate the gate for the caller.

        Raises:
            JobNotFoundError: If the job does not exist.
            AuthorizationError: If the caller is not a participant.
        """
        job = load_job(self._job_repo, job_id)
        require_participant(job, caller_id)
        with translate_infrastructure_errors("get_job_review"):
            review = self._review_repo.find_by_job(job.job_id)

        reason = ReviewGate.eligibility(job, review, caller_id)
        return JobReviewResponse(
            can_review=reason is None,
            ineligibility_reason=reason.value if reason is not None else None,
            review=ReviewResponse.from_entity(review) if review is not None else None,
        )


class MarkReviewHelpfulUseCase:
    """Record one helpful vote per participant on a review."""

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo
        self._gate = ReviewGate(review_repo)

    def execute(self, command: MarkReviewHelpfulCommand) -> ReviewResponse:
        """Add the vote.

        Raises:
            ReviewNotFoundError: If the review does not exist.
            ValidationError: If the voter wrote the review or already voted.
        """
        review = load_review(self._review_repo, command.review_id)
        with translate_infrastructure_errors("mark_review_helpful"):
            updated = self._gate.mark_helpful(review, command.voter_id)
        logger.info("Helpful vote recorded on review %s", review.review_id)
        return ReviewResponse.from_entity(updated)


class VendorReviewSummaryUseCase:
    """Aggregate ratings across every review of a vendor."""

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def execute(self, vendor_id: ParticipantId) -> ReviewSummaryResponse:
        with translate_infrastructure_errors("vendor_review_summary"):
            reviews = self._review_repo.find_by_vendor(vendor_id)
        summary = summarize_reviews(reviews)
        return ReviewSummaryResponse.from_summary(str(vendor_id), summary)


class UpdateReviewUseCase:
    """Let a review's author change it, keeping what it said before."""

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo
        self._gate = ReviewGate(review_repo)

    def execute(self, command: UpdateReviewCommand) -> ReviewResponse:
        """Apply the edit.

        Raises:
            ReviewNotFoundError: If the review does not exist.
            AuthorizationError: If the caller did not write the review.
            ValidationError: If a changed field is invalid.
            ConflictError: If a concurrent edit was stored first.
        """
        review = load_review(self._review_repo, command.review_id)
        with translate_infrastructure_errors("update_review"):
            updated = self._gate.edit_review(
                review, command.caller_id, command.changes, command.edit_reason
            )
        return ReviewResponse.from_entity(updated)


def _review_page(reviews: List[Review], page: int, limit: int) -> ReviewListResponse:
    window = page_window(page, limit)
    total = len(reviews)
    pages = math.ceil(total / limit)
    return ReviewListResponse(
        reviews=[ReviewResponse.from_entity(review) for review in reviews[window]],
        page=page,
        pages=pages,
        total=total,
        limit=limit,
        has_next=page < pages,
        has_prev=page > 1,
    )


class ListVendorReviewsUseCase:
    """Page through a vendor's reviews in a chosen order.

    Orders are ``newest`` (default), ``oldest``, ``highest_rating``,
    ``lowest_rating`` and ``most_helpful``.
    """

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def execute(
        self,
        vendor_id: ParticipantId,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        sort: str = "newest",
    ) -> ReviewListResponse:
        """Return one page of the vendor's reviews.

        Raises:
            ValidationError: If the paging values or sort order are invalid.
        """
        page_window(page, limit)
        with translate_infrastructure_errors("list_vendor_reviews"):
            reviews = self._review_repo.find_by_vendor(vendor_id)
        try:
            ordered = sort_reviews(reviews, sort)
        except ValueError as exc:
            raise ValidationError(str(exc), field="sort") from exc
        return _review_page(ordered, page, limit)


class ListServiceReviewsUseCase:
    """Page through a service's reviews, newest first."""

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def execute(
        self,
        service_id: str,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> ReviewListResponse:
        page_window(page, limit)
        with translate_infrastructure_errors("list_service_reviews"):
            reviews = self._review_repo.find_by_service(service_id)
        return _review_page(sort_reviews(reviews), page, limit)
