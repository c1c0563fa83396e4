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

"""Review gate: who may review a job, and when."""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

from .entities import Actor, Job, RatingSet, Review, ReviewEdit, VendorResponse
from .exceptions import (
    AuthorizationError,
    DuplicateResponseError,
    IneligibilityReason,
    IneligibleReviewError,
    ValidationError,
)
from .repositories import ReviewRepository
from .transitions import REVIEWABLE_STATUS
from .value_objects import ParticipantId, ReviewId

logger = logging.getLogger(__name__)

MAX_COMMENT_LENGTH = 1000
MAX_TITLE_LENGTH = 100
DEFAULT_EDIT_REASON = "Updated review"


@dataclass(frozen=True)
class ReviewPayload:
    """Customer-supplied review content."""

    ratings: Dict[str, int]
    comment: str
    title: Optional[str] = None
    is_recommended: bool = True
    would_hire_again: bool = True
    completed_on_time: bool = True
    matched_description: bool = True


@dataclass(frozen=True)
class ReviewChanges:
    """Fields an author may change when editing a review; None keeps a field."""

    ratings: Optional[Dict[str, int]] = None
    comment: Optional[str] = None
    title: Optional[str] = None
    is_recommended: Optional[bool] = None
    would_hire_again: Optional[bool] = None
    completed_on_time: Optional[bool] = None
    matched_description: Optional[bool] = None


def _empty_distribution() -> Dict[int, int]:
    return {
        rating: 0
        for rating in range(RatingSet.MAX_RATING, RatingSet.MIN_RATING - 1, -1)
    }


@dataclass(frozen=True)
class ReviewSummary:
    """Aggregate ratings over a vendor's reviews.

    ``rating_distribution`` counts reviews per overall rating, 5 down to 1.
    """

    review_count: int
    average_rating: float
    dimension_averages: Dict[str, float] = field(default_factory=dict)
    recommendation_rate: float = 0.0
    rating_distribution: Dict[int, int] = field(default_factory=_empty_distribution)


REVIEW_SORT_KEYS: Dict[str, Callable[[Review], object]] = {
    "newest": lambda review: review.created_at,
    "oldest": lambda review: review.created_at,
    "highest_rating": lambda review: review.ratings.overall,
    "lowest_rating": lambda review: review.ratings.overall,
    "most_helpful": lambda review: review.helpful_count,
}
_ASCENDING_SORTS = frozenset({"oldest", "lowest_rating"})


def sort_reviews(reviews: Sequence[Review], order: str = "newest") -> List[Review]:
    """Order reviews for listing; ties keep newest first.

    Raises:
        ValueError: If ``order`` is not one of REVIEW_SORT_KEYS.
    """
    if order not in REVIEW_SORT_KEYS:
        raise ValueError(
            f"Unknown sort {order!r}; expected one of {', '.join(REVIEW_SORT_KEYS)}"
        )
    newest_first = sorted(reviews, key=lambda review: review.created_at, reverse=True)
    return sorted(
        newest_first,
        key=REVIEW_SORT_KEYS[order],
        reverse=order not in _ASCENDING_SORTS,
    )


class ReviewGate:
    """Enforces review eligibility and the single-response rule."""

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    @staticmethod
    def eligibility(
        job: Job,
        review: Optional[Review],
        caller_id: ParticipantId
    ) -> Optional[IneligibilityReason]:
        """Return why ``caller_id`` cannot review ``job``, or None if they can."""
        if job.status != REVIEWABLE_STATUS:
            return IneligibilityReason.JOB_NOT_COMPLETED
        if not Actor(caller_id).is_customer_of(job):
            return IneligibilityReason.NOT_CUSTOMER
        if review is not None:
            return IneligibilityReason.ALREADY_REVIEWED
        return None

    def can_review(
        self,
        job: Job,
        review: Optional[Review],
        caller_id: ParticipantId
    ) -> bool:
        """Check whether ``caller_id`` may review ``job`` now."""
        return self.eligibility(job, review, caller_id) is None

    def submit_review(
        self,
        job: Job,
        review: Optional[Review],
        caller_id: ParticipantId,
        payload: ReviewPayload,
        review_id: ReviewId,
    ) -> Review:
        """Validate and persist the customer's review of ``job``.

        Raises:
            IneligibleReviewError: If the gate rejects the caller, including
                when a concurrent submission won the store's unique index.
            ValidationError: If the payload is invalid.
        """
        reason = self.eligibility(job, review, caller_id)
        if reason is not None:
            logger.warning(
                "Review rejected for job %s: %s", job.job_id, reason.value
            )
            raise IneligibleReviewError(job_id=str(job.job_id), reason=reason)

        new_review = Review(
            review_id=review_id,
            job_id=job.job_id,
            customer_id=job.customer_id,
            vendor_id=job.vendor_id,
            service_id=job.service_id,
            ratings=self._build_ratings(payload.ratings),
            comment=self._clean_comment(payload.comment),
            title=self._clean_title(payload.title),
            is_recommended=payload.is_recommended,
            would_hire_again=payload.would_hire_again,
            completed_on_time=payload.completed_on_time,
            matched_description=payload.matched_description,
            created_at=self._now_utc(),
        )
        self._review_repo.add(new_review)
        logger.info("Review %s stored for job %s", review_id, job.job_id)
        return new_review

    def submit_vendor_response(
        self,
        review: Review,
        caller_id: ParticipantId,
        text: str,
        is_public: bool = True,
    ) -> Review:
        """Attach the vendor's one response to ``review``.

        Raises:
            AuthorizationError: If the caller is not the reviewed vendor.
            DuplicateResponseError: If the vendor already responded.
            ValidationError: If the text is blank.
        """
        if caller_id != review.vendor_id:
            raise AuthorizationError(
                actor_id=str(caller_id), resource=f"review {review.review_id}"
            )
        if review.has_vendor_response():
            raise DuplicateResponseError(review_id=str(review.review_id))
        text = (text or "").strip()
        if not text:
            raise ValidationError("response text is required", field="comment")
        if len(text) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"response cannot exceed {MAX_COMMENT_LENGTH} characters",
                field="comment",
            )

        updated = self._review_repo.set_vendor_response(
            review.review_id,
            VendorResponse(
                comment=text, responded_at=self._now_utc(), is_public=is_public
            ),
        )
        logger.info("Vendor responded to review %s", review.review_id)
        return updated

    def mark_helpful(self, review: Review, voter_id: ParticipantId) -> Review:
        """Record one helpful vote from ``voter_id``.

        Raises:
            ValidationError: If the voter wrote the review or already voted.
        """
        if voter_id == review.customer_id:
            raise ValidationError("You cannot mark your own review as helpful")
        if voter_id in review.helpful_voters:
            raise ValidationError("You have already marked this review as helpful")
        return self._review_repo.add_helpful_vote(review.review_id, voter_id)

    def edit_review(
        self,
        review: Review,
        caller_id: ParticipantId,
        changes: ReviewChanges,
        edit_reason: Optional[str] = None,
    ) -> Review:
        """Apply the author's ``changes`` and keep the previous version.

        The prior overall rating and comment are appended to the edit
        history. A blank title clears it; ratings are replaced as a whole.

        Raises:
            AuthorizationError: If the caller did not write the review.
            ValidationError: If a changed field is invalid.
            ConflictError: If another edit was stored since ``review`` was read.
        """
        if caller_id != review.customer_id:
            raise AuthorizationError(
                actor_id=str(caller_id), resource=f"review {review.review_id}"
            )

        updates = {
            name: value
            for name, value in (
                ("is_recommended", changes.is_recommended),
                ("would_hire_again", changes.would_hire_again),
                ("completed_on_time", changes.completed_on_time),
                ("matched_description", changes.matched_description),
            )
            if value is not None
        }
        if changes.ratings is not None:
            updates["ratings"] = self._build_ratings(changes.ratings)
        if changes.comment is not None:
            updates["comment"] = self._clean_comment(changes.comment)
        if changes.title is not None:
            updates["title"] = self._clean_title(changes.title)

        edit = ReviewEdit(
            edited_at=self._now_utc(),
            previous_rating=review.ratings.overall,
            previous_comment=review.comment,
            edit_reason=(edit_reason or "").strip() or DEFAULT_EDIT_REASON,
        )
        edited = replace(
            review, edit_history=review.edit_history + (edit,), **updates
        )
        stored = self._review_repo.save_edit(
            review.review_id, len(review.edit_history), edited
        )
        logger.info("Review %s edited by its author", review.review_id)
        return stored

    @staticmethod
    def _build_ratings(ratings: Dict[str, int]) -> RatingSet:
        missing = [d for d in RatingSet.dimensions() if d not in ratings]
        if missing:
            raise ValidationError(
                f"Missing ratings: {', '.join(missing)}", field="ratings"
            )
        try:
            return RatingSet(**{d: ratings[d] for d in RatingSet.dimensions()})
        except ValueError as exc:
            raise ValidationError(str(exc), field="ratings") from exc

    @staticmethod
    def _clean_comment(comment: str) -> str:
        comment = (comment or "").strip()
        if not comment:
            raise ValidationError("comment is required", field="comment")
        if len(comment) > MAX_COMMENT_LENGTH:
            raise ValidationError(
                f"comment cannot exceed {MAX_COMMENT_LENGTH} characters",
                field="comment",
            )
        return comment

    @staticmethod
    def _clean_title(title: Optional[str]) -> Optional[str]:
        if title is None or not title.strip():
            return None
        if len(title.strip()) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )
        return title.strip()

    def _now_utc(self) -> datetime:
        """Return current UTC timestamp."""
        return datetime.now(timezone.utc)


def summarize_reviews(reviews: Sequence[Review]) -> ReviewSummary:
    """Average every rating dimension across ``reviews`` and bucket overall ratings."""
    if not reviews:
        return ReviewSummary(review_count=0, average_rating=0.0)
    count = len(reviews)
    distribution = _empty_distribution()
    for review in reviews:
        distribution[review.ratings.overall] += 1
    dimension_averages = {
        dimension: round(
            sum(getattr(r.ratings, dimension) for r in reviews) / count, 1
        )
        for dimension in RatingSet.dimensions()
    }
    return ReviewSummary(
        review_count=count,
        average_rating=round(sum(r.ratings.average for r in reviews) / count, 1),
        dimension_averages=dimension_averages,
        recommendation_rate=round(
            sum(1 for r in reviews if r.is_recommended) / count * 100, 1
        ),
        rating_distribution=distribution,
    )
