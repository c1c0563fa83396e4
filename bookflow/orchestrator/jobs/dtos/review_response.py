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

"""Review response DTOs."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from bookflow.core.jobs.entities import Review
from bookflow.core.jobs.reviews import ReviewSummary


@dataclass(frozen=True)
class ReviewResponse:
    """Serialized review; timestamps are ISO 8601 strings."""

    review_id: str
    job_id: str
    customer_id: str
    vendor_id: str
    service_id: str
    ratings: Dict[str, int]
    average_rating: float
    title: Optional[str]
    comment: str
    is_recommended: bool
    would_hire_again: bool
    completed_on_time: bool
    matched_description: bool
    helpful_count: int
    vendor_response: Optional[Dict[str, Any]]
    created_at: str
    edit_history: List[Dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def from_entity(review: Review) -> "ReviewResponse":
        """Create response DTO from Review entity."""
        response = review.vendor_response
        return ReviewResponse(
            review_id=str(review.review_id),
            job_id=str(review.job_id),
            customer_id=str(review.customer_id),
            vendor_id=str(review.vendor_id),
            service_id=review.service_id,
            ratings=asdict(review.ratings),
            average_rating=review.average_rating,
            title=review.title,
            comment=review.comment,
            is_recommended=review.is_recommended,
            would_hire_again=review.would_hire_again,
            completed_on_time=review.completed_on_time,
            matched_description=review.matched_description,
            helpful_count=review.helpful_count,
            vendor_response=(
                {
                    "comment": response.comment,
                    "responded_at": response.responded_at.isoformat(),
                    "is_public": response.is_public,
                }
                if response is not None else None
            ),
            created_at=review.created_at.isoformat(),
            edit_history=[
                {
                    "edited_at": edit.edited_at.isoformat(),
                    "previous_rating": edit.previous_rating,
                    "previous_comment": edit.previous_comment,
                    "edit_reason": edit.edit_reason,
                }
                for edit in review.edit_history
            ],
        )


@dataclass(frozen=True)
class JobReviewResponse:
    """A job's review, if any, and whether the caller may submit one."""

    can_review: bool
    ineligibility_reason: Optional[str] = None
    review: Optional[ReviewResponse] = None


@dataclass(frozen=True)
class ReviewSummaryResponse:
    """Aggregate ratings of one vendor."""

    vendor_id: str
    review_count: int
    average_rating: float
    dimension_averages: Dict[str, float] = field(default_factory=dict)
    recommendation_rate: float = 0.0
    rating_distribution: Dict[str, int] = field(default_factory=dict)

    @staticmethod
    def from_summary(vendor_id: str, summary: ReviewSummary) -> "ReviewSummaryResponse":
        """Create response DTO from a review summary."""
        return ReviewSummaryResponse(
            vendor_id=vendor_id,
            review_count=summary.review_count,
            average_rating=summary.average_rating,
            dimension_averages=dict(summary.dimension_averages),
            recommendation_rate=summary.recommendation_rate,
            rating_distribution={
                str(rating): count
                for rating, count in summary.rating_distribution.items()
            },
        )


@dataclass(frozen=True)
class ReviewListResponse:
    """One page of reviews."""

    reviews: List[ReviewResponse]
    page: int
    pages: int
    total: int
    limit: int
    has_next: bool = False
    has_prev: bool = False
