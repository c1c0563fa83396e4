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

"""Review entity."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import FrozenSet, Optional, Tuple

from ..value_objects import JobId, ParticipantId, ReviewId


@dataclass(frozen=True)
class RatingSet:
    """Per-dimension ratings, each an integer from 1 to 5."""

    overall: int
    quality: int
    communication: int
    punctuality: int
    professionalism: int
    value: int

    MIN_RATING = 1
    MAX_RATING = 5

    def __post_init__(self) -> None:
        """Validate every dimension is within range."""
        for dimension in self.dimensions():
            rating = getattr(self, dimension)
            if (
                isinstance(rating, bool)
                or not isinstance(rating, int)
                or not self.MIN_RATING <= rating <= self.MAX_RATING
            ):
                raise ValueError(
                    f"Invalid {dimension} rating. Must be between "
                    f"{self.MIN_RATING} and {self.MAX_RATING}"
                )

    @classmethod
    def dimensions(cls) -> tuple:
        """Names of the rating dimensions."""
        return tuple(f.name for f in fields(cls))

    @property
    def average(self) -> float:
        """Mean rating across all dimensions."""
        values = [getattr(self, dimension) for dimension in self.dimensions()]
        return sum(values) / len(values)


@dataclass(frozen=True)
class VendorResponse:
    """The vendor's single public answer to a review."""

    comment: str
    responded_at: datetime
    is_public: bool = True


@dataclass(frozen=True)
class ReviewEdit:
    """What a review said before its author edited it."""

    edited_at: datetime
    previous_rating: int
    previous_comment: str
    edit_reason: str


@dataclass(frozen=True)
class Review:
    """Customer-authored rating of exactly one completed job.

    Attributes:
        review_id: Unique review identifier.
        job_id: Reviewed job; at most one review per job.
        customer_id: Author.
        vendor_id: Reviewed vendor.
        service_id: Booked service.
        ratings: Per-dimension ratings.
        comment: Free-text review.
        created_at: Submission timestamp.
        vendor_response: Optional answer from the vendor.
        helpful_voters: Participants who marked the review helpful.
        edit_history: Earlier versions, oldest first.
    """

    review_id: ReviewId
    job_id: JobId
    customer_id: ParticipantId
    vendor_id: ParticipantId
    service_id: str
    ratings: RatingSet
    comment: str
    created_at: datetime
    title: Optional[str] = None
    is_recommended: bool = True
    would_hire_again: bool = True
    completed_on_time: bool = True
    matched_description: bool = True
    vendor_response: Optional[VendorResponse] = None
    helpful_voters: FrozenSet[ParticipantId] = frozenset()
    edit_history: Tuple[ReviewEdit, ...] = ()

    @property
    def average_rating(self) -> float:
        """Mean of the review's ratings, rounded to one decimal."""
        return round(self.ratings.average, 1)

    @property
    def helpful_count(self) -> int:
        """Number of participants who marked the review helpful."""
        return len(self.helpful_voters)

    def has_vendor_response(self) -> bool:
        """Check if the vendor already answered."""
        return self.vendor_response is not None and bool(
            self.vendor_response.comment.strip()
        )
