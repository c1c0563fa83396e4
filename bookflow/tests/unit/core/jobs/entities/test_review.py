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

"""Unit tests for Review entity and ratings."""

from dataclasses import replace

import pytest

from bookflow.core.jobs.entities import RatingSet, Review, VendorResponse
from bookflow.core.jobs.value_objects import JobId, ParticipantId


def _ratings(**overrides):
    values = dict(
        overall=5, quality=4, communication=5, punctuality=4,
        professionalism=5, value=3,
    )
    values.update(overrides)
    return RatingSet(**values)


class TestRatingSet:
    """Tests for RatingSet value object."""

    def test_dimensions(self):
        """Six dimensions are rated."""
        assert RatingSet.dimensions() == (
            "overall", "quality", "communication",
            "punctuality", "professionalism", "value",
        )

    def test_average(self):
        """Average is the mean across dimensions."""
        assert _ratings().average == pytest.approx(26 / 6)

    @pytest.mark.parametrize("rating", [0, 6, -1, True, 4.5, "5"])
    def test_out_of_range(self, rating):
        """Ratings must be integers from 1 to 5."""
        with pytest.raises(ValueError, match="Invalid quality rating"):
            _ratings(quality=rating)


class TestReview:
    """Tests for Review entity."""

    @pytest.fixture
    def review(self, sample_review_id, sample_job_id, sample_timestamp):
        """A review without a vendor response."""
        return Review(
            review_id=sample_review_id,
            job_id=sample_job_id,
            customer_id=ParticipantId("customer-1"),
            vendor_id=ParticipantId("vendor-1"),
            service_id="service-1",
            ratings=_ratings(),
            comment="Spotless work",
            created_at=sample_timestamp,
        )

    def test_defaults(self, review):
        """New reviews have no response and no helpful votes."""
        assert review.helpful_count == 0
        assert review.edit_history == ()
        assert not review.has_vendor_response()
        assert review.average_rating == 4.3
        assert review.job_id == JobId("018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a11")

    def test_has_vendor_response(self, review, sample_timestamp):
        """A non-blank comment counts as a response."""
        answered = replace(
            review, vendor_response=VendorResponse("Thank you!", sample_timestamp)
        )
        assert answered.has_vendor_response()

    def test_blank_vendor_response_does_not_count(self, review, sample_timestamp):
        """A whitespace-only comment is treated as no response."""
        blank = replace(
            review, vendor_response=VendorResponse("   ", sample_timestamp)
        )
        assert not blank.has_vendor_response()
