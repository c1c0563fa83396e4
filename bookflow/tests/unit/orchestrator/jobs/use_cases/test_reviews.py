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

"""Unit tests for the review use cases."""

import pytest

from bookflow.core.jobs.exceptions import (
    AuthorizationError,
    DuplicateResponseError,
    IneligibilityReason,
    IneligibleReviewError,
    ReviewNotFoundError,
    ValidationError,
)
from bookflow.core.jobs.reviews import ReviewChanges, ReviewPayload
from bookflow.core.jobs.value_objects import JobStatus, ParticipantId, ReviewId
from bookflow.orchestrator.jobs.commands import (
    MarkReviewHelpfulCommand,
    SubmitReviewCommand,
    SubmitVendorResponseCommand,
    UpdateReviewCommand,
)
from bookflow.orchestrator.jobs.use_cases import (
    GetJobReviewUseCase,
    ListServiceReviewsUseCase,
    ListVendorReviewsUseCase,
    MarkReviewHelpfulUseCase,
    SubmitReviewUseCase,
    SubmitVendorResponseUseCase,
    UpdateReviewUseCase,
    VendorReviewSummaryUseCase,
)

RATINGS = {
    "overall": 5,
    "quality": 4,
    "communication": 5,
    "punctuality": 5,
    "professionalism": 4,
    "value": 3,
}


@pytest.fixture
def submit(job_repo, review_repo, uuid_generator):
    """Submit a review of ``job`` as ``caller_id``."""
    use_case = SubmitReviewUseCase(job_repo, review_repo, uuid_generator)

    def _submit(job, caller_id, **payload):
        values = {"ratings": dict(RATINGS), "comment": "Very thorough", **payload}
        return use_case.execute(
            SubmitReviewCommand(
                job_id=job.job_id,
                caller_id=caller_id,
                payload=ReviewPayload(**values),
            )
        )

    return _submit


class TestSubmitReviewUseCase:
    """Tests for SubmitReviewUseCase."""

    def test_submit_review(self, submit, stored_job, customer_id):
        """The review is stored with a generated id."""
        job = stored_job(JobStatus.COMPLETED)

        response = submit(job, customer_id, title="Great")

        assert response.review_id == "123e4567-e89b-12d3-a456-426614174001"
        assert response.job_id == str(job.job_id)
        assert response.vendor_id == "vendor-1"
        assert response.ratings == RATINGS
        assert response.average_rating == 4.3
        assert response.vendor_response is None

    def test_second_review_rejected(self, submit, stored_job, customer_id):
        """Exactly one review per job."""
        job = stored_job(JobStatus.COMPLETED)
        submit(job, customer_id)

        with pytest.raises(IneligibleReviewError) as exc_info:
            submit(job, customer_id)

        assert exc_info.value.reason == IneligibilityReason.ALREADY_REVIEWED

    def test_unfinished_job_rejected(self, submit, stored_job, customer_id):
        """Jobs that are not completed cannot be reviewed."""
        job = stored_job(JobStatus.DELIVERED)

        with pytest.raises(IneligibleReviewError) as exc_info:
            submit(job, customer_id)

        assert exc_info.value.reason == IneligibilityReason.JOB_NOT_COMPLETED


class TestVendorResponseUseCase:
    """Tests for SubmitVendorResponseUseCase."""

    def test_respond_once(self, submit, stored_job, customer_id, vendor_id, review_repo):
        """The vendor answers once; the second answer is refused."""
        review = submit(stored_job(JobStatus.COMPLETED), customer_id)
        use_case = SubmitVendorResponseUseCase(review_repo)
        command = SubmitVendorResponseCommand(
            review_id=ReviewId(review.review_id), caller_id=vendor_id, text="Thanks!"
        )

        response = use_case.execute(command)

        assert response.vendor_response["comment"] == "Thanks!"
        assert response.vendor_response["is_public"] is True
        with pytest.raises(DuplicateResponseError):
            use_case.execute(command)

    def test_customer_cannot_respond(self, submit, stored_job, customer_id, review_repo):
        """Only the reviewed vendor may respond."""
        review = submit(stored_job(JobStatus.COMPLETED), customer_id)

        with pytest.raises(AuthorizationError):
            SubmitVendorResponseUseCase(review_repo).execute(
                SubmitVendorResponseCommand(
                    review_id=ReviewId(review.review_id),
                    caller_id=customer_id,
                    text="Me too",
                )
            )

    def test_missing_review(self, review_repo, vendor_id):
        """Unknown reviews raise ReviewNotFoundError."""
        with pytest.raises(ReviewNotFoundError):
            SubmitVendorResponseUseCase(review_repo).execute(
                SubmitVendorResponseCommand(
                    review_id=ReviewId("123e4567-e89b-12d3-a456-426614174999"),
                    caller_id=vendor_id,
                    text="Thanks",
                )
            )


class TestMarkReviewHelpfulUseCase:
    """Tests for MarkReviewHelpfulUseCase."""

    def test_vote(self, submit, stored_job, customer_id, stranger_id, review_repo):
        """Votes are counted once per participant."""
        review = submit(stored_job(JobStatus.COMPLETED), customer_id)
        use_case = MarkReviewHelpfulUseCase(review_repo)
        command = MarkReviewHelpfulCommand(
            review_id=ReviewId(review.review_id), voter_id=stranger_id
        )

        assert use_case.execute(command).helpful_count == 1
        with pytest.raises(ValidationError):
            use_case.execute(command)


class TestGetJobReviewUseCase:
    """Tests for GetJobReviewUseCase."""

    def test_customer_may_review(self, job_repo, review_repo, stored_job, customer_id):
        """A completed, unreviewed job is open to its customer."""
        job = stored_job(JobStatus.COMPLETED)

        response = GetJobReviewUseCase(job_repo, review_repo).execute(
            job.job_id, customer_id
        )

        assert response.can_review is True
        assert response.ineligibility_reason is None
        assert response.review is None

    def test_vendor_sees_review(
        self, submit, job_repo, review_repo, stored_job, customer_id, vendor_id
    ):
        """The vendor sees the review but cannot write one."""
        job = stored_job(JobStatus.COMPLETED)
        submit(job, customer_id)

        response = GetJobReviewUseCase(job_repo, review_repo).execute(
            job.job_id, vendor_id
        )

        assert response.can_review is False
        assert response.ineligibility_reason == "not_customer"
        assert response.review.comment == "Very thorough"

    def test_stranger_rejected(self, job_repo, review_repo, stored_job, stranger_id):
        """Non-participants are refused."""
        job = stored_job(JobStatus.COMPLETED)

        with pytest.raises(AuthorizationError):
            GetJobReviewUseCase(job_repo, review_repo).execute(job.job_id, stranger_id)


class TestVendorReviewSummaryUseCase:
    """Tests for VendorReviewSummaryUseCase."""

    def test_summary(self, submit, stored_job, customer_id, vendor_id, review_repo):
        """Ratings are averaged over the vendor's reviews."""
        submit(stored_job(JobStatus.COMPLETED), customer_id)
        submit(stored_job(JobStatus.COMPLETED), customer_id, is_recommended=False)

        response = VendorReviewSummaryUseCase(review_repo).execute(vendor_id)

        assert response.vendor_id == "vendor-1"
        assert response.review_count == 2
        assert response.dimension_averages["value"] == 3.0
        assert response.recommendation_rate == 50.0
        assert response.rating_distribution == {"5": 2, "4": 0, "3": 0, "2": 0, "1": 0}

    def test_no_reviews(self, review_repo):
        """Vendors without reviews get an empty summary."""
        response = VendorReviewSummaryUseCase(review_repo).execute(
            ParticipantId("vendor-2")
        )

        assert response.review_count == 0
        assert response.average_rating == 0.0


class TestUpdateReviewUseCase:
    """Tests for UpdateReviewUseCase."""

    def test_author_edits(self, submit, stored_job, customer_id, review_repo):
        """The edit is applied and the previous version recorded."""
        review = submit(stored_job(JobStatus.COMPLETED), customer_id)

        response = UpdateReviewUseCase(review_repo).execute(
            UpdateReviewCommand(
                review_id=ReviewId(review.review_id),
                caller_id=customer_id,
                changes=ReviewChanges(comment="Thorough but late"),
                edit_reason="Arrived late",
            )
        )

        assert response.comment == "Thorough but late"
        assert response.edit_history[0]["previous_comment"] == "Very thorough"
        assert response.edit_history[0]["previous_rating"] == 5
        assert response.edit_history[0]["edit_reason"] == "Arrived late"

    def test_vendor_cannot_edit(self, submit, stored_job, customer_id, vendor_id, review_repo):
        """Only the author may edit."""
        review = submit(stored_job(JobStatus.COMPLETED), customer_id)

        with pytest.raises(AuthorizationError):
            UpdateReviewUseCase(review_repo).execute(
                UpdateReviewCommand(
                    review_id=ReviewId(review.review_id),
                    caller_id=vendor_id,
                    changes=ReviewChanges(comment="Perfect"),
                )
            )

    def test_missing_review(self, review_repo, customer_id):
        """Unknown reviews raise ReviewNotFoundError."""
        with pytest.raises(ReviewNotFoundError):
            UpdateReviewUseCase(review_repo).execute(
                UpdateReviewCommand(
                    review_id=ReviewId("123e4567-e89b-12d3-a456-426614174999"),
                    caller_id=customer_id,
                    changes=ReviewChanges(comment="Hello"),
                )
            )


class TestListReviewsUseCases:
    """Tests for the vendor and service review listings."""

    @pytest.fixture
    def three_reviews(self, submit, stored_job, customer_id):
        """Three reviews of vendor-1; the last one is for service-2."""
        submit(stored_job(JobStatus.COMPLETED), customer_id)
        submit(stored_job(JobStatus.COMPLETED), customer_id)
        return submit(
            stored_job(JobStatus.COMPLETED, service_id="service-2"),
            customer_id,
            ratings={**RATINGS, "overall": 2},
        )

    def test_vendor_pages(self, three_reviews, review_repo, vendor_id):
        """Pages carry totals and navigation flags."""
        use_case = ListVendorReviewsUseCase(review_repo)

        first = use_case.execute(vendor_id, page=1, limit=2)
        second = use_case.execute(vendor_id, page=2, limit=2)

        assert (first.total, first.pages, len(first.reviews)) == (3, 2, 2)
        assert first.has_next and not first.has_prev
        assert len(second.reviews) == 1
        assert second.has_prev and not second.has_next

    def test_vendor_sorted_by_rating(self, three_reviews, review_repo, vendor_id):
        """lowest_rating puts the two-star review first."""
        response = ListVendorReviewsUseCase(review_repo).execute(
            vendor_id, sort="lowest_rating"
        )

        assert response.reviews[0].review_id == three_reviews.review_id

    def test_vendor_unknown_sort(self, review_repo, vendor_id):
        """Unknown sort orders are a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            ListVendorReviewsUseCase(review_repo).execute(vendor_id, sort="random")

        assert exc_info.value.field == "sort"

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, 101)])
    def test_invalid_paging(self, review_repo, vendor_id, page, limit):
        """Out-of-range paging values are rejected."""
        with pytest.raises(ValidationError):
            ListVendorReviewsUseCase(review_repo).execute(vendor_id, page=page, limit=limit)

    def test_service_reviews(self, three_reviews, review_repo):
        """Service listings only include that service's reviews."""
        use_case = ListServiceReviewsUseCase(review_repo)

        assert use_case.execute("service-1").total == 2
        only = use_case.execute("service-2")
        assert [r.review_id for r in only.reviews] == [three_reviews.review_id]

    def test_no_reviews(self, review_repo):
        """An unreviewed service gives an empty first page."""
        response = ListServiceReviewsUseCase(review_repo).execute("service-9")

        assert response.reviews == []
        assert response.total == 0
        assert response.pages == 0
        assert not response.has_next
