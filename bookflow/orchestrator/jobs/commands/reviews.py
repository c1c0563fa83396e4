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

"""Review command DTOs."""

from dataclasses import dataclass
from typing import Optional

from bookflow.core.jobs.reviews import ReviewChanges, ReviewPayload
from bookflow.core.jobs.value_objects import JobId, ParticipantId, ReviewId


@dataclass(frozen=True)
class SubmitReviewCommand:
    """Command for a customer to review a completed job."""

    job_id: JobId
    caller_id: ParticipantId
    payload: ReviewPayload
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class SubmitVendorResponseCommand:
    """Command for a vendor to answer a review once."""

    review_id: ReviewId
    caller_id: ParticipantId
    text: str
    is_public: bool = True
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class MarkReviewHelpfulCommand:
    """Command to record a helpful vote on a review."""

    review_id: ReviewId
    voter_id: ParticipantId
    correlation_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateReviewCommand:
    """Command for a review's author to edit it."""

    review_id: ReviewId
    caller_id: ParticipantId
    changes: ReviewChanges
    edit_reason: Optional[str] = None
    correlation_id: Optional[str] = None
