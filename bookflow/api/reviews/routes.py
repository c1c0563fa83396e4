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

"""Review routes addressed by review id, and vendor and service listings."""

from dataclasses import asdict
from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from bookflow.core.jobs.reviews import ReviewChanges
from bookflow.core.jobs.value_objects import ParticipantId
from bookflow.orchestrator.jobs.commands import (
    MarkReviewHelpfulCommand,
    SubmitVendorResponseCommand,
    UpdateReviewCommand,
)
from bookflow.orchestrator.jobs.use_cases import (
    ListServiceReviewsUseCase,
    ListVendorReviewsUseCase,
    MarkReviewHelpfulUseCase,
    SubmitVendorResponseUseCase,
    UpdateReviewUseCase,
    VendorReviewSummaryUseCase,
)
from bookflow.orchestrator.jobs.use_cases.common import (
    parse_participant_id,
    parse_review_id,
)

from ..dependencies import Container, get_container, get_current_participant
from ..jobs.schemas import UpdateReviewRequest, VendorResponseRequest

router = APIRouter(tags=["Reviews"])


@router.post("/reviews/{review_id}/response")
def submit_vendor_response(
    review_id: str,
    request: VendorResponseRequest,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Reply to a review as the reviewed vendor."""
    command = SubmitVendorResponseCommand(
        review_id=parse_review_id(review_id),
        caller_id=caller,
        text=request.comment,
        is_public=request.is_public,
    )
    use_case = SubmitVendorResponseUseCase(container.review_repo)
    return asdict(use_case.execute(command))


@router.post("/reviews/{review_id}/helpful")
def mark_review_helpful(
    review_id: str,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Record the caller's helpful vote."""
    command = MarkReviewHelpfulCommand(
        review_id=parse_review_id(review_id), voter_id=caller
    )
    return asdict(MarkReviewHelpfulUseCase(container.review_repo).execute(command))


@router.get("/vendors/{vendor_id}/reviews/summary")
def vendor_review_summary(
    vendor_id: str,
    _caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Aggregate ratings of a vendor."""
    use_case = VendorReviewSummaryUseCase(container.review_repo)
    return asdict(use_case.execute(parse_participant_id(vendor_id, "vendor_id")))


@router.put("/reviews/{review_id}")
def update_review(
    review_id: str,
    request: UpdateReviewRequest,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Edit a review as its author."""
    command = UpdateReviewCommand(
        review_id=parse_review_id(review_id),
        caller_id=caller,
        changes=ReviewChanges(
            **request.model_dump(exclude={"edit_reason"}, exclude_none=True)
        ),
        edit_reason=request.edit_reason,
    )
    return asdict(UpdateReviewUseCase(container.review_repo).execute(command))


@router.get("/vendors/{vendor_id}/reviews")
def list_vendor_reviews(
    vendor_id: str,
    page: int = Query(1),
    limit: int = Query(10),
    sort: str = Query("newest"),
    _caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """One page of a vendor's reviews."""
    response = ListVendorReviewsUseCase(container.review_repo).execute(
        parse_participant_id(vendor_id, "vendor_id"), page=page, limit=limit, sort=sort
    )
    return asdict(response)


@router.get("/services/{service_id}/reviews")
def list_service_reviews(
    service_id: str,
    page: int = Query(1),
    limit: int = Query(10),
    _caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """One page of a service's reviews, newest first."""
    response = ListServiceReviewsUseCase(container.review_repo).execute(
        service_id, page=page, limit=limit
    )
    return asdict(response)
