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

"""Job routes: booking lifecycle, thread, files, timeline and job review."""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from bookflow.core.jobs.reviews import ReviewPayload
from bookflow.core.jobs.value_objects import ParticipantId
from bookflow.orchestrator.jobs.commands import (
    AttachFileCommand,
    ChangeStatusCommand,
    CreateJobCommand,
    PostMessageCommand,
    SubmitReviewCommand,
)
from bookflow.orchestrator.jobs.use_cases import (
    AttachFileUseCase,
    AvailableTransitionsUseCase,
    ChangeStatusUseCase,
    CreateJobUseCase,
    GetJobReviewUseCase,
    GetJobUseCase,
    GetTimelineUseCase,
    JobStatsUseCase,
    ListJobsUseCase,
    PostMessageUseCase,
    SubmitReviewUseCase,
)
from bookflow.orchestrator.jobs.use_cases.common import (
    parse_job_id,
    parse_participant_id,
)

from ..dependencies import Container, get_container, get_current_participant
from .schemas import (
    ChangeStatusRequest,
    CreateJobRequest,
    PostMessageRequest,
    SubmitReviewRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def _split_statuses(values: Optional[List[str]]) -> List[str]:
    """Accept both repeated ``status`` params and comma-separated lists."""
    statuses: List[str] = []
    for value in values or []:
        statuses.extend(part.strip() for part in value.split(",") if part.strip())
    return statuses


@router.post("", status_code=status.HTTP_201_CREATED)
def create_job(
    request: CreateJobRequest,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Create a booking request as the calling customer."""
    command = CreateJobCommand(
        customer_id=caller,
        vendor_id=parse_participant_id(request.vendor_id, "vendor_id"),
        service_id=request.service_id,
        title=request.title,
        description=request.description,
        pricing_type=request.pricing_type,
        amount=request.amount,
        currency=request.currency,
        preferred_date=request.preferred_date,
        requirements=tuple(request.requirements),
        message=request.message,
    )
    use_case = CreateJobUseCase(container.job_repo, container.job_id_generator)
    return asdict(use_case.execute(command))


@router.get("")
def list_jobs(
    role: str = Query("customer"),
    status_filter: Optional[List[str]] = Query(None, alias="status"),
    page: int = Query(1),
    limit: int = Query(10),
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """List the caller's jobs as customer or vendor."""
    response = ListJobsUseCase(container.job_repo).execute(
        caller,
        role,
        statuses=_split_statuses(status_filter),
        page=page,
        limit=limit,
    )
    return asdict(response)


@router.get("/stats")
def job_stats(
    role: str = Query("customer"),
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Dashboard counts for the caller."""
    return asdict(JobStatsUseCase(container.job_repo).execute(caller, role))


@router.get("/{job_id}")
def get_job(
    job_id: str,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Fetch one job."""
    response = GetJobUseCase(container.job_repo).execute(parse_job_id(job_id), caller)
    return asdict(response)


@router.put("/{job_id}/status")
def change_status(
    job_id: str,
    request: ChangeStatusRequest,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Move the job to another status."""
    command = ChangeStatusCommand(
        job_id=parse_job_id(job_id),
        target_status=request.status,
        actor_id=caller,
        actor_role=request.role,
        reason=request.reason,
        extra=request.extra(),
    )
    return asdict(ChangeStatusUseCase(container.job_repo).execute(command))


@router.get("/{job_id}/transitions")
def available_transitions(
    job_id: str,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> List[Dict[str, Any]]:
    """Actions the caller may take from the job's current status."""
    options = AvailableTransitionsUseCase(container.job_repo).execute(
        parse_job_id(job_id), caller
    )
    return [asdict(option) for option in options]


@router.post("/{job_id}/messages", status_code=status.HTTP_201_CREATED)
def post_message(
    job_id: str,
    request: PostMessageRequest,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Append a message to the job's thread."""
    command = PostMessageCommand(
        job_id=parse_job_id(job_id), actor_id=caller, text=request.message
    )
    return asdict(PostMessageUseCase(container.job_repo).execute(command))


@router.post("/{job_id}/files", status_code=status.HTTP_201_CREATED)
def attach_file(
    job_id: str,
    file: UploadFile = File(...),
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Upload a file and attach it to the job."""
    command = AttachFileCommand(
        job_id=parse_job_id(job_id),
        actor_id=caller,
        name=file.filename or "",
        content_type=file.content_type or "application/octet-stream",
        content=file.file.read(),
    )
    use_case = AttachFileUseCase(
        container.job_repo,
        container.blob_store,
        max_upload_bytes=container.storage_config.max_upload_bytes,
    )
    return asdict(use_case.execute(command))


@router.get("/{job_id}/timeline")
def get_timeline(
    job_id: str,
    event_type: Optional[str] = Query(None, alias="type"),
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> List[Dict[str, Any]]:
    """Unified activity feed, newest first."""
    events = GetTimelineUseCase(container.job_repo).execute(
        parse_job_id(job_id), caller, kind=event_type
    )
    return [asdict(event) for event in events]


@router.get("/{job_id}/review")
def get_job_review(
    job_id: str,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """The job's review, if any, and whether the caller may submit one."""
    use_case = GetJobReviewUseCase(container.job_repo, container.review_repo)
    return asdict(use_case.execute(parse_job_id(job_id), caller))


@router.post("/{job_id}/review", status_code=status.HTTP_201_CREATED)
def submit_review(
    job_id: str,
    request: SubmitReviewRequest,
    caller: ParticipantId = Depends(get_current_participant),
    container: Container = Depends(get_container),
) -> Dict[str, Any]:
    """Review a completed job as its customer."""
    command = SubmitReviewCommand(
        job_id=parse_job_id(job_id),
        caller_id=caller,
        payload=ReviewPayload(
            ratings=request.ratings,
            comment=request.comment,
            title=request.title,
            is_recommended=request.is_recommended,
            would_hire_again=request.would_hire_again,
            completed_on_time=request.completed_on_time,
            matched_description=request.matched_description,
        ),
    )
    use_case = SubmitReviewUseCase(
        container.job_repo, container.review_repo, container.uuid_generator
    )
    return asdict(use_case.execute(command))
