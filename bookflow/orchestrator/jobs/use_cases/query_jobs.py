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

"""Read-side job use cases: single job, paginated listing, dashboard stats."""

import math
from typing import List, Optional

from bookflow.core.jobs.exceptions import ValidationError
from bookflow.core.jobs.repositories import JobRepository
from bookflow.core.jobs.services import JobStatsService
from bookflow.core.jobs.transitions import resolve_status_filter
from bookflow.core.jobs.value_objects import JobId, ParticipantId

from ..dtos import JobListResponse, JobResponse, JobStatsResponse
from .common import (
    DEFAULT_PAGE_SIZE,
    load_job,
    page_window,
    parse_role,
    require_participant,
    translate_infrastructure_errors,
)


class GetJobUseCase:
    """Return one job to either of its participants."""

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    def execute(self, job_id: JobId, caller_id: ParticipantId) -> JobResponse:
        """Fetch the job.

        Raises:
            JobNotFoundError: If the job does not exist.
            AuthorizationError: If the caller is not a participant.
        """
        job = load_job(self._job_repo, job_id)
        require_participant(job, caller_id)
        return JobResponse.from_entity(job)


class ListJobsUseCase:
    """List a participant's jobs, newest first, one page at a time.

    Status filters accept both the full and the grouped vocabulary.
    """

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    def execute(
        self,
        participant_id: ParticipantId,
        role: str,
        statuses: Optional[List[str]] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> JobListResponse:
        """Return one page of matching jobs.

        Raises:
            ValidationError: If role, statuses or paging values are invalid.
        """
        actor_role = parse_role(role)
        window = page_window(page, limit)

        status_filter = None
        if statuses:
            try:
                status_filter = resolve_status_filter(statuses)
            except ValueError as exc:
                raise ValidationError(str(exc), field="status") from exc

        with translate_infrastructure_errors("list_jobs"):
            jobs = self._job_repo.find_by_participant(
                participant_id, actor_role, status_filter
            )

        total = len(jobs)
        return JobListResponse(
            jobs=[JobResponse.from_entity(job) for job in jobs[window]],
            page=page,
            pages=math.ceil(total / limit),
            total=total,
            limit=limit,
        )


class JobStatsUseCase:
    """Dashboard counts over every job a participant takes part in."""

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    def execute(self, participant_id: ParticipantId, role: str) -> JobStatsResponse:
        """Count the participant's jobs per status group.

        Raises:
            ValidationError: If the role is unknown.
        """
        actor_role = parse_role(role)
        with translate_infrastructure_errors("job_stats"):
            jobs = self._job_repo.find_by_participant(participant_id, actor_role)
        return JobStatsResponse.from_stats(JobStatsService.compute(jobs))
