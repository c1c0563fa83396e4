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

"""Helpers shared by the job and review use cases."""

import logging
from contextlib import contextmanager
from typing import Iterator

from bookflow.core.jobs.entities import Actor, Job, Review
from bookflow.core.jobs.exceptions import (
    AuthorizationError,
    InfrastructureError,
    JobDomainError,
    JobNotFoundError,
    ReviewNotFoundError,
    ValidationError,
)
from bookflow.core.jobs.repositories import JobRepository, ReviewRepository
from bookflow.core.jobs.value_objects import (
    ActorRole,
    JobId,
    JobStatus,
    ParticipantId,
    ReviewId,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@contextmanager
def translate_infrastructure_errors(operation: str) -> Iterator[None]:
    """Wrap unexpected collaborator failures into ``InfrastructureError``.

    Domain errors pass through untouched.

    Args:
        operation: Short name of the operation, used in the error and log.
    """
    try:
        yield
    except JobDomainError:
        raise
    except Exception as exc:
        logger.error(
            "Infrastructure failure during %s: %s", operation, type(exc).__name__
        )
        raise InfrastructureError(operation=operation) from exc


def load_job(job_repo: JobRepository, job_id: JobId) -> Job:
    """Fetch a job or raise ``JobNotFoundError``."""
    with translate_infrastructure_errors("load_job"):
        job = job_repo.find_by_id(job_id)
    if job is None:
        raise JobNotFoundError(job_id=str(job_id))
    return job


def load_review(review_repo: ReviewRepository, review_id: ReviewId) -> Review:
    """Fetch a review or raise ``ReviewNotFoundError``."""
    with translate_infrastructure_errors("load_review"):
        review = review_repo.find_by_id(review_id)
    if review is None:
        raise ReviewNotFoundError(review_ref=str(review_id))
    return review


def require_participant(job: Job, actor_id: ParticipantId) -> None:
    """Raise ``AuthorizationError`` unless ``actor_id`` is a party of ``job``."""
    if not Actor(actor_id).is_participant_of(job):
        logger.warning("Non-participant read attempted on job %s", job.job_id)
        raise AuthorizationError(actor_id=str(actor_id), resource=f"job {job.job_id}")


def parse_job_id(value: str) -> JobId:
    """Build a JobId from raw input, raising ``ValidationError`` if malformed."""
    try:
        return JobId(value)
    except ValueError as exc:
        raise ValidationError(str(exc), field="job_id") from exc


def parse_review_id(value: str) -> ReviewId:
    """Build a ReviewId from raw input, raising ``ValidationError`` if malformed."""
    try:
        return ReviewId(value)
    except ValueError as exc:
        raise ValidationError(str(exc), field="review_id") from exc


def parse_participant_id(value: str, field: str = "participant_id") -> ParticipantId:
    """Build a ParticipantId from raw input."""
    try:
        return ParticipantId(value)
    except ValueError as exc:
        raise ValidationError(str(exc), field=field) from exc


def parse_status(value: str) -> JobStatus:
    """Parse a status name, raising ``ValidationError`` if unknown."""
    try:
        return JobStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown status: {value}", field="status") from None


def parse_role(value: str) -> ActorRole:
    """Parse a role name, raising ``ValidationError`` if unknown."""
    try:
        return ActorRole(value)
    except ValueError:
        raise ValidationError(f"Unknown role: {value}", field="role") from None


def page_window(page: int, limit: int) -> slice:
    """Validate paging values and return the slice selecting that page.

    Raises:
        ValidationError: If ``page`` is below 1 or ``limit`` is out of range.
    """
    if page < 1:
        raise ValidationError("page must be at least 1", field="page")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValidationError(
            f"limit must be between 1 and {MAX_PAGE_SIZE}", field="limit"
        )
    start = (page - 1) * limit
    return slice(start, start + limit)
