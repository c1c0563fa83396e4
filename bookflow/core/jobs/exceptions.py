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

"""Domain exceptions for Job and Review aggregates."""

from enum import Enum
from typing import Optional


class JobDomainError(Exception):
    """Base exception for all job domain errors."""

    code = "domain_error"

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


class ValidationError(JobDomainError):
    """Required input is missing or invalid."""

    code = "validation_error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable error description.
            field: Name of the offending input field, if any.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message, correlation_id=correlation_id)
        self.field = field


class InvalidTransitionError(JobDomainError):
    """Requested edge does not exist in the transition graph."""

    code = "invalid_transition"

    def __init__(
        self,
        job_id: str,
        from_status: str,
        to_status: str,
        role: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize invalid transition error.

        Args:
            job_id: Identifier of the job.
            from_status: Current status.
            to_status: Attempted target status.
            role: Role the caller acted in.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"As a {role}, you cannot change job {job_id} "
            f"from {from_status} to {to_status}",
            correlation_id=correlation_id
        )
        self.job_id = job_id
        self.from_status = from_status
        self.to_status = to_status
        self.role = role


class AuthorizationError(JobDomainError):
    """Actor is not a participant, or not in the role the operation needs."""

    code = "forbidden"

    def __init__(
        self,
        actor_id: str,
        resource: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize authorization error.

        Args:
            actor_id: The caller's subject identifier.
            resource: Description of the resource that was denied.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Access denied for {actor_id} on {resource}",
            correlation_id=correlation_id
        )
        self.actor_id = actor_id
        self.resource = resource


class ConflictError(JobDomainError):
    """Optimistic-concurrency precondition failed during update."""

    code = "conflict"

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        expected: str,
        actual: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize conflict error.

        Args:
            entity_type: Type of entity (Job or Review).
            entity_id: Identifier of the entity.
            expected: State the caller read before updating.
            actual: State currently stored.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Concurrent update on {entity_type} {entity_id}: "
            f"expected {expected}, found {actual}",
            correlation_id=correlation_id
        )
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual


class NotFoundError(JobDomainError):
    """Referenced entity does not exist."""

    code = "not_found"


class JobNotFoundError(NotFoundError):
    """Job does not exist in the system."""

    def __init__(self, job_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize job not found error.

        Args:
            job_id: The job ID that was not found.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Job not found: {job_id}",
            correlation_id=correlation_id
        )
        self.job_id = job_id


class ReviewNotFoundError(NotFoundError):
    """Review does not exist in the system."""

    def __init__(self, review_ref: str, correlation_id: Optional[str] = None) -> None:
        super().__init__(
            f"Review not found: {review_ref}",
            correlation_id=correlation_id
        )
        self.review_ref = review_ref


class JobAlreadyExistsError(JobDomainError):
    """Job with the given ID or job number already exists."""

    code = "already_exists"

    def __init__(self, job_id: str, correlation_id: Optional[str] = None) -> None:
        """Initialize job already exists error.

        Args:
            job_id: The job ID or job number that already exists.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Job already exists: {job_id}",
            correlation_id=correlation_id
        )
        self.job_id = job_id


class IneligibilityReason(str, Enum):
    """Why a review cannot be submitted."""

    JOB_NOT_COMPLETED = "job_not_completed"
    NOT_CUSTOMER = "not_customer"
    ALREADY_REVIEWED = "already_reviewed"


class IneligibleReviewError(JobDomainError):
    """Review preconditions are not met."""

    code = "ineligible_review"

    _MESSAGES = {
        IneligibilityReason.JOB_NOT_COMPLETED: "Can only review completed jobs",
        IneligibilityReason.NOT_CUSTOMER: "Only the job's customer can review it",
        IneligibilityReason.ALREADY_REVIEWED: "Review already exists for this job",
    }

    def __init__(
        self,
        job_id: str,
        reason: IneligibilityReason,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize ineligible review error.

        Args:
            job_id: The job the review was submitted for.
            reason: Which precondition failed.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"{self._MESSAGES[reason]}: {job_id}",
            correlation_id=correlation_id
        )
        self.job_id = job_id
        self.reason = reason


class DuplicateResponseError(JobDomainError):
    """Vendor already responded to the review."""

    code = "duplicate_response"

    def __init__(self, review_id: str, correlation_id: Optional[str] = None) -> None:
        super().__init__(
            f"Vendor already responded to review {review_id}",
            correlation_id=correlation_id
        )
        self.review_id = review_id


class InfrastructureError(JobDomainError):
    """A collaborator (store, blob store, verifier) failed unexpectedly."""

    code = "infrastructure_error"

    def __init__(self, operation: str, correlation_id: Optional[str] = None) -> None:
        super().__init__(
            f"Infrastructure failure during {operation}",
            correlation_id=correlation_id
        )
        self.operation = operation
