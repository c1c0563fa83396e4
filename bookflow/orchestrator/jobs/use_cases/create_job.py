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

"""CreateJob use case implementation."""

import logging
from datetime import datetime, timezone
from typing import Tuple

from bookflow.core.jobs.entities import (
    Job,
    JobMessage,
    Pricing,
    Scheduling,
    StatusHistoryEntry,
)
from bookflow.core.jobs.exceptions import JobAlreadyExistsError, ValidationError
from bookflow.core.jobs.messaging import MAX_MESSAGE_LENGTH, system_message
from bookflow.core.jobs.repositories import JobIdGenerator, JobRepository
from bookflow.core.jobs.state_machine import parse_datetime
from bookflow.core.jobs.transitions import ENTRY_STATUS
from bookflow.core.jobs.value_objects import JobId, JobNumber, MessageKind, PricingType

from ..commands import CreateJobCommand
from ..dtos import JobResponse
from .common import translate_infrastructure_errors

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 1000


class CreateJobUseCase:
    """Use case for creating a new booking.

    The job starts in the graph's entry status with:
    - One seeded history entry attributed to the customer
    - One system message announcing the booking request
    - The customer's opening message, if one was supplied

    Attributes:
        job_repo: Job repository port.
        job_id_generator: Job identifier generator.
    """

    def __init__(
        self,
        job_repo: JobRepository,
        job_id_generator: JobIdGenerator,
    ) -> None:
        """Initialize use case with repository dependencies.

        Args:
            job_repo: Job repository implementation.
            job_id_generator: Job identifier generator to use.
        """
        self._job_repo = job_repo
        self._job_id_generator = job_id_generator

    def execute(self, command: CreateJobCommand) -> JobResponse:
        """Execute job creation.

        Args:
            command: CreateJob command with booking details.

        Returns:
            JobResponse DTO with created job details.

        Raises:
            ValidationError: If the booking details are invalid.
            JobAlreadyExistsError: If the generated id is taken, or the job
                number is still taken after one regenerated id.
            InfrastructureError: If the store fails.
        """
        self._validate(command)
        job = self._build_job(command, self._generate_job_id(command))
        try:
            self._add(job)
        except JobAlreadyExistsError as exc:
            if exc.job_id != str(job.job_number):
                raise
            logger.warning(
                "Job number %s already taken; regenerating job id", job.job_number
            )
            job = self._build_job(command, self._generate_job_id(command))
            self._add(job)

        logger.info("Job %s created as %s", job.job_id, job.job_number)
        return self._to_response(job)

    def _add(self, job: Job) -> None:
        with translate_infrastructure_errors("create_job"):
            self._job_repo.add(job)

    def _validate(self, command: CreateJobCommand) -> None:
        """Reject incomplete or inconsistent booking requests."""
        if command.customer_id == command.vendor_id:
            raise ValidationError("Vendors cannot book their own services")
        if not command.service_id or not command.service_id.strip():
            raise ValidationError("service_id is required", field="service_id")
        title = (command.title or "").strip()
        if not title:
            raise ValidationError("title is required", field="title")
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )
        if len(command.description or "") > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                field="description",
            )
        if command.message and len(command.message.strip()) > MAX_MESSAGE_LENGTH:
            raise ValidationError(
                f"message cannot exceed {MAX_MESSAGE_LENGTH} characters",
                field="message",
            )
        if isinstance(command.amount, bool) or command.amount < 0:
            raise ValidationError("amount must be a non-negative number", field="amount")

    def _generate_job_id(self, command: CreateJobCommand) -> JobId:
        """Generate a new JobId and ensure it is not already used."""
        job_id = self._job_id_generator.generate()
        with translate_infrastructure_errors("create_job"):
            existing = self._job_repo.find_by_id(job_id)
        if existing is not None:
            raise JobAlreadyExistsError(
                job_id=str(job_id),
                correlation_id=command.correlation_id,
            )
        return job_id

    def _build_job(self, command: CreateJobCommand, job_id: JobId) -> Job:
        """Build the Job aggregate for a booking request."""
        now = self._now_utc()
        job_number = JobNumber.from_job_id(job_id)
        return Job(
            job_id=job_id,
            job_number=job_number,
            customer_id=command.customer_id,
            vendor_id=command.vendor_id,
            service_id=command.service_id.strip(),
            title=command.title.strip(),
            description=(command.description or "").strip(),
            pricing=self._build_pricing(command),
            created_at=now,
            status=ENTRY_STATUS,
            status_history=(
                StatusHistoryEntry(
                    status=ENTRY_STATUS,
                    timestamp=now,
                    actor_id=command.customer_id,
                ),
            ),
            messages=self._opening_messages(command, job_number, now),
            scheduling=Scheduling(
                preferred_date=(
                    parse_datetime(command.preferred_date, "preferred_date")
                    if command.preferred_date is not None else None
                ),
            ),
            requirements=tuple(r.strip() for r in command.requirements if r.strip()),
        )

    @staticmethod
    def _build_pricing(command: CreateJobCommand) -> Pricing:
        try:
            pricing_type = PricingType(command.pricing_type)
        except ValueError:
            raise ValidationError(
                f"Unknown pricing type: {command.pricing_type}", field="pricing_type"
            ) from None
        return Pricing(
            pricing_type=pricing_type,
            amount=float(command.amount),
            currency=command.currency or "USD",
            estimated_total=float(command.amount),
        )

    @staticmethod
    def _opening_messages(
        command: CreateJobCommand,
        job_number: JobNumber,
        now: datetime,
    ) -> Tuple[JobMessage, ...]:
        messages = [
            system_message(
                command.customer_id, f"Booking request {job_number} created", now
            )
        ]
        if command.message and command.message.strip():
            messages.append(
                JobMessage(
                    sender_id=command.customer_id,
                    message=command.message.strip(),
                    kind=MessageKind.REGULAR,
                    timestamp=now,
                )
            )
        return tuple(messages)

    def _to_response(self, job: Job) -> JobResponse:
        """Map domain entity to response DTO."""
        return JobResponse.from_entity(job, is_new=True)

    def _now_utc(self) -> datetime:
        """Return current UTC timestamp."""
        return datetime.now(timezone.utc)
