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

"""ChangeStatus and AvailableTransitions use cases."""

from typing import List

from bookflow.core.jobs.entities import Actor
from bookflow.core.jobs.exceptions import AuthorizationError
from bookflow.core.jobs.repositories import JobRepository
from bookflow.core.jobs.state_machine import JobStateMachine
from bookflow.core.jobs.transitions import available_transitions
from bookflow.core.jobs.value_objects import JobId, ParticipantId

from ..commands import ChangeStatusCommand
from ..dtos import JobResponse, TransitionOptionResponse
from .common import load_job, parse_role, parse_status, translate_infrastructure_errors


class ChangeStatusUseCase:
    """Use case for moving a job along the transition graph.

    Attributes:
        job_repo: Job repository port.
        state_machine: Validates and applies the transition.
    """

    def __init__(self, job_repo: JobRepository) -> None:
        """Initialize use case with repository dependencies.

        Args:
            job_repo: Job repository implementation.
        """
        self._job_repo = job_repo
        self._state_machine = JobStateMachine(job_repo)

    def execute(self, command: ChangeStatusCommand) -> JobResponse:
        """Execute the status change.

        Args:
            command: ChangeStatus command.

        Returns:
            JobResponse DTO with the job as stored after the change.

        Raises:
            ValidationError: If the status, role, reason or payload is invalid.
            JobNotFoundError: If the job does not exist.
            InvalidTransitionError: If the edge does not exist for the role.
            AuthorizationError: If the caller does not hold the claimed role.
            ConflictError: If another change landed first.
        """
        target = parse_status(command.target_status)
        role = parse_role(command.actor_role)
        job = load_job(self._job_repo, command.job_id)

        with translate_infrastructure_errors("change_status"):
            updated = self._state_machine.transition(
                job,
                target,
                command.actor_id,
                role,
                reason=command.reason,
                extra=command.extra,
            )
        return JobResponse.from_entity(updated)


class AvailableTransitionsUseCase:
    """List the actions the caller may take on a job in its current status."""

    def __init__(self, job_repo: JobRepository) -> None:
        self._job_repo = job_repo

    def execute(
        self,
        job_id: JobId,
        caller_id: ParticipantId
    ) -> List[TransitionOptionResponse]:
        """Return the caller's outgoing edges, empty for terminal statuses.

        Raises:
            JobNotFoundError: If the job does not exist.
            AuthorizationError: If the caller is not a participant.
        """
        job = load_job(self._job_repo, job_id)
        role = Actor(caller_id).role_in(job)
        if role is None:
            raise AuthorizationError(actor_id=str(caller_id), resource=f"job {job_id}")
        return [
            TransitionOptionResponse.from_edge(edge)
            for edge in available_transitions(job, role)
        ]
