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

"""ChangeStatus command DTO."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from bookflow.core.jobs.value_objects import JobId, ParticipantId


@dataclass(frozen=True)
class ChangeStatusCommand:
    """Command to move a job to another status.

    Attributes:
        job_id: Job to transition.
        target_status: Requested status name.
        actor_id: Caller's subject identifier.
        actor_role: Role the caller claims (customer or vendor).
        reason: Optional reason; required on some transitions.
        extra: Target-specific side payload.
        correlation_id: Request correlation identifier for tracing.
    """

    job_id: JobId
    target_status: str
    actor_id: ParticipantId
    actor_role: str
    reason: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None
