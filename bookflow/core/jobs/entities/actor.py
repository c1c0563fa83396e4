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

"""Actor entity: the authenticated party invoking an operation."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..value_objects import ActorRole, ParticipantId

if TYPE_CHECKING:
    from .job import Job


@dataclass(frozen=True)
class Actor:
    """Caller identity plus the role it claims to act in.

    Every authorization decision against a job goes through these
    capability checks rather than comparing raw ids.

    Attributes:
        actor_id: Subject identifier from the identity verifier.
        role: Claimed role, if the operation is role-specific.
    """

    actor_id: ParticipantId
    role: Optional[ActorRole] = None

    def is_customer_of(self, job: "Job") -> bool:
        """Check if the actor is the job's customer."""
        return self.actor_id == job.customer_id

    def is_vendor_of(self, job: "Job") -> bool:
        """Check if the actor is the job's vendor."""
        return self.actor_id == job.vendor_id

    def is_participant_of(self, job: "Job") -> bool:
        """Check if the actor is either party of the job."""
        return self.is_customer_of(job) or self.is_vendor_of(job)

    def holds_claimed_role(self, job: "Job") -> bool:
        """Check the actor really is the job's party for the claimed role."""
        if self.role == ActorRole.CUSTOMER:
            return self.is_customer_of(job)
        if self.role == ActorRole.VENDOR:
            return self.is_vendor_of(job)
        return False

    def role_in(self, job: "Job") -> Optional[ActorRole]:
        """Return the role the actor holds in ``job``, if any."""
        if self.is_customer_of(job):
            return ActorRole.CUSTOMER
        if self.is_vendor_of(job):
            return ActorRole.VENDOR
        return None
