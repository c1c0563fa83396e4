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

"""Value objects for Job domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class JobId:
    """UUID v7 identifier for a job.

    Attributes:
        value: String representation of UUID v7.

    Raises:
        ValueError: If value does not match UUID v7 pattern or exceeds length.
    """

    value: str

    UUID_V7_PATTERN: ClassVar[str] = (
        r'^[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$'
    )
    MAX_LENGTH: ClassVar[int] = 36  # UUID v7 standard length

    def __post_init__(self) -> None:
        """Validate UUID v7 format and length."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"JobId length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not re.match(self.UUID_V7_PATTERN, self.value.lower()):
            raise ValueError(f"Invalid UUID v7 format: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class JobNumber:
    """Short human-facing job code, e.g. ``JOB-3D8D2C4B``."""

    value: str

    PATTERN: ClassVar[str] = r'^JOB-[0-9A-F]{8}$'

    def __post_init__(self) -> None:
        if not re.match(self.PATTERN, self.value):
            raise ValueError(f"Invalid job number: {self.value}")

    @classmethod
    def from_job_id(cls, job_id: JobId) -> "JobNumber":
        """Derive the job number from the trailing hex digits of a job id."""
        return cls(f"JOB-{job_id.value.replace('-', '')[-8:].upper()}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ReviewId:
    """UUID identifier for a review."""

    value: str

    UUID_PATTERN: ClassVar[str] = (
        r'^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$'
    )

    def __post_init__(self) -> None:
        if not re.match(self.UUID_PATTERN, self.value.lower()):
            raise ValueError(f"Invalid review id: {self.value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParticipantId:
    """Stable subject identifier of a customer or vendor.

    Attributes:
        value: Subject identifier returned by the identity verifier.

    Raises:
        ValueError: If value is empty or exceeds length.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 128

    def __post_init__(self) -> None:
        """Validate participant ID is not empty and within length limit."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"ParticipantId length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not self.value or not self.value.strip():
            raise ValueError("Participant ID cannot be empty")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class ActorRole(str, Enum):
    """Roles a participant can act in against a job."""

    CUSTOMER = "customer"
    VENDOR = "vendor"


class JobStatus(str, Enum):
    """Job lifecycle statuses; edges between them live in ``transitions``."""

    PENDING = "pending"
    REVIEWING = "reviewing"
    QUOTED = "quoted"
    ACCEPTED = "accepted"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISPUTED = "disputed"
    CLOSED = "closed"


class StatusGroup(str, Enum):
    """Simplified four-state view over JobStatus."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class MessageKind(str, Enum):
    """Kinds of entries in a job's conversation thread."""

    REGULAR = "regular"
    STATUS_UPDATE = "status_update"
    SYSTEM = "system"


class PricingType(str, Enum):
    """How a booking is priced."""

    FIXED = "fixed"
    HOURLY = "hourly"
    PACKAGE = "package"
    CUSTOM = "custom"
