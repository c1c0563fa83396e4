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

"""Job lifecycle domain module for bookflow."""

from .entities import Actor, Job, Review, StatusHistoryEntry
from .exceptions import (
    AuthorizationError,
    ConflictError,
    DuplicateResponseError,
    IneligibilityReason,
    IneligibleReviewError,
    InfrastructureError,
    InvalidTransitionError,
    JobAlreadyExistsError,
    JobDomainError,
    JobNotFoundError,
    NotFoundError,
    ReviewNotFoundError,
    ValidationError,
)
from .messaging import FileMeta, MessagingThread
from .repositories import (
    BlobStore,
    IdentityVerifier,
    JobIdGenerator,
    JobRepository,
    ReviewRepository,
    UUIDGenerator,
)
from .reviews import (
    ReviewChanges,
    ReviewGate,
    ReviewPayload,
    sort_reviews,
    summarize_reviews,
)
from .services import JobStatsService
from .state_machine import JobStateMachine
from .timeline import TimelineEvent, TimelineEventKind, build_timeline
from .transitions import TransitionEdge, available_transitions, status_group
from .value_objects import (
    ActorRole,
    JobId,
    JobNumber,
    JobStatus,
    MessageKind,
    ParticipantId,
    ReviewId,
    StatusGroup,
)

__all__ = [
    "Actor",
    "ActorRole",
    "AuthorizationError",
    "BlobStore",
    "ConflictError",
    "DuplicateResponseError",
    "FileMeta",
    "IdentityVerifier",
    "IneligibilityReason",
    "IneligibleReviewError",
    "InfrastructureError",
    "InvalidTransitionError",
    "Job",
    "JobAlreadyExistsError",
    "JobDomainError",
    "JobId",
    "JobIdGenerator",
    "JobNotFoundError",
    "JobNumber",
    "JobRepository",
    "JobStateMachine",
    "JobStatsService",
    "JobStatus",
    "MessageKind",
    "MessagingThread",
    "NotFoundError",
    "ParticipantId",
    "Review",
    "ReviewChanges",
    "ReviewGate",
    "ReviewId",
    "ReviewNotFoundError",
    "ReviewPayload",
    "ReviewRepository",
    "StatusGroup",
    "StatusHistoryEntry",
    "TimelineEvent",
    "TimelineEventKind",
    "TransitionEdge",
    "UUIDGenerator",
    "ValidationError",
    "available_transitions",
    "build_timeline",
    "sort_reviews",
    "status_group",
    "summarize_reviews",
]
