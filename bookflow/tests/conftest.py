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

"""Shared pytest fixtures for bookflow tests."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from bookflow.core.jobs.entities import (
    Job,
    JobMessage,
    Pricing,
    StatusHistoryEntry,
)
from bookflow.core.jobs.value_objects import (
    JobId,
    JobNumber,
    JobStatus,
    MessageKind,
    ParticipantId,
    PricingType,
)
from bookflow.infra.repositories import InMemoryJobRepository, InMemoryReviewRepository

BASE_TIME = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def customer_id():
    """Customer of every sample job."""
    return ParticipantId("customer-1")


@pytest.fixture
def vendor_id():
    """Vendor of every sample job."""
    return ParticipantId("vendor-1")


@pytest.fixture
def stranger_id():
    """Participant unrelated to the sample jobs."""
    return ParticipantId("stranger-1")


@pytest.fixture
def base_time():
    """Fixed creation time of sample jobs."""
    return BASE_TIME


@pytest.fixture
def job_repo():
    """Provide in-memory job repository."""
    return InMemoryJobRepository()


@pytest.fixture
def review_repo():
    """Provide in-memory review repository."""
    return InMemoryReviewRepository()


@pytest.fixture
def make_job(customer_id, vendor_id):
    """Factory building a job that already sits in ``status``.

    Jobs beyond ``pending`` carry a second history entry for the current
    status, one hour after creation.
    """
    counter = itertools.count(1)

    def _make(status=JobStatus.PENDING, **overrides):
        job_id = JobId(f"018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b{next(counter):04x}")
        history = [
            StatusHistoryEntry(
                status=JobStatus.PENDING, timestamp=BASE_TIME, actor_id=customer_id
            )
        ]
        if status != JobStatus.PENDING:
            history.append(
                StatusHistoryEntry(
                    status=status,
                    timestamp=BASE_TIME + timedelta(hours=1),
                    actor_id=vendor_id,
                )
            )
        fields = {
            "job_id": job_id,
            "job_number": JobNumber.from_job_id(job_id),
            "customer_id": customer_id,
            "vendor_id": vendor_id,
            "service_id": "service-1",
            "title": "Deep clean",
            "description": "Two bedroom apartment",
            "pricing": Pricing(pricing_type=PricingType.FIXED, amount=120.0),
            "created_at": BASE_TIME,
            "status": status,
            "status_history": tuple(history),
            "messages": (
                JobMessage(
                    sender_id=customer_id,
                    message=f"Booking request {JobNumber.from_job_id(job_id)} created",
                    kind=MessageKind.SYSTEM,
                    timestamp=BASE_TIME,
                ),
            ),
        }
        fields.update(overrides)
        return Job(**fields)

    return _make


@pytest.fixture
def stored_job(job_repo, make_job):
    """Factory that builds a job and adds it to ``job_repo``."""

    def _store(status=JobStatus.PENDING, **overrides):
        job = make_job(status, **overrides)
        job_repo.add(job)
        return job

    return _store
