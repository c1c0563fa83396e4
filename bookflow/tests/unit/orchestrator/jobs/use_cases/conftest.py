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

"""Shared fixtures for use case tests."""

import uuid
from typing import List, Tuple

import pytest

from bookflow.core.jobs.repositories import JobIdGenerator, UUIDGenerator
from bookflow.core.jobs.value_objects import JobId


class FakeJobIdGenerator(JobIdGenerator):
    """Fake JobId generator for testing."""
    def __init__(self):
        """Initialize the fake generator."""
        self._counter = 1

    def generate(self) -> JobId:
        """Generate a predictable JobId for testing."""
        job_id = f"018e1234-5678-7abc-9def-123456789{self._counter:03d}"
        self._counter += 1
        return JobId(job_id)


class FakeUUIDGenerator(UUIDGenerator):
    """Fake UUID generator for testing."""
    def __init__(self):
        """Initialize the fake generator."""
        self._counter = 1

    def generate(self) -> uuid.UUID:
        """Generate a predictable UUID for testing."""
        uuid_str = f"123e4567-e89b-12d3-a456-426614174{self._counter:03d}"
        self._counter += 1
        return uuid.UUID(uuid_str)


class FakeBlobStore:
    """Blob store that keeps uploads in a list."""
    def __init__(self) -> None:
        self.uploads: List[Tuple[str, bytes, str]] = []

    def upload(self, name: str, content: bytes, content_type: str) -> str:
        """Record the upload and return a predictable URL."""
        self.uploads.append((name, content, content_type))
        return f"/uploads/jobs/{len(self.uploads)}-{name}"


class FailingBlobStore:
    """Blob store whose backend is unreachable."""
    def upload(self, name: str, content: bytes, content_type: str) -> str:
        raise OSError("disk unavailable")


class FailingJobRepository:
    """Job repository whose backend is unreachable."""
    def add(self, job):
        raise ConnectionError("store unavailable")

    def find_by_id(self, job_id):
        raise ConnectionError("store unavailable")

    def find_by_participant(self, participant_id, role, statuses=None):
        raise ConnectionError("store unavailable")

    def apply_update(self, job_id, precondition, update):
        raise ConnectionError("store unavailable")


@pytest.fixture
def job_id_generator():
    """Provide fake JobId generator."""
    return FakeJobIdGenerator()


@pytest.fixture
def uuid_generator():
    """Provide fake UUID generator."""
    return FakeUUIDGenerator()


@pytest.fixture
def blob_store():
    """Provide fake blob store."""
    return FakeBlobStore()


@pytest.fixture
def failing_job_repo():
    """Provide a job repository that always fails."""
    return FailingJobRepository()


@pytest.fixture
def failing_blob_store():
    """Provide a blob store that always fails."""
    return FailingBlobStore()
