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

"""Unit tests for the messaging thread."""

import pytest

from bookflow.core.jobs.exceptions import (
    AuthorizationError,
    ConflictError,
    ValidationError,
)
from bookflow.core.jobs.messaging import (
    MAX_MESSAGE_LENGTH,
    FileMeta,
    MessagingThread,
    system_message,
)
from bookflow.core.jobs.value_objects import JobStatus, MessageKind


@pytest.fixture
def thread(job_repo):
    """Messaging thread over the in-memory job repository."""
    return MessagingThread(job_repo)


@pytest.fixture
def file_meta():
    """Metadata of an already uploaded file."""
    return FileMeta(
        name="floorplan.pdf",
        size=2048,
        content_type="application/pdf",
        url="/uploads/jobs/abc-floorplan.pdf",
    )


@pytest.mark.unit
class TestPostMessage:
    """Tests for MessagingThread.post_message."""

    def test_customer_posts_message(self, thread, stored_job, customer_id):
        """Participant message should be appended as regular."""
        job = stored_job()

        updated = thread.post_message(job, customer_id, "  Is Tuesday ok?  ")

        assert len(updated.messages) == len(job.messages) + 1
        message = updated.messages[-1]
        assert message.message == "Is Tuesday ok?"
        assert message.kind == MessageKind.REGULAR
        assert message.sender_id == customer_id

    def test_vendor_posts_message(self, thread, stored_job, vendor_id):
        """Vendors are participants too."""
        job = stored_job(JobStatus.ACCEPTED)

        updated = thread.post_message(job, vendor_id, "See you then")

        assert updated.messages[-1].sender_id == vendor_id

    def test_stranger_rejected_and_thread_unchanged(
        self, thread, stored_job, job_repo, stranger_id
    ):
        """Non-participants cannot post; stored messages stay as they were."""
        job = stored_job()

        with pytest.raises(AuthorizationError):
            thread.post_message(job, stranger_id, "hello")

        assert len(job_repo.find_by_id(job.job_id).messages) == len(job.messages)

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank_message_rejected(self, thread, stored_job, customer_id, text):
        """Blank messages should raise ValidationError."""
        job = stored_job()

        with pytest.raises(ValidationError):
            thread.post_message(job, customer_id, text)

    def test_message_length_limit(self, thread, stored_job, customer_id):
        """Messages longer than the limit should be rejected."""
        job = stored_job()

        thread.post_message(job, customer_id, "x" * MAX_MESSAGE_LENGTH)
        with pytest.raises(ValidationError):
            thread.post_message(job, customer_id, "x" * (MAX_MESSAGE_LENGTH + 1))

    def test_stale_thread_conflicts(self, thread, stored_job, customer_id, vendor_id):
        """A message built on an outdated thread should conflict."""
        job = stored_job()
        thread.post_message(job, customer_id, "first")

        with pytest.raises(ConflictError):
            thread.post_message(job, vendor_id, "second")

    def test_messages_keep_append_order(self, thread, stored_job, customer_id, vendor_id):
        """Array order is the order messages were accepted in."""
        job = stored_job()
        job = thread.post_message(job, customer_id, "one")
        job = thread.post_message(job, vendor_id, "two")

        assert [m.message for m in job.messages[-2:]] == ["one", "two"]


@pytest.mark.unit
class TestAttach:
    """Tests for MessagingThread.attach."""

    def test_attach_file(self, thread, stored_job, vendor_id, file_meta):
        """Attachment should record uploader and metadata."""
        job = stored_job(JobStatus.IN_PROGRESS)

        updated = thread.attach(job, vendor_id, file_meta)

        assert len(updated.attachments) == 1
        attachment = updated.attachments[0]
        assert attachment.name == "floorplan.pdf"
        assert attachment.size == 2048
        assert attachment.uploaded_by == vendor_id
        assert updated.messages == job.messages

    def test_stranger_cannot_attach(self, thread, stored_job, stranger_id, file_meta):
        """Non-participants cannot attach files."""
        job = stored_job()

        with pytest.raises(AuthorizationError):
            thread.attach(job, stranger_id, file_meta)

    def test_missing_url_rejected(self, thread, stored_job, customer_id):
        """Metadata without a URL should be rejected."""
        job = stored_job()
        meta = FileMeta(name="a.txt", size=1, content_type="text/plain", url="")

        with pytest.raises(ValidationError):
            thread.attach(job, customer_id, meta)

    def test_stale_attachments_conflict(
        self, thread, stored_job, customer_id, vendor_id, file_meta
    ):
        """Concurrent uploads built on the same read should conflict."""
        job = stored_job()
        thread.attach(job, customer_id, file_meta)

        with pytest.raises(ConflictError):
            thread.attach(job, vendor_id, file_meta)


@pytest.mark.unit
class TestSystemMessage:
    """Tests for system message construction."""

    def test_system_message_kind(self, customer_id, base_time):
        """System messages should carry the system kind."""
        message = system_message(customer_id, "Booking request created", base_time)

        assert message.kind == MessageKind.SYSTEM
        assert message.timestamp == base_time
