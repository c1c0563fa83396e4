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

"""Unit tests for LocalBlobStore."""

import uuid

import pytest

from bookflow.infra.blob_store import LocalBlobStore, StorageConfig


class FixedUUIDGenerator:
    """UUID generator returning one fixed value."""

    def generate(self) -> uuid.UUID:
        return uuid.UUID("7d0c1b9e-4c1a-4f4e-9a55-0d5c1e6f2a10")


@pytest.fixture
def blob_store(tmp_path):
    """Blob store writing into a temporary directory."""
    config = StorageConfig(upload_dir=str(tmp_path / "jobs"), base_url="/files/")
    return LocalBlobStore(config, FixedUUIDGenerator())


@pytest.mark.unit
class TestLocalBlobStore:
    """Tests for LocalBlobStore.upload."""

    def test_upload_writes_file(self, blob_store, tmp_path):
        """Content lands on disk under a unique name."""
        url = blob_store.upload("notes.txt", b"hello", "text/plain")

        stored_name = "7d0c1b9e4c1a4f4e9a550d5c1e6f2a10-notes.txt"
        assert url == f"/files/{stored_name}"
        assert (tmp_path / "jobs" / stored_name).read_bytes() == b"hello"

    def test_unsafe_names_sanitized(self, blob_store):
        """Path components and unsafe characters are stripped."""
        url = blob_store.upload("../../etc/pass wd", b"x", "text/plain")

        assert url.endswith("-pass_wd")
        assert ".." not in url


@pytest.mark.unit
class TestStorageConfig:
    """Tests for StorageConfig.from_env."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when the environment is silent."""
        for name in (
            "BOOKFLOW_UPLOAD_DIR", "BOOKFLOW_UPLOAD_BASE_URL", "BOOKFLOW_MAX_UPLOAD_BYTES"
        ):
            monkeypatch.delenv(name, raising=False)

        config = StorageConfig.from_env()

        assert config.upload_dir == "uploads/jobs"
        assert config.max_upload_bytes == 10 * 1024 * 1024

    def test_from_env(self, monkeypatch):
        """Environment variables override the defaults."""
        monkeypatch.setenv("BOOKFLOW_UPLOAD_DIR", "/srv/uploads")
        monkeypatch.setenv("BOOKFLOW_MAX_UPLOAD_BYTES", "1024")

        config = StorageConfig.from_env()

        assert config.upload_dir == "/srv/uploads"
        assert config.max_upload_bytes == 1024
