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

"""Local filesystem blob store for job attachments."""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bookflow.core.jobs.repositories import UUIDGenerator
from bookflow.infra.id_generator import UUIDv4Generator

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


@dataclass(frozen=True)
class StorageConfig:
    """Blob storage configuration.

    Attributes:
        upload_dir: Directory files are written to.
        base_url: URL prefix under which stored files are served.
        max_upload_bytes: Largest accepted upload.
    """

    upload_dir: str = "uploads/jobs"
    base_url: str = "/uploads/jobs"
    max_upload_bytes: int = 10 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "StorageConfig":
        """Create configuration from environment variables."""
        return cls(
            upload_dir=os.getenv("BOOKFLOW_UPLOAD_DIR", "uploads/jobs"),
            base_url=os.getenv("BOOKFLOW_UPLOAD_BASE_URL", "/uploads/jobs"),
            max_upload_bytes=int(
                os.getenv("BOOKFLOW_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))
            ),
        )


class LocalBlobStore:
    """Writes uploaded bytes under a directory and returns their URL."""

    def __init__(
        self,
        config: Optional[StorageConfig] = None,
        uuid_generator: Optional[UUIDGenerator] = None,
    ) -> None:
        self._config = config or StorageConfig.from_env()
        self._uuid_generator = uuid_generator or UUIDv4Generator()

    def upload(self, name: str, content: bytes, content_type: str) -> str:
        """Store ``content`` under a unique file name.

        Raises:
            OSError: If the file cannot be written.
        """
        safe_name = _UNSAFE_CHARS.sub("_", os.path.basename(name)) or "file"
        stored_name = f"{self._uuid_generator.generate().hex}-{safe_name}"
        directory = Path(self._config.upload_dir)
        directory.mkdir(parents=True, exist_ok=True)
        (directory / stored_name).write_bytes(content)
        logger.info("Stored %d bytes of %s", len(content), content_type)
        return f"{self._config.base_url.rstrip('/')}/{stored_name}"
