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

"""Identifier generators for jobs, reviews and stored files."""

import os
import time
import uuid

from bookflow.core.jobs.value_objects import JobId

_VERSION_MASK = 0xF << 76
_VARIANT_MASK = 0x3 << 62


class UUIDv7Generator:
    """Time-ordered UUID v7 ids for jobs.

    The 48-bit millisecond timestamp keeps ids in booking order; the
    random tail feeds the job number.
    """

    def generate(self) -> JobId:
        timestamp_ms = time.time_ns() // 1_000_000
        value = (timestamp_ms << 80) | int.from_bytes(os.urandom(10), "big")
        value = (value & ~_VERSION_MASK) | (0x7 << 76)
        value = (value & ~_VARIANT_MASK) | (0x2 << 62)
        return JobId(str(uuid.UUID(int=value)))


class UUIDv4Generator:
    """Random ids for reviews and stored file names."""

    def generate(self) -> uuid.UUID:
        return uuid.uuid4()
