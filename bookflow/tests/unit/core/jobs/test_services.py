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

"""Unit tests for JobStatsService."""

import pytest

from bookflow.core.jobs.entities import Pricing
from bookflow.core.jobs.services import JobStatsService
from bookflow.core.jobs.value_objects import JobStatus, PricingType, StatusGroup


@pytest.mark.unit
class TestJobStatsService:
    """Tests for JobStatsService.compute."""

    def test_empty(self):
        """Every group is present with a zero count."""
        stats = JobStatsService.compute([])

        assert stats.total == 0
        assert stats.by_group == {group: 0 for group in StatusGroup}
        assert stats.total_estimated_amount == 0.0

    def test_counts_per_group(self, make_job):
        """Detailed statuses are folded into their groups."""
        jobs = [
            make_job(JobStatus.PENDING),
            make_job(JobStatus.QUOTED),
            make_job(JobStatus.IN_PROGRESS),
            make_job(JobStatus.COMPLETED),
            make_job(JobStatus.CANCELLED),
        ]

        stats = JobStatsService.compute(jobs)

        assert stats.total == 5
        assert stats.by_group[StatusGroup.PENDING] == 2
        assert stats.by_group[StatusGroup.ACCEPTED] == 1
        assert stats.by_group[StatusGroup.COMPLETED] == 1
        assert stats.by_group[StatusGroup.CANCELLED] == 1

    def test_amount_prefers_estimated_total(self, make_job):
        """Estimated totals win over base amounts."""
        jobs = [
            make_job(),
            make_job(
                pricing=Pricing(
                    pricing_type=PricingType.HOURLY, amount=40.0, estimated_total=99.5
                )
            ),
        ]

        assert JobStatsService.compute(jobs).total_estimated_amount == 219.5
