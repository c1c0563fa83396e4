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

"""Domain services for Jobs domain."""

from dataclasses import dataclass, field
from typing import Dict, Sequence

from .entities import Job
from .transitions import status_group
from .value_objects import StatusGroup


@dataclass(frozen=True)
class JobStats:
    """Job counts per status group for one participant."""

    total: int
    by_group: Dict[StatusGroup, int] = field(default_factory=dict)
    total_estimated_amount: float = 0.0


class JobStatsService:
    """Domain service for dashboard statistics over a participant's jobs."""

    @staticmethod
    def compute(jobs: Sequence[Job]) -> JobStats:
        """Count jobs per four-state group and sum their estimated totals.

        Jobs without an estimated total contribute their base amount.

        Args:
            jobs: Jobs of one participant.

        Returns:
            JobStats with every group present, zero when empty.

        Example:
            >>> JobStatsService.compute([]).total
            0
        """
        by_group = {group: 0 for group in StatusGroup}
        amount = 0.0
        for job in jobs:
            by_group[status_group(job.status)] += 1
            estimated = job.pricing.estimated_total
            amount += estimated if estimated is not None else job.pricing.amount
        return JobStats(
            total=len(jobs),
            by_group=by_group,
            total_estimated_amount=round(amount, 2),
        )
