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

"""Unit tests for the transition graph."""

import pytest

from bookflow.core.jobs.transitions import (
    ENTRY_STATUS,
    REVIEWABLE_STATUS,
    STATUS_PRESENTATION,
    TRANSITION_GRAPH,
    available_transitions,
    edges_from,
    find_edge,
    is_terminal,
    resolve_status_filter,
    status_group,
    statuses_in_group,
)
from bookflow.core.jobs.value_objects import ActorRole, JobStatus, StatusGroup


def _targets(job, role):
    return {edge.target for edge in available_transitions(job, role)}


@pytest.mark.unit
class TestTransitionGraph:
    """Tests for the static edge table."""

    def test_every_status_has_an_entry(self):
        """Graph should list every status, terminal ones with no edges."""
        assert set(TRANSITION_GRAPH) == set(JobStatus)

    def test_entry_and_reviewable_statuses(self):
        """Jobs start pending and become reviewable when completed."""
        assert ENTRY_STATUS == JobStatus.PENDING
        assert REVIEWABLE_STATUS == JobStatus.COMPLETED

    @pytest.mark.parametrize(
        "status", [JobStatus.COMPLETED, JobStatus.CLOSED, JobStatus.CANCELLED]
    )
    def test_terminal_statuses_have_no_edges(self, status):
        """Terminal statuses should have no outgoing edges."""
        assert edges_from(status) == ()
        assert is_terminal(status)

    def test_only_edgeless_statuses_are_terminal(self):
        """Every other status has a way forward."""
        terminal = {JobStatus.COMPLETED, JobStatus.CLOSED, JobStatus.CANCELLED}
        for status in set(JobStatus) - terminal:
            assert not is_terminal(status)

    def test_no_self_loops(self):
        """No edge should lead back to its own source."""
        for source, edges in TRANSITION_GRAPH.items():
            assert all(edge.target != source for edge in edges)

    def test_presentation_defined_for_every_status(self):
        """Every status should have a label and color."""
        for status in JobStatus:
            presentation = STATUS_PRESENTATION[status]
            assert presentation.label
            assert presentation.color.startswith("#")


@pytest.mark.unit
class TestAvailableTransitions:
    """Tests for role-filtered affordance queries."""

    def test_vendor_options_from_pending(self, make_job):
        """Vendor can review, quote, accept or cancel a pending job."""
        job = make_job(JobStatus.PENDING)
        assert _targets(job, ActorRole.VENDOR) == {
            JobStatus.REVIEWING,
            JobStatus.QUOTED,
            JobStatus.ACCEPTED,
            JobStatus.CANCELLED,
        }

    def test_customer_options_from_pending(self, make_job):
        """Customer can only cancel a pending job."""
        job = make_job(JobStatus.PENDING)
        assert _targets(job, ActorRole.CUSTOMER) == {JobStatus.CANCELLED}

    def test_customer_accepts_quote(self, make_job):
        """Only the customer can accept a quote."""
        job = make_job(JobStatus.QUOTED)
        assert JobStatus.ACCEPTED in _targets(job, ActorRole.CUSTOMER)
        assert JobStatus.ACCEPTED not in _targets(job, ActorRole.VENDOR)

    def test_delivered_has_no_vendor_edges(self, make_job):
        """Vendor waits for the customer once work is delivered."""
        job = make_job(JobStatus.DELIVERED)
        assert _targets(job, ActorRole.VENDOR) == set()
        assert _targets(job, ActorRole.CUSTOMER) == {
            JobStatus.COMPLETED,
            JobStatus.DISPUTED,
        }

    def test_terminal_job_has_no_options(self, make_job):
        """Completed jobs offer no actions to anyone."""
        job = make_job(JobStatus.COMPLETED)
        assert available_transitions(job, ActorRole.VENDOR) == []
        assert available_transitions(job, ActorRole.CUSTOMER) == []

    def test_does_not_mutate_job(self, make_job):
        """Querying options should leave the job untouched."""
        job = make_job(JobStatus.IN_PROGRESS)
        before = job
        available_transitions(job, ActorRole.VENDOR)
        assert job == before


@pytest.mark.unit
class TestFindEdge:
    """Tests for edge lookup."""

    @pytest.mark.parametrize(
        "source,target",
        [
            (JobStatus.PENDING, JobStatus.CANCELLED),
            (JobStatus.IN_PROGRESS, JobStatus.DISPUTED),
            (JobStatus.DISPUTED, JobStatus.CLOSED),
        ],
    )
    def test_customer_reason_required_edges(self, source, target):
        """Cancellation, disputes and closing a dispute need a reason."""
        edge = find_edge(source, target, ActorRole.CUSTOMER)
        assert edge is not None
        assert edge.requires_reason is True

    def test_vendor_accept_needs_no_reason(self):
        """Accepting a booking does not need a reason."""
        edge = find_edge(JobStatus.PENDING, JobStatus.ACCEPTED, ActorRole.VENDOR)
        assert edge is not None
        assert edge.requires_reason is False

    def test_missing_edge_returns_none(self):
        """A non-edge should not be found."""
        assert find_edge(
            JobStatus.PENDING, JobStatus.COMPLETED, ActorRole.VENDOR
        ) is None

    def test_edge_for_other_role_not_found(self):
        """Edges are filtered by role."""
        assert find_edge(
            JobStatus.PENDING, JobStatus.ACCEPTED, ActorRole.CUSTOMER
        ) is None


@pytest.mark.unit
class TestStatusGroups:
    """Tests for the four-state mapping."""

    @pytest.mark.parametrize(
        "status,group",
        [
            (JobStatus.PENDING, StatusGroup.PENDING),
            (JobStatus.QUOTED, StatusGroup.PENDING),
            (JobStatus.IN_PROGRESS, StatusGroup.ACCEPTED),
            (JobStatus.DISPUTED, StatusGroup.ACCEPTED),
            (JobStatus.CLOSED, StatusGroup.COMPLETED),
            (JobStatus.CANCELLED, StatusGroup.CANCELLED),
        ],
    )
    def test_status_group(self, status, group):
        """Every status should map onto one group."""
        assert status_group(status) == group

    def test_statuses_in_group(self):
        """Completed group should hold completed and closed."""
        assert statuses_in_group(StatusGroup.COMPLETED) == frozenset(
            {JobStatus.COMPLETED, JobStatus.CLOSED}
        )

    def test_resolve_filter_mixes_vocabularies(self):
        """Filters accept group names and full status names together."""
        statuses = resolve_status_filter(["cancelled", "delivered"])
        assert statuses == frozenset({JobStatus.CANCELLED, JobStatus.DELIVERED})

    def test_resolve_filter_expands_group(self):
        """A group name selects every status in the group."""
        assert JobStatus.CONFIRMED in resolve_status_filter(["accepted"])

    def test_resolve_filter_rejects_unknown(self):
        """Unknown filter terms should raise ValueError."""
        with pytest.raises(ValueError):
            resolve_status_filter(["archived"])
