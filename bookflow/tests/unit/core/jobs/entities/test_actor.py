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

"""Unit tests for Actor capability checks."""

from bookflow.core.jobs.entities import Actor
from bookflow.core.jobs.value_objects import ActorRole


class TestActor:
    """Tests for Actor entity."""

    def test_customer_capabilities(self, make_job, customer_id):
        """The customer is a participant and holds the customer role."""
        job = make_job()
        actor = Actor(customer_id, ActorRole.CUSTOMER)

        assert actor.is_customer_of(job)
        assert not actor.is_vendor_of(job)
        assert actor.is_participant_of(job)
        assert actor.holds_claimed_role(job)
        assert actor.role_in(job) == ActorRole.CUSTOMER

    def test_claimed_role_must_match(self, make_job, customer_id):
        """Claiming the vendor role as the customer fails."""
        job = make_job()

        assert not Actor(customer_id, ActorRole.VENDOR).holds_claimed_role(job)

    def test_no_claimed_role(self, make_job, vendor_id):
        """An actor without a claimed role holds no role."""
        job = make_job()

        assert not Actor(vendor_id).holds_claimed_role(job)
        assert Actor(vendor_id).role_in(job) == ActorRole.VENDOR

    def test_stranger(self, make_job, stranger_id):
        """Strangers have no role in the job."""
        job = make_job()

        assert not Actor(stranger_id).is_participant_of(job)
        assert Actor(stranger_id).role_in(job) is None
