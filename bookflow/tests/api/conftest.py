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

"""Fixtures for HTTP tests against the FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from bookflow.api.auth.jwt_handler import JWTValidationError
from bookflow.api.dependencies import Container, get_container
from bookflow.infra.blob_store import StorageConfig
from bookflow.main import create_app


class FakeIdentityVerifier:
    """Maps ``token-<subject>`` credentials to ``<subject>``."""

    PREFIX = "token-"

    def verify(self, credential: str) -> str:
        if not credential.startswith(self.PREFIX):
            raise JWTValidationError("Token could not be decoded")
        return credential[len(self.PREFIX):]


def auth(subject: str) -> dict:
    """Authorization header for ``subject``."""
    return {"Authorization": f"Bearer {FakeIdentityVerifier.PREFIX}{subject}"}


@pytest.fixture
def container(tmp_path):
    """Container with in-memory stores and a temporary upload directory."""
    return Container(
        storage_config=StorageConfig(
            upload_dir=str(tmp_path / "uploads"),
            base_url="/uploads/jobs",
            max_upload_bytes=1024,
        ),
        identity_verifier=FakeIdentityVerifier(),
    )


@pytest.fixture
def test_client(container):
    """Test client whose routes resolve to ``container``."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def customer_headers():
    """Bearer headers of the customer."""
    return auth("customer-1")


@pytest.fixture
def vendor_headers():
    """Bearer headers of the vendor."""
    return auth("vendor-1")


@pytest.fixture
def stranger_headers():
    """Bearer headers of an unrelated participant."""
    return auth("stranger-1")


@pytest.fixture
def create_job(test_client, customer_headers):
    """Create a booking as the customer and return its JSON body."""

    def _create(**overrides):
        body = {
            "vendor_id": "vendor-1",
            "service_id": "service-1",
            "title": "Deep clean",
            "description": "Two bedroom apartment",
            "pricing_type": "fixed",
            "amount": 120,
            **overrides,
        }
        response = test_client.post("/api/v1/jobs", json=body, headers=customer_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def move(test_client):
    """Change a job's status and return the response."""

    def _move(job_id, headers, status, role, **extra):
        return test_client.put(
            f"/api/v1/jobs/{job_id}/status",
            json={"status": status, "role": role, **extra},
            headers=headers,
        )

    return _move
