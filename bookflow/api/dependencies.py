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

"""FastAPI dependencies: collaborator container and bearer authentication."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookflow.core.jobs.exceptions import InfrastructureError
from bookflow.core.jobs.repositories import (
    BlobStore,
    IdentityVerifier,
    JobIdGenerator,
    JobRepository,
    ReviewRepository,
    UUIDGenerator,
)
from bookflow.core.jobs.value_objects import ParticipantId
from bookflow.infra.blob_store import LocalBlobStore, StorageConfig
from bookflow.infra.id_generator import UUIDv4Generator, UUIDv7Generator
from bookflow.infra.repositories import InMemoryJobRepository, InMemoryReviewRepository

from .auth.jwt_handler import JWTHandler, JWTKeyUnavailableError, JWTValidationError

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class Container:
    """Collaborators shared by every request."""

    job_repo: JobRepository = field(default_factory=InMemoryJobRepository)
    review_repo: ReviewRepository = field(default_factory=InMemoryReviewRepository)
    job_id_generator: JobIdGenerator = field(default_factory=UUIDv7Generator)
    uuid_generator: UUIDGenerator = field(default_factory=UUIDv4Generator)
    storage_config: StorageConfig = field(default_factory=StorageConfig.from_env)
    blob_store: Optional[BlobStore] = None
    identity_verifier: Optional[IdentityVerifier] = None

    def __post_init__(self) -> None:
        if self.blob_store is None:
            self.blob_store = LocalBlobStore(config=self.storage_config)
        if self.identity_verifier is None:
            self.identity_verifier = JWTHandler()


_container: Optional[Container] = None


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _container  # pylint: disable=global-statement
    if _container is None:
        _container = Container()
    return _container


def _unauthorized(error: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": error, "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_participant(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    container: Container = Depends(get_container),
) -> ParticipantId:
    """Resolve the caller's subject id from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing or invalid.
        InfrastructureError: If the verification key cannot be read.
    """
    if credentials is None:
        raise _unauthorized("unauthorized", "Missing bearer token")
    try:
        subject = container.identity_verifier.verify(credentials.credentials)
        return ParticipantId(subject)
    except JWTValidationError as exc:
        logger.warning("Rejected bearer token: %s", type(exc).__name__)
        raise _unauthorized("invalid_token", "Invalid or expired token") from None
    except ValueError:
        raise _unauthorized("invalid_token", "Token subject is invalid") from None
    except JWTKeyUnavailableError as exc:
        raise InfrastructureError(operation="verify_identity") from exc
