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

"""Mapping of domain errors onto HTTP responses."""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookflow.core.jobs.exceptions import (
    AuthorizationError,
    ConflictError,
    DuplicateResponseError,
    IneligibleReviewError,
    InfrastructureError,
    InvalidTransitionError,
    JobAlreadyExistsError,
    JobDomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    JobAlreadyExistsError: status.HTTP_409_CONFLICT,
    IneligibleReviewError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DuplicateResponseError: status.HTTP_409_CONFLICT,
    InfrastructureError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: JobDomainError) -> int:
    """Resolve the HTTP status of a domain error, walking its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_detail(exc: JobDomainError) -> Dict[str, Any]:
    """Build the ``detail`` body for a domain error."""
    detail: Dict[str, Any] = {"error": exc.code, "message": exc.message}
    if isinstance(exc, ValidationError) and exc.field:
        detail["field"] = exc.field
    if isinstance(exc, IneligibleReviewError):
        detail["reason"] = exc.reason.value
    if isinstance(exc, InvalidTransitionError):
        detail["from_status"] = exc.from_status
        detail["to_status"] = exc.to_status
    if exc.correlation_id:
        detail["correlation_id"] = exc.correlation_id
    return detail


async def domain_error_handler(request: Request, exc: JobDomainError) -> JSONResponse:
    """Translate a domain error raised by a route into a JSON response."""
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.code)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.code)
    return JSONResponse(status_code=status_code, content={"detail": error_detail(exc)})


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and query strings like domain validation errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    detail: Dict[str, Any] = {
        "error": ValidationError.code,
        "message": first.get("msg", "Invalid request"),
    }
    location = [
        str(part) for part in first.get("loc", ()) if part not in ("body", "query")
    ]
    if location:
        detail["field"] = ".".join(location)
    logger.warning("%s %s rejected: invalid request", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and request validation handlers on ``app``."""
    app.add_exception_handler(JobDomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
