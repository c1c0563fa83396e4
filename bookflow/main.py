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

"""bookflow HTTP application."""

import logging
import os

from fastapi import FastAPI

from bookflow.api.errors import register_exception_handlers
from bookflow.api.jobs import router as jobs_router
from bookflow.api.reviews import router as reviews_router

API_PREFIX = "/api/v1"


def configure_logging() -> None:
    """Configure root logging from ``LOG_LEVEL``."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app() -> FastAPI:
    """Build the FastAPI application with every route and error handler."""
    application = FastAPI(title="bookflow API", version="0.1.0")
    register_exception_handlers(application)
    application.include_router(jobs_router, prefix=API_PREFIX)
    application.include_router(reviews_router, prefix=API_PREFIX)

    @application.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return application


configure_logging()
app = create_app()
