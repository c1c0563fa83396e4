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

"""Request bodies accepted by the job and review routes."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CreateJobRequest(BaseModel):
    """Customer booking request."""

    vendor_id: str = Field(..., min_length=1, max_length=128)
    service_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    pricing_type: str = "fixed"
    amount: float = Field(0.0, ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    preferred_date: Optional[datetime] = None
    requirements: List[str] = Field(default_factory=list)
    message: Optional[str] = None


class DeliverableFileRequest(BaseModel):
    """File reference inside a completed deliverable."""

    name: str
    url: str
    type: str = "document"


class CompletedDeliverableRequest(BaseModel):
    """Deliverable reported when work is delivered or completed."""

    name: str = Field(..., min_length=1)
    description: str = ""
    files: List[DeliverableFileRequest] = Field(default_factory=list)


class ChangeStatusRequest(BaseModel):
    """Requested transition plus the side payload of its target status."""

    status: str
    role: str
    reason: Optional[str] = None
    quoted_amount: Optional[float] = Field(None, ge=0)
    confirmed_date: Optional[datetime] = None
    estimated_completion: Optional[datetime] = None
    delivery_notes: Optional[str] = None
    completed_deliverables: Optional[List[CompletedDeliverableRequest]] = None
    final_total: Optional[float] = Field(None, ge=0)

    def extra(self) -> Dict[str, Any]:
        """Side payload keys that were actually supplied."""
        return self.model_dump(
            exclude={"status", "role", "reason"}, exclude_none=True
        )


class PostMessageRequest(BaseModel):
    """Participant message."""

    message: str


class SubmitReviewRequest(BaseModel):
    """Customer review of a completed job."""

    ratings: Dict[str, int]
    comment: str
    title: Optional[str] = None
    is_recommended: bool = True
    would_hire_again: bool = True
    completed_on_time: bool = True
    matched_description: bool = True


class VendorResponseRequest(BaseModel):
    """Vendor's reply to a review."""

    comment: str
    is_public: bool = True


class UpdateReviewRequest(BaseModel):
    """Author's edit of a review; omitted fields keep their value."""

    ratings: Optional[Dict[str, int]] = None
    comment: Optional[str] = None
    title: Optional[str] = None
    is_recommended: Optional[bool] = None
    would_hire_again: Optional[bool] = None
    completed_on_time: Optional[bool] = None
    matched_description: Optional[bool] = None
    edit_reason: Optional[str] = None
