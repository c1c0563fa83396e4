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

"""CreateJob command DTO."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from bookflow.core.jobs.value_objects import ParticipantId


@dataclass(frozen=True)
class CreateJobCommand:
    """Command to create a new booking.

    Immutable command object representing a customer's booking request.
    All validation is performed in the use case layer.

    Attributes:
        customer_id: Customer requesting the booking.
        vendor_id: Vendor offering the service.
        service_id: Booked service.
        title: Booking title.
        description: Description of the requested work.
        pricing_type: One of fixed, hourly, package, custom.
        amount: Base price.
        currency: ISO currency code.
        preferred_date: Customer's preferred date, if any.
        requirements: Customer requirements.
        message: Optional opening message to the vendor.
        correlation_id: Request correlation identifier for tracing.
    """

    customer_id: ParticipantId
    vendor_id: ParticipantId
    service_id: str
    title: str
    description: str
    pricing_type: str
    amount: float
    currency: str = "USD"
    preferred_date: Optional[datetime] = None
    requirements: Tuple[str, ...] = ()
    message: Optional[str] = None
    correlation_id: Optional[str] = None
