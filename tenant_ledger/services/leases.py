"""Lease intake - turns raw tenant-creation input into a persisted-ready schedule"""

import logging
import time
from typing import Any, Dict, Union

import pydantic

from tenant_ledger.domain.exceptions import ValidationError
from tenant_ledger.domain.models import Frequency, LeaseContract
from tenant_ledger.domain.schedule import generate_payment_schedule
from tenant_ledger.infrastructure.observability.logging import log_schedule_generated
from tenant_ledger.infrastructure.observability.metrics import (
    record_schedule,
    record_validation_failure,
)
from tenant_ledger.schemas import LeaseRequest, ScheduleResponse


def parse_lease_request(payload: Union[LeaseRequest, Dict[str, Any]]) -> LeaseRequest:
    """Validate raw input, reporting malformed fields as a domain ValidationError"""
    if isinstance(payload, LeaseRequest):
        return payload
    try:
        return LeaseRequest.model_validate(payload)
    except pydantic.ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) or "payload" for err in e.errors()
        )
        raise ValidationError(f"malformed lease request: {fields}", reason="payload") from e


def build_contract(request: LeaseRequest) -> LeaseContract:
    """Map a validated request onto the immutable contract the generator consumes"""
    return LeaseContract(
        total_amount=request.rent_amount,
        start_date=request.lease_start,
        end_date=request.lease_end,
        frequency=request.payment_frequency,
    )


def create_lease_schedule(payload: Union[LeaseRequest, Dict[str, Any]]) -> ScheduleResponse:
    """
    Create the payment schedule for a new lease.

    Flow:
    1. Validate the raw request (amounts, ISO dates, frequency label)
    2. Build the lease contract
    3. Generate the schedule
    4. Record metrics and logs
    5. Return the serializable schedule
    """
    start_time = time.time()

    try:
        request = parse_lease_request(payload)
        contract = build_contract(request)
        schedule = generate_payment_schedule(contract)
    except ValidationError as e:
        record_validation_failure(e.reason)
        logging.warning(f"Lease rejected: {e}", extra={"reason": e.reason})
        raise

    frequency = Frequency.parse(contract.frequency).name.lower()
    duration_ms = (time.time() - start_time) * 1000
    record_schedule(frequency, len(schedule))
    log_schedule_generated(frequency, len(schedule), schedule.total, schedule.display_amount, duration_ms)

    return ScheduleResponse.from_schedule(schedule, request, frequency)
