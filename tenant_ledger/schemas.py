"""Pydantic schemas for lease intake and schedule serialization"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tenant_ledger.config import settings
from tenant_ledger.domain.models import PaymentSchedule


class LeaseRequest(BaseModel):
    """Lease terms captured when a tenant is created"""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    tenant_name: Optional[str] = Field(None, description="Tenant full name")
    unit: Optional[str] = None
    building: Optional[str] = None
    rent_amount: Decimal = Field(..., description="Total contract amount")
    lease_start: date
    lease_end: Optional[date] = Field(None, description="Defaults to lease_start")
    payment_frequency: str = Field(default_factory=lambda: settings.default_frequency)

    @model_validator(mode="after")
    def default_lease_end(self) -> "LeaseRequest":
        if self.lease_end is None:
            self.lease_end = self.lease_start
        return self


class PaymentEntrySchema(BaseModel):
    """Single payment obligation in a lease schedule"""

    payment_number: int
    due_date: date
    window_start: date
    window_end: date
    amount: Decimal


class ScheduleResponse(BaseModel):
    """Generated schedule handed to persistence alongside the tenant record"""

    tenant_name: Optional[str] = None
    unit: Optional[str] = None
    building: Optional[str] = None
    total_amount: Decimal
    currency: str
    frequency: str
    start_date: date
    end_date: date
    display_amount: Decimal
    payments: List[PaymentEntrySchema]

    @classmethod
    def from_schedule(
        cls,
        schedule: PaymentSchedule,
        request: LeaseRequest,
        frequency: str,
    ) -> "ScheduleResponse":
        payments = [
            PaymentEntrySchema(
                payment_number=entry.payment_number,
                due_date=entry.due_date,
                window_start=entry.window_start,
                window_end=entry.window_end,
                amount=entry.amount,
            )
            for entry in schedule
        ]
        return cls(
            tenant_name=request.tenant_name,
            unit=request.unit,
            building=request.building,
            total_amount=schedule.total,
            currency=settings.currency,
            frequency=frequency,
            start_date=request.lease_start,
            end_date=request.lease_end,
            display_amount=schedule.display_amount,
            payments=payments,
        )
