"""Lease payment schedule generation"""

import math
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List

from tenant_ledger.domain.exceptions import ValidationError
from tenant_ledger.domain.models import (
    Frequency,
    LeaseContract,
    PaymentSchedule,
    PaymentScheduleEntry,
)
from tenant_ledger.utils.date_utils import (
    add_months,
    end_of_month_after,
    first_of_month,
    inclusive_days,
)
from tenant_ledger.utils.money import round2, to_decimal

AVERAGE_DAYS_PER_MONTH = Decimal("30.44")
ONE_DAY_IN_MONTHS = Decimal(1) / AVERAGE_DAYS_PER_MONTH
REGULAR_DUE_DAY = 5


def lease_duration_months(start_date: date, end_date: date) -> Decimal:
    """
    Lease length in fractional months.

    Whole years and months are exact; the trailing day difference is counted
    inclusively and converted at 30.44 days per month. Existing schedules
    were produced with this approximation, so it must not be replaced with
    an exact day count.
    """
    year_diff = end_date.year - start_date.year
    month_diff = end_date.month - start_date.month
    day_diff = end_date.day - start_date.day
    return Decimal(year_diff * 12 + month_diff) + Decimal(day_diff + 1) / AVERAGE_DAYS_PER_MONTH


def count_periods(duration_months: Decimal, period_months: int) -> int:
    """
    Number of installments needed to cover the lease.

    A fractional remainder shorter than one day is treated as noise from the
    30.44-day month (a lease ending on the 31st overshoots by ~0.02 months)
    and does not open an extra period.
    """
    # Only bites when dayDiff + 1 == 31, e.g. a lease from the 1st to the 31st
    # (2024-01-01..2024-12-31 must be 12 monthly periods, not 13). Keep it.
    whole_months = math.floor(duration_months)
    if whole_months > 0 and duration_months - whole_months < ONE_DAY_IN_MONTHS:
        duration_months = Decimal(whole_months)
    return math.ceil(duration_months / period_months)


def _normalize_total(amount) -> Decimal:
    """Total rounded to cents; rejects non-positive, non-finite and oversized amounts"""
    try:
        total = to_decimal(amount)
        if not total.is_finite() or round2(total) <= 0:
            raise ValidationError("total amount must be greater than 0", reason="amount")
        return round2(total)
    except InvalidOperation as e:
        raise ValidationError("total amount is out of range", reason="amount") from e


def _one_time_schedule(contract: LeaseContract, total: Decimal) -> PaymentSchedule:
    entry = PaymentScheduleEntry(
        payment_number=1,
        due_date=contract.start_date,
        window_start=contract.start_date,
        window_end=contract.start_date,
        amount=total,
    )
    return PaymentSchedule(entries=(entry,), display_amount=total)


def prorated_first_payment(
    start_date: date, period_months: int, monthly_amount: Decimal
) -> Decimal:
    """
    First installment, scaled by the share of the first frequency block the lease covers.

    The block runs from the first day of the start month to the last day of
    the ``period_months``-th month (the start month counts as month 1).
    """
    block_start = first_of_month(start_date)
    block_end = end_of_month_after(start_date, period_months - 1)
    days_used = Decimal(inclusive_days(start_date, block_end))
    days_in_block = Decimal(inclusive_days(block_start, block_end))
    return round2(days_used / days_in_block * (monthly_amount * period_months))


def generate_payment_schedule(contract: LeaseContract) -> PaymentSchedule:
    """
    Generate the payment schedule for a lease contract.

    Rules:
    - One-time leases pay the full amount on the start date
    - The first periodic installment is prorated and due on the start date
    - Later installments are due on the 5th of every F-th month
    - Last installment absorbs rounding so the schedule sums to the total exactly

    Raises:
        ValidationError: non-positive or oversized amount, non-positive duration,
            unknown frequency, a periodic lease shorter than two periods, or a
            total too small to cover its payments without a negative final payment

    Example:
        12000.00 monthly, 2024-01-01 to 2024-12-31
        → 998.47 on 2024-01-01, 1000.14 on the 5th of Feb..Nov, 1000.13 on 2024-12-05
    """
    total = _normalize_total(contract.total_amount)

    duration = lease_duration_months(contract.start_date, contract.end_date)
    if duration <= 0:
        raise ValidationError("duration must be greater than 0", reason="duration")

    frequency = Frequency.parse(contract.frequency)
    if frequency.is_one_time:
        return _one_time_schedule(contract, total)

    period_months = frequency.months
    monthly_amount = total / duration
    total_periods = count_periods(duration, period_months)
    remaining_periods = total_periods - 1
    if remaining_periods < 1:
        raise ValidationError(
            f"lease is shorter than two {frequency.name.lower()} payment periods; "
            "use a shorter frequency or a one-time payment",
            reason="periods",
        )

    try:
        first_payment = prorated_first_payment(contract.start_date, period_months, monthly_amount)
        regular_payment = round2((total - first_payment) / remaining_periods)
        # Last installment absorbs the rounding drift of the others
        final_payment = round2(total - first_payment - regular_payment * (remaining_periods - 1))
    except InvalidOperation as e:
        raise ValidationError("total amount is out of range", reason="amount") from e
    if final_payment < 0:
        raise ValidationError(
            f"total amount is too small to spread over {total_periods} payments", reason="amount"
        )

    regular_anchor = contract.start_date.replace(day=REGULAR_DUE_DAY)
    entries: List[PaymentScheduleEntry] = []
    for i in range(total_periods):
        if i == 0:
            due_date = contract.start_date
            amount = first_payment
        else:
            due_date = add_months(regular_anchor, i * period_months)
            amount = final_payment if i == total_periods - 1 else regular_payment

        entries.append(
            PaymentScheduleEntry(
                payment_number=i + 1,
                due_date=due_date,
                window_start=due_date,
                window_end=due_date,
                amount=amount,
            )
        )

    return PaymentSchedule(
        entries=tuple(entries),
        display_amount=round2(total / total_periods),
    )
