"""Calendar date helpers for lease periods"""

from datetime import date
from dateutil.relativedelta import relativedelta


def first_of_month(day: date) -> date:
    """First calendar day of the month containing ``day``"""
    return day.replace(day=1)


def add_months(day: date, months: int) -> date:
    """Shift by whole calendar months, clamping to the end of shorter months"""
    return day + relativedelta(months=months)


def end_of_month_after(day: date, months: int) -> date:
    """Last calendar day of the month ``months`` months after the month of ``day``"""
    return first_of_month(day) + relativedelta(months=months + 1, days=-1)


def inclusive_days(start: date, end: date) -> int:
    """Number of calendar days from start to end, counting both ends"""
    return (end - start).days + 1
