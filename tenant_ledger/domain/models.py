"""Domain models - pure Python dataclasses representing lease contracts and schedules"""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Iterator, Tuple, Union

from tenant_ledger.domain.exceptions import ValidationError


class Frequency(Enum):
    """Payment frequency; the value is the period length in months"""

    MONTHLY = 1
    BIMONTHLY = 2
    QUARTERLY = 3
    FOUR_MONTHLY = 4
    SEMIANNUAL = 6
    ANNUAL = 12
    ONE_TIME = 0

    @property
    def months(self) -> int:
        return self.value

    @property
    def is_one_time(self) -> bool:
        return self is Frequency.ONE_TIME

    @classmethod
    def parse(cls, token: Union["Frequency", str, int]) -> "Frequency":
        """
        Resolve a frequency from a member, a month count, or a human-facing label.

        Labels are matched case-insensitively with spaces, hyphens and
        underscores ignored, so "Bi-Monthly", "bimonthly" and "BI_MONTHLY"
        are the same token.
        """
        if isinstance(token, cls):
            return token

        if isinstance(token, int) and not isinstance(token, bool):
            for member in cls:
                if member.value == token:
                    return member
            raise ValidationError(
                f"unrecognized payment frequency: {token!r}", reason="frequency"
            )

        if isinstance(token, str):
            key = re.sub(r"[\s_\-]+", "", token).lower()
            member = _FREQUENCY_ALIASES.get(key)
            if member is not None:
                return member

        raise ValidationError(f"unrecognized payment frequency: {token!r}", reason="frequency")


_FREQUENCY_ALIASES = {
    "monthly": Frequency.MONTHLY,
    "month": Frequency.MONTHLY,
    "1month": Frequency.MONTHLY,
    "bimonthly": Frequency.BIMONTHLY,
    "every2months": Frequency.BIMONTHLY,
    "2months": Frequency.BIMONTHLY,
    "quarterly": Frequency.QUARTERLY,
    "quarter": Frequency.QUARTERLY,
    "every3months": Frequency.QUARTERLY,
    "3months": Frequency.QUARTERLY,
    "fourmonthly": Frequency.FOUR_MONTHLY,
    "every4months": Frequency.FOUR_MONTHLY,
    "4months": Frequency.FOUR_MONTHLY,
    "semiannual": Frequency.SEMIANNUAL,
    "semiannually": Frequency.SEMIANNUAL,
    "halfyearly": Frequency.SEMIANNUAL,
    "every6months": Frequency.SEMIANNUAL,
    "6months": Frequency.SEMIANNUAL,
    "annual": Frequency.ANNUAL,
    "annually": Frequency.ANNUAL,
    "yearly": Frequency.ANNUAL,
    "every12months": Frequency.ANNUAL,
    "12months": Frequency.ANNUAL,
    "onetime": Frequency.ONE_TIME,
    "once": Frequency.ONE_TIME,
    "single": Frequency.ONE_TIME,
    "upfront": Frequency.ONE_TIME,
}
_FREQUENCY_ALIASES.update({member.name.replace("_", "").lower(): member for member in Frequency})


@dataclass(frozen=True)
class LeaseContract:
    """Lease terms supplied when a tenant is created"""

    total_amount: Decimal
    start_date: date
    end_date: date
    frequency: Union[Frequency, str]  # raw labels are resolved by the generator


@dataclass(frozen=True)
class PaymentScheduleEntry:
    """Single payment obligation in a lease schedule"""

    payment_number: int
    due_date: date
    window_start: date
    window_end: date
    amount: Decimal


@dataclass(frozen=True)
class PaymentSchedule:
    """Ordered payment obligations for one lease"""

    entries: Tuple[PaymentScheduleEntry, ...]
    display_amount: Decimal  # average per period, informational only

    @property
    def total(self) -> Decimal:
        return sum((entry.amount for entry in self.entries), Decimal("0.00"))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaymentScheduleEntry]:
        return iter(self.entries)
