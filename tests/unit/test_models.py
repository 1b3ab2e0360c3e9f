"""Unit tests for lease domain models"""

import pytest
from datetime import date
from decimal import Decimal
from tenant_ledger.domain.exceptions import ValidationError
from tenant_ledger.domain.models import Frequency, PaymentSchedule, PaymentScheduleEntry


@pytest.mark.parametrize(
    "token, expected",
    [
        ("Monthly", Frequency.MONTHLY),
        ("bi-monthly", Frequency.BIMONTHLY),
        ("Every 2 Months", Frequency.BIMONTHLY),
        ("QUARTERLY", Frequency.QUARTERLY),
        ("4 months", Frequency.FOUR_MONTHLY),
        ("four_monthly", Frequency.FOUR_MONTHLY),
        ("Semi-Annually", Frequency.SEMIANNUAL),
        ("half yearly", Frequency.SEMIANNUAL),
        ("Yearly", Frequency.ANNUAL),
        ("annual", Frequency.ANNUAL),
        ("One Time", Frequency.ONE_TIME),
        ("one_time", Frequency.ONE_TIME),
        ("  monthly  ", Frequency.MONTHLY),
    ],
)
def test_parse_labels(token, expected):
    """Test human-facing labels resolve to frequencies"""
    assert Frequency.parse(token) is expected


def test_parse_month_counts():
    """Test integer month counts resolve to frequencies"""
    assert Frequency.parse(3) is Frequency.QUARTERLY
    assert Frequency.parse(0) is Frequency.ONE_TIME
    assert Frequency.parse(Frequency.ANNUAL) is Frequency.ANNUAL


@pytest.mark.parametrize("token", ["weekly", "", 5, True, None, "monthlyish"])
def test_parse_rejects_unknown(token):
    """Test unsupported tokens raise ValidationError"""
    with pytest.raises(ValidationError, match="unrecognized payment frequency") as exc:
        Frequency.parse(token)
    assert exc.value.reason == "frequency"


def test_frequency_months():
    """Test period length in months"""
    assert [f.months for f in Frequency] == [1, 2, 3, 4, 6, 12, 0]
    assert Frequency.ONE_TIME.is_one_time
    assert not Frequency.MONTHLY.is_one_time


def test_payment_schedule_total():
    """Test schedule total sums entry amounts"""
    entries = tuple(
        PaymentScheduleEntry(
            payment_number=n,
            due_date=date(2024, n, 5),
            window_start=date(2024, n, 5),
            window_end=date(2024, n, 5),
            amount=Decimal(amount),
        )
        for n, amount in enumerate(["100.10", "200.20", "300.30"], start=1)
    )
    schedule = PaymentSchedule(entries=entries, display_amount=Decimal("200.20"))

    assert schedule.total == Decimal("600.60")
    assert len(schedule) == 3
    assert [e.payment_number for e in schedule] == [1, 2, 3]
