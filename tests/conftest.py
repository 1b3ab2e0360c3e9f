"""Pytest fixtures for testing"""

import logging
import pytest
from datetime import date
from decimal import Decimal
from typing import Generator
from tenant_ledger.domain.models import Frequency, LeaseContract


@pytest.fixture
def annual_lease() -> LeaseContract:
    """Calendar-year lease paid monthly"""
    return LeaseContract(
        total_amount=Decimal("12000"),
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        frequency=Frequency.MONTHLY,
    )


@pytest.fixture
def lease_payload() -> dict:
    """Raw lease terms as captured on tenant creation"""
    return {
        "tenant_name": "Jane Tenant",
        "unit": "1204",
        "building": "Marina Heights",
        "rent_amount": "10000",
        "lease_start": "2024-01-01",
        "lease_end": "2024-10-31",
        "payment_frequency": "Quarterly",
    }


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Undo handler changes made by setup_logging"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
