"""Structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from tenant_ledger.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    # JSON goes to stderr so stdout stays clean for command output
    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule_generated(
    frequency: str,
    payment_count: int,
    total_amount: Decimal,
    display_amount: Decimal,
    duration_ms: float,
) -> None:
    """Log structured schedule outcome"""
    logging.info(
        "Payment schedule generated",
        extra={
            "step": "schedule_generated",
            "frequency": frequency,
            "payment_count": payment_count,
            "total_amount": str(total_amount),
            "display_amount": str(display_amount),
            "currency": settings.currency,
            "duration_ms": duration_ms,
        },
    )
