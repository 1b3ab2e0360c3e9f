"""Prometheus metrics for schedule generation volume and rejected lease terms"""

from prometheus_client import Counter, Histogram

schedules_generated_counter = Counter(
    "tenant_ledger_schedules_generated_total",
    "Payment schedules generated",
    ["frequency"],  # monthly | quarterly | ... | one_time
)

validation_failure_counter = Counter(
    "tenant_ledger_schedule_validation_failures_total",
    "Lease requests rejected before a schedule was produced",
    ["reason"],  # amount | duration | frequency | periods | payload
)

schedule_payments_histogram = Histogram(
    "tenant_ledger_schedule_payments",
    "Number of payments per generated schedule",
    buckets=[1, 2, 3, 4, 6, 12, 24, 36, 60, 120],
)


def record_schedule(frequency: str, payment_count: int) -> None:
    """Record a generated schedule"""
    schedules_generated_counter.labels(frequency=frequency).inc()
    schedule_payments_histogram.observe(payment_count)


def record_validation_failure(reason: str) -> None:
    validation_failure_counter.labels(reason=reason).inc()
