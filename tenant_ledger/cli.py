"""Command line entry point for generating lease payment schedules"""

import click

from tenant_ledger.config import settings
from tenant_ledger.domain.exceptions import ValidationError
from tenant_ledger.infrastructure.observability.logging import setup_logging
from tenant_ledger.services.leases import create_lease_schedule


@click.group()
@click.option("--log-level", default=None, help="Override TENANT_LEDGER_LOG_LEVEL")
def cli(log_level):
    """Tenant ledger tools"""
    setup_logging(log_level or settings.log_level)


@cli.command("schedule")
@click.option("--amount", "rent_amount", required=True, help="Total contract amount")
@click.option("--start", "lease_start", required=True, help="Lease start date (YYYY-MM-DD)")
@click.option("--end", "lease_end", default=None, help="Lease end date (YYYY-MM-DD)")
@click.option("--frequency", "payment_frequency", default=None, help="monthly, quarterly, one time, ...")
@click.option("--tenant", "tenant_name", default=None, help="Tenant full name")
def schedule(rent_amount, lease_start, lease_end, payment_frequency, tenant_name):
    """Print the payment schedule for a lease as JSON"""
    payload = {
        "tenant_name": tenant_name,
        "rent_amount": rent_amount,
        "lease_start": lease_start,
        "lease_end": lease_end,
    }
    if payment_frequency is not None:
        payload["payment_frequency"] = payment_frequency

    try:
        response = create_lease_schedule(payload)
    except ValidationError as e:
        raise click.UsageError(str(e))

    click.echo(response.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
