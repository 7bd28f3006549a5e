"""Transaction log processing command."""

from decimal import Decimal, InvalidOperation

import click
from loyaltypoints.cli.error_handling import handle_error
from loyaltypoints.domain.entities import (
    DEFAULT_CHECKPOINT_INTERVAL,
    DEFAULT_MERCHANT_ID,
    DEFAULT_POINTS_PER_DOLLAR,
    ProcessingSettings,
)
from loyaltypoints.domain.errors import DomainError
from loyaltypoints.domain.ledger import LedgerService
from loyaltypoints.domain.processing import LoyaltyProcessingService


def _parse_rate(ctx, param, value) -> Decimal:
    """Convert --rate to a non-negative Decimal."""
    try:
        rate = Decimal(str(value))
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a number")
    if not rate.is_finite() or rate < 0:
        raise click.BadParameter("must be a non-negative number")
    return rate


@click.command("process")
@click.argument("transaction_file", type=click.Path(dir_okay=False))
@click.option(
    "--merchant",
    default=DEFAULT_MERCHANT_ID,
    show_default=True,
    envvar="LOYALTYPOINTS_MERCHANT_ID",
    help="Merchant ID whose transactions earn points",
)
@click.option(
    "--rate",
    default=str(DEFAULT_POINTS_PER_DOLLAR),
    show_default=True,
    callback=_parse_rate,
    envvar="LOYALTYPOINTS_POINTS_PER_DOLLAR",
    help="Points awarded per dollar spent (rounded down per transaction)",
)
@click.option(
    "--checkpoint-interval",
    type=click.IntRange(min=1),
    default=DEFAULT_CHECKPOINT_INTERVAL,
    show_default=True,
    envvar="LOYALTYPOINTS_CHECKPOINT_INTERVAL",
    help="Save progress every N lines",
)
@click.pass_context
def process_file(ctx, transaction_file: str, merchant: str, rate: Decimal, checkpoint_interval: int):
    """Award loyalty points for a transaction log.

    TRANSACTION_FILE has one transaction per line in the form
    date,card_number,merchant_id,amount with no header row.

    If a previous run was interrupted, processing resumes after the last
    saved checkpoint.

    Examples:
        loyaltypoints process transactions.csv
        loyaltypoints --memory process transactions.csv --merchant GAS123
    """
    repository = ctx.obj["repository"]
    checkpoint_store = ctx.obj["checkpoint_store"]

    settings = ProcessingSettings(
        merchant_id=merchant,
        points_per_dollar=rate,
        checkpoint_interval=checkpoint_interval,
    )

    try:
        ledger = LedgerService(repository)
        service = LoyaltyProcessingService(ledger, checkpoint_store, settings)
        result = service.process_file(transaction_file)
    except (DomainError, OSError) as e:
        handle_error(ctx, e)
        return

    if result.resumed:
        click.echo(f"Resumed from line {result.start_offset}")
    click.echo("Processing completed successfully!")

    click.echo("\nUpdated Loyalty Points:")
    click.echo("-" * 24)
    for account in ledger.list_accounts():
        click.echo(f"{account.display_name}: {account.points_balance} points")

    click.echo("\nRun summary:")
    click.echo(f"  Lines read: {result.lines_read}")
    click.echo(f"  Points awarded: {result.points_awarded} ({result.awarded} transactions)")
    click.echo(f"  Other merchants: {result.non_target}")
    click.echo(f"  Non-members: {result.unknown_account}")
    click.echo(f"  Malformed lines: {result.malformed}")


def register_commands(cli):
    """Register process command with main CLI."""
    cli.add_command(process_file)
