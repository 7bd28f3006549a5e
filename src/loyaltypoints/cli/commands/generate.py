"""Sample transaction log generation command."""

import click
from loyaltypoints.cli.error_handling import handle_error
from loyaltypoints.domain.errors import DomainError
from loyaltypoints.domain.sample_data import write_sample_file
from loyaltypoints.utils.date_parser import parse_date


@click.command("generate")
@click.argument("output_file", type=click.Path(dir_okay=False))
@click.argument("count", type=click.IntRange(min=0))
@click.option(
    "--date",
    "date_str",
    default="yesterday",
    show_default=True,
    help="Transaction date (e.g., 2024-01-15, yesterday, 'this month')",
)
@click.option("--seed", type=int, help="Random seed for reproducible output")
@click.option(
    "--member-ratio",
    type=click.FloatRange(0, 1),
    default=0.1,
    show_default=True,
    help="Share of transactions made with a member card",
)
@click.pass_context
def generate(ctx, output_file: str, count: int, date_str: str, seed: int | None, member_ratio: float):
    """Write a sample transaction log for testing.

    Examples:
        loyaltypoints generate transactions.csv 10000
        loyaltypoints generate sample.csv 500 --date 2024-01-15 --seed 42
    """
    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        written = write_sample_file(
            output_file, count, txn_date, seed=seed, member_ratio=member_ratio
        )
    except (DomainError, OSError) as e:
        handle_error(ctx, e)
        return

    click.echo(f"Generated {written} transactions to {output_file}")


def register_commands(cli):
    """Register generate command with main CLI."""
    cli.add_command(generate)
