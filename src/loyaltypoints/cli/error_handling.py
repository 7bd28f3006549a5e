"""CLI error handling helpers."""

import click

from loyaltypoints.domain.errors import DomainError


def handle_error(ctx: click.Context, error: DomainError | OSError) -> None:
    """Render a domain or I/O error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
