"""Checkpoint inspection commands."""

import click
from loyaltypoints.cli.error_handling import handle_error
from loyaltypoints.domain.errors import DomainError


@click.group()
def checkpoint_group():
    """Inspect or reset the resume checkpoint."""
    pass


@checkpoint_group.command("show")
@click.pass_context
def show_checkpoint(ctx):
    """Show where the next run will resume."""
    store = ctx.obj["checkpoint_store"]

    if not store.exists():
        click.echo("No checkpoint. The next run starts from the beginning.")
        return

    try:
        offset = store.load()
    except (DomainError, OSError) as e:
        handle_error(ctx, e)
        return
    click.echo(f"Next run resumes after line {offset}")


@checkpoint_group.command("clear")
@click.pass_context
def clear_checkpoint(ctx):
    """Delete the checkpoint so the next run starts from the beginning.

    Only do this when the transaction log has changed; lines before the
    checkpoint will be processed again and may award points twice.
    """
    store = ctx.obj["checkpoint_store"]

    if not store.exists():
        click.echo("No checkpoint to clear.")
        return

    if not click.confirm("Are you sure you want to clear the checkpoint?"):
        click.echo("Clear cancelled.")
        return

    try:
        with store.lock():
            store.clear()
    except (DomainError, OSError) as e:
        handle_error(ctx, e)
        return
    click.echo("Checkpoint cleared.")


def register_commands(cli):
    """Register checkpoint commands with main CLI."""
    cli.add_command(checkpoint_group, name="checkpoint")
