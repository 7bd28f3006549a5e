"""Initialize demonstration members."""

import click
from loyaltypoints.database.memory import SEED_MEMBERS
from loyaltypoints.domain.members import MemberService


@click.command("init-members")
@click.option("--force", is_flag=True, help="Add missing demonstration members even if members exist")
@click.pass_context
def init_members(ctx, force: bool):
    """Initialize database with the demonstration members."""
    service = MemberService(ctx.obj["repository"])

    existing = service.list_members()
    if existing and not force:
        click.echo("Members already exist. Use --force to add missing demonstration members.")
        return

    created = service.seed_demo_members()
    skipped = len(SEED_MEMBERS) - created
    if skipped == 0:
        click.echo(f"Successfully created {created} members.")
    else:
        click.echo(f"Created {created} members ({skipped} already enrolled).")


def register_commands(cli):
    """Register init-members command with main CLI."""
    cli.add_command(init_members)
