"""Member management commands."""

import click
from loyaltypoints.domain.members import MemberService


@click.group()
def member_group():
    """Manage loyalty program members."""
    pass


@member_group.command("add")
@click.argument("account_identifier", metavar="CARD_NUMBER")
@click.argument("name", metavar="NAME")
@click.option("--points", type=click.IntRange(min=0), default=0, show_default=True, help="Starting balance")
@click.pass_context
def add_member(ctx, account_identifier: str, name: str, points: int):
    """Enroll a new member.

    Examples:
        loyaltypoints member add 4111111111111111 "Ada Lovelace"
        loyaltypoints member add 4111111111111111 "Ada Lovelace" --points 500
    """
    service = MemberService(ctx.obj["repository"])

    try:
        account = service.enroll(account_identifier, name, points)
        click.echo(f"Enrolled '{account.display_name}' ({account.account_identifier})")
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@member_group.command("list")
@click.pass_context
def list_members(ctx):
    """List all members and their balances."""
    service = MemberService(ctx.obj["repository"])

    members = service.list_members()
    if not members:
        click.echo("No members found.")
        return

    click.echo("\nMembers:")
    click.echo("-" * 60)
    for acc in members:
        click.echo(
            f"{acc.account_identifier:20s} | {acc.display_name:20s} | {acc.points_balance:8d} points"
        )


def register_commands(cli):
    """Register member commands with main CLI."""
    cli.add_command(member_group, name="member")
