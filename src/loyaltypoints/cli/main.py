"""Main CLI entry point."""

import click
from loyaltypoints.database.factories import (
    create_checkpoint_store,
    create_memory_repository,
    create_sqlite_repository,
)
from loyaltypoints.utils.logger import configure_logging

# Import and register all commands at module level
from loyaltypoints.cli.commands import (
    checkpoint,
    generate,
    init_members,
    member,
    process,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to member database file (overrides LOYALTYPOINTS_DB_PATH environment variable)",
    envvar="LOYALTYPOINTS_DB_PATH",
)
@click.option(
    "--checkpoint-path",
    type=click.Path(dir_okay=False),
    help="Path to checkpoint file (overrides LOYALTYPOINTS_CHECKPOINT_PATH environment variable)",
    envvar="LOYALTYPOINTS_CHECKPOINT_PATH",
)
@click.option(
    "--memory",
    is_flag=True,
    help="Use the built-in demonstration members instead of the database",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="LOYALTYPOINTS_LOG_LEVEL",
    help="Diagnostic log level (written to stderr)",
)
@click.pass_context
def cli(ctx, db_path: str | None, checkpoint_path: str | None, memory: bool, log_level: str):
    """Loyaltypoints - Loyalty points accrual for card transaction logs.

    Reads a transaction log, awards points to enrolled members for
    purchases at the target merchant, and resumes where it left off if a
    run is interrupted.
    """
    ctx.ensure_object(dict)

    # Open stores only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        configure_logging(log_level)
        if memory:
            repository = create_memory_repository()
        else:
            repository = create_sqlite_repository(database_path=db_path)
        repository.connect()
        ctx.call_on_close(repository.disconnect)
        ctx.obj["repository"] = repository
        ctx.obj["checkpoint_store"] = create_checkpoint_store(checkpoint_path)


# Register all commands
process.register_commands(cli)
generate.register_commands(cli)
init_members.register_commands(cli)
member.register_commands(cli)
checkpoint.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
