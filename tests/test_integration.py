"""Integration tests for end-to-end workflows."""

import pytest
from click.testing import CliRunner
from loyaltypoints.cli.main import cli
from loyaltypoints.database.checkpoint import FileCheckpointStore
from loyaltypoints.database.factories import create_sqlite_repository
from loyaltypoints.domain.entities import ProcessingSettings
from loyaltypoints.domain.ledger import LedgerService
from loyaltypoints.domain.processing import LoyaltyProcessingService


def read_balances(database_path):
    repository = create_sqlite_repository(database_path=database_path)
    try:
        return {acc.account_identifier: acc.points_balance for acc in repository.list_accounts()}
    finally:
        repository.disconnect()


def crashing_lines(path, fail_at):
    """Yield lines of a file, then fail like a lost disk at line fail_at."""
    with open(path, "r", encoding="utf-8") as f:
        for number, line in enumerate(f, start=1):
            if number == fail_at:
                raise OSError("Input/output error")
            yield line


def test_full_workflow(cli_runner, tmp_path):
    """Test generate → init-members → process → checkpoint show."""
    db_path = str(tmp_path / "members.db")
    checkpoint = tmp_path / "checkpoint.txt"
    log = tmp_path / "transactions.csv"
    base = ["--db-path", db_path, "--checkpoint-path", str(checkpoint)]

    result = cli_runner.invoke(
        cli, base + ["generate", str(log), "500", "--seed", "11", "--member-ratio", "0.5"]
    )
    assert result.exit_code == 0

    result = cli_runner.invoke(cli, base + ["init-members"])
    assert result.exit_code == 0

    result = cli_runner.invoke(
        cli, base + ["process", str(log), "--checkpoint-interval", "50"]
    )
    assert result.exit_code == 0
    assert "Processing completed successfully!" in result.output
    assert "Lines read: 500" in result.output
    assert sum(read_balances(db_path).values()) > 400

    result = cli_runner.invoke(cli, base + ["checkpoint", "show"])
    assert "No checkpoint" in result.output


@pytest.mark.parametrize("fail_at", [51, 187, 400])
def test_crash_then_resume_with_cli(cli_runner, tmp_path, fail_at):
    """A crashed run resumed from the CLI matches an uninterrupted run."""
    log = tmp_path / "transactions.csv"
    cli_runner.invoke(
        cli,
        ["--memory", "generate", str(log), "420", "--seed", "5", "--member-ratio", "0.6"],
    )

    reference_db = str(tmp_path / "reference.db")
    cli_runner.invoke(cli, ["--db-path", reference_db, "init-members"])
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            reference_db,
            "--checkpoint-path",
            str(tmp_path / "reference.txt"),
            "process",
            str(log),
            "--checkpoint-interval",
            "25",
        ],
    )
    assert result.exit_code == 0

    crash_db = str(tmp_path / "crash.db")
    checkpoint = tmp_path / "checkpoint.txt"
    cli_runner.invoke(cli, ["--db-path", crash_db, "init-members"])

    repository = create_sqlite_repository(database_path=crash_db)
    settings = ProcessingSettings(checkpoint_interval=25)
    service = LoyaltyProcessingService(
        LedgerService(repository),
        FileCheckpointStore(checkpoint),
        settings,
    )
    with pytest.raises(OSError):
        service.process_lines(crashing_lines(log, fail_at))
    repository.disconnect()

    assert int(checkpoint.read_text(encoding="utf-8")) == ((fail_at - 1) // 25) * 25

    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            crash_db,
            "--checkpoint-path",
            str(checkpoint),
            "process",
            str(log),
            "--checkpoint-interval",
            "25",
        ],
    )

    assert result.exit_code == 0
    assert "Resumed from line" in result.output
    assert not checkpoint.exists()
    assert read_balances(crash_db) == read_balances(reference_db)
