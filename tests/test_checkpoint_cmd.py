"""Tests for checkpoint commands."""

import pytest
from click.testing import CliRunner
from loyaltypoints.cli.main import cli


def test_checkpoint_show_none(cli_runner, checkpoint_path):
    """Test showing when there is no checkpoint."""
    result = cli_runner.invoke(
        cli, ["--memory", "--checkpoint-path", str(checkpoint_path), "checkpoint", "show"]
    )

    assert result.exit_code == 0
    assert "No checkpoint" in result.output


def test_checkpoint_show_offset(cli_runner, checkpoint_path):
    """Test showing a stored offset."""
    checkpoint_path.write_text("3000", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["--memory", "--checkpoint-path", str(checkpoint_path), "checkpoint", "show"]
    )

    assert result.exit_code == 0
    assert "Next run resumes after line 3000" in result.output


def test_checkpoint_show_invalid(cli_runner, checkpoint_path):
    """Test showing an unreadable checkpoint."""
    checkpoint_path.write_text("oops", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["--memory", "--checkpoint-path", str(checkpoint_path), "checkpoint", "show"]
    )

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_checkpoint_clear_confirmed(cli_runner, checkpoint_path):
    """Test clearing after confirmation."""
    checkpoint_path.write_text("3000", encoding="utf-8")

    result = cli_runner.invoke(
        cli,
        ["--memory", "--checkpoint-path", str(checkpoint_path), "checkpoint", "clear"],
        input="y\n",
    )

    assert result.exit_code == 0
    assert "Checkpoint cleared." in result.output
    assert not checkpoint_path.exists()


def test_checkpoint_clear_cancelled(cli_runner, checkpoint_path):
    """Test declining the confirmation keeps the checkpoint."""
    checkpoint_path.write_text("3000", encoding="utf-8")

    result = cli_runner.invoke(
        cli,
        ["--memory", "--checkpoint-path", str(checkpoint_path), "checkpoint", "clear"],
        input="n\n",
    )

    assert result.exit_code == 0
    assert "Clear cancelled." in result.output
    assert checkpoint_path.exists()


def test_checkpoint_clear_nothing(cli_runner, checkpoint_path):
    """Test clearing when there is no checkpoint."""
    result = cli_runner.invoke(
        cli, ["--memory", "--checkpoint-path", str(checkpoint_path), "checkpoint", "clear"]
    )

    assert result.exit_code == 0
    assert "No checkpoint to clear." in result.output
