"""Shared pytest fixtures for loyaltypoints tests."""

import logging
import tempfile
import os
from pathlib import Path
import pytest

from loyaltypoints.database.checkpoint import FileCheckpointStore, InMemoryCheckpointStore
from loyaltypoints.database.factories import create_sqlite_repository
from loyaltypoints.database.memory import InMemoryAccountRepository
from loyaltypoints.domain.ledger import LedgerService
from loyaltypoints.domain.members import MemberService


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by CLI invocations."""
    yield
    logger = logging.getLogger("loyaltypoints")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


JOHN = "1234567890123456"
JANE = "2345678901234567"
BOB = "3456789012345678"
UNKNOWN = "9999999999999999"


@pytest.fixture
def temp_repository():
    """Create a temporary SQLite member repository for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    repository = create_sqlite_repository(database_path=db_path)
    # Store the path for tests that need it
    repository.database_path = db_path
    repository.connect()

    yield repository

    repository.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def seeded_repository(temp_repository):
    """SQLite repository holding the demonstration members."""
    MemberService(temp_repository).seed_demo_members()
    return temp_repository


@pytest.fixture
def memory_repository():
    """In-memory repository holding the demonstration members."""
    return InMemoryAccountRepository.seeded()


@pytest.fixture
def ledger(memory_repository):
    """Ledger over the in-memory demonstration members."""
    return LedgerService(memory_repository)


@pytest.fixture
def checkpoint_store():
    """In-memory checkpoint store that records saved offsets."""
    return InMemoryCheckpointStore()


@pytest.fixture
def checkpoint_path(tmp_path):
    """Path for a checkpoint file in a temporary directory."""
    return tmp_path / "checkpoint.txt"


@pytest.fixture
def file_checkpoint_store(checkpoint_path):
    """File checkpoint store in a temporary directory."""
    return FileCheckpointStore(checkpoint_path)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


def balances(repository) -> dict[str, int]:
    """Return identifier → balance for every account in a repository."""
    return {acc.account_identifier: acc.points_balance for acc in repository.list_accounts()}
