"""Factory functions for creating account repositories and checkpoint stores."""

import os
from pathlib import Path
from typing import Optional

from loyaltypoints.database.checkpoint import FileCheckpointStore
from loyaltypoints.database.memory import InMemoryAccountRepository
from loyaltypoints.database.sqlalchemy_db import SQLAlchemyAccountRepository

DEFAULT_CHECKPOINT_FILE = "checkpoint.txt"


def create_sqlite_repository(database_path: Optional[str] = None) -> SQLAlchemyAccountRepository:
    """Create a SQLite-backed account repository.

    Args:
        database_path: Path to SQLite database file. If None, checks
            LOYALTYPOINTS_DB_PATH environment variable, then defaults to
            ~/.loyaltypoints/loyaltypoints.db

    Returns:
        SQLAlchemyAccountRepository instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("LOYALTYPOINTS_DB_PATH")

    if database_path is None:
        db_dir = Path.home() / ".loyaltypoints"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "loyaltypoints.db")

    return SQLAlchemyAccountRepository(f"sqlite:///{database_path}")


def create_memory_repository() -> InMemoryAccountRepository:
    """Create an in-memory repository seeded with the demonstration members."""
    return InMemoryAccountRepository.seeded()


def create_checkpoint_store(checkpoint_path: Optional[str] = None) -> FileCheckpointStore:
    """Create a file checkpoint store.

    Args:
        checkpoint_path: Path to checkpoint file. If None, checks
            LOYALTYPOINTS_CHECKPOINT_PATH, then defaults to checkpoint.txt
            in the working directory

    Returns:
        FileCheckpointStore instance
    """
    if checkpoint_path is None:
        checkpoint_path = os.environ.get(
            "LOYALTYPOINTS_CHECKPOINT_PATH", DEFAULT_CHECKPOINT_FILE
        )
    return FileCheckpointStore(checkpoint_path)
