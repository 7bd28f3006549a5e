"""Persistence layer for loyaltypoints application."""

from loyaltypoints.database.base import AccountRepository
from loyaltypoints.database.checkpoint import (
    CheckpointStore,
    FileCheckpointStore,
    InMemoryCheckpointStore,
)
from loyaltypoints.database.factories import (
    create_checkpoint_store,
    create_memory_repository,
    create_sqlite_repository,
)

__all__ = [
    "AccountRepository",
    "CheckpointStore",
    "FileCheckpointStore",
    "InMemoryCheckpointStore",
    "create_checkpoint_store",
    "create_memory_repository",
    "create_sqlite_repository",
]
