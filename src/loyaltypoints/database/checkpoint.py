"""Checkpoint stores for resumable processing.

A checkpoint is the absolute number of input lines fully applied by an
earlier run. Its absence means "start from the beginning".
"""

import fcntl
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loyaltypoints.domain.errors import (
    CheckpointError,
    CheckpointLockedError,
    checkpoint_locked,
    invalid_checkpoint,
)

logger = logging.getLogger(__name__)


class CheckpointStore(ABC):
    """Durable single-value store for the last processed line offset."""

    @abstractmethod
    def load(self) -> int:
        """Return the stored offset, or 0 if there is no checkpoint."""
        pass

    @abstractmethod
    def save(self, offset: int) -> None:
        """Overwrite the stored offset."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored offset."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """Return True if an offset is stored."""
        pass

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Hold exclusive use of the checkpoint for the duration of a run."""
        yield


class InMemoryCheckpointStore(CheckpointStore):
    """Checkpoint store kept in memory, recording every saved offset."""

    def __init__(self, offset: int | None = None):
        self._offset = offset
        self.history: list[int] = []

    def load(self) -> int:
        return self._offset if self._offset is not None else 0

    def save(self, offset: int) -> None:
        if offset < 0:
            raise CheckpointError(f"Checkpoint offset must be non-negative, got {offset}")
        self._offset = offset
        self.history.append(offset)

    def clear(self) -> None:
        self._offset = None

    def exists(self) -> bool:
        return self._offset is not None


class FileCheckpointStore(CheckpointStore):
    """Checkpoint stored as a decimal integer in a text file.

    ``save`` writes to a temporary file in the same directory, fsyncs it
    and renames it over the checkpoint, so a reader sees either the old or
    the new offset and never a partial write.
    """

    def __init__(self, path: str | Path):
        """Initialize file checkpoint store.

        Args:
            path: Checkpoint file path
        """
        self.path = Path(path)
        self.lock_path = self.path.with_name(self.path.name + ".lock")

    def load(self) -> int:
        """Read the stored offset.

        Returns:
            Stored offset, or 0 if the file is missing or empty

        Raises:
            CheckpointError: If the file holds something other than a
                non-negative integer
            OSError: If the file exists but cannot be read
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0

        first_line = content.strip().splitlines()[0] if content.strip() else ""
        if not first_line:
            return 0

        try:
            offset = int(first_line)
        except ValueError:
            raise CheckpointError(invalid_checkpoint(str(self.path), first_line))
        if offset < 0:
            raise CheckpointError(invalid_checkpoint(str(self.path), first_line))
        return offset

    def save(self, offset: int) -> None:
        """Atomically replace the stored offset.

        Raises:
            CheckpointError: If offset is negative
            OSError: If the checkpoint cannot be written
        """
        if offset < 0:
            raise CheckpointError(f"Checkpoint offset must be non-negative, got {offset}")

        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(str(offset))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        self._fsync_directory(directory)
        logger.debug("Saved checkpoint %d to %s", offset, self.path)

    def clear(self) -> None:
        """Delete the checkpoint file if it exists."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        logger.debug("Cleared checkpoint %s", self.path)

    def exists(self) -> bool:
        return self.path.exists()

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Take an exclusive advisory lock on ``<checkpoint>.lock``.

        Raises:
            CheckpointLockedError: If another process holds the lock
        """
        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.lock_path, "a") as lock_file:
            try:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            except BlockingIOError:
                raise CheckpointLockedError(checkpoint_locked(str(self.path)))
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    @staticmethod
    def _fsync_directory(directory: Path) -> None:
        # Persists the rename itself on POSIX filesystems
        dir_fd = os.open(directory, os.O_RDONLY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
