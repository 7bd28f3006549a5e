"""Resumable transaction log processing service."""

import itertools
import logging
from decimal import Decimal
from pathlib import Path
from typing import Callable, Iterable, Optional

from loyaltypoints.database.checkpoint import CheckpointStore
from loyaltypoints.domain.entities import (
    ProcessingResult,
    ProcessingSettings,
    SkipReason,
)
from loyaltypoints.domain.errors import ValidationError
from loyaltypoints.domain.ledger import LedgerService
from loyaltypoints.domain.parser import parse_transaction_line

logger = logging.getLogger(__name__)

SkipObserver = Callable[[SkipReason, int, str], None]

_SKIP_COUNTERS = {
    SkipReason.MALFORMED: "malformed",
    SkipReason.NON_TARGET: "non_target",
    SkipReason.UNKNOWN_ACCOUNT: "unknown_account",
}


class LoyaltyProcessingService:
    """Service that streams a transaction log into the loyalty ledger.

    Progress is recorded as an absolute line count. Every
    ``checkpoint_interval`` lines the count is saved and then the ledger is
    committed; if the commit fails the previous count is written back, so
    the checkpoint and the committed balances describe the same lines.
    A later run skips that many lines without parsing them.

    A checkpoint is written as soon as the skip phase ends, and after the
    last line the final count is saved and the checkpoint is cleared; a
    checkpoint that is still present always means "resume".
    """

    def __init__(
        self,
        ledger: LedgerService,
        checkpoint_store: CheckpointStore,
        settings: Optional[ProcessingSettings] = None,
        observer: Optional[SkipObserver] = None,
    ):
        """Initialize processing service.

        Args:
            ledger: Ledger service that receives accruals
            checkpoint_store: Store for the resume offset
            settings: Processing parameters (defaults if None)
            observer: Optional callable invoked as
                ``observer(reason, line_number, line)`` for every skipped line

        Raises:
            ValidationError: If settings are invalid
        """
        settings = settings or ProcessingSettings()
        if settings.checkpoint_interval < 1:
            raise ValidationError(
                f"Checkpoint interval must be at least 1, got {settings.checkpoint_interval}"
            )
        if not settings.merchant_id:
            raise ValidationError("Target merchant ID must not be empty")
        rate = Decimal(settings.points_per_dollar)
        if not rate.is_finite() or rate < 0:
            raise ValidationError(
                f"Points per dollar must be non-negative, got {settings.points_per_dollar}"
            )

        self.ledger = ledger
        self.checkpoint_store = checkpoint_store
        self.settings = settings
        self.observer = observer
        self._last_saved = 0

    def process_file(self, file_path: str | Path) -> ProcessingResult:
        """Process a transaction log file, resuming from any saved checkpoint.

        Args:
            file_path: Path to the transaction log

        Returns:
            ProcessingResult with run statistics

        Raises:
            CheckpointLockedError: If another run is using the checkpoint
            CheckpointError: If the stored checkpoint is unreadable
            OSError: If the file cannot be read or the checkpoint cannot be
                written; the last saved checkpoint is left in place
        """
        with self.checkpoint_store.lock():
            # Undecodable bytes become U+FFFD and the line is skipped as malformed
            with open(file_path, "r", encoding="utf-8", errors="replace") as f:
                return self.process_lines(f)

    def process_lines(self, lines: Iterable[str]) -> ProcessingResult:
        """Process an iterable of log lines from the start of the log.

        Lines up to the stored checkpoint are consumed and discarded.
        Any exception rolls back uncommitted accruals and propagates with
        the checkpoint untouched.
        """
        result = ProcessingResult()
        start_offset = self.checkpoint_store.load()
        self._last_saved = start_offset
        result.start_offset = start_offset
        logger.info("Starting processing from line: %d", start_offset)

        current_line = 0
        iterator = iter(lines)
        try:
            for _ in itertools.islice(iterator, start_offset):
                current_line += 1
            if current_line < start_offset:
                logger.warning(
                    "Checkpoint offset %d is beyond end of input (%d lines)",
                    start_offset,
                    current_line,
                )
            # Marks the run as in progress until it completes
            self._save_progress(current_line)

            for line in iterator:
                current_line += 1
                result.processed += 1
                self._apply_line(line, current_line, result)

                if current_line % self.settings.checkpoint_interval == 0:
                    self._save_progress(current_line)
                    logger.info("Processed %d lines...", current_line)

            self._save_progress(current_line)
        except BaseException:
            self.ledger.rollback()
            raise
        finally:
            result.lines_read = current_line

        self.checkpoint_store.clear()
        result.checkpoint_cleared = True
        self._log_summary(result)
        return result

    def _apply_line(self, line: str, line_number: int, result: ProcessingResult) -> None:
        """Apply one line to the ledger, or record why it was skipped."""
        record = parse_transaction_line(line)
        if record is None:
            self._skip(SkipReason.MALFORMED, line_number, line, result)
            return

        if record.merchant_identifier != self.settings.merchant_id:
            self._skip(SkipReason.NON_TARGET, line_number, line, result)
            return

        account = self.ledger.lookup(record.account_identifier)
        if account is None:
            self._skip(SkipReason.UNKNOWN_ACCOUNT, line_number, line, result)
            return

        points = self.ledger.points_for(record.amount, self.settings.points_per_dollar)
        self.ledger.accrue(record.account_identifier, points)
        result.awarded += 1
        result.points_awarded += points
        logger.debug(
            "Awarded %d points to customer %s for transaction on %s",
            points,
            account.display_name,
            record.date,
        )

    def _skip(
        self, reason: SkipReason, line_number: int, line: str, result: ProcessingResult
    ) -> None:
        counter = _SKIP_COUNTERS[reason]
        setattr(result, counter, getattr(result, counter) + 1)
        logger.debug("Skipped line %d (%s)", line_number, reason.value)
        if self.observer is not None:
            self.observer(reason, line_number, line)

    def _save_progress(self, line_number: int) -> None:
        # A failed save leaves the accruals uncommitted for rollback
        self.checkpoint_store.save(line_number)
        try:
            self.ledger.commit()
        except BaseException:
            self.checkpoint_store.save(self._last_saved)
            raise
        self._last_saved = line_number

    def _log_summary(self, result: ProcessingResult) -> None:
        logger.info(
            "Finished at line %d: %d awards (%d points), %d non-target, "
            "%d unknown account, %d malformed",
            result.lines_read,
            result.awarded,
            result.points_awarded,
            result.non_target,
            result.unknown_account,
            result.malformed,
        )
        if result.malformed:
            logger.warning("Skipped %d malformed lines", result.malformed)
