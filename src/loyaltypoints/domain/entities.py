"""Domain model entities for loyaltypoints.

These are pure data classes representing business concepts, independent of
how members are stored. Transaction records are built per input line and
thrown away; accounts are replaced (never mutated) when points accrue.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


DEFAULT_MERCHANT_ID = "GAS123"
DEFAULT_POINTS_PER_DOLLAR = Decimal("1.0")
DEFAULT_CHECKPOINT_INTERVAL = 1000


@dataclass(frozen=True)
class TransactionRecord:
    """One parsed line of the transaction log."""

    date: str
    account_identifier: str
    merchant_identifier: str
    amount: Decimal


@dataclass(frozen=True)
class Account:
    """Loyalty program member domain entity."""

    display_name: str
    account_identifier: str
    points_balance: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ProcessingSettings:
    """Parameters for a processing run."""

    merchant_id: str = DEFAULT_MERCHANT_ID
    points_per_dollar: Decimal = DEFAULT_POINTS_PER_DOLLAR
    checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL


class SkipReason(Enum):
    """Why a line did not produce a loyalty event."""

    MALFORMED = "malformed"
    NON_TARGET = "non_target"
    UNKNOWN_ACCOUNT = "unknown_account"


@dataclass
class ProcessingResult:
    """Statistics for a single processing run.

    ``lines_read`` is the absolute line counter (counted from the start of
    the file, skipped lines included); ``processed`` only counts lines
    examined during this run.
    """

    start_offset: int = 0
    lines_read: int = 0
    processed: int = 0
    awarded: int = 0
    points_awarded: int = 0
    malformed: int = 0
    non_target: int = 0
    unknown_account: int = 0
    checkpoint_cleared: bool = False

    @property
    def skipped(self) -> int:
        """Total lines that did not produce a loyalty event."""
        return self.malformed + self.non_target + self.unknown_account

    @property
    def resumed(self) -> bool:
        return self.start_offset > 0
