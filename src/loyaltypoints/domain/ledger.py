"""Loyalty ledger domain service."""

import logging
from dataclasses import replace
from decimal import Decimal, ROUND_FLOOR
from typing import Optional

from loyaltypoints.database.base import AccountRepository
from loyaltypoints.domain.entities import Account, DEFAULT_POINTS_PER_DOLLAR
from loyaltypoints.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for looking up members and accruing points."""

    def __init__(
        self,
        repository: AccountRepository,
        points_per_dollar: Decimal = DEFAULT_POINTS_PER_DOLLAR,
    ):
        """Initialize ledger service.

        Args:
            repository: Account repository instance
            points_per_dollar: Points earned per unit of transaction amount

        Raises:
            ValidationError: If points_per_dollar is negative
        """
        points_per_dollar = Decimal(points_per_dollar)
        if points_per_dollar < 0:
            raise ValidationError(
                f"Points per dollar must be non-negative, got {points_per_dollar}"
            )
        self.repository = repository
        self.points_per_dollar = points_per_dollar

    def lookup(self, account_identifier: str) -> Optional[Account]:
        """Get a member account by identifier.

        Returns:
            Account entity or None if the identifier is not enrolled
        """
        return self.repository.get_account(account_identifier)

    def points_for(self, amount: Decimal, points_per_dollar: Optional[Decimal] = None) -> int:
        """Return the points earned for a purchase amount.

        Points are floor(amount × rate), where rate is ``points_per_dollar``
        if given and the ledger's own rate otherwise.
        """
        rate = self.points_per_dollar if points_per_dollar is None else points_per_dollar
        points = (amount * rate).to_integral_value(rounding=ROUND_FLOOR)
        return int(points)

    def accrue(self, account_identifier: str, points: int) -> Optional[int]:
        """Add points to a member's balance.

        Args:
            account_identifier: Member account identifier
            points: Points to add

        Returns:
            New balance, or None if the identifier is not enrolled

        Raises:
            ValidationError: If points is negative
        """
        if points < 0:
            raise ValidationError(f"Cannot accrue negative points ({points})")

        account = self.repository.get_account(account_identifier)
        if account is None:
            return None

        updated = replace(account, points_balance=account.points_balance + points)
        self.repository.persist(updated)
        return updated.points_balance

    def list_accounts(self) -> list[Account]:
        """List all member accounts."""
        return self.repository.list_accounts()

    def total_points(self) -> int:
        """Return the sum of all member balances."""
        return sum(account.points_balance for account in self.repository.list_accounts())

    def commit(self) -> None:
        """Make accrued points durable."""
        self.repository.commit()

    def rollback(self) -> None:
        """Discard points accrued since the last commit."""
        self.repository.rollback()
