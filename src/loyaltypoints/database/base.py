"""Abstract account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from loyaltypoints.domain.entities import Account


class AccountRepository(ABC):
    """Abstract store of loyalty program members.

    Changes made through ``persist`` and ``create_account`` are pending
    until ``commit``; ``rollback`` discards them.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the underlying store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the underlying store."""
        pass

    @abstractmethod
    def get_account(self, account_identifier: str) -> Optional[Account]:
        """Get account by identifier, including pending changes."""
        pass

    @abstractmethod
    def persist(self, account: Account) -> None:
        """Store the given account state, replacing any previous one."""
        pass

    @abstractmethod
    def create_account(
        self, account_identifier: str, display_name: str, points_balance: int = 0
    ) -> Account:
        """Enroll a new member. Raises ConflictError if already enrolled."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by display name."""
        pass

    @abstractmethod
    def commit(self) -> None:
        """Make pending changes durable."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard pending changes."""
        pass
