"""In-memory account repository."""

from datetime import datetime, UTC
from typing import Iterable, Optional

from loyaltypoints.database.base import AccountRepository
from loyaltypoints.domain.entities import Account
from loyaltypoints.domain.errors import ConflictError, duplicate_account


# Demonstration members: (display name, card number, starting balance)
SEED_MEMBERS = [
    ("John Doe", "1234567890123456", 100),
    ("Jane Smith", "2345678901234567", 250),
    ("Bob Johnson", "3456789012345678", 50),
]


class InMemoryAccountRepository(AccountRepository):
    """Dictionary-backed implementation of AccountRepository.

    Keeps committed state and pending changes apart so that a failed run
    can be rolled back to the last commit, as a database session would.
    """

    def __init__(self, accounts: Optional[Iterable[Account]] = None):
        self._committed: dict[str, Account] = {}
        self._pending: dict[str, Account] = {}
        for account in accounts or ():
            self._committed[account.account_identifier] = account

    @classmethod
    def seeded(cls) -> "InMemoryAccountRepository":
        """Create a repository holding the demonstration members."""
        now = datetime.now(UTC)
        return cls(
            Account(
                display_name=name,
                account_identifier=identifier,
                points_balance=points,
                created_at=now,
            )
            for name, identifier, points in SEED_MEMBERS
        )

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        self._pending.clear()

    def get_account(self, account_identifier: str) -> Optional[Account]:
        if account_identifier in self._pending:
            return self._pending[account_identifier]
        return self._committed.get(account_identifier)

    def persist(self, account: Account) -> None:
        self._pending[account.account_identifier] = account

    def create_account(
        self, account_identifier: str, display_name: str, points_balance: int = 0
    ) -> Account:
        if self.get_account(account_identifier) is not None:
            raise ConflictError(duplicate_account(account_identifier))
        account = Account(
            display_name=display_name,
            account_identifier=account_identifier,
            points_balance=points_balance,
            created_at=datetime.now(UTC),
        )
        self._pending[account_identifier] = account
        return account

    def list_accounts(self) -> list[Account]:
        merged = {**self._committed, **self._pending}
        return sorted(merged.values(), key=lambda acc: acc.display_name)

    def commit(self) -> None:
        self._committed.update(self._pending)
        self._pending.clear()

    def rollback(self) -> None:
        self._pending.clear()

    def committed_balances(self) -> dict[str, int]:
        """Return identifier → balance for committed state only."""
        return {
            identifier: account.points_balance
            for identifier, account in self._committed.items()
        }
