"""Member enrollment domain service."""

from typing import Optional

from loyaltypoints.database.base import AccountRepository
from loyaltypoints.database.memory import SEED_MEMBERS
from loyaltypoints.domain.entities import Account
from loyaltypoints.domain.errors import ValidationError


class MemberService:
    """Service for managing loyalty program members."""

    def __init__(self, repository: AccountRepository):
        """Initialize member service.

        Args:
            repository: Account repository instance
        """
        self.repository = repository

    def enroll(self, account_identifier: str, display_name: str, points: int = 0) -> Account:
        """Enroll a new member and commit.

        Args:
            account_identifier: Card number or other member key
            display_name: Member name
            points: Starting balance

        Returns:
            The created account

        Raises:
            ValidationError: If any field is empty or points is negative
            ConflictError: If the identifier is already enrolled
        """
        account_identifier = account_identifier.strip()
        display_name = display_name.strip()
        if not account_identifier:
            raise ValidationError("Account identifier must not be empty")
        if "," in account_identifier:
            raise ValidationError("Account identifier must not contain ','")
        if not display_name:
            raise ValidationError("Member name must not be empty")
        if points < 0:
            raise ValidationError(f"Starting points must be non-negative, got {points}")

        account = self.repository.create_account(
            account_identifier=account_identifier,
            display_name=display_name,
            points_balance=points,
        )
        self.repository.commit()
        return account

    def get_member(self, account_identifier: str) -> Optional[Account]:
        """Get member by identifier."""
        return self.repository.get_account(account_identifier)

    def list_members(self) -> list[Account]:
        """List all members."""
        return self.repository.list_accounts()

    def seed_demo_members(self) -> int:
        """Enroll the demonstration members that are not yet present.

        Returns:
            Number of members created
        """
        created = 0
        for name, identifier, points in SEED_MEMBERS:
            if self.repository.get_account(identifier) is not None:
                continue
            self.repository.create_account(
                account_identifier=identifier, display_name=name, points_balance=points
            )
            created += 1
        self.repository.commit()
        return created
