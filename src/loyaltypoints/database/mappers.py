"""Mapper functions to convert between domain models and SQLAlchemy models."""

from loyaltypoints.domain import entities as domain
from loyaltypoints.database.models import Member as ORMMember


def member_to_domain(orm_member: ORMMember) -> domain.Account:
    """Convert SQLAlchemy Member model to domain Account entity."""
    return domain.Account(
        display_name=orm_member.display_name,
        account_identifier=orm_member.account_identifier,
        points_balance=orm_member.points_balance,
        created_at=orm_member.created_at,
    )


def apply_account_to_member(account: domain.Account, orm_member: ORMMember) -> ORMMember:
    """Copy mutable domain Account fields onto an SQLAlchemy Member."""
    orm_member.display_name = account.display_name
    orm_member.points_balance = account.points_balance
    return orm_member
