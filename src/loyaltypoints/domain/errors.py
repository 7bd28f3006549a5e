"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class CheckpointError(DomainError):
    """Stored checkpoint cannot be interpreted as a line offset."""


class CheckpointLockedError(ConflictError):
    """Another run holds the checkpoint lock."""


def account_not_found(account_identifier: str) -> str:
    """Return message for missing member account."""
    return f"Account {account_identifier} not found"


def duplicate_account(account_identifier: str) -> str:
    """Return message for an account identifier that is already enrolled."""
    return f"Account {account_identifier} already exists"


def invalid_checkpoint(path: str, content: str) -> str:
    """Return message for a checkpoint file with unusable content."""
    return f"Checkpoint file {path} does not contain a line offset: {content!r}"


def checkpoint_locked(path: str) -> str:
    """Return message when another run is using the checkpoint."""
    return (
        f"Checkpoint {path} is locked by another run. "
        "Wait for it to finish before starting a new one."
    )
