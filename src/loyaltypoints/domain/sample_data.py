"""Sample transaction log generation."""

import random
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Iterator, Optional, Sequence

from loyaltypoints.database.memory import SEED_MEMBERS
from loyaltypoints.domain.entities import DEFAULT_MERCHANT_ID
from loyaltypoints.domain.errors import ValidationError
from loyaltypoints.domain.parser import FIELD_DELIMITER

SAMPLE_MERCHANT_IDS = [
    DEFAULT_MERCHANT_ID,
    "SHOP456",
    "REST789",
    "GROC012",
    "CLTH345",
]

MEMBER_CARDS = [identifier for _, identifier, _ in SEED_MEMBERS]

CARD_NUMBER_LENGTH = 16
MIN_AMOUNT = 10
MAX_AMOUNT = 100


def generate_transaction_lines(
    count: int,
    transaction_date: date,
    rng: Optional[random.Random] = None,
    member_ratio: float = 0.1,
    member_cards: Sequence[str] = MEMBER_CARDS,
    merchant_ids: Sequence[str] = SAMPLE_MERCHANT_IDS,
) -> Iterator[str]:
    """Return an iterator of sample transaction log lines.

    Each line uses a random merchant and an amount between 10.00 and
    100.00. With probability ``member_ratio`` the card belongs to one of
    ``member_cards``; otherwise a random 16-digit number is used.

    Raises:
        ValidationError: If count is negative or member_ratio is outside [0, 1]
    """
    if count < 0:
        raise ValidationError(f"Transaction count must be non-negative, got {count}")
    if not 0 <= member_ratio <= 1:
        raise ValidationError(f"Member ratio must be between 0 and 1, got {member_ratio}")

    return _iter_lines(
        count, transaction_date.isoformat(), rng or random.Random(),
        member_ratio, member_cards, merchant_ids,
    )


def _iter_lines(
    count: int,
    date_str: str,
    rng: random.Random,
    member_ratio: float,
    member_cards: Sequence[str],
    merchant_ids: Sequence[str],
) -> Iterator[str]:
    for _ in range(count):
        merchant_id = rng.choice(merchant_ids)
        if member_cards and rng.random() < member_ratio:
            card = rng.choice(member_cards)
        else:
            card = "".join(str(rng.randrange(10)) for _ in range(CARD_NUMBER_LENGTH))
        cents = rng.randrange(MIN_AMOUNT * 100, MAX_AMOUNT * 100 + 1)
        amount = Decimal(cents) / 100
        yield FIELD_DELIMITER.join([date_str, card, merchant_id, f"{amount:.2f}"])


def write_sample_file(
    output_path: str | Path,
    count: int,
    transaction_date: date,
    seed: Optional[int] = None,
    member_ratio: float = 0.1,
) -> int:
    """Write a sample transaction log.

    Returns:
        Number of lines written
    """
    lines = generate_transaction_lines(
        count, transaction_date, rng=random.Random(seed), member_ratio=member_ratio
    )
    written = 0
    with open(output_path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
            written += 1
    return written
