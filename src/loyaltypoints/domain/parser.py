"""Transaction log line parser."""

from typing import Optional

from loyaltypoints.domain.entities import TransactionRecord
from loyaltypoints.utils.amount_parser import parse_amount

FIELD_DELIMITER = ","
FIELD_COUNT = 4
REPLACEMENT_CHARACTER = "\ufffd"


def parse_transaction_line(line: str) -> Optional[TransactionRecord]:
    """Parse one line of the transaction log.

    Expected layout: ``date,account_identifier,merchant_identifier,amount``
    with no header row and no quoting. The date is kept as written.

    Args:
        line: Raw line, with or without its trailing newline

    Returns:
        TransactionRecord, or None if the line is malformed (wrong number
        of fields, an amount that is not a non-negative decimal, or bytes
        that could not be decoded)
    """
    if REPLACEMENT_CHARACTER in line:
        return None

    fields = line.rstrip("\r\n").split(FIELD_DELIMITER)
    if len(fields) != FIELD_COUNT:
        return None

    date_str, account_identifier, merchant_identifier, amount_str = (
        field.strip() for field in fields
    )

    try:
        amount = parse_amount(amount_str)
    except ValueError:
        return None

    return TransactionRecord(
        date=date_str,
        account_identifier=account_identifier,
        merchant_identifier=merchant_identifier,
        amount=amount,
    )
