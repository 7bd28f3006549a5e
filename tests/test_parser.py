"""Tests for transaction line parsing."""

import pytest
from decimal import Decimal

from loyaltypoints.domain.entities import TransactionRecord
from loyaltypoints.domain.parser import parse_transaction_line


def test_parse_valid_line():
    """Test parsing a well-formed line."""
    record = parse_transaction_line("2024-01-01,1234567890123456,GAS123,50.00")

    assert record == TransactionRecord(
        date="2024-01-01",
        account_identifier="1234567890123456",
        merchant_identifier="GAS123",
        amount=Decimal("50.00"),
    )


def test_parse_strips_line_ending():
    """Test that trailing newline characters are ignored."""
    record = parse_transaction_line("2024-01-01,1234567890123456,GAS123,12.5\r\n")

    assert record is not None
    assert record.amount == Decimal("12.5")


def test_parse_keeps_date_as_written():
    """Dates are not validated or normalized."""
    record = parse_transaction_line("not-a-date,1234567890123456,GAS123,1")

    assert record is not None
    assert record.date == "not-a-date"


def test_parse_strips_field_whitespace():
    """Test that whitespace around fields is removed."""
    record = parse_transaction_line(" 2024-01-01 , 1234567890123456 , GAS123 , 5.00 ")

    assert record is not None
    assert record.account_identifier == "1234567890123456"
    assert record.merchant_identifier == "GAS123"


@pytest.mark.parametrize(
    "line",
    [
        "2024-01-01,1234567890123456",
        "2024-01-01,1234567890123456,GAS123",
        "",
        "\n",
        "2024-01-01,1234567890123456,GAS123,50.00,extra",
    ],
)
def test_parse_wrong_field_count_is_malformed(line):
    """Lines without exactly four fields produce no record."""
    assert parse_transaction_line(line) is None


@pytest.mark.parametrize(
    "amount",
    ["abc", "", "-5.00", "$50.00", "1,000", "NaN", "Infinity", "1e3", "5..0"],
)
def test_parse_bad_amount_is_malformed(amount):
    """Lines whose amount is not a non-negative decimal produce no record."""
    assert parse_transaction_line(f"2024-01-01,1234567890123456,GAS123,{amount}") is None


def test_parse_zero_amount():
    """Zero is a valid amount."""
    record = parse_transaction_line("2024-01-01,1234567890123456,GAS123,0.00")

    assert record is not None
    assert record.amount == Decimal("0")


def test_parse_undecodable_bytes_is_malformed():
    """Lines carrying the decoder's replacement character produce no record."""
    assert parse_transaction_line("2024-01-01,\ufffd\ufffd,GAS123,5") is None
    assert parse_transaction_line("2024-01-01,1234567890123456,GAS123,5.0\ufffd") is None
