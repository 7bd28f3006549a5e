"""Utility functions for loyaltypoints."""

from loyaltypoints.utils.amount_parser import parse_amount
from loyaltypoints.utils.date_parser import parse_date
from loyaltypoints.utils.logger import configure_logging

__all__ = ["parse_amount", "parse_date", "configure_logging"]
