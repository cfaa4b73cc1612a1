"""Utility functions for ledgerly."""

from ledgerly.utils.date_parser import parse_date
from ledgerly.utils.amount_parser import parse_amount
from ledgerly.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "resolve_account"]
