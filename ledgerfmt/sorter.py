"""
Chronological ordering of parsed transactions.
"""

import logging
from typing import Sequence

from .parser import Transaction

logger = logging.getLogger(__name__)


def sort_transactions(transactions: Sequence[Transaction], sort: bool = True) -> list[Transaction]:
    """
    Order transactions by date.

    Python's sort is stable, so transactions sharing a date keep their
    original relative order. Dates are compared as zero-padded YYYY-MM-DD
    text, which also gives a consistent position to headers whose digits are
    not a real calendar date.

    Args:
        transactions: Transactions in source order.
        sort: If False, the transactions are returned in source order.

    Returns:
        New list of transactions.
    """
    if not sort:
        return list(transactions)

    result = sorted(transactions, key=lambda t: t.date_key)

    moved = sum(1 for before, after in zip(transactions, result) if before is not after)
    logger.debug(f"Sorted {len(result)} transaction(s), {moved} changed position")

    return result
