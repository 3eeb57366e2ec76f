"""
Serialization of parsed transactions back into document text.
"""

import logging
from typing import Sequence

from .lines import is_blank
from .parser import Transaction

logger = logging.getLogger(__name__)


def rebuild_content(
    transactions: Sequence[Transaction],
    standalone_comments: Sequence[str]
) -> str:
    """
    Rebuild a ledger document from transactions and trailing comments.

    Layout:
    - each transaction's preceding comments, separated from earlier output
      by one blank line
    - the transaction lines
    - exactly one blank line between transactions
    - trailing standalone comments after one blank line

    Args:
        transactions: Transactions in output order.
        standalone_comments: Lines to emit after the last transaction.

    Returns:
        Document text ending with a newline, or "" if there is nothing to
        emit.
    """
    result: list[str] = []

    for i, transaction in enumerate(transactions):
        comments = list(transaction.preceding_comments)
        if result:
            # the separator after the previous transaction is the blank line
            while comments and is_blank(comments[0]):
                comments.pop(0)

        if comments:
            if result and result[-1] != "":
                result.append("")
            result.extend(comments)

        result.extend(transaction.raw_lines)

        if i < len(transactions) - 1:
            result.append("")

    if standalone_comments:
        if result:
            result.append("")
        result.extend(standalone_comments)

    if not result:
        return ""

    return "\n".join(result) + "\n"
