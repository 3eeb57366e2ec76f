"""
Shared test helpers for ledgerfmt unit tests.

Provides builders for ledger text so tests can describe transactions
without spelling out indentation by hand.
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def posting(account: str, amount: str = "", marker: str = "", indent: str = "    ") -> str:
    """Build an unaligned posting line."""
    text = f"{marker} {account}" if marker else account
    if amount:
        text = f"{text}  {amount}"
    return f"{indent}{text}"


def transaction(header: str, *postings: str) -> str:
    """Join a header and its postings into one block of text."""
    return "\n".join([header, *postings])


def ledger(*blocks: str) -> str:
    """Join blocks with one blank line between them and a final newline."""
    return "\n\n".join(blocks) + "\n"


def aligned(account: str, amount: str = "", decimal_column: int = 62, indent: str = " ") -> str:
    """
    Build the expected aligned form of a posting.

    Mirrors the alignment rule independently of the code under test: the
    decimal point (or the amount's first character) lands on decimal_column,
    with at least two spaces after the account.
    """
    head = f"{indent}{account}"
    if not amount:
        return head
    dot = amount.find(".")
    target = decimal_column - (dot if dot >= 0 else 0)
    return head + " " * max(target - len(head), 2) + amount
