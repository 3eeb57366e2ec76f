"""
Transaction parser for ledger documents.

Groups the classified lines of a document into Transaction records, each
carrying the comment block that preceded it, plus the comment lines left
over at the end of the document.

The parser is tolerant: blank lines inside a transaction are skipped rather
than treated as a boundary, and any line it cannot classify is kept as
comment text so that no characters are ever lost.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Union

from .lines import HeaderLine, PostingLine, classify_line, is_blank

logger = logging.getLogger(__name__)


@dataclass
class Transaction:
    """
    A transaction parsed from a ledger document.

    Attributes:
        date: Calendar date of the header, or None if the header's digits
              do not form a real date.
        date_key: Header date normalized to YYYY-MM-DD, used for sorting.
        raw_lines: Header line followed by its posting lines. Blank lines
                   found inside the block are not included.
        preceding_comments: Comment, blank or unrecognized lines that came
                            directly before the header.
        source_range: (start_line, end_line) of the block in the source,
                      0-based and inclusive.
    """

    date: Optional[date]
    date_key: str
    raw_lines: list[str]
    preceding_comments: list[str] = field(default_factory=list)
    source_range: tuple[int, int] = (0, 0)

    @property
    def header(self) -> str:
        """The header line."""
        return self.raw_lines[0]

    @property
    def postings(self) -> list[str]:
        """All lines after the header."""
        return self.raw_lines[1:]

    @property
    def text(self) -> str:
        """The transaction lines joined with newlines."""
        return "\n".join(self.raw_lines)


@dataclass
class ParsedDocument:
    """
    Result of parsing a ledger document.

    Attributes:
        transactions: Transactions in source order.
        standalone_comments: Trailing lines not attached to any transaction.
    """

    transactions: list[Transaction] = field(default_factory=list)
    standalone_comments: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.transactions and not self.standalone_comments


def split_lines(text: str) -> list[str]:
    """
    Split document text into lines.

    A trailing newline terminates the last line rather than starting an
    empty one, so "a\\n" yields ["a"]. The empty string yields [""].

    Args:
        text: Full document text.

    Returns:
        List of lines without newline characters.
    """
    lines = text.split("\n")
    if len(lines) > 1 and text.endswith("\n"):
        lines.pop()
    return lines


def parse_document(source: Union[str, Iterable[str]]) -> ParsedDocument:
    """
    Parse a ledger document into transactions and standalone comments.

    Args:
        source: Full document text, or an already split sequence of lines.

    Returns:
        ParsedDocument with transactions in source order.
    """
    lines = split_lines(source) if isinstance(source, str) else list(source)
    result = ParsedDocument()

    if lines == [""]:
        return result

    pending_comments: list[str] = []
    i = 0

    while i < len(lines):
        line = classify_line(lines[i])

        if not isinstance(line, HeaderLine):
            pending_comments.append(lines[i])
            i += 1
            continue

        start_line = i
        raw_lines = [lines[i].rstrip()]
        i += 1

        # Blank lines inside a transaction are skipped, not treated as the end
        while i < len(lines):
            text = lines[i]
            if is_blank(text):
                i += 1
                continue
            if not isinstance(classify_line(text), PostingLine):
                break
            raw_lines.append(text)
            i += 1

        result.transactions.append(
            Transaction(
                date=line.date,
                date_key=line.date_key,
                raw_lines=raw_lines,
                preceding_comments=pending_comments,
                source_range=(start_line, i - 1),
            )
        )
        pending_comments = []

    result.standalone_comments = pending_comments

    logger.debug(
        f"Parsed {len(result.transactions)} transaction(s) and "
        f"{len(result.standalone_comments)} standalone comment line(s)"
    )

    return result
