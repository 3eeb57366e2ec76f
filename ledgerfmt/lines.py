"""
Line classification for ledger documents.

Every line of a ledger file is classified exactly once into one of three
variants, and downstream code matches on the variant instead of re-running
patterns against raw text:

- HeaderLine: a transaction header beginning with a date
- PostingLine: an indented line inside a transaction block
- OtherLine: blank lines, top-level comments, directives and anything else

Classification is purely syntactic and never raises.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple, Optional, Union

logger = logging.getLogger(__name__)


class Marker(Enum):
    """Reconciliation status symbol of a transaction or posting."""

    NONE = ""
    PENDING = "!"
    CLEARED = "*"

    def __bool__(self) -> bool:
        return self is not Marker.NONE

    def toggled(self) -> "Marker":
        """
        Binary-cycle this marker for the interactive toggle action.

        NONE becomes CLEARED; CLEARED and PENDING both become NONE.
        PENDING never cycles to CLEARED directly.

        Returns:
            The marker after one toggle.
        """
        return Marker.CLEARED if self is Marker.NONE else Marker.NONE

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> "Marker":
        """Map a captured symbol ("*", "!" or nothing) to a Marker."""
        return cls(symbol) if symbol else cls.NONE


HEADER_PATTERN = re.compile(
    r"^(?P<date>\d{4}[-/]\d{2}[-/]\d{2})"
    r"(?P<aux>=\d{4}[-/]\d{2}[-/]\d{2})?"
    r"(?:\s+(?P<marker>[*!]))?"
    r"(?P<rest>.*)$"
)

POSTING_PATTERN = re.compile(
    r"^(?P<indent>\s+)(?:(?P<marker>[*!])\s+)?(?P<rest>.*)$"
)

# Account name: a letter, then non-space runs joined by single spaces.
# The amount starts after the first run of two or more whitespace characters.
ACCOUNT_AMOUNT_PATTERN = re.compile(
    r"^(?P<account>[^\W\d_]\S*(?:\s\S+)*?)(?:\s{2,}(?P<amount>.*))?$"
)

NOTE_PREFIX = ";"


def _join_rest(prefix: str, rest: str) -> str:
    """Join a rebuilt line prefix to its remaining text, keeping a separator."""
    if rest and not rest[0].isspace():
        return f"{prefix} {rest}"
    return f"{prefix}{rest}"


@dataclass(frozen=True)
class HeaderLine:
    """
    A transaction header line.

    Attributes:
        text: The full original line.
        date_text: The primary date as written (YYYY-MM-DD or YYYY/MM/DD).
        aux_date: The end-effective date including its "=" prefix, or "".
        marker: The header's explicit reconciliation marker.
        rest: Everything after the date(s) and marker (code, payee, notes).
    """

    text: str
    date_text: str
    aux_date: str
    marker: Marker
    rest: str

    @property
    def date_key(self) -> str:
        """The primary date normalized to YYYY-MM-DD text."""
        return self.date_text.replace("/", "-")

    @property
    def date(self) -> Optional[date]:
        """
        The primary date as a calendar date.

        Returns:
            date object, or None if the digits do not form a real date
            (e.g. 2024-13-45).
        """
        try:
            return datetime.strptime(self.date_key, "%Y-%m-%d").date()
        except ValueError:
            return None

    def with_marker(self, marker: Marker) -> str:
        """
        Rebuild the header text with the given marker.

        Only the marker token and the single space before it change; the
        date, end-effective date and remaining text are kept as written.

        Args:
            marker: Marker to place on the header (Marker.NONE removes it).

        Returns:
            The rebuilt header line.
        """
        prefix = f"{self.date_text}{self.aux_date}"
        if marker:
            prefix = f"{prefix} {marker.value}"
        return _join_rest(prefix, self.rest)


@dataclass(frozen=True)
class PostingLine:
    """
    An indented line inside a transaction block.

    Attributes:
        text: The full original line.
        indent: Leading whitespace.
        marker: Explicit per-posting reconciliation marker.
        rest: Text after the indentation and marker.
    """

    text: str
    indent: str
    marker: Marker
    rest: str

    @property
    def is_note(self) -> bool:
        """True for indented comment lines, which carry no marker."""
        return self.text.lstrip().startswith(NOTE_PREFIX)

    def with_marker(self, marker: Marker) -> str:
        """Rebuild the posting text with the given marker (NONE removes it)."""
        if self.is_note:
            return self.text
        if marker:
            return f"{self.indent}{marker.value} {self.rest}"
        return f"{self.indent}{self.rest}"


@dataclass(frozen=True)
class OtherLine:
    """A blank line, top-level comment, directive or unrecognized text."""

    text: str


Line = Union[HeaderLine, PostingLine, OtherLine]


class PostingLineParts(NamedTuple):
    """On-demand decomposition of a posting line; never stored."""

    indent: str
    marker: Marker
    account: str
    amount: str
    rest: str


def classify_line(text: str) -> Line:
    """
    Classify one line of a ledger document.

    Args:
        text: A single line without its newline terminator.

    Returns:
        HeaderLine, PostingLine, or OtherLine. Never raises; anything that is
        not confidently a header or posting is an OtherLine.
    """
    if not text.strip():
        return OtherLine(text)

    match = HEADER_PATTERN.match(text)
    if match:
        return HeaderLine(
            text=text,
            date_text=match.group("date"),
            aux_date=match.group("aux") or "",
            marker=Marker.from_symbol(match.group("marker")),
            rest=match.group("rest"),
        )

    match = POSTING_PATTERN.match(text)
    if match:
        return PostingLine(
            text=text,
            indent=match.group("indent"),
            marker=Marker.from_symbol(match.group("marker")),
            rest=match.group("rest"),
        )

    return OtherLine(text)


def is_blank(text: str) -> bool:
    """Check whether a line is empty or whitespace-only."""
    return not text.strip()


def split_posting(text: str) -> Optional[PostingLineParts]:
    """
    Split a posting line into indentation, marker, account and amount.

    The account is the text up to the first run of two or more whitespace
    characters; the amount (possibly followed by a comment) is everything
    after it.

    Args:
        text: A single line.

    Returns:
        PostingLineParts, or None when the line is not a posting, is a note,
        or does not start with an account name.
    """
    line = classify_line(text)
    if not isinstance(line, PostingLine) or line.is_note:
        return None

    body = line.rest.strip()
    match = ACCOUNT_AMOUNT_PATTERN.match(body)
    if not match:
        logger.debug(f"Posting without a recognizable account: {text!r}")
        return None

    return PostingLineParts(
        indent=line.indent,
        marker=line.marker,
        account=match.group("account"),
        amount=(match.group("amount") or "").strip(),
        rest=body,
    )
