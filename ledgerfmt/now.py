"""
Locate where a date belongs in a date-ordered ledger document.

Used to show a "now" marker and to choose where a new transaction for a
given date should be inserted.
"""

import logging
from datetime import date

from .lines import HeaderLine, classify_line, is_blank

logger = logging.getLogger(__name__)


def find_date_position(content: str, target_date: date) -> int:
    """
    Find the line where a transaction dated target_date belongs.

    The position is just before the first header dated strictly after
    target_date. If the line before that header is blank, the blank line's
    index is returned instead, so an insertion lands between transactions.

    Args:
        content: Full document text.
        target_date: Date to place.

    Returns:
        0-based line index. If no header is later than target_date, the end
        of the document: the last line index when content ends with a
        newline, otherwise the number of lines.
    """
    lines = content.split("\n")
    target_key = target_date.isoformat()

    for i, text in enumerate(lines):
        line = classify_line(text)
        if isinstance(line, HeaderLine) and line.date_key > target_key:
            if i > 0 and is_blank(lines[i - 1]):
                return i - 1
            return i

    return len(lines) - 1 if content.endswith("\n") else len(lines)
