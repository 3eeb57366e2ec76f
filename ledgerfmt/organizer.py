"""
Ledger document organizer.

Runs the full reorganization pipeline over a document snapshot:

1. Parse into transactions and comment blocks
2. Optionally sort transactions by date (stable)
3. Normalize reconciliation markers and align amounts
4. Rebuild the document text
5. Verify that only whitespace and markers changed

IMPORTANT: step 5 is not optional. If it fails, ContentPreservationError is
raised and no transformed text is returned, so the caller's document stays
untouched.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .align import align_transaction
from .config import FormatterConfig
from .parser import ParsedDocument, parse_document
from .preserve import ContentPreservationError, check_content_preserved
from .rebuild import rebuild_content
from .sorter import sort_transactions

logger = logging.getLogger(__name__)


@dataclass
class OrganizeResult:
    """
    Result of reorganizing a document.

    Attributes:
        text: The reorganized document text.
        changed: False if text is byte-identical to the input, so the host
                 can skip a no-op edit.
    """

    text: str
    changed: bool


def organize_parsed(
    original: str,
    parsed: ParsedDocument,
    sort: bool = False,
    config: Optional[FormatterConfig] = None
) -> OrganizeResult:
    """
    Reorganize an already parsed document.

    Args:
        original: The text parsed was produced from; used for the
                  content-preservation check and change detection.
        parsed: Result of parse_document(original).
        sort: Whether to sort transactions by date.
        config: Formatting configuration; uses default if not provided.

    Returns:
        OrganizeResult with the new text.

    Raises:
        ContentPreservationError: If the rebuilt text lost or gained content.
    """
    transactions = sort_transactions(parsed.transactions, sort=sort)
    aligned = [align_transaction(t, config) for t in transactions]

    text = rebuild_content(aligned, parsed.standalone_comments)

    try:
        check_content_preserved(original, text)
    except ContentPreservationError as e:
        logger.error(f"Reorganization aborted: {e}")
        raise

    changed = text != original
    logger.debug(f"Reorganized document (sort={sort}, changed={changed})")

    return OrganizeResult(text=text, changed=changed)


def organize(
    content: str,
    sort: bool = False,
    config: Optional[FormatterConfig] = None
) -> OrganizeResult:
    """
    Reorganize a ledger document.

    Args:
        content: Full document text.
        sort: Whether to sort transactions by date.
        config: Formatting configuration; uses default if not provided.

    Returns:
        OrganizeResult with the new text and a changed flag.

    Raises:
        ContentPreservationError: If the rebuilt text lost or gained content.
    """
    return organize_parsed(content, parse_document(content), sort=sort, config=config)


def format_content(content: str, config: Optional[FormatterConfig] = None) -> str:
    """Align amounts and normalize markers, keeping transaction order."""
    return organize(content, sort=False, config=config).text


def sort_content(content: str, config: Optional[FormatterConfig] = None) -> str:
    """Sort transactions by date, then align and normalize like format_content."""
    return organize(content, sort=True, config=config).text
