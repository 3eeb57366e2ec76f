"""
Reconciliation marker state machine.

A transaction's reconciliation status lives in one of two canonical forms:

(a) the header carries the marker, which applies to every posting, and no
    posting carries one of its own;
(b) the header carries no marker and each posting's marker (possibly none)
    applies to that posting alone.

normalize() brings a transaction into canonical form. toggle() performs the
single-line interactive edit and then normalizes, so a toggle may split a
header-level marker into per-posting markers or collapse uniform posting
markers back onto the header.

All functions here are pure: they take lines and return new lines.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .lines import HeaderLine, Marker, PostingLine, classify_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineEdit:
    """
    Replacement of one document line.

    Attributes:
        line: 0-based line index in the document snapshot.
        text: New text for the line, without newline.
    """

    line: int
    text: str


def _marked_postings(lines: Sequence[str]) -> list[tuple[int, PostingLine]]:
    """Return (index, posting) pairs for marker-carrying postings (not notes)."""
    result = []
    for index, text in enumerate(lines):
        line = classify_line(text)
        if isinstance(line, PostingLine) and not line.is_note:
            result.append((index, line))
    return result


def normalize(lines: Sequence[str]) -> list[str]:
    """
    Bring one transaction's markers into canonical form.

    - If every posting carries the same explicit marker and the header has
      none, the marker is hoisted onto the header and removed from postings.
    - If the header carries a marker, it wins: markers are removed from
      every posting.
    - Otherwise the lines are returned unchanged.

    Args:
        lines: Header line followed by its posting lines.

    Returns:
        New list of lines. Idempotent.
    """
    result = list(lines)
    if not result:
        return result

    header = classify_line(result[0])
    if not isinstance(header, HeaderLine):
        return result

    postings = _marked_postings(result[1:])
    posting_markers = {posting.marker for _, posting in postings}

    header_marker = header.marker
    if len(posting_markers) == 1 and not header_marker:
        common = next(iter(posting_markers))
        if common:
            result[0] = header.with_marker(common)
            header_marker = common
            logger.debug(f"Hoisted marker '{common.value}' onto header")

    if header_marker:
        for offset, posting in postings:
            if posting.marker:
                result[offset + 1] = posting.with_marker(Marker.NONE)

    return result


def find_transaction_start(lines: Sequence[str], index: int) -> Optional[int]:
    """
    Find the header that owns the line at index.

    Scans backward across posting lines only. A blank line (or any other
    non-posting line) before a header is found ends the search.

    Args:
        lines: Document lines.
        index: Index of a header or posting line.

    Returns:
        Index of the owning header, or None if there is none.
    """
    for i in range(index, -1, -1):
        line = classify_line(lines[i])
        if isinstance(line, HeaderLine):
            return i
        if not isinstance(line, PostingLine):
            return None
    return None


def find_transaction_end(lines: Sequence[str], start: int) -> int:
    """
    Find the last line of the transaction whose header is at start.

    Unlike the reorganization parser, a blank line ends the transaction.

    Args:
        lines: Document lines.
        start: Index of the header line.

    Returns:
        Index of the last posting line (start itself if there are none).
    """
    end = start
    for i in range(start + 1, len(lines)):
        if not isinstance(classify_line(lines[i]), PostingLine):
            break
        end = i
    return end


def _toggle_block(block: list[str], target: int) -> list[str]:
    """Toggle the marker at block[target]; block[0] is the header."""
    header = classify_line(block[0])

    if target == 0:
        block[0] = header.with_marker(header.marker.toggled())
        return normalize(block)

    former = header.marker
    if former:
        # Header-level marker splits into explicit per-posting markers
        block[0] = header.with_marker(Marker.NONE)
        for offset, posting in _marked_postings(block[1:]):
            index = offset + 1
            new_marker = former.toggled() if index == target else former
            block[index] = posting.with_marker(new_marker)
    else:
        posting = classify_line(block[target])
        block[target] = posting.with_marker(posting.marker.toggled())

    return normalize(block)


def toggle(lines: Sequence[str], target_index: int) -> list[str]:
    """
    Toggle the reconciliation marker of one line.

    Header target: binary-cycle the header marker, then normalize.

    Posting target: locate the owning header. If it carries a marker, the
    header is cleared, every other posting receives the former marker
    explicitly and the target receives the toggled one. If it carries no
    marker, only the target's own marker is toggled. The transaction is
    normalized afterwards.

    Args:
        lines: A transaction's lines or a whole document's lines.
        target_index: Index of the line to toggle.

    Returns:
        New list of lines. Unchanged when the target is not a header or
        posting, is a note, or has no owning header.
    """
    result = list(lines)
    if not 0 <= target_index < len(result):
        return result

    target = classify_line(result[target_index])
    if isinstance(target, PostingLine) and target.is_note:
        return result
    if not isinstance(target, (HeaderLine, PostingLine)):
        return result

    start = find_transaction_start(result, target_index)
    if start is None:
        logger.debug(f"No transaction header owns line {target_index}")
        return result

    end = find_transaction_end(result, start)
    block = _toggle_block(result[start:end + 1], target_index - start)
    result[start:end + 1] = block

    return result


def toggle_reconciliation(text: str, line_index: int) -> list[LineEdit]:
    """
    Toggle the marker at a document line and report the resulting edits.

    Args:
        text: Snapshot of the full document text.
        line_index: 0-based index of the line to toggle.

    Returns:
        One LineEdit per changed line, all within the affected transaction.
        An empty list means nothing changed.
    """
    lines = text.split("\n")
    toggled = toggle(lines, line_index)

    edits = [
        LineEdit(line=i, text=new)
        for i, (old, new) in enumerate(zip(lines, toggled))
        if old != new
    ]

    logger.debug(f"Toggle at line {line_index} produced {len(edits)} edit(s)")

    return edits


def apply_edits(text: str, edits: Sequence[LineEdit]) -> str:
    """
    Apply line edits to a document snapshot.

    All edits are checked before any is applied, so either every edit is
    applied or an error is raised and nothing changes.

    Args:
        text: Snapshot the edits were computed against.
        edits: Line replacements.

    Returns:
        The edited document text.

    Raises:
        IndexError: If an edit refers to a line outside the document.
    """
    lines = text.split("\n")

    for edit in edits:
        if not 0 <= edit.line < len(lines):
            raise IndexError(
                f"Edit line {edit.line} outside document of {len(lines)} line(s)"
            )

    for edit in edits:
        lines[edit.line] = edit.text

    return "\n".join(lines)
