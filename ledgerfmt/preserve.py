"""
Content-preservation check for reorganized documents.

Reorganizing a ledger file may only move whitespace and reconciliation
markers. Everything else must survive: the multiset of remaining characters
before and after must be identical. A mismatch means the transformation
itself is broken, so it is a fatal error and the transformed text must not
be used.
"""

import logging
import re

logger = logging.getLogger(__name__)

IGNORED_CHARACTERS = re.compile(r"[\s*!]")


class ContentPreservationError(RuntimeError):
    """
    Raised when a reorganization altered more than whitespace and markers.
    
    Attributes:
        original_count: Number of significant characters in the input.
        transformed_count: Number of significant characters in the output.
    """
    
    def __init__(self, original_count: int, transformed_count: int):
        self.original_count = original_count
        self.transformed_count = transformed_count
        super().__init__(
            f"Content validation failed! "
            f"Original: {original_count} chars, "
            f"Organized: {transformed_count} chars. "
            f"Content was modified beyond reordering and reconciliation "
            f"marker normalization."
        )


def canonical_signature(text: str) -> str:
    """
    Compute the order-independent signature of a document's content.
    
    Args:
        text: Document text.
        
    Returns:
        The characters of text, minus whitespace and '*'/'!' markers,
        sorted by code point and concatenated.
    """
    return "".join(sorted(IGNORED_CHARACTERS.sub("", text)))


def check_content_preserved(original: str, transformed: str) -> None:
    """
    Verify that a transformation only moved whitespace and markers.
    
    Args:
        original: Document text before the transformation.
        transformed: Document text after the transformation.
        
    Raises:
        ContentPreservationError: If the canonical signatures differ.
    """
    original_signature = canonical_signature(original)
    transformed_signature = canonical_signature(transformed)
    
    if original_signature != transformed_signature:
        raise ContentPreservationError(
            len(original_signature),
            len(transformed_signature),
        )
    
    logger.debug(f"Content preserved ({len(original_signature)} significant chars)")
