"""
Amount alignment for transaction postings.

Rewrites posting lines to a fixed account indentation and places every
amount so its decimal point falls on a common column. Only whitespace (and,
through marker normalization, marker placement) ever changes.
"""

import logging
from dataclasses import replace
from typing import Optional

from .config import FormatterConfig, default_config
from .lines import is_blank, split_posting
from .markers import normalize
from .parser import Transaction

logger = logging.getLogger(__name__)


def align_posting(text: str, config: Optional[FormatterConfig] = None) -> str:
    """
    Align a single posting line.

    The account is written after config.account_indent spaces. When an
    amount is present, it is padded so that its decimal point (or its first
    character, if it has none) lands on config.decimal_column. If the account
    name is too long for that, config.min_amount_spacing spaces are used
    instead.

    Args:
        text: A posting line.
        config: Formatting configuration; uses default if not provided.

    Returns:
        The aligned line, or the input unchanged if it is blank or does not
        look like an account posting.
    """
    if config is None:
        config = default_config

    if not text.strip():
        return text

    parts = split_posting(text)
    if parts is None:
        return text

    aligned = config.indent
    if parts.marker:
        aligned += f"{parts.marker.value} "
    aligned += parts.account

    if not parts.amount:
        return aligned

    target_column = config.decimal_column
    decimal_index = parts.amount.find(".")
    if decimal_index >= 0:
        target_column -= decimal_index

    spaces_needed = target_column - len(aligned)
    if spaces_needed < config.min_amount_spacing:
        spaces_needed = config.min_amount_spacing

    return aligned + " " * spaces_needed + parts.amount


def align_transaction(
    transaction: Transaction,
    config: Optional[FormatterConfig] = None
) -> Transaction:
    """
    Normalize markers and align the postings of a transaction.

    Args:
        transaction: Parsed transaction.
        config: Formatting configuration; uses default if not provided.

    Returns:
        A new Transaction with rewritten raw_lines. The header is only
        changed by marker normalization. Posting lines left empty once their
        marker moved to the header are dropped.
    """
    lines = normalize(transaction.raw_lines)

    aligned = [lines[0]] + [
        align_posting(line, config) for line in lines[1:] if not is_blank(line)
    ]

    return replace(transaction, raw_lines=aligned)
