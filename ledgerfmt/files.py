"""
Ledger file access.

Reads and writes ledger files as UTF-8 text, creating a timestamped backup
before a file is rewritten in place.
"""

import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def create_backup(ledger_path: Path) -> Path:
    """
    Create a timestamped backup of a ledger file.

    Args:
        ledger_path: Path to the ledger file.

    Returns:
        Path to the backup file, next to the original
        (e.g. book.backup_20240115_093000.ledger).

    Raises:
        IOError: If backup creation fails.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = ledger_path.with_name(
        f"{ledger_path.stem}.backup_{timestamp}{ledger_path.suffix}"
    )

    logger.info(f"Creating backup: {backup_path}")

    try:
        shutil.copy2(ledger_path, backup_path)
        logger.info("Backup created successfully")
        return backup_path
    except OSError as e:
        logger.error(f"Failed to create backup: {e}")
        raise IOError(f"Could not create backup: {e}") from e


def read_ledger(ledger_path: Path) -> str:
    """
    Read a ledger file.

    Args:
        ledger_path: Path to the ledger file.

    Returns:
        File content with newlines normalized to "\\n".

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not ledger_path.exists():
        raise FileNotFoundError(f"Ledger file not found: {ledger_path}")

    logger.debug(f"Reading ledger file: {ledger_path}")
    return ledger_path.read_text(encoding="utf-8")


def write_ledger(ledger_path: Path, content: str, backup: bool = True) -> Optional[Path]:
    """
    Replace a ledger file's content.

    The new content is written to a temporary file in the same directory
    and then moved over the original, so readers never see a partial file.

    Args:
        ledger_path: Path to the ledger file.
        content: New file content.
        backup: Whether to back up the existing file first (default: True).

    Returns:
        Path to the backup file, or None if no backup was made.

    Raises:
        IOError: If backup creation fails.
        OSError: If the file cannot be written.
    """
    backup_path = None
    if backup and ledger_path.exists():
        backup_path = create_backup(ledger_path)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{ledger_path.name}.", suffix=".tmp", dir=ledger_path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        if ledger_path.exists():
            shutil.copymode(ledger_path, tmp_name)
        os.replace(tmp_name, ledger_path)
    except Exception:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(f"Wrote {ledger_path}")
    return backup_path
