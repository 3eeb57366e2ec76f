"""
Reconciliation command group for ledgerfmt.

Commands: toggle, now
"""

import logging
import sys
from datetime import date, datetime

import click

from ..files import read_ledger, write_ledger
from ..markers import apply_edits, toggle_reconciliation
from ..now import find_date_position
from ._options import ledger_file_argument, no_backup_option, write_option

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """
    Parse a date string in YYYY-MM-DD format.

    Args:
        date_str: Date string in YYYY-MM-DD format.

    Returns:
        date object.

    Raises:
        ValueError: If date_str is not in correct format.
    """
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(
            f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
        ) from e


@click.command(name="toggle")
@ledger_file_argument
@click.option(
    "--line",
    "-l",
    "line_number",
    type=click.IntRange(min=1),
    required=True,
    help="1-based line number of the transaction header or posting to toggle.",
)
@write_option
@no_backup_option
def toggle_command(ledger_file, line_number, write, no_backup):
    """
    Toggle the reconciliation marker at a line.

    On a transaction header, the header marker cycles between cleared (*)
    and none; a pending (!) header becomes unmarked. On a posting, only that
    posting changes: a marker on the header is first split out onto every
    posting. Afterwards, postings that all share one marker are collapsed
    back onto the header.

    Examples:
    \b
    # Clear the transaction starting on line 12, print the result
    ledgerfmt toggle book.ledger --line 12

    # Toggle a single posting in place
    ledgerfmt toggle book.ledger -l 14 --write
    """
    try:
        content = read_ledger(ledger_file)
        edits = toggle_reconciliation(content, line_number - 1)

        if not edits:
            logger.info(f"Nothing to toggle at line {line_number}")

        new_content = apply_edits(content, edits)

        if write:
            if edits:
                backup_path = write_ledger(ledger_file, new_content, backup=not no_backup)
                if backup_path:
                    click.echo(f"Backup created: {backup_path}")
                click.echo(f"[OK] Toggled line {line_number} ({len(edits)} line(s) changed)")
            else:
                click.echo(f"No transaction at line {line_number}; file unchanged")
            sys.exit(0)

        click.echo(new_content, nl=False)
        sys.exit(0)

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        click.echo(f"ERROR: File not found: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error toggling reconciliation: {e}", exc_info=True)
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@click.command(name="now")
@ledger_file_argument
@click.option(
    "--date",
    "date_str",
    type=str,
    default=None,
    help="Date in YYYY-MM-DD format (default: today).",
)
def now_command(ledger_file, date_str):
    """
    Show the line where a transaction for a date belongs.

    Prints the 1-based line number just before the first transaction dated
    after the given date, or the end of the file if there is none.
    """
    try:
        target = parse_date(date_str) if date_str else date.today()
        content = read_ledger(ledger_file)

        position = find_date_position(content, target)
        click.echo(f"{target.isoformat()} belongs at line {position + 1}")
        sys.exit(0)

    except ValueError as e:
        logger.error(str(e))
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        click.echo(f"ERROR: File not found: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error locating date: {e}", exc_info=True)
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)
