"""
Organize commands for ledgerfmt.

Commands: format, sort
"""

import logging
import sys
from pathlib import Path

import click

from ..config import FormatterConfig
from ..files import read_ledger, write_ledger
from ..organizer import organize
from ..preserve import ContentPreservationError
from ._options import (
    decimal_column_option,
    ledger_file_argument,
    no_backup_option,
    write_option,
)

logger = logging.getLogger(__name__)


def check_option(func):
    """--check: report whether the file would change, without output."""
    return click.option(
        "--check",
        is_flag=True,
        help="Exit with status 1 if the file would change, without printing it.",
    )(func)


def run_organize(
    ledger_file: Path,
    sort: bool,
    check: bool,
    write: bool,
    no_backup: bool,
    decimal_column: int
) -> None:
    """
    Shared body of the format and sort commands.

    Exits the process: 0 on success, 1 when --check finds changes or on
    any error. On a content-preservation failure the file is not touched.
    """
    action = "sort" if sort else "format"
    done = "sorted" if sort else "formatted"
    logger.info(f"=== ledgerfmt {action}: {ledger_file} ===")

    try:
        config = FormatterConfig(decimal_column=decimal_column)
        content = read_ledger(ledger_file)
        result = organize(content, sort=sort, config=config)

        if check:
            if result.changed:
                click.echo(f"would {action} {ledger_file}")
                sys.exit(1)
            click.echo(f"{ledger_file} is already {done}")
            sys.exit(0)

        if write:
            if result.changed:
                backup_path = write_ledger(ledger_file, result.text, backup=not no_backup)
                if backup_path:
                    click.echo(f"Backup created: {backup_path}")
                click.echo(f"[OK] {ledger_file} {done}")
            else:
                click.echo(f"{ledger_file} unchanged")
            sys.exit(0)

        click.echo(result.text, nl=False)
        sys.exit(0)

    except ContentPreservationError as e:
        logger.error(f"Content check failed, file left untouched: {e}")
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        click.echo(f"ERROR: File not found: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error during {action}: {e}", exc_info=True)
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@click.command(name="format")
@ledger_file_argument
@click.option(
    "--sort",
    "-s",
    is_flag=True,
    help="Also sort transactions by date (stable for equal dates).",
)
@check_option
@write_option
@no_backup_option
@decimal_column_option()
def format_command(ledger_file, sort, check, write, no_backup, decimal_column):
    """
    Align amounts and normalize reconciliation markers.

    Postings are re-indented and their amounts aligned on the decimal
    point. Reconciliation markers shared by every posting move onto the
    transaction header. Comments and unrecognized lines are kept as they
    are.

    The result is verified to differ from the input only in whitespace and
    marker placement before anything is printed or written.

    Examples:
    \b
    # Print the formatted file
    ledgerfmt format book.ledger

    # Format in place (a backup is created first)
    ledgerfmt format book.ledger --write

    # Fail in CI if the file is not formatted
    ledgerfmt format book.ledger --check
    """
    run_organize(ledger_file, sort, check, write, no_backup, decimal_column)


@click.command(name="sort")
@ledger_file_argument
@check_option
@write_option
@no_backup_option
@decimal_column_option()
def sort_command(ledger_file, check, write, no_backup, decimal_column):
    """
    Sort transactions by date, then format.

    Transactions that share a date keep their original order. Comment
    blocks travel with the transaction they precede.
    """
    run_organize(ledger_file, True, check, write, no_backup, decimal_column)
