"""
Shared Click option decorators for ledgerfmt commands.

Each decorator factory wraps a single Click option or argument so it can be
reused across multiple commands without repeating the definition.
"""

from pathlib import Path

import click


def ledger_file_argument(func):
    """FILE: required path to an existing ledger file."""
    return click.argument(
        "ledger_file",
        metavar="FILE",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
    )(func)


def write_option(func):
    """--write/-w: rewrite the file in place instead of printing."""
    return click.option(
        "--write",
        "-w",
        is_flag=True,
        help="Rewrite the file in place instead of printing the result.",
    )(func)


def no_backup_option(func):
    """--no-backup: skip the timestamped backup before --write."""
    return click.option(
        "--no-backup",
        is_flag=True,
        help="Skip creating a backup before rewriting the file.",
    )(func)


def decimal_column_option(default: int = 62):
    """--decimal-column: output column for amount decimal points."""
    def decorator(func):
        return click.option(
            "--decimal-column",
            type=click.IntRange(min=1),
            default=default,
            show_default=True,
            help="Column at which amount decimal points are aligned.",
        )(func)
    return decorator
