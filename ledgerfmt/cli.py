"""
Command-line interface for ledgerfmt.

Provides CLI commands for formatting, sorting, and reconciliation toggling
of ledger files.
"""

import logging

import click

from . import __version__
from .config import setup_logging
from .commands.organize import format_command, sort_command
from .commands.reconcile import now_command, toggle_command

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="ledgerfmt")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose (DEBUG level) logging."
)
@click.pass_context
def main(ctx, verbose):
    """
    ledgerfmt - Ledger File Formatting and Reconciliation.
    
    A command-line tool for aligning, sorting, and toggling reconciliation
    markers in plain-text ledger files without altering their content.
    """
    # Set up logging
    setup_logging(verbose)
    
    # Store verbose flag in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    
    logger.debug(f"ledgerfmt version {__version__}")


main.add_command(format_command)
main.add_command(sort_command)
main.add_command(toggle_command)
main.add_command(now_command)


if __name__ == "__main__":
    main()
