"""
Configuration management for ledgerfmt.

Handles global configuration settings such as the decimal alignment column
and posting indentation used when reorganizing ledger files.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class FormatterConfig:
    """
    Global configuration for ledgerfmt formatting.
    
    Attributes:
        decimal_column: 0-based output column where the decimal point of
                        every posting amount is placed.
                        Default: 62.
        account_indent: Number of spaces written before each account name.
                        Default: 1.
        min_amount_spacing: Minimum number of spaces between an account
                            name and its amount. Ledger requires at least two.
                            Default: 2.
    """
    
    decimal_column: int = 62
    account_indent: int = 1
    min_amount_spacing: int = 2
    
    def __post_init__(self):
        """Validate numeric settings."""
        if self.decimal_column <= 0:
            raise ValueError(
                f"Invalid decimal_column: {self.decimal_column}. Must be positive."
            )
        if self.account_indent < 1:
            raise ValueError(
                f"Invalid account_indent: {self.account_indent}. "
                f"Posting lines need at least one space of indentation."
            )
        if self.min_amount_spacing < 2:
            raise ValueError(
                f"Invalid min_amount_spacing: {self.min_amount_spacing}. "
                f"Ledger needs at least two spaces before an amount."
            )
    
    @property
    def indent(self) -> str:
        """The indentation string written before account names."""
        return " " * self.account_indent


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.
    
    Args:
        verbose: If True, sets log level to DEBUG. Otherwise, INFO.
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    if verbose:
        logger.debug("Verbose logging enabled")


# Global default configuration instance
default_config = FormatterConfig()
