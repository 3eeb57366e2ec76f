"""
Shared pytest fixtures for ledgerfmt tests.
"""

import pytest

from ledgerfmt.config import FormatterConfig
from tests.helpers import ledger, posting, transaction


@pytest.fixture
def sample_config() -> FormatterConfig:
    """Default ledgerfmt configuration."""
    return FormatterConfig(decimal_column=62)


@pytest.fixture
def grocery_transaction() -> str:
    """A cleared transaction with the marker on the header."""
    return transaction(
        "2024-01-15 * Grocery Store",
        posting("Expenses:Food", "$10.00"),
        posting("Assets:Checking"),
    )


@pytest.fixture
def paycheck_transaction() -> str:
    """An unmarked transaction with irregular indentation."""
    return transaction(
        "2024-01-10 Paycheck",
        "  Assets:Checking    $1,000.00",
        "  Income:Salary",
    )


@pytest.fixture
def unsorted_ledger(grocery_transaction, paycheck_transaction) -> str:
    """
    Two transactions out of date order, the first with a comment block.

        ; Opening
        2024-01-15 * Grocery Store
        ...
        2024-01-10 Paycheck
        ...
    """
    return ledger("; Opening\n" + grocery_transaction, paycheck_transaction)


@pytest.fixture
def messy_ledger() -> str:
    """
    A ledger exercising every tolerated irregularity:

    - leading directive and comments
    - a blank line inside a transaction
    - uniform posting markers on an unmarked header
    - a header marker with a stale posting marker
    - notes, tabs, virtual postings and trailing comments
    """
    return (
        "account Assets:Checking\n"
        "; Budget file\n"
        "\n"
        "2024-03-02 ! (1042) Hardware Store\n"
        "\tExpenses:Home   $45.10\n"
        "    * Liabilities:Card\n"
        "\n"
        "2024-03-01 Coffee\n"
        "    * Expenses:Coffee  $3.50 ; latte\n"
        "\n"
        "    * Assets:Cash\n"
        "    ; paid in cash\n"
        "2024/02/28=2024/03/01 Transfer\n"
        "  (Budget:Savings)  $100\n"
        "  Assets:Savings  $100.00\n"
        "  Assets:Checking\n"
        "\n"
        "; end of file\n"
    )
