"""Tests for ledgerfmt.organizer."""

from unittest.mock import patch

import pytest

from ledgerfmt.config import FormatterConfig
from ledgerfmt.organizer import OrganizeResult, format_content, organize, sort_content
from ledgerfmt.preserve import ContentPreservationError, canonical_signature
from tests.helpers import aligned, ledger, posting, transaction


# ---------------------------------------------------------------------------
# Empty and trivial documents
# ---------------------------------------------------------------------------


class TestEmptyInput:
    def test_empty_string(self):
        assert format_content("") == ""

    def test_whitespace_only_is_kept(self):
        assert format_content("   \n") == "   \n"

    def test_comments_only(self):
        assert format_content("; just a note\n") == "; just a note\n"

    def test_missing_final_newline_is_added(self):
        assert format_content("2024-01-01 A\n    Assets:Cash") == "2024-01-01 A\n Assets:Cash\n"


# ---------------------------------------------------------------------------
# format
# ---------------------------------------------------------------------------


class TestFormat:
    def test_aligns_and_keeps_order(self, unsorted_ledger):
        expected = (
            "; Opening\n"
            "2024-01-15 * Grocery Store\n"
            + aligned("Expenses:Food", "$10.00") + "\n"
            " Assets:Checking\n"
            "\n"
            "2024-01-10 Paycheck\n"
            + aligned("Assets:Checking", "$1,000.00") + "\n"
            " Income:Salary\n"
        )
        assert format_content(unsorted_ledger) == expected

    def test_messy_ledger(self, messy_ledger):
        expected = (
            "account Assets:Checking\n"
            "; Budget file\n"
            "\n"
            "2024-03-02 ! (1042) Hardware Store\n"
            + aligned("Expenses:Home", "$45.10") + "\n"
            " Liabilities:Card\n"
            "\n"
            "2024-03-01 * Coffee\n"
            + aligned("Expenses:Coffee", "$3.50 ; latte") + "\n"
            " Assets:Cash\n"
            "    ; paid in cash\n"
            "\n"
            "2024/02/28=2024/03/01 Transfer\n"
            "  (Budget:Savings)  $100\n"
            + aligned("Assets:Savings", "$100.00") + "\n"
            " Assets:Checking\n"
            "\n"
            "; end of file\n"
        )
        assert format_content(messy_ledger) == expected

    def test_hoists_uniform_markers(self):
        text = ledger(
            transaction(
                "2024-01-01 Payee",
                posting("Expenses:Food", "$10.00", marker="*"),
                posting("Assets:Cash", marker="*"),
            )
        )
        result = format_content(text)
        assert result.splitlines()[0] == "2024-01-01 * Payee"
        assert "*" not in "".join(result.splitlines()[1:])

    def test_header_marker_wins(self):
        text = ledger(
            transaction(
                "2024-01-01 ! Payee",
                posting("Expenses:Food", "$10.00", marker="*"),
                posting("Assets:Cash"),
            )
        )
        result = format_content(text)
        assert result.splitlines() == [
            "2024-01-01 ! Payee",
            aligned("Expenses:Food", "$10.00"),
            " Assets:Cash",
        ]

    def test_collapses_extra_blank_lines(self):
        text = "2024-01-01 A\n  x  $1.00\n\n\n\n2024-01-02 B\n  y  $2.00\n"
        assert format_content(text).count("\n\n") == 1

    def test_marker_only_posting_is_dropped(self):
        text = "2024-01-01 * Payee\n  ! \n  Assets:Cash  $1.00\n"
        expected = "2024-01-01 * Payee\n" + aligned("Assets:Cash", "$1.00") + "\n"
        assert format_content(text) == expected

    def test_uses_config(self):
        text = "2024-01-01 A\n    Assets:Cash  $5.00\n"
        result = format_content(text, FormatterConfig(decimal_column=30))
        assert result.splitlines()[1].index(".") == 30


# ---------------------------------------------------------------------------
# sort
# ---------------------------------------------------------------------------


class TestSort:
    def test_sorts_and_moves_comments_with_transaction(self, unsorted_ledger):
        expected = (
            "2024-01-10 Paycheck\n"
            + aligned("Assets:Checking", "$1,000.00") + "\n"
            " Income:Salary\n"
            "\n"
            "; Opening\n"
            "2024-01-15 * Grocery Store\n"
            + aligned("Expenses:Food", "$10.00") + "\n"
            " Assets:Checking\n"
        )
        assert sort_content(unsorted_ledger) == expected

    def test_stable_for_equal_dates(self):
        text = ledger(
            transaction("2024-01-05 B first", posting("Assets:Cash")),
            transaction("2024-01-01 A", posting("Assets:Cash")),
            transaction("2024-01-05 B second", posting("Assets:Cash")),
        )
        headers = [line for line in sort_content(text).splitlines() if line.startswith("2024")]
        assert headers == ["2024-01-01 A", "2024-01-05 B first", "2024-01-05 B second"]

    def test_leading_blank_line_not_doubled(self):
        text = (
            "\n"
            "2024-02-01 Later\n"
            "  Assets:Cash  $1.00\n"
            "\n"
            "2024-01-01 Earlier\n"
            "  Assets:Cash  $2.00\n"
        )
        expected = (
            "2024-01-01 Earlier\n"
            + aligned("Assets:Cash", "$2.00") + "\n"
            "\n"
            "2024-02-01 Later\n"
            + aligned("Assets:Cash", "$1.00") + "\n"
        )
        assert sort_content(text) == expected

    def test_trailing_comments_stay_at_end(self, messy_ledger):
        assert sort_content(messy_ledger).endswith("\n\n; end of file\n")


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


DOCUMENTS = [
    "",
    "   \n",
    "\n\n",
    "; only a comment",
    "2024-01-01 A\n  Assets:Cash  $1.00\n  Equity\n",
    "2024-01-01 A\n\n\n  x  1\n; tail\n\n\n",
    "  orphan posting  $1\n2024-01-01 A\n  x\n",
    "2024-02-01 * B\n  * x  $2.50\n  y\n2024-01-01 Payee\n  ! x\n  ! y\n",
    "2024-13-40 Impossible\n  x  $1\n2024-01-01 Fine\n  y  $2\n",
    "\n2024-02-01 B\n  x  $1.00\n\n2024-01-01 A\n  y  $2.00\n",
    "\n; note\n2024-02-01 B\n  x\n2024-01-01 A\n  y\n",
    "2024-01-01 * Payee\n  ! \n  Assets:Cash  $1.00\n",
]


class TestProperties:
    @pytest.mark.parametrize("text", DOCUMENTS)
    def test_format_idempotent(self, text):
        once = format_content(text)
        assert format_content(once) == once

    @pytest.mark.parametrize("text", DOCUMENTS)
    def test_sort_idempotent(self, text):
        once = sort_content(text)
        assert sort_content(once) == once

    @pytest.mark.parametrize("text", DOCUMENTS)
    def test_content_preserved(self, text):
        signature = canonical_signature(text)
        assert canonical_signature(format_content(text)) == signature
        assert canonical_signature(sort_content(text)) == signature

    def test_messy_ledger_idempotent(self, messy_ledger):
        formatted = format_content(messy_ledger)
        assert format_content(formatted) == formatted
        ordered = sort_content(messy_ledger)
        assert sort_content(ordered) == ordered


# ---------------------------------------------------------------------------
# organize
# ---------------------------------------------------------------------------


class TestOrganize:
    def test_changed_flag(self, unsorted_ledger):
        result = organize(unsorted_ledger)
        assert isinstance(result, OrganizeResult)
        assert result.changed is True

    def test_unchanged_when_already_formatted(self, unsorted_ledger):
        formatted = format_content(unsorted_ledger)
        result = organize(formatted)
        assert result.changed is False
        assert result.text == formatted

    def test_sort_flag(self, unsorted_ledger):
        assert organize(unsorted_ledger, sort=True).text == sort_content(unsorted_ledger)

    def test_preservation_failure_is_fatal(self):
        with patch("ledgerfmt.organizer.rebuild_content", return_value="tampered\n"):
            with pytest.raises(ContentPreservationError):
                organize("2024-01-01 A\n  Assets:Cash\n")
