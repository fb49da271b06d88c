"""Tests for centsible.domain.calculations pure functions."""

import math
from decimal import Decimal

import pytest

from centsible.domain.calculations import (
    BudgetProgress,
    MonthlyBudgetSummary,
    TransactionSummary,
    calculate_budget_progress,
    calculate_monthly_budget_summary,
    calculate_transaction_summary,
    classify_budget_status,
    is_transaction_in_month,
    round_to_cents,
    validate_amount,
)
from centsible.errors import (
    InvalidArgumentError,
    InvalidBudgetAmountError,
    InvalidBudgetError,
    InvalidDateFormatError,
    InvalidMonthFormatError,
    InvalidTransactionAmountError,
    InvalidTransactionTypeError,
    NegativeAmountError,
    NegativeSpentError,
)


class TestCalculateMonthlyBudgetSummary:
    """Tests for calculate_monthly_budget_summary."""

    def test_sums_budgets(self) -> None:
        """Should total amounts and spending across budgets."""
        summary = calculate_monthly_budget_summary(
            [
                {"amount": 50000, "spent": 25000},
                {"amount": 30000, "spent": 35000},
            ]
        )

        assert summary == MonthlyBudgetSummary(
            total_budget=80000,
            total_spent=60000,
            remaining=20000,
            percentage_used=75,
            is_over_budget=False,
        )

    def test_empty_list(self) -> None:
        """Should return an all-zero summary."""
        summary = calculate_monthly_budget_summary([])

        assert summary == MonthlyBudgetSummary(
            total_budget=0,
            total_spent=0,
            remaining=0,
            percentage_used=0,
            is_over_budget=False,
        )

    def test_over_budget(self) -> None:
        """Should flag spending above the total budget."""
        summary = calculate_monthly_budget_summary([{"amount": 10000, "spent": 12000}])

        assert summary.is_over_budget is True
        assert summary.remaining == -2000
        assert summary.percentage_used == 120

    def test_exactly_on_budget_is_not_over(self) -> None:
        """Should only flag strictly greater spending."""
        summary = calculate_monthly_budget_summary([{"amount": 10000, "spent": 10000}])

        assert summary.is_over_budget is False
        assert summary.percentage_used == 100

    def test_zero_total_budget(self) -> None:
        """Should report 0% when nothing was budgeted."""
        summary = calculate_monthly_budget_summary([{"amount": 0, "spent": 500}])

        assert summary.percentage_used == 0
        assert summary.is_over_budget is True

    def test_totals_match_inputs(self) -> None:
        """Total budget is the sum of amounts and remaining is budget minus spent."""
        budgets = [{"amount": a, "spent": s} for a, s in [(100, 7), (2500, 2600), (0, 0), (99999, 1)]]
        summary = calculate_monthly_budget_summary(budgets)

        assert summary.total_budget == sum(b["amount"] for b in budgets)
        assert summary.total_spent == sum(b["spent"] for b in budgets)
        assert summary.remaining == summary.total_budget - summary.total_spent

    def test_accepts_objects_with_attributes(self) -> None:
        """Should read amount and spent from attributes too."""

        class Row:
            def __init__(self, amount: int, spent: int) -> None:
                self.amount = amount
                self.spent = spent

        summary = calculate_monthly_budget_summary([Row(1000, 250)])

        assert summary.total_budget == 1000
        assert summary.percentage_used == 25

    def test_not_a_list(self) -> None:
        """Should reject non-sequence input."""
        with pytest.raises(InvalidArgumentError):
            calculate_monthly_budget_summary({"amount": 1, "spent": 1})  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            calculate_monthly_budget_summary("budgets")  # type: ignore[arg-type]

    @pytest.mark.parametrize("bad", [math.nan, math.inf, None, "100"])
    def test_invalid_amount(self, bad: object) -> None:
        """Should name the budget amount when it is not a finite number."""
        with pytest.raises(InvalidBudgetAmountError) as exc_info:
            calculate_monthly_budget_summary([{"amount": 100, "spent": 0}, {"amount": bad, "spent": 0}])

        assert exc_info.value.field == "amount"
        assert exc_info.value.index == 1

    def test_invalid_spent(self) -> None:
        """Should name the spent value when it is not a finite number."""
        with pytest.raises(InvalidBudgetAmountError) as exc_info:
            calculate_monthly_budget_summary([{"amount": 100}])

        assert exc_info.value.field == "spent"

    def test_negative_values(self) -> None:
        """Should reject negative amounts and spending."""
        with pytest.raises(NegativeAmountError) as exc_info:
            calculate_monthly_budget_summary([{"amount": -1, "spent": 0}])
        assert exc_info.value.field == "amount"

        with pytest.raises(NegativeAmountError) as exc_info:
            calculate_monthly_budget_summary([{"amount": 1, "spent": -1}])
        assert exc_info.value.field == "spent"

    def test_mixed_decimal_and_float(self) -> None:
        """Should total Decimal and float amounts together."""
        summary = calculate_monthly_budget_summary(
            [
                {"amount": Decimal("2"), "spent": 1.5},
                {"amount": 1.5, "spent": Decimal("0.5")},
            ]
        )

        assert summary.total_budget == Decimal("3.5")
        assert summary.total_spent == Decimal("2.0")
        assert summary.remaining == Decimal("1.5")
        assert summary.percentage_used == 57


class TestCalculateTransactionSummary:
    """Tests for calculate_transaction_summary."""

    def test_income_and_expense(self) -> None:
        """Should total by type and average across all transactions."""
        summary = calculate_transaction_summary(
            [
                {"amount": 500000, "type": "income"},
                {"amount": 25000, "type": "expense"},
            ]
        )

        assert summary == TransactionSummary(
            total_income=500000,
            total_expenses=25000,
            net_income=475000,
            average_transaction=262500,
            transaction_count=2,
        )

    def test_empty_list(self) -> None:
        """Should return an all-zero summary."""
        summary = calculate_transaction_summary([])

        assert summary.transaction_count == 0
        assert summary.total_income == 0
        assert summary.average_transaction == 0

    def test_negative_net(self) -> None:
        """Should allow net income below zero."""
        summary = calculate_transaction_summary(
            [
                {"amount": 1000, "type": "income"},
                {"amount": 3000, "type": "expense"},
            ]
        )

        assert summary.net_income == -2000

    def test_average_rounds(self) -> None:
        """Should round the average to whole cents."""
        summary = calculate_transaction_summary(
            [
                {"amount": 1, "type": "expense"},
                {"amount": 2, "type": "expense"},
            ]
        )

        assert summary.average_transaction == 2

    def test_invalid_amount_includes_index(self) -> None:
        """Should report which transaction had a bad amount."""
        with pytest.raises(InvalidTransactionAmountError) as exc_info:
            calculate_transaction_summary(
                [
                    {"amount": 100, "type": "income"},
                    {"amount": math.nan, "type": "income"},
                ]
            )

        assert exc_info.value.index == 1
        assert "index 1" in str(exc_info.value)

    def test_negative_amount_includes_index(self) -> None:
        """Should reject negative amounts with their index."""
        with pytest.raises(NegativeAmountError) as exc_info:
            calculate_transaction_summary([{"amount": -5, "type": "expense"}])

        assert exc_info.value.index == 0

    @pytest.mark.parametrize("txn_type", ["transfer", "Income", "", None])
    def test_invalid_type(self, txn_type: object) -> None:
        """Should only accept 'income' and 'expense'."""
        with pytest.raises(InvalidTransactionTypeError) as exc_info:
            calculate_transaction_summary(
                [
                    {"amount": 1, "type": "income"},
                    {"amount": 1, "type": "expense"},
                    {"amount": 1, "type": txn_type},
                ]
            )

        assert exc_info.value.index == 2

    def test_not_a_list(self) -> None:
        """Should reject non-sequence input."""
        with pytest.raises(InvalidArgumentError):
            calculate_transaction_summary(None)  # type: ignore[arg-type]

    def test_mixed_decimal_and_float(self) -> None:
        """Should total Decimal and float amounts together."""
        summary = calculate_transaction_summary(
            [
                {"amount": Decimal("100"), "type": "income"},
                {"amount": 40.5, "type": "income"},
                {"amount": 20.25, "type": "expense"},
                {"amount": Decimal("10"), "type": "expense"},
            ]
        )

        assert summary.total_income == Decimal("140.5")
        assert summary.total_expenses == Decimal("30.25")
        assert summary.net_income == Decimal("110.25")
        assert summary.average_transaction == 43


class TestIsTransactionInMonth:
    """Tests for is_transaction_in_month."""

    def test_same_month(self) -> None:
        """Should match dates inside the month."""
        assert is_transaction_in_month("2024-01-15", "2024-01") is True
        assert is_transaction_in_month("2024-01-31", "2024-01") is True

    def test_other_month(self) -> None:
        """Should not match dates outside the month."""
        assert is_transaction_in_month("2024-02-01", "2024-01") is False
        assert is_transaction_in_month("2023-01-15", "2024-01") is False

    def test_string_comparison_only(self) -> None:
        """Should compare text without calendar validation."""
        assert is_transaction_in_month("2024-13-45", "2024-13") is True

    @pytest.mark.parametrize("date", ["2024-1-15", "2024/01/15", "15-01-2024", "2024-01-15T00:00"])
    def test_invalid_date_format(self, date: str) -> None:
        """Should require YYYY-MM-DD."""
        with pytest.raises(InvalidDateFormatError):
            is_transaction_in_month(date, "2024-01")

    @pytest.mark.parametrize("month", ["2024-1", "2024-01-01", "01-2024", "202401"])
    def test_invalid_month_format(self, month: str) -> None:
        """Should require YYYY-MM."""
        with pytest.raises(InvalidMonthFormatError):
            is_transaction_in_month("2024-01-15", month)

    def test_non_string_arguments(self) -> None:
        """Should reject non-string input."""
        with pytest.raises(InvalidArgumentError):
            is_transaction_in_month(20240115, "2024-01")  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            is_transaction_in_month("2024-01-15", None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("date", ["2024-01-15\n", "２０２４-01-15", "2024-٠١-15"])
    def test_rejects_trailing_newline_and_non_ascii_digits(self, date: str) -> None:
        """Should only accept ASCII digits with nothing after the day."""
        with pytest.raises(InvalidDateFormatError):
            is_transaction_in_month(date, "2024-01")

    @pytest.mark.parametrize("month", ["2024-01\n", "２０２４-01"])
    def test_rejects_month_with_trailing_newline_or_non_ascii_digits(self, month: str) -> None:
        """Should only accept ASCII digits with nothing after the month."""
        with pytest.raises(InvalidMonthFormatError):
            is_transaction_in_month("2024-01-15", month)


class TestCalculateBudgetProgress:
    """Tests for calculate_budget_progress."""

    def test_under(self) -> None:
        """Should classify low spending as under."""
        assert calculate_budget_progress(2500, 10000) == BudgetProgress(
            percentage=25, remaining=7500, status="under"
        )

    def test_status_boundaries(self) -> None:
        """Should treat exactly 75% as under and exactly 100% as near."""
        assert calculate_budget_progress(75, 100).status == "under"
        assert calculate_budget_progress(76, 100).status == "near"
        assert calculate_budget_progress(100, 100).status == "near"
        assert calculate_budget_progress(101, 100).status == "over"

    def test_over_is_uncapped(self) -> None:
        """Should report the true percentage and a negative remainder."""
        progress = calculate_budget_progress(15000, 10000)

        assert progress.percentage == 150
        assert progress.remaining == -5000
        assert progress.status == "over"

    def test_zero_spent(self) -> None:
        """Should allow nothing spent."""
        progress = calculate_budget_progress(0, 10000)

        assert progress.percentage == 0
        assert progress.status == "under"

    @pytest.mark.parametrize("budget", [0, -1])
    def test_non_positive_budget(self, budget: int) -> None:
        """Should raise InvalidBudgetError."""
        with pytest.raises(InvalidBudgetError):
            calculate_budget_progress(10, budget)

    def test_negative_spent(self) -> None:
        """Should raise NegativeSpentError."""
        with pytest.raises(NegativeSpentError):
            calculate_budget_progress(-1, 100)

    def test_non_finite(self) -> None:
        """Should raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            calculate_budget_progress(math.nan, 100)

    def test_mixed_decimal_and_float(self) -> None:
        """Should accept a Decimal budget with float spending and vice versa."""
        progress = calculate_budget_progress(Decimal("10"), 100.0)
        assert progress.percentage == 10
        assert progress.remaining == Decimal("90.0")

        progress = calculate_budget_progress(12.5, Decimal("50"))
        assert progress.percentage == 25
        assert progress.remaining == Decimal("37.5")


class TestClassifyBudgetStatus:
    """Tests for classify_budget_status."""

    def test_classification(self) -> None:
        """Should map percentages onto the three bands."""
        assert classify_budget_status(0) == "under"
        assert classify_budget_status(75) == "under"
        assert classify_budget_status(76) == "near"
        assert classify_budget_status(100) == "near"
        assert classify_budget_status(101) == "over"


class TestValidateAmount:
    """Tests for validate_amount."""

    def test_valid_amounts(self) -> None:
        """Should accept zero through the maximum."""
        assert validate_amount(0) is True
        assert validate_amount(12345) is True
        assert validate_amount(999_999_999) is True
        assert validate_amount(Decimal("10.50")) is True

    def test_invalid_amounts(self) -> None:
        """Should reject without raising."""
        assert validate_amount(-1) is False
        assert validate_amount(1_000_000_000) is False
        assert validate_amount(math.nan) is False
        assert validate_amount(math.inf) is False
        assert validate_amount("100") is False
        assert validate_amount(None) is False

    def test_custom_maximum(self) -> None:
        """Should honor max_amount."""
        assert validate_amount(100, max_amount=100) is True
        assert validate_amount(101, max_amount=100) is False


class TestRoundToCents:
    """Tests for round_to_cents."""

    @pytest.mark.parametrize(
        "amount,expected",
        [(1.4, 1), (1.5, 2), (2.5, 3), (-1.5, -2), (-1.4, -1), (100, 100), (Decimal("0.5"), 1)],
    )
    def test_rounds_half_away_from_zero(self, amount: float, expected: int) -> None:
        """Should round ties away from zero."""
        assert round_to_cents(amount) == expected

    def test_idempotent(self) -> None:
        """Rounding twice gives the same result as rounding once."""
        for amount in [0.1, 2.5, -3.5, 12345.678, -0.49]:
            assert round_to_cents(round_to_cents(amount)) == round_to_cents(amount)

    def test_non_finite(self) -> None:
        """Should raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            round_to_cents(math.inf)
