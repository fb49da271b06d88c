"""Pure functions for budget and transaction aggregation.

This module contains the functional core for summaries:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Cents type).
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, TypedDict

from centsible.domain.models import MAX_AMOUNT, TRANSACTION_TYPES, TransactionType
from centsible.domain.numbers import (
    Number,
    add_amounts,
    is_finite_number,
    percentage_of,
    require_finite,
    round_half_away,
    subtract_amounts,
    to_decimal,
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

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
MONTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")

# Spending above this share of the budget (and up to 100%) is "near"
NEAR_THRESHOLD = 75

BudgetStatusName = Literal["under", "near", "over"]


class BudgetLine(TypedDict):
    """Budget input: allocated amount and amount spent, in cents."""

    amount: int
    spent: int


class TransactionLine(TypedDict):
    """Transaction input: amount in cents and direction."""

    amount: int
    type: TransactionType


@dataclass(frozen=True)
class MonthlyBudgetSummary:
    """Immutable totals over a month's budgets."""

    total_budget: Number
    total_spent: Number
    remaining: Number
    percentage_used: int
    is_over_budget: bool


@dataclass(frozen=True)
class TransactionSummary:
    """Immutable totals over a set of transactions."""

    total_income: Number
    total_expenses: Number
    net_income: Number
    average_transaction: int
    transaction_count: int


@dataclass(frozen=True)
class BudgetProgress:
    """Immutable progress of a single budget."""

    percentage: int
    remaining: Number
    status: BudgetStatusName


def _require_sequence(items: Any, name: str) -> Sequence[Any]:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise InvalidArgumentError(f"Invalid input: {name} must be a list", field=name)
    return items


def _field(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def calculate_monthly_budget_summary(budgets: Sequence[Mapping[str, Any]]) -> MonthlyBudgetSummary:
    """Sum a month's budgets into totals.

    Args:
        budgets: Budget records with "amount" and "spent" in cents.

    Returns:
        MonthlyBudgetSummary (all zeros for an empty list).

    Raises:
        InvalidArgumentError: If budgets is not a list.
        InvalidBudgetAmountError: If an amount or spent value is not a finite number.
        NegativeAmountError: If an amount or spent value is negative.
    """
    _require_sequence(budgets, "budgets")

    total_budget: Number = 0
    total_spent: Number = 0

    for index, budget in enumerate(budgets):
        amount = _field(budget, "amount")
        if not is_finite_number(amount):
            raise InvalidBudgetAmountError(
                "Invalid budget amount: must be a finite number", field="amount", index=index
            )
        if amount < 0:
            raise NegativeAmountError("Budget amount cannot be negative", field="amount", index=index)

        spent = _field(budget, "spent")
        if not is_finite_number(spent):
            raise InvalidBudgetAmountError(
                "Invalid spent amount: must be a finite number", field="spent", index=index
            )
        if spent < 0:
            raise NegativeAmountError("Spent amount cannot be negative", field="spent", index=index)

        total_budget = add_amounts(total_budget, amount)
        total_spent = add_amounts(total_spent, spent)

    remaining = subtract_amounts(total_budget, total_spent)
    percentage_used = percentage_of(total_spent, total_budget) if total_budget > 0 else 0

    return MonthlyBudgetSummary(
        total_budget=total_budget,
        total_spent=total_spent,
        remaining=remaining,
        percentage_used=percentage_used,
        is_over_budget=total_spent > total_budget,
    )


def calculate_transaction_summary(transactions: Sequence[Mapping[str, Any]]) -> TransactionSummary:
    """Total income and expenses over a set of transactions.

    Args:
        transactions: Transaction records with "amount" in cents and "type".

    Returns:
        TransactionSummary (all zeros for an empty list).

    Raises:
        InvalidArgumentError: If transactions is not a list.
        InvalidTransactionAmountError: If an amount is not a finite number.
        NegativeAmountError: If an amount is negative.
        InvalidTransactionTypeError: If a type is not "income" or "expense".
    """
    _require_sequence(transactions, "transactions")

    if not transactions:
        return TransactionSummary(
            total_income=0,
            total_expenses=0,
            net_income=0,
            average_transaction=0,
            transaction_count=0,
        )

    total_income: Number = 0
    total_expenses: Number = 0

    for index, transaction in enumerate(transactions):
        amount = _field(transaction, "amount")
        if not is_finite_number(amount):
            raise InvalidTransactionAmountError(
                f"Invalid transaction amount at index {index}: must be a finite number",
                field="amount",
                index=index,
            )
        if amount < 0:
            raise NegativeAmountError(
                f"Transaction amount at index {index} cannot be negative", field="amount", index=index
            )

        txn_type = _field(transaction, "type")
        if txn_type not in TRANSACTION_TYPES:
            raise InvalidTransactionTypeError(
                f"Invalid transaction type at index {index}: must be 'income' or 'expense'",
                field="type",
                index=index,
            )

        if txn_type == "income":
            total_income = add_amounts(total_income, amount)
        else:
            total_expenses = add_amounts(total_expenses, amount)

    count = len(transactions)
    average = round_half_away(to_decimal(add_amounts(total_income, total_expenses)) / count)

    return TransactionSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=subtract_amounts(total_income, total_expenses),
        average_transaction=average,
        transaction_count=count,
    )


def is_transaction_in_month(transaction_date: str, target_month: str) -> bool:
    """Check whether a YYYY-MM-DD date falls in a YYYY-MM month.

    Pure string comparison on the first seven characters; no calendar or
    timezone handling.

    Raises:
        InvalidArgumentError: If either argument is not a string.
        InvalidDateFormatError: If transaction_date is not YYYY-MM-DD.
        InvalidMonthFormatError: If target_month is not YYYY-MM.
    """
    if not isinstance(transaction_date, str) or not isinstance(target_month, str):
        raise InvalidArgumentError("Invalid input: both dates must be strings")

    if not DATE_PATTERN.fullmatch(transaction_date):
        raise InvalidDateFormatError(
            "Invalid transaction date format: expected YYYY-MM-DD", field="transaction_date"
        )

    if not MONTH_PATTERN.fullmatch(target_month):
        raise InvalidMonthFormatError("Invalid target month format: expected YYYY-MM", field="target_month")

    return transaction_date[:7] == target_month


def classify_budget_status(percentage: int) -> BudgetStatusName:
    """Classify a rounded, uncapped percentage as under, near or over."""
    if percentage > 100:
        return "over"
    elif percentage > NEAR_THRESHOLD:
        return "near"
    else:
        return "under"


def calculate_budget_progress(spent: Number, budget: Number) -> BudgetProgress:
    """Calculate progress of a single budget.

    Args:
        spent: Amount spent in cents.
        budget: Budgeted amount in cents.

    Returns:
        BudgetProgress with uncapped percentage, remaining (may be negative)
        and status.

    Raises:
        InvalidArgumentError: If either value is not a finite number.
        InvalidBudgetError: If budget is zero or negative.
        NegativeSpentError: If spent is negative.
    """
    require_finite(spent, "spent")
    require_finite(budget, "budget")

    if budget <= 0:
        raise InvalidBudgetError("Budget must be greater than zero", field="budget")

    if spent < 0:
        raise NegativeSpentError("Spent amount cannot be negative", field="spent")

    percentage = percentage_of(spent, budget)

    return BudgetProgress(
        percentage=percentage,
        remaining=subtract_amounts(budget, spent),
        status=classify_budget_status(percentage),
    )


def validate_amount(amount: Any, max_amount: Number = MAX_AMOUNT) -> bool:
    """Check an amount without raising.

    Returns:
        False for non-finite, negative or above-maximum values, True otherwise.
    """
    if not is_finite_number(amount):
        return False

    if amount < 0 or amount > max_amount:
        return False

    return True


def round_to_cents(amount: Number) -> int:
    """Round an amount to a whole number of cents, ties away from zero.

    Raises:
        InvalidArgumentError: If amount is not a finite number.
    """
    require_finite(amount, "amount")
    return round_half_away(amount)
