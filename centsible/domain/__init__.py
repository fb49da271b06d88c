"""Domain models and pure functions for centsible.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from centsible.domain.calculations import (
    BudgetProgress,
    MonthlyBudgetSummary,
    TransactionSummary,
    calculate_budget_progress,
    calculate_monthly_budget_summary,
    calculate_transaction_summary,
    is_transaction_in_month,
    round_to_cents,
    validate_amount,
)
from centsible.domain.currency import (
    calculate_percentage,
    calculate_percentage_raw,
    format_currency,
    format_currency_compact,
    parse_currency_input,
)
from centsible.domain.models import Cents, DateString, Month, TransactionType
from centsible.errors import CentsibleError

__all__ = [
    "Cents",
    "Month",
    "DateString",
    "TransactionType",
    "CentsibleError",
    "format_currency",
    "parse_currency_input",
    "format_currency_compact",
    "calculate_percentage",
    "calculate_percentage_raw",
    "calculate_monthly_budget_summary",
    "calculate_transaction_summary",
    "is_transaction_in_month",
    "calculate_budget_progress",
    "validate_amount",
    "round_to_cents",
    "MonthlyBudgetSummary",
    "TransactionSummary",
    "BudgetProgress",
]
