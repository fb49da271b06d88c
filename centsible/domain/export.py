"""Pure functions that shape budgets and transactions into report rows.

Rows are plain dicts keyed by column heading, ready for a CSV writer.
Amount columns hold major units; "(Formatted)" columns hold the localized
string.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from centsible.domain.currency import calculate_percentage_raw, format_currency
from centsible.domain.numbers import Number, add_amounts, subtract_amounts, to_decimal
from centsible.formatting import CurrencyFormatter

BUDGET_COLUMNS = [
    "Name",
    "Month",
    "Category",
    "Budget Amount",
    "Amount Spent",
    "Amount Remaining",
    "Budget Amount (Formatted)",
    "Amount Spent (Formatted)",
    "Amount Remaining (Formatted)",
    "Percentage Used",
]

TRANSACTION_COLUMNS = ["Date", "Description", "Category", "Type", "Amount", "Amount (Formatted)"]


@dataclass(frozen=True)
class CategoryTotal:
    """Immutable total for one category."""

    category_name: str
    total: Number
    count: int


def to_major_units(cents: Number) -> Decimal:
    """Convert cents to major units (12345 -> Decimal("123.45"))."""
    return to_decimal(cents) / 100


def category_totals(transactions: Sequence[Mapping[str, Any]]) -> list[CategoryTotal]:
    """Total transaction amounts per category, largest first.

    Args:
        transactions: Records with "category_name" and "amount" in cents.

    Returns:
        List of CategoryTotal ordered by descending total.
    """
    totals: dict[str, Number] = {}
    counts: dict[str, int] = {}

    for txn in transactions:
        name = txn.get("category_name") or "Uncategorized"
        totals[name] = add_amounts(totals.get(name, 0), txn["amount"])
        counts[name] = counts.get(name, 0) + 1

    return sorted(
        (CategoryTotal(category_name=name, total=total, count=counts[name]) for name, total in totals.items()),
        key=lambda c: c.total,
        reverse=True,
    )


def budget_report_rows(
    budgets: Sequence[Mapping[str, Any]],
    currency: str = "USD",
    locale: str = "en-US",
    formatter: CurrencyFormatter | None = None,
) -> list[dict[str, Any]]:
    """Build one export row per budget.

    Args:
        budgets: Records with name, month, category_name, amount and spent (cents).
        currency: ISO 4217 currency code.
        locale: BCP 47 locale tag.
        formatter: Formatting provider.

    Returns:
        Rows keyed by BUDGET_COLUMNS.
    """
    rows: list[dict[str, Any]] = []

    for budget in budgets:
        amount = budget["amount"]
        spent = budget["spent"]
        remaining = subtract_amounts(amount, spent)
        percentage = calculate_percentage_raw(spent, amount) if amount > 0 else 0

        rows.append(
            {
                "Name": budget.get("name", ""),
                "Month": budget.get("month", ""),
                "Category": budget.get("category_name") or "All Categories",
                "Budget Amount": to_major_units(amount),
                "Amount Spent": to_major_units(spent),
                "Amount Remaining": to_major_units(remaining),
                "Budget Amount (Formatted)": format_currency(amount, currency, locale, formatter),
                "Amount Spent (Formatted)": format_currency(spent, currency, locale, formatter),
                "Amount Remaining (Formatted)": format_currency(remaining, currency, locale, formatter),
                "Percentage Used": f"{percentage}%",
            }
        )

    return rows


def transaction_report_rows(
    transactions: Sequence[Mapping[str, Any]],
    currency: str = "USD",
    locale: str = "en-US",
    formatter: CurrencyFormatter | None = None,
    group_by_category: bool = False,
) -> list[dict[str, Any]]:
    """Build export rows for transactions, optionally followed by category totals.

    Args:
        transactions: Records with date, description, category_name, type and amount (cents).
        currency: ISO 4217 currency code.
        locale: BCP 47 locale tag.
        formatter: Formatting provider.
        group_by_category: Append a category summary block.

    Returns:
        Rows keyed by TRANSACTION_COLUMNS.
    """
    rows: list[dict[str, Any]] = [
        {
            "Date": txn.get("date", ""),
            "Description": txn.get("description", ""),
            "Category": txn.get("category_name") or "",
            "Type": txn.get("type", ""),
            "Amount": to_major_units(txn["amount"]),
            "Amount (Formatted)": format_currency(txn["amount"], currency, locale, formatter),
        }
        for txn in transactions
    ]

    if group_by_category:
        blank = dict.fromkeys(TRANSACTION_COLUMNS, "")
        rows.append(dict(blank))
        rows.append({**blank, "Date": "CATEGORY SUMMARY"})

        for total in category_totals(transactions):
            rows.append(
                {
                    **blank,
                    "Description": f"{total.count} transactions",
                    "Category": total.category_name,
                    "Amount": to_major_units(total.total),
                    "Amount (Formatted)": format_currency(total.total, currency, locale, formatter),
                }
            )

    return rows
