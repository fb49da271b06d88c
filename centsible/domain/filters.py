"""Pure functions for filtering and sorting transaction lists.

All monetary amounts are in cents; bounds typed by a user are parsed with
parse_currency_input before comparison.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, get_args

from centsible.domain.currency import format_currency, parse_currency_input
from centsible.domain.models import TRANSACTION_TYPES, TransactionType
from centsible.formatting import CurrencyFormatter

SortKey = Literal["date", "amount", "description", "category", "id"]
SortOrder = Literal["asc", "desc"]

SORT_KEYS: tuple[SortKey, ...] = get_args(SortKey)
SORT_ORDERS: tuple[SortOrder, ...] = get_args(SortOrder)


@dataclass(frozen=True)
class TransactionFilters:
    """Immutable filter state for a transaction list."""

    search_term: str = ""
    types: tuple[TransactionType, ...] = ()
    categories: tuple[int, ...] = ()
    exclude_categories: tuple[int, ...] = ()
    date_from: str | None = None
    date_to: str | None = None
    amount_min: str | None = None  # major units, as typed
    amount_max: str | None = None
    sort_by: SortKey = "date"
    sort_order: SortOrder = "desc"


def _sort_value(transaction: Mapping[str, Any], sort_by: SortKey) -> Any:
    if sort_by == "date":
        return transaction.get("date") or ""
    elif sort_by == "amount":
        return transaction.get("amount", 0)
    elif sort_by == "description":
        return (transaction.get("description") or "").lower()
    elif sort_by == "category":
        return (transaction.get("category_name") or "").lower()
    else:
        return transaction.get("id", 0)


def apply_filters(
    transactions: Sequence[Mapping[str, Any]],
    filters: TransactionFilters,
) -> list[Mapping[str, Any]]:
    """Filter and sort transactions.

    Args:
        transactions: Transaction records with id, date, description, type,
            amount (cents), category_id and category_name.
        filters: Filter state.

    Returns:
        New list of matching transactions in the requested order.

    Raises:
        CentsibleError: If an amount bound is not valid currency input.
    """
    filtered = list(transactions)

    if filters.search_term:
        needle = filters.search_term.lower()
        filtered = [
            t
            for t in filtered
            if needle in (t.get("description") or "").lower() or needle in (t.get("category_name") or "").lower()
        ]

    if filters.types:
        filtered = [t for t in filtered if t.get("type") in filters.types]

    if filters.categories:
        filtered = [t for t in filtered if t.get("category_id") in filters.categories]

    if filters.exclude_categories:
        filtered = [t for t in filtered if t.get("category_id") not in filters.exclude_categories]

    # Dates are YYYY-MM-DD so lexical order is calendar order
    if filters.date_from:
        filtered = [t for t in filtered if t.get("date", "") >= filters.date_from]
    if filters.date_to:
        filtered = [t for t in filtered if t.get("date", "") <= filters.date_to]

    if filters.amount_min:
        min_cents = parse_currency_input(filters.amount_min)
        filtered = [t for t in filtered if t.get("amount", 0) >= min_cents]
    if filters.amount_max:
        max_cents = parse_currency_input(filters.amount_max)
        filtered = [t for t in filtered if t.get("amount", 0) <= max_cents]

    filtered.sort(
        key=lambda t: _sort_value(t, filters.sort_by),
        reverse=filters.sort_order == "desc",
    )

    return filtered


def describe_filters(
    filters: TransactionFilters,
    currency: str = "USD",
    locale: str = "en-US",
    formatter: CurrencyFormatter | None = None,
) -> str:
    """Summarize active filters in one sentence.

    Returns:
        e.g. 'Showing transactions containing "rent", expense transactions',
        or "All transactions" when no filter is active.
    """
    parts: list[str] = []

    if filters.search_term:
        parts.append(f'containing "{filters.search_term}"')

    if filters.types and len(set(filters.types)) < len(TRANSACTION_TYPES):
        parts.append(f"{filters.types[0]} transactions")

    if filters.categories:
        parts.append(f"from {len(filters.categories)} categories")

    if filters.exclude_categories:
        parts.append(f"excluding {len(filters.exclude_categories)} categories")

    if filters.date_from and filters.date_to:
        parts.append(f"from {filters.date_from} to {filters.date_to}")
    elif filters.date_from:
        parts.append(f"from {filters.date_from}")
    elif filters.date_to:
        parts.append(f"until {filters.date_to}")

    def money(text: str) -> str:
        return format_currency(parse_currency_input(text), currency, locale, formatter)

    if filters.amount_min and filters.amount_max:
        parts.append(f"between {money(filters.amount_min)} and {money(filters.amount_max)}")
    elif filters.amount_min:
        parts.append(f"over {money(filters.amount_min)}")
    elif filters.amount_max:
        parts.append(f"under {money(filters.amount_max)}")

    if not parts:
        return "All transactions"

    return f"Showing transactions {', '.join(parts)}"
