"""CSV loading for budget and transaction files.

Amount columns are currency text ("$1,234.56") and are converted to cents
with parse_currency_input. Dates are normalized with pandas since exported
files are rarely consistent about format.
"""

from pathlib import Path
from typing import Any

import pandas as pd

from centsible.domain.calculations import DATE_PATTERN
from centsible.domain.currency import parse_currency_input
from centsible.domain.models import MAX_AMOUNT
from centsible.errors import CentsibleError, InvalidDateFormatError

BUDGET_REQUIRED_COLUMNS = ("name", "amount", "spent")
TRANSACTION_REQUIRED_COLUMNS = ("date", "type", "amount")


class CsvLoadError(CentsibleError):
    """A CSV file is missing columns or holds an invalid row."""


def normalize_date(raw_date: str) -> str:
    """Normalize a date string to ISO format (YYYY-MM-DD).

    Args:
        raw_date: Raw date string from CSV.

    Returns:
        Normalized date in YYYY-MM-DD format.

    Raises:
        InvalidDateFormatError: If date cannot be parsed.
    """
    raw_date = raw_date.strip()
    if DATE_PATTERN.fullmatch(raw_date):
        return raw_date

    try:
        parsed_date = pd.to_datetime(raw_date, dayfirst=True)
        return parsed_date.strftime("%Y-%m-%d")
    except (ValueError, pd.errors.ParserError) as e:
        raise InvalidDateFormatError(f"Could not parse date '{raw_date}': {e}", field="date") from e


def read_csv_rows(path: Path, required: tuple[str, ...]) -> list[dict[str, str]]:
    """Read a CSV file into a list of row dicts with lowercased headers.

    Raises:
        CsvLoadError: If a required column is missing.
        OSError: If the file cannot be read.
    """
    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    frame.columns = [str(c).strip().lower() for c in frame.columns]

    missing = [c for c in required if c not in frame.columns]
    if missing:
        raise CsvLoadError(f"{path.name}: missing column(s): {', '.join(missing)}")

    return frame.to_dict(orient="records")


def _parse_amount(raw: str, column: str, line: int, max_amount: int) -> int:
    try:
        return parse_currency_input(raw, max_amount)
    except CentsibleError as e:
        raise CsvLoadError(f"Row {line}: {column}: {e}", field=column, index=line) from e


def load_budgets(path: Path, max_amount: int = MAX_AMOUNT) -> list[dict[str, Any]]:
    """Load budgets from CSV (name, month, category, amount, spent).

    Returns:
        Budget records with amount and spent in cents.
    """
    budgets: list[dict[str, Any]] = []

    for line, row in enumerate(read_csv_rows(path, BUDGET_REQUIRED_COLUMNS), start=1):
        budgets.append(
            {
                "name": row["name"].strip(),
                "month": row.get("month", "").strip(),
                "category_name": row.get("category", "").strip() or None,
                "amount": _parse_amount(row["amount"], "amount", line, max_amount),
                "spent": _parse_amount(row["spent"], "spent", line, max_amount),
            }
        )

    return budgets


def load_transactions(path: Path, max_amount: int = MAX_AMOUNT) -> list[dict[str, Any]]:
    """Load transactions from CSV (id, date, description, type, amount, category).

    Category ids are assigned in order of first appearance.

    Returns:
        Transaction records with amount in cents and ISO dates.
    """
    transactions: list[dict[str, Any]] = []
    category_ids: dict[str, int] = {}

    for line, row in enumerate(read_csv_rows(path, TRANSACTION_REQUIRED_COLUMNS), start=1):
        category = row.get("category", "").strip()
        if category and category not in category_ids:
            category_ids[category] = len(category_ids) + 1

        raw_id = row.get("id", "").strip()
        transactions.append(
            {
                "id": int(raw_id) if raw_id.isdigit() else line,
                "date": normalize_date(row["date"].strip()),
                "description": row.get("description", "").strip(),
                "type": row["type"].strip().lower(),
                "amount": _parse_amount(row["amount"], "amount", line, max_amount),
                "category_id": category_ids.get(category),
                "category_name": category or None,
            }
        )

    return transactions
