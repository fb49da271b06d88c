"""Tests for centsible.loaders."""

from pathlib import Path

import pytest

from centsible.errors import InvalidDateFormatError
from centsible.loaders import CsvLoadError, load_budgets, load_transactions, normalize_date


def write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


class TestNormalizeDate:
    """Tests for normalize_date."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("2024-01-15", "2024-01-15"), ("15/01/2024", "2024-01-15"), ("15-01-2024", "2024-01-15")],
    )
    def test_formats(self, raw: str, expected: str) -> None:
        """Should normalize common formats, day first."""
        assert normalize_date(raw) == expected

    def test_invalid(self) -> None:
        """Should raise InvalidDateFormatError for unparseable text."""
        with pytest.raises(InvalidDateFormatError):
            normalize_date("not a date")

    def test_strips_surrounding_whitespace(self) -> None:
        """Should not pass a trailing newline through as an ISO date."""
        assert normalize_date("2024-01-15\n") == "2024-01-15"
        assert normalize_date(" 2024-01-15 ") == "2024-01-15"


class TestLoadBudgets:
    """Tests for load_budgets."""

    def test_loads_rows(self, tmp_path: Path) -> None:
        """Should parse currency text into cents."""
        path = write(
            tmp_path / "budgets.csv",
            'name,month,category,amount,spent\nGroceries,2024-01,Food,"$500.00",250\nFun,2024-01,,300,"$350.00"\n',
        )

        budgets = load_budgets(path)

        assert budgets == [
            {"name": "Groceries", "month": "2024-01", "category_name": "Food", "amount": 50000, "spent": 25000},
            {"name": "Fun", "month": "2024-01", "category_name": None, "amount": 30000, "spent": 35000},
        ]

    def test_header_case_insensitive(self, tmp_path: Path) -> None:
        """Should accept capitalized headers."""
        path = write(tmp_path / "budgets.csv", "Name,Amount,Spent\nRent,1200,1200\n")

        assert load_budgets(path)[0]["amount"] == 120000

    def test_missing_column(self, tmp_path: Path) -> None:
        """Should name the missing columns."""
        path = write(tmp_path / "budgets.csv", "name,amount\nRent,1200\n")

        with pytest.raises(CsvLoadError, match="spent"):
            load_budgets(path)

    def test_bad_amount_names_row(self, tmp_path: Path) -> None:
        """Should report the row and column of a bad amount."""
        path = write(tmp_path / "budgets.csv", "name,amount,spent\nRent,1200,0\nFun,lots,0\n")

        with pytest.raises(CsvLoadError, match="Row 2: amount") as exc_info:
            load_budgets(path)

        assert exc_info.value.index == 2


class TestLoadTransactions:
    """Tests for load_transactions."""

    def test_loads_rows(self, tmp_path: Path) -> None:
        """Should normalize dates, types and category ids."""
        path = write(
            tmp_path / "transactions.csv",
            "id,date,description,type,amount,category\n"
            "10,2024-01-15,Salary,Income,\"$5,000.00\",Work\n"
            ",20/01/2024,Groceries,expense,85.50,Food\n"
            "12,2024-01-22,Market,expense,14.50,Food\n",
        )

        transactions = load_transactions(path)

        assert [t["id"] for t in transactions] == [10, 2, 12]
        assert [t["date"] for t in transactions] == ["2024-01-15", "2024-01-20", "2024-01-22"]
        assert [t["type"] for t in transactions] == ["income", "expense", "expense"]
        assert [t["amount"] for t in transactions] == [500000, 8550, 1450]
        assert [t["category_id"] for t in transactions] == [1, 2, 2]

    def test_missing_category(self, tmp_path: Path) -> None:
        """Should leave category fields empty."""
        path = write(tmp_path / "transactions.csv", "date,type,amount\n2024-01-15,expense,5\n")

        txn = load_transactions(path)[0]

        assert txn["category_id"] is None
        assert txn["category_name"] is None
        assert txn["description"] == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should raise OSError for a missing file."""
        with pytest.raises(OSError):
            load_transactions(tmp_path / "missing.csv")
