"""Date utilities for centsible.

Pure functions for month ranges and labels, plus the one impure helper that
reads today's date.
"""

from datetime import date, datetime, timedelta

from centsible.domain.calculations import MONTH_PATTERN
from centsible.domain.models import Month
from centsible.errors import InvalidMonthFormatError


def parse_month(text: str) -> Month:
    """Validate a YYYY-MM string.

    Raises:
        InvalidMonthFormatError: If text is not YYYY-MM or the month is not 01-12.
    """
    if not MONTH_PATTERN.fullmatch(text) or not 1 <= int(text[5:]) <= 12:
        raise InvalidMonthFormatError(f"Invalid month {text!r}: expected YYYY-MM", field="month")
    return Month(text)


def month_range(month: Month) -> tuple[str, str, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (since_date, until_date, label) where:
        - since_date: First day of month (YYYY-MM-DD)
        - until_date: First day of next month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2024")
    """
    dt = datetime.strptime(month, "%Y-%m")
    since = dt.strftime("%Y-%m-01")
    next_month = (dt.replace(day=28) + timedelta(days=4)).replace(day=1)
    until = next_month.strftime("%Y-%m-%d")
    label = dt.strftime("%B %Y")
    return since, until, label


def current_month(today: date | None = None) -> Month:
    """Return the month containing today (or the given date)."""
    today = today or date.today()
    return Month(today.strftime("%Y-%m"))
