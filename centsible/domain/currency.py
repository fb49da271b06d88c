"""Pure functions for currency formatting, parsing and percentages.

This module contains the functional core for money display:
- No I/O operations (no database, no console, no files)
- No side effects
- Locale data reached only through a CurrencyFormatter
- Easy to test

All monetary amounts are in cents (Cents type).
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from centsible.domain.models import MAX_AMOUNT, Cents
from centsible.domain.numbers import (
    Number,
    percentage_of,
    require_finite,
    round_half_away,
    to_decimal,
)
from centsible.errors import (
    ExceedsMaximumError,
    InvalidArgumentError,
    InvalidBudgetError,
    InvalidFormatError,
    NegativeNotAllowedError,
)
from centsible.formatting import CurrencyFormatter, get_default_formatter

_STRIP_PATTERN = re.compile(r"[$£€¥,\s]")
_LEADING_NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

_MILLION = Decimal(1_000_000)
_THOUSAND = Decimal(1_000)
_ONE_PLACE = Decimal("0.1")


def format_currency(
    cents: Number,
    currency: str = "USD",
    locale: str = "en-US",
    formatter: CurrencyFormatter | None = None,
) -> str:
    """Format an amount in cents as a localized currency string.

    Args:
        cents: Amount in cents. Fractional cents are passed through.
        currency: ISO 4217 currency code.
        locale: BCP 47 locale tag.
        formatter: Formatting provider (defaults to Babel).

    Returns:
        Formatted string (e.g., "$123.45" for 12345).

    Raises:
        InvalidArgumentError: If cents is not a finite number.
        FormattingError: If the currency code or locale is not recognized.
    """
    require_finite(cents, "cents")
    formatter = formatter or get_default_formatter()
    return formatter.format(to_decimal(cents) / 100, currency, locale)


def parse_currency_input(text: str, max_amount: int = MAX_AMOUNT) -> Cents:
    """Parse free-text currency input into cents.

    Currency symbols ($ £ € ¥), commas and whitespace are stripped first. The
    leading decimal number is read and any trailing text is ignored.

    Args:
        text: User input such as "$1,234.56".
        max_amount: Largest accepted value in major units.

    Returns:
        Amount in cents (0 for empty input).

    Raises:
        InvalidArgumentError: If text is not a string.
        InvalidFormatError: If the remaining text does not start with a number.
        NegativeNotAllowedError: If the value is negative.
        ExceedsMaximumError: If the value is above max_amount.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError("Invalid input: input must be a string", field="input")

    cleaned = _STRIP_PATTERN.sub("", text)
    if cleaned == "":
        return Cents(0)

    # Read the leading number and ignore trailing text, so "12.50USD" is 12.50
    match = _LEADING_NUMBER_PATTERN.match(cleaned)
    if match is None:
        raise InvalidFormatError(f"Invalid currency format: {text!r}", field="input")

    try:
        value = Decimal(match.group(0))
    except InvalidOperation as e:
        raise InvalidFormatError(f"Invalid currency format: {text!r}", field="input") from e

    if value < 0:
        raise NegativeNotAllowedError("Negative amounts not allowed", field="input")

    if value > max_amount:
        raise ExceedsMaximumError("Amount exceeds maximum allowed value", field="input")

    return Cents(round_half_away(value * 100))


def format_currency_compact(
    cents: Number,
    currency: str = "USD",
    locale: str = "en-US",
    formatter: CurrencyFormatter | None = None,
) -> str:
    """Format cents with K/M suffixes for large amounts.

    Args:
        cents: Amount in cents.
        currency: ISO 4217 currency code.
        locale: BCP 47 locale tag.
        formatter: Formatting provider (defaults to Babel).

    Returns:
        "$1.5M" style for a million or more, "$1.5K" for a thousand or more,
        otherwise the same output as format_currency.
    """
    require_finite(cents, "cents")
    formatter = formatter or get_default_formatter()

    major = to_decimal(cents) / 100
    amount = abs(major)
    sign = "-" if major < 0 else ""

    if amount >= _MILLION:
        scaled = (amount / _MILLION).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
        return f"{sign}{formatter.symbol(currency, locale)}{scaled}M"
    elif amount >= _THOUSAND:
        scaled = (amount / _THOUSAND).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
        return f"{sign}{formatter.symbol(currency, locale)}{scaled}K"
    else:
        return format_currency(cents, currency, locale, formatter)


def _validate_ratio_args(spent: Number, budget: Number) -> None:
    require_finite(spent, "spent")
    require_finite(budget, "budget")
    if budget <= 0:
        raise InvalidBudgetError("Budget must be greater than zero", field="budget")


def calculate_percentage(spent: Number, budget: Number) -> int:
    """Percentage of budget spent, capped at 100 for progress bars.

    Raises:
        InvalidArgumentError: If either value is not a finite number.
        InvalidBudgetError: If budget is zero or negative.
    """
    _validate_ratio_args(spent, budget)
    return min(percentage_of(spent, budget), 100)


def calculate_percentage_raw(spent: Number, budget: Number) -> int:
    """Percentage of budget spent without the 100 cap (can exceed 100)."""
    _validate_ratio_args(spent, budget)
    return percentage_of(spent, budget)
