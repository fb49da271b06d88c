"""Locale-aware currency rendering.

The financial core never talks to a locale database directly. It asks a
CurrencyFormatter for two things: a fully formatted amount and the symbol a
locale uses for a currency. BabelCurrencyFormatter backs both with CLDR data.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    UnknownCurrencyError,
    format_currency,
    get_currency_precision,
    get_currency_symbol,
    validate_currency,
)

from centsible.errors import FormattingError


class CurrencyFormatter(Protocol):
    """Renders major-unit amounts for a currency and locale."""

    def format(self, amount: Decimal, currency: str, locale: str) -> str:
        """Format amount (major units) with symbol, grouping and currency digits."""
        ...

    def symbol(self, currency: str, locale: str) -> str:
        """Return the display symbol for currency in locale."""
        ...


def _parse_locale(locale: str) -> Locale:
    """Parse a BCP 47 tag ("en-US") or POSIX identifier ("en_US")."""
    try:
        sep = "-" if "-" in locale else "_"
        return Locale.parse(locale, sep=sep)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise FormattingError(f"Currency formatting failed: unknown locale {locale!r}", field="locale") from e


def _normalize_currency(currency: str) -> str:
    message = f"Currency formatting failed: invalid currency code {currency!r}"
    if not isinstance(currency, str):
        raise FormattingError(message, field="currency")

    code = currency.strip().upper()
    try:
        validate_currency(code)
    except UnknownCurrencyError as e:
        raise FormattingError(message, field="currency") from e
    return code


class BabelCurrencyFormatter:
    """CurrencyFormatter backed by Babel's CLDR data."""

    def format(self, amount: Decimal, currency: str, locale: str) -> str:
        code = _normalize_currency(currency)
        # Babel rounds half to even; settle ties away from zero before it sees them
        quantum = Decimal(1).scaleb(-get_currency_precision(code))
        rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
        return format_currency(rounded, code, locale=_parse_locale(locale))

    def symbol(self, currency: str, locale: str) -> str:
        code = _normalize_currency(currency)
        return get_currency_symbol(code, locale=_parse_locale(locale))


_default_formatter: CurrencyFormatter = BabelCurrencyFormatter()


def get_default_formatter() -> CurrencyFormatter:
    """Return the formatter used when callers do not pass one."""
    return _default_formatter
