"""Exceptions raised by the financial core.

Every error is a ValueError so callers that only care about "bad input"
can catch that, while route handlers and the CLI can match the precise
class to pick a message.
"""


class CentsibleError(ValueError):
    """Base class for validation failures in centsible."""

    def __init__(self, message: str, *, field: str | None = None, index: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.index = index


class InvalidArgumentError(CentsibleError):
    """A numeric argument is missing or non-finite, or a string argument has the wrong type."""


class NegativeAmountError(CentsibleError):
    """A budget or transaction amount is negative."""


class NegativeSpentError(CentsibleError):
    """A spent amount passed to budget progress is negative."""


class NegativeNotAllowedError(CentsibleError):
    """Parsed currency input is negative."""


class InvalidBudgetError(CentsibleError):
    """A budget used as a denominator is zero or negative."""


class ExceedsMaximumError(CentsibleError):
    """Parsed currency input is above the allowed maximum."""


class InvalidFormatError(CentsibleError):
    """Currency input is not a decimal number."""


class InvalidDateFormatError(CentsibleError):
    """Date is not YYYY-MM-DD."""


class InvalidMonthFormatError(CentsibleError):
    """Month is not YYYY-MM."""


class InvalidTransactionTypeError(CentsibleError):
    """Transaction type is neither 'income' nor 'expense'."""


class InvalidBudgetAmountError(CentsibleError):
    """A budget's amount or spent value is not a finite number."""


class InvalidTransactionAmountError(CentsibleError):
    """A transaction amount is not a finite number."""


class FormattingError(CentsibleError):
    """The formatting provider rejected the currency code or locale."""
