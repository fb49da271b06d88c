"""Domain type definitions for centsible.

These NewTypes provide semantic clarity and help with type checking:
- Cents: Amount in cents (minor units)
- Month: Month in YYYY-MM format
- DateString: Calendar date in YYYY-MM-DD format
- TransactionType: Either "income" or "expense"
"""

from typing import Literal, NewType

# Money amounts are carried as cents (minor units) to avoid floating point errors
Cents = NewType("Cents", int)

# Month is always in YYYY-MM format (e.g., "2024-01")
Month = NewType("Month", str)

# Transaction dates are plain YYYY-MM-DD strings, no timezone
DateString = NewType("DateString", str)

TransactionType = Literal["income", "expense"]

TRANSACTION_TYPES: tuple[TransactionType, ...] = ("income", "expense")

# Largest amount accepted from user input, in major units
MAX_AMOUNT = 999_999_999
