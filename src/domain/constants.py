"""Domain constants for projections and portfolio analytics."""

from decimal import Decimal

MONTHS_PER_YEAR = 12

MIN_DURATION_YEARS = 1
MAX_DURATION_YEARS = 100

MIN_ANNUAL_RETURN_RATE = Decimal("-100")
MAX_ANNUAL_RETURN_RATE = Decimal("1000")

MIN_INFLATION_RATE = Decimal("0")
MAX_INFLATION_RATE = Decimal("100")

MIN_TAX_RATE = Decimal("0")
MAX_TAX_RATE = Decimal("100")

DEFAULT_RECENT_TRANSACTIONS_LIMIT = 5


__all__ = [
    "MONTHS_PER_YEAR",
    "MIN_DURATION_YEARS",
    "MAX_DURATION_YEARS",
    "MIN_ANNUAL_RETURN_RATE",
    "MAX_ANNUAL_RETURN_RATE",
    "MIN_INFLATION_RATE",
    "MAX_INFLATION_RATE",
    "MIN_TAX_RATE",
    "MAX_TAX_RATE",
    "DEFAULT_RECENT_TRANSACTIONS_LIMIT",
]
