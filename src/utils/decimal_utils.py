"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")
DEFAULT_PRECISION = 28


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a payload or an adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize numeric values to Decimal, keeping missing values as None.

    Args:
        value: Raw numeric value, possibly missing or malformed.

    Returns:
        Decimal | None: Parsed value, or None when it cannot be parsed.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        result = coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite():
        return None
    return result


def currency_context(value: Decimal, spare_digits: int = 3) -> Context:
    """Return a context with enough digits to hold ``value`` down to cents.

    Args:
        value: Largest magnitude the context has to represent.
        spare_digits: Digits kept below the units position.

    Returns:
        Context: Default context widened past 28 digits when needed.
    """
    digits = value.adjusted() + spare_digits if value.is_finite() else 0
    return Context(prec=max(DEFAULT_PRECISION, digits))


def quantize_currency(value: Decimal) -> Decimal:
    """Round a currency amount to cents using half-up rounding."""
    return value.quantize(
        CENT,
        rounding=ROUND_HALF_UP,
        context=currency_context(value),
    )


def safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Return numerator / denominator, or zero when the denominator is zero."""
    if denominator == 0:
        return ZERO
    return numerator / denominator


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return part as a 0-100 percentage of whole (zero for an empty whole)."""
    return safe_ratio(part, whole) * HUNDRED


__all__ = [
    "CENT",
    "ZERO",
    "HUNDRED",
    "DEFAULT_PRECISION",
    "coerce_decimal",
    "coerce_optional_decimal",
    "currency_context",
    "quantize_currency",
    "safe_ratio",
    "percentage_of",
]
