"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    MAX_ANNUAL_RETURN_RATE,
    MAX_DURATION_YEARS,
    MAX_INFLATION_RATE,
    MAX_TAX_RATE,
    MIN_ANNUAL_RETURN_RATE,
    MIN_DURATION_YEARS,
    MIN_INFLATION_RATE,
    MIN_TAX_RATE,
)
from src.domain.errors import InvalidPlanParameter
from src.domain.models import Holding, InvestmentPlan


def _require_finite(field: str, value) -> None:
    if isinstance(value, int) and not isinstance(value, bool):
        return
    if not isinstance(value, Decimal) or not value.is_finite():
        raise InvalidPlanParameter(field, value, "must be a finite number")


def _require_range(
    field: str,
    value: Decimal,
    minimum: Decimal,
    maximum: Decimal | None = None,
) -> None:
    _require_finite(field, value)
    if value < minimum:
        raise InvalidPlanParameter(field, value, f"must be >= {minimum}")
    if maximum is not None and value > maximum:
        raise InvalidPlanParameter(field, value, f"must be <= {maximum}")


def validate_plan(plan: InvestmentPlan) -> None:
    """Reject plans with a field outside its documented domain.

    Args:
        plan: Plan to validate before projecting it.

    Raises:
        InvalidPlanParameter: On the first invalid field.
    """
    _require_range("initial_investment", plan.initial_investment, Decimal("0"))
    _require_range(
        "monthly_contribution",
        plan.monthly_contribution,
        Decimal("0"),
    )
    _require_range(
        "annual_return_rate",
        plan.annual_return_rate,
        MIN_ANNUAL_RETURN_RATE,
        MAX_ANNUAL_RETURN_RATE,
    )
    years = plan.investment_duration_years
    if isinstance(years, bool) or not isinstance(years, int):
        raise InvalidPlanParameter(
            "investment_duration_years",
            years,
            "must be an integer number of years",
        )
    if not MIN_DURATION_YEARS <= years <= MAX_DURATION_YEARS:
        raise InvalidPlanParameter(
            "investment_duration_years",
            years,
            f"must be between {MIN_DURATION_YEARS} and {MAX_DURATION_YEARS}",
        )
    _require_range(
        "inflation_rate",
        plan.inflation_rate,
        MIN_INFLATION_RATE,
        MAX_INFLATION_RATE,
    )
    _require_range("tax_rate", plan.tax_rate, MIN_TAX_RATE, MAX_TAX_RATE)


def is_priced_holding(
    holding: Holding,
    logger: Logger | None = None,
) -> bool:
    """Return True when a holding carries the data needed to value it.

    Args:
        holding: Holding record from a portfolio.
        logger: Optional logger used to warn about malformed records.

    Returns:
        bool: False when the holding, its asset, the price or the quantity
            is missing.
    """
    problem = None
    if holding is None:
        problem = "missing holding"
    elif holding.asset is None:
        problem = "missing asset"
    elif holding.asset.current_price is None:
        problem = f"missing current price for {holding.asset.symbol}"
    elif holding.quantity is None:
        problem = f"missing quantity for {holding.asset.symbol}"
    if problem is None:
        return True
    if logger is not None:
        logger.warning(
            f"Holding {getattr(holding, 'id', None) or '<unknown>'} "
            f"valued at zero: {problem}"
        )
    return False


__all__ = ["validate_plan", "is_priced_holding"]
