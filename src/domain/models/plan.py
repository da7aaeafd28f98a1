"""Domain models for investment plans and their projections."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from src.domain.constants import MONTHS_PER_YEAR
from src.utils.decimal_utils import coerce_decimal


class FinalAmountBasis(str, Enum):
    """Balance used as the headline final amount of a projection."""

    INFLATION_ADJUSTED = "inflation_adjusted"
    NOMINAL = "nominal"


def _plan_decimal(field: str, value) -> Decimal:
    try:
        return coerce_decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"{field} must be numeric, got {value!r}") from exc


@dataclass(frozen=True)
class InvestmentPlan:
    """Parameters of a hypothetical investment strategy.

    Rates are expressed in percent (8 means 8%).

    Attributes:
        initial_investment: Capital invested at the start.
        monthly_contribution: Amount added at the start of every month.
        annual_return_rate: Expected yearly return, may be negative.
        investment_duration_years: Number of simulated years.
        inflation_rate: Yearly inflation used to discount the balance.
        tax_rate: Share of every month's earnings paid as tax.
    """

    initial_investment: Decimal
    monthly_contribution: Decimal
    annual_return_rate: Decimal
    investment_duration_years: int
    inflation_rate: Decimal = Decimal("0")
    tax_rate: Decimal = Decimal("0")

    @classmethod
    def from_values(
        cls,
        initial_investment,
        monthly_contribution,
        annual_return_rate,
        investment_duration_years,
        inflation_rate=0,
        tax_rate=0,
    ) -> "InvestmentPlan":
        """Build a plan from raw numbers or numeric strings.

        Raises:
            ValueError: If a value is not numeric or the duration is not
                an integer.
            TypeError: If the duration is missing.
        """
        return cls(
            initial_investment=_plan_decimal(
                "initial_investment", initial_investment
            ),
            monthly_contribution=_plan_decimal(
                "monthly_contribution", monthly_contribution
            ),
            annual_return_rate=_plan_decimal(
                "annual_return_rate", annual_return_rate
            ),
            investment_duration_years=int(investment_duration_years),
            inflation_rate=_plan_decimal("inflation_rate", inflation_rate),
            tax_rate=_plan_decimal("tax_rate", tax_rate),
        )

    @property
    def total_months(self) -> int:
        """Return the number of simulated months."""
        return self.investment_duration_years * MONTHS_PER_YEAR


@dataclass(frozen=True)
class YearlyResult:
    """Projection figures reported at the end of one simulated year."""

    year: int
    yearly_contribution: Decimal
    yearly_earnings: Decimal
    yearly_taxes: Decimal
    balance_with_inflation: Decimal
    balance_without_inflation: Decimal


@dataclass(frozen=True)
class ProjectionSummary:
    """Headline figures derived once from a full projection."""

    final_amount: Decimal
    total_contributions: Decimal
    total_earnings: Decimal
    return_multiplier: Decimal
    basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED


@dataclass(frozen=True)
class Projection:
    """Year-by-year trajectory of a plan with its summary."""

    plan: InvestmentPlan
    yearly_results: tuple[YearlyResult, ...]
    summary: ProjectionSummary


@dataclass(frozen=True)
class PreviewEstimate:
    """Instant estimate shown while a plan is being edited."""

    final_amount: Decimal
    total_contributions: Decimal
    estimated_earnings: Decimal
    return_multiplier: Decimal


@dataclass(frozen=True)
class Simulation:
    """Saved simulation: a named plan owned by the remote service."""

    name: str
    plan: InvestmentPlan
    description: str | None = None
    created_at: datetime | None = None
    id: str | None = None


__all__ = [
    "FinalAmountBasis",
    "InvestmentPlan",
    "YearlyResult",
    "ProjectionSummary",
    "Projection",
    "PreviewEstimate",
    "Simulation",
]
