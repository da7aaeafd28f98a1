"""Growth projection of an investment plan.

The balance compounds monthly and is reported yearly. Every month the
contribution is added first, then the month's earnings are computed on the
new balance, then tax is withheld from those earnings. Earnings and taxes
are rounded to cents (half-up) before they touch the balance, so the nominal
balance never drifts below cent precision however long the plan runs.
Arithmetic runs in a decimal context widened to the size of the balance,
so plans compounding past 28 significant digits stay exact to the cent.
"""

from decimal import Decimal, localcontext

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models import (
    FinalAmountBasis,
    InvestmentPlan,
    PreviewEstimate,
    Projection,
    ProjectionSummary,
    YearlyResult,
)
from src.domain.services.validation import validate_plan
from src.utils.decimal_utils import (
    HUNDRED,
    ZERO,
    currency_context,
    quantize_currency,
    safe_ratio,
)

_MONTHS = Decimal(MONTHS_PER_YEAR)


def _monthly_rate(annual_percent: Decimal) -> Decimal:
    return annual_percent / HUNDRED / _MONTHS


def _working_context(*amounts: Decimal):
    # Wide enough that adding cents to the largest amount stays exact.
    return currency_context(max(abs(amount) for amount in amounts), 10)


def _advance_month(
    balance: Decimal,
    contribution: Decimal,
    monthly_return: Decimal,
    tax_fraction: Decimal,
    round_to_cents: bool,
) -> tuple[Decimal, Decimal, Decimal]:
    """Apply one month of contribution, return and tax.

    Returns:
        tuple: New balance, earnings and taxes for the month.
    """
    with localcontext(_working_context(balance, contribution)):
        balance += contribution
        earnings = balance * monthly_return
        if round_to_cents:
            earnings = quantize_currency(earnings)
        taxes = earnings * tax_fraction
        if round_to_cents:
            taxes = quantize_currency(taxes)
        return balance + earnings - taxes, earnings, taxes


def _discount(
    balance: Decimal,
    monthly_inflation: Decimal,
    months_elapsed: int,
) -> Decimal:
    if monthly_inflation == 0:
        return balance
    with localcontext(_working_context(balance)):
        factor = (Decimal("1") + monthly_inflation) ** months_elapsed
        return balance / factor


def total_contributions(plan: InvestmentPlan) -> Decimal:
    """Return the initial investment plus every monthly contribution."""
    years = max(plan.investment_duration_years, 0)
    return (
        plan.initial_investment
        + plan.monthly_contribution * _MONTHS * years
    )


def project_yearly_results(plan: InvestmentPlan) -> tuple[YearlyResult, ...]:
    """Return one YearlyResult per simulated year, in ascending order.

    Args:
        plan: Plan to project.

    Returns:
        tuple[YearlyResult, ...]: ``investment_duration_years`` results.

    Raises:
        InvalidPlanParameter: When the plan fails validation.
    """
    validate_plan(plan)
    monthly_return = _monthly_rate(plan.annual_return_rate)
    monthly_inflation = _monthly_rate(plan.inflation_rate)
    tax_fraction = plan.tax_rate / HUNDRED

    balance = plan.initial_investment
    year_earnings = ZERO
    year_taxes = ZERO
    results: list[YearlyResult] = []
    for month in range(1, plan.total_months + 1):
        balance, earnings, taxes = _advance_month(
            balance,
            plan.monthly_contribution,
            monthly_return,
            tax_fraction,
            round_to_cents=True,
        )
        with localcontext(_working_context(year_earnings, earnings)):
            year_earnings += earnings
            year_taxes += taxes
        if month % MONTHS_PER_YEAR:
            continue
        results.append(
            YearlyResult(
                year=month // MONTHS_PER_YEAR,
                yearly_contribution=plan.monthly_contribution * _MONTHS,
                yearly_earnings=year_earnings,
                yearly_taxes=year_taxes,
                balance_with_inflation=quantize_currency(
                    _discount(balance, monthly_inflation, month)
                ),
                balance_without_inflation=balance,
            )
        )
        year_earnings = ZERO
        year_taxes = ZERO
    return tuple(results)


def summarize_projection(
    plan: InvestmentPlan,
    yearly_results: tuple[YearlyResult, ...],
    basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED,
) -> ProjectionSummary:
    """Compute the headline figures of a projection.

    Args:
        plan: Projected plan.
        yearly_results: Output of ``project_yearly_results`` for the plan.
        basis: Balance used as the final amount.

    Returns:
        ProjectionSummary: Final amount, contributions, earnings, multiplier.
    """
    if yearly_results:
        last = yearly_results[-1]
        final_amount = (
            last.balance_without_inflation
            if basis == FinalAmountBasis.NOMINAL
            else last.balance_with_inflation
        )
    else:
        final_amount = plan.initial_investment
    contributions = total_contributions(plan)
    with localcontext(_working_context(final_amount, contributions)):
        total_earnings = final_amount - contributions
    return ProjectionSummary(
        final_amount=final_amount,
        total_contributions=contributions,
        total_earnings=total_earnings,
        return_multiplier=safe_ratio(final_amount, contributions),
        basis=basis,
    )


def project(
    plan: InvestmentPlan,
    *,
    basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED,
) -> Projection:
    """Project a plan and summarize it.

    Raises:
        InvalidPlanParameter: When the plan fails validation.
    """
    yearly_results = project_yearly_results(plan)
    return Projection(
        plan=plan,
        yearly_results=yearly_results,
        summary=summarize_projection(plan, yearly_results, basis),
    )


def estimate_preview(
    plan: InvestmentPlan,
    *,
    basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED,
) -> PreviewEstimate:
    """Estimate the outcome of a plan that is still being edited.

    No validation is applied: a zero or negative duration simply yields the
    initial investment. The monthly step is the one ``project`` uses, run
    without per-month rounding.

    Args:
        plan: Possibly incomplete plan.
        basis: Balance used as the final amount.

    Returns:
        PreviewEstimate: Estimated final amount and derived figures.
    """
    months = max(plan.investment_duration_years, 0) * MONTHS_PER_YEAR
    monthly_return = _monthly_rate(plan.annual_return_rate)
    tax_fraction = plan.tax_rate / HUNDRED
    balance = plan.initial_investment
    for _ in range(months):
        balance, _earnings, _taxes = _advance_month(
            balance,
            plan.monthly_contribution,
            monthly_return,
            tax_fraction,
            round_to_cents=False,
        )
    if basis == FinalAmountBasis.INFLATION_ADJUSTED:
        balance = _discount(
            balance,
            _monthly_rate(plan.inflation_rate),
            months,
        )
    final_amount = quantize_currency(balance)
    contributions = total_contributions(plan)
    with localcontext(_working_context(final_amount, contributions)):
        estimated_earnings = final_amount - contributions
    return PreviewEstimate(
        final_amount=final_amount,
        total_contributions=contributions,
        estimated_earnings=estimated_earnings,
        return_multiplier=safe_ratio(final_amount, contributions),
    )


__all__ = [
    "total_contributions",
    "project_yearly_results",
    "summarize_projection",
    "project",
    "estimate_preview",
]
