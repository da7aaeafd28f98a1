"""CLI adapter to project an investment plan.

Prints the headline figures and the year-by-year table of a plan given on
the command line, e.g.::

    python -m src.adapters.run_simulation_cli --initial 10000 --monthly 500 \
        --return-rate 8 --years 30 --inflation 2
"""

import argparse

from src.application.use_cases.run_simulation import RunSimulationUseCase
from src.domain.errors import InvalidPlanParameter
from src.domain.models import FinalAmountBasis, InvestmentPlan, Projection
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Project the growth of an investment plan.",
    )
    parser.add_argument("--initial", default="10000", help="Initial investment")
    parser.add_argument("--monthly", default="500", help="Monthly contribution")
    parser.add_argument(
        "--return-rate",
        default="8",
        help="Annual return rate in percent",
    )
    parser.add_argument("--years", default="30", help="Duration in years")
    parser.add_argument(
        "--inflation",
        default="2",
        help="Annual inflation rate in percent",
    )
    parser.add_argument("--tax", default="0", help="Tax rate in percent")
    parser.add_argument(
        "--basis",
        choices=[basis.value for basis in FinalAmountBasis],
        default=None,
        help="Balance used as the final amount (defaults to settings)",
    )
    return parser


def _print_projection(projection: Projection) -> None:
    summary = projection.summary
    print(
        f"Final amount ({summary.basis.value}): {summary.final_amount:,.2f}"
    )
    print(f"Total contributions: {summary.total_contributions:,.2f}")
    print(f"Total earnings: {summary.total_earnings:,.2f}")
    print(f"Return multiplier: {summary.return_multiplier:.2f}x")
    print()
    print(
        f"{'Year':>4} {'Contribution':>14} {'Earnings':>14} {'Taxes':>12} "
        f"{'Balance':>16} {'Adjusted':>16}"
    )
    for result in projection.yearly_results:
        print(
            f"{result.year:>4} {result.yearly_contribution:>14,.2f} "
            f"{result.yearly_earnings:>14,.2f} {result.yearly_taxes:>12,.2f} "
            f"{result.balance_without_inflation:>16,.2f} "
            f"{result.balance_with_inflation:>16,.2f}"
        )


def main(argv: list[str] | None = None) -> int:
    """Run the projection and print it.

    Returns:
        int: Process exit code (2 when the plan is rejected).
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    basis = (
        FinalAmountBasis(args.basis)
        if args.basis
        else DashboardSettings.from_env().headline_basis
    )
    try:
        plan = InvestmentPlan.from_values(
            initial_investment=args.initial,
            monthly_contribution=args.monthly,
            annual_return_rate=args.return_rate,
            investment_duration_years=args.years,
            inflation_rate=args.inflation,
            tax_rate=args.tax,
        )
        projection = RunSimulationUseCase(logger=logger, basis=basis).execute(
            plan
        )
    except InvalidPlanParameter as exc:
        print(f"Invalid plan: {exc}")
        return 2
    except ValueError as exc:
        print(f"Invalid number: {exc}")
        return 2

    _print_projection(projection)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
