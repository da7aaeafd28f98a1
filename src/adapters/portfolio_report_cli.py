"""CLI adapter to print the dashboard overview of every portfolio."""

from src.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from src.infrastructure.container import (
    build_portfolio_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the dashboard overview use case and print it."""
    logger = get_app_logger()
    settings = build_settings()
    try:
        repository = build_portfolio_repository(settings)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    use_case = GetDashboardOverviewUseCase(
        repository=repository,
        logger=logger,
        recent_limit=settings.recent_transactions_limit,
    )
    try:
        overview = use_case.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    metrics = overview.metrics
    print(
        f"Total value={metrics.total_value:,.2f}, "
        f"invested={metrics.total_invested:,.2f}, "
        f"performance={metrics.performance_percentage:+.2f}%"
    )
    for summary in overview.portfolios:
        print(
            f"- {summary.portfolio.name}: "
            f"value={summary.metrics.total_value:,.2f}, "
            f"performance={summary.metrics.performance_percentage:+.2f}%, "
            f"investments={summary.metrics.holding_count}"
        )
    print("Allocation:")
    for entry in overview.allocation:
        print(
            f"  {entry.asset_type.label}: {entry.value:,.2f} "
            f"({entry.percentage:.1f}%)"
        )
    print("Recent transactions:")
    if not overview.recent_transactions:
        print("  none")
    for item in overview.recent_transactions:
        transaction = item.transaction
        print(
            f"  {transaction.transaction_date:%Y-%m-%d} "
            f"{transaction.type.value} {transaction.quantity} "
            f"{item.asset_symbol or '?'} @ {transaction.price:,.2f} "
            f"[{item.portfolio_name}]"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
