"""Use case to build the dashboard overview across all portfolios."""

from dataclasses import dataclass

from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.application.use_cases.list_portfolios import PortfolioSummary
from src.domain.constants import DEFAULT_RECENT_TRANSACTIONS_LIMIT
from src.domain.models import (
    AllocationEntry,
    PortfolioMetrics,
    RecentTransaction,
)
from src.domain.services.portfolio import (
    combined_asset_allocation,
    combined_metrics,
    portfolio_metrics,
    recent_transactions,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardOverview:
    """Totals, allocation and latest activity across every portfolio."""

    metrics: PortfolioMetrics
    portfolios: list[PortfolioSummary]
    allocation: list[AllocationEntry]
    recent_transactions: list[RecentTransaction]


class GetDashboardOverviewUseCase:
    """Aggregate every portfolio for the dashboard."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
        recent_limit: int = DEFAULT_RECENT_TRANSACTIONS_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing portfolios.
            logger: Optional logger compatible with logging.Logger-like API.
            recent_limit: Length of the recent transactions feed.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._recent_limit = recent_limit

    def execute(self) -> DashboardOverview:
        """Return the dashboard overview."""
        portfolios = self._repository.list_portfolios()
        metrics = combined_metrics(portfolios, self._logger)
        self._logger.info(
            f"Dashboard computed: portfolios={len(portfolios)}, "
            f"value={metrics.total_value}, invested={metrics.total_invested}"
        )
        return DashboardOverview(
            metrics=metrics,
            portfolios=[
                PortfolioSummary(
                    portfolio=portfolio,
                    metrics=portfolio_metrics(portfolio),
                )
                for portfolio in portfolios
            ],
            allocation=combined_asset_allocation(portfolios),
            recent_transactions=recent_transactions(
                portfolios,
                limit=self._recent_limit,
                logger=self._logger,
            ),
        )


__all__ = ["GetDashboardOverviewUseCase", "DashboardOverview"]
