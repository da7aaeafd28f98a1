"""Use case to build the detail view of one portfolio."""

from dataclasses import dataclass

from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.domain.models import (
    AllocationEntry,
    HoldingRow,
    Portfolio,
    PortfolioMetrics,
)
from src.domain.policies import SortState
from src.domain.services.portfolio import (
    asset_allocation,
    holding_rows,
    portfolio_metrics,
)
from src.domain.services.sorting import sort_holdings
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PortfolioDetail:
    """Portfolio metrics, allocation and sorted holding rows."""

    portfolio: Portfolio
    metrics: PortfolioMetrics
    allocation: list[AllocationEntry]
    rows: list[HoldingRow]
    sort_state: SortState


class GetPortfolioDetailUseCase:
    """Compute the detail view of a portfolio."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        portfolio_id: str,
        sort_state: SortState | None = None,
    ) -> PortfolioDetail:
        """Return the portfolio detail with holdings in the requested order.

        Args:
            portfolio_id: Identifier of the portfolio to load.
            sort_state: Holding sort column and direction.

        Returns:
            PortfolioDetail: Aggregates and sorted rows.

        Raises:
            PortfolioNotFound: When the id is unknown.
        """
        state = sort_state or SortState()
        portfolio = self._repository.get_portfolio(portfolio_id)
        ordered = sort_holdings(portfolio.holdings, state.key, state.direction)
        return PortfolioDetail(
            portfolio=portfolio,
            metrics=portfolio_metrics(portfolio, self._logger),
            allocation=asset_allocation(portfolio),
            rows=holding_rows(ordered),
            sort_state=state,
        )


__all__ = ["GetPortfolioDetailUseCase", "PortfolioDetail"]
