"""Use case to list portfolios with their headline metrics."""

from dataclasses import dataclass

from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.domain.models import Portfolio, PortfolioMetrics
from src.domain.policies import matches_query
from src.domain.services.portfolio import portfolio_metrics
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PortfolioSummary:
    """Portfolio paired with its value and performance."""

    portfolio: Portfolio
    metrics: PortfolioMetrics


class ListPortfoliosUseCase:
    """Fetch portfolios and compute their metrics."""

    def __init__(
        self,
        repository: PortfolioRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing portfolios.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, query: str | None = None) -> list[PortfolioSummary]:
        """Return summaries of portfolios matching the search query.

        Args:
            query: Optional text matched against name and description.

        Returns:
            list[PortfolioSummary]: Summaries in repository order.
        """
        portfolios = self._repository.list_portfolios()
        return [
            PortfolioSummary(
                portfolio=portfolio,
                metrics=portfolio_metrics(portfolio, self._logger),
            )
            for portfolio in portfolios
            if matches_query(query, portfolio.name, portfolio.description)
        ]


__all__ = ["ListPortfoliosUseCase", "PortfolioSummary"]
