"""Port for reading portfolios from the remote service."""

from typing import Protocol

from src.domain.models import Portfolio


class PortfolioNotFound(LookupError):
    """Raised when a portfolio id is unknown to the repository."""


class PortfolioRepositoryPort(Protocol):
    """Port exposing read access to portfolios and their holdings."""

    def list_portfolios(self) -> list[Portfolio]:
        """Return every portfolio with its holdings and transactions."""

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Return one portfolio.

        Raises:
            PortfolioNotFound: When no portfolio has the given id.
        """


__all__ = ["PortfolioRepositoryPort", "PortfolioNotFound"]
