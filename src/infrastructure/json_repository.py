"""Repository reading a JSON export of the investment service."""

import json
from pathlib import Path

from src.application.ports.errors import RepositoryError
from src.application.ports.portfolio_repository import (
    PortfolioNotFound,
    PortfolioRepositoryPort,
)
from src.application.ports.simulation_repository import (
    SimulationNotFound,
    SimulationRepositoryPort,
)
from src.domain.models import Portfolio, Simulation
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.payloads import (
    portfolio_from_payload,
    simulations_from_payload,
)


class JsonFileRepository(PortfolioRepositoryPort, SimulationRepositoryPort):
    """Read portfolios and simulations from a JSON export.

    The export is either a list of portfolio payloads or an object with
    ``portfolios`` and ``simulations`` lists, using the service's camelCase
    field names. The file is read again on every call.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def _load(self) -> dict:
        try:
            with self._path.open(encoding="utf-8") as handle:
                document = json.load(handle)
        except FileNotFoundError as exc:
            raise RepositoryError(
                f"Portfolio file not found: {self._path}"
            ) from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise RepositoryError(
                f"Unable to read portfolio file {self._path}: {exc}"
            ) from exc
        if isinstance(document, list):
            return {"portfolios": document, "simulations": []}
        if not isinstance(document, dict):
            raise RepositoryError(
                f"Unexpected JSON document in {self._path}; "
                "expected a list or an object"
            )
        return document

    def list_portfolios(self) -> list[Portfolio]:
        """Return every portfolio in the export."""
        document = self._load()
        try:
            portfolios = [
                portfolio_from_payload(item, self._logger)
                for item in document.get("portfolios") or ()
            ]
        except ValueError as exc:
            raise RepositoryError(str(exc)) from exc
        self._logger.info(
            f"Loaded {len(portfolios)} portfolios from {self._path}"
        )
        return portfolios

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Return the portfolio with the given id."""
        for portfolio in self.list_portfolios():
            if portfolio.id == str(portfolio_id):
                return portfolio
        raise PortfolioNotFound(f"Portfolio {portfolio_id} not found")

    def list_simulations(self) -> list[Simulation]:
        """Return every decodable simulation in the export."""
        document = self._load()
        return simulations_from_payload(
            document.get("simulations"),
            self._logger,
        )

    def get_simulation(self, simulation_id: str) -> Simulation:
        """Return the simulation with the given id."""
        for simulation in self.list_simulations():
            if simulation.id == str(simulation_id):
                return simulation
        raise SimulationNotFound(f"Simulation {simulation_id} not found")


__all__ = ["JsonFileRepository"]
