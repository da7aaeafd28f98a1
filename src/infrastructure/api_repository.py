"""Read-only client for the investment service's REST API."""

import requests
from requests.exceptions import RequestException

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
    simulation_from_payload,
    simulations_from_payload,
)


class _NotFound(Exception):
    pass


class ApiRepository(PortfolioRepositoryPort, SimulationRepositoryPort):
    """Fetch portfolios and simulations over HTTP.

    Only GET endpoints are used; token refresh is left to whoever issues
    the bearer token.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the REST service (e.g. https://host/api).
            token: Optional bearer token sent with every request.
            timeout: Request timeout in seconds.
            session: Optional preconfigured requests session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})
        self._logger = logger or get_app_logger()

    def _get(self, path: str):
        url = f"{self._base_url}{path}"
        try:
            response = self._session.get(url, timeout=self._timeout)
        except RequestException as exc:
            self._logger.error(f"GET {url} failed: {exc}")
            raise RepositoryError(f"GET {url} failed: {exc}") from exc
        if response.status_code == 404:
            raise _NotFound(url)
        try:
            response.raise_for_status()
            return response.json()
        except RequestException as exc:
            self._logger.error(f"GET {url} failed: {exc}")
            raise RepositoryError(f"GET {url} failed: {exc}") from exc
        except ValueError as exc:
            raise RepositoryError(f"GET {url} returned invalid JSON") from exc

    def _get_list(self, path: str) -> list:
        payload = self._get(path)
        if not isinstance(payload, list):
            raise RepositoryError(
                f"GET {path} returned {type(payload).__name__}, expected a list"
            )
        return payload

    def list_portfolios(self) -> list[Portfolio]:
        """Return every portfolio visible to the token."""
        try:
            return [
                portfolio_from_payload(item, self._logger)
                for item in self._get_list("/portfolios")
            ]
        except _NotFound as exc:
            raise RepositoryError(f"Portfolio endpoint missing: {exc}") from exc
        except ValueError as exc:
            raise RepositoryError(str(exc)) from exc

    def get_portfolio(self, portfolio_id: str) -> Portfolio:
        """Return one portfolio with its investments."""
        try:
            payload = self._get(f"/portfolios/{portfolio_id}/investments")
            return portfolio_from_payload(payload, self._logger)
        except _NotFound as exc:
            raise PortfolioNotFound(
                f"Portfolio {portfolio_id} not found"
            ) from exc
        except ValueError as exc:
            raise RepositoryError(str(exc)) from exc

    def list_simulations(self) -> list[Simulation]:
        """Return every decodable saved simulation."""
        try:
            items = self._get_list("/simulations")
        except _NotFound as exc:
            raise RepositoryError(
                f"Simulation endpoint missing: {exc}"
            ) from exc
        return simulations_from_payload(items, self._logger)

    def get_simulation(self, simulation_id: str) -> Simulation:
        """Return one saved simulation."""
        try:
            payload = self._get(f"/simulations/{simulation_id}")
            return simulation_from_payload(payload)
        except _NotFound as exc:
            raise SimulationNotFound(
                f"Simulation {simulation_id} not found"
            ) from exc
        except ValueError as exc:
            raise RepositoryError(str(exc)) from exc


__all__ = ["ApiRepository"]
