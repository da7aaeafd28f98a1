"""Tests for the REST API repository."""

from unittest.mock import MagicMock

import pytest
import requests

from src.application.ports.errors import RepositoryError
from src.application.ports.portfolio_repository import PortfolioNotFound
from src.application.ports.simulation_repository import SimulationNotFound
from src.infrastructure.api_repository import ApiRepository


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        if self._json_error:
            raise ValueError("no JSON")
        return self._payload


def _session(*responses) -> MagicMock:
    session = MagicMock()
    session.headers = {}
    session.get.side_effect = list(responses)
    return session


def _repository(session, token=None) -> ApiRepository:
    return ApiRepository(
        "https://invest.example/api/",
        token=token,
        timeout=3.0,
        session=session,
        logger=MagicMock(),
    )


def test_session_headers_carry_the_bearer_token() -> None:
    """The token is sent as a bearer Authorization header."""
    session = _session()

    _repository(session, token="abc")

    assert session.headers["Authorization"] == "Bearer abc"
    assert session.headers["Accept"] == "application/json"


def test_list_portfolios_calls_the_portfolios_endpoint() -> None:
    """Portfolios come from GET /portfolios with the configured timeout."""
    session = _session(
        _FakeResponse(payload=[{"id": 1, "name": "Growth", "investments": []}])
    )

    portfolios = _repository(session).list_portfolios()

    assert [portfolio.name for portfolio in portfolios] == ["Growth"]
    session.get.assert_called_once_with(
        "https://invest.example/api/portfolios",
        timeout=3.0,
    )


def test_get_portfolio_reads_the_investments_endpoint() -> None:
    """A single portfolio is read with its investments."""
    session = _session(
        _FakeResponse(
            payload={
                "id": 4,
                "name": "Income",
                "investments": [{"id": 1, "quantity": 2}],
            }
        )
    )

    portfolio = _repository(session).get_portfolio("4")

    assert portfolio.id == "4"
    assert len(portfolio.holdings) == 1
    assert session.get.call_args.args[0].endswith("/portfolios/4/investments")


def test_missing_records_raise_not_found() -> None:
    """404 responses map to the port's not-found errors."""
    session = _session(_FakeResponse(404), _FakeResponse(404))
    repository = _repository(session)

    with pytest.raises(PortfolioNotFound):
        repository.get_portfolio("9")
    with pytest.raises(SimulationNotFound):
        repository.get_simulation("9")


def test_transport_failures_raise_repository_error() -> None:
    """Connection errors and HTTP errors become RepositoryError."""
    session = _session(
        requests.ConnectionError("refused"),
        _FakeResponse(500),
    )
    repository = _repository(session)

    with pytest.raises(RepositoryError):
        repository.list_portfolios()
    with pytest.raises(RepositoryError):
        repository.list_simulations()


def test_invalid_json_raises_repository_error() -> None:
    session = _session(_FakeResponse(payload=None, json_error=True))

    with pytest.raises(RepositoryError, match="invalid JSON"):
        _repository(session).get_simulation("1")


def test_list_endpoint_must_return_a_list() -> None:
    session = _session(_FakeResponse(payload={"portfolios": []}))

    with pytest.raises(RepositoryError, match="expected a list"):
        _repository(session).list_portfolios()


def test_list_simulations_skips_malformed_items() -> None:
    """Broken simulations are dropped, valid ones decoded."""
    session = _session(
        _FakeResponse(
            payload=[
                {
                    "id": "a",
                    "name": "Fine",
                    "initialInvestment": 1,
                    "monthlyContribution": 1,
                    "annualReturnRate": 1,
                    "investmentDurationYears": 1,
                },
                {"id": "b"},
            ]
        )
    )

    simulations = _repository(session).list_simulations()

    assert [simulation.id for simulation in simulations] == ["a"]
