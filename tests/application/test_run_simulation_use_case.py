"""Tests for the RunSimulationUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.run_simulation import RunSimulationUseCase
from src.domain.errors import InvalidPlanParameter
from src.domain.models import FinalAmountBasis, InvestmentPlan


def _plan(**overrides) -> InvestmentPlan:
    values = {
        "initial_investment": 10000,
        "monthly_contribution": 500,
        "annual_return_rate": 8,
        "investment_duration_years": 30,
        "inflation_rate": 2,
    }
    values.update(overrides)
    return InvestmentPlan.from_values(**values)


def test_execute_returns_projection_and_logs_headline() -> None:
    """Use case should project the plan and log the summary."""
    logger = MagicMock()

    projection = RunSimulationUseCase(logger=logger).execute(_plan())

    assert len(projection.yearly_results) == 30
    assert projection.summary.basis == FinalAmountBasis.INFLATION_ADJUSTED
    logger.info.assert_called_once()
    assert "years=30" in logger.info.call_args.args[0]


def test_execute_honours_the_configured_basis() -> None:
    """A nominal basis reports the undiscounted balance."""
    use_case = RunSimulationUseCase(
        logger=MagicMock(),
        basis=FinalAmountBasis.NOMINAL,
    )

    projection = use_case.execute(_plan())

    assert projection.summary.final_amount == (
        projection.yearly_results[-1].balance_without_inflation
    )


def test_execute_logs_and_reraises_invalid_plans() -> None:
    """Rejected plans are logged as warnings and propagated."""
    logger = MagicMock()

    with pytest.raises(InvalidPlanParameter):
        RunSimulationUseCase(logger=logger).execute(
            _plan(investment_duration_years=0)
        )

    logger.warning.assert_called_once()
    logger.info.assert_not_called()


def test_preview_accepts_incomplete_plans() -> None:
    """Preview never validates the plan."""
    preview = RunSimulationUseCase(logger=MagicMock()).preview(
        _plan(investment_duration_years=0)
    )

    assert preview.final_amount == Decimal("10000.00")
