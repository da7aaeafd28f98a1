from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import InvalidPlanParameter
from src.domain.models import Asset, AssetType, Holding, InvestmentPlan
from src.domain.services.validation import is_priced_holding, validate_plan


def _plan(**overrides) -> InvestmentPlan:
    values = {
        "initial_investment": Decimal("0"),
        "monthly_contribution": Decimal("0"),
        "annual_return_rate": Decimal("0"),
        "investment_duration_years": 1,
    }
    values.update(overrides)
    return InvestmentPlan(**values)


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"annual_return_rate": Decimal("-100")},
        {"annual_return_rate": Decimal("1000")},
        {"investment_duration_years": 100},
        {"inflation_rate": Decimal("100"), "tax_rate": Decimal("100")},
        {"initial_investment": 5000, "monthly_contribution": 250},
    ],
)
def test_boundary_values_are_accepted(overrides) -> None:
    validate_plan(_plan(**overrides))


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"initial_investment": Decimal("NaN")}, "initial_investment"),
        ({"monthly_contribution": Decimal("Infinity")}, "monthly_contribution"),
        ({"annual_return_rate": "8"}, "annual_return_rate"),
        ({"investment_duration_years": 2.5}, "investment_duration_years"),
        ({"investment_duration_years": True}, "investment_duration_years"),
        ({"tax_rate": Decimal("-0.5")}, "tax_rate"),
    ],
)
def test_invalid_values_name_the_offending_field(overrides, field) -> None:
    with pytest.raises(InvalidPlanParameter) as exc_info:
        validate_plan(_plan(**overrides))

    assert exc_info.value.field == field
    assert field in str(exc_info.value)


def test_first_invalid_field_is_reported() -> None:
    plan = _plan(
        initial_investment=Decimal("-1"),
        tax_rate=Decimal("500"),
    )

    with pytest.raises(InvalidPlanParameter) as exc_info:
        validate_plan(plan)

    assert exc_info.value.field == "initial_investment"
    assert exc_info.value.value == Decimal("-1")


def test_is_priced_holding_reports_the_missing_piece() -> None:
    logger = MagicMock()
    asset = Asset(
        type=AssetType.BOND,
        current_price=None,
        name="Treasury",
        symbol="TSY",
    )

    assert not is_priced_holding(
        Holding(asset=asset, quantity=Decimal("1"), id="h1"),
        logger,
    )
    logger.warning.assert_called_once_with(
        "Holding h1 valued at zero: missing current price for TSY"
    )


def test_is_priced_holding_accepts_complete_records() -> None:
    asset = Asset(
        type=AssetType.BOND,
        current_price=Decimal("99.5"),
        name="Treasury",
        symbol="TSY",
    )

    assert is_priced_holding(Holding(asset=asset, quantity=Decimal("0")))


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"initial_investment": "abc"}, "initial_investment"),
        ({"annual_return_rate": "eight"}, "annual_return_rate"),
        ({"tax_rate": [5]}, "tax_rate"),
    ],
)
def test_from_values_reports_non_numeric_input_as_value_error(
    overrides, field
) -> None:
    values = {
        "initial_investment": 100,
        "monthly_contribution": 10,
        "annual_return_rate": 5,
        "investment_duration_years": 2,
    }
    values.update(overrides)

    with pytest.raises(ValueError, match=field):
        InvestmentPlan.from_values(**values)
