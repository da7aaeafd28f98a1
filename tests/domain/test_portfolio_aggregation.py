"""Tests for portfolio value, performance and allocation."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    Asset,
    AssetType,
    Holding,
    Portfolio,
)
from src.domain.services.portfolio import (
    asset_allocation,
    combined_asset_allocation,
    combined_metrics,
    holding_current_value,
    holding_metrics,
    holding_profit_loss_percentage,
    holding_rows,
    performance_percentage,
    portfolio_metrics,
    total_invested,
    total_value,
)


def _holding(
    asset_type=AssetType.STOCK,
    price="100",
    quantity="1",
    initial_amount=None,
    symbol="AAA",
    holding_id=None,
) -> Holding:
    return Holding(
        asset=Asset(
            type=asset_type,
            current_price=None if price is None else Decimal(price),
            name=f"{symbol} Corp",
            symbol=symbol,
        ),
        quantity=None if quantity is None else Decimal(quantity),
        initial_amount=(
            None if initial_amount is None else Decimal(initial_amount)
        ),
        id=holding_id,
    )


def _portfolio(*holdings: Holding, name="Main") -> Portfolio:
    return Portfolio(name=name, holdings=holdings, id=name.lower())


def test_empty_portfolio_has_zero_metrics_and_no_allocation() -> None:
    """An empty portfolio aggregates to zeros without dividing by zero."""
    portfolio = _portfolio()

    assert total_value(portfolio) == 0
    assert total_invested(portfolio) == 0
    assert performance_percentage(portfolio) == 0
    assert asset_allocation(portfolio) == []


def test_missing_portfolio_is_treated_as_empty() -> None:
    """A None portfolio yields the same zeros as an empty one."""
    metrics = portfolio_metrics(None)

    assert metrics.total_value == 0
    assert metrics.holding_count == 0
    assert asset_allocation(None) == []


def test_allocation_splits_value_by_asset_class() -> None:
    """Allocation percentages are shares of the total current value."""
    portfolio = _portfolio(
        _holding(AssetType.BOND, price="100", quantity="4", symbol="BND"),
        _holding(AssetType.STOCK, price="100", quantity="6", symbol="STK"),
    )

    allocation = asset_allocation(portfolio)

    assert [entry.asset_type for entry in allocation] == [
        AssetType.STOCK,
        AssetType.BOND,
    ]
    assert [entry.value for entry in allocation] == [
        Decimal("600"),
        Decimal("400"),
    ]
    assert [entry.percentage for entry in allocation] == [
        Decimal("60"),
        Decimal("40"),
    ]


def test_allocation_groups_holdings_of_the_same_class() -> None:
    """Two holdings of one class produce a single entry."""
    portfolio = _portfolio(
        _holding(AssetType.ETF, price="10", quantity="3", symbol="A"),
        _holding(AssetType.ETF, price="5", quantity="2", symbol="B"),
    )

    (entry,) = asset_allocation(portfolio)

    assert entry.asset_type == AssetType.ETF
    assert entry.value == Decimal("40")
    assert entry.percentage == Decimal("100")


def test_allocation_is_empty_when_nothing_is_priced() -> None:
    """Zero total value yields an empty allocation instead of NaN shares."""
    portfolio = _portfolio(_holding(price="0"), _holding(price=None))

    assert asset_allocation(portfolio) == []


def test_performance_compares_value_to_invested_amount() -> None:
    """Performance is (value - invested) / invested in percent."""
    portfolio = _portfolio(
        _holding(price="100", quantity="6", initial_amount="500"),
        _holding(price="100", quantity="4", initial_amount="300"),
    )

    metrics = portfolio_metrics(portfolio)

    assert metrics.total_value == Decimal("1000")
    assert metrics.total_invested == Decimal("800")
    assert metrics.profit_loss == Decimal("200")
    assert metrics.performance_percentage == Decimal("25")
    assert metrics.holding_count == 2
    assert metrics.is_positive


def test_losses_report_negative_performance() -> None:
    """A portfolio below its cost has a negative profit/loss."""
    portfolio = _portfolio(
        _holding(price="50", quantity="2", initial_amount="200"),
    )

    assert performance_percentage(portfolio) == Decimal("-50")
    assert not portfolio_metrics(portfolio).is_positive


def test_malformed_holdings_are_valued_at_zero_with_a_warning() -> None:
    """Holdings missing an asset, price or quantity are logged and skipped."""
    logger = MagicMock()
    portfolio = _portfolio(
        Holding(asset=None, quantity=Decimal("3"), id="orphan"),
        _holding(price=None, symbol="NOPRICE"),
        _holding(quantity=None, symbol="NOQTY"),
        _holding(price="10", quantity="2", symbol="OK"),
    )

    assert total_value(portfolio, logger) == Decimal("20")
    assert logger.warning.call_count == 3
    first_message = logger.warning.call_args_list[0].args[0]
    assert "orphan" in first_message


def test_negative_values_are_clamped_to_zero() -> None:
    """A negative price or quantity never reduces the total."""
    logger = MagicMock()
    holding = _holding(price="-10", quantity="2")

    assert holding_current_value(holding, logger) == 0
    logger.warning.assert_called_once()


def test_holding_metrics_without_initial_amount() -> None:
    """A missing initial amount counts as zero and yields 0% performance."""
    holding = _holding(price="10", quantity="3")

    metrics = holding_metrics(holding)

    assert metrics.current_value == Decimal("30")
    assert metrics.initial_amount == 0
    assert metrics.profit_loss == Decimal("30")
    assert metrics.profit_loss_percentage == 0
    assert holding_profit_loss_percentage(holding) == 0


def test_holding_rows_preserve_input_order() -> None:
    """Rows pair each holding with its metrics in the original order."""
    holdings = [
        _holding(symbol="B", price="2"),
        _holding(symbol="A", price="1"),
    ]

    rows = holding_rows(holdings)

    assert [row.holding for row in rows] == holdings
    assert [row.metrics.current_value for row in rows] == [
        Decimal("2"),
        Decimal("1"),
    ]


def test_combined_metrics_span_every_portfolio() -> None:
    """Combined totals add up holdings across portfolios."""
    first = _portfolio(
        _holding(price="100", quantity="2", initial_amount="150"),
        name="First",
    )
    second = _portfolio(
        _holding(price="50", quantity="2", initial_amount="150"),
        name="Second",
    )

    metrics = combined_metrics([first, second])

    assert metrics.total_value == Decimal("300")
    assert metrics.total_invested == Decimal("300")
    assert metrics.performance_percentage == 0
    assert metrics.holding_count == 2


def test_combined_metrics_ignore_non_list_input() -> None:
    """A missing or malformed portfolio list aggregates to zero."""
    assert combined_metrics(None).total_value == 0
    assert combined_metrics("not a list").holding_count == 0
    assert combined_asset_allocation({"a": 1}) == []


def test_combined_allocation_merges_classes_across_portfolios() -> None:
    """Asset classes are summed across portfolios."""
    first = _portfolio(
        _holding(AssetType.CASH, price="1", quantity="250"),
        name="First",
    )
    second = _portfolio(
        _holding(AssetType.CASH, price="1", quantity="250"),
        _holding(AssetType.CRYPTOCURRENCY, price="500", quantity="1"),
        name="Second",
    )

    allocation = combined_asset_allocation([first, None, second])

    assert {entry.asset_type: entry.percentage for entry in allocation} == {
        AssetType.CASH: Decimal("50"),
        AssetType.CRYPTOCURRENCY: Decimal("50"),
    }


def test_empty_holding_entries_are_valued_at_zero() -> None:
    """A None entry among the holdings is ignored instead of crashing."""
    portfolio = Portfolio(
        name="Gaps",
        holdings=(None, _holding(price="50", quantity="2", initial_amount="80")),
    )

    assert total_value(Portfolio(name="p", holdings=(None,))) == 0
    assert total_value(portfolio) == Decimal("100")
    assert total_invested(portfolio) == Decimal("80")
    assert [entry.asset_type for entry in asset_allocation(portfolio)] == [
        AssetType.STOCK
    ]
    assert len(holding_rows(portfolio.holdings)) == 1


def test_empty_holding_is_reported_when_valued_directly() -> None:
    logger = MagicMock()

    assert holding_current_value(None, logger) == 0
    logger.warning.assert_called_once()
    assert "missing holding" in logger.warning.call_args.args[0]
