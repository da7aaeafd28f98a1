"""Tests for holding table sorting."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.models import Asset, AssetType, Holding
from src.domain.policies import HoldingSortKey, SortDirection
from src.domain.services.sorting import sort_holdings


def _holding(
    name: str,
    symbol: str = "SYM",
    quantity="1",
    price="10",
    asset_type=AssetType.STOCK,
    initial_amount=None,
    purchase_date=None,
    holding_id=None,
) -> Holding:
    return Holding(
        asset=Asset(
            type=asset_type,
            current_price=None if price is None else Decimal(price),
            name=name,
            symbol=symbol,
        ),
        quantity=None if quantity is None else Decimal(quantity),
        initial_amount=(
            None if initial_amount is None else Decimal(initial_amount)
        ),
        purchase_date=purchase_date,
        id=holding_id or name,
    )


def _ids(holdings) -> list:
    return [holding.id for holding in holdings]


def test_default_sort_is_by_asset_name_ignoring_case() -> None:
    """Names compare case-insensitively in ascending order by default."""
    holdings = [_holding("cherry"), _holding("Banana"), _holding("apple")]

    assert _ids(sort_holdings(holdings)) == ["apple", "Banana", "cherry"]


def test_descending_reverses_the_order() -> None:
    """Descending sorts the same column largest first."""
    holdings = [
        _holding("a", quantity="2"),
        _holding("b", quantity="10"),
        _holding("c", quantity="1"),
    ]

    ordered = sort_holdings(
        holdings,
        HoldingSortKey.QUANTITY,
        SortDirection.DESCENDING,
    )

    assert _ids(ordered) == ["b", "a", "c"]


@pytest.mark.parametrize(
    "direction",
    [SortDirection.ASCENDING, SortDirection.DESCENDING],
)
def test_equal_keys_keep_their_input_order(direction) -> None:
    """The sort is stable in both directions."""
    holdings = [
        _holding("first", quantity="5"),
        _holding("second", quantity="5"),
        _holding("third", quantity="5"),
    ]

    ordered = sort_holdings(holdings, HoldingSortKey.QUANTITY, direction)

    assert _ids(ordered) == ["first", "second", "third"]


def test_sorting_does_not_mutate_and_is_idempotent() -> None:
    """The input list is untouched and resorting changes nothing."""
    holdings = [_holding("b"), _holding("c"), _holding("a")]
    snapshot = list(holdings)

    once = sort_holdings(holdings, HoldingSortKey.ASSET_NAME)
    twice = sort_holdings(once, HoldingSortKey.ASSET_NAME)

    assert holdings == snapshot
    assert once == twice
    assert once is not holdings


def test_current_value_sorts_by_quantity_times_price() -> None:
    """Derived columns are computed per holding."""
    holdings = [
        _holding("small", quantity="1", price="50"),
        _holding("large", quantity="10", price="20"),
        _holding("middle", quantity="4", price="25"),
    ]

    ordered = sort_holdings(holdings, HoldingSortKey.CURRENT_VALUE)

    assert _ids(ordered) == ["small", "middle", "large"]


def test_profit_loss_uses_the_initial_amount() -> None:
    """Profit/loss is current value minus initial amount."""
    holdings = [
        _holding("gain", quantity="1", price="150", initial_amount="100"),
        _holding("loss", quantity="1", price="80", initial_amount="100"),
    ]

    ordered = sort_holdings(holdings, HoldingSortKey.PROFIT_LOSS)

    assert _ids(ordered) == ["loss", "gain"]


@pytest.mark.parametrize(
    "direction",
    [SortDirection.ASCENDING, SortDirection.DESCENDING],
)
def test_missing_values_sort_last_in_both_directions(direction) -> None:
    """Holdings without the column value trail the sorted ones."""
    holdings = [
        _holding("unpriced", price=None),
        _holding("cheap", price="1"),
        Holding(asset=None, quantity=Decimal("1"), id="orphan"),
        _holding("dear", price="99"),
    ]

    ordered = sort_holdings(holdings, HoldingSortKey.CURRENT_PRICE, direction)

    assert _ids(ordered)[2:] == ["unpriced", "orphan"]


def test_purchase_date_sorts_chronologically() -> None:
    """Dates and datetimes compare as calendar dates."""
    holdings = [
        _holding("late", purchase_date=date(2024, 6, 1)),
        _holding("early", purchase_date=datetime(2020, 1, 15, 9, 30)),
        _holding("middle", purchase_date=date(2022, 3, 3)),
    ]

    ordered = sort_holdings(holdings, HoldingSortKey.PURCHASE_DATE)

    assert _ids(ordered) == ["early", "middle", "late"]


def test_asset_type_sorts_by_class_name() -> None:
    """Asset classes order alphabetically by their code."""
    holdings = [
        _holding("s", asset_type=AssetType.STOCK),
        _holding("b", asset_type=AssetType.BOND),
        _holding("c", asset_type=AssetType.CASH),
    ]

    ordered = sort_holdings(holdings, HoldingSortKey.ASSET_TYPE)

    assert _ids(ordered) == ["b", "c", "s"]


def test_empty_input_returns_an_empty_list() -> None:
    """Sorting nothing yields a new empty list."""
    assert sort_holdings([]) == []
    assert sort_holdings(None) == []


def test_empty_entries_are_dropped_from_the_sorted_list() -> None:
    first = _holding("Beta")
    second = _holding("alpha")

    ordered = sort_holdings([None, first, None, second])

    assert ordered == [second, first]
