"""Holding table sorting."""

from collections.abc import Callable, Sequence
from datetime import date, datetime
import locale

from src.domain.models import Holding
from src.domain.policies import HoldingSortKey, SortDirection
from src.domain.services.portfolio import (
    holding_current_value,
    holding_profit_loss,
)


def _text_key(value: str) -> tuple[str, str]:
    folded = value.casefold()
    return (locale.strxfrm(folded), folded)


def _asset_attr(name: str) -> Callable[[Holding], object]:
    def accessor(holding: Holding):
        if holding.asset is None:
            return None
        return getattr(holding.asset, name)

    return accessor


def _asset_type(holding: Holding) -> str | None:
    if holding.asset is None or holding.asset.type is None:
        return None
    return holding.asset.type.value


def _purchase_date(holding: Holding) -> date | None:
    value = holding.purchase_date
    if isinstance(value, datetime):
        return value.date()
    return value


def _priced_value(
    compute: Callable[[Holding], object],
) -> Callable[[Holding], object]:
    def accessor(holding: Holding):
        if holding.asset is None or holding.asset.current_price is None:
            return None
        return compute(holding)

    return accessor


_ACCESSORS: dict[HoldingSortKey, Callable[[Holding], object]] = {
    HoldingSortKey.ASSET_NAME: _asset_attr("name"),
    HoldingSortKey.ASSET_SYMBOL: _asset_attr("symbol"),
    HoldingSortKey.ASSET_TYPE: _asset_type,
    HoldingSortKey.QUANTITY: lambda holding: holding.quantity,
    HoldingSortKey.PURCHASE_PRICE: lambda holding: holding.purchase_price,
    HoldingSortKey.CURRENT_PRICE: _asset_attr("current_price"),
    HoldingSortKey.INITIAL_AMOUNT: lambda holding: holding.initial_amount,
    HoldingSortKey.CURRENT_VALUE: _priced_value(holding_current_value),
    HoldingSortKey.PROFIT_LOSS: _priced_value(holding_profit_loss),
    HoldingSortKey.PURCHASE_DATE: _purchase_date,
}


def sort_holdings(
    holdings: Sequence[Holding],
    key: HoldingSortKey = HoldingSortKey.ASSET_NAME,
    direction: SortDirection = SortDirection.ASCENDING,
) -> list[Holding]:
    """Return holdings ordered by one column, without mutating the input.

    Text columns compare case-insensitively with the active locale's
    collation; numeric and date columns compare by value. The sort is
    stable, and holdings missing the column value are placed last in
    either direction. Empty entries are dropped.

    Args:
        holdings: Holdings to order.
        key: Column to sort by.
        direction: Ascending or descending order.

    Returns:
        list[Holding]: New list in the requested order.
    """
    accessor = _ACCESSORS[key]
    present: list[tuple[object, Holding]] = []
    missing: list[Holding] = []
    for holding in holdings or ():
        if holding is None:
            continue
        value = accessor(holding)
        if value is None:
            missing.append(holding)
            continue
        if isinstance(value, str):
            value = _text_key(value)
        present.append((value, holding))
    present.sort(
        key=lambda item: item[0],
        reverse=direction == SortDirection.DESCENDING,
    )
    return [holding for _, holding in present] + missing


__all__ = ["sort_holdings"]
