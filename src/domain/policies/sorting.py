"""Sorting policy for holding tables."""

from dataclasses import dataclass
from enum import Enum


class HoldingSortKey(str, Enum):
    """Columns a holdings table can be sorted by."""

    ASSET_NAME = "asset_name"
    ASSET_SYMBOL = "asset_symbol"
    ASSET_TYPE = "asset_type"
    QUANTITY = "quantity"
    PURCHASE_PRICE = "purchase_price"
    CURRENT_PRICE = "current_price"
    INITIAL_AMOUNT = "initial_amount"
    CURRENT_VALUE = "current_value"
    PROFIT_LOSS = "profit_loss"
    PURCHASE_DATE = "purchase_date"


class SortDirection(str, Enum):
    """Sort order of a holdings table."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction."""

    key: HoldingSortKey = HoldingSortKey.ASSET_NAME
    direction: SortDirection = SortDirection.ASCENDING


def next_sort_state(
    current: SortState,
    requested_key: HoldingSortKey,
) -> SortState:
    """Return the sort state after a column is selected.

    Selecting the active ascending column flips it to descending; any
    other selection sorts the requested column ascending.

    Args:
        current: Sort state before the selection.
        requested_key: Column the user selected.

    Returns:
        SortState: New sort state.
    """
    if (
        current.key == requested_key
        and current.direction == SortDirection.ASCENDING
    ):
        return SortState(requested_key, SortDirection.DESCENDING)
    return SortState(requested_key, SortDirection.ASCENDING)


__all__ = [
    "HoldingSortKey",
    "SortDirection",
    "SortState",
    "next_sort_state",
]
