"""Domain services for portfolio aggregates.

Aggregation degrades per record: a holding without an asset, a price or a
quantity is valued at zero (and reported through the optional logger)
instead of failing the whole portfolio.
"""

from collections.abc import Iterable, Iterator
from datetime import date, datetime, timezone
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_RECENT_TRANSACTIONS_LIMIT
from src.domain.models import (
    AllocationEntry,
    AssetType,
    Holding,
    HoldingMetrics,
    HoldingRow,
    Portfolio,
    PortfolioMetrics,
    RecentTransaction,
)
from src.domain.services.validation import is_priced_holding
from src.utils.decimal_utils import ZERO, coerce_decimal, percentage_of


def holding_current_value(
    holding: Holding,
    logger: Logger | None = None,
) -> Decimal:
    """Return quantity times the asset's current price, zero if unpriced."""
    if not is_priced_holding(holding, logger):
        return ZERO
    value = holding.quantity * holding.asset.current_price
    if value < 0:
        if logger is not None:
            logger.warning(
                f"Holding {holding.id or '<unknown>'} has a negative value "
                f"{value}; valued at zero"
            )
        return ZERO
    return value


def holding_initial_amount(holding: Holding) -> Decimal:
    """Return the capital committed to a holding, zero when missing."""
    return coerce_decimal(holding.initial_amount)


def holding_profit_loss(
    holding: Holding,
    logger: Logger | None = None,
) -> Decimal:
    """Return current value minus initial amount."""
    return (
        holding_current_value(holding, logger)
        - holding_initial_amount(holding)
    )


def holding_profit_loss_percentage(
    holding: Holding,
    logger: Logger | None = None,
) -> Decimal:
    """Return profit/loss as a percentage of the initial amount (0 if none)."""
    return percentage_of(
        holding_profit_loss(holding, logger),
        holding_initial_amount(holding),
    )


def holding_metrics(
    holding: Holding,
    logger: Logger | None = None,
) -> HoldingMetrics:
    """Compute value and performance figures for one holding."""
    current_value = holding_current_value(holding, logger)
    initial_amount = holding_initial_amount(holding)
    profit_loss = current_value - initial_amount
    return HoldingMetrics(
        current_value=current_value,
        initial_amount=initial_amount,
        profit_loss=profit_loss,
        profit_loss_percentage=percentage_of(profit_loss, initial_amount),
    )


def holding_rows(
    holdings: Iterable[Holding],
    logger: Logger | None = None,
) -> list[HoldingRow]:
    """Pair each holding with its metrics, preserving order and skipping gaps."""
    return [
        HoldingRow(holding=holding, metrics=holding_metrics(holding, logger))
        for holding in holdings
        if holding is not None
    ]


def _as_portfolio_list(portfolios) -> list[Portfolio]:
    if not isinstance(portfolios, (list, tuple)):
        return []
    return [portfolio for portfolio in portfolios if portfolio is not None]


def _holdings_of(portfolio: Portfolio | None) -> tuple[Holding, ...]:
    if portfolio is None:
        return ()
    return tuple(
        holding
        for holding in portfolio.holdings or ()
        if holding is not None
    )


def _iter_holdings(portfolios: list[Portfolio]) -> Iterator[Holding]:
    for portfolio in portfolios:
        yield from _holdings_of(portfolio)


def _metrics_for(
    holdings: Iterable[Holding],
    logger: Logger | None,
) -> PortfolioMetrics:
    value = ZERO
    invested = ZERO
    count = 0
    for holding in holdings:
        value += holding_current_value(holding, logger)
        invested += holding_initial_amount(holding)
        count += 1
    profit_loss = value - invested
    return PortfolioMetrics(
        total_value=value,
        total_invested=invested,
        profit_loss=profit_loss,
        performance_percentage=percentage_of(profit_loss, invested),
        holding_count=count,
    )


def total_value(
    portfolio: Portfolio | None,
    logger: Logger | None = None,
) -> Decimal:
    """Return the summed current value of a portfolio's holdings."""
    return sum(
        (
            holding_current_value(holding, logger)
            for holding in _holdings_of(portfolio)
        ),
        start=ZERO,
    )


def total_invested(portfolio: Portfolio | None) -> Decimal:
    """Return the summed initial amount of a portfolio's holdings."""
    return sum(
        (
            holding_initial_amount(holding)
            for holding in _holdings_of(portfolio)
        ),
        start=ZERO,
    )


def performance_percentage(
    portfolio: Portfolio | None,
    logger: Logger | None = None,
) -> Decimal:
    """Return (value - invested) / invested * 100, zero when nothing invested."""
    invested = total_invested(portfolio)
    return percentage_of(total_value(portfolio, logger) - invested, invested)


def portfolio_metrics(
    portfolio: Portfolio | None,
    logger: Logger | None = None,
) -> PortfolioMetrics:
    """Compute value and performance figures for one portfolio."""
    return _metrics_for(_holdings_of(portfolio), logger)


def combined_metrics(
    portfolios,
    logger: Logger | None = None,
) -> PortfolioMetrics:
    """Compute value and performance figures across several portfolios."""
    return _metrics_for(_iter_holdings(_as_portfolio_list(portfolios)), logger)


def _allocate(
    holdings: Iterable[Holding],
    logger: Logger | None,
) -> list[AllocationEntry]:
    totals: dict[AssetType, Decimal] = {}
    for holding in holdings:
        value = holding_current_value(holding, logger)
        if holding.asset is None:
            continue
        asset_type = holding.asset.type or AssetType.OTHER
        totals[asset_type] = totals.get(asset_type, ZERO) + value
    grand_total = sum(totals.values(), start=ZERO)
    if grand_total <= 0:
        return []
    entries = [
        AllocationEntry(
            asset_type=asset_type,
            value=value,
            percentage=percentage_of(value, grand_total),
        )
        for asset_type, value in totals.items()
    ]
    return sorted(entries, key=lambda entry: entry.value, reverse=True)


def asset_allocation(
    portfolio: Portfolio | None,
    logger: Logger | None = None,
) -> list[AllocationEntry]:
    """Return current value per asset class, largest first.

    Returns an empty list when the portfolio holds no value.
    """
    return _allocate(_holdings_of(portfolio), logger)


def combined_asset_allocation(
    portfolios,
    logger: Logger | None = None,
) -> list[AllocationEntry]:
    """Return current value per asset class across several portfolios."""
    return _allocate(_iter_holdings(_as_portfolio_list(portfolios)), logger)


def _sortable_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def recent_transactions(
    portfolios,
    limit: int = DEFAULT_RECENT_TRANSACTIONS_LIMIT,
    logger: Logger | None = None,
) -> list[RecentTransaction]:
    """Return the newest transactions across every holding of the portfolios.

    Transactions sharing a date keep their input order. Undated
    transactions cannot be placed in the feed and are skipped.

    Args:
        portfolios: Portfolios to scan; anything but a list or tuple is
            treated as empty.
        limit: Maximum number of transactions returned.
        logger: Optional logger used to report skipped transactions.

    Returns:
        list[RecentTransaction]: Annotated transactions, newest first.
    """
    if limit <= 0:
        return []
    feed: list[RecentTransaction] = []
    for portfolio in _as_portfolio_list(portfolios):
        for holding in _holdings_of(portfolio):
            asset = holding.asset
            for transaction in holding.transactions or ():
                if transaction.transaction_date is None:
                    if logger is not None:
                        logger.warning(
                            f"Skipping undated transaction "
                            f"{transaction.id or '<unknown>'} in portfolio "
                            f"{portfolio.name}"
                        )
                    continue
                feed.append(
                    RecentTransaction(
                        transaction=transaction,
                        portfolio_name=portfolio.name,
                        asset_name=asset.name if asset else None,
                        asset_symbol=asset.symbol if asset else None,
                        portfolio_id=portfolio.id,
                    )
                )
    feed.sort(
        key=lambda item: _sortable_datetime(
            item.transaction.transaction_date
        ),
        reverse=True,
    )
    return feed[:limit]


__all__ = [
    "holding_current_value",
    "holding_initial_amount",
    "holding_profit_loss",
    "holding_profit_loss_percentage",
    "holding_metrics",
    "holding_rows",
    "total_value",
    "total_invested",
    "performance_percentage",
    "portfolio_metrics",
    "combined_metrics",
    "asset_allocation",
    "combined_asset_allocation",
    "recent_transactions",
]
