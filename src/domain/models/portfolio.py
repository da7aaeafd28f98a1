"""Domain models for portfolios, holdings and their derived metrics."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class AssetType(str, Enum):
    """Asset classes a holding can belong to."""

    STOCK = "STOCK"
    BOND = "BOND"
    ETF = "ETF"
    MUTUAL_FUND = "MUTUAL_FUND"
    CRYPTOCURRENCY = "CRYPTOCURRENCY"
    REAL_ESTATE = "REAL_ESTATE"
    COMMODITY = "COMMODITY"
    CASH = "CASH"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        """Return a display label, e.g. ``Mutual Fund`` for MUTUAL_FUND."""
        return " ".join(word.capitalize() for word in self.value.split("_"))


class TransactionType(str, Enum):
    """Direction of a holding transaction."""

    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Asset:
    """Priced instrument referenced by holdings."""

    type: AssetType
    current_price: Decimal | None
    name: str
    symbol: str
    id: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Buy or sell event recorded on a holding."""

    type: TransactionType
    quantity: Decimal
    price: Decimal
    transaction_date: datetime | None
    id: str | None = None

    @property
    def amount(self) -> Decimal:
        """Return quantity times price."""
        return self.quantity * self.price


@dataclass(frozen=True)
class Holding:
    """Position in one asset with its externally supplied cost basis.

    ``asset`` and ``quantity`` may be missing on malformed records; the
    aggregation services treat such holdings as worth zero.
    """

    asset: Asset | None
    quantity: Decimal | None
    purchase_price: Decimal | None = None
    initial_amount: Decimal | None = None
    purchase_date: date | None = None
    transactions: tuple[Transaction, ...] = ()
    id: str | None = None


@dataclass(frozen=True)
class Portfolio:
    """Named collection of holdings owned by the remote service."""

    name: str
    description: str | None = None
    holdings: tuple[Holding, ...] = ()
    created_at: datetime | None = None
    id: str | None = None


@dataclass(frozen=True)
class HoldingMetrics:
    """Value and performance of a single holding."""

    current_value: Decimal
    initial_amount: Decimal
    profit_loss: Decimal
    profit_loss_percentage: Decimal


@dataclass(frozen=True)
class PortfolioMetrics:
    """Aggregated value and performance of one or more portfolios."""

    total_value: Decimal
    total_invested: Decimal
    profit_loss: Decimal
    performance_percentage: Decimal
    holding_count: int

    @property
    def is_positive(self) -> bool:
        """Return True when the portfolio is at or above its cost."""
        return self.profit_loss >= 0


@dataclass(frozen=True)
class AllocationEntry:
    """Current value held in one asset class."""

    asset_type: AssetType
    value: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class RecentTransaction:
    """Transaction annotated with its owning portfolio and asset."""

    transaction: Transaction
    portfolio_name: str
    asset_name: str | None
    asset_symbol: str | None
    portfolio_id: str | None = None


@dataclass(frozen=True)
class HoldingRow:
    """Holding paired with its metrics for tabular display."""

    holding: Holding
    metrics: HoldingMetrics


__all__ = [
    "AssetType",
    "TransactionType",
    "Asset",
    "Transaction",
    "Holding",
    "Portfolio",
    "HoldingMetrics",
    "PortfolioMetrics",
    "AllocationEntry",
    "RecentTransaction",
    "HoldingRow",
]
