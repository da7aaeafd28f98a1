"""Domain models package."""

from .plan import (
    FinalAmountBasis,
    InvestmentPlan,
    PreviewEstimate,
    Projection,
    ProjectionSummary,
    Simulation,
    YearlyResult,
)
from .portfolio import (
    AllocationEntry,
    Asset,
    AssetType,
    Holding,
    HoldingMetrics,
    HoldingRow,
    Portfolio,
    PortfolioMetrics,
    RecentTransaction,
    Transaction,
    TransactionType,
)

__all__ = [
    "FinalAmountBasis",
    "InvestmentPlan",
    "PreviewEstimate",
    "Projection",
    "ProjectionSummary",
    "Simulation",
    "YearlyResult",
    "AllocationEntry",
    "Asset",
    "AssetType",
    "Holding",
    "HoldingMetrics",
    "HoldingRow",
    "Portfolio",
    "PortfolioMetrics",
    "RecentTransaction",
    "Transaction",
    "TransactionType",
]
