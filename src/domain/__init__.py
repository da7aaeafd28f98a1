"""Domain package for projection and portfolio analytics rules."""

from .constants import DEFAULT_RECENT_TRANSACTIONS_LIMIT, MONTHS_PER_YEAR
from .errors import InvalidPlanParameter
from .models import (
    AllocationEntry,
    Asset,
    AssetType,
    FinalAmountBasis,
    Holding,
    HoldingMetrics,
    HoldingRow,
    InvestmentPlan,
    Portfolio,
    PortfolioMetrics,
    PreviewEstimate,
    Projection,
    ProjectionSummary,
    RecentTransaction,
    Simulation,
    Transaction,
    TransactionType,
    YearlyResult,
)
from .policies import (
    HoldingSortKey,
    SortDirection,
    SortState,
    matches_query,
    next_sort_state,
)
from .services import (
    asset_allocation,
    combined_asset_allocation,
    estimate_preview,
    performance_percentage,
    project,
    recent_transactions,
    sort_holdings,
    total_invested,
    total_value,
    validate_plan,
)

__all__ = [
    "DEFAULT_RECENT_TRANSACTIONS_LIMIT",
    "MONTHS_PER_YEAR",
    "InvalidPlanParameter",
    "AllocationEntry",
    "Asset",
    "AssetType",
    "FinalAmountBasis",
    "Holding",
    "HoldingMetrics",
    "HoldingRow",
    "InvestmentPlan",
    "Portfolio",
    "PortfolioMetrics",
    "PreviewEstimate",
    "Projection",
    "ProjectionSummary",
    "RecentTransaction",
    "Simulation",
    "Transaction",
    "TransactionType",
    "YearlyResult",
    "HoldingSortKey",
    "SortDirection",
    "SortState",
    "matches_query",
    "next_sort_state",
    "asset_allocation",
    "combined_asset_allocation",
    "estimate_preview",
    "performance_percentage",
    "project",
    "recent_transactions",
    "sort_holdings",
    "total_invested",
    "total_value",
    "validate_plan",
]
