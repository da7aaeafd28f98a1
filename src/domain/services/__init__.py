"""Domain services package."""

from .normalization import normalize_asset_type, normalize_transaction_type
from .portfolio import (
    asset_allocation,
    combined_asset_allocation,
    combined_metrics,
    holding_current_value,
    holding_metrics,
    holding_profit_loss,
    holding_profit_loss_percentage,
    holding_rows,
    performance_percentage,
    portfolio_metrics,
    recent_transactions,
    total_invested,
    total_value,
)
from .projection import (
    estimate_preview,
    project,
    project_yearly_results,
    summarize_projection,
    total_contributions,
)
from .sorting import sort_holdings
from .validation import is_priced_holding, validate_plan

__all__ = [
    "normalize_asset_type",
    "normalize_transaction_type",
    "asset_allocation",
    "combined_asset_allocation",
    "combined_metrics",
    "holding_current_value",
    "holding_metrics",
    "holding_profit_loss",
    "holding_profit_loss_percentage",
    "holding_rows",
    "performance_percentage",
    "portfolio_metrics",
    "recent_transactions",
    "total_invested",
    "total_value",
    "estimate_preview",
    "project",
    "project_yearly_results",
    "summarize_projection",
    "total_contributions",
    "sort_holdings",
    "is_priced_holding",
    "validate_plan",
]
