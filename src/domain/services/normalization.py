"""Domain normalization helpers."""

from src.domain.models import AssetType, TransactionType


def normalize_asset_type(raw_type: str | None) -> AssetType | None:
    """Normalize asset type values.

    Args:
        raw_type: Raw asset type from a payload (``mutual fund``, ``ETF``...).

    Returns:
        AssetType | None: Matching asset class, OTHER for unknown names,
        None when the value is missing.
    """
    if not raw_type:
        return None
    cleaned = str(raw_type).strip().upper().replace(" ", "_").replace("-", "_")
    if not cleaned:
        return None
    try:
        return AssetType(cleaned)
    except ValueError:
        return AssetType.OTHER


def normalize_transaction_type(raw_type: str | None) -> TransactionType | None:
    """Normalize transaction type values.

    Args:
        raw_type: Raw transaction type from a payload.

    Returns:
        TransactionType | None: BUY or SELL, None when unrecognized.
    """
    if not raw_type:
        return None
    cleaned = str(raw_type).strip().upper()
    try:
        return TransactionType(cleaned)
    except ValueError:
        return None


__all__ = ["normalize_asset_type", "normalize_transaction_type"]
