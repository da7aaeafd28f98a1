import pytest

from src.domain.models import AssetType, TransactionType
from src.domain.services.normalization import (
    normalize_asset_type,
    normalize_transaction_type,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("STOCK", AssetType.STOCK),
        ("etf", AssetType.ETF),
        ("mutual fund", AssetType.MUTUAL_FUND),
        ("Real-Estate", AssetType.REAL_ESTATE),
        (" cryptocurrency ", AssetType.CRYPTOCURRENCY),
        ("warrant", AssetType.OTHER),
        ("", None),
        (None, None),
    ],
)
def test_normalize_asset_type(raw, expected) -> None:
    assert normalize_asset_type(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("buy", TransactionType.BUY),
        (" SELL ", TransactionType.SELL),
        ("dividend", None),
        (None, None),
    ],
)
def test_normalize_transaction_type(raw, expected) -> None:
    assert normalize_transaction_type(raw) == expected


def test_asset_type_label() -> None:
    assert AssetType.MUTUAL_FUND.label == "Mutual Fund"
    assert AssetType.ETF.label == "Etf"
