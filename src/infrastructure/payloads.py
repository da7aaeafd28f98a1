"""Decoding of the investment service's JSON payloads into domain models.

The service speaks camelCase JSON (``investments``, ``asset.currentPrice``,
``initialAmount``, ``transactionDate``...). Holding and transaction fields
that are missing or malformed decode to ``None`` so the aggregation services
can value the record at zero; they are never raised.
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone

from src.domain.models import (
    Asset,
    AssetType,
    Holding,
    InvestmentPlan,
    Portfolio,
    Simulation,
    Transaction,
)
from src.domain.services.normalization import (
    normalize_asset_type,
    normalize_transaction_type,
)
from src.utils.decimal_utils import coerce_optional_decimal


def _optional_id(value) -> str | None:
    if value is None:
        return None
    return str(value)


def parse_datetime(raw_value) -> datetime | None:
    """Parse ISO-8601 timestamps, treating naive values as UTC.

    Args:
        raw_value: ISO string, date or datetime.

    Returns:
        datetime | None: Timezone-aware datetime, None when unparseable.
    """
    if raw_value is None:
        return None
    if isinstance(raw_value, datetime):
        parsed = raw_value
    elif isinstance(raw_value, date):
        parsed = datetime(raw_value.year, raw_value.month, raw_value.day)
    else:
        text = str(raw_value).strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(raw_value) -> date | None:
    """Parse an ISO date or timestamp into a calendar date."""
    if isinstance(raw_value, date) and not isinstance(raw_value, datetime):
        return raw_value
    parsed = parse_datetime(raw_value)
    return parsed.date() if parsed else None


def asset_from_payload(payload, logger=None) -> Asset | None:
    """Decode an asset, returning None when the payload is not an object."""
    if not isinstance(payload, Mapping):
        return None
    asset_type = normalize_asset_type(payload.get("type"))
    if asset_type is None:
        asset_type = AssetType.OTHER
    if asset_type == AssetType.OTHER and logger is not None:
        raw_type = payload.get("type")
        if raw_type and str(raw_type).strip().upper() != "OTHER":
            logger.warning(f"Unknown asset type '{raw_type}' mapped to OTHER")
    return Asset(
        type=asset_type,
        current_price=coerce_optional_decimal(payload.get("currentPrice")),
        name=str(payload.get("name") or ""),
        symbol=str(payload.get("symbol") or ""),
        id=_optional_id(payload.get("id")),
    )


def transaction_from_payload(payload, logger=None) -> Transaction | None:
    """Decode a transaction, returning None when it cannot be used."""
    if not isinstance(payload, Mapping):
        return None
    transaction_type = normalize_transaction_type(payload.get("type"))
    quantity = coerce_optional_decimal(payload.get("quantity"))
    price = coerce_optional_decimal(payload.get("price"))
    if transaction_type is None or quantity is None or price is None:
        if logger is not None:
            logger.warning(
                f"Skipping malformed transaction {payload.get('id')}: "
                f"type={payload.get('type')!r}, "
                f"quantity={payload.get('quantity')!r}, "
                f"price={payload.get('price')!r}"
            )
        return None
    return Transaction(
        type=transaction_type,
        quantity=quantity,
        price=price,
        transaction_date=parse_datetime(payload.get("transactionDate")),
        id=_optional_id(payload.get("id")),
    )


def holding_from_payload(payload, logger=None) -> Holding | None:
    """Decode a holding (an ``investment`` in the service's vocabulary)."""
    if not isinstance(payload, Mapping):
        return None
    transactions = tuple(
        transaction
        for transaction in (
            transaction_from_payload(item, logger)
            for item in payload.get("transactions") or ()
        )
        if transaction is not None
    )
    return Holding(
        asset=asset_from_payload(payload.get("asset"), logger),
        quantity=coerce_optional_decimal(payload.get("quantity")),
        purchase_price=coerce_optional_decimal(payload.get("purchasePrice")),
        initial_amount=coerce_optional_decimal(payload.get("initialAmount")),
        purchase_date=parse_date(payload.get("purchaseDate")),
        transactions=transactions,
        id=_optional_id(payload.get("id")),
    )


def portfolio_from_payload(payload, logger=None) -> Portfolio:
    """Decode a portfolio with its holdings.

    Raises:
        ValueError: When the payload is not a JSON object.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"Portfolio payload must be an object: {payload!r}")
    raw_holdings = payload.get("investments")
    if raw_holdings is None:
        raw_holdings = payload.get("holdings")
    holdings = tuple(
        holding
        for holding in (
            holding_from_payload(item, logger)
            for item in raw_holdings or ()
        )
        if holding is not None
    )
    return Portfolio(
        name=str(payload.get("name") or ""),
        description=payload.get("description"),
        holdings=holdings,
        created_at=parse_datetime(payload.get("createdAt")),
        id=_optional_id(payload.get("id")),
    )


def simulation_from_payload(payload) -> Simulation:
    """Decode a saved simulation.

    Raises:
        ValueError: When the payload lacks a usable plan.
    """
    if not isinstance(payload, Mapping):
        raise ValueError(f"Simulation payload must be an object: {payload!r}")
    try:
        plan = InvestmentPlan.from_values(
            initial_investment=payload["initialInvestment"],
            monthly_contribution=payload["monthlyContribution"],
            annual_return_rate=payload["annualReturnRate"],
            investment_duration_years=payload["investmentDurationYears"],
            inflation_rate=payload.get("inflationRate") or 0,
            tax_rate=payload.get("taxRate") or 0,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(
            f"Simulation {payload.get('id')} has an invalid plan: {exc}"
        ) from exc
    return Simulation(
        name=str(payload.get("name") or ""),
        plan=plan,
        description=payload.get("description"),
        created_at=parse_datetime(payload.get("createdAt")),
        id=_optional_id(payload.get("id")),
    )


def simulations_from_payload(items, logger=None) -> list[Simulation]:
    """Decode a list of simulations, skipping the malformed ones."""
    simulations: list[Simulation] = []
    for item in items or ():
        try:
            simulations.append(simulation_from_payload(item))
        except ValueError as exc:
            if logger is not None:
                logger.warning(f"Skipping simulation: {exc}")
    return simulations


__all__ = [
    "parse_datetime",
    "parse_date",
    "asset_from_payload",
    "transaction_from_payload",
    "holding_from_payload",
    "portfolio_from_payload",
    "simulation_from_payload",
    "simulations_from_payload",
]
