"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import DEFAULT_RECENT_TRANSACTIONS_LIMIT
from src.domain.models import FinalAmountBasis
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_API_TIMEOUT = 10.0


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for data access and projection display.

    Attributes:
        backend: Repository backend identifier (file or api).
        portfolio_file: Optional path to a JSON export of the remote data.
        api_url: Base URL of the investment REST service.
        api_token: Optional bearer token for the REST service.
        api_timeout: HTTP timeout in seconds.
        headline_basis: Balance used as a projection's final amount.
        recent_transactions_limit: Length of the dashboard activity feed.
    """

    backend: str = "file"
    portfolio_file: Optional[Path] = None
    api_url: Optional[str] = None
    api_token: Optional[str] = None
    api_timeout: float = DEFAULT_API_TIMEOUT
    headline_basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED
    recent_transactions_limit: int = DEFAULT_RECENT_TRANSACTIONS_LIMIT

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        backend = os.getenv("PORTFOLIO_BACKEND", "file").strip().lower()
        raw_file = os.getenv("PORTFOLIO_FILE")
        if raw_file:
            portfolio_file = cls._normalize_path(raw_file, logger=logger)
        else:
            portfolio_file = cls._default_portfolio_file(logger=logger)
        return cls(
            backend=backend,
            portfolio_file=portfolio_file,
            api_url=os.getenv("INVESTMENT_API_URL") or None,
            api_token=os.getenv("INVESTMENT_API_TOKEN") or None,
            api_timeout=cls._parse_timeout(
                os.getenv("INVESTMENT_API_TIMEOUT"),
                logger=logger,
            ),
            headline_basis=cls._parse_basis(
                os.getenv("PROJECTION_HEADLINE_BASIS"),
                logger=logger,
            ),
            recent_transactions_limit=cls._parse_limit(
                os.getenv("RECENT_TRANSACTIONS_LIMIT"),
                logger=logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the portfolio file path or file:// URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Portfolio file does not exist at {path}")
        return path

    @staticmethod
    def _default_portfolio_file(logger) -> Path | None:
        """Return a default JSON export when exactly one is in data/.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set PORTFOLIO_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        if not raw_value:
            return DEFAULT_API_TIMEOUT
        try:
            timeout = float(raw_value)
        except ValueError:
            timeout = -1.0
        if timeout <= 0:
            logger.warning(
                f"Invalid INVESTMENT_API_TIMEOUT '{raw_value}'; "
                f"using {DEFAULT_API_TIMEOUT}"
            )
            return DEFAULT_API_TIMEOUT
        return timeout

    @staticmethod
    def _parse_basis(raw_value: str | None, logger) -> FinalAmountBasis:
        if not raw_value:
            return FinalAmountBasis.INFLATION_ADJUSTED
        try:
            return FinalAmountBasis(raw_value.strip().lower())
        except ValueError:
            logger.warning(
                f"Unknown PROJECTION_HEADLINE_BASIS '{raw_value}'. "
                "Expected inflation_adjusted or nominal."
            )
            return FinalAmountBasis.INFLATION_ADJUSTED

    @staticmethod
    def _parse_limit(raw_value: str | None, logger) -> int:
        if not raw_value:
            return DEFAULT_RECENT_TRANSACTIONS_LIMIT
        try:
            limit = int(raw_value)
        except ValueError:
            limit = -1
        if limit < 0:
            logger.warning(
                f"Invalid RECENT_TRANSACTIONS_LIMIT '{raw_value}'; "
                f"using {DEFAULT_RECENT_TRANSACTIONS_LIMIT}"
            )
            return DEFAULT_RECENT_TRANSACTIONS_LIMIT
        return limit


__all__ = ["DashboardSettings"]
