"""Factory helpers to select the portfolio repository backend."""

from src.infrastructure.api_repository import ApiRepository
from src.infrastructure.json_repository import JsonFileRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def create_repository(
    settings: DashboardSettings | None = None,
    logger=None,
) -> JsonFileRepository | ApiRepository:
    """Return a repository implementation based on configuration.

    The returned object satisfies both the portfolio and the simulation
    repository ports.

    Args:
        settings: Optional settings override; read from the environment
            when omitted.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        JsonFileRepository | ApiRepository: Concrete repository.

    Raises:
        RuntimeError: When the selected backend is missing its location.
        ValueError: When the backend name is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or DashboardSettings.from_env()
    backend = resolved_settings.backend

    if backend == "file":
        if resolved_settings.portfolio_file is None:
            raise RuntimeError(
                "File backend requires a PORTFOLIO_FILE path."
            )
        return JsonFileRepository(
            resolved_settings.portfolio_file,
            logger=resolved_logger,
        )

    if backend == "api":
        if not resolved_settings.api_url:
            raise RuntimeError(
                "API backend requires an INVESTMENT_API_URL value."
            )
        return ApiRepository(
            resolved_settings.api_url,
            token=resolved_settings.api_token,
            timeout=resolved_settings.api_timeout,
            logger=resolved_logger,
        )

    raise ValueError(
        f"Unsupported portfolio backend: {backend}. Expected file or api."
    )


__all__ = ["create_repository"]
