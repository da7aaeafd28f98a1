"""Composition root for wiring infrastructure adapters."""

from src.application.ports.portfolio_repository import PortfolioRepositoryPort
from src.application.ports.simulation_repository import (
    SimulationRepositoryPort,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.repository_factory import create_repository
from src.infrastructure.settings import DashboardSettings


def build_settings() -> DashboardSettings:
    """Return settings sourced from the environment."""
    return DashboardSettings.from_env()


def build_portfolio_repository(
    settings: DashboardSettings | None = None,
) -> PortfolioRepositoryPort:
    """Return the configured portfolio repository."""
    return create_repository(
        settings or build_settings(),
        logger=get_app_logger(),
    )


def build_simulation_repository(
    settings: DashboardSettings | None = None,
) -> SimulationRepositoryPort:
    """Return the configured simulation repository."""
    return create_repository(
        settings or build_settings(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_settings",
    "build_portfolio_repository",
    "build_simulation_repository",
]
