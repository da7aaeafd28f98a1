"""Application ports package."""

from .errors import RepositoryError
from .portfolio_repository import PortfolioNotFound, PortfolioRepositoryPort
from .simulation_repository import (
    SimulationNotFound,
    SimulationRepositoryPort,
)

__all__ = [
    "RepositoryError",
    "PortfolioNotFound",
    "PortfolioRepositoryPort",
    "SimulationNotFound",
    "SimulationRepositoryPort",
]
