"""Use case to list saved simulations."""

from src.application.ports.simulation_repository import (
    SimulationRepositoryPort,
)
from src.domain.models import Simulation
from src.domain.policies import matches_query
from src.infrastructure.logging.logger import get_app_logger


class ListSimulationsUseCase:
    """Fetch saved simulations, optionally filtered by a search query."""

    def __init__(
        self,
        repository: SimulationRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, query: str | None = None) -> list[Simulation]:
        """Return simulations whose name or description match the query."""
        simulations = self._repository.list_simulations()
        matched = [
            simulation
            for simulation in simulations
            if matches_query(query, simulation.name, simulation.description)
        ]
        self._logger.info(
            f"Listed {len(matched)} of {len(simulations)} simulations"
        )
        return matched


__all__ = ["ListSimulationsUseCase"]
