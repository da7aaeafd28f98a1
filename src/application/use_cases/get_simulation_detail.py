"""Use case to load a saved simulation with its projection."""

from dataclasses import dataclass

from src.application.ports.simulation_repository import (
    SimulationRepositoryPort,
)
from src.domain.models import (
    FinalAmountBasis,
    InvestmentPlan,
    Projection,
    Simulation,
)
from src.domain.services.projection import project
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SimulationDetail:
    """Saved simulation together with its computed projection."""

    simulation: Simulation
    projection: Projection


class GetSimulationDetailUseCase:
    """Load a saved simulation and project its plan."""

    def __init__(
        self,
        repository: SimulationRepositoryPort,
        logger=None,
        basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing saved simulations.
            logger: Optional logger compatible with logging.Logger-like API.
            basis: Balance used as the headline final amount.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._basis = basis

    def execute(self, simulation_id: str) -> SimulationDetail:
        """Return the simulation and its projection.

        Raises:
            SimulationNotFound: When the id is unknown.
            InvalidPlanParameter: When the stored plan is out of range.
        """
        simulation = self._repository.get_simulation(simulation_id)
        projection = project(simulation.plan, basis=self._basis)
        self._logger.info(
            f"Simulation {simulation_id} projected over "
            f"{len(projection.yearly_results)} years"
        )
        return SimulationDetail(simulation=simulation, projection=projection)

    def clone_plan(self, simulation_id: str) -> InvestmentPlan:
        """Return the plan of a saved simulation to prefill a new one."""
        return self._repository.get_simulation(simulation_id).plan


__all__ = ["GetSimulationDetailUseCase", "SimulationDetail"]
