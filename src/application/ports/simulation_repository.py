"""Port for reading saved simulations from the remote service."""

from typing import Protocol

from src.domain.models import Simulation


class SimulationNotFound(LookupError):
    """Raised when a simulation id is unknown to the repository."""


class SimulationRepositoryPort(Protocol):
    """Port exposing read access to saved simulations."""

    def list_simulations(self) -> list[Simulation]:
        """Return every saved simulation."""

    def get_simulation(self, simulation_id: str) -> Simulation:
        """Return one saved simulation.

        Raises:
            SimulationNotFound: When no simulation has the given id.
        """


__all__ = ["SimulationRepositoryPort", "SimulationNotFound"]
