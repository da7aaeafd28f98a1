"""Use case to project an investment plan."""

from src.domain.errors import InvalidPlanParameter
from src.domain.models import (
    FinalAmountBasis,
    InvestmentPlan,
    PreviewEstimate,
    Projection,
)
from src.domain.services.projection import estimate_preview, project
from src.infrastructure.logging.logger import get_app_logger


class RunSimulationUseCase:
    """Project a plan year by year and summarize the outcome."""

    def __init__(
        self,
        logger=None,
        basis: FinalAmountBasis = FinalAmountBasis.INFLATION_ADJUSTED,
    ) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            basis: Balance used as the headline final amount.
        """
        self._logger = logger or get_app_logger()
        self._basis = basis

    def execute(self, plan: InvestmentPlan) -> Projection:
        """Return the full projection of a plan.

        Args:
            plan: Plan to project.

        Returns:
            Projection: Yearly results and summary.

        Raises:
            InvalidPlanParameter: When a plan field is out of range.
        """
        try:
            projection = project(plan, basis=self._basis)
        except InvalidPlanParameter as exc:
            self._logger.warning(f"Rejected investment plan: {exc}")
            raise

        summary = projection.summary
        self._logger.info(
            f"Projection computed: years={plan.investment_duration_years}, "
            f"final_amount={summary.final_amount} ({summary.basis.value}), "
            f"contributions={summary.total_contributions}"
        )
        return projection

    def preview(self, plan: InvestmentPlan) -> PreviewEstimate:
        """Return an instant estimate for a plan that is being edited."""
        return estimate_preview(plan, basis=self._basis)


__all__ = ["RunSimulationUseCase"]
