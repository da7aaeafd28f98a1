"""Application use cases package."""

from .get_dashboard_overview import (
    DashboardOverview,
    GetDashboardOverviewUseCase,
)
from .get_portfolio_detail import GetPortfolioDetailUseCase, PortfolioDetail
from .get_simulation_detail import (
    GetSimulationDetailUseCase,
    SimulationDetail,
)
from .list_portfolios import ListPortfoliosUseCase, PortfolioSummary
from .list_simulations import ListSimulationsUseCase
from .run_simulation import RunSimulationUseCase

__all__ = [
    "DashboardOverview",
    "GetDashboardOverviewUseCase",
    "GetPortfolioDetailUseCase",
    "PortfolioDetail",
    "GetSimulationDetailUseCase",
    "SimulationDetail",
    "ListPortfoliosUseCase",
    "PortfolioSummary",
    "ListSimulationsUseCase",
    "RunSimulationUseCase",
]
