"""Streamlit dashboard entry point."""

import math
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_dashboard_overview import (
    DashboardOverview,
    GetDashboardOverviewUseCase,
)
from src.application.use_cases.get_portfolio_detail import (
    GetPortfolioDetailUseCase,
    PortfolioDetail,
)
from src.application.use_cases.get_simulation_detail import (
    GetSimulationDetailUseCase,
)
from src.application.use_cases.list_portfolios import (
    ListPortfoliosUseCase,
    PortfolioSummary,
)
from src.application.use_cases.list_simulations import ListSimulationsUseCase
from src.application.use_cases.run_simulation import RunSimulationUseCase
from src.domain.errors import InvalidPlanParameter
from src.domain.models import (
    AllocationEntry,
    InvestmentPlan,
    PreviewEstimate,
    Projection,
    RecentTransaction,
    Simulation,
    YearlyResult,
)
from src.domain.policies import (
    HoldingSortKey,
    SortDirection,
    SortState,
    next_sort_state,
)
from src.infrastructure.container import (
    build_portfolio_repository,
    build_settings,
    build_simulation_repository,
)
from src.infrastructure.logging.logger import get_usage_logger

DEFAULT_PLAN_VALUES = {
    "initial_investment": 10000.0,
    "monthly_contribution": 500.0,
    "annual_return_rate": 8.0,
    "investment_duration_years": 30,
    "inflation_rate": 2.0,
    "tax_rate": 0.0,
}

_SORT_LABELS = {
    HoldingSortKey.ASSET_NAME: "Asset",
    HoldingSortKey.ASSET_SYMBOL: "Symbol",
    HoldingSortKey.ASSET_TYPE: "Type",
    HoldingSortKey.QUANTITY: "Quantity",
    HoldingSortKey.PURCHASE_PRICE: "Purchase Price",
    HoldingSortKey.CURRENT_PRICE: "Current Price",
    HoldingSortKey.INITIAL_AMOUNT: "Invested",
    HoldingSortKey.CURRENT_VALUE: "Current Value",
    HoldingSortKey.PROFIT_LOSS: "Profit/Loss",
    HoldingSortKey.PURCHASE_DATE: "Purchase Date",
}

_SORT_STATE_KEY = "holding_sort_state"
_NEW_SIMULATION = "New simulation"
_DASHBOARD_SIMULATIONS = 3


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas are usable by Altair."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair charts need numpy and pandas: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (no ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (no Timestamp)."
    return True, None


def _fetch_dashboard_overview() -> DashboardOverview:
    """Fetch portfolios and aggregate them for the dashboard."""
    settings = build_settings()
    use_case = GetDashboardOverviewUseCase(
        repository=build_portfolio_repository(settings),
        recent_limit=settings.recent_transactions_limit,
    )
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_dashboard_overview(schema_version: int = 1) -> DashboardOverview:
    """Cached wrapper around _fetch_dashboard_overview."""
    _ = schema_version
    return _fetch_dashboard_overview()


def _fetch_portfolios(query: str | None) -> list[PortfolioSummary]:
    """Fetch portfolio summaries matching the search query."""
    use_case = ListPortfoliosUseCase(repository=build_portfolio_repository())
    return use_case.execute(query=query)


def _fetch_portfolio_detail(
    portfolio_id: str,
    sort_state: SortState,
) -> PortfolioDetail:
    """Fetch a portfolio's detail view in the requested order."""
    use_case = GetPortfolioDetailUseCase(
        repository=build_portfolio_repository(),
    )
    return use_case.execute(portfolio_id, sort_state=sort_state)


def _fetch_simulations(query: str | None = None) -> list[Simulation]:
    """Fetch saved simulations matching the search query."""
    use_case = ListSimulationsUseCase(repository=build_simulation_repository())
    return use_case.execute(query=query)


def _build_simulation_detail_use_case() -> GetSimulationDetailUseCase:
    settings = build_settings()
    return GetSimulationDetailUseCase(
        repository=build_simulation_repository(settings),
        basis=settings.headline_basis,
    )


def _build_simulation_use_case() -> RunSimulationUseCase:
    return RunSimulationUseCase(basis=build_settings().headline_basis)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def _format_percentage(value: Decimal, signed: bool = False) -> str:
    """Format a 0-100 percentage for display."""
    sign = "+" if signed and value >= 0 else ""
    return f"{sign}{value:.2f}%"


def _format_multiplier(value: Decimal) -> str:
    return f"{value:.2f}x"


def _format_date(value: date | datetime | None) -> str:
    if value is None:
        return "-"
    return value.strftime("%b %d, %Y")


def _prepare_allocation_chart_data(
    allocation: Sequence[AllocationEntry],
) -> list[dict[str, str | float]]:
    """Prepare Altair-ready rows for the allocation donut."""
    return [
        {
            "category": entry.asset_type.label,
            "amount": float(entry.value),
            "amount_label": _format_currency(entry.value),
            "share_label": f"{entry.percentage:.1f}%",
        }
        for entry in allocation
    ]


def _prepare_growth_chart_data(
    yearly_results: Sequence[YearlyResult],
) -> list[dict[str, str | float | int]]:
    """Prepare long-format rows for the growth line chart."""
    data: list[dict[str, str | float | int]] = []
    for result in yearly_results:
        data.append(
            {
                "year": result.year,
                "series": "Without inflation",
                "balance": float(result.balance_without_inflation),
            }
        )
        data.append(
            {
                "year": result.year,
                "series": "With inflation",
                "balance": float(result.balance_with_inflation),
            }
        )
    return data


def _yearly_table(
    yearly_results: Sequence[YearlyResult],
) -> list[dict[str, str | int]]:
    return [
        {
            "Year": result.year,
            "Contribution": _format_currency(result.yearly_contribution),
            "Earnings": _format_currency(result.yearly_earnings),
            "Taxes": _format_currency(result.yearly_taxes),
            "Balance": _format_currency(result.balance_without_inflation),
            "Inflation-adjusted": _format_currency(
                result.balance_with_inflation
            ),
        }
        for result in yearly_results
    ]


def _transactions_table(
    transactions: Sequence[RecentTransaction],
) -> list[dict[str, str]]:
    return [
        {
            "Date": _format_date(item.transaction.transaction_date),
            "Asset": item.asset_name or "Unknown",
            "Symbol": item.asset_symbol or "-",
            "Portfolio": item.portfolio_name,
            "Type": item.transaction.type.value,
            "Quantity": f"{item.transaction.quantity:,}",
            "Price": _format_currency(item.transaction.price),
            "Amount": _format_currency(item.transaction.amount),
        }
        for item in transactions
    ]


def _portfolio_summary_table(
    summaries: Sequence[PortfolioSummary],
) -> list[dict[str, str | int]]:
    return [
        {
            "Name": summary.portfolio.name,
            "Description": (
                summary.portfolio.description or "No description provided"
            ),
            "Value": _format_currency(summary.metrics.total_value),
            "Performance": _format_percentage(
                summary.metrics.performance_percentage,
                signed=True,
            ),
            "Investments": summary.metrics.holding_count,
        }
        for summary in summaries
    ]


def _simulation_label(simulation: Simulation) -> str:
    return f"{simulation.name} ({simulation.id})"


def _simulations_table(
    simulations: Sequence[Simulation],
) -> list[dict[str, str | int]]:
    return [
        {
            "Name": simulation.name,
            "Description": simulation.description or "No description provided",
            "Initial": _format_currency(simulation.plan.initial_investment),
            "Monthly": _format_currency(simulation.plan.monthly_contribution),
            "Return": _format_percentage(simulation.plan.annual_return_rate),
            "Years": simulation.plan.investment_duration_years,
            "Created": _format_date(simulation.created_at),
        }
        for simulation in simulations
    ]


def _holdings_table(detail: PortfolioDetail) -> list[dict[str, str]]:
    data = []
    for row in detail.rows:
        holding = row.holding
        asset = holding.asset
        change = _format_percentage(
            row.metrics.profit_loss_percentage,
            signed=True,
        )
        data.append(
            {
                "Asset": asset.name if asset else "Unknown",
                "Symbol": asset.symbol if asset else "-",
                "Type": asset.type.label if asset else "-",
                "Quantity": (
                    f"{holding.quantity:,}"
                    if holding.quantity is not None
                    else "-"
                ),
                "Purchase Price": (
                    _format_currency(holding.purchase_price)
                    if holding.purchase_price is not None
                    else "-"
                ),
                "Current Price": (
                    _format_currency(asset.current_price)
                    if asset and asset.current_price is not None
                    else "-"
                ),
                "Current Value": _format_currency(row.metrics.current_value),
                "Profit/Loss": (
                    f"{_format_currency(row.metrics.profit_loss)} ({change})"
                ),
                "Purchase Date": _format_date(holding.purchase_date),
            }
        )
    return data


def _render_allocation_chart(
    allocation: Sequence[AllocationEntry],
    title: str,
    chart_size: int = 320,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of value by asset class."""
    if not allocation:
        st.info("No asset data available.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_allocation_chart_data(allocation)
    palette_scale = list(
        palette
        or [
            "#3B82F6",
            "#10B981",
            "#F59E0B",
            "#6366F1",
            "#EC4899",
            "#8B5CF6",
            "#EF4444",
            "#06B6D4",
        ]
    )
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=palette_scale),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_growth_chart(yearly_results: Sequence[YearlyResult]) -> None:
    """Render nominal vs inflation-adjusted balance per year."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_growth_chart_data(yearly_results)
    if not all(math.isfinite(row["balance"]) for row in data):
        st.info("Balances are too large to chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("year:Q", title="Year"),
        y=alt.Y(
            "balance:Q",
            title="Balance",
            axis=alt.Axis(
                labelExpr=(
                    "datum.value >= 1000000 ? "
                    "'$' + format(datum.value / 1000000, '.1f') + 'M' : "
                    "datum.value >= 1000 ? "
                    "'$' + format(datum.value / 1000, '.0f') + 'K' : "
                    "'$' + datum.value"
                )
            ),
        ),
        color=alt.Color("series:N", legend=alt.Legend(title=None)),
        tooltip=[
            alt.Tooltip("year:Q"),
            alt.Tooltip("series:N"),
            alt.Tooltip("balance:Q", format="$,.2f"),
        ],
    )
    st.subheader("Growth")
    st.altair_chart(chart, width="stretch")


def _render_dashboard(overview: DashboardOverview) -> None:
    metrics = overview.metrics
    value_col, invested_col, performance_col = st.columns(3)
    value_col.metric("Total Value", _format_currency(metrics.total_value))
    invested_col.metric(
        "Total Invested",
        _format_currency(metrics.total_invested),
    )
    performance_col.metric(
        "Performance",
        _format_percentage(metrics.performance_percentage, signed=True),
        _format_currency(metrics.profit_loss),
    )

    st.subheader("Portfolios")
    if not overview.portfolios:
        st.info("You don't have any portfolios yet")
    else:
        st.dataframe(
            _portfolio_summary_table(overview.portfolios),
            width="stretch",
            hide_index=True,
        )

    chart_col, feed_col = st.columns(2)
    with chart_col:
        _render_allocation_chart(overview.allocation, "Asset Allocation")
    with feed_col:
        st.subheader("Recent Transactions")
        if not overview.recent_transactions:
            st.info("No recent transactions")
        else:
            st.dataframe(
                _transactions_table(overview.recent_transactions),
                width="stretch",
                hide_index=True,
            )

    _render_simulation_summary()


def _render_simulation_summary() -> None:
    """Show the first saved simulations with their estimated outcome."""
    st.subheader("Investment Simulations")
    try:
        simulations = _fetch_simulations()
    except (RuntimeError, ValueError) as exc:
        st.caption(f"Saved simulations unavailable: {exc}")
        return
    if not simulations:
        st.info("You don't have any simulations yet")
        return
    use_case = _build_simulation_use_case()
    rows = []
    for simulation in simulations[:_DASHBOARD_SIMULATIONS]:
        preview = use_case.preview(simulation.plan)
        rows.append(
            {
                "Name": simulation.name,
                "Initial": _format_currency(simulation.plan.initial_investment),
                "Monthly": _format_currency(
                    simulation.plan.monthly_contribution
                ),
                "Return": _format_percentage(
                    simulation.plan.annual_return_rate
                ),
                "Final": _format_currency(preview.final_amount),
            }
        )
    st.dataframe(rows, width="stretch", hide_index=True)


def _toggle_holding_sort(key: HoldingSortKey) -> None:
    current = st.session_state.get(_SORT_STATE_KEY, SortState())
    st.session_state[_SORT_STATE_KEY] = next_sort_state(current, key)


def _render_sort_controls() -> SortState:
    """Render one button per holdings column; a click toggles the sort."""
    state = st.session_state.get(_SORT_STATE_KEY, SortState())
    st.caption("Sort holdings by")
    for column, (key, label) in zip(
        st.columns(len(_SORT_LABELS)),
        _SORT_LABELS.items(),
    ):
        marker = ""
        if key == state.key:
            marker = (
                " ▲" if state.direction == SortDirection.ASCENDING else " ▼"
            )
        column.button(
            f"{label}{marker}",
            key=f"sort_{key.value}",
            on_click=_toggle_holding_sort,
            args=(key,),
        )
    return state


def _render_portfolios() -> None:
    query = st.text_input("Search portfolios", placeholder="Name or description")
    summaries = _fetch_portfolios(query)
    st.caption(f"{len(summaries)} portfolios shown")
    if not summaries:
        st.warning("No portfolios found.")
        return
    st.dataframe(
        _portfolio_summary_table(summaries),
        width="stretch",
        hide_index=True,
    )

    by_label = {
        f"{summary.portfolio.name} ({summary.portfolio.id})": summary
        for summary in summaries
        if summary.portfolio.id is not None
    }
    if not by_label:
        return
    selected = st.selectbox("Portfolio", options=list(by_label))
    sort_state = _render_sort_controls()
    detail = _fetch_portfolio_detail(
        by_label[selected].portfolio.id,
        sort_state,
    )
    get_usage_logger().info(
        f"Viewed portfolio {detail.portfolio.id} sorted by "
        f"{sort_state.key.value} {sort_state.direction.value}"
    )
    st.subheader(detail.portfolio.name)
    st.dataframe(_holdings_table(detail), width="stretch", hide_index=True)
    _render_allocation_chart(detail.allocation, "Allocation")


def _plan_inputs(defaults: dict) -> InvestmentPlan:
    left, right = st.columns(2)
    initial = left.number_input(
        "Initial Investment ($)",
        min_value=0.0,
        step=100.0,
        value=float(defaults["initial_investment"]),
    )
    monthly = right.number_input(
        "Monthly Contribution ($)",
        min_value=0.0,
        step=10.0,
        value=float(defaults["monthly_contribution"]),
    )
    annual_return = left.number_input(
        "Annual Return Rate (%)",
        min_value=-100.0,
        max_value=1000.0,
        step=0.1,
        value=float(defaults["annual_return_rate"]),
    )
    years = right.number_input(
        "Investment Duration (years)",
        min_value=1,
        max_value=100,
        step=1,
        value=int(defaults["investment_duration_years"]),
    )
    inflation = left.number_input(
        "Inflation Rate (%)",
        min_value=0.0,
        max_value=100.0,
        step=0.1,
        value=float(defaults["inflation_rate"]),
    )
    tax = right.number_input(
        "Tax Rate (%)",
        min_value=0.0,
        max_value=100.0,
        step=0.1,
        value=float(defaults["tax_rate"]),
    )
    return InvestmentPlan.from_values(
        initial_investment=initial or 0,
        monthly_contribution=monthly or 0,
        annual_return_rate=annual_return or 0,
        investment_duration_years=years or 0,
        inflation_rate=inflation or 0,
        tax_rate=tax or 0,
    )


def _plan_defaults(plan: InvestmentPlan | None) -> dict:
    if plan is None:
        return dict(DEFAULT_PLAN_VALUES)
    return {
        "initial_investment": plan.initial_investment,
        "monthly_contribution": plan.monthly_contribution,
        "annual_return_rate": plan.annual_return_rate,
        "investment_duration_years": plan.investment_duration_years,
        "inflation_rate": plan.inflation_rate,
        "tax_rate": plan.tax_rate,
    }


def _render_preview(preview: PreviewEstimate) -> None:
    st.subheader("Estimated Results")
    st.metric("Final Amount", _format_currency(preview.final_amount))
    st.metric(
        "Total Contributions",
        _format_currency(preview.total_contributions),
    )
    st.metric("Total Earnings", _format_currency(preview.estimated_earnings))
    st.metric("Return Multiplier", _format_multiplier(preview.return_multiplier))


def _render_projection(projection: Projection) -> None:
    summary = projection.summary
    final_col, contrib_col, earn_col, mult_col = st.columns(4)
    final_col.metric("Final Amount", _format_currency(summary.final_amount))
    contrib_col.metric(
        "Total Contributions",
        _format_currency(summary.total_contributions),
    )
    earn_col.metric("Total Earnings", _format_currency(summary.total_earnings))
    mult_col.metric(
        "Return Multiplier",
        _format_multiplier(summary.return_multiplier),
    )
    _render_growth_chart(projection.yearly_results)
    st.dataframe(
        _yearly_table(projection.yearly_results),
        width="stretch",
        hide_index=True,
    )


def _template_plan(simulations: Sequence[Simulation]) -> InvestmentPlan | None:
    """Let the user start from a saved simulation's plan."""
    saved = {
        _simulation_label(simulation): simulation
        for simulation in simulations
        if simulation.id is not None
    }
    if not saved:
        return None
    choice = st.selectbox("Start from", options=[_NEW_SIMULATION, *saved])
    if choice == _NEW_SIMULATION:
        return None
    try:
        return _build_simulation_detail_use_case().clone_plan(saved[choice].id)
    except LookupError as exc:
        st.warning(f"Saved simulation unavailable: {exc}")
        return None


def _render_simulation() -> None:
    try:
        simulations = _fetch_simulations()
    except (RuntimeError, ValueError) as exc:
        st.caption(f"Saved simulations unavailable: {exc}")
        simulations = []
    template = _template_plan(simulations)

    use_case = _build_simulation_use_case()
    form_col, preview_col = st.columns([2, 1])
    with form_col:
        plan = _plan_inputs(_plan_defaults(template))
        run = st.button("Run Simulation")
    with preview_col:
        _render_preview(use_case.preview(plan))

    if not run:
        return
    get_usage_logger().info(
        f"Simulation run: years={plan.investment_duration_years}"
    )
    try:
        projection = use_case.execute(plan)
    except InvalidPlanParameter as exc:
        st.error(str(exc))
        return
    _render_projection(projection)


def _render_saved_simulations() -> None:
    query = st.text_input(
        "Search simulations",
        placeholder="Name or description",
    )
    simulations = _fetch_simulations(query)
    st.caption(f"{len(simulations)} simulations shown")
    if not simulations:
        if query:
            st.info(f'No simulations matching "{query}"')
        else:
            st.info("You don't have any simulations yet")
        return
    st.dataframe(
        _simulations_table(simulations),
        width="stretch",
        hide_index=True,
    )

    by_label = {
        _simulation_label(simulation): simulation
        for simulation in simulations
        if simulation.id is not None
    }
    if not by_label:
        return
    selected = st.selectbox("Simulation", options=list(by_label))
    simulation_id = by_label[selected].id
    try:
        detail = _build_simulation_detail_use_case().execute(simulation_id)
    except InvalidPlanParameter as exc:
        st.error(f"{selected} cannot be projected: {exc}")
        return
    get_usage_logger().info(f"Viewed simulation {simulation_id}")
    st.subheader(detail.simulation.name)
    if detail.simulation.description:
        st.caption(detail.simulation.description)
    _render_projection(detail.projection)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Investment Dashboard", layout="wide")
    st.title("Investment Dashboard")

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Portfolios", "Simulation", "Saved Simulations"],
    )

    if page == "Simulation":
        _render_simulation()
        return
    if page == "Saved Simulations":
        try:
            _render_saved_simulations()
        except (LookupError, RuntimeError, ValueError) as exc:
            st.warning(f"Saved simulations unavailable: {exc}")
        return

    try:
        if page == "Dashboard":
            _render_dashboard(_load_dashboard_overview(schema_version=1))
        else:
            _render_portfolios()
    except (LookupError, RuntimeError, ValueError) as exc:
        st.warning(f"Portfolio data unavailable: {exc}")


if __name__ == "__main__":  # pragma: no cover
    main()
