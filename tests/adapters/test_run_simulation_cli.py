"""Tests for the run_simulation_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import run_simulation_cli
from src.domain.models import FinalAmountBasis
from src.infrastructure.settings import DashboardSettings


def _patch_environment(monkeypatch, basis=FinalAmountBasis.INFLATION_ADJUSTED):
    monkeypatch.setattr(run_simulation_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        run_simulation_cli.DashboardSettings,
        "from_env",
        classmethod(lambda cls: DashboardSettings(headline_basis=basis)),
    )


def test_main_prints_summary_and_yearly_table(monkeypatch, capsys):
    """A valid plan prints the headline and one row per year."""
    _patch_environment(monkeypatch)

    exit_code = run_simulation_cli.main(
        ["--initial", "1000", "--monthly", "0", "--return-rate", "12",
         "--years", "2", "--inflation", "0"]
    )

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "Final amount (inflation_adjusted)" in output
    assert "Total contributions: 1,000.00" in output
    table_rows = [
        line for line in output.splitlines() if line.strip()[:1].isdigit()
    ]
    assert len(table_rows) == 2
    assert "1,126.84" in table_rows[0]


def test_main_uses_basis_flag_over_settings(monkeypatch, capsys):
    _patch_environment(monkeypatch)

    run_simulation_cli.main(["--basis", "nominal", "--years", "1"])

    assert "Final amount (nominal)" in capsys.readouterr().out


def test_main_falls_back_to_configured_basis(monkeypatch, capsys):
    _patch_environment(monkeypatch, basis=FinalAmountBasis.NOMINAL)

    run_simulation_cli.main(["--years", "1"])

    assert "Final amount (nominal)" in capsys.readouterr().out


def test_main_rejects_out_of_range_plans(monkeypatch, capsys):
    """Invalid plans exit with status 2 and an explanation."""
    _patch_environment(monkeypatch)

    exit_code = run_simulation_cli.main(["--tax", "150"])

    assert exit_code == 2
    assert "Invalid plan" in capsys.readouterr().out


def test_main_rejects_non_numeric_values(monkeypatch, capsys):
    _patch_environment(monkeypatch)

    exit_code = run_simulation_cli.main(["--initial", "lots"])

    assert exit_code == 2
    assert "Invalid number" in capsys.readouterr().out
