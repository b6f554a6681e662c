"""Tests for the pfm command line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from pfm.cli import app

runner = CliRunner()


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    """Point the config lookup at an empty temporary directory."""
    return {"XDG_CONFIG_HOME": str(tmp_path)}


class TestLoanCommand:
    """Tests for `pfm loan`."""

    def test_mortgage(self, env: dict[str, str]) -> None:
        """Should print the amortized payment and totals."""
        result = runner.invoke(app, ["loan", "200000", "0.06", "30"], env=env)

        assert result.exit_code == 0
        assert "Monthly Payment: $1,199.10" in result.output
        assert "Total Interest: $231,676.00" in result.output
        assert "Annual Rate: 6%" in result.output

    def test_invalid_principal(self, env: dict[str, str]) -> None:
        """Should exit 1 on non-numeric input."""
        result = runner.invoke(app, ["loan", "lots", "0.06", "30"], env=env)

        assert result.exit_code == 1
        assert "Invalid principal" in result.output

    def test_zero_years(self, env: dict[str, str]) -> None:
        """Should report the validation error and exit 1."""
        result = runner.invoke(app, ["loan", "1000", "0.06", "0"], env=env)

        assert result.exit_code == 1
        assert "Number of years must be positive" in result.output


class TestInvestCommand:
    """Tests for `pfm invest`."""

    def test_lump_sum(self, env: dict[str, str]) -> None:
        """Should print the future value."""
        result = runner.invoke(app, ["invest", "1000", "0.07", "1"], env=env)

        assert result.exit_code == 0
        assert "Future Value: $1,072.29" in result.output

    def test_with_contributions(self, env: dict[str, str]) -> None:
        """Should add monthly contributions to the projection."""
        result = runner.invoke(app, ["invest", "100", "0", "1", "--monthly", "10"], env=env)

        assert result.exit_code == 0
        assert "Total Contributions: $220.00" in result.output
        assert "Future Value: $220.00" in result.output


class TestCompoundCommand:
    """Tests for `pfm compound`."""

    def test_quarterly(self, env: dict[str, str]) -> None:
        """Should compound at the requested frequency."""
        result = runner.invoke(app, ["compound", "1000", "0.1", "1", "--frequency", "4"], env=env)

        assert result.exit_code == 0
        assert "Final Amount: $1,103.81" in result.output
        assert "Interest Earned: $103.81" in result.output

    def test_zero_frequency(self, env: dict[str, str]) -> None:
        """Should exit 1 for a frequency of zero."""
        result = runner.invoke(app, ["compound", "1000", "0.1", "1", "--frequency", "0"], env=env)

        assert result.exit_code == 1
        assert "Compound frequency must be positive" in result.output


class TestConfigHandling:
    """Tests for config loading from the CLI."""

    def test_currency_symbol_from_config(self, env: dict[str, str], tmp_path: Path) -> None:
        """Should use the configured currency symbol."""
        config_dir = tmp_path / "pfm"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[preferences]\ncurrency_symbol = "£"\n')

        result = runner.invoke(app, ["invest", "1000", "0.07", "1"], env=env)

        assert result.exit_code == 0
        assert "Future Value: £1,072.29" in result.output

    def test_malformed_config(self, env: dict[str, str], tmp_path: Path) -> None:
        """Should refuse to run with an unreadable config file."""
        config_dir = tmp_path / "pfm"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("preferences = [broken\n")

        result = runner.invoke(app, ["loan", "1000", "0.05", "1"], env=env)

        assert result.exit_code == 1
        assert "Config error" in result.output


class TestInitCommand:
    """Tests for `pfm init`."""

    def test_creates_config(self, env: dict[str, str], tmp_path: Path) -> None:
        """Should write the default config file."""
        result = runner.invoke(app, ["init"], env=env)

        assert result.exit_code == 0
        assert (tmp_path / "pfm" / "config.toml").exists()

    def test_refuses_to_overwrite(self, env: dict[str, str]) -> None:
        """Should need --force when the file already exists."""
        runner.invoke(app, ["init"], env=env)

        result = runner.invoke(app, ["init"], env=env)

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force_overwrites(self, env: dict[str, str]) -> None:
        """Should overwrite with --force."""
        runner.invoke(app, ["init"], env=env)

        result = runner.invoke(app, ["init", "--force"], env=env)

        assert result.exit_code == 0

    def test_force_repairs_malformed_config(self, env: dict[str, str], tmp_path: Path) -> None:
        """Should let init --force replace a config that cannot be parsed."""
        config_dir = tmp_path / "pfm"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("preferences = [broken\n")

        result = runner.invoke(app, ["init", "--force"], env=env)

        assert result.exit_code == 0
        assert "[preferences]" in (config_dir / "config.toml").read_text()
