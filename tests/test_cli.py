import json
from pathlib import Path

from typer.testing import CliRunner

from quick_cash.cli import app

runner = CliRunner()


def test_cli_prints_boards_for_standard_config() -> None:
    result = runner.invoke(app, ["--seed", "7", "--log-level", "CRITICAL"])
    assert result.exit_code == 0, result.output
    assert "Rounded Prize: 15000" in result.stdout
    assert "Spin 1:" in result.stdout
    assert "Validation: all" in result.stdout


def test_cli_json_output_is_consistent() -> None:
    result = runner.invoke(app, ["--seed", "3", "--json", "--log-level", "CRITICAL"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["roundedPrize"] == 15000
    assert sum(spin["spinValue"] for spin in data["spins"]) == 15000
    assert data["validation"]["passed"] is True


def test_cli_reads_config_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "wager": 200,
                "basePrize": 50000,
                "maxSpins": 10,
                "maxCombinations": 3,
                "maxAdjacentElements": 0,
                "coinValueRanges": [{"wager": 200, "minCoinValue": 1000, "maxCoinValue": 10000}],
            }
        ),
        encoding="utf-8",
    )
    result = runner.invoke(app, ["--config", str(path), "--seed", "1", "--json", "--log-level", "CRITICAL"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["spinCount"] == 8
    assert data["coinRange"] == [1000, 10000]


def test_cli_reports_invalid_configuration() -> None:
    result = runner.invoke(app, ["--prize", "500", "--log-level", "CRITICAL"])
    assert result.exit_code == 1
