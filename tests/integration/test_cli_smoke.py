from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from labstats.cli.main import app


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "labstats" in result.stdout


def test_cli_analyze_paired(lab_csv: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["analyze", "--data", str(lab_csv), "--col-a", "LVF", "--col-b", "RVF"])
    assert result.exit_code == 0, result.stdout
    assert "Paired t-test" in result.stdout
    assert "A paired-samples t-test compared LVF" in result.stdout


def test_cli_analyze_json(lab_csv: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "analyze",
            "--data",
            str(lab_csv),
            "--col-a",
            "RVF",
            "--col-b",
            "Condition",
            "--groups",
            "B",
            "--groups",
            "A",
            "--json",
        ],
    )
    assert result.exit_code == 0, result.stdout

    payload = json.loads(result.stdout)
    assert payload["mode"] == "independent"
    assert payload["variables"] == ["B", "A"]
    assert payload["sentence"].startswith("A Welch independent-samples t-test")


def test_cli_analyze_chart(lab_csv: Path, tmp_path: Path) -> None:
    runner = CliRunner()
    chart = tmp_path / "charts" / "scatter.png"
    result = runner.invoke(
        app,
        [
            "analyze",
            "--data",
            str(lab_csv),
            "--col-a",
            "LVF",
            "--col-b",
            "RVF",
            "--mode",
            "correlation",
            "--chart",
            str(chart),
        ],
    )
    assert result.exit_code == 0, result.stdout
    assert chart.exists()


def test_cli_analyze_unknown_column(lab_csv: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["analyze", "--data", str(lab_csv), "--col-a", "LI"])
    assert result.exit_code == 1


def test_cli_analyze_missing_file(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["analyze", "--data", str(tmp_path / "missing.csv"), "--col-a", "x"])
    assert result.exit_code == 1


def test_cli_analyze_cp1252_export(tmp_path: Path) -> None:
    path = tmp_path / "excel.csv"
    path.write_bytes("LVF µs,RVF µs\n1.0,2.5\n2.0,2.0\n3.0,4.5\n4.0,4.0\n".encode("cp1252"))
    runner = CliRunner()
    result = runner.invoke(
        app, ["analyze", "--data", str(path), "--col-a", "LVF µs", "--col-b", "RVF µs"]
    )
    assert result.exit_code == 0, result.output
    assert "A paired-samples t-test compared LVF µs" in result.stdout


def test_cli_analyze_malformed_csv(tmp_path: Path) -> None:
    path = tmp_path / "ragged.csv"
    path.write_text("a,b\n1,2\n3,4,5,6\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["analyze", "--data", str(path), "--col-a", "a"])
    assert result.exit_code == 1
    assert "Analysis failed" in result.output


def test_cli_columns(lab_csv: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["columns", "--data", str(lab_csv)])
    assert result.exit_code == 0, result.stdout
    assert "6 rows" in result.stdout
    assert "LVF: numeric" in result.stdout
    assert "Condition: categorical" in result.stdout


def test_cli_columns_bad_thresholds(lab_csv: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["columns", "--data", str(lab_csv), "--numeric-ratio", "2"])
    assert result.exit_code == 1
