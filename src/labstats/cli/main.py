"""Main CLI entrypoint using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from labstats import __version__
from labstats.config import AnalysisMode
from labstats.data.columns import ColumnThresholds
from labstats.errors import LabStatsError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="labstats",
    help="Automatic hypothesis testing and APA-style reporting for lab data.",
    add_completion=False,
)

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"labstats {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """labstats: hypothesis tests and APA sentences from spreadsheet exports."""
    pass


def _thresholds(min_non_empty: int, numeric_ratio: float, max_categories: int) -> ColumnThresholds:
    try:
        return ColumnThresholds(
            min_non_empty=min_non_empty,
            numeric_ratio=numeric_ratio,
            max_categories=max_categories,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def analyze(
    data: Path = typer.Option(..., "--data", help="Path to CSV export."),
    col_a: str = typer.Option(..., "--col-a", help="First column (outcome column for independent tests)."),
    col_b: Optional[str] = typer.Option(
        None, "--col-b", help="Second column, or grouping column for independent tests."
    ),
    mode: str = typer.Option(
        "auto",
        "--mode",
        help="auto, paired, one-sample, independent or correlation.",
    ),
    mu0: float = typer.Option(0.0, "--mu0", help="Reference value for the one-sample test."),
    groups: Optional[List[str]] = typer.Option(
        None, "--groups", help="Two group labels to compare (repeat the option)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full report as JSON."),
    chart: Optional[Path] = typer.Option(None, "--chart", help="Save a chart (.png, .pdf, .svg)."),
    min_non_empty: int = typer.Option(3, "--min-non-empty", help="Minimum non-empty cells per column."),
    numeric_ratio: float = typer.Option(0.8, "--numeric-ratio", help="Numeric fraction for numeric columns."),
    max_categories: int = typer.Option(10, "--max-categories", help="Maximum distinct values for categories."),
):
    """
    Run a statistical test and print an APA-style result sentence.

    With --mode auto, one column gives a one-sample test against --mu0, a
    numeric and a categorical column give a Welch independent-samples test,
    and two numeric columns give a paired test.

    Examples:
        # Paired t-test
        labstats analyze --data lab.csv --col-a LVF --col-b RVF

        # One-sample t-test against zero
        labstats analyze --data lab.csv --col-a "Lateralization Index"

        # Correlation with a scatter chart
        labstats analyze --data lab.csv --col-a LVF --col-b RVF \\
            --mode correlation --chart scatter.png
    """
    from labstats.api import analyze_file
    from labstats.report.plots import plot_chart

    thresholds = _thresholds(min_non_empty, numeric_ratio, max_categories)

    try:
        report = analyze_file(
            data_csv=data,
            col_a=col_a,
            col_b=col_b,
            mode=mode,
            mu0=mu0,
            groups=groups or None,
            thresholds=thresholds,
        )
    except (LabStatsError, FileNotFoundError) as e:
        typer.secho(f"\n✗ Analysis failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        typer.secho(f"\n{report.test}", fg=typer.colors.GREEN)
        typer.echo(f"  {report.sentence}")
        typer.echo(f"  n = {report.n}")

    if chart is not None:
        path = plot_chart(report.chart, chart, title=report.test)
        typer.echo(f"  Chart: {path}")


@app.command()
def columns(
    data: Path = typer.Option(..., "--data", help="Path to CSV export."),
    min_non_empty: int = typer.Option(3, "--min-non-empty", help="Minimum non-empty cells per column."),
    numeric_ratio: float = typer.Option(0.8, "--numeric-ratio", help="Numeric fraction for numeric columns."),
    max_categories: int = typer.Option(10, "--max-categories", help="Maximum distinct values for categories."),
):
    """
    List the columns of a CSV export with their inferred kind.
    """
    from labstats.data.loaders import load_table

    thresholds = _thresholds(min_non_empty, numeric_ratio, max_categories)

    try:
        table = load_table(data, thresholds)
    except (LabStatsError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{table.n_rows} rows")
    for name, kind in table.kinds.items():
        typer.echo(f"  {name}: {kind.value}")

    suggestions = [m.value for m in AnalysisMode if m != AnalysisMode.AUTO]
    if len(table.numeric_columns) == 0:
        typer.secho("No numeric columns found; no analysis is possible.", fg=typer.colors.YELLOW)
    else:
        typer.echo(f"\nAvailable modes: {', '.join(suggestions)}")


if __name__ == "__main__":
    app()
