"""Tests for chart rendering."""

from labstats.report.formatter import build_report
from labstats.report.plots import plot_chart
from labstats.stats.tests import one_sample_ttest, paired_ttest, pearson_correlation


def test_plot_bar_chart(temp_outdir):
    report = build_report(paired_ttest([5.0, 7.0, 6.0, 9.0], [4.0, 5.0, 6.0, 6.0]), ["LVF", "RVF"])

    path = plot_chart(report.chart, temp_outdir / "paired.png", title=report.test)

    assert path.exists()
    assert path.stat().st_size > 0


def test_plot_bar_chart_with_reference(temp_outdir):
    report = build_report(one_sample_ttest([0.2, -0.1, 0.3, 0.4], mu0=0), ["LI"])

    path = plot_chart(report.chart, temp_outdir / "nested" / "one_sample.pdf")

    assert path.exists()


def test_plot_scatter_chart(temp_outdir):
    x, y = [1.0, 2.0, 3.0, 4.0, 5.0], [2.0, 4.0, 6.0, 8.0, 10.0]
    report = build_report(pearson_correlation(x, y), ["x", "y"], pairs=(x, y))

    path = plot_chart(report.chart, temp_outdir / "scatter.png")

    assert path.exists()


def test_plot_degenerate_bar_chart(temp_outdir):
    report = build_report(paired_ttest([1, 1, 1], [2, 2, 2]), ["a", "b"])

    path = plot_chart(report.chart, temp_outdir / "flat.png")

    assert path.exists()


def test_plots_use_headless_backend():
    import matplotlib

    assert matplotlib.get_backend().lower() == "agg"
