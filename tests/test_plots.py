import plotly.graph_objects as go

from bootstrap_explorer.generators import Distribution
from bootstrap_explorer.histogram import histogram
from bootstrap_explorer.plots import plot_bootstrap_histogram, plot_sample_histogram
from bootstrap_explorer.summary import summarize, summarize_sample


def test_sample_histogram_with_reference_curve():
    sample = [0.5, 1.0, 2.5, 3.0, 4.0, 6.5]
    fig = plot_sample_histogram(
        sample, histogram(sample, 5), Distribution.GAMMA, summarize_sample(sample)
    )
    assert isinstance(fig, go.Figure)
    assert [type(t).__name__ for t in fig.data] == ["Bar", "Scatter"]
    assert list(fig.data[0].y) == histogram(sample, 5).counts


def test_sample_histogram_empty():
    fig = plot_sample_histogram([], histogram([]), Distribution.NORMAL)
    assert len(fig.data) == 0


def test_degenerate_sample_has_no_reference_curve():
    fig = plot_sample_histogram([2.0, 2.0], histogram([2.0, 2.0]), Distribution.NORMAL)
    assert len(fig.data) == 1


def test_bootstrap_histogram_draws_interval_lines():
    values = [0.9, 1.1, 1.0, 1.3, 0.7, 1.05]
    fig = plot_bootstrap_histogram(histogram(values, 4), summarize(values), "mean")
    assert len(fig.data) == 1
    # two percentile bounds, two normal bounds, one mean
    assert len(fig.layout.shapes) == 5


def test_bootstrap_histogram_without_resamples():
    fig = plot_bootstrap_histogram(histogram([]), None, "variance")
    assert len(fig.data) == 0
    assert "no resamples" in fig.layout.title.text
