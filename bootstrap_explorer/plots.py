from typing import Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from bootstrap_explorer.generators import Distribution, theoretical_pdf
from bootstrap_explorer.histogram import Histogram
from bootstrap_explorer.summary import SummaryRecord


def _empty_figure(title: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title, height=350, margin=dict(l=40, r=20, t=50, b=40))
    return fig


def _bar_trace(hist: Histogram, name: str, color: str) -> go.Bar:
    """Bars placed at bin centres with the bin labels as hover text."""
    if len(hist.counts) == 1:
        centers = [hist.edges[0]]
        width = None
    else:
        edges = np.asarray(hist.edges)
        centers = (edges[:-1] + edges[1:]) / 2.0
        width = (edges[1] - edges[0]) * 0.95

    return go.Bar(
        x=centers,
        y=hist.counts,
        width=width,
        name=name,
        text=hist.labels,
        marker=dict(color=color, line=dict(color="white", width=1)),
        hovertemplate="<b>%{text}</b><br>Count: %{y}<extra></extra>",
        textposition="none",
    )


def plot_sample_histogram(
    sample: Sequence[float],
    hist: Histogram,
    distribution: Distribution,
    summary: Optional[SummaryRecord] = None,
    show_reference: bool = True,
) -> go.Figure:
    """Histogram of the base sample with the reference density scaled to counts."""
    if not hist.counts:
        return _empty_figure("Original Sample (no data yet)")

    fig = go.Figure()
    fig.add_trace(_bar_trace(hist, "Sample values", "gray"))

    if show_reference and len(hist.counts) > 1:
        bin_width = hist.edges[1] - hist.edges[0]
        x_axis = np.linspace(hist.edges[0], hist.edges[-1], 300)
        # Density -> expected count per bin
        expected = theoretical_pdf(distribution, x_axis) * len(sample) * bin_width
        fig.add_trace(
            go.Scatter(
                x=x_axis,
                y=expected,
                mode="lines",
                name=f"Reference: {distribution.label}",
                line=dict(color="green", dash="dash"),
                hoverinfo="skip",
            )
        )

    if summary is not None:
        fig.add_vline(
            x=summary.mean,
            line_dash="dash",
            line_color="red",
            annotation_text="Sample Mean",
            annotation_position="top right",
        )

    fig.update_layout(
        title=f"Distribution of Original Sample Data (n = {len(sample)})",
        xaxis_title="Value",
        yaxis_title="Count",
        bargap=0.02,
        height=350,
        legend=dict(yanchor="top", y=0.99, xanchor="right", x=0.99),
        margin=dict(l=40, r=20, t=50, b=40),
    )
    return fig


def plot_bootstrap_histogram(
    hist: Histogram,
    summary: Optional[SummaryRecord],
    statistic_name: str,
    color: str = "skyblue",
) -> go.Figure:
    """Bootstrap distribution of one statistic with both interval constructions."""
    if not hist.counts or summary is None:
        return _empty_figure(f"Bootstrap {statistic_name}s (no resamples yet)")

    fig = go.Figure()
    fig.add_trace(_bar_trace(hist, f"Bootstrap {statistic_name}s", color))

    if summary.percentile_interval is not None:
        for x in (summary.percentile_interval.low, summary.percentile_interval.high):
            fig.add_vline(x=x, line_width=2, line_color="blue")
    for x in (summary.normal_interval.low, summary.normal_interval.high):
        fig.add_vline(x=x, line_width=2, line_dash="dash", line_color="red", opacity=0.7)
    fig.add_vline(x=summary.mean, line_width=2, line_dash="dot", line_color="black")

    fig.update_layout(
        title=f"Bootstrap Distribution of the {statistic_name.title()} "
        f"({summary.count:,} resamples)",
        xaxis_title=f"{statistic_name.title()} Value",
        yaxis_title="Count",
        bargap=0.02,
        height=350,
        showlegend=False,
        margin=dict(l=40, r=20, t=50, b=40),
    )
    return fig
