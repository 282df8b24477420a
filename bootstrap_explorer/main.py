import logging
from typing import Optional

import pandas as pd
import streamlit as st

from bootstrap_explorer import config
from bootstrap_explorer.config import ExplorerConfig
from bootstrap_explorer.errors import BootstrapError, InsufficientData
from bootstrap_explorer.generators import DISTRIBUTION_LABELS, Distribution
from bootstrap_explorer.plots import plot_bootstrap_histogram, plot_sample_histogram
from bootstrap_explorer.resampling import StatisticKind
from bootstrap_explorer.session import BootstrapSession
from bootstrap_explorer.summary import Interval, SummaryRecord

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"


# --- Helper Functions ---


def get_session() -> BootstrapSession:
    """Keeps one BootstrapSession per browser session in st.session_state."""
    if "bootstrap_session" not in st.session_state:
        st.session_state.bootstrap_session = BootstrapSession(ExplorerConfig())
    return st.session_state.bootstrap_session


def fmt_value(value: Optional[float], decimals: int = config.LABEL_DECIMALS) -> str:
    return PLACEHOLDER if value is None else f"{value:.{decimals}f}"


def fmt_interval(
    interval: Optional[Interval], decimals: int = config.LABEL_DECIMALS
) -> str:
    if interval is None:
        return f"[ {PLACEHOLDER}, {PLACEHOLDER} ]"
    return f"[ {interval.low:.{decimals}f}, {interval.high:.{decimals}f} ]"


def safe_bootstrap_summary(
    session: BootstrapSession, kind: StatisticKind
) -> Optional[SummaryRecord]:
    try:
        return session.summarize_bootstrap(kind)
    except InsufficientData:
        return None


def build_comparison_table(
    sample_summary: Optional[SummaryRecord],
    boot_mean: Optional[SummaryRecord],
    boot_var: Optional[SummaryRecord],
) -> pd.DataFrame:
    """Empirical (analytic) column vs bootstrap column, as in the lecture notes."""
    s = sample_summary
    rows = [
        ("Mean", fmt_value(s and s.mean), fmt_value(boot_mean and boot_mean.mean)),
        (
            "Variance",
            fmt_value(s and s.variance),
            fmt_value(boot_var and boot_var.mean),
        ),
        (
            "95% CI for mean (normal)",
            fmt_interval(s and s.normal_interval),
            fmt_interval(boot_mean and boot_mean.normal_interval),
        ),
        (
            "95% CI for variance (normal)",
            fmt_interval(s and s.variance_interval),
            fmt_interval(boot_var and boot_var.normal_interval),
        ),
        (
            "95% CI for mean (percentile)",
            PLACEHOLDER,
            fmt_interval(boot_mean and boot_mean.percentile_interval),
        ),
        (
            "95% CI for variance (percentile)",
            PLACEHOLDER,
            fmt_interval(boot_var and boot_var.percentile_interval),
        ),
    ]
    return pd.DataFrame(rows, columns=["Quantity", "Empirical", "Bootstrap"])


# --- Page Sections ---


def render_sidebar(session: BootstrapSession) -> dict:
    st.sidebar.title("Configuration")

    st.sidebar.subheader("1. Data")
    labels = [DISTRIBUTION_LABELS[d] for d in Distribution]
    dist_label = st.sidebar.selectbox(
        "Distribution Type",
        labels,
        index=labels.index(session.distribution.label),
    )
    n = st.sidebar.slider(
        "Sample Size (n)",
        config.MIN_SAMPLE_SIZE,
        config.MAX_SAMPLE_SIZE,
        session.config.sample_size,
    )
    seed = st.sidebar.number_input(
        "Random Seed (0 = fresh randomness)", min_value=0, value=0, step=1
    )

    if st.sidebar.button("Generate New Sample", type="primary"):
        if seed:
            session = BootstrapSession(ExplorerConfig(seed=int(seed)))
            st.session_state.bootstrap_session = session
        try:
            session.generate_sample(Distribution.parse(dist_label), n)
        except BootstrapError as exc:
            st.sidebar.warning(str(exc))

    st.sidebar.markdown("---")
    st.sidebar.subheader("2. Bootstrap Settings")
    k = st.sidebar.number_input(
        "Resamples per Run",
        min_value=0,
        max_value=config.MAX_RESAMPLES_PER_RUN,
        value=session.config.resamples_per_run,
        step=10,
    )
    bins = st.sidebar.slider("Histogram Bins", 5, 60, session.config.num_bins)
    show_reference = st.sidebar.checkbox("Show reference density", value=True)

    with st.sidebar.expander("About the generators", expanded=False):
        st.markdown("""
        - **Gamma** draws are the sum of two exponentials, valid only for shape 2.
        - **Heavy-tailed** draws divide a normal by a *crude* chi-squared stand-in
          (uniform × df). They are heavy-tailed but not exact Student-t values.
        """)

    return {"k": int(k), "bins": bins, "show_reference": show_reference}


def render_header():
    st.title("🎓 Bootstrap Explorer: Mean and Variance")
    st.markdown("""
    Draw one synthetic sample, then **resample it with replacement** over and over.
    Each resample gives one mean and one variance; watch their distributions build up.
    """)

    with st.expander("📘 How it works (The Algorithm)"):
        st.markdown("""
        1. **Take the original sample** of size $n$.
        2. **Resample**: Draw $n$ values from the original sample *with replacement*.
        3. **Calculate**: Compute the mean and the variance of that same resample.
        4. **Repeat**: Every step adds one value to each bootstrap distribution.
        5. **Compare**: Percentile intervals read the 2.5% and 97.5% points off the
           bootstrap distribution; normal intervals use estimate ± 1.96 standard errors.
        """)


def render_sample_section(session: BootstrapSession, settings: dict):
    st.subheader("1. Original Sample")
    if not session.sample:
        st.info("👈 Choose a distribution and click 'Generate New Sample' to start.")
        return

    summary = session.summarize_sample()
    col1, col2 = st.columns([1, 2])
    with col1:
        st.metric("Sample Size (n)", summary.count)
        st.metric("Observed Mean", fmt_value(summary.mean))
        st.metric("Observed Variance", fmt_value(summary.variance))
        st.metric("Observed Std Dev", fmt_value(summary.sd))

    with col2:
        hist = session.histogram(session.sample, settings["bins"])
        fig = plot_sample_histogram(
            session.sample,
            hist,
            session.distribution,
            summary,
            show_reference=settings["show_reference"],
        )
        st.plotly_chart(fig, width="stretch")


def render_controls(session: BootstrapSession, settings: dict):
    c1, c2, c3, c4, c5 = st.columns(5)
    try:
        with c1:
            if st.button("Step", width="stretch"):
                session.bootstrap_step()
        with c2:
            if st.button(f"Run {settings['k']}", width="stretch"):
                session.run_steps(settings["k"])
        with c3:
            if st.button("Reset", width="stretch"):
                session.reset_bootstrap()
        with c4:
            if st.button("▶ Auto", width="stretch", disabled=session.auto_running):
                if not session.start_auto_run():
                    st.warning("Generate a non-empty sample first.")
        with c5:
            if st.button("⏸ Stop", width="stretch", disabled=not session.auto_running):
                session.stop_auto_run()
    except BootstrapError as exc:
        st.warning(str(exc))


def render_bootstrap_results(session: BootstrapSession, settings: dict):
    boot_mean = safe_bootstrap_summary(session, StatisticKind.MEAN)
    boot_var = safe_bootstrap_summary(session, StatisticKind.VARIANCE)

    m1, m2, m3 = st.columns(3)
    m1.metric("Resamples (B)", f"{session.num_resamples:,}")
    m2.metric("Bootstrap Mean", fmt_value(boot_mean and boot_mean.mean))
    m3.metric("Bootstrap Variance", fmt_value(boot_var and boot_var.mean))

    col_mean, col_var = st.columns(2)
    with col_mean:
        hist = session.histogram(
            session.statistic_values(StatisticKind.MEAN), settings["bins"]
        )
        st.plotly_chart(
            plot_bootstrap_histogram(hist, boot_mean, "mean", color="skyblue"),
            width="stretch",
        )
    with col_var:
        hist = session.histogram(
            session.statistic_values(StatisticKind.VARIANCE), settings["bins"]
        )
        st.plotly_chart(
            plot_bootstrap_histogram(hist, boot_var, "variance", color="orange"),
            width="stretch",
        )

    st.markdown("#### 🆚 Empirical vs Bootstrap")
    sample_summary = session.summarize_sample() if session.sample else None
    st.dataframe(
        build_comparison_table(sample_summary, boot_mean, boot_var),
        hide_index=True,
        width="stretch",
    )
    st.caption(
        "Blue solid lines: percentile interval. Red dashed lines: normal interval. "
        "Black dotted line: mean of the resamples."
    )
    st.info(session.interpretation())


def main():
    st.set_page_config(page_title="Bootstrap Explorer", page_icon="🎓", layout="wide")
    logging.basicConfig(level=logging.INFO)

    session = get_session()
    settings = render_sidebar(session)
    # The sidebar may have replaced the session (new seed).
    session = get_session()

    render_header()
    render_sample_section(session, settings)

    st.divider()
    st.subheader("2. Bootstrap Simulation")
    render_controls(session, settings)

    run_every = None
    if session.auto_running:
        run_every = session.auto_runner.interval_ms / 1000.0

    @st.fragment(run_every=run_every)
    def live_results():
        session.tick()
        render_bootstrap_results(session, settings)

    live_results()


def run():
    """Console-script entry point: launches the app through the Streamlit CLI."""
    import sys
    from pathlib import Path

    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve()), *sys.argv[1:]]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
