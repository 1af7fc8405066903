"""Streamlit page for exploring BLS labor statistics.

Views:
- All Data: headline national and inflation series plus Florida
- National: every national and inflation series
- States: unemployment and nonfarm employment for one state
"""

import asyncio
import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from labor_stats_explorer.analysis import (
    apply_filters,
    compute_options,
    key_series_loaded,
    next_selection,
    search_transition,
    summarize,
)
from labor_stats_explorer.config import DEFAULT_CATALOG, Settings
from labor_stats_explorer.data import BlsFetcher, DataAcquisition, ExplorerStore
from labor_stats_explorer.models import (
    ALL,
    VIEW_ALL,
    VIEW_NATIONAL,
    VIEW_STATES,
    DataPoint,
    FilterSelection,
    SeriesStatistics,
)


VIEW_LABELS = {
    VIEW_ALL: "All Data",
    VIEW_NATIONAL: "National",
    VIEW_STATES: "States",
}


def records_to_frame(records: list[DataPoint]) -> pd.DataFrame:
    """Flatten records for the table view."""
    return pd.DataFrame(
        [
            {
                "Series": r.name,
                "Year": r.year,
                "Period": r.period_name,
                "Value": r.value,
                "Unit": r.unit,
                "Footnotes": ", ".join(fn.text for fn in r.footnotes),
            }
            for r in records
        ],
        columns=["Series", "Year", "Period", "Value", "Unit", "Footnotes"],
    )


def period_label(period: str) -> str:
    """'M03' -> 'Month 03'."""
    return period.replace("M", "Month ", 1) if period.startswith("M") else period


# =============================================================================
# SESSION STATE
# =============================================================================

def init_state() -> None:
    """Create the store and default selections once per session."""
    if "store" in st.session_state:
        return
    settings = Settings()
    fetcher = BlsFetcher(settings)
    st.session_state.store = ExplorerStore(DataAcquisition(fetcher, settings))
    st.session_state.view = VIEW_ALL
    st.session_state.selection = FilterSelection.initial(VIEW_ALL)
    st.session_state.search_query = ""
    st.session_state.fetched_key = None
    st.session_state.show_data_grid = False


async def run_fetch_cycle(store: ExplorerStore, view: str, selection: FilterSelection) -> None:
    """Refresh the store; the HTTP client is closed so the next cycle can use a new loop."""
    try:
        await store.refresh(view, selection)
    finally:
        await store.acquisition.fetcher.close()


def ensure_data(store: ExplorerStore) -> None:
    """Refetch whenever the view or any filter differs from the last cycle."""
    key = (st.session_state.view, st.session_state.selection)
    if st.session_state.fetched_key == key:
        return
    with st.spinner("Loading BLS data..."):
        asyncio.run(run_fetch_cycle(store, *key))
    st.session_state.fetched_key = key


def change_view(view: str) -> None:
    st.session_state.view = view
    st.session_state.selection = FilterSelection.initial(view)
    st.session_state.search_query = ""
    st.session_state.show_data_grid = view == VIEW_ALL


def submit_search(text: str, state_names: list[str]) -> None:
    """Apply the submitted search; a state name jumps to that state's view."""
    st.session_state.search_query = text
    view, selection = search_transition(
        text, st.session_state.view, st.session_state.selection, state_names
    )
    if view != st.session_state.view or selection != st.session_state.selection:
        st.session_state.view = view
        st.session_state.selection = selection
        st.session_state.show_data_grid = True


def reset_filters() -> None:
    st.session_state.search_query = ""
    st.session_state.selection = FilterSelection.initial(st.session_state.view)


# =============================================================================
# RENDERING
# =============================================================================

def render_header(all_loaded: bool) -> None:
    badge_color = "#10b981" if all_loaded else "#f59e0b"
    badge_text = "Key series loaded" if all_loaded else "Some key series missing"
    st.markdown(
        f"""<div style="display: flex; justify-content: space-between; align-items: center; padding: 0.5rem 0 1rem 0; border-bottom: 1px solid #334155; margin-bottom: 1rem;">
            <div>
                <h1 style="margin: 0; font-size: 1.5rem; color: #f1f5f9;">BLS Data Explorer</h1>
                <div style="color: #64748b; font-size: 0.75rem; margin-top: 0.25rem;">Labor statistics from the Bureau of Labor Statistics</div>
            </div>
            <div style="color: {badge_color}; font-size: 0.75rem; text-align: right;">
                {badge_text}<br>Updated {datetime.now().strftime('%H:%M')}
            </div>
        </div>""",
        unsafe_allow_html=True,
    )


def render_errors(store: ExplorerStore) -> None:
    """Top-level error with the per-series failures underneath."""
    if not store.error:
        return
    st.error(store.error)
    for message in store.visible_diagnostics:
        st.markdown(f"- {message}")


def _select(label: str, options: list[str], current: str, all_label: str, fmt=str) -> str:
    """Selectbox over the options, with an "all" entry first unless all_label is empty."""
    choices = [ALL, *options] if all_label else list(options)
    if current not in choices:
        choices.append(current)
    return st.selectbox(
        label,
        options=choices,
        index=choices.index(current),
        format_func=lambda v: all_label if v == ALL else fmt(v),
    )


def render_filters(store: ExplorerStore, state_names: list[str]) -> None:
    """Search form and dropdowns; updates the selection in session state."""
    view = st.session_state.view
    selection: FilterSelection = st.session_state.selection
    options = compute_options(store.records, view)

    with st.form("search", clear_on_submit=False):
        col_text, col_button = st.columns([5, 1])
        with col_text:
            placeholder = (
                "Search by state name (e.g. Florida, Texas)..."
                if view == VIEW_STATES
                else "Search data..."
            )
            text = st.text_input(
                "Search",
                value=st.session_state.search_query,
                placeholder=placeholder,
                label_visibility="collapsed",
            )
        with col_button:
            submitted = st.form_submit_button("Search")
    if submitted:
        submit_search(text, state_names)
        st.rerun()

    columns = st.columns(5 if view == VIEW_STATES else 4)
    with columns[0]:
        category = _select("Category", list(options.categories), selection.category, "All Categories")

    offset = 0
    subcategory = selection.subcategory
    if view == VIEW_STATES:
        offset = 1
        with columns[1]:
            subcategory = _select("State", state_names, selection.subcategory, "")

    with columns[1 + offset]:
        year = _select("Year", list(options.years), selection.year, "All Years")
    with columns[2 + offset]:
        period = _select(
            "Period", list(options.periods), selection.period, "All Periods", fmt=period_label
        )
    with columns[3 + offset]:
        st.write("")
        if st.button("Reset Filters"):
            reset_filters()
            st.rerun()

    new_selection = next_selection(
        view, selection, category=category, subcategory=subcategory, year=year, period=period
    )
    if new_selection.subcategory != selection.subcategory:
        st.session_state.show_data_grid = True

    if new_selection != selection:
        st.session_state.selection = new_selection
        st.rerun()


def render_statistics(stats: dict[str, SeriesStatistics]) -> None:
    """One panel per series with count, average, median, mode, min and max."""
    if not stats:
        st.info("No statistics available for the current selection")
        return

    st.markdown("### Statistics")
    columns = st.columns(min(3, len(stats)))
    for i, (series_id, s) in enumerate(stats.items()):
        descriptor = DEFAULT_CATALOG.get(series_id)
        name = descriptor.name if descriptor else series_id
        unit = descriptor.unit if descriptor else ""
        rows = "".join(
            f"""<div style="display: flex; justify-content: space-between; padding: 0.2rem 0; border-bottom: 1px solid #334155;">
                <span style="color: #94a3b8; font-size: 0.8rem;">{label}</span>
                <span style="color: #e2e8f0; font-family: 'SF Mono', monospace; font-size: 0.85rem;">{value}</span>
            </div>"""
            for label, value in (
                ("Data points", s.total_count),
                ("Average", s.average),
                ("Median", s.median),
                ("Mode", s.mode),
                ("Min", s.min),
                ("Max", s.max),
            )
        )
        with columns[i % len(columns)]:
            st.markdown(
                f"""<div style="background: #1e293b; border: 1px solid #334155; border-radius: 8px; padding: 1rem 1.5rem; margin-bottom: 1rem;">
                    <div style="color: #f1f5f9; font-weight: 600;">{name}</div>
                    <div style="color: #64748b; font-size: 0.7rem; margin-bottom: 0.5rem;">{unit}</div>
                    {rows}
                </div>""",
                unsafe_allow_html=True,
            )


def render_data_cards(records: list[DataPoint]) -> None:
    if not records:
        st.info("No data matches the current filters")
        return

    columns = st.columns(3)
    for i, r in enumerate(records):
        footnotes = "; ".join(fn.text for fn in r.footnotes)
        with columns[i % 3]:
            st.markdown(
                f"""<div style="background: #1e293b; border: 1px solid #334155; border-radius: 8px; padding: 0.75rem 1rem; margin-bottom: 0.75rem;">
                    <div style="color: #94a3b8; font-size: 0.7rem; text-transform: uppercase;">{r.category}</div>
                    <div style="color: #f1f5f9; font-weight: 600;">{r.name}</div>
                    <div style="color: #e2e8f0; font-size: 1.4rem; font-family: 'SF Mono', monospace;">{r.value or 'N/A'}</div>
                    <div style="color: #64748b; font-size: 0.75rem;">{r.period_name} {r.year} | {r.unit}</div>
                    <div style="color: #64748b; font-size: 0.7rem;">{footnotes}</div>
                </div>""",
                unsafe_allow_html=True,
            )


# =============================================================================
# MAIN APP
# =============================================================================

def main() -> None:
    """Main explorer entry point."""
    st.set_page_config(page_title="BLS Data Explorer", layout="wide")
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    init_state()
    store: ExplorerStore = st.session_state.store
    state_names = DEFAULT_CATALOG.state_names()

    views = list(VIEW_LABELS)
    view = st.radio(
        "View",
        options=views,
        index=views.index(st.session_state.view),
        format_func=VIEW_LABELS.get,
        horizontal=True,
        label_visibility="collapsed",
    )
    if view != st.session_state.view:
        change_view(view)
        st.rerun()

    ensure_data(store)

    filtered = apply_filters(
        store.records,
        st.session_state.view,
        st.session_state.selection,
        st.session_state.search_query,
    )
    stats = summarize(filtered)

    render_header(key_series_loaded(filtered))
    render_errors(store)
    if store.error:
        return

    render_filters(store, state_names)
    render_statistics(stats)

    show = st.toggle(
        f"Show detailed BLS data ({len(filtered)} records)",
        value=st.session_state.show_data_grid,
    )
    st.session_state.show_data_grid = show
    if show:
        as_table = st.toggle("Table view", value=False)
        if as_table:
            st.dataframe(records_to_frame(filtered), use_container_width=True, hide_index=True)
        else:
            render_data_cards(filtered)


if __name__ == "__main__":
    main()
