"""
Streamlit Dashboard for the Trivia service.

Two screens:
- Dashboard: total number of players
- Players: player list with a date filter and CSV export

All data work happens in src/ (fetch, filter, format, export); this file
only wires widgets to the screen state.

Run:
    streamlit run streamlit_app/app.py
"""

import streamlit as st

from config.dashboard_config import get_config
from src.clients.trivia_client import TriviaClient
from src.logging import get_logger
from src.models.date_range import DateRange
from src.services.export import ExportFile, export_players
from src.services.formatting import players_to_frame
from src.state.screens import (
    FiltersCleared,
    RangeChanged,
    ScreenStatus,
    load_players,
    load_summary,
    reduce_players,
)

config = get_config()

# Page config
st.set_page_config(
    page_title="Trivia Dashboard",
    page_icon="🧠",
    layout="wide",
    initial_sidebar_state="expanded"
)


def get_client() -> TriviaClient:
    if "client" not in st.session_state:
        st.session_state.client = TriviaClient()
    return st.session_state.client


def clear_filters():
    """Reset both date inputs and the stored range."""
    st.session_state.start_date = None
    st.session_state.end_date = None
    st.session_state.players_state = reduce_players(
        st.session_state.players_state, FiltersCleared()
    )
    st.session_state.staged_export = None


def render_dashboard():
    st.title("🧠 Trivia Dashboard")

    # Fetch once per session
    if "summary_state" not in st.session_state:
        with st.spinner("Loading..."):
            st.session_state.summary_state = load_summary(get_client())
    state = st.session_state.summary_state

    if state.status is ScreenStatus.ERROR:
        st.error(state.error)
        return

    col1, _ = st.columns([1, 3])
    with col1:
        st.metric("Total Players", state.total_count)


def render_players():
    st.title("👥 Players List")

    if "players_state" not in st.session_state:
        with st.spinner("Loading players..."):
            st.session_state.players_state = load_players(get_client())
    state = st.session_state.players_state

    if state.status is ScreenStatus.ERROR:
        st.error(state.error)
        return

    # Filters
    st.subheader("Filter by Date")
    st.session_state.setdefault("start_date", None)
    st.session_state.setdefault("end_date", None)
    col1, col2 = st.columns(2)
    with col1:
        start = st.date_input("Start Date:", key="start_date")
    with col2:
        end = st.date_input("End Date:", key="end_date")

    date_range = DateRange(start=start, end=end)
    if date_range != state.date_range:
        state = reduce_players(state, RangeChanged(date_range))
        st.session_state.players_state = state
        st.session_state.staged_export = None
        get_logger().filter_applied(date_range, state.filtered_count, state.total_count)

    if state.is_filtered:
        st.button("Clear Filters", on_click=clear_filters)

    st.markdown("---")
    st.caption(state.summary_line())

    filtered = state.filtered_players
    if not filtered:
        st.info("No players found")
    else:
        frame = players_to_frame(
            filtered,
            placeholder=config.score_placeholder,
            zero_is_missing=config.treat_zero_score_as_missing,
        )
        st.dataframe(frame, use_container_width=True, hide_index=True)

    # Export
    if st.button("Export CSV", disabled=not filtered):
        staged: list[ExportFile] = []
        export_players(filtered, staged.append)
        st.session_state.staged_export = staged[0] if staged else None

    export_file = st.session_state.get("staged_export")
    if export_file is not None:
        st.download_button(
            "⬇️ Download CSV",
            data=export_file.content,
            file_name=export_file.filename,
            mime=export_file.mime_type,
        )


# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.radio("Select Page", ["Dashboard", "Players"])

    st.markdown("---")
    st.caption(f"Source: {config.players_endpoint}")

if page == "Dashboard":
    render_dashboard()
else:
    render_players()
