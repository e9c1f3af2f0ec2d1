# interface/app.py
"""
Packaging Supplier Dashboard - Main Application

Streamlit interface: upload a supplier workbook, build its KPI summary and
explore it by region and spend year.

Run from the repository root:
    streamlit run interface/app.py
"""

import sys
from pathlib import Path

import streamlit as st

sys.path.append(str(Path(__file__).parent.parent))
from config.logging_config import configure_logging  # noqa: E402
from interface.components import (  # noqa: E402
    render_charts,
    render_controls,
    render_download_buttons,
    render_file_uploader,
    render_header,
    render_kpi_cards,
    render_process_button,
    render_regulations,
    render_reset_button,
    render_sheet_inputs,
    render_warnings,
)
from interface.styles import get_custom_css  # noqa: E402
from kpis import available_regions, select_view  # noqa: E402
from processor import process_uploaded_file  # noqa: E402

configure_logging()

# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Packaging Supplier Dashboard",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ============================================================================
# APPLY STYLES
# ============================================================================
st.markdown(get_custom_css(), unsafe_allow_html=True)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "summary" not in st.session_state:
    st.session_state.summary = None
if "source_name" not in st.session_state:
    st.session_state.source_name = None

# ============================================================================
# UPLOAD SECTION
# ============================================================================
render_header()

if st.session_state.summary is None:
    uploaded_file = render_file_uploader()
    mapping_sheet, regulations_sheet = render_sheet_inputs()

    if uploaded_file and render_process_button():
        with st.spinner("🔄 Crunching the workbook..."):
            success, summary, error = process_uploaded_file(
                uploaded_file,
                mapping_sheet_name=mapping_sheet,
                regulations_sheet_name=regulations_sheet,
            )

        if success:
            st.session_state.summary = summary
            st.session_state.source_name = Path(uploaded_file.name).stem
            st.rerun()
        else:
            st.error(f"❌ Error: {error}")

# ============================================================================
# DASHBOARD SECTION
# ============================================================================
if st.session_state.summary is not None:
    summary = st.session_state.summary

    render_warnings(summary)

    region, year = render_controls(available_regions(summary))
    view = select_view(summary, region, year)

    render_kpi_cards(view)
    render_charts(summary, view)
    render_regulations(summary)

    render_download_buttons(summary, base_filename=f"{st.session_state.source_name}-kpis")

    if render_reset_button():
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()
