"""
Streamlit building blocks for the KPI dashboard.

Every render_* function draws one part of the page and returns whatever the
user chose there. None of them compute KPIs; they only read the summary
document (through kpis.views and writers.tables).
"""

from __future__ import annotations

from typing import List, Tuple

import pandas as pd
import streamlit as st

from config import ALL_REGIONS, DEFAULT_MAPPING_SHEET, DEFAULT_REGULATIONS_SHEET, SPEND_YEARS
from domain.summary import KPISummary
from kpis import RegionView, summary_to_json
from writers import summary_to_xlsx_bytes
from writers.tables import distribution_frame, regions_frame, regulations_frame

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def render_header() -> None:
    st.title("📦 Packaging Supplier Dashboard")
    st.markdown(
        '<p class="muted">Upload the supplier workbook to see regional counts, payment terms, '
        "contract status, top spend, recyclability, FSC certification and regulations.</p>",
        unsafe_allow_html=True,
    )


def render_file_uploader():
    return st.file_uploader("Excel file (.xlsx)", type=["xlsx"])


def render_sheet_inputs() -> Tuple[str, str]:
    """Sheet name inputs; the workbook must contain the mapping sheet."""
    col1, col2 = st.columns(2)
    with col1:
        mapping = st.text_input("Mapping sheet name", value=DEFAULT_MAPPING_SHEET)
    with col2:
        regulations = st.text_input("Regulations sheet name", value=DEFAULT_REGULATIONS_SHEET)
    return mapping.strip(), regulations.strip()


def render_process_button() -> bool:
    return st.button("🚀 Build dashboard", type="primary", width="stretch")


def render_warnings(summary: KPISummary) -> None:
    for warning in summary.get("warnings", []):
        st.warning(warning)


def render_controls(regions: List[str]) -> Tuple[str, int]:
    col1, col2 = st.columns(2)
    with col1:
        region = st.selectbox("Region", regions, index=0)
    with col2:
        year = st.selectbox("Year", list(SPEND_YEARS), index=len(SPEND_YEARS) - 1)
    return region, year


def render_kpi_cards(view: RegionView) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Suppliers", view.total_suppliers)
    c2.metric("Avg payment term", f"{round(view.avg_payment_days)} days")
    c3.metric("FSC certified", f"{view.fsc_percent:.1f}%")
    c4.metric(
        "Avg recyclability",
        f"{view.recyclability_avg * 100:.1f}%",
        help=f"Based on {view.recyclability_count} supplier(s) with data",
    )


def render_charts(summary: KPISummary, view: RegionView) -> None:
    label = "All regions" if view.region == ALL_REGIONS else view.region

    st.markdown(f'<div class="section-title">Top suppliers by spend ({view.year}): {label}</div>',
                unsafe_allow_html=True)
    if view.top_suppliers:
        top = pd.DataFrame(view.top_suppliers).rename(columns={"name": "Supplier", "spend": "Spend"})
        top["Supplier"] = top["Supplier"].astype(str)
        st.bar_chart(top, x="Supplier", y="Spend", horizontal=True)
    else:
        st.info("No numeric spend data for this selection.")

    left, right = st.columns(2)
    with left:
        st.markdown('<div class="section-title">Suppliers by region</div>', unsafe_allow_html=True)
        regions = regions_frame(summary)
        st.bar_chart(regions, x="Region", y="Suppliers")

        st.markdown('<div class="section-title">FSC certified by region (%)</div>', unsafe_allow_html=True)
        st.bar_chart(regions, x="Region", y="FSC %")

        st.markdown('<div class="section-title">Contracts</div>', unsafe_allow_html=True)
        contracts = pd.DataFrame(
            {"Status": ["Active", "No contract"], "Suppliers": [view.active_contracts, view.no_contract]}
        )
        st.bar_chart(contracts, x="Status", y="Suppliers")

    with right:
        st.markdown('<div class="section-title">Payment terms (days)</div>', unsafe_allow_html=True)
        st.bar_chart(distribution_frame(view.payment_distribution, "PT Days"), x="PT Days", y="Suppliers")

        st.markdown(
            f'<div class="section-title">Recycled content: avg {view.recycled_content_avg * 100:.1f}%</div>',
            unsafe_allow_html=True,
        )
        st.bar_chart(
            distribution_frame(view.recycled_content_distribution, "Recycled content"),
            x="Recycled content",
            y="Suppliers",
        )


def render_regulations(summary: KPISummary) -> None:
    st.markdown('<div class="section-title">Packaging regulations by jurisdiction</div>', unsafe_allow_html=True)
    frame = regulations_frame(summary)
    if frame.empty:
        st.info("No regulations available.")
        return
    st.dataframe(frame, hide_index=True, width="stretch")


def render_download_buttons(summary: KPISummary, base_filename: str) -> None:
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            label="📥 Download JSON",
            data=summary_to_json(summary),
            file_name=f"{base_filename}.json",
            mime="application/json",
            width="stretch",
        )
    with col2:
        st.download_button(
            label="📥 Download Excel report",
            data=summary_to_xlsx_bytes(summary),
            file_name=f"{base_filename}.xlsx",
            mime=XLSX_MIME,
            type="primary",
            width="stretch",
        )


def render_reset_button() -> bool:
    return st.button("🔄 Upload another file", type="secondary")
