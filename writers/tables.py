"""
Tabular views of a KPI summary.

Each function flattens one section of the summary into a pandas DataFrame.
The same frames feed the dashboard charts and the Excel export, so both show
identical figures.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from config import SPEND_YEARS
from domain.summary import KPISummary


def overview_frame(summary: KPISummary) -> pd.DataFrame:
    rec = summary["recyclability"]
    rows = [
        ("Mapping sheet", summary["meta"]["mappingSheetName"]),
        ("Regulations sheet", summary["meta"]["regulationsSheetName"]),
        ("Total suppliers", summary["totalSuppliers"]),
        ("Average payment term (days)", round(summary["paymentTerms"]["avgDaysGlobal"], 2)),
        ("Active contracts", summary["contracts"]["activeCount"]),
        ("No contract", summary["contracts"]["noContractCount"]),
        ("Average recyclability %", round(rec["globalAvg"] * 100, 1)),
        ("Suppliers with recyclability data", rec["dataCount"]),
        ("Average recycled content %", round(summary["recycledContent"]["globalAvg"] * 100, 1)),
        ("FSC certified %", round(summary["fscCertification"]["percentGlobal"], 1)),
    ]
    rows.extend(("Warning", w) for w in summary["warnings"])
    return pd.DataFrame(rows, columns=["Metric", "Value"])


def regions_frame(summary: KPISummary) -> pd.DataFrame:
    """One row per region: supplier count, average payment term, FSC share."""
    avg_pt = summary["paymentTerms"]["avgByRegion"]
    fsc = summary["fscCertification"]["percentByRegion"]
    return pd.DataFrame(
        [
            {
                "Region": region,
                "Suppliers": count,
                "Avg PT Days": round(avg_pt.get(region, 0), 2),
                "FSC %": round(fsc.get(region, 0), 1),
            }
            for region, count in summary["suppliersByRegion"].items()
        ],
        columns=["Region", "Suppliers", "Avg PT Days", "FSC %"],
    )


def distribution_frame(distribution: Dict[str, int], label: str) -> pd.DataFrame:
    return pd.DataFrame(list(distribution.items()), columns=[label, "Suppliers"])


def top_suppliers_frame(summary: KPISummary, years=SPEND_YEARS) -> pd.DataFrame:
    """Long format: scope (Global or region), year, rank, supplier, spend."""
    top = summary["topSuppliers"]
    records: List[Dict[str, Any]] = []

    def add(scope: Any, year: int, ranked) -> None:
        for rank, item in enumerate(ranked, start=1):
            records.append(
                {"Scope": scope, "Year": year, "Rank": rank, "Supplier": item["name"], "Spend": item["spend"]}
            )

    for year in years:
        add("Global", year, top.get(f"global{year}", []))
    for region, per_year in top.get("byRegion", {}).items():
        for year in years:
            add(region, year, per_year.get(str(year), []))

    return pd.DataFrame(records, columns=["Scope", "Year", "Rank", "Supplier", "Spend"])


def regulations_frame(summary: KPISummary) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Jurisdiction": jurisdiction, "Type": entry["type"], "Status": entry["status"]}
            for jurisdiction, entries in summary["regulations"].items()
            for entry in entries
        ],
        columns=["Jurisdiction", "Type", "Status"],
    )


def summary_frames(summary: KPISummary) -> Dict[str, pd.DataFrame]:
    """All report tables keyed by sheet title, in display order."""
    return {
        "Overview": overview_frame(summary),
        "Regions": regions_frame(summary),
        "Payment Terms": distribution_frame(summary["paymentTerms"]["distribution"], "PT Days"),
        "Top Suppliers": top_suppliers_frame(summary),
        "Recycled Content": distribution_frame(summary["recycledContent"]["distribution"], "Recycled content"),
        "Regulations": regulations_frame(summary),
    }
