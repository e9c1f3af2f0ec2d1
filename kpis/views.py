"""
Region/year selection over a finished KPI summary.

The dashboard shows either the global figures ("All") or one region's slice.
Only supplier counts, average payment term, FSC share and the top-spend list
have per-region values; the remaining KPIs are always global. Regions that
are not in the summary read as zero / empty, never as an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from config import ALL_REGIONS, SPEND_YEARS
from domain.summary import KPISummary, RankedSupplier


@dataclass
class RegionView:
    region: str
    year: int
    total_suppliers: int = 0
    avg_payment_days: float = 0
    payment_distribution: Dict[str, int] = field(default_factory=dict)
    active_contracts: int = 0
    no_contract: int = 0
    top_suppliers: List[RankedSupplier] = field(default_factory=list)
    recyclability_avg: float = 0
    recyclability_count: int = 0
    recycled_content_avg: float = 0
    recycled_content_distribution: Dict[str, int] = field(default_factory=dict)
    fsc_percent: float = 0


def available_regions(summary: KPISummary) -> List[str]:
    return [ALL_REGIONS, *summary.get("suppliersByRegion", {}).keys()]


def select_view(summary: KPISummary, region: str = ALL_REGIONS, year: int = SPEND_YEARS[-1]) -> RegionView:
    payment = summary.get("paymentTerms", {})
    contracts = summary.get("contracts", {})
    top = summary.get("topSuppliers", {})
    fsc = summary.get("fscCertification", {})
    recyclability = summary.get("recyclability", {})
    recycled = summary.get("recycledContent", {})

    view = RegionView(
        region=region,
        year=year,
        payment_distribution=dict(payment.get("distribution", {})),
        active_contracts=contracts.get("activeCount", 0),
        no_contract=contracts.get("noContractCount", 0),
        recyclability_avg=recyclability.get("globalAvg", 0),
        recyclability_count=recyclability.get("dataCount", 0),
        recycled_content_avg=recycled.get("globalAvg", 0),
        recycled_content_distribution=dict(recycled.get("distribution", {})),
    )

    if region == ALL_REGIONS:
        view.total_suppliers = summary.get("totalSuppliers", 0)
        view.avg_payment_days = payment.get("avgDaysGlobal", 0)
        view.top_suppliers = list(top.get(f"global{year}", []))
        view.fsc_percent = fsc.get("percentGlobal", 0)
    else:
        view.total_suppliers = summary.get("suppliersByRegion", {}).get(region, 0)
        view.avg_payment_days = payment.get("avgByRegion", {}).get(region, 0)
        view.top_suppliers = list(top.get("byRegion", {}).get(region, {}).get(str(year), []))
        view.fsc_percent = fsc.get("percentByRegion", {}).get(region, 0)

    return view
