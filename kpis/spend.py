"""
Top-spend supplier rankings.

Only cells holding a native number take part in a ranking; text such as
"n/a" or "1,200 EUR" and empty cells are skipped rather than treated as zero.
Ties keep their input order.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from config import SPEND_YEARS, TOP_N, UNKNOWN_LABEL
from domain import aliases
from domain.summary import RankedSupplier, Row
from fields.normalization import first_truthy, is_number

from .grouping import RegionGroups


def supplier_name(row: Row, name_keys: Iterable[str] = aliases.SUPPLIER_NAME) -> Any:
    """Display name from the first non-empty name column, else "Unknown"."""
    return first_truthy(row, name_keys, default=UNKNOWN_LABEL)


def top_n_by_key(
    rows: Sequence[Row],
    key: str,
    n: int = TOP_N,
    name_keys: Iterable[str] = aliases.SUPPLIER_NAME,
) -> List[RankedSupplier]:
    """Return up to `n` suppliers with the highest numeric value in column `key`."""
    ranked = sorted((r for r in rows if is_number(r.get(key))), key=lambda r: r[key], reverse=True)
    return [RankedSupplier(name=supplier_name(r, name_keys), spend=r[key]) for r in ranked[:n]]


def top_suppliers_kpi(
    rows: Sequence[Row],
    groups: RegionGroups,
    years: Sequence[int] = SPEND_YEARS,
    n: int = TOP_N,
) -> Dict[str, Any]:
    """
    Rankings per spend year, globally and per region.

    Shape: {"global2023": [...], "global2024": [...],
            "byRegion": {region: {"2023": [...], "2024": [...]}}}
    """
    result: Dict[str, Any] = {}
    for year in years:
        result[f"global{year}"] = top_n_by_key(rows, aliases.spend_column(year), n)

    result["byRegion"] = {
        region: {str(year): top_n_by_key(members, aliases.spend_column(year), n) for year in years}
        for region, members in groups.items()
    }
    return result
