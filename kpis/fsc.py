from __future__ import annotations

from typing import Sequence

from domain import aliases
from domain.summary import FSCCertification, Row
from fields.normalization import first_truthy, normalize_text

from .grouping import RegionGroups


def is_fsc_certified(row: Row) -> bool:
    """A supplier is certified when its certificate cell says yes, valid, or is exactly "FSC"."""
    cert = normalize_text(first_truthy(row, aliases.FSC_CERTIFICATE))
    if not cert:
        return False
    return "yes" in cert or cert == "fsc" or "valid" in cert


def certified_percent(rows: Sequence[Row]) -> float:
    """Share of certified rows as 0-100; 0 for an empty set."""
    if not rows:
        return 0
    return sum(1 for r in rows if is_fsc_certified(r)) / len(rows) * 100


def fsc_kpi(rows: Sequence[Row], groups: RegionGroups) -> FSCCertification:
    return FSCCertification(
        percentGlobal=certified_percent(rows),
        percentByRegion={region: certified_percent(members) for region, members in groups.items()},
    )
