from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple

from domain.summary import Row

from .grouping import RegionGroups


def count_suppliers(rows: Sequence[Row], groups: RegionGroups) -> Tuple[int, Dict[Any, int]]:
    """Total row count and row count per region group."""
    return len(rows), {region: len(members) for region, members in groups.items()}
