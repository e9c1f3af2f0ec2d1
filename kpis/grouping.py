"""Partition supplier rows by their Region column."""

from __future__ import annotations

from typing import Dict, List, Sequence

from config import UNSPECIFIED_REGION
from domain import aliases
from domain.summary import Row
from fields.normalization import first_truthy

RegionGroups = Dict[str, List[Row]]


def region_of(row: Row) -> str:
    """The row's Region value as text (otherwise untouched), or "Unspecified" when the cell is empty."""
    region = first_truthy(row, aliases.REGION)
    return str(region) if region else UNSPECIFIED_REGION


def group_by_region(rows: Sequence[Row]) -> RegionGroups:
    """
    Group rows by region in a single pass.

    Region values are used as text without trimming or case folding, so "EU"
    and "eu " form separate groups while a numeric 1 and the text "1" share
    one. Groups appear in order of first occurrence and keep the input order
    of their rows.
    """
    groups: RegionGroups = {}
    for row in rows:
        groups.setdefault(region_of(row), []).append(row)
    return groups
