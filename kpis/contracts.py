"""
Contract status counts.

Matching is by substring on the lower-cased status, so "Active - Renewing"
counts as active. The two counts are independent: a status containing both
"active" and "no contract" is counted in each.
"""

from __future__ import annotations

from typing import Sequence

from domain import aliases
from domain.summary import Contracts, Row
from fields.normalization import first_present, normalize_text

ACTIVE = "active"
NO_CONTRACT = "no contract"


def _status(row: Row) -> str:
    return normalize_text(first_present(row, aliases.CONTRACT_STATUS))


def contracts_kpi(rows: Sequence[Row]) -> Contracts:
    statuses = [_status(r) for r in rows]
    return Contracts(
        activeCount=sum(1 for s in statuses if ACTIVE in s),
        noContractCount=sum(1 for s in statuses if NO_CONTRACT in s),
    )
