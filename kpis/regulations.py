"""
Regulation index by jurisdiction.

Built from the optional regulations sheet, independently of supplier rows.
Rows without a jurisdiction are skipped, jurisdictions are keyed as text,
and a missing type or status becomes "Unknown".
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from config import UNKNOWN_LABEL
from domain import aliases
from domain.summary import RegulationEntry, Row
from fields.normalization import first_truthy


def index_regulations(rows: Sequence[Row]) -> Dict[str, List[RegulationEntry]]:
    index: Dict[str, List[RegulationEntry]] = {}
    for row in rows:
        jurisdiction = first_truthy(row, aliases.JURISDICTION)
        if not jurisdiction:
            continue

        entry = RegulationEntry(
            type=first_truthy(row, aliases.REGULATION_TYPE, default=UNKNOWN_LABEL),
            status=first_truthy(row, aliases.REGULATION_STATUS, default=UNKNOWN_LABEL),
        )
        index.setdefault(str(jurisdiction), []).append(entry)
    return index
