"""
Payment term statistics.

Rows whose "PT Days" cell cannot be read as a number are left out of both the
averages and the distribution. An empty set averages to 0, which consumers
cannot tell apart from a genuine zero.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from domain import aliases
from domain.summary import PaymentTerms, Row
from fields.normalization import Number, coerce_number, first_present

from .grouping import RegionGroups

BUCKET_30 = "<=30"
BUCKET_60 = "<=60"
BUCKET_OVER_60 = ">60"


def payment_term_days(rows: Sequence[Row]) -> List[Number]:
    """Coercible payment term values in row order."""
    days = (coerce_number(first_present(r, aliases.PAYMENT_TERM_DAYS)) for r in rows)
    return [d for d in days if d is not None]


def average_payment_term(rows: Sequence[Row]) -> float:
    days = payment_term_days(rows)
    if not days:
        return 0
    return sum(days) / len(days)


def payment_term_distribution(rows: Sequence[Row]) -> Dict[str, int]:
    """Count payment terms into <=30, 31-60 and >60 day buckets."""
    dist = {BUCKET_30: 0, BUCKET_60: 0, BUCKET_OVER_60: 0}
    for days in payment_term_days(rows):
        if days <= 30:
            dist[BUCKET_30] += 1
        elif days <= 60:
            dist[BUCKET_60] += 1
        else:
            dist[BUCKET_OVER_60] += 1
    return dist


def payment_terms_kpi(rows: Sequence[Row], groups: RegionGroups) -> PaymentTerms:
    return PaymentTerms(
        avgDaysGlobal=average_payment_term(rows),
        distribution=payment_term_distribution(rows),
        avgByRegion={region: average_payment_term(members) for region, members in groups.items()},
    )
