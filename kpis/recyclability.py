"""
Recyclability and recycled content KPIs.

Both averages use only cells that coerce to a 0-1 fraction. The recycled
content distribution, on the other hand, accounts for every row:

- numeric cells  -> rounded whole percent label, e.g. 0.853 -> "85%"
- missing cells  -> "undefined"
- anything else  -> the cell text itself, trimmed (e.g. "TBC")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from domain import aliases
from domain.summary import Recyclability, RecycledContent, Row
from fields.normalization import coerce_percent_fraction, first_present, round_half_up

ABSENT_LABEL = "undefined"


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0


def recyclability_kpi(rows: Sequence[Row]) -> Recyclability:
    fractions = [coerce_percent_fraction(first_present(r, aliases.RECYCLABILITY)) for r in rows]
    valid = [f for f in fractions if f is not None]
    return Recyclability(globalAvg=_mean(valid), dataCount=len(valid))


@dataclass(frozen=True)
class RecycledContentBucket:
    """Distribution key for one recycled content cell."""

    kind: str  # "percent" | "literal" | "absent"
    label: str

    @classmethod
    def for_value(cls, value: Any) -> "RecycledContentBucket":
        if value is None:
            return cls("absent", ABSENT_LABEL)
        fraction = coerce_percent_fraction(value)
        if fraction is not None:
            return cls("percent", f"{round_half_up(fraction * 100)}%")
        return cls("literal", str(value).strip())


def recycled_content_values(rows: Sequence[Row]) -> List[Any]:
    return [first_present(r, aliases.RECYCLED_CONTENT) for r in rows]


def recycled_content_distribution(values: Sequence[Any]) -> Dict[str, int]:
    dist: Dict[str, int] = {}
    for value in values:
        label = RecycledContentBucket.for_value(value).label
        dist[label] = dist.get(label, 0) + 1
    return dist


def recycled_content_kpi(rows: Sequence[Row]) -> RecycledContent:
    values = recycled_content_values(rows)
    fractions = [coerce_percent_fraction(v) for v in values]
    return RecycledContent(
        globalAvg=_mean([f for f in fractions if f is not None]),
        distribution=recycled_content_distribution(values),
    )
