"""
Column-name aliases per logical field.

Supplier workbooks are maintained by hand, so the same concept shows up under
several headers (including a long-lived typo in the recycled content column).
Each logical field is an ordered tuple of accepted headers; lookups are
case-sensitive and the first match wins.
"""

from __future__ import annotations

from typing import Tuple

Aliases = Tuple[str, ...]

REGION: Aliases = ("Region",)

SUPPLIER_NAME: Aliases = ("Supplier", "Supplier Name", "Parent supplier")
PAYMENT_TERM_DAYS: Aliases = ("PT Days",)
CONTRACT_STATUS: Aliases = ("Contract status",)
RECYCLABILITY: Aliases = ("Recyclability %",)
RECYCLED_CONTENT: Aliases = (
    "Recycled materia contentl %",
    "Recycled content %",
    "Recycled material content %",
)
FSC_CERTIFICATE: Aliases = ("FSC Certificate/ Equivalent", "FSC Certificate", "FSC")

JURISDICTION: Aliases = ("Jurisdiction", "Country", "JURISDICTION")
REGULATION_TYPE: Aliases = ("Type (EPR / SUP / DRS / Tax / Design)", "Type", "RegType")
REGULATION_STATUS: Aliases = ("Status", "RegStatus")


def spend_column(year: int) -> str:
    """Header of the spend column for a given year, e.g. '2024 Spend'."""
    return f"{year} Spend"
