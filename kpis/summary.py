"""
KPI summary assembly.

Merges the individual aggregators into the single KPISummary document for one
uploaded workbook.

Key behaviors:
- The mapping (supplier) sheet is mandatory: if it is absent a SheetNotFoundError
  is raised and no partial summary is produced.
- The regulations sheet is optional: if it is absent the regulation index is
  empty and a warning is attached to the summary instead.
- Cells that fail numeric/percentage coercion are skipped per metric and never
  abort the run.
"""

from __future__ import annotations

import json
import logging
from typing import Optional, Sequence

from config import DEFAULT_MAPPING_SHEET, DEFAULT_REGULATIONS_SHEET, SPEND_YEARS, TOP_N
from domain.summary import KPISummary, Row, SummaryMeta
from input_readers import read_sheets
from input_readers.excel import WorkbookSource

from .contracts import contracts_kpi
from .fsc import fsc_kpi
from .grouping import group_by_region
from .payment_terms import payment_terms_kpi
from .recyclability import recyclability_kpi, recycled_content_kpi
from .regulations import index_regulations
from .spend import top_suppliers_kpi
from .suppliers import count_suppliers

logger = logging.getLogger(__name__)


class KPIError(RuntimeError):
    """Base class for errors that stop a KPI summary from being produced."""
    pass


class SheetNotFoundError(KPIError):
    """Raised when the mandatory supplier mapping sheet is not in the workbook."""

    def __init__(self, sheet_name: str):
        super().__init__(f'Sheet "{sheet_name}" not found')
        self.sheet_name = sheet_name


def missing_regulations_warning(sheet_name: str) -> str:
    return f'Sheet "{sheet_name}" not found. Regulations section will be empty.'


def build_kpi_summary(
    mapping_rows: Optional[Sequence[Row]],
    regulation_rows: Optional[Sequence[Row]],
    mapping_sheet_name: str = DEFAULT_MAPPING_SHEET,
    regulations_sheet_name: str = DEFAULT_REGULATIONS_SHEET,
    years: Sequence[int] = SPEND_YEARS,
    top_n: int = TOP_N,
) -> KPISummary:
    """
    Compute every KPI from already-parsed sheet rows.

    Args:
        mapping_rows: Supplier rows, or None if the mapping sheet was not found
        regulation_rows: Regulation rows, or None if that sheet was not found
        mapping_sheet_name: Name echoed in `meta` and used in error messages
        regulations_sheet_name: Name echoed in `meta` and used in the warning
        years: Spend years to rank suppliers for
        top_n: Ranking length

    Raises:
        SheetNotFoundError: If `mapping_rows` is None
    """
    if mapping_rows is None:
        raise SheetNotFoundError(mapping_sheet_name)

    warnings = []
    if regulation_rows is None:
        logger.warning("Regulations sheet %r not found; continuing without it", regulations_sheet_name)
        warnings.append(missing_regulations_warning(regulations_sheet_name))
        regulation_rows = []

    groups = group_by_region(mapping_rows)
    logger.debug("Aggregating %d supplier rows across %d regions", len(mapping_rows), len(groups))

    total, by_region = count_suppliers(mapping_rows, groups)

    return KPISummary(
        meta=SummaryMeta(
            mappingSheetName=mapping_sheet_name,
            regulationsSheetName=regulations_sheet_name,
        ),
        warnings=warnings,
        totalSuppliers=total,
        suppliersByRegion=by_region,
        paymentTerms=payment_terms_kpi(mapping_rows, groups),
        contracts=contracts_kpi(mapping_rows),
        topSuppliers=top_suppliers_kpi(mapping_rows, groups, years, top_n),
        recyclability=recyclability_kpi(mapping_rows),
        recycledContent=recycled_content_kpi(mapping_rows),
        fscCertification=fsc_kpi(mapping_rows, groups),
        regulations=index_regulations(regulation_rows),
    )


def summarize_workbook(
    source: WorkbookSource,
    mapping_sheet_name: str | None = None,
    regulations_sheet_name: str | None = None,
) -> KPISummary:
    """Read both sheets from a workbook and build its KPI summary (blank names use the defaults)."""
    mapping_sheet_name = mapping_sheet_name or DEFAULT_MAPPING_SHEET
    regulations_sheet_name = regulations_sheet_name or DEFAULT_REGULATIONS_SHEET

    sheets = read_sheets(source, [mapping_sheet_name, regulations_sheet_name])

    return build_kpi_summary(
        sheets[mapping_sheet_name],
        sheets[regulations_sheet_name],
        mapping_sheet_name=mapping_sheet_name,
        regulations_sheet_name=regulations_sheet_name,
    )


def summary_to_json(summary: KPISummary, indent: int | None = 2) -> str:
    """Serialize a summary for download or API responses."""
    return json.dumps(summary, indent=indent, ensure_ascii=False, default=str)
