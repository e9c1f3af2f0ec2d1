"""
EXCEL READER
------------
Reads workbook sheets into raw dict format with NO transformation.
Returns list of dicts keyed by the original column headers, or None when the
requested sheet does not exist (the caller decides whether that is fatal).
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Any, Dict, Iterable, List, Optional, Union

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)

WorkbookSource = Union[str, Path, bytes, IO[bytes]]


class WorkbookReadError(ValueError):
    """Raised when the uploaded file cannot be opened as an Excel workbook."""
    pass


def _open_workbook(source: WorkbookSource) -> Workbook:
    """Open a workbook from a path, raw bytes or a binary file-like object."""
    if isinstance(source, (str, Path)):
        path = Path(source).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(f"Excel file not found: {path}")
        source = path
    elif isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        return load_workbook(source, data_only=True)
    except Exception as e:
        raise WorkbookReadError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e


def _headers(header_cells: tuple) -> List[str]:
    """
    Stripped header names; blanks become col_<n>, repeats get the first free
    _<k> suffix so a renamed column never collides with a real header.
    """
    headers: List[str] = []
    seen: Dict[str, int] = {}
    for c, h in enumerate(header_cells, start=1):
        base = str(h).strip() if h not in (None, "") else f"col_{c}"
        name = base
        while name in seen:
            seen[base] += 1
            name = f"{base}_{seen[base]}"
        seen[name] = 0
        headers.append(name)
    return headers


def _sheet_rows(ws: Worksheet) -> List[Dict[str, Any]]:
    """Convert one worksheet to row dicts, skipping rows where every cell is empty."""
    values = ws.iter_rows(values_only=True)

    first = next(values, None)
    if first is None:
        return []
    headers = _headers(first)

    rows: List[Dict[str, Any]] = []
    for cells in values:
        row: Dict[str, Any] = {}
        is_empty = True

        for c, header in enumerate(headers):
            value = cells[c] if c < len(cells) else None
            if value == "":
                value = None
            if value is not None:
                is_empty = False
            row[header] = value

        if not is_empty:
            rows.append(row)

    logger.debug("Read %d rows from sheet %r", len(rows), ws.title)
    return rows


def list_sheet_names(source: WorkbookSource) -> List[str]:
    """Return the sheet names of a workbook in tab order."""
    wb = _open_workbook(source)
    try:
        return list(wb.sheetnames)
    finally:
        wb.close()


def read_sheets(source: WorkbookSource, sheet_names: Iterable[str]) -> Dict[str, Optional[List[Dict[str, Any]]]]:
    """
    Read several named sheets from one workbook, opening it only once.

    Returns:
        Mapping of each requested name to its rows, or to None if the sheet is missing
    """
    wb = _open_workbook(source)
    try:
        result: Dict[str, Optional[List[Dict[str, Any]]]] = {}
        for name in sheet_names:
            if name in wb.sheetnames:
                result[name] = _sheet_rows(wb[name])
            else:
                logger.debug("Sheet %r not found (available: %s)", name, wb.sheetnames)
                result[name] = None
        return result
    finally:
        wb.close()


def read_excel(source: WorkbookSource, sheet_name: str | None = None) -> Optional[List[Dict[str, Any]]]:
    """
    Read a sheet where row 1 = headers, rows 2+ = data.

    Args:
        source: Path, raw bytes or binary file-like object of an .xlsx workbook
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        List of row dicts with original headers as keys (empty cells are None),
        or None if `sheet_name` is not in the workbook

    Raises:
        FileNotFoundError: If a path is given and doesn't exist
        WorkbookReadError: If the input is not a valid Excel file
    """
    if sheet_name is not None:
        return read_sheets(source, [sheet_name])[sheet_name]

    wb = _open_workbook(source)
    try:
        return _sheet_rows(wb.worksheets[0])
    finally:
        wb.close()
