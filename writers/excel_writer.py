"""
Excel export of a KPI summary.

Writes one sheet per report table (see writers.tables) with a bold, frozen
header row and widened columns.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union

import pandas as pd
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from domain.summary import KPISummary

from .tables import summary_frames

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill("solid", fgColor="DDEBF7")
MAX_COLUMN_WIDTH = 60


def _style_sheet(ws) -> None:
    for cell in ws[1]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
    ws.freeze_panes = "A2"

    for idx, column in enumerate(ws.iter_cols(), start=1):
        longest = max((len(str(c.value)) for c in column if c.value is not None), default=0)
        ws.column_dimensions[get_column_letter(idx)].width = min(longest + 2, MAX_COLUMN_WIDTH)


def write_summary_to_xlsx(summary: KPISummary, target: Union[str, Path, IO[bytes]]) -> None:
    """Write the report tables of `summary` to an .xlsx path or binary buffer."""
    if isinstance(target, (str, Path)):
        Path(target).parent.mkdir(parents=True, exist_ok=True)

    with pd.ExcelWriter(target, engine="openpyxl") as writer:
        for title, frame in summary_frames(summary).items():
            frame.to_excel(writer, sheet_name=title, index=False)
            _style_sheet(writer.sheets[title])


def summary_to_xlsx_bytes(summary: KPISummary) -> bytes:
    """Excel report as bytes, for download buttons."""
    buffer = io.BytesIO()
    write_summary_to_xlsx(summary, buffer)
    return buffer.getvalue()
