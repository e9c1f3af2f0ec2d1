"""
Upload processing boundary.

Turns an uploaded workbook into a KPI summary, or into a message suitable for
the end user. This is the only place where exceptions from the pipeline are
caught:

- missing mapping sheet, unreadable file, oversized upload -> specific message
- anything else -> logged with traceback, user sees "Processing error"
"""

from __future__ import annotations

import logging
from typing import IO, Optional, Tuple, Union

from config import MAX_FILE_SIZE_MB
from domain.summary import KPISummary
from input_readers import WorkbookReadError
from kpis import KPIError, summarize_workbook

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Processing error"
NO_FILE_ERROR = "No file uploaded"


class UploadTooLargeError(KPIError):
    """Raised when an upload exceeds MAX_FILE_SIZE_MB."""
    pass


def _read_upload(uploaded_file: Union[bytes, IO[bytes]]) -> bytes:
    """Return the raw bytes of a Streamlit UploadedFile, a binary buffer or bytes."""
    if isinstance(uploaded_file, (bytes, bytearray)):
        data = bytes(uploaded_file)
    elif hasattr(uploaded_file, "getvalue"):
        data = uploaded_file.getvalue()
    else:
        data = uploaded_file.read()

    size_mb = len(data) / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        raise UploadTooLargeError(f"File is {size_mb:.1f} MB; the limit is {MAX_FILE_SIZE_MB} MB")
    return data


def process_uploaded_file(
    uploaded_file,
    mapping_sheet_name: str | None = None,
    regulations_sheet_name: str | None = None,
) -> Tuple[bool, Optional[KPISummary], Optional[str]]:
    """
    Build the KPI summary for one uploaded workbook.

    Args:
        uploaded_file: Streamlit UploadedFile, binary file-like object or raw bytes
        mapping_sheet_name: Supplier sheet (configured default when blank)
        regulations_sheet_name: Optional regulations sheet (configured default when blank)

    Returns:
        (success, summary, error_message)
    """
    if uploaded_file is None:
        return False, None, NO_FILE_ERROR

    name = getattr(uploaded_file, "name", "<bytes>")
    try:
        data = _read_upload(uploaded_file)
        logger.info("Processing upload %s (%d bytes)", name, len(data))

        summary = summarize_workbook(data, mapping_sheet_name, regulations_sheet_name)
    except (KPIError, WorkbookReadError) as e:
        logger.info("Rejected upload %s: %s", name, e)
        return False, None, str(e)
    except Exception:
        logger.exception("Unexpected failure while processing upload %s", name)
        return False, None, GENERIC_ERROR

    logger.info(
        "Processed upload %s: %d suppliers, %d regions, %d warning(s)",
        name,
        summary["totalSuppliers"],
        len(summary["suppliersByRegion"]),
        len(summary["warnings"]),
    )
    return True, summary, None
