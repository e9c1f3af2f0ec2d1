"""
Central configuration for sheet names, KPI parameters and safety limits.

This module defines:
- Default workbook sheet names used when the caller does not supply any.
- KPI parameters (spend years, ranking size, fallback labels).
- Upload size limit to prevent memory issues with oversized workbooks.
- Logging level.

Values may be overridden through environment variables (a local `.env` file is
loaded first). Everything is resolved once at import time and is read-only
afterwards.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


DEFAULT_MAPPING_SHEET = os.getenv("MAPPING_SHEET_NAME", "Mapping Corrugates")
DEFAULT_REGULATIONS_SHEET = os.getenv("REGULATIONS_SHEET_NAME", "Global_Packaging_Regulations")

SPEND_YEARS = (2023, 2024)
TOP_N = int(os.getenv("TOP_N", "10"))

UNSPECIFIED_REGION = "Unspecified"
UNKNOWN_LABEL = "Unknown"
ALL_REGIONS = "All"

MAX_FILE_SIZE_MB = int(os.getenv("MAX_FILE_SIZE_MB", "50"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
