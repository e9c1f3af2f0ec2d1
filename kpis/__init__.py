from .summary import (
    KPIError,
    SheetNotFoundError,
    build_kpi_summary,
    summarize_workbook,
    summary_to_json,
)
from .views import RegionView, available_regions, select_view

__all__ = [
    "KPIError",
    "RegionView",
    "SheetNotFoundError",
    "available_regions",
    "build_kpi_summary",
    "select_view",
    "summarize_workbook",
    "summary_to_json",
]
