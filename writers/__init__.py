from .excel_writer import summary_to_xlsx_bytes, write_summary_to_xlsx
from .tables import summary_frames

__all__ = ["summary_frames", "summary_to_xlsx_bytes", "write_summary_to_xlsx"]
