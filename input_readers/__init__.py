from .excel import WorkbookReadError, list_sheet_names, read_excel, read_sheets

__all__ = ["WorkbookReadError", "list_sheet_names", "read_excel", "read_sheets"]
