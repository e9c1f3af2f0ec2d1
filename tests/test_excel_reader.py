import io
import tempfile
import unittest
from pathlib import Path

from input_readers import WorkbookReadError, list_sheet_names, read_excel, read_sheets
from tests.workbooks import build_workbook, supplier_workbook


class TestReadExcel(unittest.TestCase):
    def test_rows_keyed_by_headers(self):
        rows = read_excel(supplier_workbook(), sheet_name="Mapping Corrugates")

        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[0]["Supplier"], "Alpha Board")
        self.assertEqual(rows[0]["PT Days"], 20)
        self.assertIsNone(rows[1]["Recycled content %"])

    def test_missing_sheet_returns_none(self):
        self.assertIsNone(read_excel(supplier_workbook(), sheet_name="Nope"))

    def test_first_sheet_by_default(self):
        data = build_workbook({"First": [["A"], [1]], "Second": [["B"], [2]]})
        self.assertEqual(read_excel(data), [{"A": 1}])

    def test_blank_rows_skipped_and_headers_cleaned(self):
        data = build_workbook(
            {
                "S": [
                    [" Supplier ", None, "Supplier"],
                    ["A", 1, "dup"],
                    [],
                    [None, None, None],
                    ["B", 2, None],
                ]
            }
        )
        rows = read_excel(data, sheet_name="S")

        self.assertEqual(
            rows,
            [
                {"Supplier": "A", "col_2": 1, "Supplier_1": "dup"},
                {"Supplier": "B", "col_2": 2, "Supplier_1": None},
            ],
        )

    def test_renamed_repeat_skips_existing_header(self):
        data = build_workbook({"S": [["A", "A_1", "A"], [1, 2, 3]]})
        self.assertEqual(read_excel(data, sheet_name="S"), [{"A": 1, "A_1": 2, "A_2": 3}])

    def test_file_like_and_path_sources(self):
        data = supplier_workbook()
        self.assertEqual(len(read_excel(io.BytesIO(data), sheet_name="Mapping Corrugates")), 3)

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "suppliers.xlsx"
            path.write_bytes(data)
            self.assertEqual(list_sheet_names(path), ["Mapping Corrugates", "Global_Packaging_Regulations"])

    def test_read_sheets_reports_each_sheet(self):
        sheets = read_sheets(supplier_workbook(with_regulations=False), ["Mapping Corrugates", "Regs"])
        self.assertEqual(len(sheets["Mapping Corrugates"]), 3)
        self.assertIsNone(sheets["Regs"])

    def test_invalid_bytes(self):
        with self.assertRaises(WorkbookReadError):
            read_excel(b"not a workbook", sheet_name="Mapping Corrugates")

    def test_missing_path(self):
        with self.assertRaises(FileNotFoundError):
            read_excel(Path("/nonexistent/suppliers.xlsx"))


if __name__ == "__main__":
    unittest.main()
