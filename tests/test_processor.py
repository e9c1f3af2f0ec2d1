import io
import unittest
from unittest import mock

import processor
from processor import GENERIC_ERROR, process_uploaded_file
from tests.workbooks import build_workbook, supplier_workbook


class FakeUpload(io.BytesIO):
    """Stand-in for Streamlit's UploadedFile (BytesIO with a name)."""

    def __init__(self, data: bytes, name: str = "suppliers.xlsx"):
        super().__init__(data)
        self.name = name


class TestProcessUploadedFile(unittest.TestCase):
    def test_success(self):
        success, summary, error = process_uploaded_file(FakeUpload(supplier_workbook()))

        self.assertTrue(success)
        self.assertIsNone(error)
        self.assertEqual(summary["totalSuppliers"], 3)

    def test_blank_sheet_names_use_defaults(self):
        success, summary, _ = process_uploaded_file(supplier_workbook(), "", "")

        self.assertTrue(success)
        self.assertEqual(summary["meta"]["mappingSheetName"], "Mapping Corrugates")

    def test_missing_mapping_sheet(self):
        data = build_workbook({"Something else": [["A"], [1]]})
        self.assertEqual(
            process_uploaded_file(FakeUpload(data)),
            (False, None, 'Sheet "Mapping Corrugates" not found'),
        )

    def test_missing_regulations_sheet_still_succeeds(self):
        success, summary, error = process_uploaded_file(supplier_workbook(with_regulations=False))

        self.assertTrue(success)
        self.assertEqual(len(summary["warnings"]), 1)

    def test_unreadable_file(self):
        success, summary, error = process_uploaded_file(FakeUpload(b"plain text", name="notes.xlsx"))

        self.assertFalse(success)
        self.assertIsNone(summary)
        self.assertTrue(error.startswith("Cannot read Excel file"))

    def test_no_file(self):
        self.assertEqual(process_uploaded_file(None), (False, None, "No file uploaded"))

    def test_upload_too_large(self):
        with mock.patch.object(processor, "MAX_FILE_SIZE_MB", 0):
            success, _, error = process_uploaded_file(supplier_workbook())

        self.assertFalse(success)
        self.assertIn("limit is 0 MB", error)

    def test_unexpected_error_is_opaque_and_logged(self):
        with mock.patch.object(processor, "summarize_workbook", side_effect=KeyError("boom")):
            with self.assertLogs("processor", level="ERROR") as logs:
                result = process_uploaded_file(supplier_workbook())

        self.assertEqual(result, (False, None, GENERIC_ERROR))
        self.assertIn("Unexpected failure", logs.output[0])


if __name__ == "__main__":
    unittest.main()
