import json
import unittest
from datetime import datetime

from kpis import SheetNotFoundError, build_kpi_summary, summarize_workbook, summary_to_json
from tests.workbooks import supplier_workbook

SCENARIO_ROWS = [
    {"Supplier": "Alpha", "Region": "EU", "PT Days": 20, "Contract status": "Active", "2024 Spend": 100},
    {"Supplier": "Beta", "Region": "EU", "PT Days": 45, "Contract status": "No Contract", "2024 Spend": 200},
    {"Supplier": "Gamma", "Region": "NA", "PT Days": 90, "Contract status": "active - ext", "2024 Spend": 50},
]


class TestBuildKPISummary(unittest.TestCase):
    def test_three_supplier_scenario(self):
        summary = build_kpi_summary(SCENARIO_ROWS, [])

        self.assertEqual(summary["totalSuppliers"], 3)
        self.assertEqual(summary["suppliersByRegion"], {"EU": 2, "NA": 1})
        self.assertAlmostEqual(summary["paymentTerms"]["avgDaysGlobal"], 51.67, places=2)
        self.assertEqual(summary["paymentTerms"]["distribution"], {"<=30": 1, "<=60": 1, ">60": 1})
        self.assertEqual(summary["contracts"], {"activeCount": 2, "noContractCount": 1})
        self.assertEqual([t["spend"] for t in summary["topSuppliers"]["global2024"]], [200, 100, 50])
        self.assertEqual(summary["topSuppliers"]["global2023"], [])
        self.assertEqual(summary["warnings"], [])

    def test_missing_mapping_sheet_is_fatal(self):
        with self.assertRaises(SheetNotFoundError) as ctx:
            build_kpi_summary(None, [], mapping_sheet_name="Suppliers")
        self.assertEqual(str(ctx.exception), 'Sheet "Suppliers" not found')

    def test_missing_regulations_sheet_degrades(self):
        with self.assertLogs("kpis.summary", level="WARNING"):
            summary = build_kpi_summary(SCENARIO_ROWS, None, regulations_sheet_name="Regs")

        self.assertEqual(summary["regulations"], {})
        self.assertEqual(len(summary["warnings"]), 1)
        self.assertIn('"Regs"', summary["warnings"][0])
        self.assertEqual(summary["meta"], {"mappingSheetName": "Mapping Corrugates", "regulationsSheetName": "Regs"})

    def test_empty_mapping_sheet(self):
        summary = build_kpi_summary([], [])
        self.assertEqual(summary["totalSuppliers"], 0)
        self.assertEqual(summary["suppliersByRegion"], {})
        self.assertEqual(summary["fscCertification"]["percentGlobal"], 0)
        self.assertEqual(summary["recyclability"], {"globalAvg": 0, "dataCount": 0})

    def test_json_serializable(self):
        decoded = json.loads(summary_to_json(build_kpi_summary(SCENARIO_ROWS, [])))
        self.assertEqual(decoded["topSuppliers"]["byRegion"]["EU"]["2024"][0]["name"], "Beta")

    def test_region_counts_survive_json_round_trip(self):
        rows = [{"Region": 1}, {"Region": "1"}, {"Region": None}]
        decoded = json.loads(summary_to_json(build_kpi_summary(rows, [])))

        self.assertEqual(decoded["suppliersByRegion"], {"1": 2, "Unspecified": 1})
        self.assertEqual(sum(decoded["suppliersByRegion"].values()), decoded["totalSuppliers"])

    def test_date_valued_region_and_jurisdiction_serialize(self):
        rows = [{"Region": datetime(2024, 1, 1), "2024 Spend": 10}]
        regulations = [{"Jurisdiction": datetime(2025, 6, 30), "Type": "EPR"}]
        decoded = json.loads(summary_to_json(build_kpi_summary(rows, regulations)))

        self.assertEqual(decoded["suppliersByRegion"], {"2024-01-01 00:00:00": 1})
        self.assertIn("2024-01-01 00:00:00", decoded["topSuppliers"]["byRegion"])
        self.assertEqual(list(decoded["regulations"]), ["2025-06-30 00:00:00"])


class TestSummarizeWorkbook(unittest.TestCase):
    def test_reads_both_sheets(self):
        summary = summarize_workbook(supplier_workbook())

        self.assertEqual(summary["totalSuppliers"], 3)
        self.assertEqual(summary["suppliersByRegion"], {"EU": 2, "NA": 1})
        self.assertEqual(summary["fscCertification"]["percentByRegion"], {"EU": 50, "NA": 100})
        self.assertEqual(summary["recycledContent"]["distribution"], {"30%": 1, "undefined": 1, "TBC": 1})
        self.assertEqual(summary["recyclability"]["dataCount"], 2)
        self.assertEqual(
            summary["regulations"]["France"],
            [{"type": "EPR", "status": "In force"}, {"type": "SUP", "status": "Planned"}],
        )
        self.assertEqual(summary["warnings"], [])

    def test_without_regulations_sheet(self):
        summary = summarize_workbook(supplier_workbook(with_regulations=False))

        self.assertEqual(summary["regulations"], {})
        self.assertEqual(
            summary["warnings"],
            ['Sheet "Global_Packaging_Regulations" not found. Regulations section will be empty.'],
        )

    def test_custom_mapping_sheet_missing(self):
        with self.assertRaises(SheetNotFoundError):
            summarize_workbook(supplier_workbook(), mapping_sheet_name="Other")


if __name__ == "__main__":
    unittest.main()
