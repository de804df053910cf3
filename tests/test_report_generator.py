import json

from openpyxl import load_workbook

from survey_summarizer.models.accumulation import (
    AccumulatorKey,
    CategoryAccumulation,
    ScanResult,
    SkippedRow,
    SummaryReport,
)
from survey_summarizer.services.report_generator import ReportGenerator


def make_report():
    scan = ScanResult(
        accumulations=[CategoryAccumulation(AccumulatorKey("peer", "Communication"), ["16.0"])],
        rows_scanned=2
    )
    report = SummaryReport(
        scans={"grade": scan, "text": ScanResult()},
        skipped_rows=[SkippedRow(1, "Favourite colour", "Form")],
        rows=[["Data", "Communication"], ["peer", "16.0"]],
        sheet_titles=["Form"]
    )
    report.mark_completed()
    return report


def test_write_summary_to_excel_sheet(tmp_path):
    path = tmp_path / "summary.xlsx"

    ReportGenerator(str(tmp_path), sheet_name="Chart and Summary").write_summary(
        [["Data", "Communication"], ["peer", "16.0"]], str(path)
    )

    sheet = load_workbook(path)["Chart and Summary"]
    assert sheet["A1"].value == "Data"
    assert sheet["B1"].value == "Communication"
    assert sheet["A2"].value == "peer"
    assert sheet["B2"].value == "16.0"


def test_generate_report_writes_excel_and_statistics(tmp_path):
    output_dir = tmp_path / "output"

    files = ReportGenerator(str(output_dir)).generate_report(make_report())

    assert set(files) == {"excel", "statistics"}
    with open(files["statistics"], encoding="utf-8") as f:
        stats = json.load(f)
    assert stats["run_summary"]["accumulations"] == {"grade": 1, "text": 0}
    assert stats["run_summary"]["skipped_rows"] == 1
    assert stats["skipped_rows"] == [{"sheet": "Form", "row_index": 1, "statement": "Favourite colour"}]
    assert stats["accumulations"]["grade"][0]["values"] == ["16.0"]
