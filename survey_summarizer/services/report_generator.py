"""Summary table and statistics output."""

import os
import logging
from datetime import datetime
from typing import Dict, List
import pandas as pd
import json

from ..models.accumulation import SummaryReport

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Writes summary rows to Excel/CSV and run statistics to JSON."""

    def __init__(self, output_dir: str = "output", sheet_name: str = "Chart and Summary"):
        """Initialize report generator."""
        self.output_dir = output_dir
        self.sheet_name = sheet_name

    def generate_report(self, report: SummaryReport) -> Dict[str, str]:
        """
        Write the summary workbook and statistics file into the output directory.

        Returns:
            Dictionary mapping format to file path
        """
        os.makedirs(self.output_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        report_files = {}

        excel_path = os.path.join(self.output_dir, f"summary_{timestamp}.xlsx")
        self.write_summary(report.rows, excel_path)
        report_files["excel"] = excel_path

        stats_path = os.path.join(self.output_dir, f"statistics_{timestamp}.json")
        self.write_statistics(report, stats_path)
        report_files["statistics"] = stats_path

        logger.info(f"Generated report files: {list(report_files.keys())}")
        return report_files

    def write_summary(self, rows: List[List[str]], file_path: str) -> None:
        """Write summary rows as-is, without a header line or index."""
        summary_df = pd.DataFrame(rows)

        file_ext = os.path.splitext(file_path)[1].lower()
        if file_ext == '.csv':
            summary_df.to_csv(file_path, index=False, header=False)
        else:
            with pd.ExcelWriter(file_path, engine='openpyxl') as writer:
                summary_df.to_excel(writer, sheet_name=self.sheet_name, index=False, header=False)

        logger.info(f"Summary ({len(rows)} rows) saved to: {file_path}")

    def write_statistics(self, report: SummaryReport, file_path: str) -> None:
        """Generate JSON statistics file."""
        stats_data = {
            "run_summary": report.get_statistics(),
            "skipped_rows": [row.to_dict() for row in report.skipped_rows],
            "invalid_values": [value.to_dict() for value in report.get_invalid_values()],
            "accumulations": {
                kind: [accumulation.to_dict() for accumulation in scan.accumulations]
                for kind, scan in report.scans.items()
            },
            "generated_timestamp": datetime.now().isoformat()
        }

        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(stats_data, f, indent=2)

        logger.info(f"Statistics file saved to: {file_path}")
