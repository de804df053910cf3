"""Survey summarizer orchestrating loading, scanning and reporting."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional
from tqdm import tqdm

from ..config.settings import Settings
from ..models.accumulation import ScanResult, SkippedRow, SummaryReport
from ..models.sheet import SheetValues
from ..models.template import ResponseKind
from ..services.data_loader import DataLoader
from ..services.report_generator import ReportGenerator
from .catalog import TemplateCatalog
from .scanner import Scanner
from .summary_builder import Summary

logger = logging.getLogger(__name__)

REPORTED_KINDS = (ResponseKind.GRADE, ResponseKind.TEXT)


class SurveySummarizer:
    """Main summarizer class orchestrating all components."""

    def __init__(self, settings: Settings):
        """Initialize the survey summarizer."""
        self.settings = settings
        self.settings.validate()

        self.data_loader = DataLoader(settings=self.settings)
        self.report_generator = ReportGenerator(
            output_dir=self.settings.output_dir,
            sheet_name=self.settings.summary_sheet_name
        )

        self.current_report: Optional[SummaryReport] = None

        logger.info("SurveySummarizer initialized successfully")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "SurveySummarizer":
        """Create summarizer from environment variables."""
        return cls(Settings.from_env(env_file))

    def build_catalog(self, template_rows: Iterable[Any], first_name: str) -> TemplateCatalog:
        """Load templates, substituting the respondent's name into each one."""
        substitutions = [(self.settings.name_placeholder, first_name)]
        return TemplateCatalog.load(template_rows, substitutions)

    def summarize(
        self,
        catalog: TemplateCatalog,
        sheets: List[SheetValues],
        progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> SummaryReport:
        """
        Scan every sheet and build the summary table.

        Each reported response kind is scanned with its own templates plus the
        discriminators, so discriminator rows relabel answers of either kind.

        Args:
            catalog: Question templates for this run
            sheets: Response sheets, scanned in order
            progress_callback: Called with (completed, total) scan passes

        Returns:
            SummaryReport with per-kind scans and the summary rows
        """
        report = SummaryReport(sheet_titles=[sheet.title or "" for sheet in sheets])
        summary = Summary(empty_marker=self.settings.empty_cell_marker)
        total_passes = len(REPORTED_KINDS) * len(sheets)
        completed = 0

        for kind in REPORTED_KINDS:
            scanner = Scanner(
                catalog.subset([kind, ResponseKind.DISCRIMINATOR]),
                grade_error_policy=self.settings.grade_error_policy,
                ignore_blank_answers=self.settings.ignore_blank_answers
            )

            result = ScanResult()
            sheet_iter = tqdm(
                sheets,
                desc=f"Scanning {kind}",
                unit="sheet",
                disable=not self.settings.show_progress
            )
            for sheet in sheet_iter:
                result.merge(scanner.scan(sheet.rows, sheet.title))
                completed += 1
                if progress_callback:
                    progress_callback(completed, total_passes)

            logger.info(f"Scanned {kind}: {len(result.accumulations)} categories, "
                        f"{result.get_value_count()} values")
            report.scans[kind.value] = result
            summary.set_by_kind(kind, result.accumulations)

        report.skipped_rows = self._unmatched_rows(catalog, report.scans.values())
        for skipped in report.skipped_rows:
            logger.warning(f"Skipped: {skipped.to_error()}")

        report.rows = summary.to_table()
        report.mark_completed()
        self.current_report = report
        return report

    def summarize_file(
        self,
        template_file: str,
        responses_file: str,
        first_name: str,
        output_file: Optional[str] = None,
        sheet_name: Optional[str] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None
    ) -> SummaryReport:
        """
        Summarize a response export using a template config file.

        Args:
            template_file: Template config CSV
            responses_file: Response export (Excel, CSV)
            first_name: Value substituted for the name placeholder
            output_file: Path for the summary table (optional)
            sheet_name: Excel sheet name (optional)
            progress_callback: Progress callback function

        Returns:
            SummaryReport with complete results
        """
        logger.info(f"Starting summary of file: {responses_file}")

        catalog = self.build_catalog(self.data_loader.load_templates(template_file), first_name)
        sheets = self.data_loader.load_responses(responses_file, sheet_name=sheet_name)

        report = self.summarize(catalog, sheets, progress_callback=progress_callback)

        if output_file:
            self.report_generator.write_summary(report.rows, output_file)

        logger.info(f"Summary completed. {len(report.rows)} rows, "
                    f"{len(report.skipped_rows)} skipped statements")
        return report

    def generate_report(self) -> Dict[str, str]:
        """Write the workbook and statistics for the last run."""
        if not self.current_report:
            raise ValueError("No summary available for reporting")

        return self.report_generator.generate_report(self.current_report)

    @staticmethod
    def _unmatched_rows(catalog: TemplateCatalog, scans: Iterable[ScanResult]) -> List[SkippedRow]:
        """Rows skipped because no template of any kind matches them."""
        unmatched = []
        seen = set()
        for scan in scans:
            for skipped in scan.skipped_rows:
                position = (skipped.sheet, skipped.row_index)
                if position in seen:
                    continue
                seen.add(position)
                if not skipped.statement or catalog.match(skipped.statement) is None:
                    unmatched.append(skipped)
        return unmatched
