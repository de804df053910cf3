"""Template-driven response scanning."""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ..models.accumulation import (
    AccumulatorKey,
    CategoryAccumulation,
    InvalidValue,
    ScanResult,
    SkippedRow,
)
from ..models.errors import NonNumericGrade
from ..models.sheet import SheetValues
from .catalog import TemplateCatalog
from .evaluator import evaluate

logger = logging.getLogger(__name__)

GRADE_ERROR_POLICIES = ("skip", "fail")


class Scanner:
    """Groups evaluated answers into per-category accumulations.

    A discriminator row captures, per answer column, a label that replaces the
    template's assessment kind for the same column of every row scanned after it.
    Rows scanned before the discriminator keep the static assessment kind.
    """

    def __init__(
        self,
        catalog: TemplateCatalog,
        grade_error_policy: str = "skip",
        ignore_blank_answers: bool = False
    ):
        """Initialize scanner for a catalog."""
        if grade_error_policy not in GRADE_ERROR_POLICIES:
            raise ValueError(
                f"grade_error_policy must be one of {GRADE_ERROR_POLICIES}, got {grade_error_policy!r}"
            )

        self.catalog = catalog
        self.grade_error_policy = grade_error_policy
        self.ignore_blank_answers = ignore_blank_answers

    def scan(self, rows: Sequence[Sequence[str]], sheet: Optional[str] = None) -> ScanResult:
        """
        Scan one batch of rows in order.

        Args:
            rows: Rows of [statement, answer, answer, ...]
            sheet: Name of the batch, used in diagnostics

        Returns:
            ScanResult with accumulations in first-seen key order

        Raises:
            NonNumericGrade: If a grade fails to parse and the policy is "fail"
        """
        result = ScanResult()
        accumulations: Dict[AccumulatorKey, CategoryAccumulation] = {}
        width = max((len(row) - 1 for row in rows), default=0)
        discriminators: List[Optional[str]] = [None] * width

        for row_index, row in enumerate(rows):
            result.rows_scanned += 1

            statement = row[0] if row else ""
            template = self.catalog.match(statement) if statement else None
            if template is None:
                logger.debug(f"Template not found for row {row_index}: {statement!r}")
                result.skipped_rows.append(SkippedRow(row_index, statement, sheet))
                continue

            for column_index, raw_value in enumerate(row[1:]):
                if self.ignore_blank_answers and not raw_value.strip():
                    continue

                try:
                    evaluated = evaluate(template, raw_value)
                except NonNumericGrade as e:
                    error = e.with_location(row_index, column_index, sheet)
                    if self.grade_error_policy == "fail":
                        raise error from None

                    logger.warning(f"Skipping value: {error}")
                    result.invalid_values.append(InvalidValue(
                        row_index=row_index,
                        column_index=column_index,
                        template=template.describe(),
                        value=raw_value,
                        reason=str(error),
                        sheet=sheet
                    ))
                    continue

                if template.is_discriminator:
                    discriminators[column_index] = evaluated
                    continue

                label = discriminators[column_index]
                if label is None:
                    label = template.assessment_kind

                key = AccumulatorKey(label, template.category)
                accumulation = accumulations.get(key)
                if accumulation is None:
                    accumulation = CategoryAccumulation(key)
                    accumulations[key] = accumulation
                    result.accumulations.append(accumulation)
                accumulation.write(evaluated)

        logger.debug(
            f"Scanned {result.rows_scanned} rows{f' of {sheet}' if sheet else ''}: "
            f"{len(result.accumulations)} categories, {len(result.skipped_rows)} skipped rows"
        )
        return result

    def scan_sheets(self, sheets: Iterable[SheetValues]) -> ScanResult:
        """Scan each sheet independently and merge the results in sheet order."""
        merged = ScanResult()
        for sheet in sheets:
            merged.merge(self.scan(sheet.rows, sheet.title))
        return merged
