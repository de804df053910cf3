"""Summary table assembly from scanned accumulations."""

import logging
from typing import Callable, List, Optional, Sequence

from ..models.accumulation import CategoryAccumulation, format_number
from ..models.summary_rows import SummaryRows
from ..models.template import ResponseKind

logger = logging.getLogger(__name__)

HEADER_ROW_KEY = "Data"
DEFAULT_EMPTY_MARKER = "N/A"

KeyFn = Callable[[CategoryAccumulation], str]


def group_label(accumulation: CategoryAccumulation) -> str:
    return accumulation.group_label


def category_name(accumulation: CategoryAccumulation) -> str:
    return accumulation.category


def cell_value(kind: ResponseKind, accumulation: CategoryAccumulation, empty_marker: str) -> str:
    """Render the summary cell for one accumulation."""
    if accumulation.is_empty():
        return empty_marker
    if kind is ResponseKind.GRADE:
        return format_number(accumulation.average())
    return accumulation.joined_text()


def build(
    kind: ResponseKind,
    accumulations: Sequence[CategoryAccumulation],
    header_key_fn: KeyFn,
    cell_key_fn: KeyFn,
    empty_marker: str = DEFAULT_EMPTY_MARKER
) -> SummaryRows:
    """
    Fill summary rows for one response kind.

    Args:
        kind: Response kind the accumulations were scanned for
        accumulations: Accumulations in first-seen order
        header_key_fn: Value added (once) to the header row per accumulation
        cell_key_fn: Key of the row the accumulation's cell is appended to
        empty_marker: Cell used for accumulations without values

    Returns:
        SummaryRows in first-seen key order
    """
    rows = SummaryRows()
    for accumulation in accumulations:
        rows.add_header(HEADER_ROW_KEY, header_key_fn(accumulation))
        rows.add_cell(cell_key_fn(accumulation), cell_value(kind, accumulation, empty_marker))
    return rows


def build_for_kind(
    kind: ResponseKind,
    accumulations: Sequence[CategoryAccumulation],
    empty_marker: str = DEFAULT_EMPTY_MARKER
) -> Optional[SummaryRows]:
    """Build rows with the layout used for a response kind.

    Grades: categories across the header, one row per group label.
    Text: group labels across the header, one row per category.
    Discriminators produce no rows.
    """
    if kind is ResponseKind.GRADE:
        return build(kind, accumulations, category_name, group_label, empty_marker)
    if kind is ResponseKind.TEXT:
        return build(kind, accumulations, group_label, category_name, empty_marker)
    return None


class Summary:
    """Grade and text accumulations waiting to be turned into rows."""

    def __init__(self, empty_marker: str = DEFAULT_EMPTY_MARKER):
        """Initialize empty summary."""
        self.grades: List[CategoryAccumulation] = []
        self.texts: List[CategoryAccumulation] = []
        self.empty_marker = empty_marker

    def set_by_kind(self, kind: ResponseKind, accumulations: List[CategoryAccumulation]) -> None:
        if kind is ResponseKind.GRADE:
            self.grades = accumulations
        elif kind is ResponseKind.TEXT:
            self.texts = accumulations

    def generate_rows(self) -> List[SummaryRows]:
        """Get grade rows then text rows."""
        all_rows = []
        for kind, accumulations in ((ResponseKind.GRADE, self.grades), (ResponseKind.TEXT, self.texts)):
            rows = build_for_kind(kind, accumulations, self.empty_marker)
            if rows is not None:
                all_rows.append(rows)

        logger.debug(f"Generated summary tables with {[len(rows) for rows in all_rows]} rows")
        return all_rows

    def to_table(self) -> List[List[str]]:
        """Flatten every generated table into one list of rows."""
        table = []
        for rows in self.generate_rows():
            table.extend(rows.rows())
        return table
