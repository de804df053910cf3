"""Accumulation models for storing scanned answers and scan diagnostics."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional, Any

from .errors import EmptyAccumulation, TemplateNotFound


def format_number(value: float) -> str:
    """Render a number the same way on every run."""
    return repr(float(value))


class AccumulatorKey(NamedTuple):
    """Grouping key for scanned answers."""

    group_label: str
    category: str

    def __str__(self) -> str:
        return f"{self.group_label}:{self.category}"


@dataclass
class CategoryAccumulation:
    """Evaluated answers collected for one (group label, category) pair."""

    key: AccumulatorKey
    values: List[str] = field(default_factory=list)

    @property
    def group_label(self) -> str:
        return self.key.group_label

    @property
    def category(self) -> str:
        return self.key.category

    def write(self, value: str) -> None:
        """Append an evaluated answer."""
        self.values.append(value)

    def extend(self, other: "CategoryAccumulation") -> None:
        """Append every value of another accumulation with the same key."""
        self.values.extend(other.values)

    def is_empty(self) -> bool:
        return not self.values

    def average(self) -> float:
        """Mean of the collected grade values."""
        if not self.values:
            raise EmptyAccumulation(self.group_label, self.category)
        return sum(float(value) for value in self.values) / len(self.values)

    def joined_text(self) -> str:
        """Collected text answers, one per line."""
        return "\n".join(self.values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "group_label": self.group_label,
            "category": self.category,
            "values": list(self.values),
            "count": len(self.values)
        }


@dataclass(frozen=True)
class SkippedRow:
    """A row whose statement matched no template."""

    row_index: int
    statement: str
    sheet: Optional[str] = None

    def to_error(self) -> TemplateNotFound:
        return TemplateNotFound(self.statement, self.row_index, self.sheet)

    def to_dict(self) -> Dict[str, Any]:
        return {"sheet": self.sheet, "row_index": self.row_index, "statement": self.statement}


@dataclass(frozen=True)
class InvalidValue:
    """A grade answer dropped because it could not be parsed."""

    row_index: int
    column_index: int
    template: str
    value: str
    reason: str
    sheet: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sheet": self.sheet,
            "row_index": self.row_index,
            "column_index": self.column_index,
            "template": self.template,
            "value": self.value,
            "reason": self.reason
        }


@dataclass
class ScanResult:
    """Everything produced by scanning one or more batches of rows."""

    accumulations: List[CategoryAccumulation] = field(default_factory=list)
    skipped_rows: List[SkippedRow] = field(default_factory=list)
    invalid_values: List[InvalidValue] = field(default_factory=list)
    rows_scanned: int = 0

    def merge(self, other: "ScanResult") -> None:
        """Fold another result into this one.

        Accumulations sharing a key are combined in place so every key appears
        once, in the order it was first seen across both results.
        """
        by_key = {accumulation.key: accumulation for accumulation in self.accumulations}
        for accumulation in other.accumulations:
            existing = by_key.get(accumulation.key)
            if existing is None:
                merged = CategoryAccumulation(accumulation.key, list(accumulation.values))
                self.accumulations.append(merged)
                by_key[merged.key] = merged
            else:
                existing.extend(accumulation)

        self.skipped_rows.extend(other.skipped_rows)
        self.invalid_values.extend(other.invalid_values)
        self.rows_scanned += other.rows_scanned

    def get_keys(self) -> List[AccumulatorKey]:
        return [accumulation.key for accumulation in self.accumulations]

    def get_value_count(self) -> int:
        return sum(len(accumulation.values) for accumulation in self.accumulations)


@dataclass
class SummaryReport:
    """Results of one summarizer run across all reported response kinds."""

    scans: Dict[str, ScanResult] = field(default_factory=dict)
    skipped_rows: List[SkippedRow] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    sheet_titles: List[str] = field(default_factory=list)
    run_start: datetime = field(default_factory=datetime.now)
    run_end: Optional[datetime] = None

    def mark_completed(self) -> None:
        self.run_end = datetime.now()

    def get_run_duration(self) -> Optional[float]:
        if not self.run_end:
            return None
        return (self.run_end - self.run_start).total_seconds()

    def get_invalid_values(self) -> List[InvalidValue]:
        invalid = []
        for scan in self.scans.values():
            invalid.extend(scan.invalid_values)
        return invalid

    def get_statistics(self) -> Dict[str, Any]:
        """Get run statistics."""
        return {
            "sheets": list(self.sheet_titles),
            "accumulations": {kind: len(scan.accumulations) for kind, scan in self.scans.items()},
            "values": {kind: scan.get_value_count() for kind, scan in self.scans.items()},
            "skipped_rows": len(self.skipped_rows),
            "invalid_values": len(self.get_invalid_values()),
            "summary_rows": len(self.rows),
            "run_duration": self.get_run_duration()
        }
