"""Exception types raised while loading templates, scanning and summarizing."""

from typing import Optional


class SurveySummarizerError(Exception):
    """Base class for all survey summarizer errors."""


class ConfigError(SurveySummarizerError):
    """A template configuration row is malformed."""

    def __init__(self, reason: str, row_index: Optional[int] = None, column: Optional[str] = None):
        self.reason = reason
        self.row_index = row_index
        self.column = column

        location = []
        if row_index is not None:
            location.append(f"row {row_index}")
        if column:
            location.append(f"column '{column}'")

        prefix = f"template config {', '.join(location)}: " if location else "template config: "
        super().__init__(prefix + reason)


class TemplateNotFound(SurveySummarizerError):
    """A statement cell does not match any configured template."""

    def __init__(self, statement: str, row_index: int, sheet: Optional[str] = None):
        self.statement = statement
        self.row_index = row_index
        self.sheet = sheet
        where = f"sheet '{sheet}' " if sheet else ""
        super().__init__(f"template not found for {where}row {row_index}: {statement!r}")


class EvalError(SurveySummarizerError):
    """An answer cell could not be evaluated."""


class NonNumericGrade(EvalError):
    """A grade answer is not a number."""

    def __init__(
        self,
        value: str,
        template: str,
        row_index: Optional[int] = None,
        column_index: Optional[int] = None,
        sheet: Optional[str] = None
    ):
        self.value = value
        self.template = template
        self.row_index = row_index
        self.column_index = column_index
        self.sheet = sheet
        super().__init__(self._format())

    def with_location(self, row_index: int, column_index: int, sheet: Optional[str] = None) -> "NonNumericGrade":
        """Return a copy carrying the position of the failing cell."""
        return NonNumericGrade(self.value, self.template, row_index, column_index, sheet)

    def _format(self) -> str:
        location = []
        if self.sheet:
            location.append(f"sheet '{self.sheet}'")
        if self.row_index is not None:
            location.append(f"row {self.row_index}")
        if self.column_index is not None:
            location.append(f"column {self.column_index}")

        where = f" at {', '.join(location)}" if location else ""
        return f"non-numeric grade {self.value!r}{where} for template {self.template!r}"


class EmptyAccumulation(SurveySummarizerError):
    """An average was requested over zero collected values."""

    def __init__(self, group_label: str, category: str):
        self.group_label = group_label
        self.category = category
        super().__init__(f"no values collected for {group_label}:{category}")


class DataLoadError(SurveySummarizerError):
    """An input file could not be read."""
