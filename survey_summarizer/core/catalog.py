"""Question template catalog."""

import logging
import math
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..models.errors import ConfigError
from ..models.template import TEMPLATE_COLUMNS, QuestionTemplate, ResponseKind

logger = logging.getLogger(__name__)


class TemplateCatalog:
    """Immutable, ordered set of question templates."""

    def __init__(self, templates: Iterable[QuestionTemplate]):
        """Initialize catalog from already-built templates."""
        self._templates: Tuple[QuestionTemplate, ...] = tuple(templates)

    @classmethod
    def load(
        cls,
        rows: Iterable[Any],
        substitutions: Sequence[Tuple[str, str]] = ()
    ) -> "TemplateCatalog":
        """
        Build a catalog from parsed template config rows.

        Args:
            rows: Mappings keyed by the template columns, or sequences in
                AssessmentKind, ResponseKind, Category, Template, Weight order
            substitutions: Ordered (placeholder, value) pairs applied to each template

        Returns:
            TemplateCatalog in row order

        Raises:
            ConfigError: If any row is malformed
        """
        templates = []
        for row_index, row in enumerate(rows):
            templates.append(_parse_row(row, row_index, substitutions))

        logger.info(f"Loaded {len(templates)} question templates")
        return cls(templates)

    def match(self, statement: str) -> Optional[QuestionTemplate]:
        """Find the first template, in load order, that matches a statement."""
        for template in self._templates:
            if template.matches(statement):
                return template
        return None

    def subset(self, kinds: Iterable[ResponseKind]) -> "TemplateCatalog":
        """Get a catalog holding only templates of the given kinds, order preserved."""
        wanted = set(kinds)
        return TemplateCatalog(t for t in self._templates if t.response_kind in wanted)

    def kinds(self) -> List[ResponseKind]:
        """Response kinds present in the catalog, in first-seen order."""
        seen = []
        for template in self._templates:
            if template.response_kind not in seen:
                seen.append(template.response_kind)
        return seen

    def __iter__(self) -> Iterator[QuestionTemplate]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


def apply_substitutions(template_raw: str, substitutions: Sequence[Tuple[str, str]]) -> str:
    """Apply literal find/replace passes in order."""
    template_final = template_raw
    for placeholder, value in substitutions:
        template_final = template_final.replace(placeholder, value)
    return template_final


def _parse_row(row: Any, row_index: int, substitutions: Sequence[Tuple[str, str]]) -> QuestionTemplate:
    values = _row_values(row, row_index)

    response_kind_in = values["ResponseKind"]
    try:
        response_kind = ResponseKind.parse(response_kind_in)
    except ConfigError as e:
        raise ConfigError(e.reason, row_index, "ResponseKind") from None

    weight = _parse_weight(values["Weight"], row_index)

    template_raw = values["Template"]
    template_final = apply_substitutions(template_raw, substitutions)
    if not template_final:
        raise ConfigError("template is empty", row_index, "Template")

    return QuestionTemplate(
        assessment_kind=values["AssessmentKind"],
        response_kind=response_kind,
        category=values["Category"],
        template_raw=template_raw,
        template_final=template_final,
        weight=weight
    )


def _row_values(row: Any, row_index: int) -> dict:
    if isinstance(row, Mapping):
        normalized = {str(key).strip(): value for key, value in row.items()}
        values = {}
        for column in TEMPLATE_COLUMNS:
            value = normalized.get(column)
            if value is None:
                raise ConfigError("missing required column", row_index, column)
            values[column] = str(value)
        return values

    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise ConfigError(f"unsupported row type {type(row).__name__}", row_index)

    if len(row) < len(TEMPLATE_COLUMNS):
        missing = TEMPLATE_COLUMNS[len(row)]
        raise ConfigError("missing required column", row_index, missing)

    return {column: str(row[i]) for i, column in enumerate(TEMPLATE_COLUMNS)}


def _parse_weight(weight_in: str, row_index: int) -> float:
    try:
        weight = float(weight_in.strip())
    except ValueError:
        raise ConfigError(f"weight {weight_in!r} is not a number", row_index, "Weight") from None

    if not math.isfinite(weight):
        raise ConfigError(f"weight {weight_in!r} is not a finite number", row_index, "Weight")
    return weight
