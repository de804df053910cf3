"""Answer evaluation by response kind."""

import math

from ..models.accumulation import format_number
from ..models.errors import NonNumericGrade
from ..models.template import QuestionTemplate, ResponseKind


def evaluate(template: QuestionTemplate, raw_value: str) -> str:
    """
    Evaluate one answer cell for its template.

    Grades are parsed, multiplied by the template weight and formatted;
    text and discriminator answers pass through unchanged.

    Raises:
        NonNumericGrade: If a grade answer is not a finite number
    """
    kind = template.response_kind
    if kind is ResponseKind.GRADE:
        return format_number(parse_grade(template, raw_value) * template.weight)
    if kind in (ResponseKind.TEXT, ResponseKind.DISCRIMINATOR):
        return raw_value
    raise ValueError(f"unhandled response kind: {kind!r}")


def parse_grade(template: QuestionTemplate, raw_value: str) -> float:
    try:
        grade = float(raw_value.strip())
    except (AttributeError, ValueError):
        raise NonNumericGrade(raw_value, template.describe()) from None

    if not math.isfinite(grade):
        raise NonNumericGrade(raw_value, template.describe())
    return grade
