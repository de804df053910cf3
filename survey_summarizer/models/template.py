"""Question template models."""

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError

TEMPLATE_COLUMNS = ["AssessmentKind", "ResponseKind", "Category", "Template", "Weight"]


class ResponseKind(Enum):
    """How the answers to a question are evaluated."""

    GRADE = "grade"
    TEXT = "text"
    DISCRIMINATOR = "discriminator"

    @classmethod
    def parse(cls, value: str) -> "ResponseKind":
        """Parse a config value, ignoring case and surrounding whitespace."""
        normalized = (value or "").strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind

        valid = ", ".join(kind.value for kind in cls)
        raise ConfigError(f"unknown response kind {value!r}, expected one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class QuestionTemplate:
    """A configured question: which statements it matches and how to evaluate them."""

    assessment_kind: str
    response_kind: ResponseKind
    category: str
    template_raw: str
    template_final: str
    weight: float = 1.0

    def matches(self, statement: str) -> bool:
        """Check whether a statement cell belongs to this template."""
        return self.template_final in statement or self.template_raw in statement

    @property
    def is_discriminator(self) -> bool:
        return self.response_kind is ResponseKind.DISCRIMINATOR

    def describe(self) -> str:
        """Short identity used in diagnostics."""
        return f"{self.assessment_kind}/{self.category}: {self.template_final}"
