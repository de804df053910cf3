"""Tabular input batches."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SheetValues:
    """Rows of one sheet: each row is a question statement followed by its answers."""

    rows: List[List[str]] = field(default_factory=list)
    title: Optional[str] = None

    @property
    def width(self) -> int:
        """Largest number of answer columns in any row."""
        return max((len(row) - 1 for row in self.rows), default=0)

    def __len__(self) -> int:
        return len(self.rows)
