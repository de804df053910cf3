"""Ordered summary table rows."""

from typing import Dict, List


class SummaryRows:
    """Rows of a summary table, kept in the order their keys were first seen.

    Every emitted row starts with its key followed by its cells.
    """

    def __init__(self):
        """Initialize an empty table."""
        self.base: Dict[str, List[str]] = {}
        self.ordered_keys: List[str] = []

    def add_header(self, row_key: str, value: str) -> None:
        """Add a value to a header row unless it is already there."""
        if value in self.base.get(row_key, []):
            return
        self.add_cell(row_key, value)

    def add_cell(self, row_key: str, value: str) -> None:
        """Append a cell to a row, creating the row on first use."""
        if row_key not in self.base:
            self.base[row_key] = []
            self.ordered_keys.append(row_key)
        self.base[row_key].append(value)

    def get_cells(self, row_key: str) -> List[str]:
        return list(self.base.get(row_key, []))

    def keys(self) -> List[str]:
        return list(self.ordered_keys)

    def rows(self) -> List[List[str]]:
        """Get rows in first-seen key order."""
        return [[key] + self.base[key] for key in self.ordered_keys]

    def __len__(self) -> int:
        return len(self.ordered_keys)
