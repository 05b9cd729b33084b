from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

COLUMNS = ("Day", "Meal", "Recipe Link", "Calories", "Fat", "Protein", "Carbohydrates")
NUTRIENT_COLUMNS = (4, 5, 6, 7)   # 1-based, Calories … Carbohydrates


@dataclass
class SheetLayout:
    """A fully staged output tab: cell values plus the row roles the
    writer needs for formatting.  Row numbers are 1-based, like the sheet.
    """

    title: str = ""
    rows: List[List[Any]] = field(default_factory=list)
    title_row: int = 0
    summary_rows: List[int] = field(default_factory=list)
    header_row: int = 0
    day_rows: List[int] = field(default_factory=list)
    days_rendered: int = 0

    @property
    def width(self) -> int:
        return len(COLUMNS)

    @property
    def next_row(self) -> int:
        return len(self.rows) + 1

    def append(self, *values: Any) -> int:
        """Add one row (padded to the table width) and return its number."""
        row = list(values)[: self.width]
        row += [None] * (self.width - len(row))
        self.rows.append(row)
        return len(self.rows)

    def blank(self) -> int:
        return self.append()
