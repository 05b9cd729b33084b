"""
services/workbook.py
────────────────────────────────────────────────────────────────────────
The spreadsheet store.

* `read_sheet()`   – pandas read of one tab (preferences input)
* `WorkbookSheet`  – openpyxl writer that replaces one tab wholesale
                     with a staged `SheetLayout`
"""
from __future__ import annotations

import logging
import os
import zipfile

import pandas as pd
from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException

from core.exceptions import ConfigurationError
from core.models.sheet import NUTRIENT_COLUMNS, SheetLayout

_LOG = logging.getLogger(__name__)

# ───────────── formatting ─────────────
TITLE_FONT = Font(bold=True, size=14)
BOLD = Font(bold=True)
HEADER_FILL = PatternFill(fill_type="solid", fgColor="D9EAD3")
CENTER = Alignment(horizontal="center", vertical="center")
COLUMN_WIDTHS = (14, 48, 16, 12, 10, 10, 15)
NUMBER_FORMAT = "0.0"


def read_sheet(path: str, sheet_name: str) -> pd.DataFrame:
    if not os.path.exists(path):
        raise ConfigurationError(f"Workbook not found: {path}", details={"path": path})
    try:
        return pd.read_excel(path, sheet_name=sheet_name, engine="openpyxl")
    except ValueError as exc:
        # pandas raises ValueError("Worksheet named '…' not found")
        raise ConfigurationError(
            f"Workbook {path} has no usable tab {sheet_name!r}: {exc}",
            details={"path": path, "sheet": sheet_name},
        ) from exc
    except (zipfile.BadZipFile, InvalidFileException) as exc:
        raise ConfigurationError(
            f"Workbook {path} is not a readable xlsx file: {exc}",
            details={"path": path},
        ) from exc


class WorkbookSheet:
    """One tab of an .xlsx workbook, overwritten on every `replace()`."""

    def __init__(self, path: str, sheet_name: str) -> None:
        self.path = path
        self.sheet_name = sheet_name

    def _open(self) -> Workbook:
        if os.path.exists(self.path):
            return load_workbook(self.path)
        wb = Workbook()
        wb.active.title = self.sheet_name
        return wb

    def replace(self, layout: SheetLayout) -> None:
        """Clear the tab (content *and* formatting), write `layout`, save once."""
        wb = self._open()
        if self.sheet_name in wb.sheetnames:
            old = wb[self.sheet_name]
            index = wb.index(old)
            wb.remove(old)
            ws = wb.create_sheet(self.sheet_name, index)
        else:
            ws = wb.create_sheet(self.sheet_name)

        for values in layout.rows:
            ws.append(values)
        self._format(ws, layout)

        wb.save(self.path)
        _LOG.info(
            "Wrote %d rows (%d days) to %s[%s]",
            len(layout.rows), layout.days_rendered, self.path, self.sheet_name,
        )

    def _format(self, ws, layout: SheetLayout) -> None:
        if layout.title_row:
            ws.cell(row=layout.title_row, column=1).font = TITLE_FONT

        for r in layout.summary_rows:
            ws.cell(row=r, column=1).font = BOLD

        if layout.header_row:
            for c in range(1, layout.width + 1):
                cell = ws.cell(row=layout.header_row, column=c)
                cell.font = BOLD
                cell.fill = HEADER_FILL
                cell.alignment = CENTER
            ws.freeze_panes = ws.cell(row=layout.header_row + 1, column=1)

        for r in layout.day_rows:
            ws.cell(row=r, column=1).font = BOLD

        for r in range(layout.header_row + 1, len(layout.rows) + 1):
            for c in NUTRIENT_COLUMNS:
                ws.cell(row=r, column=c).number_format = NUMBER_FORMAT

        for i, width in enumerate(COLUMN_WIDTHS, start=1):
            ws.column_dimensions[get_column_letter(i)].width = width
