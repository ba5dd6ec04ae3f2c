"""
Spreadsheet (.xlsx) output of feast records: one "feasts" worksheet with a
header row and every column the same width.
"""

from pathlib import Path
from typing import Iterable, Union

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from feasts.config import COLUMN_WIDTH_CHARS, HEADINGS, TABLE_TITLE
from feasts.document.rows import feast_to_row
from feasts.logic.extractor import Feast


def write_xlsx(feasts: Iterable[Feast], path: Union[str, Path]) -> int:
    """Write a header row and one row per feast; return the row count.

    Records are collected before the file is written, so a failing input
    leaves an existing workbook as it was.
    """
    rows = [feast_to_row(feast) for feast in feasts]

    wb = Workbook()
    ws = wb.active
    ws.title = TABLE_TITLE

    ws.append(list(HEADINGS))
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for row in rows:
        ws.append(row)

    for index in range(1, len(HEADINGS) + 1):
        ws.column_dimensions[get_column_letter(index)].width = COLUMN_WIDTH_CHARS

    wb.save(str(path))
    return len(rows)
