"""
Builds the feast table document (.docx) and picks the output format.
"""

from pathlib import Path
from typing import Iterable, Union

from docx.shared import Inches

from feasts.config import COLUMN_WIDTH_INCHES, HEADINGS, TABLE_TITLE
from feasts.document.csv_table import write_csv
from feasts.document.rows import feast_to_row
from feasts.document.styles import create_document
from feasts.document.workbook import write_xlsx
from feasts.logic.extractor import Feast


class FeastTableBuilder:
    """Collects feast records into a one-table document.

    Usage:
        builder = FeastTableBuilder()
        for result in parse_lines(lines):
            builder.add(result.feast)
        builder.save("data/bollandistes.docx")
    """

    def __init__(self, title: str = TABLE_TITLE):
        self.title = title
        self.rows: list[list[str]] = []

    def add(self, feast: Feast):
        self.rows.append(feast_to_row(feast))

    def add_all(self, feasts: Iterable[Feast]) -> int:
        """Add records in order; return how many were added."""
        count = 0
        for feast in feasts:
            self.add(feast)
            count += 1
        return count

    def build(self):
        """Build and return the complete document."""
        doc = create_document()
        doc.add_paragraph(self.title, style="Heading")

        table = doc.add_table(rows=1, cols=len(HEADINGS))
        table.style = "Table Grid"
        table.autofit = False

        for cell, heading in zip(table.rows[0].cells, HEADINGS):
            cell.text = ""
            cell.paragraphs[0].add_run(heading)
            cell.paragraphs[0].style = "Table Heading"

        for values in self.rows:
            cells = table.add_row().cells
            for cell, value in zip(cells, values):
                cell.text = value
                cell.paragraphs[0].style = "Table Text"

        # Word honours cell widths, not column widths
        for column in table.columns:
            for cell in column.cells:
                cell.width = Inches(COLUMN_WIDTH_INCHES)

        return doc

    def save(self, path: Union[str, Path]):
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.build().save(str(output_path))


def write_table(feasts: Iterable[Feast], path: Union[str, Path]) -> int:
    """Write records to ``path`` in the format its extension names.

    .xlsx writes a spreadsheet, .docx a document table, .csv and .tsv a
    delimited text file.

    Returns:
        The number of records written.

    Raises:
        ValueError for any other extension.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".xlsx":
        path.parent.mkdir(parents=True, exist_ok=True)
        return write_xlsx(feasts, path)

    if suffix == ".docx":
        builder = FeastTableBuilder()
        count = builder.add_all(feasts)
        builder.save(path)
        return count

    if suffix in (".csv", ".tsv"):
        path.parent.mkdir(parents=True, exist_ok=True)
        return write_csv(feasts, path, delimiter="\t" if suffix == ".tsv" else ",")

    raise ValueError(f"Unsupported output format {suffix!r}; use .xlsx, .docx, .csv or .tsv")
