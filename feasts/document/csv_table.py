"""
CSV / TSV output of feast records.
"""

import csv
from pathlib import Path
from typing import IO, Iterable, Union

from feasts.config import HEADINGS
from feasts.document.rows import feast_to_row
from feasts.logic.extractor import Feast


def write_csv(feasts: Iterable[Feast], target: Union[str, Path, IO[str]],
              delimiter: str = ",") -> int:
    """Write a header row and one row per feast; return the row count.

    All records are read before ``target`` is opened, so a failing input
    leaves an existing output file as it was.

    Args:
        feasts: Records to write, in order.
        target: A path, or an already open text stream (e.g. sys.stdout).
        delimiter: "," for CSV, "\\t" for TSV.
    """
    rows = [feast_to_row(feast) for feast in feasts]

    if isinstance(target, (str, Path)):
        with open(target, "w", encoding="utf-8", newline="") as f:
            _write_rows(f, rows, delimiter)
    else:
        _write_rows(target, rows, delimiter)
    return len(rows)


def _write_rows(stream: IO[str], rows: list[list[str]], delimiter: str):
    writer = csv.writer(stream, delimiter=delimiter)
    writer.writerow(HEADINGS)
    writer.writerows(rows)
