"""
Extract saint names and feast dates from a Bollandist calendar HTML page.

Each ``<tr>`` of the page is one saint: the first cell holds the name
(with its attributes and modifiers as free text), and the dates are the
``<a class="choixDate">`` links sitting directly in the row's cells.  A row
becomes one raw feast line:

    Barbara v. m. Nicomed. (Trans.)\t05/Dec.|16/Dec.|04/Dec.

which is what the feast-line parser consumes.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import requests
from bs4 import BeautifulSoup

from feasts.config import (
    DATE_LINK_CLASS,
    HEADERS,
    REQUEST_TIMEOUT,
    SCRAPE_DATE_SEPARATOR,
    SCRAPE_FIELD_SEPARATOR,
)


@dataclass
class SaintRow:
    """One table row: the name cell text and its date links."""
    name: Optional[str]
    dates: list[str] = field(default_factory=list)

    def to_line(self) -> str:
        """Render as ``name<TAB>date1|date2|...``."""
        dates = SCRAPE_DATE_SEPARATOR.join(self.dates)
        return f"{self.name or ''}{SCRAPE_FIELD_SEPARATOR}{dates}"


def load_html(source: str) -> str:
    """Return the HTML text of a local file or an http(s) URL."""
    if re.match(r"^https?://", source, re.IGNORECASE):
        r = requests.get(source, headers=HEADERS, timeout=REQUEST_TIMEOUT)
        r.raise_for_status()
        return r.text

    with open(Path(source), "r", encoding="utf-8") as f:
        return f.read()


def extract_rows(html: str) -> list[SaintRow]:
    """Parse every table row that carries at least one date link."""
    soup = BeautifulSoup(html, "html.parser")

    rows = []
    for tr in soup.find_all("tr"):
        cells = tr.find_all("td", recursive=False)
        name = cells[0].get_text() if cells else None

        # Only links that are direct children of the row's own cells
        dates = [
            a.get_text().strip()
            for td in cells
            for a in td.find_all("a", class_=DATE_LINK_CLASS, recursive=False)
        ]

        if dates:
            rows.append(SaintRow(name=name, dates=dates))

    return rows


def extract_lines(html: str) -> list[str]:
    """Parse a calendar page straight into raw feast lines."""
    return [row.to_line() for row in extract_rows(html)]
