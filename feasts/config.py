"""
Constants and configuration for the Bollandist feast-line parser.
"""

from pathlib import Path

# Default spreadsheet written by parse_feasts.py
DEFAULT_OUTPUT = Path("data") / "bollandistes.xlsx"

# Output table columns, in order
HEADINGS = ("Name", "Attributes", "Modifiers", "Dates", "Line")

# Joiner for list-valued columns (attributes, modifiers, dates)
LIST_JOINER = " | "

# Sheet / table title
TABLE_TITLE = "feasts"

# Page dimensions (US letter, landscape: the Line column is wide)
PAGE_WIDTH_INCHES = 11.0
PAGE_HEIGHT_INCHES = 8.5
MARGIN_INCHES = 0.5

# Every column gets the same width, as in the original workbook
COLUMN_WIDTH_CHARS = 30
COLUMN_WIDTH_INCHES = 2.0

# Fonts used in the output document
FONT_BODY = "Garamond"
FONT_HEADING = "Gill Sans"

# HTML source (Bollandist calendar table)
DATE_LINK_CLASS = "choixDate"

# Separator between the name and the dates in scraped lines,
# and between individual dates
SCRAPE_FIELD_SEPARATOR = "\t"
SCRAPE_DATE_SEPARATOR = "|"

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

REQUEST_TIMEOUT = 30

# Lines per worker task when parsing with --jobs
PARALLEL_CHUNKSIZE = 256
