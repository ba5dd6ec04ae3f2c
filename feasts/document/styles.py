"""
Page setup and paragraph styles for the feast table document.

The document is a single landscape section holding a title and one
table; the table cells use the "Table Text" style, the header row the
"Table Heading" style.
"""

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor
from docx.oxml.ns import qn

from feasts.config import (
    FONT_BODY,
    FONT_HEADING,
    MARGIN_INCHES,
    PAGE_HEIGHT_INCHES,
    PAGE_WIDTH_INCHES,
)


def create_document() -> Document:
    """Create a new Document with the feast table styles and page setup."""
    doc = Document()
    _setup_page(doc)
    _create_styles(doc)
    return doc


def _setup_page(doc: Document):
    """Configure the first section as a landscape page with even margins."""
    section = doc.sections[0]
    section.orientation = WD_ORIENT.LANDSCAPE
    section.page_width = Inches(PAGE_WIDTH_INCHES)
    section.page_height = Inches(PAGE_HEIGHT_INCHES)
    section.left_margin = Inches(MARGIN_INCHES)
    section.right_margin = Inches(MARGIN_INCHES)
    section.top_margin = Inches(MARGIN_INCHES)
    section.bottom_margin = Inches(MARGIN_INCHES)


# ---------------------------------------------------------------------------
# Style definitions
# ---------------------------------------------------------------------------
# Each entry: (style_name, font_name, size_pt, bold, italic, alignment,
#               space_before_pt, space_after_pt)

_STYLE_DEFS = [
    # Document title above the table
    ("Heading", FONT_HEADING, 14, False, False,
     WD_ALIGN_PARAGRAPH.LEFT, 0, 6),

    # Header row: Name, Attributes, Modifiers, Dates, Line
    ("Table Heading", FONT_HEADING, 10, True, False,
     WD_ALIGN_PARAGRAPH.LEFT, 0, 0),

    # Body cells
    ("Table Text", FONT_BODY, 10, False, False,
     WD_ALIGN_PARAGRAPH.LEFT, 0, 0),
]


def _create_styles(doc: Document):
    """Register all custom paragraph styles in the document."""
    for (name, font_name, size_pt, bold, italic, alignment,
         sp_before_pt, sp_after_pt) in _STYLE_DEFS:

        # If the style already exists (e.g., "Heading"), modify it;
        # otherwise create a new one.
        try:
            style = doc.styles[name]
        except KeyError:
            style = doc.styles.add_style(name, 1)  # 1 = WD_STYLE_TYPE.PARAGRAPH

        style.font.name = font_name
        style.font.size = Pt(size_pt)
        style.font.bold = bold
        style.font.italic = italic
        style.font.color.rgb = RGBColor(0, 0, 0)

        # Built-in heading styles are "linked" (paragraph + character).
        link_elem = style.element.find(qn("w:link"))
        if link_elem is not None:
            style.element.remove(link_elem)

        pf = style.paragraph_format
        pf.alignment = alignment
        pf.space_before = Pt(sp_before_pt)
        pf.space_after = Pt(sp_after_pt)

        if name.startswith("Heading"):
            pf.keep_with_next = True
