"""
Tabular rendering of feast records, shared by every output format.
"""

from feasts.config import LIST_JOINER
from feasts.logic.extractor import Feast


def feast_to_row(feast: Feast) -> list[str]:
    """Return the Name, Attributes, Modifiers, Dates and Line cells."""
    return [
        feast.name,
        LIST_JOINER.join(feast.attributes),
        LIST_JOINER.join(feast.modifiers),
        LIST_JOINER.join(feast.dates),
        feast.line,
    ]
