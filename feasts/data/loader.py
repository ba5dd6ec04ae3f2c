"""
Loads the YAML grammar vocabularies used by the feast-line lexer.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml


_DATA_DIR = Path(__file__).parent


@dataclass(frozen=True)
class Vocabulary:
    """The closed vocabularies of the feast-line grammar."""
    months: tuple[str, ...]
    attributes: frozenset[str]
    separators: str


@lru_cache(maxsize=None)
def _load_yaml(relative_path: str) -> dict:
    """Load and cache a YAML file relative to the data directory."""
    full_path = _DATA_DIR / relative_path
    with open(full_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@lru_cache(maxsize=1)
def load_vocabulary() -> Vocabulary:
    """Return the month, attribute and separator vocabularies.

    Raises:
        ValueError if the grammar file is missing a section or a section
        is empty.
    """
    raw = _load_yaml("grammar.yaml") or {}

    months = raw.get("months") or []
    attributes = raw.get("attributes") or []
    separators = raw.get("separators") or ""
    if not months or not attributes:
        raise ValueError("grammar.yaml must define non-empty 'months' and 'attributes'")

    return Vocabulary(
        months=tuple(str(m).strip() for m in months),
        attributes=frozenset(str(a).strip() for a in attributes),
        separators=str(separators),
    )
