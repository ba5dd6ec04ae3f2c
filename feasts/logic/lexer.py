"""
Feast-line lexer.

Splits a raw calendar line such as

    Barbara v. m. Nicomed. (Trans.)  05/Dec.;16/Dec.;04/Dec.

into segments, classifies each segment, and folds runs of same-class
segments into chunks:

    other     [Barbara]
    attribute [v., m.]
    other     [Nicomed.]
    modifier  [(Trans.)]
    date      [05/Dec., 16/Dec., 04/Dec.]

The token classes are tested in a fixed priority order, both when the line
is scanned and when a segment is classified:

    bracket > date > modifier > attribute > other

Anything that starts none of these (a stray "%", an unbalanced "(") becomes
a one-character ``error`` segment.  The lexer never raises; reporting
``error`` chunks is the caller's job.
"""

import enum
import itertools
import re
import string
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable

from feasts.data.loader import load_vocabulary


class TokenClass(enum.Enum):
    BRACKET = "bracket"
    DATE = "date"
    MODIFIER = "modifier"
    ATTRIBUTE = "attribute"
    OTHER = "other"
    ERROR = "error"


@dataclass(frozen=True)
class Chunk:
    """A maximal run of consecutive segments sharing one token class."""
    token_class: TokenClass
    segments: tuple[str, ...]

    @property
    def text(self) -> str:
        """The segments joined with single spaces."""
        return " ".join(self.segments)

    def __str__(self) -> str:
        return f"{self.token_class.value} {list(self.segments)}"


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

# Brackets and modifiers need some non-blank text inside
BRACKET_PATTERN = r"\[(?=[^\]]*[^\]\s])[^\]]+\]"
MODIFIER_PATTERN = r"\((?=[^)]*[^)\s])[^)]+\)"
OTHER_PATTERN = rf"[^\W_]+[{re.escape(string.punctuation)}]?"


def _alternation(words: Iterable[str]) -> str:
    # Longest first, so that no entry shadows a longer one sharing its prefix
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


@lru_cache(maxsize=1)
def date_pattern() -> str:
    """Day of one or two digits, "/", a month abbreviation and its period."""
    months = load_vocabulary().months
    return rf"[0-9]{{1,2}}/(?:{_alternation(months)})\."


@lru_cache(maxsize=1)
def attribute_pattern() -> str:
    """Any vocabulary attribute, as a whole word.

    Entries are written with their trailing period ("v.", "ep."), which
    ends the word; entries without one ("dux") must not run on into a
    letter or digit.  "_" counts as a separator here, as it does for
    ``other`` words.
    """
    attributes = load_vocabulary().attributes
    dotted = [a for a in attributes if a.endswith(".")]
    bare = [a for a in attributes if not a.endswith(".")]

    alternatives = []
    if dotted:
        alternatives.append(f"(?:{_alternation(dotted)})")
    if bare:
        alternatives.append(rf"(?:{_alternation(bare)})(?![^\W_])")
    return rf"(?<![^\W_])(?:{'|'.join(alternatives)})"


@lru_cache(maxsize=1)
def _segment_regex() -> re.Pattern:
    separators = re.escape(load_vocabulary().separators)
    error_pattern = rf"[^\s{separators}]"
    return re.compile("|".join([
        BRACKET_PATTERN,
        date_pattern(),
        MODIFIER_PATTERN,
        attribute_pattern(),
        OTHER_PATTERN,
        error_pattern,
    ]))


@lru_cache(maxsize=1)
def _classifiers() -> tuple[tuple[Callable[[str], object], TokenClass], ...]:
    """(predicate, class) pairs, evaluated top to bottom; first match wins."""
    attributes = load_vocabulary().attributes
    return (
        (re.compile(BRACKET_PATTERN).fullmatch, TokenClass.BRACKET),
        (re.compile(date_pattern()).fullmatch, TokenClass.DATE),
        (re.compile(MODIFIER_PATTERN).fullmatch, TokenClass.MODIFIER),
        (attributes.__contains__, TokenClass.ATTRIBUTE),
        (re.compile(OTHER_PATTERN).fullmatch, TokenClass.OTHER),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def split_segments(line: str) -> list[str]:
    """Scan a line left to right into its raw segments.

    Whitespace and the list separators (";" and "|") split segments and
    are dropped.  Every other character ends up in exactly one segment.
    """
    return _segment_regex().findall(line)


def classify(segment: str) -> TokenClass:
    """Return the token class of a single segment."""
    for predicate, token_class in _classifiers():
        if predicate(segment):
            return token_class
    return TokenClass.ERROR


def fold_chunks(classified: Iterable[tuple[TokenClass, str]]) -> tuple[Chunk, ...]:
    """Merge adjacent (class, segment) pairs of equal class into chunks."""
    return tuple(
        Chunk(token_class, tuple(segment for _, segment in group))
        for token_class, group in itertools.groupby(classified, key=lambda pair: pair[0])
    )


def tokenize(line: str) -> tuple[Chunk, ...]:
    """Lex a raw feast line into its chunk sequence."""
    return fold_chunks((classify(s), s) for s in split_segments(line))


def chunks_text(chunks: Iterable[Chunk]) -> str:
    """Rejoin all segments of a chunk sequence with single spaces."""
    return " ".join(chunk.text for chunk in chunks)


def format_chunks(chunks: Iterable[Chunk]) -> str:
    """Render chunks for warnings, e.g. "modifier ['(B)'], date ['01/Jan.']"."""
    return ", ".join(str(chunk) for chunk in chunks)
