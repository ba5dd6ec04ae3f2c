"""
Feast record extraction from a lexed chunk sequence.

The chunks of a line are walked front to back with one chunk of lookahead,
through five states that never re-enter an earlier one:

    Name -> Attributes -> Modifiers -> Dates -> Done

  - Name: a leading ``other`` chunk, then any ``other``/``bracket`` chunks.
  - Attributes: ``attribute`` chunks add entries; an ``other`` chunk is a
    parenthesized qualifier on the latest entry ("m. (Nicomed.)"), a
    ``bracket`` chunk is appended to it as is.
  - Modifiers: at most one ``modifier`` chunk.
  - Dates: at most one ``date`` chunk, kept in input order.

Each step is a pure function of (chunks, cursor) returning the extracted
field and the advanced cursor.  Problems are returned as diagnostics next
to the record; nothing here raises on bad input.
"""

import enum
import unicodedata
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from feasts.config import PARALLEL_CHUNKSIZE
from feasts.logic.lexer import Chunk, TokenClass, format_chunks, tokenize


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Feast:
    """One parsed calendar entry."""
    line: str                           # original line, stripped
    name: str = ""
    attributes: tuple[str, ...] = ()    # e.g. ("v.", "m. (Nicomed.)")
    modifiers: tuple[str, ...] = ()     # e.g. ("(Trans.)",)
    dates: tuple[str, ...] = ()         # e.g. ("05/Dec.", "16/Dec.")


class DiagnosticKind(enum.Enum):
    CLASSIFICATION = "classification"   # segments matching no grammar
    UNCONSUMED = "unconsumed"           # chunks left after the Dates state


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while parsing one line."""
    kind: DiagnosticKind
    message: str
    chunks: tuple[Chunk, ...]

    def __str__(self) -> str:
        return f"WARNING: {self.message}"


@dataclass(frozen=True)
class ParseResult:
    """A feast record plus the diagnostics raised for its line."""
    feast: Feast
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """False when the record should be considered suspect."""
        return not self.diagnostics


# ---------------------------------------------------------------------------
# Cursor helpers
# ---------------------------------------------------------------------------

def _next_class(chunks: tuple[Chunk, ...], cursor: int) -> Optional[TokenClass]:
    if cursor < len(chunks):
        return chunks[cursor].token_class
    return None


def _next_is(chunks: tuple[Chunk, ...], cursor: int, *classes: TokenClass) -> bool:
    return _next_class(chunks, cursor) in classes


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------

def extract_name(chunks: tuple[Chunk, ...], cursor: int = 0) -> tuple[str, int]:
    """Consume the name: a leading ``other`` chunk plus following
    ``other``/``bracket`` chunks, space-joined.
    """
    parts = []
    if _next_is(chunks, cursor, TokenClass.OTHER):
        parts.append(chunks[cursor].text)
        cursor += 1

    while _next_is(chunks, cursor, TokenClass.OTHER, TokenClass.BRACKET):
        parts.append(chunks[cursor].text)
        cursor += 1

    return " ".join(parts), cursor


def extract_attributes(chunks: tuple[Chunk, ...], cursor: int) -> tuple[tuple[str, ...], int]:
    """Consume attribute chunks and the qualifiers that follow them.

    A qualifier (``other`` or ``bracket``) seen before any attribute has
    nothing to attach to; the state stops there and leaves the chunk
    unconsumed so that the completion check reports it.
    """
    attributes: list[str] = []
    while _next_is(chunks, cursor, TokenClass.ATTRIBUTE, TokenClass.OTHER, TokenClass.BRACKET):
        chunk = chunks[cursor]
        if chunk.token_class is TokenClass.ATTRIBUTE:
            attributes.extend(chunk.segments)
        elif not attributes:
            break
        elif chunk.token_class is TokenClass.OTHER:
            attributes[-1] += f" ({chunk.text})"
        else:
            attributes[-1] += f" {chunk.text}"
        cursor += 1

    return tuple(attributes), cursor


def extract_modifiers(chunks: tuple[Chunk, ...], cursor: int) -> tuple[tuple[str, ...], int]:
    """Consume a single ``modifier`` chunk, if next."""
    if _next_is(chunks, cursor, TokenClass.MODIFIER):
        return chunks[cursor].segments, cursor + 1
    return (), cursor


def extract_dates(chunks: tuple[Chunk, ...], cursor: int) -> tuple[tuple[str, ...], int]:
    """Consume a single ``date`` chunk, if next.  Order and duplicates are kept."""
    if _next_is(chunks, cursor, TokenClass.DATE):
        return chunks[cursor].segments, cursor + 1
    return (), cursor


def check_errors(chunks: tuple[Chunk, ...]) -> Optional[Diagnostic]:
    """Report the ``error`` chunks of a line, if any."""
    errors = tuple(c for c in chunks if c.token_class is TokenClass.ERROR)
    if not errors:
        return None
    return Diagnostic(
        kind=DiagnosticKind.CLASSIFICATION,
        message=f"found the following errors: {[list(c.segments) for c in errors]}",
        chunks=errors,
    )


def check_unconsumed(chunks: tuple[Chunk, ...], cursor: int, line: str) -> Optional[Diagnostic]:
    """Report the chunks left over after the last state, if any."""
    leftover = chunks[cursor:]
    if not leftover:
        return None
    return Diagnostic(
        kind=DiagnosticKind.UNCONSUMED,
        message=f"line not consumed: {format_chunks(leftover)}; (line: '{line}')",
        chunks=leftover,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_line(line: str) -> ParseResult:
    """Parse one raw feast line into a record and its diagnostics.

    Example:
        >>> result = parse_line("Maria ep.")
        >>> result.feast.name, result.feast.attributes
        ('Maria', ('ep.',))
        >>> result.ok
        True
    """
    # Decomposed accents ("a" + U+0308) would split words in the lexer
    line = unicodedata.normalize("NFC", line.strip())
    chunks = tokenize(line)

    name, cursor = extract_name(chunks)
    attributes, cursor = extract_attributes(chunks, cursor)
    modifiers, cursor = extract_modifiers(chunks, cursor)
    dates, cursor = extract_dates(chunks, cursor)

    diagnostics = [
        d for d in (check_errors(chunks), check_unconsumed(chunks, cursor, line))
        if d is not None
    ]

    feast = Feast(
        line=line,
        name=name,
        attributes=attributes,
        modifiers=modifiers,
        dates=dates,
    )
    return ParseResult(feast=feast, diagnostics=tuple(diagnostics))


def parse_lines(lines: Iterable[str], workers: Optional[int] = None) -> Iterator[ParseResult]:
    """Parse many lines, yielding results in input order.

    Lines are independent of each other, so with ``workers`` > 1 they are
    spread over a process pool; ``Executor.map`` keeps the input order.
    """
    if not workers or workers <= 1:
        for line in lines:
            yield parse_line(line)
        return

    with ProcessPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(parse_line, lines, chunksize=PARALLEL_CHUNKSIZE)
