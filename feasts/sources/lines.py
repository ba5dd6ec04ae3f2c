"""
Raw line source for the batch parser: named files in order, or stdin.
"""

import fileinput
from typing import Iterator, Sequence


def read_lines(paths: Sequence[str] = ()) -> Iterator[str]:
    """Yield the non-blank lines of the given files, or of stdin.

    A path of "-" (or no path at all) reads standard input.  Trailing
    newlines are removed; other whitespace is left for the parser.
    """
    with fileinput.input(files=paths or ("-",), encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.strip():
                yield line
