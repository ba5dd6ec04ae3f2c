#!/usr/bin/env python3
"""
Parse Bollandist feast lines into a table of names, attributes, modifiers
and dates.

Input lines come from the named files, or stdin, one feast per line
(typically the output of tools/extract_saints.py).

Usage:
    python parse_feasts.py saints.txt
    python parse_feasts.py saints.txt --output data/bollandistes.csv
    python parse_feasts.py saints.txt --output data/bollandistes.docx
    python tools/extract_saints.py page.html | python parse_feasts.py --jobs 4
"""

import argparse
import sys
from pathlib import Path

from feasts.config import DEFAULT_OUTPUT
from feasts.document.builder import write_table
from feasts.logic.extractor import parse_lines
from feasts.sources.lines import read_lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse Bollandist feast lines into a table")
    parser.add_argument("inputs", nargs="*", metavar="INPUT",
                        help="Files of feast lines (default: stdin)")
    parser.add_argument("--output", "-o", default=str(DEFAULT_OUTPUT),
                        help=f"Output .xlsx, .docx, .csv or .tsv file (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--jobs", "-j", type=int, default=1,
                        help="Parse lines in this many worker processes")
    parser.add_argument("--strict", action="store_true",
                        help="Exit with status 2 if any line produced a warning")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Do not print per-line warnings")
    args = parser.parse_args(argv)

    output_path = Path(args.output)
    warned_lines = 0

    def feasts():
        # Warnings go to stderr as each result comes in, in input order
        nonlocal warned_lines
        for result in parse_lines(read_lines(args.inputs), workers=args.jobs):
            if not result.ok:
                warned_lines += 1
                if not args.quiet:
                    for diagnostic in result.diagnostics:
                        print(diagnostic, file=sys.stderr)
            yield result.feast

    print("Parsing feast lines...")
    try:
        count = write_table(feasts(), output_path)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"  Parsed {count} lines")
    if warned_lines:
        print(f"  Warning: {warned_lines} lines were not parsed cleanly")
    print(f"Wrote {output_path}")

    if args.strict and warned_lines:
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
