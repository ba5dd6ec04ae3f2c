#!/usr/bin/env python3
"""
Scrape saint names and feast dates from a Bollandist calendar page.

Writes one line per saint, "name<TAB>date1|date2|...", ready for
parse_feasts.py.  The page can be a saved HTML file or a URL.

Usage:
    python tools/extract_saints.py calendar.html > saints.txt
    python tools/extract_saints.py https://example.org/calendar.html -o saints.txt
"""

import argparse
import sys
from pathlib import Path

import requests

from feasts.sources.html_table import extract_lines, load_html


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract saint lines from a Bollandist calendar page")
    parser.add_argument("source", help="HTML file path or http(s) URL")
    parser.add_argument("--output", "-o",
                        help="Write lines to this file instead of stdout")
    args = parser.parse_args(argv)

    try:
        html = load_html(args.source)
    except (OSError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    lines = extract_lines(html)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        print(f"Extracted {len(lines)} saints to {output_path}", file=sys.stderr)
    else:
        for line in lines:
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
