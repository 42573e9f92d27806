"""Lenient CSV parser for the district rainfall files.

The source files are simple comma-separated exports: no quoting, no
embedded commas, optionally prefixed with a UTF-8 byte-order marker and
saved with Windows line endings. Rows are zipped positionally with the
header; a short row is padded with empty strings and extra trailing fields
are dropped. A column-count mismatch is never an error.

Usage:
    from utils.csv_parser import parse_csv

    parsed = parse_csv(text)
    parsed.headers  # ["District", "Total_Rainfall_mm", ...]
    parsed.data     # [{"District": "Patna", "Total_Rainfall_mm": "812.4"}, ...]
"""

from __future__ import annotations

from dataclasses import dataclass, field

from utils.patterns import EDGE_SPACE, LEADING_BOM

Row = dict[str, str]


@dataclass
class ParsedCSV:
    """Header list plus one mapping per data line, keyed by every header."""

    headers: list[str] = field(default_factory=list)
    data: list[Row] = field(default_factory=list)

    def __iter__(self):
        # allows ``headers, data = parse_csv(text)``
        yield self.headers
        yield self.data


def _trim(s: str) -> str:
    # str.strip() keeps U+FEFF, which the exports sometimes carry mid-file
    return EDGE_SPACE.sub("", s)


def _split_line(line: str) -> list[str]:
    return [_trim(cell) for cell in line.split(",")]


def parse_csv(text: str) -> ParsedCSV:
    """Parse raw CSV text into headers and row mappings.

    Args:
        text: Decoded file contents

    Returns:
        ParsedCSV; empty headers and rows when the text has no non-blank line
    """
    text = LEADING_BOM.sub("", text or "").replace("\r", "")
    lines = [_trim(line) for line in text.split("\n")]
    lines = [line for line in lines if line != ""]
    if not lines:
        return ParsedCSV()

    headers = _split_line(lines[0])
    data: list[Row] = []
    for line in lines[1:]:
        cols = _split_line(line)
        row: Row = {}
        for i, h in enumerate(headers):
            row[h] = cols[i] if i < len(cols) else ""
        data.append(row)
    return ParsedCSV(headers=headers, data=data)
