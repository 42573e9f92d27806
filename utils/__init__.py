"""Shared utilities for the rainfall table tools."""

# Pattern definitions
from utils.patterns import (
    LEADING_BOM,
    EDGE_SPACE,
    NON_NUMERIC_CHARS,
    LEADING_NUMBER,
    HTTP_URL,
)

# String utilities
from utils.strings import to_number_safe, escape_html

# CSV parsing
from utils.csv_parser import ParsedCSV, Row, parse_csv

# HTTP utilities
from utils.http import SessionManager, fetch_text

# Output formatting
from utils.formatting import format_num, format_percent, format_count

# Configuration
from utils.config import (
    AppConfig,
    ColumnCandidates,
    Labels,
    DATA_PATH,
    MONTH_FILES,
)

__all__ = [
    # Patterns
    "LEADING_BOM",
    "EDGE_SPACE",
    "NON_NUMERIC_CHARS",
    "LEADING_NUMBER",
    "HTTP_URL",
    # Strings
    "to_number_safe",
    "escape_html",
    # CSV
    "ParsedCSV",
    "Row",
    "parse_csv",
    # HTTP
    "SessionManager",
    "fetch_text",
    # Formatting
    "format_num",
    "format_percent",
    "format_count",
    # Config
    "AppConfig",
    "ColumnCandidates",
    "Labels",
    "DATA_PATH",
    "MONTH_FILES",
]
