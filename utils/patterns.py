"""Pre-compiled regex patterns for the rainfall table tools.

All patterns are compiled once at module import so the per-cell helpers in
utils.strings do not recompile them for every row.

Usage:
    from utils.patterns import NON_NUMERIC_CHARS, LEADING_NUMBER

    cleaned = NON_NUMERIC_CHARS.sub('', "1,234 mm")
"""

import re

# Byte-order marker at the very start of a decoded CSV file
LEADING_BOM = re.compile(r'^\ufeff')

# Everything that is not a digit, a dot or a minus sign
# "1,234.5 mm" -> "1234.5"
NON_NUMERIC_CHARS = re.compile(r'[^0-9.\-]')

# Longest numeric prefix of an already-stripped string.
# Matches: "12", "-12", "1.5", ".5", "5." ; "1.2.3" stops at "1.2"
LEADING_NUMBER = re.compile(r'-?(?:\d+(?:\.\d*)?|\.\d+)')

# URL schemes that are fetched over HTTP rather than read from disk
HTTP_URL = re.compile(r'^https?://', re.IGNORECASE)

# Whitespace (and stray byte-order markers) at either end of a line or cell
EDGE_SPACE = re.compile(r'^[\s\ufeff]+|[\s\ufeff]+$')
