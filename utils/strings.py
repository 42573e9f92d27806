"""String processing utilities for the rainfall table tools.

to_number_safe() is called for every cell on every sort, so the patterns it
uses are pre-compiled in utils.patterns.
"""

from utils.patterns import NON_NUMERIC_CHARS, LEADING_NUMBER


def to_number_safe(val) -> float:
    """Best-effort conversion of a cell value to a number.

    Every character that is not a digit, ``.`` or ``-`` is stripped first and
    the longest leading number of what remains is parsed. Anything that does
    not start with a number yields 0.

    Examples:
        "1,234.5 mm" -> 1234.5
        "N/A"        -> 0
        "-12"        -> -12
        "1.2.3"      -> 1.2

    Args:
        val: Value to convert (any type; None is treated as empty)

    Returns:
        float: Parsed value, or 0.0
    """
    if val is None:
        return 0.0
    s = NON_NUMERIC_CHARS.sub('', str(val))
    m = LEADING_NUMBER.match(s)
    if not m:
        return 0.0
    return float(m.group(0))


def escape_html(s) -> str:
    """Escape a cell value for embedding in HTML markup.

    Only ``&``, ``<`` and ``>`` are replaced; quotes are left alone because
    values are only ever placed in element content, never in attributes.
    None renders as an empty string.
    """
    if s is None:
        return ''
    return str(s).replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
