"""Dataset-wide rainfall averages for the summary cards."""

from utils.config import ColumnCandidates
from utils.csv_parser import Row
from utils.strings import to_number_safe

from rainfall.models import RainfallSummary

# field name -> header spellings tried in order
SUMMARY_FIELDS = {
    "avg_total": ColumnCandidates.TOTAL,
    "avg_normal": ColumnCandidates.NORMAL,
    "avg_departure": ColumnCandidates.DEPARTURE,
}


def _lookup(row: Row, candidates) -> float:
    key = ColumnCandidates.first_present(row, candidates)
    return to_number_safe(row[key]) if key is not None else 0.0


def compute_summary(data: list[Row] | None) -> RainfallSummary:
    """Average actual, normal and departure values over every row.

    Each average divides by the total row count, so a row that lacks the
    column contributes zero instead of being skipped.

    Args:
        data: Parsed rows

    Returns:
        RainfallSummary; all fields None when ``data`` is empty
    """
    if not data:
        return RainfallSummary()

    sums = dict.fromkeys(SUMMARY_FIELDS, 0.0)
    count = 0
    for row in data:
        for name, candidates in SUMMARY_FIELDS.items():
            sums[name] += _lookup(row, candidates)
        count += 1

    return RainfallSummary(
        **{name: total / count for name, total in sums.items()},
        district_count=count,
    )
