"""
Top-10 horizontal bar chart of district rainfall.

top10() is the pure part: pick the value column, rank the rows and return
the ten largest in render order. render_top10_chart() fetches a CSV, runs
top10() and draws the result into a matplotlib Axes.

The caller owns the chart: pass the TopChart returned by the previous call
as ``chart`` and it is disposed of before the new bars are drawn, so one
Axes never carries two series.
"""

import logging
from dataclasses import dataclass, field

from matplotlib.axes import Axes
from matplotlib.container import BarContainer

from utils.config import ColumnCandidates, Labels
from utils.csv_parser import ParsedCSV, Row
from utils.strings import to_number_safe

from rainfall.data import fetch_csv
from rainfall.models import ChartData

logger = logging.getLogger(__name__)

TOP_N = 10
BAR_RGB = (14 / 255, 116 / 255, 144 / 255)
BAR_HEIGHT = 0.6
GRID_RGBA = (0, 0, 0, 0.03)


def pick_value_column(headers: list[str], value_key: str | None = None) -> str | None:
    """Explicit key, else the first header that is a known total column,
    else the second header."""
    if value_key:
        return value_key
    for h in headers:
        if h in ColumnCandidates.CHART_VALUE:
            return h
    return headers[1] if len(headers) > 1 else None


def _label(row: Row, headers: list[str]) -> str:
    first = row.get(headers[0]) if headers else None
    for candidate in (first, *(row.get(k) for k in ColumnCandidates.DISTRICT)):
        if candidate:
            return candidate
    return next(iter(row.values()), "")


def top10(parsed: ParsedCSV, value_key: str | None = None) -> ChartData:
    """Ten highest rows by value, smallest first.

    Ties keep file order (the sort is stable). Non-numeric values rank as 0.
    """
    col = pick_value_column(parsed.headers, value_key)
    ranked = sorted(
        parsed.data, key=lambda r: to_number_safe(r.get(col)), reverse=True
    )
    top = ranked[:TOP_N][::-1]
    return ChartData(
        value_key=col,
        labels=[str(_label(r, parsed.headers)) for r in top],
        values=[to_number_safe(r.get(col)) for r in top],
    )


@dataclass
class TopChart:
    """Handle to a drawn top-10 chart."""

    ax: Axes
    data: ChartData
    bars: BarContainer | None = None
    destroyed: bool = field(default=False, init=False)

    def destroy(self) -> None:
        """Remove the bars and reset the Axes; safe to call twice."""
        if self.destroyed:
            return
        self.ax.clear()
        self.bars = None
        self.destroyed = True


def draw_chart(ax: Axes, data: ChartData) -> TopChart:
    """Draw ``data`` as one horizontal bar series into ``ax``."""
    colors = [(*BAR_RGB, 0.6 + i * 0.03) for i in range(len(data.values))]
    positions = list(range(len(data.values)))
    bars = ax.barh(
        positions, data.values, height=BAR_HEIGHT, color=colors or None,
        label=Labels.CHART_SERIES,
    )
    ax.set_yticks(positions, labels=data.labels, fontsize=12)
    # first point on top, matching the order of data.labels
    if not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.grid(axis="x", color=GRID_RGBA)
    ax.set_axisbelow(True)
    return TopChart(ax=ax, data=data, bars=bars)


def render_top10_chart(
    csv_file: str,
    ax: Axes,
    value_key: str | None = None,
    chart: TopChart | None = None,
    **fetch_kwargs,
) -> TopChart:
    """Fetch ``csv_file`` and draw its top-10 chart into ``ax``.

    Args:
        csv_file: File name relative to the data path
        ax: Axes to draw into
        value_key: Column to rank by (default: guessed from the headers)
        chart: Handle from a previous render; destroyed before drawing
        **fetch_kwargs: Passed to fetch_csv (data_path, session, timeout)

    Returns:
        New TopChart handle

    Raises:
        CSVLoadError: If the CSV cannot be fetched; ``chart`` is left intact
    """
    parsed = fetch_csv(csv_file, **fetch_kwargs)
    data = top10(parsed, value_key)
    if chart is not None:
        chart.destroy()
    new_chart = draw_chart(ax, data)
    logger.debug(
        "chart_rendered file=%s column=%s points=%d", csv_file, data.value_key, len(data.values),
        extra={"csv_file": csv_file, "column": data.value_key, "rows": len(data.values)},
    )
    return new_chart
