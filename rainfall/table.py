"""
In-memory district table: filter, sort, paginate, render and export.

DistrictTable owns one dataset and its view state (query, sort column and
direction, page). Every mutating call re-renders the current page into the
container it was given.

Ordering rules callers rely on:
    - set_filter() rebuilds ``filtered`` from the full dataset, so any
      ordering applied by an earlier sort_by() is lost until the next sort.
    - sort_by() compares coerced numbers only; text columns compare equal
      and keep their current order.
"""

import csv
import io
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment

from utils.config import AppConfig, Labels
from utils.csv_parser import Row
from utils.strings import escape_html, to_number_safe

logger = logging.getLogger(__name__)

SORT_DESC = -1
SORT_ASC = 1

_env = Environment(autoescape=False)
_env.filters["escape_html"] = escape_html

_ROWS_TEMPLATE = _env.from_string(
    "{% for row in rows %}<tr>"
    "{% for h in headers %}<td>{{ row.get(h, '') | escape_html }}</td>{% endfor %}"
    "</tr>{% endfor %}"
)
_EMPTY_TEMPLATE = _env.from_string(
    '<tr><td colspan="{{ colspan }}">{{ message | escape_html }}</td></tr>'
)


@dataclass
class TableBody:
    """Minimal render target: holds the markup of a ``<tbody>``."""

    inner_html: str = ""


class DistrictTable:
    """Sortable, filterable, paginated view over a list of district rows."""

    def __init__(
        self,
        headers: list[str],
        data: list[Row],
        container: Any = None,
        per_page: int | None = None,
    ) -> None:
        """Create the view; nothing is rendered until the first call.

        Args:
            headers: Column names in display order
            data: Row mappings (usually ``parse_csv(text).data``)
            container: Object with a writable ``inner_html`` (default: TableBody())
            per_page: Rows per page (default: AppConfig page_size)
        """
        self.container = container if container is not None else TableBody()
        self.headers = list(headers)
        self.raw_data = list(data)
        self.per_page = per_page or AppConfig.from_env().page_size
        self.page = 1
        self.filtered: list[Row] = list(self.raw_data)
        self.sort_key: str | None = None
        self.sort_dir = SORT_DESC

    # ── View state ────────────────────────────────────────────────────────

    @property
    def max_page(self) -> int:
        return max(1, math.ceil(len(self.filtered) / self.per_page))

    def page_rows(self) -> list[Row]:
        """Rows of the current page window."""
        start = (self.page - 1) * self.per_page
        return self.filtered[start:start + self.per_page]

    def set_filter(self, query: str | None) -> str:
        """Keep rows where any column contains ``query`` (case-insensitive).

        An empty query restores the full dataset. Resets to page 1.
        """
        if not query:
            self.filtered = list(self.raw_data)
        else:
            s = query.lower()
            self.filtered = [
                r for r in self.raw_data
                if any(s in str(r.get(h) or "").lower() for h in self.headers)
            ]
        self.page = 1
        return self.render()

    def sort_by(self, key: str) -> str:
        """Sort by ``key``; repeating the same key flips the direction.

        A newly selected column always starts descending.
        """
        if self.sort_key == key:
            self.sort_dir = -self.sort_dir
        else:
            self.sort_key = key
            self.sort_dir = SORT_DESC
        self.filtered.sort(
            key=lambda r: to_number_safe(r.get(key)),
            reverse=self.sort_dir == SORT_DESC,
        )
        return self.render()

    def go_to_page(self, page: int) -> str:
        """Jump to ``page``, clamped into ``[1, max_page]``."""
        self.page = min(self.max_page, max(1, int(page)))
        return self.render()

    # ── Output ────────────────────────────────────────────────────────────

    def render(self) -> str:
        """Write the current page's ``<tr>`` markup into the container."""
        html = _ROWS_TEMPLATE.render(rows=self.page_rows(), headers=self.headers)
        if not html:
            html = _EMPTY_TEMPLATE.render(
                colspan=len(self.headers), message=Labels.NO_RECORDS,
            )
        self.container.inner_html = html
        return html

    def to_csv(self) -> str:
        """Serialise the filtered rows (all pages) as CSV text.

        The header line is written as-is; every data field is double-quoted
        with embedded quotes doubled. Lines are joined by ``\\n`` with no
        trailing newline.
        """
        buf = io.StringIO()
        writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerows(
            [str(r.get(h) or "") for h in self.headers] for r in self.filtered
        )
        lines = [",".join(self.headers)]
        body = buf.getvalue()
        if body:
            lines.append(body[:-1])
        return "\n".join(lines)

    def export_csv(self, filename: str = "export.csv",
                   directory: Path | None = None) -> Path:
        """Write to_csv() to ``directory/filename`` and return the path.

        Args:
            filename: Name of the downloaded file (default: export.csv)
            directory: Target directory (default: AppConfig export_dir)
        """
        directory = Path(directory) if directory is not None else AppConfig.from_env().export_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.to_csv())
        logger.info(
            "csv_exported filename=%s rows=%d", path, len(self.filtered),
            extra={"export_path": str(path), "rows": len(self.filtered)},
        )
        return path
