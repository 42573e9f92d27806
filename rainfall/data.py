"""
CSV retrieval for the rainfall pages.

fetch_csv() resolves a file name against the configured data path, loads it
and hands the text to utils.csv_parser.parse_csv(). The data path may be an
HTTP(S) base URL, in which case a cache-busting ``?t=<epoch-ms>`` parameter
is appended, or a local directory.

Transport problems are the only failures surfaced to callers: a non-success
status, a requests error or a missing file raises CSVLoadError carrying the
URL. Anything wrong inside the file is left to the parser's defaults.
"""

import logging
import time
from pathlib import Path

import requests

from utils.config import AppConfig, MONTH_FILES
from utils.csv_parser import ParsedCSV, parse_csv
from utils.http import SessionManager, fetch_text
from utils.patterns import HTTP_URL

logger = logging.getLogger(__name__)

# Shared by every fetch that does not bring its own session
_sessions = SessionManager()


class CSVLoadError(RuntimeError):
    """A CSV could not be retrieved; ``url`` names what was requested."""

    def __init__(self, url: str):
        super().__init__(f"CSV load failed: {url}")
        self.url = url


def build_url(filename: str, data_path: str, now: float | None = None) -> str:
    """Join ``data_path`` and ``filename``; HTTP bases get a ``t`` timestamp."""
    if HTTP_URL.match(data_path):
        ts = int((time.time() if now is None else now) * 1000)
        return f"{data_path}{filename}?t={ts}"
    return str(Path(data_path) / filename)


def fetch_csv(
    filename: str,
    data_path: str | None = None,
    session: requests.Session | None = None,
    timeout: float | None = None,
) -> ParsedCSV:
    """Load and parse one rainfall CSV.

    Args:
        filename: File name relative to the data path, e.g. "july.csv"
        data_path: URL base or directory (default: AppConfig data_path)
        session: Session for HTTP fetches (default: the module-wide pooled one)
        timeout: Seconds per HTTP fetch (default: AppConfig http_timeout)

    Returns:
        ParsedCSV with headers and rows

    Raises:
        CSVLoadError: If the file cannot be fetched or read
    """
    cfg = AppConfig.from_env()
    if data_path is None:
        data_path = cfg.data_path
    if timeout is None:
        timeout = cfg.http_timeout

    url = build_url(filename, data_path)
    start = time.monotonic()
    if HTTP_URL.match(url):
        try:
            text = fetch_text(url, session=session or _sessions.session, timeout=timeout)
        except requests.RequestException as exc:
            logger.warning("CSV fetch failed url=%s error=%s", url, exc)
            raise CSVLoadError(url) from exc
    else:
        try:
            text = Path(url).read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("CSV read failed path=%s error=%s", url, exc)
            raise CSVLoadError(url) from exc

    parsed = parse_csv(text)
    duration_ms = (time.monotonic() - start) * 1000
    logger.debug(
        "csv_loaded url=%s rows=%d duration_ms=%.1f", url, len(parsed.data), duration_ms,
        extra={"url": url, "rows": len(parsed.data), "duration_ms": round(duration_ms, 1)},
    )
    return parsed


def fetch_month(period: str, **kwargs) -> ParsedCSV:
    """Load the CSV for a reporting period key such as ``"july"``.

    Raises:
        KeyError: If ``period`` is not one of MONTH_FILES
    """
    return fetch_csv(MONTH_FILES[period], **kwargs)
