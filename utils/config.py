"""Configuration management utilities for the rainfall table tools.

Provides:
- Known source files (one CSV per reporting period)
- Prioritised candidate column names for the bilingual (English/Hindi)
  headers used across the rainfall exports
- AppConfig loaded from environment variables, with dict overrides
"""

import os as _os
from pathlib import Path
from typing import Any, Dict, Optional


# ── Source files ──────────────────────────────────────────────────────────────
# Relative location of the CSVs; a URL base works as well as a directory.

DATA_PATH = "data/"

MONTH_FILES: Dict[str, str] = {
    "june": "june.csv",
    "july": "july.csv",
    "august": "august.csv",
    "september": "september.csv",
    "overall_monsoon": "overall_monsoon.csv",
}


class ColumnCandidates:
    """Alternate header spellings per semantic column, tried in order.

    The first spelling present in a row wins, so English headers take
    precedence over the Hindi ones when a file carries both.
    """

    TOTAL = (
        "Total_Rainfall_mm",
        "Total",
        "वास्तविक वर्षा (मिमी)",
        "वास्तविक वर्षा",
    )

    NORMAL = (
        "Normal_Rainfall_mm",
        "Normal",
        "सामान्य वर्षा (मिमी)",
        "सामान्य वर्षा",
    )

    DEPARTURE = (
        "Departure_Percent",
        "Departure",
        "विचलन (%)",
        "विचलन",
    )

    # Value column for the top-10 chart, matched against the header list
    CHART_VALUE = (
        "Total_Rainfall_mm",
        "Total",
        "वास्तविक वर्षा (मिमी)",
        "वास्तविक वर्षा",
        "Total_Rainfall",
    )

    # Label fallbacks when the first header cell of a row is blank
    DISTRICT = ("District", "district")

    @staticmethod
    def first_present(row: Dict[str, Any], candidates) -> Optional[str]:
        """Return the first candidate key present in ``row``, or None."""
        for key in candidates:
            if key in row and row[key] is not None:
                return key
        return None


class Labels:
    """Display strings used in rendered markup."""

    NO_RECORDS = "कोई रिकॉर्ड नहीं मिला"
    CHART_SERIES = "दिन"


class AppConfig:
    """Application-level configuration loaded from environment variables.

    All env vars have sensible defaults so the package works out of the box
    without any configuration.

    Environment variables:
        RAINFALL_DATA_PATH: URL base or directory holding the CSVs (default: data/)
        RAINFALL_PAGE_SIZE: Rows per table page (default: 15)
        RAINFALL_EXPORT_DIR: Directory receiving CSV exports (default: .)
        RAINFALL_HTTP_TIMEOUT: Seconds allowed per CSV fetch (default: 30)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_LOG_LEVEL: Root log level name (default: INFO)
    """

    def __init__(self) -> None:
        self.data_path = _os.getenv("RAINFALL_DATA_PATH", DATA_PATH)
        self.page_size = int(_os.getenv("RAINFALL_PAGE_SIZE", "15"))
        self.export_dir = Path(_os.getenv("RAINFALL_EXPORT_DIR", "."))
        self.http_timeout = float(_os.getenv("RAINFALL_HTTP_TIMEOUT", "30"))
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        self.log_level = _os.getenv("APP_LOG_LEVEL", "INFO").upper()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Environment values with the keys of ``data`` overriding them."""
        config = cls()
        for key, value in data.items():
            setattr(config, key, value)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """Current settings, e.g. for logging at start-up."""
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}
