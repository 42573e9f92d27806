"""
Pytest fixtures for the rainfall table tests.

Provides sample CSV text in the two header flavours seen in the monthly
exports (English and Hindi), parsed datasets, a data directory on disk and
a mocked requests session.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.csv_parser import parse_csv  # noqa: E402


ENGLISH_CSV = (
    "\ufeffDistrict,Total_Rainfall_mm,Normal_Rainfall_mm,Departure_Percent\r\n"
    "Patna,812.4,905.0,-10\r\n"
    "Gaya,1020.5,880.0,16\r\n"
    "Nalanda,640,700,-9\r\n"
    "Bhojpur,N/A,750,\r\n"
    "\r\n"
    "Buxar,455.25,600,-24\r\n"
)

HINDI_CSV = (
    "जिला,वास्तविक वर्षा (मिमी),सामान्य वर्षा (मिमी),विचलन (%)\n"
    "पटना,812.4,905.0,-10\n"
    "गया,620.0,880.0,-30\n"
)


@pytest.fixture()
def english_csv() -> str:
    return ENGLISH_CSV


@pytest.fixture()
def hindi_csv() -> str:
    return HINDI_CSV


@pytest.fixture()
def parsed_english():
    return parse_csv(ENGLISH_CSV)


@pytest.fixture()
def data_dir(tmp_path):
    """Directory holding july.csv (English) and august.csv (Hindi)."""
    d = tmp_path / "data"
    d.mkdir()
    (d / "july.csv").write_text(ENGLISH_CSV, encoding="utf-8")
    (d / "august.csv").write_text(HINDI_CSV, encoding="utf-8")
    return d


@pytest.fixture()
def mock_session():
    """Factory for a requests.Session stand-in returning ``body``."""
    def _make(body: str = ENGLISH_CSV, status: int = 200, raise_exc=None):
        session = MagicMock()
        if raise_exc is not None:
            session.get.side_effect = raise_exc
            return session
        resp = MagicMock()
        resp.status_code = status
        resp.content = body.encode("utf-8")
        if status >= 400:
            resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
        else:
            resp.raise_for_status.return_value = None
        session.get.return_value = resp
        return session
    return _make
