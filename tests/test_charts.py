"""
Tests for rainfall/charts.py

top10() ranking and column selection, plus drawing into a headless
matplotlib Figure and the TopChart handle lifecycle.
"""
import sys
from pathlib import Path

import pytest
from matplotlib.figure import Figure

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rainfall.charts import (  # noqa: E402
    TopChart,
    draw_chart,
    pick_value_column,
    render_top10_chart,
    top10,
)
from rainfall.data import CSVLoadError  # noqa: E402
from rainfall.models import ChartData  # noqa: E402
from utils.csv_parser import ParsedCSV, parse_csv  # noqa: E402


@pytest.fixture()
def ax():
    return Figure().add_subplot()


# ── pick_value_column ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("headers,value_key,expected", [
    (["District", "Total_Rainfall_mm"], None, "Total_Rainfall_mm"),
    (["District", "Normal", "Total"], None, "Total"),
    (["जिला", "वास्तविक वर्षा"], None, "वास्तविक वर्षा"),
    (["District", "Days", "Total_Rainfall"], None, "Total_Rainfall"),
    (["District", "Days"], None, "Days"),
    (["District"], None, None),
    ([], None, None),
    (["District", "Total"], "Days", "Days"),
    (["District", "Days", "Total"], "", "Total"),
])
def test_pick_value_column(headers, value_key, expected):
    assert pick_value_column(headers, value_key) == expected


# ── top10 ─────────────────────────────────────────────────────────────────────

def test_top10_ascending_render_order(parsed_english):
    data = top10(parsed_english)
    assert data.value_key == "Total_Rainfall_mm"
    assert data.labels == ["Bhojpur", "Buxar", "Nalanda", "Patna", "Gaya"]
    assert data.values == [0.0, 455.25, 640.0, 812.4, 1020.5]


def test_top10_takes_ten_largest():
    rows = [{"District": f"D{i}", "Total": str(i)} for i in range(1, 16)]
    data = top10(ParsedCSV(["District", "Total"], rows))
    assert len(data.values) == 10
    assert data.labels[0] == "D6"
    assert data.labels[-1] == "D15"


def test_top10_ties_keep_file_order():
    rows = [
        {"District": "A", "Total": "5"},
        {"District": "B", "Total": "9"},
        {"District": "C", "Total": "5"},
    ]
    data = top10(ParsedCSV(["District", "Total"], rows))
    # descending A before C, then reversed for rendering
    assert data.labels == ["C", "A", "B"]


def test_top10_explicit_value_key(parsed_english):
    data = top10(parsed_english, value_key="Normal_Rainfall_mm")
    assert data.value_key == "Normal_Rainfall_mm"
    assert data.labels[-1] == "Patna"
    assert data.values[-1] == 905.0


def test_top10_hindi(hindi_csv):
    data = top10(parse_csv(hindi_csv))
    assert data.value_key == "वास्तविक वर्षा (मिमी)"
    assert data.labels == ["गया", "पटना"]


def test_top10_label_fallbacks():
    headers = ["Rank", "District", "Total"]
    rows = [
        {"Rank": "", "District": "Patna", "Total": "3"},
        {"Rank": "2", "District": "Gaya", "Total": "2"},
    ]
    data = top10(ParsedCSV(headers, rows))
    assert data.labels == ["2", "Patna"]


def test_top10_lowercase_district_fallback():
    rows = [{"Rank": "", "district": "gaya", "Total": "1"}]
    assert top10(ParsedCSV(["Rank", "district", "Total"], rows)).labels == ["gaya"]


def test_top10_without_value_column():
    data = top10(ParsedCSV(["District"], [{"District": "A"}, {"District": "B"}]))
    assert data.value_key is None
    assert data.values == [0.0, 0.0]
    assert data.labels == ["B", "A"]


def test_top10_empty():
    data = top10(ParsedCSV())
    assert data == ChartData()


# ── drawing ───────────────────────────────────────────────────────────────────

class TestDrawChart:
    def test_one_bar_per_point(self, ax, parsed_english):
        chart = draw_chart(ax, top10(parsed_english))
        assert isinstance(chart, TopChart)
        assert len(chart.bars) == 5
        assert [b.get_width() for b in chart.bars] == [0.0, 455.25, 640.0, 812.4, 1020.5]

    def test_labels_and_orientation(self, ax, parsed_english):
        draw_chart(ax, top10(parsed_english))
        assert [t.get_text() for t in ax.get_yticklabels()] == [
            "Bhojpur", "Buxar", "Nalanda", "Patna", "Gaya",
        ]
        assert ax.yaxis_inverted()

    def test_bar_alpha_ramp(self, ax, parsed_english):
        chart = draw_chart(ax, top10(parsed_english))
        alphas = [b.get_facecolor()[3] for b in chart.bars]
        assert alphas == pytest.approx([0.6, 0.63, 0.66, 0.69, 0.72])
        assert chart.bars[0].get_facecolor()[:3] == pytest.approx((14 / 255, 116 / 255, 144 / 255))

    def test_series_label_and_no_legend(self, ax, parsed_english):
        chart = draw_chart(ax, top10(parsed_english))
        assert chart.bars.get_label() == "दिन"
        assert ax.get_legend() is None

    def test_empty_data(self, ax):
        chart = draw_chart(ax, ChartData())
        assert len(chart.bars) == 0


class TestTopChart:
    def test_destroy_clears_axes(self, ax, parsed_english):
        chart = draw_chart(ax, top10(parsed_english))
        chart.destroy()
        assert chart.destroyed
        assert chart.bars is None
        assert len(ax.patches) == 0

    def test_destroy_twice(self, ax):
        chart = draw_chart(ax, ChartData())
        chart.destroy()
        chart.destroy()
        assert chart.destroyed


# ── render_top10_chart ────────────────────────────────────────────────────────

class TestRenderTop10Chart:
    def test_render_from_directory(self, ax, data_dir):
        chart = render_top10_chart("july.csv", ax, data_path=str(data_dir))
        assert chart.data.labels[-1] == "Gaya"
        assert len(ax.patches) == 5

    def test_render_replaces_previous_chart(self, ax, data_dir):
        first = render_top10_chart("july.csv", ax, data_path=str(data_dir))
        second = render_top10_chart("august.csv", ax, chart=first, data_path=str(data_dir))
        assert first.destroyed
        assert not second.destroyed
        assert len(ax.patches) == 2
        assert ax.yaxis_inverted()

    def test_render_with_value_key(self, ax, data_dir):
        chart = render_top10_chart(
            "july.csv", ax, value_key="Departure_Percent", data_path=str(data_dir),
        )
        assert chart.data.value_key == "Departure_Percent"
        assert chart.data.labels[-1] == "Gaya"

    def test_render_over_http(self, ax, mock_session):
        chart = render_top10_chart(
            "july.csv", ax, data_path="https://rain.example.org/data/",
            session=mock_session(),
        )
        assert len(chart.data.values) == 5

    def test_failed_fetch_keeps_previous_chart(self, ax, data_dir):
        first = render_top10_chart("july.csv", ax, data_path=str(data_dir))
        with pytest.raises(CSVLoadError):
            render_top10_chart("june.csv", ax, chart=first, data_path=str(data_dir))
        assert not first.destroyed
        assert len(ax.patches) == 5
