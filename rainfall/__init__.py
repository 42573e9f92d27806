"""District rainfall tables and charts.

Operation surface consumed by the site pages:

    fetch_csv / fetch_month   load and parse one rainfall CSV
    parse_csv                 parse already-loaded text
    DistrictTable             filter / sort / paginate / render / export
    compute_summary           dataset-wide averages
    top10 / render_top10_chart  top-10 horizontal bar chart
"""

from utils.config import MONTH_FILES
from utils.csv_parser import ParsedCSV, parse_csv

from rainfall.charts import TopChart, render_top10_chart, top10
from rainfall.data import CSVLoadError, fetch_csv, fetch_month
from rainfall.models import ChartData, RainfallSummary
from rainfall.summary import compute_summary
from rainfall.table import DistrictTable, TableBody

__all__ = [
    "MONTH_FILES",
    "ParsedCSV",
    "parse_csv",
    "CSVLoadError",
    "fetch_csv",
    "fetch_month",
    "DistrictTable",
    "TableBody",
    "RainfallSummary",
    "compute_summary",
    "ChartData",
    "TopChart",
    "top10",
    "render_top10_chart",
]
