"""
Pydantic models for the derived, display-ready results.

Optional fields default to None so that an empty dataset produces an empty
aggregate rather than a row of zeros.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from utils.formatting import format_count, format_num, format_percent


class RainfallSummary(BaseModel):
    """Dataset-wide averages over all district rows."""
    avg_total: float | None = Field(None, description="Mean actual rainfall in mm", examples=[812.4])
    avg_normal: float | None = Field(None, description="Mean normal rainfall in mm", examples=[905.0])
    avg_departure: float | None = Field(None, description="Mean departure from normal in %", examples=[-10.2])
    district_count: int | None = Field(None, description="Number of rows averaged", examples=[38])

    def is_empty(self) -> bool:
        return self.district_count is None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of the populated fields; ``{}`` for an empty dataset."""
        return self.model_dump(exclude_none=True)

    def formatted(self) -> dict[str, str]:
        """Display strings for the summary cards."""
        if self.is_empty():
            return {}
        return {
            "avg_total": format_num(round(self.avg_total, 1)),
            "avg_normal": format_num(round(self.avg_normal, 1)),
            "avg_departure": format_percent(self.avg_departure),
            "district_count": format_count(self.district_count),
        }


class ChartData(BaseModel):
    """Points of the top-10 bar chart, in render order (smallest first)."""
    value_key: str | None = Field(None, description="Header the values were read from", examples=["Total_Rainfall_mm"])
    labels: list[str] = Field(default_factory=list, description="District names")
    values: list[float] = Field(default_factory=list, description="Coerced numeric values")
