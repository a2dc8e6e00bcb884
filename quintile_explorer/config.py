"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Union

import streamlit as st

COUNTRY_COL = "Country Name"
CATEGORY_COL = "Category"
METRIC_COL = "Series Name"
YEAR_COL = "Year"
VALUE_COL = "Value"
QUINTILE_COL = "wealth_quintiles"

# Order used for the table and the CSV export
RECORD_COLUMNS: List[str] = [
    COUNTRY_COL,
    CATEGORY_COL,
    METRIC_COL,
    YEAR_COL,
    VALUE_COL,
    QUINTILE_COL,
]

DEFAULT_DATA_PATH = "data/sample_wealth_quintiles.csv"

PLOT_TYPES = {
    "line": "Line",
    "bar": "Bar",
    "scatter": "Scatter",
}
DEFAULT_PLOT_TYPE = "line"

PAGE_SIZES = [10, 25, 50, 100]


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("chart", "Chart"),
    TabConfig("table", "Data Table"),
    TabConfig("data_quality", "Data Quality"),
]


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml is present
        pass
    return default


def data_path() -> str:
    return get_setting("DATA_PATH", DEFAULT_DATA_PATH) or DEFAULT_DATA_PATH


def data_sheet() -> Optional[Union[str, int]]:
    """Excel sheet name, or a zero-based sheet index when all digits."""
    sheet = get_setting("DATA_SHEET")
    if sheet is not None and sheet.strip().isdigit():
        return int(sheet.strip())
    return sheet
