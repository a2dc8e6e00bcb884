from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Set, Union

import pandas as pd
import streamlit as st

from quintile_explorer.config import (
    CATEGORY_COL,
    COUNTRY_COL,
    METRIC_COL,
    QUINTILE_COL,
    RECORD_COLUMNS,
    VALUE_COL,
    YEAR_COL,
    data_path,
    data_sheet,
)

logger = logging.getLogger(__name__)

SENTINELS: Set[str] = {"", "..", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-", "—"}
TEXT_COLUMNS = [COUNTRY_COL, CATEGORY_COL, METRIC_COL, QUINTILE_COL]
EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")


class DatasetNotFoundError(FileNotFoundError):
    """Raised when the configured source file does not exist."""


def _normalize_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """Replace sentinel string tokens with None (in-place) and record counts in df.attrs.

    Adds / updates:
        df.attrs['sentinel_replacements'] = {column: count_replaced, ...}
    """
    replacements = {}
    for col in df.columns:
        if pd.api.types.is_string_dtype(df[col].dtype):
            mask = df[col].apply(lambda v: isinstance(v, str) and v.strip() in SENTINELS)
            count = int(mask.sum())
            if count:
                replacements[col] = count
                df.loc[mask, col] = None
    if replacements:
        existing = df.attrs.get("sentinel_replacements", {})
        existing.update(replacements)
        df.attrs["sentinel_replacements"] = existing
    return df


def _read_frame(path: str, sheet: Optional[Union[str, int]]) -> pd.DataFrame:
    if path.lower().endswith(EXCEL_SUFFIXES):
        return pd.read_excel(path, sheet_name=sheet if sheet is not None else 0)
    return pd.read_csv(path)


def clean_records(raw: pd.DataFrame) -> pd.DataFrame:
    """Drop incomplete rows and coerce Year/Value.

    Every row of the result has all six record columns populated. The counts of
    rows removed at each step land in ``df.attrs['diagnostics']``.
    """
    missing = [c for c in RECORD_COLUMNS if c not in raw.columns]
    if missing:
        raise ValueError(f"Missing columns in dataset: {missing}")

    df = raw[RECORD_COLUMNS].copy()
    df = _normalize_sentinels(df)
    sentinel_replacements = df.attrs.get("sentinel_replacements", {})

    for col in TEXT_COLUMNS:
        df[col] = df[col].where(df[col].isna(), df[col].astype(str).str.strip())
        df.loc[df[col] == "", col] = None

    raw_rows = len(df)
    df = df.dropna(subset=RECORD_COLUMNS)
    dropped_missing = raw_rows - len(df)

    years = pd.to_numeric(df[YEAR_COL], errors="coerce")
    values = pd.to_numeric(df[VALUE_COL], errors="coerce")
    year_ok = years.notna() & (years == years.round())
    value_ok = values.notna()
    df = df[year_ok & value_ok].copy()
    df[YEAR_COL] = years[year_ok & value_ok].astype(int)
    df[VALUE_COL] = values[year_ok & value_ok].astype(float)
    df = df.reset_index(drop=True)

    diagnostics: Dict[str, object] = {
        "raw_row_count": raw_rows,
        "dataframe_row_count": int(len(df)),
        "dropped_missing_fields": int(dropped_missing),
        "dropped_unparsed_year": int((~year_ok).sum()),
        "dropped_unparsed_value": int((year_ok & ~value_ok).sum()),
        "sentinel_replacements": sentinel_replacements,
        "countries": int(df[COUNTRY_COL].nunique()),
        "categories": int(df[CATEGORY_COL].nunique()),
        "metrics": int(df[METRIC_COL].nunique()),
    }
    df.attrs["diagnostics"] = diagnostics
    return df


def read_dataset(path: str, sheet: Optional[Union[str, int]] = None) -> pd.DataFrame:
    """Read and clean the dataset at ``path``; fails fast if the file is absent."""
    if not os.path.exists(path):
        raise DatasetNotFoundError(f"Dataset file not found: {path}")

    raw = _read_frame(path, sheet)
    df = clean_records(raw)
    df.attrs["diagnostics"]["source_path"] = path
    diagnostics = df.attrs["diagnostics"]
    logger.info(
        "Loaded %s: kept %d of %d rows",
        path,
        diagnostics["dataframe_row_count"],
        diagnostics["raw_row_count"],
    )
    logger.debug("Load diagnostics: %s", diagnostics)
    return df


def load_data() -> pd.DataFrame:
    """Wrapper that resolves config and calls the cached implementation."""
    return _load_data_impl(data_path(), data_sheet())


@st.cache_data(show_spinner=False)
def _load_data_impl(path: str, sheet: Optional[Union[str, int]]) -> pd.DataFrame:
    """Cached by path and sheet so the file is read once per process."""
    return read_dataset(path, sheet)


def dataset_diagnostics(df: pd.DataFrame) -> Dict[str, object]:
    return dict(df.attrs.get("diagnostics", {}))
