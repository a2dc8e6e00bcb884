"""
Reusable helpers for rendering the searchable, paginated data table.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from quintile_explorer.config import PAGE_SIZES, RECORD_COLUMNS, VALUE_COL, YEAR_COL

ORIGINAL_ORDER = "Original order"


def search_rows(df: pd.DataFrame, query: str) -> pd.DataFrame:
    """Keep rows where any text column contains ``query`` (case-insensitive)."""
    query = (query or "").strip().lower()
    if not query or df.empty:
        return df
    mask = pd.Series(False, index=df.index)
    for col in df.columns:
        if pd.api.types.is_string_dtype(df[col].dtype):
            mask |= df[col].astype(str).str.lower().str.contains(query, regex=False, na=False)
    return df[mask]


def sort_rows(df: pd.DataFrame, column: Optional[str], ascending: bool = True) -> pd.DataFrame:
    """Sort the whole view by ``column``; None keeps the original row order."""
    if not column or column not in df.columns:
        return df
    return df.sort_values(column, ascending=ascending, kind="mergesort")


def page_count(total_rows: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return max(1, math.ceil(total_rows / page_size))


def paginate(df: pd.DataFrame, page: int, page_size: int) -> Tuple[pd.DataFrame, int]:
    """Return the rows on ``page`` (1-based) and the page actually shown.

    Out-of-range pages are clamped to the first or last page.
    """
    pages = page_count(len(df), page_size)
    page = min(max(int(page), 1), pages)
    start = (page - 1) * page_size
    return df.iloc[start: start + page_size], page


def render_table(
    df: pd.DataFrame,
    key: str = "qe_table",
    height: int = 400,
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    columns = [col for col in RECORD_COLUMNS if col in df.columns]
    search = st.text_input("Search", key=f"{key}_search", placeholder="Country, category, metric…")
    matched = search_rows(df[columns], search)
    if matched.empty:
        st.info("No records match the search term.")
        return

    col_sort, col_dir, col_size, col_page = st.columns(4)
    with col_sort:
        sort_column = st.selectbox(
            "Sort by",
            [ORIGINAL_ORDER] + columns,
            key=f"{key}_sort",
        )
    with col_dir:
        direction = st.radio("Direction", ["Ascending", "Descending"], key=f"{key}_sort_dir", horizontal=True)
    if sort_column == ORIGINAL_ORDER:
        sort_column = None
    matched = sort_rows(matched, sort_column, ascending=direction == "Ascending")

    with col_size:
        page_size = st.selectbox("Rows per page", PAGE_SIZES, index=0, key=f"{key}_page_size")
    pages = page_count(len(matched), page_size)
    page_key = f"{key}_page"
    if st.session_state.get(page_key, 1) > pages:
        st.session_state[page_key] = pages
    with col_page:
        page = st.number_input("Page", min_value=1, max_value=pages, step=1, key=page_key)
    page_df, page = paginate(matched, page, page_size)

    st.dataframe(
        page_df,
        use_container_width=True,
        height=height,
        hide_index=True,
        column_config={
            YEAR_COL: st.column_config.NumberColumn(YEAR_COL, format="%d"),
            VALUE_COL: st.column_config.NumberColumn(VALUE_COL, format="%.2f"),
        },
    )
    st.caption(f"Page {page} of {pages} · {len(matched):,} matching rows.")