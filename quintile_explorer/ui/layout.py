"""
Layout helpers for the Streamlit application (page setup and sidebar filters).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from quintile_explorer.config import CATEGORY_COL, COUNTRY_COL, DEFAULT_PLOT_TYPE, PLOT_TYPES
from quintile_explorer.data.filters import (
    FilterState,
    NoMetricsAvailableError,
    available_metrics,
    default_filters,
    reconcile_metric,
    sorted_unique,
    year_bounds,
)

logger = logging.getLogger(__name__)

COUNTRY_KEY = "qe_country"
CATEGORIES_KEY = "qe_categories"
METRIC_KEY = "qe_metric"
YEARS_KEY = "qe_years"
PLOT_TYPE_KEY = "qe_plot_type"
SHOW_AVERAGE_KEY = "qe_show_average"
RESET_KEY = "qe_reset"
FILTER_KEYS = [COUNTRY_KEY, CATEGORIES_KEY, METRIC_KEY, YEARS_KEY, PLOT_TYPE_KEY, SHOW_AVERAGE_KEY]


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Wealth Quintile Explorer",
        layout="wide",
        page_icon=":bar_chart:",
    )


def _write_state(state: FilterState) -> None:
    st.session_state[COUNTRY_KEY] = state.country
    st.session_state[CATEGORIES_KEY] = list(state.categories)
    st.session_state[METRIC_KEY] = state.metric
    st.session_state[YEARS_KEY] = state.year_range
    st.session_state[PLOT_TYPE_KEY] = state.plot_type
    st.session_state[SHOW_AVERAGE_KEY] = state.show_average


def reset_filters(df: pd.DataFrame) -> None:
    """Button callback: restore every filter widget to the default state.

    Runs before the next rerun, so the whole reset lands in one recomputation.
    """
    _write_state(default_filters(df))
    logger.info("Filters reset to defaults")


def _ensure_state(df: pd.DataFrame) -> None:
    """Initialise missing widget state and drop values no longer in the data."""
    missing = [key for key in FILTER_KEYS if key not in st.session_state]
    if len(missing) == len(FILTER_KEYS):
        _write_state(default_filters(df))
        return
    if missing:
        # Streamlit drops the state of widgets that were not rendered last run
        defaults = {
            COUNTRY_KEY: None,
            CATEGORIES_KEY: [],
            METRIC_KEY: None,
            YEARS_KEY: year_bounds(df),
            PLOT_TYPE_KEY: DEFAULT_PLOT_TYPE,
            SHOW_AVERAGE_KEY: False,
        }
        for key in missing:
            st.session_state[key] = defaults[key]

    countries = sorted_unique(df, COUNTRY_COL)
    if st.session_state[COUNTRY_KEY] not in countries:
        st.session_state[COUNTRY_KEY] = countries[0] if countries else None

    categories = set(sorted_unique(df, CATEGORY_COL))
    st.session_state[CATEGORIES_KEY] = [c for c in st.session_state[CATEGORIES_KEY] if c in categories]

    low, high = year_bounds(df)
    sel = st.session_state[YEARS_KEY]
    if low is not None and high is not None:
        sel_min = max(low, min(sel[0] if sel[0] is not None else low, high))
        sel_max = max(sel_min, min(sel[1] if sel[1] is not None else high, high))
        st.session_state[YEARS_KEY] = (sel_min, sel_max)


def _metric_input(df: pd.DataFrame, categories: Tuple[str, ...]) -> Optional[str]:
    current = st.session_state.get(METRIC_KEY)
    try:
        metric = reconcile_metric(df, FilterState(categories=categories, metric=current)).metric
    except NoMetricsAvailableError as err:
        st.sidebar.error(f"{err}. Choose another category.")
        metric = err.state.metric
    if metric != current:
        st.session_state[METRIC_KEY] = metric

    options = available_metrics(df, categories)
    if not options:
        return None
    return st.sidebar.radio(
        "Metric",
        options=options,
        key=METRIC_KEY,
        help="Only metrics recorded for the selected categories are listed.",
    )


def _year_range_input(df: pd.DataFrame) -> Tuple[Optional[int], Optional[int]]:
    low, high = year_bounds(df)
    if low is None or high is None:
        return None, None
    if low == high:
        st.sidebar.caption(f"Year: {low}")
        return low, high
    selected = st.sidebar.slider(
        "Year range",
        min_value=low,
        max_value=high,
        step=1,
        key=YEARS_KEY,
    )
    return int(selected[0]), int(selected[1])


def sidebar_filters_ui(df: pd.DataFrame) -> FilterState:
    """
    Render the sidebar filter controls and return the selected values.
    """
    _ensure_state(df)
    st.sidebar.header("Filters")

    countries = sorted_unique(df, COUNTRY_COL)
    country = st.sidebar.selectbox("Country", options=countries, key=COUNTRY_KEY)

    categories = st.sidebar.multiselect(
        "Category",
        options=sorted_unique(df, CATEGORY_COL),
        key=CATEGORIES_KEY,
        help="Leave empty to include every category.",
    )
    categories = tuple(categories)

    metric = _metric_input(df, categories)
    year_range = _year_range_input(df)

    st.sidebar.divider()

    plot_type = st.sidebar.radio(
        "Plot type",
        options=list(PLOT_TYPES),
        format_func=lambda v: PLOT_TYPES[v],
        key=PLOT_TYPE_KEY,
        horizontal=True,
    )
    show_average = st.sidebar.checkbox(
        "Show yearly average",
        key=SHOW_AVERAGE_KEY,
        help="Overlay the mean value per year across the plotted rows.",
    )

    st.sidebar.button(
        "Reset Filters",
        key=RESET_KEY,
        type="primary",
        on_click=reset_filters,
        args=(df,),
    )

    return FilterState(
        country=country,
        categories=categories,
        metric=metric,
        year_range=year_range,
        plot_type=plot_type,
        show_average=bool(show_average),
    )


def describe_filters(filters: FilterState) -> List[str]:
    """Human-readable badges for the active filters."""
    badges = []
    if filters.country:
        badges.append(f"Country: {filters.country}")
    if filters.categories:
        badges.append(
            "Categories: "
            + ", ".join(filters.categories[:5])
            + ("…" if len(filters.categories) > 5 else "")
        )
    if filters.metric:
        badges.append(f"Metric: {filters.metric}")
    year_min, year_max = filters.year_range
    if year_min is not None and year_max is not None:
        badges.append(f"Years: {year_min}–{year_max}")
    return badges
