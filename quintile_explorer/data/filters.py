"""
Filter utilities that apply the dashboard selections to the quintile dataset.

All functions here are pure: they take the dataset and an immutable
``FilterState`` and return new objects, so the sidebar can rebuild the state on
every rerun and the pages can re-derive their views from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from quintile_explorer.config import (
    CATEGORY_COL,
    COUNTRY_COL,
    DEFAULT_PLOT_TYPE,
    METRIC_COL,
    PLOT_TYPES,
    YEAR_COL,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterState:
    country: Optional[str] = None
    categories: Tuple[str, ...] = ()
    metric: Optional[str] = None
    year_range: Tuple[Optional[int], Optional[int]] = (None, None)
    plot_type: str = DEFAULT_PLOT_TYPE
    show_average: bool = False

    def __post_init__(self) -> None:
        if self.plot_type not in PLOT_TYPES:
            raise ValueError(f"Unknown plot type: {self.plot_type!r}")


class NoMetricsAvailableError(LookupError):
    """No metric co-occurs with the selected categories.

    ``state`` holds the filter state with its metric cleared, which callers
    should continue with.
    """

    def __init__(self, categories: Iterable[str], state: FilterState):
        self.categories = tuple(categories)
        self.state = state
        super().__init__(f"No metrics available for categories: {', '.join(self.categories)}")


def sorted_unique(df: pd.DataFrame, column: str) -> List[str]:
    if df.empty or column not in df:
        return []
    return sorted(df[column].dropna().unique().tolist())


def year_bounds(df: pd.DataFrame) -> Tuple[Optional[int], Optional[int]]:
    if df.empty or YEAR_COL not in df:
        return None, None
    years = df[YEAR_COL].dropna()
    if years.empty:
        return None, None
    return int(years.min()), int(years.max())


def available_metrics(df: pd.DataFrame, categories: Iterable[str]) -> List[str]:
    """Metrics that co-occur with at least one selected category.

    An empty category selection leaves the metrics unrestricted.
    """
    categories = list(categories)
    if categories:
        df = df[df[CATEGORY_COL].isin(categories)]
    return sorted_unique(df, METRIC_COL)


def reconcile_metric(df: pd.DataFrame, state: FilterState) -> FilterState:
    """Keep ``state.metric`` consistent with the category selection.

    Raises NoMetricsAvailableError (carrying the cleared state) when the
    categories have no metric at all.
    """
    options = available_metrics(df, state.categories)
    if not options:
        cleared = replace(state, metric=None)
        logger.debug("No metrics for categories %s; clearing metric", state.categories)
        raise NoMetricsAvailableError(state.categories, cleared)
    if state.metric in options:
        return state
    logger.debug("Metric %r unavailable for %s; switching to %r", state.metric, state.categories, options[0])
    return replace(state, metric=options[0])


def default_filters(df: pd.DataFrame) -> FilterState:
    """Canonical reset state for ``df``."""
    countries = sorted_unique(df, COUNTRY_COL)
    categories = sorted_unique(df, CATEGORY_COL)
    default_categories = tuple(categories[:1])
    metrics = available_metrics(df, default_categories)
    return FilterState(
        country=countries[0] if countries else None,
        categories=default_categories,
        metric=metrics[0] if metrics else None,
        year_range=year_bounds(df),
        plot_type=DEFAULT_PLOT_TYPE,
        show_average=False,
    )


def apply_filters(df: pd.DataFrame, filters: FilterState) -> pd.DataFrame:
    """
    Return the rows of ``df`` matching every active filter, in their original
    order. A filter left unset (None or an empty selection) does not restrict.
    """
    if df.empty:
        return df
    mask = pd.Series(True, index=df.index)

    if filters.country is not None:
        mask &= df[COUNTRY_COL] == filters.country

    if filters.categories:
        mask &= df[CATEGORY_COL].isin(filters.categories)

    if filters.metric is not None:
        mask &= df[METRIC_COL] == filters.metric

    year_min, year_max = filters.year_range
    if year_min is not None:
        mask &= df[YEAR_COL] >= year_min
    if year_max is not None:
        mask &= df[YEAR_COL] <= year_max

    filtered = df[mask].copy()
    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def serialize_filters(filters: FilterState) -> Dict[str, Any]:
    """
    Convert the FilterState dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "country": filters.country,
        "categories": list(filters.categories),
        "metric": filters.metric,
        "year_range": list(filters.year_range),
        "plot_type": filters.plot_type,
        "show_average": filters.show_average,
    }
