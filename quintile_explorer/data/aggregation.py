"""
Derived aggregates computed from a filtered view.
"""

from __future__ import annotations

import pandas as pd

from quintile_explorer.config import VALUE_COL, YEAR_COL


def yearly_average(df: pd.DataFrame) -> pd.DataFrame:
    """Mean of Value per distinct Year, ignoring missing values.

    Only years present in ``df`` appear in the result, sorted ascending.
    """
    if df.empty or YEAR_COL not in df or VALUE_COL not in df:
        return pd.DataFrame(columns=[YEAR_COL, VALUE_COL])
    values = pd.to_numeric(df[VALUE_COL], errors="coerce")
    return (
        values.groupby(df[YEAR_COL])
        .mean()
        .rename(VALUE_COL)
        .reset_index()
        .sort_values(YEAR_COL)
        .reset_index(drop=True)
    )
