from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from quintile_explorer.config import COUNTRY_COL, VALUE_COL, YEAR_COL
from quintile_explorer.data.aggregation import yearly_average
from quintile_explorer.data.filters import year_bounds
from quintile_explorer.ui.components.charts import build_chart, render_plotly
from quintile_explorer.ui.components.formatting import format_year_span
from quintile_explorer.ui.components.kpi import KpiCard, render_kpi_cards
from quintile_explorer.ui.pages.context import PageContext


def _summary_cards(df: pd.DataFrame) -> List[KpiCard]:
    year_min, year_max = year_bounds(df)
    mean_value = pd.to_numeric(df[VALUE_COL], errors="coerce").mean()
    return [
        KpiCard(label="Rows", value=len(df)),
        KpiCard(label="Countries", value=df[COUNTRY_COL].nunique()),
        KpiCard(label="Years", value_display=format_year_span(year_min, year_max)),
        KpiCard(
            label="Mean Value",
            value=None if pd.isna(mean_value) else float(mean_value),
            decimals=2,
            compact=True,
        ),
    ]


def render(df: pd.DataFrame, context: PageContext) -> None:
    filters = context.filters
    st.subheader(filters.metric or "Chart")
    render_kpi_cards(_summary_cards(df), columns=4)

    average = yearly_average(df) if filters.show_average else None
    title = f"{filters.country} · {YEAR_COL} vs {VALUE_COL}" if filters.country else None
    render_plotly(build_chart(df, filters.plot_type, average=average, title=title))

    if average is not None:
        with st.expander("Yearly average", expanded=False):
            st.dataframe(average, use_container_width=True, hide_index=True)
