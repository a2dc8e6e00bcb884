from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from quintile_explorer.data.loader import SENTINELS, dataset_diagnostics
from quintile_explorer.ui.components.kpi import KpiCard, render_kpi_cards
from quintile_explorer.ui.pages.context import PageContext


def _quality_cards(diagnostics: dict) -> List[KpiCard]:
    raw = diagnostics.get("raw_row_count") or 0
    kept = diagnostics.get("dataframe_row_count") or 0
    dropped_pct = (raw - kept) / raw * 100 if raw else 0.0
    return [
        KpiCard(label="Rows Read", value=raw),
        KpiCard(label="Rows Kept", value=kept),
        KpiCard(label="Rows Dropped", value=raw - kept, help_text=f"{dropped_pct:.1f}% of the source"),
        KpiCard(label="Metrics", value=diagnostics.get("metrics")),
    ]


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Data Quality & Definitions")
    diagnostics = dataset_diagnostics(context.dataset)
    if not diagnostics:
        st.info("No diagnostics metadata available.")
        return

    render_kpi_cards(_quality_cards(diagnostics), columns=4)

    applied = df.attrs.get("applied_filters")
    if applied:
        st.markdown("#### Applied Filters")
        st.json(applied, expanded=False)

    st.markdown("#### Diagnostics Summary")
    for key, value in diagnostics.items():
        st.write(f"- **{key.replace('_', ' ').title()}**: {value}")

    st.markdown("#### Cleaning Rules")
    tokens = ", ".join(f"`{t}`" for t in sorted(SENTINELS) if t)
    st.write(
        f"""
        - Rows missing any of Country Name, Category, Series Name, Year, Value or wealth_quintiles are dropped.
        - Placeholder tokens ({tokens} and blanks) count as missing.
        - Year must be a whole number and Value must be numeric; other rows are dropped.
        - **Yearly average**: arithmetic mean of Value per year over the rows currently plotted.
        """
    )
