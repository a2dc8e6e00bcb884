"""
Plotly chart factory functions with consistent styling for the dashboard.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import plotly.colors as pc
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from quintile_explorer.config import (
    CATEGORY_COL,
    COUNTRY_COL,
    METRIC_COL,
    PLOT_TYPES,
    QUINTILE_COL,
    VALUE_COL,
    YEAR_COL,
)

DEFAULT_TEMPLATE = "plotly_white"
# Fixed 9-colour qualitative palette; interpolated when there are more groups
BASE_PALETTE: List[str] = pc.qualitative.Set1
AVERAGE_LINE_COLOR = "#222222"
HOVER_COLUMNS = [COUNTRY_COL, CATEGORY_COL, METRIC_COL]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    yaxis_title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        legend_title=legend_title,
        hovermode="closest",
        margin=dict(l=40, r=20, t=60, b=40),
    )
    if yaxis_title:
        fig.update_yaxes(title=yaxis_title)
    fig.update_xaxes(showgrid=False, dtick=1, title=YEAR_COL)
    fig.update_yaxes(showgrid=True, zeroline=True)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def palette(n_groups: int) -> List[str]:
    """Return ``n_groups`` colours drawn from the base palette."""
    if n_groups <= len(BASE_PALETTE):
        return list(BASE_PALETTE[:max(n_groups, 0)])
    positions = [i / (n_groups - 1) for i in range(n_groups)]
    return pc.sample_colorscale(
        pc.make_colorscale(BASE_PALETTE), positions, colortype="rgb"
    )


def build_chart(
    df: pd.DataFrame,
    plot_type: str,
    average: Optional[pd.DataFrame] = None,
    title: Optional[str] = None,
) -> go.Figure:
    """Plot Value by Year for each wealth quintile.

    ``plot_type`` is one of the PLOT_TYPES keys. When ``average`` is given it is
    drawn on top as a dashed overlay series.
    """
    if plot_type not in PLOT_TYPES:
        raise ValueError(f"Unknown plot type: {plot_type!r}")

    quintiles = sorted(df[QUINTILE_COL].dropna().unique().tolist()) if QUINTILE_COL in df else []
    common = dict(
        x=YEAR_COL,
        y=VALUE_COL,
        color=QUINTILE_COL,
        category_orders={QUINTILE_COL: quintiles},
        color_discrete_sequence=palette(len(quintiles)) or BASE_PALETTE,
        hover_data=[col for col in HOVER_COLUMNS if col in df.columns],
    )
    if plot_type == "line":
        fig = px.line(df.sort_values(YEAR_COL), markers=True, **common)
    elif plot_type == "bar":
        fig = px.bar(df, barmode="group", **common)
    else:
        fig = px.scatter(df, symbol=QUINTILE_COL, **common)
        fig.update_traces(marker=dict(size=10, opacity=0.8))

    if average is not None and not average.empty:
        fig.add_trace(
            go.Scatter(
                x=average[YEAR_COL],
                y=average[VALUE_COL],
                mode="lines+markers",
                name="Yearly average",
                line=dict(color=AVERAGE_LINE_COLOR, dash="dash"),
            )
        )

    return _configure_layout(fig, title, yaxis_title=VALUE_COL, legend_title="Wealth quintile")
