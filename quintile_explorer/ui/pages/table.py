from __future__ import annotations

import pandas as pd
import streamlit as st

from quintile_explorer.ui.components.tables import render_table
from quintile_explorer.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Filtered Records")
    render_table(df, key="qe_table")
