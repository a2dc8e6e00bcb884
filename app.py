import quintile_explorer.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from quintile_explorer.config import TABS
from quintile_explorer.data.export import export_csv, export_file_name
from quintile_explorer.data.filters import apply_filters
from quintile_explorer.data.loader import DatasetNotFoundError, load_data
from quintile_explorer.ui.components.formatting import format_number
from quintile_explorer.ui.layout import describe_filters, setup_page, sidebar_filters_ui
from quintile_explorer.ui.pages import chart, data_quality, table
from quintile_explorer.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "chart": chart.render,
    "table": table.render,
    "data_quality": data_quality.render,
}


def _active_filter_summary(filters, total_rows: int) -> None:
    badges = describe_filters(filters)
    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All data"
    st.markdown(f"**{summary_text}**")
    st.caption(f"Showing {format_number(total_rows, 0)} rows after filters.")


def main() -> None:
    setup_page()
    st.title("Wealth Quintile Explorer")

    try:
        dataset = load_data()
    except DatasetNotFoundError as exc:
        st.error(f"Could not load the dataset. {exc}")
        st.stop()

    filters = sidebar_filters_ui(dataset)
    filtered_df = apply_filters(dataset, filters)

    with st.sidebar.expander("Export", expanded=False):
        if not filtered_df.empty:
            st.download_button(
                "Download Filtered CSV",
                data=export_csv(filtered_df),
                file_name=export_file_name(),
                mime="text/csv",
                key="qe_export",
            )
        else:
            st.caption("No data to export")

    _active_filter_summary(filters, len(filtered_df))

    context = PageContext(dataset=dataset, filters=filters)
    nothing_to_show = filters.metric is None or filtered_df.empty
    if filtered_df.empty:
        st.warning("No data matches the current filters. Widen the year range or pick other categories.")

    streamlit_tabs = st.tabs([tab.label for tab in TABS])
    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            if nothing_to_show and tab_config.key != "data_quality":
                st.info("Nothing to display for the current selection.")
                continue
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()
