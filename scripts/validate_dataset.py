"""Quick validation script for a quintile dataset file.

Run with `python scripts/validate_dataset.py [path]` to check that the file
loads, report how many rows survive cleaning and list the distinct values
offered by the sidebar filters.
"""

from __future__ import annotations

import sys

import quintile_explorer.bootstrap_env  # loads .env before settings are read
from quintile_explorer.config import data_path, data_sheet
from quintile_explorer.data.filters import default_filters, sorted_unique, year_bounds
from quintile_explorer.data.loader import DatasetNotFoundError, read_dataset


def main() -> None:
    path = sys.argv[1] if len(sys.argv) > 1 else data_path()
    try:
        df = read_dataset(path, data_sheet())
    except DatasetNotFoundError as exc:
        raise SystemExit(str(exc))

    diagnostics = df.attrs["diagnostics"]
    if df.empty:
        raise SystemExit(f"No usable rows in {path}: {diagnostics}")

    print(f"Rows kept: {diagnostics['dataframe_row_count']} of {diagnostics['raw_row_count']}")
    for label, column in (("Countries", "Country Name"), ("Categories", "Category"), ("Metrics", "Series Name")):
        print(f"{label}: {', '.join(sorted_unique(df, column))}")
    print("Years: {}–{}".format(*year_bounds(df)))
    print("Default filters:", default_filters(df))


if __name__ == "__main__":
    main()
