from __future__ import annotations

import datetime as dt
import io

import pandas as pd

from quintile_explorer.config import RECORD_COLUMNS
from quintile_explorer.data.export import export_csv, export_file_name


def test_file_name_carries_date():
    assert export_file_name(dt.date(2024, 3, 9)) == "quintile_data_2024-03-09.csv"


def test_file_name_defaults_to_today():
    assert export_file_name().endswith(f"{dt.date.today().isoformat()}.csv")


def test_export_columns_and_rows(dataset):
    view = dataset[dataset["Country Name"] == "Kenya"].assign(extra=1)

    parsed = pd.read_csv(io.BytesIO(export_csv(view)))

    assert list(parsed.columns) == RECORD_COLUMNS
    assert len(parsed) == len(view)
    assert parsed["Value"].tolist() == view["Value"].tolist()
