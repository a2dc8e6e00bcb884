"""
CSV export of the currently filtered view.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

import pandas as pd

from quintile_explorer.config import RECORD_COLUMNS

EXPORT_PREFIX = "quintile_data"


def export_file_name(today: Optional[dt.date] = None) -> str:
    today = today or dt.date.today()
    return f"{EXPORT_PREFIX}_{today.isoformat()}.csv"


def export_csv(df: pd.DataFrame) -> bytes:
    columns = [col for col in RECORD_COLUMNS if col in df.columns]
    return df[columns].to_csv(index=False).encode("utf-8")
