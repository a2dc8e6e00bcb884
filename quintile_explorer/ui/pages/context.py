from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from quintile_explorer.data.filters import FilterState


@dataclass
class PageContext:
    dataset: pd.DataFrame
    filters: FilterState
