from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from quintile_explorer.config import RECORD_COLUMNS

ROOT = Path(__file__).resolve().parent.parent
SAMPLE_CSV = ROOT / "data" / "sample_wealth_quintiles.csv"


def make_records(rows) -> pd.DataFrame:
    """Build a cleaned dataset from (country, category, metric, year, value, quintile) tuples."""
    df = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    df["Year"] = df["Year"].astype(int)
    df["Value"] = df["Value"].astype(float)
    return df


@pytest.fixture
def example_dataset() -> pd.DataFrame:
    return make_records(
        [
            ("US", "Health", "GDP", 2000, 5, "Q1"),
            ("US", "Health", "GDP", 2001, 7, "Q1"),
            ("FR", "Health", "GDP", 2000, 9, "Q1"),
        ]
    )


@pytest.fixture
def dataset() -> pd.DataFrame:
    return make_records(
        [
            ("Kenya", "Health", "Births attended", 2003, 17.0, "Q1"),
            ("Kenya", "Health", "Births attended", 2003, 75.4, "Q5"),
            ("Kenya", "Health", "Births attended", 2009, 19.9, "Q1"),
            ("Kenya", "Health", "Births attended", 2009, 81.3, "Q5"),
            ("Kenya", "Nutrition", "Stunting", 2009, 44.2, "Q1"),
            ("Kenya", "Nutrition", "Stunting", 2009, 21.7, "Q5"),
            ("Ghana", "Education", "Primary completion", 2003, 48.3, "Q1"),
            ("Ghana", "Education", "Primary completion", 2008, 90.2, "Q5"),
            ("Ghana", "Health", "Births attended", 2008, 42.7, "Q1"),
            ("Ghana", "Health", "Immunization", 2008, 80.0, "Q3"),
        ]
    )


@pytest.fixture
def sample_csv() -> Path:
    return SAMPLE_CSV
