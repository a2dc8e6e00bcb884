from __future__ import annotations

import math

import pandas as pd

from quintile_explorer.data.aggregation import yearly_average
from quintile_explorer.data.filters import FilterState, apply_filters


def test_worked_example_average(example_dataset):
    view = apply_filters(example_dataset, FilterState(country="US", metric="GDP", year_range=(2000, 2001)))

    result = yearly_average(view)

    assert result["Year"].tolist() == [2000, 2001]
    assert result["Value"].tolist() == [5.0, 7.0]


def test_one_point_per_distinct_year_within_bounds(dataset):
    result = yearly_average(dataset)

    assert result["Year"].tolist() == sorted(dataset["Year"].unique())
    grouped = dataset.groupby("Year")["Value"]
    for year, mean in zip(result["Year"], result["Value"]):
        assert grouped.min()[year] <= mean <= grouped.max()[year]


def test_missing_values_ignored():
    df = pd.DataFrame({"Year": [2000, 2000, 2001], "Value": [4.0, None, 8.0]})

    result = yearly_average(df)

    assert result["Value"].tolist() == [4.0, 8.0]


def test_no_fabricated_years():
    df = pd.DataFrame({"Year": [2010, 2000], "Value": [1.0, 3.0]})

    result = yearly_average(df)

    assert result["Year"].tolist() == [2000, 2010]
    assert not any(math.isnan(v) for v in result["Value"])


def test_empty_input():
    result = yearly_average(pd.DataFrame(columns=["Year", "Value"]))

    assert result.empty
    assert list(result.columns) == ["Year", "Value"]
