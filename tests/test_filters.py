from __future__ import annotations

from dataclasses import FrozenInstanceError, replace

import pytest

from quintile_explorer.data.filters import (
    FilterState,
    NoMetricsAvailableError,
    apply_filters,
    available_metrics,
    default_filters,
    reconcile_metric,
    serialize_filters,
)


def test_worked_example(example_dataset):
    state = FilterState(country="US", categories=(), metric="GDP", year_range=(2000, 2001))

    result = apply_filters(example_dataset, state)

    assert result.equals(example_dataset.iloc[:2])


def test_unset_filters_keep_everything(dataset):
    result = apply_filters(dataset, FilterState())

    assert len(result) == len(dataset)


def test_empty_categories_equal_all_categories(dataset):
    base = FilterState(country="Kenya", year_range=(2000, 2010))
    everything = replace(base, categories=tuple(sorted(dataset["Category"].unique())))

    assert apply_filters(dataset, base).equals(apply_filters(dataset, everything))


@pytest.mark.parametrize(
    "state",
    [
        FilterState(country="Kenya"),
        FilterState(categories=("Health",)),
        FilterState(categories=("Health", "Education"), year_range=(2008, 2008)),
        FilterState(country="Ghana", metric="Births attended", year_range=(None, 2008)),
        FilterState(metric="Stunting", year_range=(2009, None)),
    ],
)
def test_output_rows_satisfy_every_predicate(dataset, state):
    result = apply_filters(dataset, state)

    assert set(result.index) <= set(dataset.index)
    assert result.equals(dataset.loc[result.index])
    if state.country is not None:
        assert (result["Country Name"] == state.country).all()
    if state.categories:
        assert result["Category"].isin(state.categories).all()
    if state.metric is not None:
        assert (result["Series Name"] == state.metric).all()
    low, high = state.year_range
    if low is not None:
        assert (result["Year"] >= low).all()
    if high is not None:
        assert (result["Year"] <= high).all()


def test_year_range_is_inclusive(dataset):
    result = apply_filters(dataset, FilterState(year_range=(2003, 2003)))

    assert set(result["Year"]) == {2003}
    assert len(result) == 3


def test_preserves_row_order(dataset):
    result = apply_filters(dataset, FilterState(categories=("Health",)))

    assert list(result.index) == sorted(result.index)


def test_no_match_returns_empty_frame(dataset):
    result = apply_filters(dataset, FilterState(country="Ghana", categories=("Nutrition",)))

    assert result.empty
    assert list(result.columns) == list(dataset.columns)


def test_input_not_mutated(dataset):
    before = dataset.copy()

    apply_filters(dataset, FilterState(country="Kenya", metric="Stunting"))

    assert dataset.equals(before)


def test_applied_filters_recorded(dataset):
    state = FilterState(country="Kenya", categories=("Health",))

    result = apply_filters(dataset, state)

    assert result.attrs["applied_filters"] == serialize_filters(state)


def test_available_metrics_follow_categories(dataset):
    assert available_metrics(dataset, ["Nutrition"]) == ["Stunting"]
    assert available_metrics(dataset, ["Health", "Education"]) == [
        "Births attended",
        "Immunization",
        "Primary completion",
    ]
    assert available_metrics(dataset, []) == sorted(dataset["Series Name"].unique())


def test_reconcile_keeps_available_metric(dataset):
    state = FilterState(categories=("Health",), metric="Immunization")

    assert reconcile_metric(dataset, state) is state


def test_reconcile_switches_stale_metric(dataset):
    state = FilterState(categories=("Nutrition",), metric="Births attended")

    assert reconcile_metric(dataset, state).metric == "Stunting"


def test_reconcile_without_metrics_clears_and_raises(dataset):
    state = FilterState(country="Kenya", categories=("Housing",), metric="Stunting")

    with pytest.raises(NoMetricsAvailableError) as excinfo:
        reconcile_metric(dataset, state)

    assert excinfo.value.state.metric is None
    assert excinfo.value.state.categories == ("Housing",)
    assert excinfo.value.state.country == "Kenya"
    assert "Housing" in str(excinfo.value)


def test_default_filters(dataset):
    state = default_filters(dataset)

    assert state == FilterState(
        country="Ghana",
        categories=("Education",),
        metric="Primary completion",
        year_range=(2003, 2009),
        plot_type="line",
        show_average=False,
    )


def test_reset_is_independent_of_prior_state(dataset):
    first = default_filters(dataset)
    shuffled = dataset.sample(frac=1, random_state=7)

    assert default_filters(shuffled) == first
    assert default_filters(dataset) == first


def test_default_filters_on_empty_dataset(dataset):
    state = default_filters(dataset.iloc[0:0])

    assert state == FilterState()


def test_filter_state_is_immutable():
    state = FilterState()

    with pytest.raises(FrozenInstanceError):
        state.country = "Kenya"  # type: ignore[misc]


def test_unknown_plot_type_rejected():
    with pytest.raises(ValueError):
        FilterState(plot_type="pie")
