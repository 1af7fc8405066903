import pytest

from labor_stats_explorer.analysis import (
    apply_filters,
    compute_options,
    key_series_loaded,
    match_state_name,
)
from labor_stats_explorer.models import FilterSelection


STATE_CATEGORIES = ("Unemployment rate", "nonfarm employment")


@pytest.fixture()
def state_records(make_point):
    return [
        make_point("Florida Unemployment Rate", "2024", "M01", "3.1", category="State Data"),
        make_point("Florida Total Nonfarm Employment", "2024", "M01", "9900.5", category="State Data"),
        make_point("Florida Unemployment Rate", "2023", "M12", "3.0", category="State Data"),
    ]


@pytest.mark.parametrize("view", ["states"])
def test_state_view_categories_are_fixed(view, state_records, make_point):
    assert compute_options([], view).categories == STATE_CATEGORIES
    assert compute_options(state_records, view).categories == STATE_CATEGORIES
    assert compute_options([make_point()], view).categories == STATE_CATEGORIES


def test_options_keep_first_occurrence_order(make_point):
    records = [
        make_point("CPI", "2024", "M02", category="Inflation"),
        make_point("National Unemployment Rate", "2023", "M01"),
        make_point("CPI", "2024", "M01", category="Inflation"),
    ]

    options = compute_options(records, "all")

    assert options.categories == ("Inflation", "National")
    assert options.years == ("2024", "2023")
    assert options.periods == ("M02", "M01")
    assert options.subcategories == ()


def test_subcategories_strip_unemployment_suffix(state_records):
    options = compute_options(state_records, "all")
    assert options.subcategories == ("Florida", "Florida Total Nonfarm Employment")


def test_returns_at_most_five_most_recent_per_series(make_point):
    records = [
        make_point("National Unemployment Rate", str(year), f"M{month:02d}", "4.0")
        for year in (2022, 2023)
        for month in range(1, 13)
    ]

    result = apply_filters(records, "all", FilterSelection())

    assert [(r.year, r.period) for r in result] == [
        ("2023", "M12"),
        ("2023", "M11"),
        ("2023", "M10"),
        ("2023", "M09"),
        ("2023", "M08"),
    ]


def test_groups_follow_first_appearance_after_sort(make_point):
    records = [
        make_point("B series", "2022", "M01"),
        make_point("A series", "2023", "M01"),
        make_point("B series", "2024", "M01"),
        make_point("A series", "2021", "M01"),
    ]

    result = apply_filters(records, "all", FilterSelection())

    assert [(r.name, r.year) for r in result] == [
        ("B series", "2024"),
        ("B series", "2022"),
        ("A series", "2023"),
        ("A series", "2021"),
    ]


def test_period_compared_numerically(make_point):
    records = [make_point(period="M02"), make_point(period="M10"), make_point(period="M13")]
    result = apply_filters(records, "all", FilterSelection())
    assert [r.period for r in result] == ["M13", "M10", "M02"]


@pytest.mark.parametrize(
    "query, expected",
    [
        ("", 3),
        ("unemployment", 2),
        ("NONFARM", 1),
        ("9900", 1),
        ("2023", 1),
        ("month 01", 2),
        ("florida unemployment rate and more", 2),
        ("texas", 0),
    ],
)
def test_search(query, expected, state_records):
    assert len(apply_filters(state_records, "all", FilterSelection(), query)) == expected


def test_search_ignores_missing_value(make_point):
    record = make_point(value="")
    assert apply_filters([record], "all", FilterSelection(), "zzz") == []


def test_category_exact_match_outside_states_view(make_point):
    records = [make_point(category="National"), make_point("CPI", category="Inflation")]
    result = apply_filters(records, "national", FilterSelection(category="Inflation"))
    assert [r.name for r in result] == ["CPI"]


@pytest.mark.parametrize(
    "category, names",
    [
        ("Unemployment rate", {"Florida Unemployment Rate"}),
        ("nonfarm employment", {"Florida Total Nonfarm Employment"}),
        ("something else", {"Florida Unemployment Rate", "Florida Total Nonfarm Employment"}),
    ],
)
def test_state_view_category_mapping(category, names, state_records):
    selection = FilterSelection(category=category, subcategory="Florida")
    result = apply_filters(state_records, "states", selection)
    assert {r.name for r in result} == names


def test_subcategory_only_applies_on_states_view(state_records):
    selection = FilterSelection(subcategory="Texas")
    assert apply_filters(state_records, "states", selection) == []
    assert len(apply_filters(state_records, "all", selection)) == 3


def test_year_and_period_exact_match(state_records):
    result = apply_filters(state_records, "all", FilterSelection(year="2024", period="M01"))
    assert len(result) == 2
    assert apply_filters(state_records, "all", FilterSelection(year="202")) == []


def test_input_records_not_reordered(make_point):
    records = [make_point(year="2020"), make_point(year="2024")]
    apply_filters(records, "all", FilterSelection())
    assert [r.year for r in records] == ["2020", "2024"]


@pytest.mark.parametrize(
    "search, expected",
    [
        ("texas", "Texas"),
        ("New", "New Hampshire"),
        ("unemployment in north dakota", "North Dakota"),
        ("", None),
        ("atlantis", None),
    ],
)
def test_match_state_name(search, expected):
    states = ["Florida", "New Hampshire", "New York", "North Dakota", "Texas"]
    assert match_state_name(search, states) == expected


def test_key_series_loaded(make_point):
    records = [
        make_point("National Unemployment Rate"),
        make_point("Consumer Price Index (CPI-U)"),
    ]
    assert not key_series_loaded(records)
    records.append(make_point("Producer Price Index (Final Demand)"))
    assert key_series_loaded(records)
