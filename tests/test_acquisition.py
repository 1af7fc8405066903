import asyncio

import pytest

from labor_stats_explorer.config import DEFAULT_CATALOG, SeriesCatalog, Settings
from labor_stats_explorer.data import DataAcquisition, select_series
from labor_stats_explorer.errors import AcquisitionError, ApiError, ConfigError
from labor_stats_explorer.models import AcquisitionResult, FilterSelection, SeriesDescriptor


NATIONAL = SeriesDescriptor("LNS14000000", "National Unemployment Rate", "National", None, "Percent")
CPI = SeriesDescriptor("CUUR0000SA0", "Consumer Price Index (CPI-U)", "Inflation", None, "Index")
SMALL_CATALOG = SeriesCatalog([NATIONAL, CPI])


def acquire(fetcher, settings, view, selection=None, catalog=SMALL_CATALOG):
    acquisition = DataAcquisition(fetcher, settings, catalog)
    return asyncio.run(acquisition.acquire(view, selection))


def test_national_partial_failure_is_degraded_success(settings, fake_fetcher, observation):
    fetcher = fake_fetcher({NATIONAL.id: [observation("2024", "M01", "3.9")]})

    result = acquire(fetcher, settings, "national")

    assert len(result.records) == 1
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].startswith("Failed to fetch Consumer Price Index (CPI-U):")


def test_all_failures_raise_acquisition_error(settings, fake_fetcher, transport_error):
    fetcher = fake_fetcher({NATIONAL.id: transport_error})

    with pytest.raises(AcquisitionError) as exc_info:
        acquire(fetcher, settings, "national")

    assert len(exc_info.value.diagnostics) == 2
    assert "HTTP error! status: 500" in exc_info.value.diagnostics[0]


def test_fetches_are_sequential_in_catalog_order(settings, fake_fetcher, observation):
    fetcher = fake_fetcher({NATIONAL.id: ApiError("bad"), CPI.id: [observation()]})

    result = acquire(fetcher, settings, "national")

    assert fetcher.calls == [NATIONAL.id, CPI.id]
    assert result.diagnostics == ("Failed to fetch National Unemployment Rate: bad",)


def test_missing_key_aborts_before_any_fetch(fake_fetcher):
    fetcher = fake_fetcher({})

    with pytest.raises(ConfigError):
        acquire(fetcher, Settings(bls_api_key=""), "national")

    assert fetcher.calls == []


def test_records_carry_descriptor_fields(settings, fake_fetcher, observation):
    fetcher = fake_fetcher({NATIONAL.id: [observation()], CPI.id: [observation(value="310.3")]})

    result = acquire(fetcher, settings, "national")

    by_id = {r.id: r for r in result.records}
    for descriptor in (NATIONAL, CPI):
        record = by_id[descriptor.id]
        assert record.name == descriptor.name
        assert record.category == descriptor.category
        assert record.unit == descriptor.unit


def test_records_sorted_most_recent_first(settings, fake_fetcher, observation):
    fetcher = fake_fetcher(
        {
            NATIONAL.id: [observation("2023", "M12"), observation("2024", "M02")],
            CPI.id: [observation("2024", "M11"), observation("2022", "M05")],
        }
    )

    result = acquire(fetcher, settings, "national")

    assert [(r.year, r.period) for r in result.records] == [
        ("2024", "M11"),
        ("2024", "M02"),
        ("2023", "M12"),
        ("2022", "M05"),
    ]


def test_empty_selection_is_not_an_error(settings, fake_fetcher):
    fetcher = fake_fetcher({})
    result = acquire(fetcher, settings, "national", catalog=SeriesCatalog([]))
    assert fetcher.calls == []
    assert result.records == ()
    assert result.diagnostics == ()


def test_footnotes_keep_only_text_entries(settings, fake_fetcher, observation):
    raw = observation()
    raw["footnotes"] = [{"code": "P", "text": "preliminary"}, {}]
    fetcher = fake_fetcher({NATIONAL.id: [raw], CPI.id: [observation()]})

    result = acquire(fetcher, settings, "national")

    footnotes = {r.id: r.footnotes for r in result.records}
    assert [fn.text for fn in footnotes[NATIONAL.id]] == ["preliminary"]
    assert footnotes[CPI.id] == ()


def test_select_national_view():
    selected = select_series(DEFAULT_CATALOG, "national")
    assert selected
    assert {d.category for d in selected} == {"National", "Inflation"}
    assert len(selected) == len(DEFAULT_CATALOG.by_category("National", "Inflation"))


def test_select_states_view_uses_selected_state():
    selected = select_series(DEFAULT_CATALOG, "states", FilterSelection(subcategory="Texas"))
    assert [d.name for d in selected] == [
        "Texas Unemployment Rate",
        "Texas Total Nonfarm Employment",
    ]


@pytest.mark.parametrize("selection", [None, FilterSelection()])
def test_select_states_view_defaults_to_florida(selection):
    selected = select_series(DEFAULT_CATALOG, "states", selection)
    assert {d.subcategory for d in selected} == {"Florida"}


def test_select_all_view_is_headline_series_plus_florida():
    names = [d.name for d in select_series(DEFAULT_CATALOG, "all")]
    assert names == [
        "National Unemployment Rate",
        "Total Nonfarm Employment",
        "Consumer Price Index (CPI-U)",
        "Producer Price Index (Final Demand)",
        "Florida Unemployment Rate",
        "Florida Total Nonfarm Employment",
    ]


def test_unknown_view_falls_back_to_all():
    assert select_series(DEFAULT_CATALOG, "bogus") == select_series(DEFAULT_CATALOG, "all")


def test_result_defaults_are_empty_tuples():
    result = AcquisitionResult()
    assert result.records == ()
    assert result.diagnostics == ()
