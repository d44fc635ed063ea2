from __future__ import annotations

import pytest

from pybirthrate.exceptions import DatasetError
from pybirthrate.models.record import YearlyRecord
from pybirthrate.records import RecordStore


def test_lookup_exact_match(store: RecordStore) -> None:
    record = store.lookup("Moscow", 1990)

    assert record == YearlyRecord(region="Moscow", year=1990, born=100, died=80, diff=20)


def test_lookup_missing_year_is_none(store: RecordStore) -> None:
    assert store.lookup("Moscow", 1991) is None


def test_lookup_missing_region_is_none(store: RecordStore) -> None:
    assert store.lookup("Tver", 1990) is None
    assert store.lookup("Pskov", 2000) is None


def test_lookup_does_not_snap(store: RecordStore) -> None:
    assert store.lookup("Moscow", 1989) is None


def test_first_duplicate_wins() -> None:
    store = RecordStore(
        [
            YearlyRecord(region="Moscow", year=1990, born=100, died=80, diff=20),
            YearlyRecord(region="Moscow", year=1990, born=1, died=1, diff=0),
        ]
    )

    assert len(store) == 1
    record = store.lookup("Moscow", 1990)
    assert record is not None
    assert record.born == 100


def test_from_rows_parses_dataset_columns() -> None:
    store = RecordStore.from_rows(
        [
            {"region": "Moscow", "Year": "1990", "Born": "100", "Died": "80", "Diff": "20"},
            {"region": "Tver", "Year": 2000, "Born": 40, "Died": 65, "Diff": -25},
        ]
    )

    assert len(store) == 2
    assert store.lookup("Moscow", 1990) == YearlyRecord(region="Moscow", year=1990, born=100, died=80, diff=20)
    tver = store.lookup("Tver", 2000)
    assert tver is not None
    assert tver.diff == -25


def test_from_rows_rejects_non_numeric_born() -> None:
    rows = [
        {"region": "Moscow", "Year": "1990", "Born": "100", "Died": "80", "Diff": "20"},
        {"region": "Tver", "Year": "1990", "Born": "n/a", "Died": "80", "Diff": "20"},
    ]

    with pytest.raises(DatasetError) as excinfo:
        RecordStore.from_rows(rows, source="demo.csv")

    assert excinfo.value.row == 1
    assert excinfo.value.source == "demo.csv"


def test_from_rows_rejects_empty_year() -> None:
    with pytest.raises(DatasetError):
        RecordStore.from_rows([{"region": "Moscow", "Year": "", "Born": "1", "Died": "1", "Diff": "0"}])


def test_regions_and_years(store: RecordStore) -> None:
    assert store.regions() == {"Moscow", "Tver"}
    assert store.years() == [1990, 2000]


def test_value_domain_anchored_at_zero(store: RecordStore) -> None:
    assert store.value_domain("born") == (0.0, 100.0)
    assert store.value_domain("died") == (0.0, 120.0)
    assert store.value_domain("diff") == (-30.0, 20.0)


def test_value_domain_empty_store() -> None:
    assert RecordStore().value_domain("born") == (0.0, 0.0)


def test_value_domain_unknown_field(store: RecordStore) -> None:
    with pytest.raises(ValueError):
        store.value_domain("population")
