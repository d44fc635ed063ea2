from __future__ import annotations

import pytest

from pybirthrate.join import RegionJoiner
from pybirthrate.models.record import YearlyRecord
from pybirthrate.models.region import RegionIdentity
from pybirthrate.records import RecordStore
from pybirthrate.years import YearIndex

VALID_YEARS = [1970, 1980, 1990, 1995, 2000, 2005, 2006, 2007, 2008, 2009, 2010]


@pytest.fixture
def year_index() -> YearIndex:
    return YearIndex(VALID_YEARS)


@pytest.fixture
def store() -> RecordStore:
    return RecordStore(
        [
            YearlyRecord(region="Moscow", year=1990, born=100, died=80, diff=20),
            YearlyRecord(region="Moscow", year=2000, born=90, died=120, diff=-30),
            YearlyRecord(region="Tver", year=2000, born=40, died=65, diff=-25),
        ]
    )


@pytest.fixture
def joiner(store: RecordStore) -> RegionJoiner:
    return RegionJoiner(store)


@pytest.fixture
def regions() -> list[RegionIdentity]:
    return [
        RegionIdentity(name="Moscow", geometry={"type": "Polygon", "coordinates": []}),
        RegionIdentity(name="Tver", geometry={"type": "Polygon", "coordinates": []}),
    ]
