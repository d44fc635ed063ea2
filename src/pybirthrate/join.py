"""Joining a year's records onto the region set."""

from __future__ import annotations

from collections.abc import Iterable

from pybirthrate._constants import DEFAULT_VALUE_FIELD, VALUE_FIELDS
from pybirthrate.exceptions import BirthrateConfigError
from pybirthrate.models.record import YearlyRecord
from pybirthrate.models.region import JoinedRegionValue, RegionIdentity
from pybirthrate.records import RecordStore


def _region_name(region: RegionIdentity | str) -> str:
    if isinstance(region, RegionIdentity):
        return region.name
    return region


class RegionJoiner:
    """Resolve per-region values for a snapped year.

    ``value_field`` selects which statistic fills the map; detail lookups
    always return the full record.
    """

    def __init__(self, store: RecordStore, *, value_field: str = DEFAULT_VALUE_FIELD) -> None:
        if value_field not in VALUE_FIELDS:
            raise BirthrateConfigError(f"value_field must be one of {VALUE_FIELDS}, got {value_field!r}")
        self._store = store
        self._value_field = value_field
        self._domain = store.value_domain(value_field)

    @property
    def value_field(self) -> str:
        return self._value_field

    @property
    def store(self) -> RecordStore:
        return self._store

    def value_domain(self) -> tuple[float, float]:
        return self._domain

    def join_all(self, regions: Iterable[RegionIdentity | str], year: int) -> dict[str, JoinedRegionValue]:
        """Return one :class:`JoinedRegionValue` per region name.

        Regions with no record for *year* get ``value=None``.  Neither the
        regions nor the store are modified.
        """
        joined: dict[str, JoinedRegionValue] = {}
        for region in regions:
            name = _region_name(region)
            record = self._store.lookup(name, year)
            value = record.value(self._value_field) if record is not None else None
            joined[name] = JoinedRegionValue(region=name, value=value)
        return joined

    def lookup_detail(self, region: str, year: int) -> YearlyRecord | None:
        return self._store.lookup(region, year)
