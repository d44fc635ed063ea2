"""In-memory store of yearly regional records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from pybirthrate._constants import VALUE_FIELDS
from pybirthrate.exceptions import DatasetError
from pybirthrate.models.record import YearlyRecord

_logger = logging.getLogger(__name__)


class RecordStore:
    """Read-only index of :class:`YearlyRecord` keyed by ``(region, year)``.

    Lookups are exact: the caller snaps the year first.  When two records
    share a key the first one loaded is kept.
    """

    def __init__(self, records: Iterable[YearlyRecord] = ()) -> None:
        self._index: dict[tuple[str, int], YearlyRecord] = {}
        for record in records:
            if record.key in self._index:
                _logger.debug("Ignoring duplicate record region=%s year=%d", record.region, record.year)
                continue
            self._index[record.key] = record

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]], *, source: str | None = None) -> RecordStore:
        """Validate raw dataset rows and build a store.

        Raises
        ------
        DatasetError
            If any row has a missing or non-numeric ``Year``, ``Born``,
            ``Died`` or ``Diff`` value, or a negative count.
        """
        records: list[YearlyRecord] = []
        for row_number, row in enumerate(rows):
            try:
                records.append(YearlyRecord.model_validate(row))
            except ValidationError as exc:
                where = f" in {source}" if source else ""
                raise DatasetError(
                    f"invalid record at row {row_number}{where}: {exc}",
                    row=row_number,
                    source=source,
                ) from exc
        return cls(records)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[YearlyRecord]:
        return iter(self._index.values())

    def lookup(self, region: str, year: int) -> YearlyRecord | None:
        return self._index.get((region, year))

    def regions(self) -> set[str]:
        return {region for region, _ in self._index}

    def years(self) -> list[int]:
        return sorted({year for _, year in self._index})

    def value_domain(self, field: str) -> tuple[float, float]:
        """Return ``(low, high)`` for *field* across every record.

        Both ends always include zero, matching a color scale anchored at
        zero.  An empty store yields ``(0.0, 0.0)``.
        """
        if field not in VALUE_FIELDS:
            raise ValueError(f"field must be one of {VALUE_FIELDS}, got {field!r}")
        values = [record.value(field) for record in self._index.values()]
        if not values:
            return (0.0, 0.0)
        return (min(0.0, min(values)), max(0.0, max(values)))
