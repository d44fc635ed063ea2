"""Valid sample years and nearest-year snapping."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from typing import Any

from pybirthrate.exceptions import YearIndexError
from pybirthrate.ingestion.normalize import parse_year


class YearIndex:
    """Ordered set of years that have samples in the dataset.

    The slider can produce any year between the first and last sample;
    :meth:`snap` maps it to the nearest year that actually has data.
    """

    def __init__(self, years: Iterable[Any]) -> None:
        parsed: set[int] = set()
        for value in years:
            try:
                parsed.add(parse_year(value))
            except ValueError as exc:
                raise YearIndexError(f"invalid valid year {value!r}: {exc}") from exc
        if not parsed:
            raise YearIndexError("valid year set must not be empty")
        self._years: tuple[int, ...] = tuple(sorted(parsed))

    def __repr__(self) -> str:
        return f"YearIndex({list(self._years)!r})"

    def __len__(self) -> int:
        return len(self._years)

    def __iter__(self) -> Iterator[int]:
        return iter(self._years)

    def __contains__(self, year: object) -> bool:
        return year in self._years

    @property
    def years(self) -> tuple[int, ...]:
        return self._years

    @property
    def min_year(self) -> int:
        return self._years[0]

    @property
    def max_year(self) -> int:
        return self._years[-1]

    def snap(self, target_year: float) -> int:
        """Return the valid year closest to *target_year*.

        When *target_year* sits exactly halfway between two valid years
        the smaller one wins, so ``snap(1985)`` over ``[1980, 1990]`` is
        always ``1980``.  Targets outside the range clamp to the first or
        last valid year.
        """
        years = self._years
        idx = bisect.bisect_left(years, target_year)
        if idx == 0:
            return years[0]
        if idx == len(years):
            return years[-1]
        lower, upper = years[idx - 1], years[idx]
        if upper - target_year < target_year - lower:
            return upper
        return lower
