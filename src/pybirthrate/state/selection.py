"""Selected-region state."""

from __future__ import annotations

from pybirthrate.join import RegionJoiner
from pybirthrate.models.record import YearlyRecord


class SelectionState:
    """The single region the user last clicked, if any.

    Selecting replaces the previous region in one assignment, so there is
    never a moment with zero or two regions selected.  Year changes read
    the selection but never clear it.
    """

    def __init__(self, selected_region: str | None = None) -> None:
        self._selected_region = selected_region

    def __repr__(self) -> str:
        return f"SelectionState(selected_region={self._selected_region!r})"

    @property
    def selected_region(self) -> str | None:
        return self._selected_region

    def select(self, region: str) -> str | None:
        """Select *region* and return the region it replaced."""
        previous, self._selected_region = self._selected_region, region
        return previous

    def current_detail(self, joiner: RegionJoiner, year: int) -> YearlyRecord | None:
        if self._selected_region is None:
            return None
        return joiner.lookup_detail(self._selected_region, year)
