"""View events.

Every trigger handled by :class:`~pybirthrate.sync.ViewSync` produces
these events.  They are the only thing the rendering layer consumes.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pybirthrate._constants import BAR_CATEGORIES
from pybirthrate.models.record import YearlyRecord
from pybirthrate.models.region import JoinedRegionValue


class ViewEventKind(StrEnum):
    MAP_UPDATE = "map_update"
    YEAR_DISPLAY = "year_display"
    DETAIL_UPDATE = "detail_update"
    HIGHLIGHT_CHANGE = "highlight_change"


class ViewEvent(BaseModel):
    """Base for events sent to the rendering layer."""

    model_config = ConfigDict(frozen=True)

    kind: ViewEventKind


class MapUpdate(ViewEvent):
    """Fill values for every region at ``year``."""

    kind: Literal[ViewEventKind.MAP_UPDATE] = ViewEventKind.MAP_UPDATE
    year: int
    regions: dict[str, JoinedRegionValue] = Field(default_factory=dict)
    domain: tuple[float, float] = (0.0, 0.0)

    @property
    def values(self) -> dict[str, float | None]:
        return {name: joined.value for name, joined in self.regions.items()}


class YearDisplay(ViewEvent):
    kind: Literal[ViewEventKind.YEAR_DISPLAY] = ViewEventKind.YEAR_DISPLAY
    year: int


class DetailUpdate(ViewEvent):
    """Tooltip and bar chart content for the selected region.

    ``region`` is ``None`` when nothing is selected.  ``record`` is
    ``None`` when nothing is selected or the dataset has no row for the
    selected region at ``year``.
    """

    kind: Literal[ViewEventKind.DETAIL_UPDATE] = ViewEventKind.DETAIL_UPDATE
    year: int
    region: str | None = None
    record: YearlyRecord | None = None

    @property
    def is_selected(self) -> bool:
        return self.region is not None

    @property
    def has_data(self) -> bool:
        return self.record is not None

    @property
    def message(self) -> str | None:
        """Text for the tooltip when there is nothing to chart."""
        if self.region is None or self.record is not None:
            return None
        return f"No info for this {self.region} for year {self.year}"

    def bar_series(self) -> list[tuple[str, float]]:
        """Return ``[("Born", n), ("Died", n)]``, or ``[]`` when the chart is hidden."""
        if self.record is None:
            return []
        return [(label, self.record.value(field)) for label, field in BAR_CATEGORIES]


class HighlightChange(ViewEvent):
    """Move the highlight from ``previous`` (if any) to ``region``."""

    kind: Literal[ViewEventKind.HIGHLIGHT_CHANGE] = ViewEventKind.HIGHLIGHT_CHANGE
    region: str
    previous: str | None = None
