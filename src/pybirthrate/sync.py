"""Year/selection orchestration for the map, tooltip and bar chart views."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pybirthrate.config import MapConfig
from pybirthrate.exceptions import BirthrateConfigError
from pybirthrate.ingestion.loader import load_records, load_regions
from pybirthrate.join import RegionJoiner
from pybirthrate.models.region import RegionIdentity
from pybirthrate.state.events import DetailUpdate, HighlightChange, MapUpdate, ViewEvent, YearDisplay
from pybirthrate.state.selection import SelectionState
from pybirthrate.years import YearIndex

_logger = logging.getLogger(__name__)

ViewListener = Callable[[ViewEvent], None]


class ViewSync:
    """Drive the three dependent views from slider and click triggers.

    Usage::

        sync = ViewSync(YearIndex(years), RegionJoiner(store), regions)
        sync.subscribe(renderer.handle)
        sync.start()
        sync.on_year_change(1992.4)
        sync.on_region_click("Moscow")

    Each trigger computes every event first and then hands them to the
    listeners in order, so a listener never sees a partial update.  A
    year change always produces a :class:`MapUpdate`, a
    :class:`YearDisplay` and a :class:`DetailUpdate`; a click produces a
    :class:`DetailUpdate` and a :class:`HighlightChange`.
    """

    def __init__(
        self,
        year_index: YearIndex,
        joiner: RegionJoiner,
        regions: Iterable[RegionIdentity],
        *,
        selection: SelectionState | None = None,
        listeners: Iterable[ViewListener] = (),
    ) -> None:
        self._year_index = year_index
        self._joiner = joiner
        self._regions: tuple[RegionIdentity, ...] = tuple(regions)
        self._selection = selection if selection is not None else SelectionState()
        self._listeners: list[ViewListener] = list(listeners)
        self._last_raw_year: float = year_index.min_year
        self._current_year: int | None = None

    @classmethod
    def from_config(cls, config: MapConfig, *, listeners: Iterable[ViewListener] = ()) -> ViewSync:
        """Load the dataset and geometries named by *config*.

        Raises
        ------
        BirthrateConfigError
            If either path is missing or the valid-year set is empty.
        DatasetError
            If a file cannot be read or a row cannot be parsed.
        """
        if not config.records_path:
            raise BirthrateConfigError("records_path is required")
        if not config.regions_path:
            raise BirthrateConfigError("regions_path is required")

        year_index = YearIndex(config.valid_years)
        store = load_records(config.records_path)
        regions = load_regions(config.regions_path, name_property=config.region_name_property)
        missing = store.regions() - {region.name for region in regions}
        if missing:
            _logger.debug("%d dataset regions have no geometry: %s", len(missing), sorted(missing))
        return cls(
            year_index,
            RegionJoiner(store, value_field=config.value_field),
            regions,
            listeners=listeners,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def year_index(self) -> YearIndex:
        return self._year_index

    @property
    def regions(self) -> tuple[RegionIdentity, ...]:
        return self._regions

    @property
    def selected_region(self) -> str | None:
        return self._selection.selected_region

    @property
    def current_year(self) -> int | None:
        """Snapped year of the last trigger, ``None`` before the first one."""
        return self._current_year

    def subscribe(self, listener: ViewListener) -> Callable[[], None]:
        """Register *listener* and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def start(self) -> list[ViewEvent]:
        """Render the initial state at the first valid year."""
        return self.on_year_change(self._year_index.min_year)

    def on_year_change(self, raw_year: float) -> list[ViewEvent]:
        self._last_raw_year = raw_year
        year = self._year_index.snap(raw_year)
        self._current_year = year
        _logger.debug("Year change raw=%s snapped=%d", raw_year, year)

        joined = self._joiner.join_all(self._regions, year)
        detail = self._selection.current_detail(self._joiner, year)
        events: list[ViewEvent] = [
            MapUpdate(year=year, regions=joined, domain=self._joiner.value_domain()),
            YearDisplay(year=year),
            DetailUpdate(year=year, region=self._selection.selected_region, record=detail),
        ]
        self._emit(events)
        return events

    def on_region_click(self, region: str, current_raw_year: float | None = None) -> list[ViewEvent]:
        """Select *region* and show its detail at the slider's year.

        *current_raw_year* defaults to the raw year of the last trigger.
        """
        previous = self._selection.select(region)
        if current_raw_year is not None:
            self._last_raw_year = current_raw_year
        year = self._year_index.snap(self._last_raw_year)
        self._current_year = year
        _logger.debug("Region click region=%s previous=%s year=%d", region, previous, year)

        detail = self._joiner.lookup_detail(region, year)
        events: list[ViewEvent] = [
            DetailUpdate(year=year, region=region, record=detail),
            HighlightChange(region=region, previous=previous),
        ]
        self._emit(events)
        return events

    def _emit(self, events: list[ViewEvent]) -> None:
        for event in events:
            for listener in tuple(self._listeners):
                try:
                    listener(event)
                except Exception:
                    _logger.debug("View listener failed for %s", event.kind, exc_info=True)
