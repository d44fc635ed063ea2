"""pybirthrate - Year-synchronized choropleth state for regional birth statistics."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybirthrate")
except PackageNotFoundError:
    __version__ = "0+local"
from pybirthrate.config import MapConfig
from pybirthrate.exceptions import (
    BirthrateConfigError,
    BirthrateError,
    DatasetError,
    YearIndexError,
)
from pybirthrate.ingestion.loader import load_records, load_regions
from pybirthrate.join import RegionJoiner
from pybirthrate.models import JoinedRegionValue, RegionIdentity, YearlyRecord
from pybirthrate.records import RecordStore
from pybirthrate.state.events import (
    DetailUpdate,
    HighlightChange,
    MapUpdate,
    ViewEvent,
    ViewEventKind,
    YearDisplay,
)
from pybirthrate.state.selection import SelectionState
from pybirthrate.sync import ViewListener, ViewSync
from pybirthrate.years import YearIndex

__all__ = [
    "__version__",
    "BirthrateConfigError",
    "BirthrateError",
    "DatasetError",
    "DetailUpdate",
    "HighlightChange",
    "JoinedRegionValue",
    "MapConfig",
    "MapUpdate",
    "RecordStore",
    "RegionIdentity",
    "RegionJoiner",
    "SelectionState",
    "ViewEvent",
    "ViewEventKind",
    "ViewListener",
    "ViewSync",
    "YearDisplay",
    "YearIndex",
    "YearlyRecord",
    "load_records",
    "load_regions",
]
