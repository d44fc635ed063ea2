"""Load the demography table and region geometries from disk."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from pybirthrate._constants import DEFAULT_REGION_NAME_PROPERTY
from pybirthrate.exceptions import DatasetError
from pybirthrate.models.region import RegionIdentity
from pybirthrate.records import RecordStore

_logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> RecordStore:
    """Read a demography CSV into a :class:`RecordStore`.

    Every cell is read as text and parsed by the record model, so an
    empty or non-numeric ``Year``/``Born``/``Died`` fails the load instead
    of turning into ``NaN`` or zero.
    """
    path = Path(path)
    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise DatasetError(f"cannot read records from {path}: {exc}", source=str(path)) from exc

    frame = frame.rename(columns=lambda column: str(column).strip())
    store = RecordStore.from_rows(frame.to_dict(orient="records"), source=str(path))
    _logger.debug("Loaded %d records for %d regions from %s", len(store), len(store.regions()), path)
    return store


def regions_from_geojson(
    data: Any,
    *,
    name_property: str = DEFAULT_REGION_NAME_PROPERTY,
    source: str | None = None,
) -> list[RegionIdentity]:
    """Build region identities from a parsed GeoJSON document.

    Accepts a ``FeatureCollection`` or a bare list of features.
    """
    if isinstance(data, Mapping):
        features = data.get("features")
    else:
        features = data
    if not isinstance(features, list):
        raise DatasetError("GeoJSON must be a FeatureCollection or a list of features", source=source)

    regions: list[RegionIdentity] = []
    for index, feature in enumerate(features):
        properties = feature.get("properties") if isinstance(feature, Mapping) else None
        if not isinstance(properties, Mapping):
            raise DatasetError(f"feature {index} has no properties", row=index, source=source)
        try:
            regions.append(
                RegionIdentity(
                    name=properties.get(name_property),
                    geometry=feature.get("geometry"),
                    properties=dict(properties),
                )
            )
        except ValidationError as exc:
            raise DatasetError(
                f"feature {index} has no usable {name_property!r} property: {exc}",
                row=index,
                source=source,
            ) from exc
    return regions


def load_regions(path: str | Path, *, name_property: str = DEFAULT_REGION_NAME_PROPERTY) -> list[RegionIdentity]:
    """Read a GeoJSON file into a list of :class:`RegionIdentity`."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DatasetError(f"cannot read regions from {path}: {exc}", source=str(path)) from exc

    regions = regions_from_geojson(data, name_property=name_property, source=str(path))
    _logger.debug("Loaded %d regions from %s", len(regions), path)
    return regions
