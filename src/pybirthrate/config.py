"""Map configuration for pybirthrate."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pybirthrate._constants import (
    DEFAULT_REGION_NAME_PROPERTY,
    DEFAULT_VALID_YEARS,
    DEFAULT_VALUE_FIELD,
    VALUE_FIELDS,
)
from pybirthrate.exceptions import BirthrateConfigError


def _env_years(value: str) -> tuple[int, ...]:
    years: list[int] = []
    for part in value.split(","):
        text = part.strip()
        if not text:
            continue
        try:
            years.append(int(text))
        except ValueError as exc:
            raise BirthrateConfigError(f"BIRTHRATE_VALID_YEARS contains a non-integer year: {text!r}") from exc
    if not years:
        raise BirthrateConfigError("BIRTHRATE_VALID_YEARS must list at least one year")
    return tuple(years)


@dataclasses.dataclass(frozen=True)
class MapConfig:
    """Map configuration.

    Parameters
    ----------
    records_path : str or None
        CSV file with ``region``, ``Year``, ``Born``, ``Died`` and
        ``Diff`` columns.
    regions_path : str or None
        GeoJSON FeatureCollection of region geometries.
    valid_years : tuple of int
        Years the slider snaps to.  Defaults to the years sampled in the
        bundled dataset.
    value_field : str
        Record field that drives the map fill (``born``, ``died`` or
        ``diff``).
    region_name_property : str
        Feature property holding the region name used as the join key.
    """

    records_path: str | None = None
    regions_path: str | None = None
    valid_years: tuple[int, ...] = DEFAULT_VALID_YEARS
    value_field: str = DEFAULT_VALUE_FIELD
    region_name_property: str = DEFAULT_REGION_NAME_PROPERTY

    def __post_init__(self) -> None:
        if self.value_field not in VALUE_FIELDS:
            raise BirthrateConfigError(f"value_field must be one of {VALUE_FIELDS}, got {self.value_field!r}")
        if not self.valid_years:
            raise BirthrateConfigError("valid_years must not be empty")
        if not self.region_name_property:
            raise BirthrateConfigError("region_name_property must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> MapConfig:
        """Create configuration from environment variables.

        Reads ``BIRTHRATE_RECORDS_PATH``, ``BIRTHRATE_REGIONS_PATH``,
        ``BIRTHRATE_VALID_YEARS`` (comma-separated),
        ``BIRTHRATE_VALUE_FIELD`` and ``BIRTHRATE_REGION_NAME_PROPERTY``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "BIRTHRATE_RECORDS_PATH": "records_path",
            "BIRTHRATE_REGIONS_PATH": "regions_path",
            "BIRTHRATE_VALUE_FIELD": "value_field",
            "BIRTHRATE_REGION_NAME_PROPERTY": "region_name_property",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        # valid_years is a list, handle separately
        years_env = env.get("BIRTHRATE_VALID_YEARS")
        if years_env is not None and "valid_years" not in overrides:
            config_kwargs["valid_years"] = _env_years(years_env)

        config_kwargs.update(overrides)
        if "valid_years" in config_kwargs:
            config_kwargs["valid_years"] = tuple(config_kwargs["valid_years"])

        return cls(**config_kwargs)
