"""Region identity and per-region join results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pybirthrate.ingestion.normalize import parse_name


class RegionIdentity(BaseModel):
    """A named region geometry.

    Only ``name`` takes part in joins.  ``geometry`` and ``properties``
    are carried through untouched for the rendering layer.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    geometry: Any = None
    properties: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _parse_name(cls, value: Any) -> str:
        return parse_name(value)


class JoinedRegionValue(BaseModel):
    """The joined statistic for one region.

    ``value`` is ``None`` when the dataset has no row for the region and
    year, which keeps "no data" distinct from a real zero.
    """

    model_config = ConfigDict(frozen=True)

    region: str
    value: float | None = None

    @property
    def has_data(self) -> bool:
        return self.value is not None
