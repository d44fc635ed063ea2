"""Yearly regional demography record."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import Field, field_validator, model_validator

from pybirthrate._constants import RECORD_COLUMN_ALIASES, VALUE_FIELDS
from pybirthrate.ingestion.normalize import parse_name, parse_number, parse_year
from pybirthrate.models._base import BirthrateBaseModel


class YearlyRecord(BirthrateBaseModel):
    """Birth and death counts for one region in one year.

    Parameters
    ----------
    region : str
        Region identifier; matches the ``name`` of a region geometry.
    year : int
        Calendar year of the sample.
    born : float
        Number of births, non-negative.
    died : float
        Number of deaths, non-negative.
    diff : float
        Natural increase (``born - died``); may be negative.  Computed
        when the source row has no ``Diff`` column.
    """

    _KEY_ALIASES: ClassVar[dict[str, str]] = RECORD_COLUMN_ALIASES

    region: str
    year: int
    born: float = Field(ge=0)
    died: float = Field(ge=0)
    diff: float

    @model_validator(mode="before")
    @classmethod
    def _fill_diff(cls, values: Any) -> Any:
        if not isinstance(values, Mapping):
            return values
        working = BirthrateBaseModel._apply_aliases(values, cls._KEY_ALIASES)
        if "diff" not in working and "born" in working and "died" in working:
            working["diff"] = parse_number(working["born"]) - parse_number(working["died"])
        return working

    @field_validator("region", mode="before")
    @classmethod
    def _parse_region(cls, value: Any) -> str:
        return parse_name(value)

    @field_validator("year", mode="before")
    @classmethod
    def _parse_year(cls, value: Any) -> int:
        return parse_year(value)

    @field_validator("born", "died", "diff", mode="before")
    @classmethod
    def _parse_count(cls, value: Any) -> float:
        return parse_number(value)

    @property
    def key(self) -> tuple[str, int]:
        return (self.region, self.year)

    def value(self, field: str) -> float:
        """Return the statistic named *field* (``born``, ``died`` or ``diff``)."""
        if field not in VALUE_FIELDS:
            raise ValueError(f"field must be one of {VALUE_FIELDS}, got {field!r}")
        result: float = getattr(self, field)
        return result
