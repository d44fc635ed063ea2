"""Base model for dataset-backed records.

Every record model inherits from :class:`BirthrateBaseModel` which
provides:

* ``frozen=True`` so records loaded once stay immutable for the life of
  the process.
* A ``model_validator(mode="before")`` that renames dataset column
  headers (``Year``, ``Born`` ...) to snake_case fields via the
  per-class ``_KEY_ALIASES`` map.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class BirthrateBaseModel(BaseModel):
    """Base for immutable dataset models."""

    _KEY_ALIASES: ClassVar[dict[str, str]] = {}
    """Source column name -> field name.

    An alias only applies when the field name itself is not already
    present, so explicitly constructed models are left untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @staticmethod
    def _apply_aliases(values: Mapping[str, Any], aliases: dict[str, str]) -> dict[str, Any]:
        working = dict(values)
        for old_key, new_key in aliases.items():
            if old_key in working and new_key not in working:
                working[new_key] = working.pop(old_key)
        return working

    @model_validator(mode="before")
    @classmethod
    def _rename_columns(cls, values: Any) -> Any:
        if not isinstance(values, Mapping):
            return values
        aliases: dict[str, str] = getattr(cls, "_KEY_ALIASES", {})
        return BirthrateBaseModel._apply_aliases(values, aliases)
