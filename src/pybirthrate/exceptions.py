"""Custom exception hierarchy for pybirthrate."""

from __future__ import annotations


class BirthrateError(Exception):
    """Base exception for all pybirthrate errors."""


class BirthrateConfigError(BirthrateError):
    """Invalid or missing configuration."""


class YearIndexError(BirthrateConfigError):
    """The valid-year set is empty or contains a non-integral year.

    Raised while building a :class:`~pybirthrate.years.YearIndex`.  The
    view layer cannot run without a year index, so this is a load-time
    failure rather than something a trigger has to handle.
    """


class DatasetError(BirthrateError):
    """A dataset row or region feature could not be parsed.

    Only raised while loading.  Missing (region, year) combinations are
    never errors; they show up as ``None`` in joins and lookups.
    """

    def __init__(
        self,
        message: str,
        *,
        row: int | None = None,
        source: str | None = None,
    ) -> None:
        self.row = row
        self.source = source
        super().__init__(message)
