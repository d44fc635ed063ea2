"""Data models for the demography map."""

from pybirthrate.models._base import BirthrateBaseModel
from pybirthrate.models.record import YearlyRecord
from pybirthrate.models.region import JoinedRegionValue, RegionIdentity

__all__ = [
    "BirthrateBaseModel",
    "JoinedRegionValue",
    "RegionIdentity",
    "YearlyRecord",
]
