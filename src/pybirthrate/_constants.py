"""Internal constants shared across the library."""

# Sample years present in the regional demography table.
DEFAULT_VALID_YEARS: tuple[int, ...] = (1970, 1980, 1990, 1995, 2000, 2005, 2006, 2007, 2008, 2009, 2010)

# Record fields that can drive the map fill.
VALUE_FIELDS: tuple[str, ...] = ("born", "died", "diff")
DEFAULT_VALUE_FIELD = "born"

DEFAULT_REGION_NAME_PROPERTY = "name"

# Dataset column headers -> model field names.
RECORD_COLUMN_ALIASES: dict[str, str] = {
    "Region": "region",
    "Year": "year",
    "Born": "born",
    "Died": "died",
    "Diff": "diff",
}

# Bar chart categories, in display order.
BAR_CATEGORIES: tuple[tuple[str, str], ...] = (("Born", "born"), ("Died", "died"))
