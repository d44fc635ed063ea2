"""Ingestion layer.

This package loads the demography table and the region geometries into
memory before the view layer becomes active, and holds the strict value
parsing shared with the models.
"""

__all__: list[str] = []
