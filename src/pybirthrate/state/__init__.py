"""State/view layer.

Holds the selected region and the events emitted to the rendering layer.
Only :class:`~pybirthrate.sync.ViewSync` mutates the selection.
"""
