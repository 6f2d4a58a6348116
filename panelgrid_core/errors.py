from __future__ import annotations


class PanelGridError(Exception):
    """Base class for errors raised by panelgrid."""


class PanelNotFoundError(PanelGridError, LookupError):
    """No panel is registered at the requested coordinate."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"No panel at ({x}, {y})")
        self.x = x
        self.y = y


class DimensionMismatchError(PanelGridError, ValueError):
    """Two areas (or an area and an occupancy array) disagree on grid size."""
