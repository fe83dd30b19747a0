"""Grid geometry, placement, snapping and cascade resolution."""

from gridstack.grid.engine import DragGesture, GridStack
from gridstack.grid.geometry import GridSpan, intersects
from gridstack.grid.index import PlacedItem, PlacementIndex

__all__ = ["DragGesture", "GridSpan", "GridStack", "PlacedItem", "PlacementIndex", "intersects"]
