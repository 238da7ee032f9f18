"""World map projection and pan/zoom view state."""

from minemap.mapview.projection import Viewport, project, zoom_at
from minemap.mapview.markers import MarkerPlacement, place_markers
from minemap.mapview.controller import DragState, ViewState, ViewStateController

__all__ = [
    "Viewport",
    "project",
    "zoom_at",
    "MarkerPlacement",
    "place_markers",
    "DragState",
    "ViewState",
    "ViewStateController",
]
