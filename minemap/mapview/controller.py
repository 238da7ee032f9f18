"""Pan/zoom view state and the pointer-driven state machine that owns it.

Two states: IDLE and DRAGGING.

    IDLE     --pointer_down-->  DRAGGING   (anchor = pointer - pan)
    DRAGGING --pointer_move-->  DRAGGING   (pan = pointer - anchor)
    DRAGGING --pointer_up/leave--> IDLE

Wheel, reset and resize are accepted in either state and never change it.
Every change is pushed to subscribed listeners, which re-read marker
positions from the controller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from loguru import logger

from minemap.catalog.models import Deposit
from minemap.config import settings
from minemap.mapview.markers import MarkerPlacement, place_markers
from minemap.mapview.projection import Viewport, project, zoom_at


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class ViewState:
    """Mutable pan/zoom state of one map view."""

    viewport: Viewport
    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0
    drag: DragState = DragState.IDLE
    anchor_x: float = 0.0
    anchor_y: float = 0.0

    @property
    def pan(self) -> tuple[float, float]:
        return (self.pan_x, self.pan_y)

    @property
    def dragging(self) -> bool:
        return self.drag is DragState.DRAGGING

    def to_dict(self) -> dict:
        return {
            "width": self.viewport.width,
            "height": self.viewport.height,
            "zoom": self.zoom,
            "pan": [self.pan_x, self.pan_y],
            "dragging": self.dragging,
        }


Listener = Callable[["ViewStateController"], None]


class ViewStateController:
    """Reacts to pointer, wheel, resize and reset events."""

    def __init__(self, viewport: Optional[Viewport] = None):
        self.state = ViewState(
            viewport=viewport or Viewport(settings.viewport_width, settings.viewport_height)
        )
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> None:
        s = self.state
        s.anchor_x = x - s.pan_x
        s.anchor_y = y - s.pan_y
        s.drag = DragState.DRAGGING

    def pointer_move(self, x: float, y: float) -> None:
        s = self.state
        if not s.dragging:
            return
        s.pan_x = x - s.anchor_x
        s.pan_y = y - s.anchor_y
        self._notify()

    def pointer_up(self) -> None:
        self.state.drag = DragState.IDLE

    def pointer_leave(self) -> None:
        self.state.drag = DragState.IDLE

    def wheel(self, delta_y: float, x: float, y: float) -> None:
        """Zoom one step about (x, y); negative delta zooms in."""
        if delta_y == 0:
            return
        s = self.state
        direction = 1 if delta_y < 0 else -1
        zoom, pan = zoom_at(s.zoom, s.pan, direction, (x, y), s.viewport)
        if zoom == s.zoom:
            return
        s.zoom = zoom
        s.pan_x, s.pan_y = pan
        self._notify()

    def zoom_in(self) -> None:
        """Step zoom in about the viewport center."""
        cx, cy = self.state.viewport.center
        self.wheel(-1, cx, cy)

    def zoom_out(self) -> None:
        cx, cy = self.state.viewport.center
        self.wheel(1, cx, cy)

    def reset(self) -> None:
        s = self.state
        s.zoom = 1.0
        s.pan_x = 0.0
        s.pan_y = 0.0
        self._notify()

    def resize(self, width: float, height: float) -> None:
        """Viewport size changed; zoom and pan are kept."""
        viewport = Viewport(width, height)
        if viewport == self.state.viewport:
            return
        logger.debug(f"Map viewport resized to {width}x{height}")
        self.state.viewport = viewport
        self._notify()

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    def project(self, lat: float, lng: float) -> tuple[float, float]:
        s = self.state
        return project(lat, lng, s.viewport, s.zoom, s.pan)

    def markers(
        self, deposits: Iterable[Deposit], selected_id: Optional[int] = None
    ) -> list[MarkerPlacement]:
        s = self.state
        return place_markers(deposits, s.viewport, s.zoom, s.pan, selected_id)
