"""Equirectangular world projection with pan and zoom.

Longitude maps linearly across the viewport width and latitude linearly
down its height (screen Y grows downward, latitude grows upward). There is
no spherical or Mercator correction.

Convention:
    - Pan is expressed in unzoomed projected pixels, relative to the
      globe-fills-viewport view
    - The viewport center is the zoom origin
    - At zoom 1 with zero pan the whole globe fills the viewport exactly:

        x = (base_x - W/2 - pan_x) * zoom + W/2
        y = (base_y - H/2 - pan_y) * zoom + H/2
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_ZOOM = 0.5
MAX_ZOOM = 5.0
ZOOM_STEP = 0.1


@dataclass(frozen=True)
class Viewport:
    """Size of the map surface in pixels."""

    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Viewport size must be non-negative, got {self.width}x{self.height}")

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


def clamp_zoom(zoom: float) -> float:
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


def base_position(lat: float, lng: float, viewport: Viewport) -> tuple[float, float]:
    """Unzoomed, unpanned pixel position of a lat/lng."""
    x = ((lng + 180.0) / 360.0) * viewport.width
    y = ((90.0 - lat) / 180.0) * viewport.height
    return (x, y)


def project(
    lat: float,
    lng: float,
    viewport: Viewport,
    zoom: float = 1.0,
    pan: tuple[float, float] = (0.0, 0.0),
) -> tuple[float, float]:
    """Pixel position of a lat/lng under the given zoom and pan.

    Results outside the viewport are legitimate (marker panned off-screen).
    """
    base_x, base_y = base_position(lat, lng, viewport)
    cx, cy = viewport.center
    x = (base_x - cx - pan[0]) * zoom + cx
    y = (base_y - cy - pan[1]) * zoom + cy
    return (x, y)


def zoom_at(
    zoom: float,
    pan: tuple[float, float],
    direction: int,
    focal: tuple[float, float],
    viewport: Viewport,
) -> tuple[float, tuple[float, float]]:
    """Step the zoom by one notch keeping the focal pixel fixed.

    Args:
        zoom: Current zoom factor
        pan: Current pan offset
        direction: +1 to zoom in, -1 to zoom out, 0 for no change
        focal: Pointer position in viewport pixels
        viewport: Current viewport size

    Returns:
        (new_zoom, new_pan)
    """
    if direction == 0:
        return zoom, pan
    step = ZOOM_STEP if direction > 0 else -ZOOM_STEP
    new_zoom = clamp_zoom(zoom + step)
    ratio = new_zoom / zoom
    cx, cy = viewport.center
    new_pan = (
        pan[0] - (focal[0] - cx) * (1 - ratio) / new_zoom,
        pan[1] - (focal[1] - cy) * (1 - ratio) / new_zoom,
    )
    return new_zoom, new_pan


def is_on_screen(point: tuple[float, float], viewport: Viewport) -> bool:
    x, y = point
    return 0.0 <= x <= viewport.width and 0.0 <= y <= viewport.height
