"""Marker placement for deposits on the projected map."""

from dataclasses import dataclass
from typing import Iterable, Optional

from minemap.catalog.models import Deposit
from minemap.mapview.projection import Viewport, is_on_screen, project

SELECTED_SCALE = 1.5


@dataclass(frozen=True)
class MarkerPlacement:
    """Where and how to draw one deposit marker."""

    deposit_id: int
    x: float
    y: float
    color: str
    title: str
    selected: bool = False
    scale: float = 1.0
    on_screen: bool = True

    def to_dict(self) -> dict:
        return {
            "deposit_id": self.deposit_id,
            "x": self.x,
            "y": self.y,
            "color": self.color,
            "title": self.title,
            "selected": self.selected,
            "scale": self.scale,
            "on_screen": self.on_screen,
        }


def place_markers(
    deposits: Iterable[Deposit],
    viewport: Viewport,
    zoom: float = 1.0,
    pan: tuple[float, float] = (0.0, 0.0),
    selected_id: Optional[int] = None,
) -> list[MarkerPlacement]:
    """Project each deposit, in input order."""
    markers = []
    for d in deposits:
        x, y = project(d.latitude, d.longitude, viewport, zoom, pan)
        selected = d.id == selected_id
        markers.append(MarkerPlacement(
            deposit_id=d.id,
            x=x,
            y=y,
            color=d.color,
            title=d.title,
            selected=selected,
            scale=SELECTED_SCALE if selected else 1.0,
            on_screen=is_on_screen((x, y), viewport),
        ))
    return markers
