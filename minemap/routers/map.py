"""Map endpoints: marker placement and legend for the world map.

Markers are projected server-side with the same equirectangular math the
client-side view controller uses, so a thin front end can render them
without reimplementing the projection.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from minemap.catalog.filters import ALL_RESOURCES, filter_deposits, legend
from minemap.catalog.models import DEFAULT_COLOR
from minemap.config import settings
from minemap.database import get_db
from minemap.mapview.markers import place_markers
from minemap.mapview.projection import MAX_ZOOM, MIN_ZOOM, Viewport
from minemap.models import MiningDeposit

router = APIRouter(prefix="/api/map", tags=["map"])


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class Marker(BaseModel):
    """One projected deposit marker."""
    deposit_id: int
    x: float
    y: float
    color: str
    title: str
    selected: bool
    scale: float
    on_screen: bool


class MarkersResponse(BaseModel):
    """Projected markers for one view."""
    width: float
    height: float
    zoom: float
    pan: list[float]
    total: int
    markers: list[Marker]


class LegendEntry(BaseModel):
    resource: str
    color: str


class LegendResponse(BaseModel):
    entries: list[LegendEntry]
    default_color: str


async def _load_deposits(db: AsyncSession):
    result = await db.execute(select(MiningDeposit).order_by(MiningDeposit.id))
    return [row.to_deposit() for row in result.scalars().all()]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/markers", response_model=MarkersResponse)
async def get_markers(
    width: float = Query(settings.viewport_width, gt=0),
    height: float = Query(settings.viewport_height, gt=0),
    zoom: float = Query(1.0, ge=MIN_ZOOM, le=MAX_ZOOM),
    pan_x: float = Query(0.0),
    pan_y: float = Query(0.0),
    search: str = Query(""),
    resource: str = Query(ALL_RESOURCES),
    selected: Optional[int] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Project the filtered deposits into a viewport."""
    deposits = filter_deposits(await _load_deposits(db), search, resource)
    viewport = Viewport(width, height)
    markers = place_markers(deposits, viewport, zoom, (pan_x, pan_y), selected)
    return {
        "width": width,
        "height": height,
        "zoom": zoom,
        "pan": [pan_x, pan_y],
        "total": len(markers),
        "markers": [m.to_dict() for m in markers],
    }


@router.get("/legend", response_model=LegendResponse)
async def get_legend(db: AsyncSession = Depends(get_db)):
    """Resource kinds present in the catalog and their marker colors."""
    entries = legend(await _load_deposits(db))
    return {
        "entries": [{"resource": r, "color": c} for r, c in entries],
        "default_color": DEFAULT_COLOR,
    }
