"""API routers for MINEMAP."""

from minemap.routers.deposits import router as deposits_router
from minemap.routers.companies import router as companies_router
from minemap.routers.map import router as map_router

__all__ = ["deposits_router", "companies_router", "map_router"]
