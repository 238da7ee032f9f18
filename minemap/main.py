"""MINEMAP - Mining deposit catalog.

Main FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from minemap import __version__
from minemap.catalog.models import SAMPLE_DEPOSITS
from minemap.config import settings
from minemap.database import async_session, close_db, init_db
from minemap.models import MiningDeposit
from minemap.routers import companies_router, deposits_router, map_router


async def _seed_sample_data(session_factory: async_sessionmaker = async_session) -> int:
    """Insert the sample deposits if the table is empty. Returns rows added."""
    async with session_factory() as db:
        count = (await db.execute(select(func.count(MiningDeposit.id)))).scalar_one()
        if count:
            return 0
        for deposit in SAMPLE_DEPOSITS:
            db.add(MiningDeposit(id=deposit.id, **deposit.to_payload()))
        await db.commit()
    logger.info(f"Seeded {len(SAMPLE_DEPOSITS)} sample deposits")
    return len(SAMPLE_DEPOSITS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info(f"  MINEMAP v{__version__} - INITIALIZING")
    logger.info("=" * 60)

    logger.info("Initializing database...")
    await init_db()
    logger.info("Database initialized")

    if settings.seed_sample_data:
        try:
            await _seed_sample_data()
        except Exception as e:
            logger.warning(f"Sample data seeding failed: {e}")

    logger.info("MINEMAP ONLINE")

    yield

    logger.info("MINEMAP shutting down...")
    await close_db()


# Create FastAPI app
app = FastAPI(
    title="MINEMAP",
    description="Mining deposit catalog and world map",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(deposits_router)
app.include_router(companies_router)
app.include_router(map_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "operational",
        "version": __version__,
        "system": "MINEMAP",
    }


@app.get("/api/status")
async def status():
    """System status endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "database": settings.database_url.split("://", 1)[0],
        "seed_sample_data": settings.seed_sample_data,
    }
