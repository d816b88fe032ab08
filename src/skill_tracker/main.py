"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skill_tracker.config import settings
from skill_tracker.routers import skills
from skill_tracker.services.ledger import TimeLedger
from skill_tracker.services.storage import create_store

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_ledger() -> TimeLedger:
    """Create the ledger over the configured store, hydrating it from disk."""
    logger.info("Using %s storage under %s", settings.storage_backend, settings.data_root)
    return TimeLedger(create_store(settings))


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.ledger = build_ledger()
    yield


app = FastAPI(
    title="Skill Tracker API",
    description="Backend API for logging practice time and tracking skill mastery",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware to allow the frontend to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(skills.router, prefix="/api")
