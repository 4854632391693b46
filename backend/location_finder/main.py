"""
FastAPI app entrypoint.

Location lookup backend: geocode (cache first), favorites, search history, selection state.

Serve from backend/:
  alembic upgrade head
  uvicorn location_finder.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from apscheduler.schedulers.background import BackgroundScheduler
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from location_finder.api.routes import favorites, history, locations
from location_finder.config import settings
from location_finder.core.constants import HISTORY_PRUNE_JOB_ID
from location_finder.core.errors import LocationError, location_error_response
from location_finder.scheduler.history_prune_job import run_history_prune_job

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

_scheduler = BackgroundScheduler()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.scheduler_enabled:
        _scheduler.add_job(
            run_history_prune_job,
            "interval",
            minutes=settings.history_prune_interval_minutes,
            id=HISTORY_PRUNE_JOB_ID,
            replace_existing=True,
        )
        _scheduler.start()
        app.state.scheduler = _scheduler
        logger.info(
            "History prune job scheduled every %s min (keep %s per user)",
            settings.history_prune_interval_minutes,
            settings.history_retention_per_user,
        )
    logger.info("Location Finder backend ready")
    yield
    if _scheduler.running:
        _scheduler.shutdown(wait=False)


app = FastAPI(title="Location Finder", version="0.1.0", lifespan=lifespan)

# CORS: dev origins + optional CORS_ORIGINS env (comma-separated) for the deployed frontend
_cors_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8080",
    "http://127.0.0.1:8080",
]
if settings.cors_origins:
    _cors_origins.extend(o.strip() for o in settings.cors_origins.split(",") if o.strip())
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LocationError)
async def handle_location_error(request: Request, exc: LocationError):
    return location_error_response(exc)


app.include_router(locations.router, prefix="/locations", tags=["locations"])
app.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
app.include_router(history.router, prefix="/history", tags=["history"])


@app.get("/", include_in_schema=False)
def root():
    """Root: point to API docs and health."""
    return {"message": "Location Finder API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
