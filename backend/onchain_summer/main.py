"""
FastAPI app entrypoint.

Onchain Summer partner pages: schedule lookup, featured drops, Mirror articles.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from onchain_summer.api.routes import partners, schedule
from onchain_summer.config import settings
from onchain_summer.data.schedule import SCHEDULE
from onchain_summer.services.articles import ArticleClient
from onchain_summer.services.schedule import build_schedule

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fails startup on duplicate slugs/addresses rather than serving first-match pages
    app.state.schedule = build_schedule(SCHEDULE)
    app.state.article_client = ArticleClient(settings)
    logger.info("Backend ready: %d partners scheduled", len(app.state.schedule))
    yield


app = FastAPI(title="Onchain Summer", version="0.1.0", lifespan=lifespan)

# CORS: dev origins + optional CORS_ORIGINS env (comma-separated) for the production frontend
_cors_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
if settings.cors_origins:
    _cors_origins.extend(o.strip() for o in settings.cors_origins.split(",") if o.strip())
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(partners.router, prefix="/partners", tags=["partners"])
app.include_router(schedule.router, prefix="/schedule", tags=["schedule"])


@app.get("/", include_in_schema=False)
def root():
    """Root: point to API docs and health."""
    return {"message": "Onchain Summer API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
