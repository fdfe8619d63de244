from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pathlib import Path
from app.api.v1.endpoints import ai, resumes, portfolios, templates
from app.core.config import settings
from app.db.session import init_db
from app.services.cleanup import run_cleanup_loop
from contextlib import asynccontextmanager, suppress
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    for directory in (settings.TEMPLATES_DIR, settings.UPLOADS_DIR, settings.DOWNLOADS_DIR):
        Path(directory).mkdir(parents=True, exist_ok=True)
    cleanup_task = asyncio.create_task(run_cleanup_loop(settings.CLEANUP_INTERVAL_SECONDS))
    yield
    cleanup_task.cancel()
    with suppress(asyncio.CancelledError):
        await cleanup_task

app = FastAPI(title="Talentd API", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(ai.router, prefix="/api", tags=["ai"])
app.include_router(resumes.router, prefix="/api/resume", tags=["resume"])
app.include_router(portfolios.router, prefix="/api/portfolio", tags=["portfolio"])
app.include_router(templates.router, prefix="/api", tags=["templates"])

@app.get("/health", tags=["health"])
async def health():
    """Health check endpoint returning service status."""
    return {"status": "ok"}
