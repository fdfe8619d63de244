"""Periodic housekeeping: expired jobs and articles, stale download archives, orphaned uploads."""
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Optional
import asyncio
import logging
import time

from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import SessionLocal
from app.models import Article, Job, ResumeAnalysis

logger = logging.getLogger(__name__)


def _remove_older_than(paths: Iterable[Path], max_age: float) -> int:
    cutoff = time.time() - max_age
    removed = 0
    for path in paths:
        try:
            if path.is_file() and path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except FileNotFoundError:
            continue
    return removed


def sweep_stale_downloads(downloads_dir: Optional[Path] = None, max_age_seconds: Optional[float] = None) -> int:
    """Delete generated zip files older than ``max_age_seconds``. Returns the number removed."""
    downloads_dir = Path(downloads_dir or settings.DOWNLOADS_DIR)
    max_age = settings.DOWNLOAD_TTL_SECONDS if max_age_seconds is None else max_age_seconds
    if not downloads_dir.is_dir():
        return 0

    removed = _remove_older_than(downloads_dir.glob("*.zip"), max_age)
    if removed:
        logger.info("Removed %d stale download archive(s) from %s", removed, downloads_dir)
    return removed


def sweep_orphaned_uploads(
    db: Session,
    uploads_dir: Optional[Path] = None,
    max_age_seconds: Optional[float] = None,
) -> int:
    """Delete uploaded files no resume analysis points at, once older than ``max_age_seconds``.

    Leftover template upload temp files fall under this too.
    """
    uploads_dir = Path(uploads_dir or settings.UPLOADS_DIR)
    max_age = settings.UPLOAD_TTL_SECONDS if max_age_seconds is None else max_age_seconds
    if not uploads_dir.is_dir():
        return 0

    referenced = {Path(url).name for (url,) in db.query(ResumeAnalysis.fileUrl).all() if url}
    candidates = [path for path in uploads_dir.iterdir() if path.name not in referenced]
    removed = _remove_older_than(candidates, max_age)
    if removed:
        logger.info("Removed %d orphaned upload(s) from %s", removed, uploads_dir)
    return removed


def cleanup_expired_content(db: Session, now: Optional[datetime] = None) -> Dict[str, int]:
    now = now or datetime.now()
    deleted_jobs = (
        db.query(Job)
        .filter(Job.expiresAt.isnot(None), Job.expiresAt < now)
        .delete(synchronize_session=False)
    )
    deleted_articles = (
        db.query(Article)
        .filter(Article.expiresAt.isnot(None), Article.expiresAt < now)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted_jobs or deleted_articles:
        logger.info("Cleanup removed %d expired job(s) and %d expired article(s)", deleted_jobs, deleted_articles)
    return {"deletedJobs": deleted_jobs, "deletedArticles": deleted_articles}


def run_cleanup_once() -> None:
    db = SessionLocal()
    try:
        cleanup_expired_content(db)
        sweep_orphaned_uploads(db)
    finally:
        db.close()
    sweep_stale_downloads()


async def run_cleanup_loop(interval: Optional[float] = None) -> None:
    """Run cleanup now and then every ``interval`` seconds until cancelled."""
    interval = interval or settings.CLEANUP_INTERVAL_SECONDS
    logger.info("Cleanup scheduler started (every %ss)", interval)
    while True:
        try:
            await asyncio.to_thread(run_cleanup_once)
        except Exception:
            logger.exception("Cleanup pass failed")
        await asyncio.sleep(interval)
