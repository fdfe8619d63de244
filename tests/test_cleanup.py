"""
Tests for expired content cleanup and stale file sweeping
"""
import asyncio
import os
import time
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from app.models import Article, Job, ResumeAnalysis
from app.services.cleanup import (
    cleanup_expired_content,
    run_cleanup_loop,
    sweep_orphaned_uploads,
    sweep_stale_downloads,
)


def make_job(expires_at):
    return Job(
        title="Backend Intern",
        company="Acme",
        jobType="internship",
        experienceLevel="fresher",
        description="Build APIs",
        category="technology",
        expiresAt=expires_at,
    )


def make_article(expires_at):
    return Article(title="Async Python", content="...", author="Talentd Editorial", expiresAt=expires_at)


def test_expired_jobs_and_articles_are_deleted(db_session):
    now = datetime(2025, 1, 15, 12, 0, 0)
    db_session.add_all([
        make_job(now - timedelta(days=1)),
        make_job(now + timedelta(days=1)),
        make_job(None),
        make_article(now - timedelta(hours=1)),
        make_article(None),
    ])
    db_session.commit()

    result = cleanup_expired_content(db_session, now=now)

    assert result == {"deletedJobs": 1, "deletedArticles": 1}
    assert db_session.query(Job).count() == 2
    assert db_session.query(Article).count() == 1


def test_stale_downloads_are_swept(tmp_path):
    old = tmp_path / "old.zip"
    fresh = tmp_path / "fresh.zip"
    other = tmp_path / "notes.txt"
    for path in (old, fresh, other):
        path.write_bytes(b"x")
    two_hours_ago = time.time() - 7200
    os.utime(old, (two_hours_ago, two_hours_ago))
    os.utime(other, (two_hours_ago, two_hours_ago))

    removed = sweep_stale_downloads(tmp_path, max_age_seconds=3600)

    assert removed == 1
    assert not old.exists()
    assert fresh.exists()
    assert other.exists()


def test_sweep_of_missing_directory_is_a_no_op(tmp_path):
    assert sweep_stale_downloads(tmp_path / "missing", max_age_seconds=0) == 0


def test_orphaned_uploads_are_swept(db_session, tmp_path):
    db_session.add(ResumeAnalysis(fileName="cv.pdf", fileUrl="/uploads/kept.pdf", atsScore=70))
    db_session.commit()
    kept = tmp_path / "kept.pdf"
    orphan = tmp_path / "orphan.pdf"
    leftover = tmp_path / "template-abc.zip"
    fresh = tmp_path / "fresh.txt"
    for path in (kept, orphan, leftover, fresh):
        path.write_bytes(b"x")
    two_days_ago = time.time() - 2 * 86400
    for path in (kept, orphan, leftover):
        os.utime(path, (two_days_ago, two_days_ago))

    removed = sweep_orphaned_uploads(db_session, tmp_path, max_age_seconds=86400)

    assert removed == 2
    assert kept.exists()
    assert fresh.exists()
    assert not orphan.exists()
    assert not leftover.exists()


@pytest.mark.asyncio
async def test_cleanup_loop_survives_failed_pass():
    calls = []

    def flaky_pass():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("database locked")

    with patch("app.services.cleanup.run_cleanup_once", side_effect=flaky_pass):
        task = asyncio.create_task(run_cleanup_loop(interval=0.01))
        await asyncio.sleep(0.1)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    assert len(calls) >= 2
