"""
Shared fixtures: a fake model client, an in-memory database and archive builders
"""
import io
import json
import zipfile

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.db.session import init_db
from app.schemas.portfolio import PersonalInfo, PortfolioData, PortfolioProject
from app.services.generation_service import ContentGenerationService


class FakeModelClient:
    """Stands in for GeminiClient. Replies are consumed in order; an exception reply is raised."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    async def generate(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0) if self.replies else "{}"
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


@pytest.fixture
def fake_client():
    return FakeModelClient()


@pytest.fixture
def service(fake_client):
    return ContentGenerationService(fake_client, model="test-model", vision_model="test-vision-model", timeout=5)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def storage_dirs(tmp_path, monkeypatch):
    """Point every storage directory setting at tmp_path."""
    dirs = {
        "TEMPLATES_DIR": tmp_path / "templates",
        "UPLOADS_DIR": tmp_path / "uploads",
        "DOWNLOADS_DIR": tmp_path / "downloads",
    }
    for name, path in dirs.items():
        path.mkdir()
        monkeypatch.setattr(settings, name, path)
    return dirs


def build_zip(files):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_archive(tmp_path):
    """Factory writing a zip archive from {name: content} and returning its path."""
    counter = {"n": 0}

    def _make(files, manifest=None):
        counter["n"] += 1
        entries = dict(files)
        if manifest is not None:
            entries["manifest.json"] = manifest if isinstance(manifest, str) else json.dumps(manifest)
        path = tmp_path / f"archive-{counter['n']}.zip"
        path.write_bytes(build_zip(entries))
        return path

    return _make


@pytest.fixture
def valid_manifest():
    return {
        "id": "modern-minimal",
        "name": "Modern Minimal",
        "version": "1.0.0",
        "category": "minimal",
        "entryFile": "index.html",
        "description": "Clean single page layout",
        "features": ["responsive", "dark-mode"],
    }


@pytest.fixture
def portfolio():
    return PortfolioData(
        personal=PersonalInfo(
            name="Priya Sharma",
            title="Full Stack Developer",
            bio="I build web apps with React and FastAPI.",
            email="priya.sharma@example.com",
            location="Bengaluru",
        ),
        skills=["React", "TypeScript", "Python"],
        projects=[
            PortfolioProject(
                title="Job Tracker",
                description="Track applications across job boards",
                technologies=["React", "FastAPI"],
                githubUrl="https://github.com/priya/job-tracker",
            )
        ],
    )


def _analysis_payload(ats_score):
    return {
        "atsScore": ats_score,
        "keywordMatches": {"matched": ["python"], "missing": ["docker"], "total": 2},
        "suggestions": ["Quantify achievements"],
        "formatScore": "Good",
        "readabilityScore": "Very Good",
        "analysis": "Solid junior profile.",
        "industryInsights": {
            "detectedIndustry": "Software",
            "industrySpecificTips": ["Show open source work"],
            "salaryInsights": "6-9 LPA",
        },
        "skillsAnalysis": {"technicalSkills": ["Python"], "softSkills": ["Teamwork"], "missingSkills": ["Docker"]},
        "experienceAnalysis": {"totalYears": 1.5, "careerProgression": "Steady", "gapAnalysis": []},
        "improvementPriority": {"critical": ["Add metrics"], "important": [], "nice_to_have": []},
    }


@pytest.fixture
def analysis_payload():
    return _analysis_payload

