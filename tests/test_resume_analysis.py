"""
Tests for ATS resume analysis and resume parsing for portfolios
"""
import pytest

from app.core.exceptions import GenerationError
from app.schemas.generated import ResumeAnalysisResult
from app.schemas.portfolio import PortfolioData


@pytest.mark.asyncio
@pytest.mark.parametrize("raw, expected", [(140, 100), (-5, 0), (73, 73), (88.6, 89), ("64", 64)])
async def test_ats_score_is_clamped(service, fake_client, analysis_payload, raw, expected):
    """Whatever the model returns, atsScore ends up in [0, 100]"""
    fake_client.queue(analysis_payload(raw))

    result = await service.analyze_resume("Python developer with 1 year of experience")

    assert result.atsScore == expected


@pytest.mark.asyncio
async def test_analysis_uses_schema_constrained_output(service, fake_client, analysis_payload):
    fake_client.queue(analysis_payload(70))

    await service.analyze_resume("resume text", job_description="Backend engineer, Django")

    call = fake_client.calls[0]
    assert call["response_schema"] is ResumeAnalysisResult
    assert call["response_mime_type"] == "application/json"
    assert "Backend engineer, Django" in call["contents"]
    assert "resume text" in call["contents"]


@pytest.mark.asyncio
async def test_analysis_without_job_description_omits_target_section(service, fake_client, analysis_payload):
    fake_client.queue(analysis_payload(70))

    await service.analyze_resume("resume text")

    assert "Target Job Description" not in fake_client.calls[0]["contents"]


@pytest.mark.asyncio
async def test_analysis_failure_is_wrapped(service, fake_client):
    fake_client.queue(ConnectionError("network down"))

    with pytest.raises(GenerationError, match="Failed to analyze resume: network down"):
        await service.analyze_resume("resume text")


@pytest.mark.asyncio
async def test_incomplete_analysis_is_rejected(service, fake_client):
    fake_client.queue({"atsScore": 50})

    with pytest.raises(GenerationError, match="Failed to analyze resume"):
        await service.analyze_resume("resume text")


@pytest.mark.asyncio
async def test_non_numeric_ats_score_is_rejected(service, fake_client, analysis_payload):
    fake_client.queue(analysis_payload("excellent"))

    with pytest.raises(GenerationError, match="atsScore must be a number"):
        await service.analyze_resume("resume text")


@pytest.mark.asyncio
async def test_parse_resume_for_portfolio(service, fake_client):
    fake_client.queue({
        "name": "Arjun Mehta",
        "title": "Data Engineer",
        "email": "arjun@example.com",
        "github": "https://github.com/arjun",
        "skills": ["Spark", "SQL"],
        "projects": [{"title": "ETL Kit", "description": "Pipelines", "technologies": ["Airflow"], "demoUrl": "https://etl.example.com"}],
        "experience": [{"title": "Intern", "company": "DataCo", "duration": "6 months", "description": "Built dashboards"}],
        "education": [{"degree": "B.Tech", "institution": "IIT Delhi", "year": "2024"}],
    })

    parsed = await service.parse_resume_for_portfolio("Arjun Mehta, Data Engineer ...")
    portfolio = PortfolioData.from_parsed_resume(parsed)

    assert portfolio.personal.name == "Arjun Mehta"
    assert portfolio.personal.email == "arjun@example.com"
    assert portfolio.projects[0].liveUrl == "https://etl.example.com"
    assert portfolio.social.github == "https://github.com/arjun"
    assert portfolio.education[0].institution == "IIT Delhi"


@pytest.mark.asyncio
async def test_parse_resume_failure_is_wrapped(service, fake_client):
    fake_client.queue("{not json")

    with pytest.raises(GenerationError, match="Failed to parse resume"):
        await service.parse_resume_for_portfolio("text")
