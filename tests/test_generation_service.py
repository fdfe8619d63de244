"""
Tests for content generation dispatch, prompt flags and output validation
"""
import asyncio

import pydantic
import pytest

from app.core.exceptions import GenerationError, GenerationTimeoutError
from app.schemas.generated import GENERATED_MODELS, GeneratedJob, GeneratedRoadmap
from app.schemas.generation import CONTENT_TYPES, JobRequest, parse_generation_request
from app.services.generation_service import ContentGenerationService
from app.services.prompts import PROMPT_BUILDERS


class SlowClient:
    def __init__(self):
        self.cancelled = False

    async def generate(self, **kwargs):
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return "{}"


def test_every_content_type_has_a_prompt_builder_and_output_model():
    """Dispatch tables cover exactly the supported content types"""
    assert set(PROMPT_BUILDERS) == set(CONTENT_TYPES)
    assert set(GENERATED_MODELS) == set(CONTENT_TYPES)


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", CONTENT_TYPES)
async def test_generate_content_returns_typed_object_for_every_type(service, fake_client, content_type):
    """A successful model call yields the per-type output model"""
    fake_client.queue({"title": "Generated", "name": "Generated"})
    request = parse_generation_request({"type": content_type, "prompt": "backend engineering"})

    result = await service.generate_content(request)

    assert isinstance(result, GENERATED_MODELS[content_type])
    call = fake_client.calls[0]
    assert call["model"] == "test-model"
    assert call["response_mime_type"] == "application/json"
    assert "backend engineering" in call["contents"]


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", CONTENT_TYPES)
async def test_generate_content_wraps_model_failure_for_every_type(service, fake_client, content_type):
    """Any model failure surfaces as a GenerationError with the generic prefix"""
    fake_client.queue(RuntimeError("quota exceeded"))
    request = parse_generation_request({"type": content_type, "prompt": "x"})

    with pytest.raises(GenerationError, match="Failed to generate content: quota exceeded"):
        await service.generate_content(request)


@pytest.mark.asyncio
async def test_empty_model_body_yields_default_instance(service, fake_client):
    """An empty response is treated as an empty JSON object"""
    fake_client.queue("")

    result = await service.generate_content(JobRequest(prompt="data analyst"))

    assert isinstance(result, GeneratedJob)
    assert result.title == ""
    assert result.isAIGenerated is True


@pytest.mark.asyncio
async def test_invalid_json_is_a_generation_error(service, fake_client):
    fake_client.queue("this is not json")

    with pytest.raises(GenerationError, match="Failed to generate content"):
        await service.generate_content(JobRequest(prompt="x"))


@pytest.mark.asyncio
async def test_non_object_json_is_a_generation_error(service, fake_client):
    fake_client.queue("[1, 2, 3]")

    with pytest.raises(GenerationError, match="expected a JSON object"):
        await service.generate_content(JobRequest(prompt="x"))


@pytest.mark.asyncio
async def test_extra_keys_from_model_are_kept(service, fake_client):
    fake_client.queue({"title": "SDE Intern", "company": "Acme", "remotePolicy": "hybrid"})

    result = await service.generate_content(parse_generation_request({"type": "internship", "prompt": "sde"}))

    assert result.company == "Acme"
    assert result.model_dump()["remotePolicy"] == "hybrid"


@pytest.mark.asyncio
async def test_roadmap_with_dangling_edge_is_rejected(service, fake_client):
    """Embedded flowcharts are validated like standalone ones"""
    fake_client.queue({
        "title": "Backend",
        "flowchartData": {
            "nodes": [{"id": "a"}],
            "edges": [{"id": "e1", "source": "a", "target": "missing"}],
        },
    })

    with pytest.raises(GenerationError, match="unknown nodes"):
        await service.generate_content(parse_generation_request({"type": "roadmap", "prompt": "backend"}))


@pytest.mark.asyncio
async def test_valid_roadmap_keeps_flowchart(service, fake_client):
    fake_client.queue({
        "title": "Frontend",
        "difficulty": "beginner",
        "flowchartData": {
            "nodes": [{"id": "a", "data": {"label": "HTML"}}, {"id": "b", "data": {"label": "CSS"}}],
            "edges": [{"id": "e1", "source": "a", "target": "b"}],
        },
    })

    result = await service.generate_content(parse_generation_request({"type": "roadmap", "prompt": "frontend"}))

    assert isinstance(result, GeneratedRoadmap)
    assert [n.data.label for n in result.flowchartData.nodes] == ["HTML", "CSS"]


@pytest.mark.asyncio
async def test_job_flags_each_add_a_sentence(service, fake_client):
    fake_client.queue({})
    request = parse_generation_request({
        "type": "job",
        "prompt": "react developer",
        "details": {"location": "Pune", "company": "Acme", "includeCompanyLogo": True},
    })

    await service.generate_content(request)

    prompt = fake_client.calls[0]["contents"]
    assert "Location focus: Pune." in prompt
    assert "Company: Acme." in prompt
    assert "logo.clearbit.com" in prompt
    assert "major cities" not in prompt
    assert "workflow diagrams" not in prompt


@pytest.mark.asyncio
async def test_job_without_location_targets_indian_cities(service, fake_client):
    fake_client.queue({})

    await service.generate_content(JobRequest(prompt="qa engineer"))

    assert "Bangalore" in fake_client.calls[0]["contents"]


@pytest.mark.asyncio
async def test_internship_prompt_mentions_internship(service, fake_client):
    fake_client.queue({})

    await service.generate_content(parse_generation_request({"type": "internship", "prompt": "ml"}))

    assert "internship posting" in fake_client.calls[0]["system_instruction"]


def test_unknown_detail_flag_is_rejected():
    """Flags that do not belong to the content type fail validation"""
    with pytest.raises(pydantic.ValidationError):
        parse_generation_request({"type": "article", "prompt": "x", "details": {"includeCompanyLogo": True}})


def test_unknown_content_type_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        parse_generation_request({"type": "podcast", "prompt": "x"})


def test_empty_prompt_is_accepted():
    request = parse_generation_request({"type": "dsa-topic", "prompt": ""})
    assert request.prompt == ""


@pytest.mark.asyncio
async def test_model_call_timeout_raises_timeout_error():
    client = SlowClient()
    service = ContentGenerationService(client, model="m", vision_model="v", timeout=0.05)

    with pytest.raises(GenerationTimeoutError, match="Failed to generate content"):
        await service.generate_content(JobRequest(prompt="x"))
    assert client.cancelled is True


@pytest.mark.asyncio
async def test_cancelling_the_caller_cancels_the_model_call():
    client = SlowClient()
    service = ContentGenerationService(client, model="m", vision_model="v", timeout=30)

    task = asyncio.create_task(service.generate_content(JobRequest(prompt="x")))
    await asyncio.sleep(0.05)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task
    assert client.cancelled is True
