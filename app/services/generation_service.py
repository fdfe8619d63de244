"""AI content generation over an injected model client.

Every public coroutine either returns a validated result or raises a
``GenerationError`` whose message starts with an operation-specific prefix
followed by the underlying error text.
"""
from typing import Any, Dict, List, Optional
import asyncio
import base64
import json
import logging

from app.core.config import settings
from app.core.exceptions import GenerationError, GenerationTimeoutError
from app.schemas.generated import (
    GENERATED_MODELS,
    FlowchartGraph,
    ParsedResume,
    ResumeAnalysisResult,
)
from app.schemas.generation import FlowchartRequest
from app.services import prompts

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"


def _load_json(text: str) -> Dict[str, Any]:
    """Decode a JSON object from model output. Empty output counts as ``{}``."""
    body = (text or "").strip() or "{}"
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _needs_vision(mime_type: str) -> bool:
    mime_type = (mime_type or "").lower()
    return "image" in mime_type or "pdf" in mime_type


class ContentGenerationService:
    def __init__(
        self,
        client,
        model: str = settings.GEMINI_MODEL,
        vision_model: str = settings.GEMINI_VISION_MODEL,
        timeout: Optional[float] = settings.GEMINI_TIMEOUT_SECONDS,
    ):
        self.client = client
        self.model = model
        self.vision_model = vision_model
        self.timeout = timeout

    async def _call(self, **kwargs) -> str:
        kwargs.setdefault("model", self.model)
        try:
            return await asyncio.wait_for(self.client.generate(**kwargs), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise GenerationTimeoutError(f"model call timed out after {self.timeout}s")

    async def generate_content(self, request):
        """Generate one piece of content for a validated generation request.

        Returns the per-type model from ``GENERATED_MODELS``.
        """
        try:
            builder = prompts.PROMPT_BUILDERS[request.type]
            output_model = GENERATED_MODELS[request.type]
            system, user = builder(request)
            text = await self._call(
                contents=user,
                system_instruction=system,
                response_mime_type=JSON_MIME,
            )
            return output_model.model_validate(_load_json(text))
        except GenerationTimeoutError as e:
            logger.error("Content generation for %s timed out", getattr(request, "type", "?"))
            raise GenerationTimeoutError(f"Failed to generate content: {str(e)}") from e
        except Exception as e:
            logger.error("Content generation for %s failed: %s", getattr(request, "type", "?"), e)
            raise GenerationError(f"Failed to generate content: {str(e)}") from e

    async def analyze_resume(self, resume_text: str, job_description: Optional[str] = None) -> ResumeAnalysisResult:
        try:
            text = await self._call(
                contents=prompts.resume_analysis_prompt(resume_text, job_description),
                system_instruction=prompts.RESUME_ANALYSIS_SYSTEM,
                response_mime_type=JSON_MIME,
                response_schema=ResumeAnalysisResult,
            )
            return ResumeAnalysisResult.model_validate(_load_json(text))
        except GenerationTimeoutError as e:
            raise GenerationTimeoutError(f"Failed to analyze resume: {str(e)}") from e
        except Exception as e:
            logger.error("Resume analysis failed: %s", e)
            raise GenerationError(f"Failed to analyze resume: {str(e)}") from e

    async def extract_text_from_file(self, base64_data: str, mime_type: str) -> str:
        """Return the text of an uploaded file.

        Images and PDFs go through the vision model; anything else is assumed
        to be UTF-8 text and decoded locally, replacing undecodable bytes.
        """
        try:
            raw = base64.b64decode(base64_data)
            if _needs_vision(mime_type):
                return await self._call(
                    model=self.vision_model,
                    contents=prompts.TEXT_EXTRACTION_INSTRUCTION,
                    inline_data=raw,
                    inline_mime_type=mime_type,
                )
            return raw.decode("utf-8", errors="replace")
        except GenerationTimeoutError as e:
            raise GenerationTimeoutError(f"Failed to extract text from file: {str(e)}") from e
        except Exception as e:
            logger.error("Text extraction for %s failed: %s", mime_type, e)
            raise GenerationError(f"Failed to extract text from file: {str(e)}") from e

    async def generate_flowchart_from_roadmap(self, roadmap: FlowchartRequest) -> FlowchartGraph:
        try:
            text = await self._call(
                contents=prompts.flowchart_prompt(
                    roadmap.title,
                    roadmap.description,
                    roadmap.technologies,
                    roadmap.difficulty,
                ),
                system_instruction=prompts.FLOWCHART_SYSTEM,
                response_mime_type=JSON_MIME,
            )
            return FlowchartGraph.model_validate(_load_json(text))
        except GenerationTimeoutError as e:
            raise GenerationTimeoutError(f"Failed to generate flowchart: {str(e)}") from e
        except Exception as e:
            logger.error("Flowchart generation for %r failed: %s", roadmap.title, e)
            raise GenerationError(f"Failed to generate flowchart: {str(e)}") from e

    async def generate_improved_resume(
        self,
        original_text: str,
        suggestions: List[str],
        keyword_matches: List[str],
    ) -> str:
        try:
            text = await self._call(
                contents=prompts.improve_resume_prompt(original_text, suggestions, keyword_matches),
                system_instruction=prompts.IMPROVE_RESUME_SYSTEM,
            )
        except GenerationTimeoutError as e:
            raise GenerationTimeoutError(f"Failed to generate improved resume: {str(e)}") from e
        except Exception as e:
            logger.error("Improved resume generation failed: %s", e)
            raise GenerationError(f"Failed to generate improved resume: {str(e)}") from e

        if not text.strip():
            raise GenerationError("Failed to generate improved resume: model returned no text")
        return text

    async def parse_resume_for_portfolio(self, resume_text: str) -> ParsedResume:
        try:
            text = await self._call(
                contents=prompts.parse_resume_prompt(resume_text),
                system_instruction=prompts.PARSE_RESUME_SYSTEM,
                response_mime_type=JSON_MIME,
            )
            return ParsedResume.model_validate(_load_json(text))
        except GenerationTimeoutError as e:
            raise GenerationTimeoutError(f"Failed to parse resume: {str(e)}") from e
        except Exception as e:
            logger.error("Resume parsing failed: %s", e)
            raise GenerationError(f"Failed to parse resume: {str(e)}") from e


async def improve_resume_or_original(
    service: ContentGenerationService,
    original_text: str,
    suggestions: List[str],
    keyword_matches: List[str],
) -> str:
    """Improved resume text, or the original text unchanged if generation fails."""
    try:
        return await service.generate_improved_resume(original_text, suggestions, keyword_matches)
    except GenerationError as e:
        logger.warning("Falling back to original resume text: %s", e)
        return original_text
