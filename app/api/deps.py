from functools import lru_cache

from fastapi import HTTPException, status

from app.core.config import settings
from app.core.exceptions import (
    GenerationError,
    GenerationTimeoutError,
    TemplateProcessingError,
)
from app.db.session import get_db  # noqa: F401
from app.services.generation_service import ContentGenerationService
from app.tools.gemini_client import build_gemini_client


@lru_cache
def get_generation_service() -> ContentGenerationService:
    """One service per process, built around the configured Gemini client."""
    return ContentGenerationService(
        build_gemini_client(settings),
        model=settings.GEMINI_MODEL,
        vision_model=settings.GEMINI_VISION_MODEL,
        timeout=settings.GEMINI_TIMEOUT_SECONDS,
    )


def to_http_exception(e: Exception) -> HTTPException:
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, GenerationTimeoutError):
        return HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e))
    if isinstance(e, GenerationError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    if isinstance(e, TemplateProcessingError):
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    if isinstance(e, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Internal server error: {str(e)}")
