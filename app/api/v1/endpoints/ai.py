from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Any, Dict
import logging

from app.api.deps import get_db, get_generation_service, to_http_exception
from app.schemas.content import ApiResponse
from app.schemas.generation import FlowchartRequest, parse_generation_request
from app.services.content_service import persist_generated_content
from app.services.generation_service import ContentGenerationService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/ai/generate-content", response_model=ApiResponse)
async def generate_content(
    payload: Dict[str, Any] = Body(...),
    save: bool = False,
    service: ContentGenerationService = Depends(get_generation_service),
    db: Session = Depends(get_db),
):
    """
    Generate one piece of content of the requested ``type``.

    With ``?save=true`` the result is also stored as a regular row (jobs,
    internships, articles, roadmaps, DSA content and scholarships only).
    """
    try:
        request = parse_generation_request(payload)
        generated = await service.generate_content(request)

        data: Dict[str, Any] = {"type": request.type, "content": generated.model_dump(mode="json")}
        if save:
            row = persist_generated_content(db, request.type, generated)
            data["savedId"] = row.id
    except Exception as e:
        raise to_http_exception(e)

    return {"status": 200, "message": "Content generated successfully", "data": data}


@router.post("/roadmaps/generate-flowchart", response_model=ApiResponse)
async def generate_flowchart(
    roadmap: FlowchartRequest,
    service: ContentGenerationService = Depends(get_generation_service),
):
    try:
        graph = await service.generate_flowchart_from_roadmap(roadmap)
    except Exception as e:
        raise to_http_exception(e)

    return {"status": 200, "message": "Flowchart generated successfully", "data": graph.model_dump(mode="json")}
