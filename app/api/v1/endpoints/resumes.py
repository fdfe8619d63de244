from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from pathlib import Path
import base64
import logging
import uuid

from app.api.deps import get_db, get_generation_service, to_http_exception
from app.core.config import settings
from app.crud import crud_resume_analysis
from app.schemas.content import ApiResponse
from app.schemas.generation import ImproveResumeRequest
from app.services.generation_service import ContentGenerationService, improve_resume_or_original

router = APIRouter()
logger = logging.getLogger(__name__)

ALLOWED_RESUME_TYPES = {
    "application/pdf",
    "text/plain",
    "image/png",
    "image/jpeg",
    "image/webp",
}


def _serialize_analysis(a) -> Dict[str, Any]:
    return {
        "id": a.id,
        "userId": a.userId,
        "fileName": a.fileName,
        "fileUrl": a.fileUrl,
        "atsScore": a.atsScore,
        "keywordMatches": a.keywordMatches or {},
        "suggestions": a.suggestions or [],
        "formatScore": a.formatScore,
        "readabilityScore": a.readabilityScore,
        "analysis": a.analysis,
        "details": a.details or {},
        "createdAt": a.createdAt,
    }


def _store_upload(contents: bytes, filename: str) -> str:
    uploads_dir = Path(settings.UPLOADS_DIR)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    stored_name = f"{uuid.uuid4().hex}{Path(filename or '').suffix.lower()}"
    (uploads_dir / stored_name).write_bytes(contents)
    return f"/uploads/{stored_name}"


@router.post("/analyze", response_model=ApiResponse)
async def analyze_resume(
    file: UploadFile = File(...),
    job_description: Optional[str] = Form(None),
    user_id: Optional[int] = Form(None),
    service: ContentGenerationService = Depends(get_generation_service),
    db: Session = Depends(get_db),
):
    """
    Extract the text of an uploaded resume, score it for ATS compatibility
    and store the analysis.
    """
    mime_type = (file.content_type or "").lower()
    if mime_type not in ALLOWED_RESUME_TYPES:
        raise HTTPException(status_code=400, detail=f"Unsupported file type: {mime_type or 'unknown'}")

    contents = await file.read()
    if not contents:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    try:
        resume_text = await service.extract_text_from_file(base64.b64encode(contents).decode("ascii"), mime_type)
        if not resume_text.strip():
            raise ValueError("No text could be extracted from the uploaded file")

        result = await service.analyze_resume(resume_text, job_description)
        file_url = _store_upload(contents, file.filename)
        record = crud_resume_analysis.create_analysis(
            db, result, file_name=file.filename or "resume", file_url=file_url, user_id=user_id
        )
    except Exception as e:
        raise to_http_exception(e)

    data = _serialize_analysis(record)
    data["resumeText"] = resume_text
    return {"status": 200, "message": "Resume analyzed successfully", "data": data}


@router.get("/analyses", response_model=ApiResponse)
def read_analyses(skip: int = 0, limit: int = 100, user_id: Optional[int] = None, db: Session = Depends(get_db)):
    analyses = crud_resume_analysis.get_analyses(db, skip=skip, limit=limit, user_id=user_id)
    return {
        "status": 200,
        "message": "Resume analyses returned successfully",
        "data": [_serialize_analysis(a) for a in analyses],
    }


@router.get("/analyses/{analysis_id}", response_model=ApiResponse)
def read_analysis(analysis_id: int, db: Session = Depends(get_db)):
    analysis = crud_resume_analysis.get_analysis(db, analysis_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Resume analysis not found")
    return {"status": 200, "message": "Resume analysis returned successfully", "data": _serialize_analysis(analysis)}


@router.delete("/analyses/{analysis_id}", response_model=ApiResponse)
def delete_analysis(analysis_id: int, db: Session = Depends(get_db)):
    analysis = crud_resume_analysis.get_analysis(db, analysis_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Resume analysis not found")

    file_url = analysis.fileUrl
    crud_resume_analysis.delete_analysis(db, analysis_id)
    if file_url:
        (Path(settings.UPLOADS_DIR) / Path(file_url).name).unlink(missing_ok=True)
    return {"status": 200, "message": "Resume analysis deleted", "data": None}


@router.post("/improve", response_model=ApiResponse)
async def improve_resume(
    body: ImproveResumeRequest,
    service: ContentGenerationService = Depends(get_generation_service),
):
    # Falls back to the original text when generation fails
    improved = await improve_resume_or_original(
        service, body.originalText, body.suggestions, body.keywordMatches
    )
    return {
        "status": 200,
        "message": "Improved resume generated",
        "data": {"improvedText": improved, "isOriginal": improved == body.originalText},
    }
