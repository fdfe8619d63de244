from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
from pathlib import Path
import logging
import uuid

from app.api.deps import get_db, to_http_exception
from app.core.config import settings
from app.core.exceptions import TemplateValidationError
from app.crud import crud_template
from app.schemas.content import ApiResponse
from app.services import template_registry
from app.services.template_service import delete_template, extract_template, install_template

router = APIRouter()
logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def _serialize_template(t) -> Dict[str, Any]:
    return {
        "id": t.templateId,
        "name": t.name,
        "description": t.description,
        "version": t.version,
        "category": t.category,
        "thumbnailUrl": t.thumbnailUrl,
        "entryFile": t.entryFile,
        "features": t.features or [],
        "isPremium": t.isPremium,
        "isActive": t.isActive,
        "createdAt": t.createdAt,
        "updatedAt": t.updatedAt,
    }


async def _save_upload(file: UploadFile) -> Path:
    """Stream the upload to a temp file, enforcing the archive size limit."""
    uploads_dir = Path(settings.UPLOADS_DIR)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    temp_path = uploads_dir / f"template-{uuid.uuid4().hex}.zip"

    written = 0
    with open(temp_path, "wb") as out:
        while chunk := await file.read(CHUNK_SIZE):
            written += len(chunk)
            if written > settings.MAX_TEMPLATE_ARCHIVE_BYTES:
                out.close()
                temp_path.unlink(missing_ok=True)
                raise TemplateValidationError(
                    f"Template archive exceeds the {settings.MAX_TEMPLATE_ARCHIVE_BYTES} byte limit"
                )
            out.write(chunk)
    return temp_path


@router.post("/admin/templates/upload", response_model=ApiResponse)
async def upload_template(
    template: UploadFile = File(...),
    uploaded_by: Optional[int] = Form(None),
    db: Session = Depends(get_db),
):
    """
    Validate and install a template archive. Re-uploading an existing id
    replaces the installed files.
    """
    if not (template.filename or "").lower().endswith(".zip"):
        raise HTTPException(status_code=400, detail="Only .zip template archives are accepted")

    temp_path = None
    try:
        temp_path = await _save_upload(template)
        manifest = extract_template(temp_path)
        installed = install_template(temp_path, manifest)
        row = crud_template.upsert_template(db, manifest, uploaded_by=uploaded_by)
    except Exception as e:
        raise to_http_exception(e)
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)

    logger.info("Template %s uploaded to %s", manifest.id, installed)
    return {"status": 200, "message": "Template uploaded successfully", "data": _serialize_template(row)}


@router.get("/admin/templates", response_model=ApiResponse)
def read_templates(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    templates = crud_template.get_templates(db, skip=skip, limit=limit)
    return {
        "status": 200,
        "message": "Templates returned successfully",
        "data": [_serialize_template(t) for t in templates],
    }


@router.delete("/admin/templates/{template_id}", response_model=ApiResponse)
def remove_template(template_id: str, db: Session = Depends(get_db)):
    if crud_template.get_template(db, template_id) is None:
        raise HTTPException(status_code=404, detail="Template not found")

    try:
        delete_template(template_id)
        crud_template.delete_template(db, template_id)
    except Exception as e:
        raise to_http_exception(e)

    return {"status": 200, "message": "Template deleted", "data": None}


@router.patch("/admin/templates/{template_id}/toggle", response_model=ApiResponse)
def toggle_template(template_id: str, db: Session = Depends(get_db)):
    row = crud_template.get_template(db, template_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Template not found")

    try:
        row = crud_template.set_template_active(db, template_id, not row.isActive)
        template_registry.set_template_active(template_id, row.isActive)
    except Exception as e:
        raise to_http_exception(e)

    state = "activated" if row.isActive else "deactivated"
    return {"status": 200, "message": f"Template {state}", "data": _serialize_template(row)}


@router.get("/templates", response_model=ApiResponse)
def read_active_templates():
    """Active templates as recorded in the on-disk registry."""
    try:
        entries = template_registry.get_active_templates()
    except Exception as e:
        raise to_http_exception(e)
    return {
        "status": 200,
        "message": "Templates returned successfully",
        "data": [entry.model_dump(mode="json") for entry in entries],
    }
