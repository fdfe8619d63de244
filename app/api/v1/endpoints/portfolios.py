from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask
from pathlib import PurePosixPath
from typing import Optional
import base64
import logging

from app.api.deps import get_generation_service, to_http_exception
from app.schemas.content import ApiResponse
from app.schemas.portfolio import PortfolioData, PortfolioDownloadRequest
from app.services.generation_service import ContentGenerationService
from app.services import template_registry
from app.services.portfolio_package import create_portfolio_download, generate_portfolio_structure

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/parse-resume", response_model=ApiResponse)
async def parse_resume(
    file: Optional[UploadFile] = File(None),
    resume_text: Optional[str] = Form(None),
    service: ContentGenerationService = Depends(get_generation_service),
):
    """
    Turn a resume (uploaded file or pasted text) into portfolio data.
    """
    if file is None and not (resume_text and resume_text.strip()):
        raise HTTPException(status_code=400, detail="Provide a resume file or resume_text")

    try:
        if file is not None:
            contents = await file.read()
            resume_text = await service.extract_text_from_file(
                base64.b64encode(contents).decode("ascii"), file.content_type or "text/plain"
            )
        parsed = await service.parse_resume_for_portfolio(resume_text)
    except Exception as e:
        raise to_http_exception(e)

    return {
        "status": 200,
        "message": "Resume parsed successfully",
        "data": {
            "parsed": parsed.model_dump(mode="json"),
            "portfolioData": PortfolioData.from_parsed_resume(parsed).model_dump(mode="json"),
        },
    }


@router.post("/code-view", response_model=ApiResponse)
def view_portfolio_code(body: PortfolioDownloadRequest):
    """
    Return the generated project as a path to content map, without zipping it.
    """
    try:
        files = generate_portfolio_structure(body.portfolioData, body.templateId)
    except Exception as e:
        raise to_http_exception(e)

    folders = sorted({
        f"{parent}/"
        for path in files
        for parent in PurePosixPath(path).parents
        if str(parent) != "."
    })
    return {
        "status": 200,
        "message": "Portfolio code generated",
        "data": {"structure": files, "folders": folders},
    }


@router.post("/download")
def download_portfolio(body: PortfolioDownloadRequest):
    """
    Build the portfolio project and send it as a zip. The archive is removed
    from disk once the response has been sent.
    """
    if template_registry.get_template_by_id(body.templateId) is None:
        raise HTTPException(status_code=404, detail="Template not found")

    try:
        archive = create_portfolio_download(body.portfolioData, body.templateId)
    except Exception as e:
        raise to_http_exception(e)

    return FileResponse(
        archive,
        media_type="application/zip",
        filename=archive.name,
        background=BackgroundTask(archive.unlink, missing_ok=True),
    )
