"""Module with the endpoints of the API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, HTTPException, UploadFile
from loguru import logger

from textorigin.analysis import Analyser
from textorigin.api.data_models import AnalysisRequest, HealthcheckResponse
from textorigin.api.dependencies import enforce_rate_limit, get_analyser
from textorigin.configuration import config
from textorigin.data_models import AnalysisResult
from textorigin.extraction.document_reader import DocumentExtractionError, extract_text


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Warm up the analyser before serving requests."""
    get_analyser()
    logger.info(f"{config.project_name} API is ready.")
    yield
    logger.info(f"{config.project_name} API is shutting down.")


router = APIRouter()


@router.get("/healthcheck")
async def healthcheck() -> HealthcheckResponse:
    """Check whether the API is up."""
    return HealthcheckResponse(is_healthy=True)


@router.post("/analyse", dependencies=[Depends(enforce_rate_limit)])
async def analyse_text(
    analysis_request: AnalysisRequest,
    analyser: Annotated[Analyser, Depends(get_analyser)],
) -> AnalysisResult:
    """Estimate whether a text was written by an LLM or a human."""
    return await analyser.analyze(analysis_request.text)


@router.post("/analyse/file", dependencies=[Depends(enforce_rate_limit)])
async def analyse_file(
    file: UploadFile,
    analyser: Annotated[Analyser, Depends(get_analyser)],
) -> AnalysisResult:
    """Estimate whether a PDF, DOCX or plain text document was written by an LLM."""
    content = await file.read(config.max_upload_size + 1)
    if len(content) > config.max_upload_size:
        raise HTTPException(
            status_code=413,
            detail=f"Files larger than {config.max_upload_size} bytes are rejected.",
        )

    try:
        text = extract_text(content, file.filename or "uploaded.txt")
    except DocumentExtractionError as e:
        logger.warning(f"Rejected an upload: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e

    return await analyser.analyze(text)
