import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile

from resume_screener.schemas import AnalyzeRequest, AnalysisResult, ParseResponse
from resume_screener.core.analysis import ModelClient, analyze_resume
from resume_screener.core.config import Settings
from resume_screener.core.errors import InvalidOutputError, ScreenerError
from resume_screener.services.extract import detect_document_type, extract_text
from resume_screener.services.llm import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter()

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_model_client(settings: Settings = Depends(get_settings)) -> ModelClient:
    return GeminiClient(settings)

@router.get("/health")
def health():
    return {"ok": True}

@router.post("/api/parse", response_model=ParseResponse)
def parse(file: Optional[UploadFile] = File(None)):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded.")

    logger.info(f"Received file: {file.filename} {file.content_type}")
    try:
        doc_type = detect_document_type(file.filename, file.content_type)
        content = file.file.read()
        logger.info(f"Read {len(content)} bytes as {doc_type}")
        return ParseResponse(text=extract_text(content, doc_type))
    except ScreenerError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.exception("parse failed")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to parse file")

@router.post("/api/analyze", response_model=AnalysisResult)
def analyze(
    req: AnalyzeRequest,
    settings: Settings = Depends(get_settings),
    model: ModelClient = Depends(get_model_client),
):
    try:
        return analyze_resume(req.resume_text, req.job_description, settings, model)
    except ScreenerError as e:
        if e.status_code >= 500:
            logger.error(f"analyze failed ({e.status_code}): {e}")
        detail = f"Invalid AI JSON: {e}" if isinstance(e, InvalidOutputError) else str(e)
        raise HTTPException(status_code=e.status_code, detail=detail)
    except Exception as e:
        logger.exception("analyze failed")
        raise HTTPException(status_code=500, detail=str(e) or "Failed to analyze.")
