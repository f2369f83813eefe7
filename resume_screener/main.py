import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from resume_screener.core.config import Settings
from resume_screener.routes import router

logger = logging.getLogger(__name__)


async def _bad_request(request: Request, exc: RequestValidationError):
    # malformed bodies are client errors like any other missing input
    return JSONResponse(status_code=400, content={"detail": "Invalid request body."})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    if not settings.api_key:
        logger.warning("No Gemini API key configured; /api/analyze will answer 500.")

    app = FastAPI(title="AI Resume Screener API", version="0.1")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.web_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _bad_request)
    app.include_router(router)
    return app


def run():
    import uvicorn

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
