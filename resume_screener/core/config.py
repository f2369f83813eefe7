import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# first one found wins
API_KEY_VARS = ("GOOGLE_GENERATIVE_AI_API_KEY", "GEMINI_API_KEY")

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 180.0
DEFAULT_WEB_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:8501",
]


class Settings(BaseModel):
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    web_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_WEB_ORIGINS))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            load_dotenv()
            environ = os.environ

        api_key = next((environ[name] for name in API_KEY_VARS if environ.get(name)), None)

        origins = environ.get("WEB_ORIGINS")
        web_origins = (
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else list(DEFAULT_WEB_ORIGINS)
        )

        return cls(
            api_key=api_key,
            model=environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
            api_base=(environ.get("GEMINI_API_BASE") or DEFAULT_API_BASE).rstrip("/"),
            timeout=float(environ.get("LLM_TIMEOUT") or DEFAULT_TIMEOUT),
            web_origins=web_origins,
        )
