import logging
from typing import Optional, Protocol

from resume_screener.core.config import Settings
from resume_screener.core.errors import MissingCredentialError, MissingInputError
from resume_screener.core.prompting import build_prompts
from resume_screener.core.sanitize import sanitize_model_output
from resume_screener.schemas import AnalysisResult

logger = logging.getLogger(__name__)


class ModelClient(Protocol):
    def chat(self, system: str, user: str, temperature: float = 0.0) -> str: ...


def analyze_resume(
    resume_text: Optional[str],
    job_description: Optional[str],
    settings: Settings,
    model: ModelClient,
) -> AnalysisResult:
    if not (resume_text or "").strip() or not (job_description or "").strip():
        raise MissingInputError("Both resumeText and jobDescription are required.")

    if not settings.api_key:
        raise MissingCredentialError(
            "Google Generative AI API key is missing. Please check your environment configuration."
        )

    system, user = build_prompts(resume_text, job_description)
    content = model.chat(system, user)

    result = sanitize_model_output(content)
    logger.info(
        f"analysis done: score={result.score} strengths={len(result.strengths)} "
        f"missing={len(result.missing_skills)} suggestions={len(result.suggestions)}"
    )
    return result
