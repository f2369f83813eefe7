"""
Client side of the screening flow.

A ScreeningSession walks one submission through two requests, strictly in order:

    IDLE -> PARSING -> ANALYZING -> DONE

A failing or interrupted step moves PARSING or ANALYZING to FAILED.

Any failure halts the flow; nothing is retried. dismiss_error() returns to IDLE.
"""
import logging
from enum import Enum
from typing import Any, Callable, Optional

import requests

from resume_screener.schemas import AnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"


class Phase(str, Enum):
    IDLE = "idle"
    PARSING = "parsing"
    ANALYZING = "analyzing"
    DONE = "done"
    FAILED = "failed"


BUSY_PHASES = (Phase.PARSING, Phase.ANALYZING)


class SessionBusyError(RuntimeError):
    pass


class StepFailed(Exception):
    pass


def score_label(score: int) -> str:
    if score >= 85:
        return "Excellent match"
    if score >= 70:
        return "Strong match"
    if score >= 55:
        return "Moderate match"
    if score >= 40:
        return "Partial match"
    return "Low match"


def _error_message(resp: Any, default: str) -> str:
    try:
        detail = resp.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    if isinstance(detail, str) and detail:
        return detail
    return (resp.text or "").strip() or default


class ScreeningSession:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        http: Any = None,
        timeout: Optional[float] = None,
        on_phase: Optional[Callable[[Phase], None]] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout
        self.on_phase = on_phase

        self.phase = Phase.IDLE
        self.resume_text = ""
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.phase in BUSY_PHASES

    def can_submit(self, has_file: bool, job_description: str) -> bool:
        return not self.busy and has_file and bool((job_description or "").strip())

    def _set_phase(self, phase: Phase):
        self.phase = phase
        if self.on_phase:
            self.on_phase(phase)

    def _fail(self, message: str) -> None:
        logger.warning(f"screening failed in {self.phase.value}: {message}")
        self.error = message
        self._set_phase(Phase.FAILED)

    def reset(self):
        """Forget the previous outcome, e.g. when the user picks another file."""
        if self.busy:
            raise SessionBusyError("A screening step is already in progress.")
        self.resume_text = ""
        self.result = None
        self.error = None
        self._set_phase(Phase.IDLE)

    def dismiss_error(self):
        if self.phase == Phase.FAILED:
            self.error = None
            self._set_phase(Phase.IDLE)

    def parse_file(self, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        resp = self.http.post(f"{self.api_url}/api/parse", files=files, timeout=self.timeout)
        if resp.status_code != 200:
            raise StepFailed(_error_message(resp, "Failed to parse the file."))
        return resp.json()["text"]

    def analyze(self, resume_text: str, job_description: str) -> AnalysisResult:
        body = {"resumeText": resume_text, "jobDescription": job_description}
        resp = self.http.post(f"{self.api_url}/api/analyze", json=body, timeout=self.timeout)
        if resp.status_code != 200:
            raise StepFailed(_error_message(resp, "Failed to analyze the resume."))
        return AnalysisResult.model_validate(resp.json())

    def submit(
        self,
        filename: Optional[str],
        content: Optional[bytes],
        content_type: Optional[str],
        job_description: str,
    ) -> Optional[AnalysisResult]:
        """Run parse then analyze. Returns the result, or None when a step failed."""
        if self.busy:
            raise SessionBusyError("A screening step is already in progress.")

        self.resume_text = ""
        self.result = None
        self.error = None

        if not filename or content is None:
            self._fail("Please select a PDF or DOCX file.")
            return None
        if not (job_description or "").strip():
            self._fail("Please paste the job description.")
            return None

        try:
            self._set_phase(Phase.PARSING)
            try:
                self.resume_text = self.parse_file(filename, content, content_type)
            except (StepFailed, requests.RequestException, ValueError, KeyError) as e:
                self._fail(str(e) or "Failed to parse the file.")
                return None

            self._set_phase(Phase.ANALYZING)
            try:
                self.result = self.analyze(self.resume_text, job_description)
            except (StepFailed, requests.RequestException, ValueError) as e:
                self._fail(str(e) or "Failed to analyze the resume.")
                return None

            self._set_phase(Phase.DONE)
            return self.result
        except BaseException:
            # a UI rerun or stop can interrupt a step; never stay busy after it
            if self.busy:
                self.phase = Phase.FAILED
                self.error = self.error or "Screening was interrupted. Please try again."
            raise

