import logging
from typing import Optional

import requests

from resume_screener.core.config import Settings
from resume_screener.core.errors import MissingCredentialError, UpstreamError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Thin client for the Gemini generateContent REST endpoint."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.settings.api_base}/models/{self.settings.model}:generateContent"

    def chat(self, system: str, user: str, temperature: float = 0.0) -> str:
        if not self.settings.api_key:
            raise MissingCredentialError(
                "Google Generative AI API key is missing. Please check your environment configuration."
            )

        payload = {
            "systemInstruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": user}]}],
            "generationConfig": {"temperature": temperature},
        }
        headers = {"x-goog-api-key": self.settings.api_key}

        try:
            r = self.session.post(self.url, json=payload, headers=headers, timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            raise UpstreamError(f"Gemini request failed: {e}") from e

        if r.status_code != 200:
            logger.error(f"Gemini error: status={r.status_code}, body={r.text[:500]}")
            raise UpstreamError(f"Gemini error ({r.status_code}): {r.text}")

        try:
            data = r.json()
        except ValueError as e:
            logger.error(f"Gemini returned a non-JSON body: {r.text[:500]}")
            raise UpstreamError("Gemini returned a non-JSON response body.") from e

        return extract_candidate_text(data)


def extract_candidate_text(data: dict) -> str:
    if not isinstance(data, dict):
        raise UpstreamError("Gemini returned an unexpected response shape.")

    candidates = data.get("candidates") or []
    if not candidates:
        reason = (data.get("promptFeedback") or {}).get("blockReason")
        raise UpstreamError(f"Gemini returned no candidates{f' (blocked: {reason})' if reason else ''}.")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts)
    if not text.strip():
        raise UpstreamError("Gemini returned an empty response.")
    return text
