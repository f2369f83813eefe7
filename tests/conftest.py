import json
from io import BytesIO
from typing import List

import pytest
from docx import Document
from fastapi.testclient import TestClient
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

from resume_screener.core.config import Settings
from resume_screener.main import create_app
from resume_screener.routes import get_model_client

RESUME_LINES = [
    "Jane Doe",
    "SUMMARY",
    "Backend engineer with 6 years of Python experience.",
    "EXPERIENCE",
    "- Built REST APIs with FastAPI and PostgreSQL",
    "- Deployed services on AWS Lambda and ECS",
    "SKILLS",
    "Python, SQL, Docker, AWS",
]

GOOD_RESPONSE = json.dumps({
    "score": 82,
    "strengths": ["Python", "AWS"],
    "missingSkills": ["Kubernetes"],
    "suggestions": ["Mention infrastructure as code"],
})


def make_pdf(lines: List[str]) -> bytes:
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=LETTER)
    _, height = LETTER
    y = height - 0.75 * inch
    c.setFont("Helvetica", 10.5)
    for line in lines:
        c.drawString(0.75 * inch, y, line)
        y -= 13.5
    c.save()
    return buf.getvalue()


def make_docx(lines: List[str]) -> bytes:
    doc = Document()
    for line in lines:
        doc.add_paragraph(line)
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


class FakeModel:
    """Records prompts and replies with a canned response (or raises)."""

    def __init__(self, response: str = GOOD_RESPONSE, error: Exception = None):
        self.response = response
        self.error = error
        self.calls = []

    def chat(self, system: str, user: str, temperature: float = 0.0) -> str:
        self.calls.append((system, user))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", web_origins=["http://testserver"])


@pytest.fixture
def fake_model() -> FakeModel:
    return FakeModel()


@pytest.fixture
def app(settings, fake_model):
    app = create_app(settings)
    app.dependency_overrides[get_model_client] = lambda: fake_model
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def resume_pdf() -> bytes:
    return make_pdf(RESUME_LINES)


@pytest.fixture
def resume_docx() -> bytes:
    return make_docx(RESUME_LINES)
