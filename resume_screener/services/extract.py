import io
import logging
import re
from typing import Literal, Optional

import pdfplumber
from docx import Document

from resume_screener.core.errors import ExtractionError, UnsupportedDocumentError

logger = logging.getLogger(__name__)

DocumentType = Literal["pdf", "docx"]

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def detect_document_type(filename: Optional[str], content_type: Optional[str]) -> DocumentType:
    name = (filename or "").lower()
    ctype = (content_type or "").split(";")[0].strip().lower()

    if ctype == PDF_MIME or name.endswith(".pdf"):
        return "pdf"
    if ctype == DOCX_MIME or name.endswith(".docx"):
        return "docx"
    raise UnsupportedDocumentError("Unsupported file type")


def clean_extracted_text(text: str) -> str:
    text = text.replace("\x00", " ")
    text = re.sub(r"\s+\n", "\n", text)
    return text.strip()


def _pdf_text(content: bytes) -> str:
    with pdfplumber.open(io.BytesIO(content)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages)


def _docx_text(content: bytes) -> str:
    doc = Document(io.BytesIO(content))
    lines = [p.text for p in doc.paragraphs]

    # skills and contact blocks are often laid out in tables
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(cells))

    return "\n".join(lines)


def extract_text(content: bytes, doc_type: DocumentType) -> str:
    """Return the plain text of a PDF or DOCX document."""
    reader = _pdf_text if doc_type == "pdf" else _docx_text
    try:
        raw = reader(content)
    except Exception as e:
        logger.error(f"{doc_type} extraction failed: {e}")
        raise ExtractionError(str(e) or f"Failed to parse {doc_type} file") from e
    return clean_extracted_text(raw)
