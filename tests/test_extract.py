import pytest

from resume_screener.core.errors import ExtractionError, UnsupportedDocumentError
from resume_screener.services.extract import (
    DOCX_MIME,
    PDF_MIME,
    clean_extracted_text,
    detect_document_type,
    extract_text,
)


class TestDetectDocumentType:
    @pytest.mark.parametrize(
        "filename, content_type, expected",
        [
            ("cv.pdf", None, "pdf"),
            ("CV.PDF", "application/octet-stream", "pdf"),
            ("upload", PDF_MIME, "pdf"),
            ("cv.docx", None, "docx"),
            ("upload", DOCX_MIME, "docx"),
            ("upload", f"{PDF_MIME}; charset=binary", "pdf"),
        ],
    )
    def test_supported(self, filename, content_type, expected):
        assert detect_document_type(filename, content_type) == expected

    @pytest.mark.parametrize(
        "filename, content_type",
        [("cv.txt", "text/plain"), ("cv.doc", "application/msword"), (None, None), ("cv.pdf.txt", "")],
    )
    def test_unsupported(self, filename, content_type):
        with pytest.raises(UnsupportedDocumentError):
            detect_document_type(filename, content_type)


def test_clean_extracted_text():
    raw = "  Jane\x00Doe   \nPython \t\n\nAWS  \n\n  "
    assert clean_extracted_text(raw) == "Jane Doe\nPython\nAWS"


def test_pdf_text(resume_pdf):
    text = extract_text(resume_pdf, "pdf")
    assert "Jane Doe" in text
    assert "Deployed services on AWS Lambda and ECS" in text


def test_docx_text(resume_docx):
    text = extract_text(resume_docx, "docx")
    assert text.startswith("Jane Doe")
    assert "Python, SQL, Docker, AWS" in text


def test_docx_tables_included():
    from io import BytesIO

    from docx import Document

    doc = Document()
    doc.add_paragraph("Skills")
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "Terraform"
    buf = BytesIO()
    doc.save(buf)

    assert "Python | Terraform" in extract_text(buf.getvalue(), "docx")


@pytest.mark.parametrize("doc_type", ["pdf", "docx"])
def test_malformed_document(doc_type):
    with pytest.raises(ExtractionError) as exc:
        extract_text(b"definitely not a document", doc_type)
    assert str(exc.value)
