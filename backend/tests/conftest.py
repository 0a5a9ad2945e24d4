"""Shared test fixtures."""

import io

import pytest
from docx import Document


@pytest.fixture
def make_docx():
    """Build an in-memory DOCX file from paragraphs of text."""
    def _make(*paragraphs: str) -> bytes:
        doc = Document()
        for para in paragraphs:
            doc.add_paragraph(para)
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()
    return _make
