import io
import logging
from pathlib import Path

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Generic upload types fall back to the file extension
_GENERIC_CONTENT_TYPES = frozenset({"", "application/octet-stream", "binary/octet-stream"})
_EXTENSION_TYPES = {".pdf": PDF_CONTENT_TYPE, ".docx": DOCX_CONTENT_TYPE}


class DocumentError(Exception):
    """Base class for résumé document failures."""


class UnsupportedDocumentError(DocumentError):
    """The uploaded file is neither a PDF nor a DOCX."""


class DocumentParseError(DocumentError):
    """The document could not be read."""


def extract_text(pdf_bytes: bytes) -> str:
    """Join the text of every non-blank PDF page."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [text for page in pdf.pages if (text := page.extract_text())]
    logger.debug("Read %d text pages from PDF", len(pages))
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Body paragraphs followed by table cell text.

    Résumés often list skills in a table, which doc.paragraphs skips.
    """
    doc = Document(io.BytesIO(docx_bytes))
    lines = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            lines.append(" | ".join(cell.text for cell in row.cells))
    return "\n".join(lines).strip()


def resolve_content_type(content_type: str | None, filename: str = "") -> str:
    """Return the effective document type, or raise UnsupportedDocumentError."""
    content_type = (content_type or "").split(";")[0].strip().lower()
    if content_type in _GENERIC_CONTENT_TYPES:
        content_type = _EXTENSION_TYPES.get(Path(filename).suffix.lower(), content_type)
    if content_type not in (PDF_CONTENT_TYPE, DOCX_CONTENT_TYPE):
        raise UnsupportedDocumentError(f"Unsupported file type: {content_type or 'unknown'}")
    return content_type


def extract_document_text(content: bytes, content_type: str | None, filename: str = "") -> str:
    """Extract plain text from an uploaded PDF or DOCX résumé."""
    resolved = resolve_content_type(content_type, filename)
    parser = extract_text if resolved == PDF_CONTENT_TYPE else extract_text_docx
    try:
        return parser(content)
    except Exception as e:
        logger.warning("Failed to parse %s (%s): %s", filename or "document", resolved, e)
        raise DocumentParseError(f"Could not parse {filename or 'document'}") from e
